"""Diagnostic codes and data structures.

Defines error codes, categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
    "FrozenErrorContext",
]


class ErrorCategory(StrEnum):
    """Error categorization for localenum errors.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        PARSE: A number representation was rejected or could not be converted
        CONFIG: A locale configuration or separator token is unusable
    """

    PARSE = "parse"
    CONFIG = "config"


@dataclass(frozen=True, slots=True)
class FrozenErrorContext:
    """Immutable context for parse errors.

    Attributes:
        input_value: String that failed to parse (empty if not applicable)
        locale_code: Locale used for parsing (empty if not applicable)
        parse_type: Type of parsing attempted ("decimal" or "number")
    """

    input_value: str = ""
    locale_code: str = ""
    parse_type: str = ""


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        4000-4999: Parsing errors (rejected number representations)
        6000-6999: Configuration errors (locale tables, separator tokens)
    """

    # Parsing errors (4000-4999)
    PARSE_NUMBER_FAILED = 4001
    PARSE_DECIMAL_FAILED = 4002
    PARSE_LOCALE_UNKNOWN = 4006
    PARSE_INPUT_TOO_LONG = 4011
    PARSE_INPUT_NOT_STRING = 4012

    # Configuration errors (6000-6999)
    CONFIG_TOKEN_INVALID = 6001
    CONFIG_TOKEN_MATCHES_EMPTY = 6002
    CONFIG_TOKEN_MATCHES_DIGIT = 6003
    CONFIG_SEPARATORS_IDENTICAL = 6004
    CONFIG_ENTRY_INVALID = 6005
    CONFIG_PATTERN_INVALID = 6006


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale the diagnostic refers to (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            error[PARSE_LOCALE_UNKNOWN]: Unknown locale 'xx-YY'
              --> locale xx-YY
              = help: Use a locale from the table (e.g., 'en-IE', 'fr-CH', 'pt')

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
