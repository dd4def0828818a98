"""localenum exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Two families:
    - NumberParseError is returned inside parse results, never raised.
    - LocaleConfigError (and SeparatorTokenError) are raised when a locale
      table or separator token is built; they signal programming errors.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory, FrozenErrorContext

__all__ = [
    "LocaleConfigError",
    "LocaleNumError",
    "NumberParseError",
    "SeparatorTokenError",
]


class LocaleNumError(Exception):
    """Base exception for all localenum errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Broad error category
    """

    category: ErrorCategory = ErrorCategory.PARSE

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LocaleNumError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class NumberParseError(LocaleNumError):
    """A number representation could not be parsed for a locale.

    Returned in the error tuple of parse_decimal()/parse_number() instead of
    being raised.

    Attributes:
        context: Input value, locale and parse type at the time of failure

    Example:
        >>> result, errors = parse_decimal("120.000,23", "en-IE")
        >>> if errors:
        ...     for error in errors:
        ...         print(f"Parse failed: {error.input_value} ({error.parse_type})")
    """

    category = ErrorCategory.PARSE

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        context: FrozenErrorContext | None = None,
    ) -> None:
        """Initialize NumberParseError.

        Args:
            message: Error message string OR Diagnostic object
            context: Frozen parse context
        """
        super().__init__(message)
        self.context = context if context is not None else FrozenErrorContext()

    @property
    def input_value(self) -> str:
        """The string that failed to parse."""
        return self.context.input_value

    @property
    def locale_code(self) -> str:
        """The locale used for parsing."""
        return self.context.locale_code

    @property
    def parse_type(self) -> str:
        """Type of parsing attempted ("decimal" or "number")."""
        return self.context.parse_type


class LocaleConfigError(LocaleNumError, ValueError):
    """A locale number configuration is unusable.

    Raised while building configs or locale tables, i.e. at startup, so a
    bad table never reaches the parsing hot path.
    """

    category = ErrorCategory.CONFIG


class SeparatorTokenError(LocaleConfigError):
    """A separator token is not a safe regex fragment.

    Raised by SeparatorToken when the fragment fails to compile, can match
    the empty string, or overlaps with digits or sign characters.
    """
