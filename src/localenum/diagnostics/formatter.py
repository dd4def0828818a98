"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Number representations are user input and may carry control characters
    (newlines, escape sequences). They are escaped in every output format so
    a rejected value cannot forge extra log lines.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.parse_locale_unknown("xx")
        >>> print(formatter.format(diagnostic))
        error[PARSE_LOCALE_UNKNOWN]: Unknown locale 'xx'
          --> locale xx
          = help: Use a locale from the table (e.g., 'en-IE', 'fr-CH', 'pt')

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        PARSE_LOCALE_UNKNOWN: Unknown locale 'xx'
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        severity = diagnostic.severity if diagnostic.severity == "warning" else "error"
        message = self._clean(diagnostic.message)
        parts = [f"{severity}[{diagnostic.code.name}]: {message}"]

        if diagnostic.locale_code:
            parts.append(f"  --> locale {self._clean(diagnostic.locale_code)}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._clean(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.locale_code:
            data["locale_code"] = diagnostic.locale_code

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        # json.dumps escapes control characters on its own
        return json.dumps(data, ensure_ascii=False)

    def _clean(self, text: str) -> str:
        return _escape_control_characters(self._maybe_sanitize(text))

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text


def _escape_control_characters(text: str) -> str:
    """Replace C0/C1 control characters with their escaped repr form."""
    return "".join(
        ch.encode("unicode_escape").decode("ascii")
        if (ord(ch) < 0x20 or 0x7F <= ord(ch) < 0xA0)
        else ch
        for ch in text
    )
