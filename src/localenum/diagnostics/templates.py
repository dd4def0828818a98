"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    # =========================================================================
    # PARSING ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def parse_number_failed(
        value: str,
        locale_code: str,
        reason: str,
    ) -> Diagnostic:
        """Number parsing failed.

        Args:
            value: The input string that failed to parse
            locale_code: The locale used for parsing
            reason: The reason parsing failed

        Returns:
            Diagnostic for PARSE_NUMBER_FAILED
        """
        msg = f"Failed to parse number '{value}' for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NUMBER_FAILED,
            message=msg,
            hint="Check that the number format matches the locale's conventions",
            locale_code=locale_code,
        )

    @staticmethod
    def parse_decimal_failed(
        value: str,
        locale_code: str,
        reason: str,
    ) -> Diagnostic:
        """Decimal parsing failed.

        Args:
            value: The input string that failed to parse
            locale_code: The locale used for parsing
            reason: The reason parsing failed

        Returns:
            Diagnostic for PARSE_DECIMAL_FAILED
        """
        msg = f"Failed to parse decimal '{value}' for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DECIMAL_FAILED,
            message=msg,
            hint="Check that the decimal format matches the locale's conventions",
            locale_code=locale_code,
        )

    @staticmethod
    def parse_locale_unknown(locale_code: str) -> Diagnostic:
        """Locale has no number configuration.

        Args:
            locale_code: The unknown locale code

        Returns:
            Diagnostic for PARSE_LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_LOCALE_UNKNOWN,
            message=msg,
            hint="Use a locale from the table (e.g., 'en-IE', 'fr-CH', 'pt')",
            locale_code=locale_code,
        )

    @staticmethod
    def parse_input_too_long(length: int, limit: int, locale_code: str) -> Diagnostic:
        """Input exceeds the accepted length."""
        msg = f"Number representation is {length} characters long (limit {limit})"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_TOO_LONG,
            message=msg,
            hint="Trim the input before parsing",
            locale_code=locale_code,
        )

    @staticmethod
    def parse_input_not_string(type_name: str, locale_code: str) -> Diagnostic:
        """Input is not a string."""
        msg = f"Expected a string number representation, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INPUT_NOT_STRING,
            message=msg,
            hint="Convert the value with str() or format it for the locale first",
            locale_code=locale_code,
        )

    # =========================================================================
    # CONFIGURATION ERRORS (6000-6999)
    # =========================================================================

    @staticmethod
    def token_invalid(fragment: str, reason: str) -> Diagnostic:
        """Separator fragment does not compile.

        Args:
            fragment: The rejected regex fragment
            reason: Message from the regex compiler

        Returns:
            Diagnostic for CONFIG_TOKEN_INVALID
        """
        msg = f"Separator token {fragment!r} is not a valid regex fragment: {reason}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_TOKEN_INVALID,
            message=msg,
            hint="Escape single characters (\\.) or use a bracketed class ([.,])",
        )

    @staticmethod
    def token_matches_empty(fragment: str) -> Diagnostic:
        """Separator fragment can match zero characters."""
        msg = f"Separator token {fragment!r} matches the empty string"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_TOKEN_MATCHES_EMPTY,
            message=msg,
            hint="A separator must consume at least one character",
        )

    @staticmethod
    def token_matches_digit(fragment: str, character: str) -> Diagnostic:
        """Separator fragment overlaps with digits or signs."""
        msg = f"Separator token {fragment!r} matches {character!r}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_TOKEN_MATCHES_DIGIT,
            message=msg,
            hint="Separators must never match ASCII digits or sign characters",
        )

    @staticmethod
    def separators_identical(fragment: str) -> Diagnostic:
        """Thousands and decimal separators are the same token."""
        msg = f"Thousands and decimal separators are both {fragment!r}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_SEPARATORS_IDENTICAL,
            message=msg,
            hint="A locale needs distinct grouping and decimal separators",
        )

    @staticmethod
    def config_entry_invalid(locale_code: str, reason: str) -> Diagnostic:
        """Locale table entry is malformed."""
        msg = f"Invalid number configuration for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_ENTRY_INVALID,
            message=msg,
            hint="Entries need 'thousands' and 'decimal' strings and an optional 'indian' bool",
            locale_code=locale_code,
        )

    @staticmethod
    def config_entry_wrong_type(locale_code: str, type_name: str) -> Diagnostic:
        """Locale table value is not a LocaleNumberConfig."""
        msg = (
            f"Invalid number configuration for locale '{locale_code}': "
            f"expected LocaleNumberConfig, got {type_name}"
        )
        return Diagnostic(
            code=DiagnosticCode.CONFIG_ENTRY_INVALID,
            message=msg,
            hint="Build table values with LocaleNumberConfig or use LocaleTable.from_mapping()",
            locale_code=locale_code,
        )

    @staticmethod
    def pattern_groups_missing(pattern: str, missing: str) -> Diagnostic:
        """Validation pattern lacks the named groups normalization reads."""
        msg = f"Validation pattern {pattern!r} has no group(s) named {missing}"
        return Diagnostic(
            code=DiagnosticCode.CONFIG_PATTERN_INVALID,
            message=msg,
            hint="Build patterns with build_validation_pattern() or build_ungrouped_pattern()",
        )
