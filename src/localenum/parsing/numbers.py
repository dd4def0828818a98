"""Number parsing functions with locale awareness.

- parse_decimal() returns tuple[Decimal | None, tuple[NumberParseError, ...]]
- parse_number() returns tuple[float | None, tuple[NumberParseError, ...]]
- get_number() returns float | None
- Functions NEVER raise for bad input; errors are returned in the tuple

Pipeline per call:
    locale code -> LocaleNumberConfig (exact table entry, CLDR if enabled,
    then the table entry for the language)
    -> validation patterns (precompiled PatternTable)
    -> normalize() -> canonical decimal string -> Decimal

The grouped pattern is tried first. Numbers typed without any grouping
("2050", "12054100,55") are accepted by the ungrouped pattern, which uses the
same decimal separator. Wrongly grouped numbers ("20,00") match neither.

Thread-safe. NumberParser holds only immutable state.

Python 3.13+.
"""

import logging
from decimal import Decimal
from typing import Literal

from localenum.constants import MAX_INPUT_LENGTH
from localenum.core import LocaleNumberConfig, PatternTable, ValidationPatterns, normalize
from localenum.diagnostics import (
    Diagnostic,
    ErrorTemplate,
    FrozenErrorContext,
    NumberParseError,
)
from localenum.locales import DEFAULT_LOCALE_TABLE, LocaleTable, config_from_cldr

__all__ = [
    "NumberParser",
    "get_number",
    "parse_decimal",
    "parse_number",
]

logger = logging.getLogger(__name__)

type ParseType = Literal["decimal", "number"]

_NO_MATCH_REASON = "does not match the locale's grouping and decimal separators"


class NumberParser:
    """Locale-aware number parser over an immutable locale table.

    Args:
        table: Locale configurations (default: DEFAULT_LOCALE_TABLE)
        patterns: Precompiled patterns; built from ``table`` when omitted
        use_cldr: Derive configs from CLDR (Babel) for locales missing from
            ``table``

    Example:
        >>> parser = NumberParser()
        >>> parser.parse_decimal("12 054 100,55", "fr-CH")
        (Decimal('12054100.55'), ())
        >>> parser.get_number("120.000,23", "en-IE") is None
        True
    """

    __slots__ = ("_patterns", "_table", "_use_cldr")

    def __init__(
        self,
        table: LocaleTable | None = None,
        *,
        patterns: PatternTable | None = None,
        use_cldr: bool = False,
    ) -> None:
        self._table = table if table is not None else DEFAULT_LOCALE_TABLE
        self._patterns = (
            patterns if patterns is not None else PatternTable.from_configs(self._table.values())
        )
        self._use_cldr = use_cldr

    @property
    def table(self) -> LocaleTable:
        """Locale configurations consulted first."""
        return self._table

    @property
    def patterns(self) -> PatternTable:
        """Precompiled validation patterns."""
        return self._patterns

    @property
    def use_cldr(self) -> bool:
        """Whether CLDR data backs up the static table."""
        return self._use_cldr

    def config_for(self, locale_code: str) -> LocaleNumberConfig | None:
        """Resolve the number configuration for ``locale_code``.

        Resolution order:
            1. The exact (normalized) code in the table
            2. CLDR data for the full code, when ``use_cldr`` is set
            3. The table entry for a less specific code (``es-AR`` -> ``es``)

        Returns:
            The resolved config, or None if the locale is unsupported
        """
        if not isinstance(locale_code, str):
            return None
        config = self._table.lookup(locale_code, fallback=False)
        if config is None and self._use_cldr:
            config = config_from_cldr(locale_code)
        if config is None:
            config = self._table.lookup(locale_code)
        return config

    def patterns_for(self, config: LocaleNumberConfig) -> ValidationPatterns:
        """Grouped and ungrouped patterns for ``config``, in matching order."""
        return self._patterns.patterns_for(config)

    def canonicalize(self, value: str, locale_code: str) -> str | None:
        """Return the canonical decimal string for ``value``, or None.

        Applies the same input guards as parse_decimal(): non-string and
        overlong values yield None.

        Example:
            >>> NumberParser().canonicalize("-1.200,00", "pt")
            '-1200.00'
        """
        if not isinstance(value, str) or len(value) > MAX_INPUT_LENGTH:
            logger.debug("Rejected non-string or overlong input for locale %r", locale_code)
            return None
        config = self.config_for(locale_code)
        if config is None:
            logger.warning("Unsupported locale %r for number parsing", locale_code)
            return None
        return self._canonicalize(value, config)

    def _canonicalize(self, value: str, config: LocaleNumberConfig) -> str | None:
        for pattern in self.patterns_for(config):
            canonical = normalize(value, pattern, config)
            if canonical is not None:
                return canonical
        return None

    def parse_decimal(
        self, value: str, locale_code: str
    ) -> tuple[Decimal | None, tuple[NumberParseError, ...]]:
        """Parse a locale-formatted number string to Decimal.

        Use this for financial values where float precision loss would
        cause rounding errors.

        Args:
            value: Number string (e.g., "1 234,56" for "fr-CH")
            locale_code: BCP-47 or POSIX locale code

        Returns:
            Tuple of (result, errors):
            - result: Parsed Decimal, or None if parsing failed
            - errors: Tuple of NumberParseError (empty tuple on success)
        """
        return self._parse(value, locale_code, "decimal")

    def parse_number(
        self, value: str, locale_code: str
    ) -> tuple[float | None, tuple[NumberParseError, ...]]:
        """Parse a locale-formatted number string to float.

        Same contract as parse_decimal(); the result is converted to float.
        """
        result, errors = self._parse(value, locale_code, "number")
        if result is None:
            return (None, errors)
        return (float(result), errors)

    def get_number(self, value: str, locale_code: str) -> float | None:
        """Parse to float, returning None on any failure.

        Example:
            >>> NumberParser().get_number("12,34,567", "en-IN")
            1234567.0
        """
        result, _ = self.parse_number(value, locale_code)
        return result

    def _parse(
        self, value: str, locale_code: str, parse_type: ParseType
    ) -> tuple[Decimal | None, tuple[NumberParseError, ...]]:
        if not isinstance(locale_code, str):
            locale_code = repr(locale_code)

        if not isinstance(value, str):
            diagnostic = ErrorTemplate.parse_input_not_string(type(value).__name__, locale_code)
            return (None, (_error(diagnostic, repr(value), locale_code, parse_type),))

        if len(value) > MAX_INPUT_LENGTH:
            diagnostic = ErrorTemplate.parse_input_too_long(
                len(value), MAX_INPUT_LENGTH, locale_code
            )
            return (None, (_error(diagnostic, value[:MAX_INPUT_LENGTH], locale_code, parse_type),))

        config = self.config_for(locale_code)
        if config is None:
            logger.warning("Unsupported locale %r for number parsing", locale_code)
            diagnostic = ErrorTemplate.parse_locale_unknown(locale_code)
            return (None, (_error(diagnostic, value, locale_code, parse_type),))

        canonical = self._canonicalize(value, config)
        if canonical is None:
            logger.debug("Rejected %r for locale %r", value, locale_code)
            if parse_type == "decimal":
                diagnostic = ErrorTemplate.parse_decimal_failed(value, locale_code, _NO_MATCH_REASON)
            else:
                diagnostic = ErrorTemplate.parse_number_failed(value, locale_code, _NO_MATCH_REASON)
            return (None, (_error(diagnostic, value, locale_code, parse_type),))

        return (Decimal(canonical), ())


def _error(
    diagnostic: Diagnostic, value: str, locale_code: str, parse_type: ParseType
) -> NumberParseError:
    context = FrozenErrorContext(
        input_value=value,
        locale_code=locale_code,
        parse_type=parse_type,
    )
    return NumberParseError(diagnostic, context=context)


# Shared parser over the default table; holds no mutable state.
_DEFAULT_PARSER = NumberParser()


def parse_decimal(
    value: str,
    locale_code: str,
) -> tuple[Decimal | None, tuple[NumberParseError, ...]]:
    """Parse locale-aware number string to Decimal (financial precision).

    Args:
        value: Number string (e.g., "1.234,56" for "pt")
        locale_code: BCP-47 locale identifier

    Returns:
        Tuple of (result, errors):
        - result: Parsed Decimal, or None if parsing failed
        - errors: Tuple of NumberParseError (empty tuple on success)

    Examples:
        >>> result, errors = parse_decimal("1,234.56", "en-IE")
        >>> result
        Decimal('1234.56')
        >>> errors
        ()

        >>> result, errors = parse_decimal("120,000.23", "pt")
        >>> result is None
        True
        >>> errors[0].parse_type
        'decimal'

    Thread Safety:
        Thread-safe. Uses the shared default parser (immutable).
    """
    return _DEFAULT_PARSER.parse_decimal(value, locale_code)


def parse_number(
    value: str,
    locale_code: str,
) -> tuple[float | None, tuple[NumberParseError, ...]]:
    """Parse locale-aware number string to float.

    Examples:
        >>> parse_number("20'000.5", "de-CH")
        (20000.5, ())
    """
    return _DEFAULT_PARSER.parse_number(value, locale_code)


def get_number(value: str, locale_code: str) -> float | None:
    """Parse locale-aware number string to float, or None on failure.

    Unsupported locales are logged as a warning and yield None.

    Examples:
        >>> get_number("-12 054 100,55", "pl")
        -12054100.55
        >>> get_number("120", "unsupported-locale") is None
        True
    """
    return _DEFAULT_PARSER.get_number(value, locale_code)
