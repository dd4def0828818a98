"""CLDR-derived locale number configuration.

Derives a LocaleNumberConfig for locales missing from the static table using
Babel's CLDR data: the grouping symbol, the decimal symbol and the grouping
sizes of the locale's standard decimal format.

CLDR prints the typographically correct glyph (U+202F for French grouping,
U+2019 for Swiss German), while people type a plain space or apostrophe.
Group symbols from those families therefore widen to the matching multi-glyph
class so either spelling validates.

Requires Babel (``pip install localenum[babel]``).

Python 3.13+.
"""

from __future__ import annotations

import logging

from localenum.constants import (
    APOSTROPHE_LIKE_CHARACTERS,
    APOSTROPHE_SEPARATORS,
    SPACE_LIKE_CHARACTERS,
    SPACE_SEPARATORS,
)
from localenum.core import LocaleNumberConfig, SeparatorToken
from localenum.core.babel_compat import (
    get_babel_numbers,
    get_unknown_locale_error,
    require_babel,
)
from localenum.diagnostics import LocaleConfigError
from localenum.locale_utils import get_babel_locale

__all__ = ["config_from_cldr", "separator_token_for_symbol"]

logger = logging.getLogger(__name__)

# CLDR secondary grouping size used by Indian-style formats (#,##,##0.###)
_INDIAN_SECONDARY_GROUPING: int = 2


def separator_token_for_symbol(symbol: str) -> SeparatorToken:
    """Map a CLDR separator symbol to a SeparatorToken.

    Space-like and apostrophe-like symbols widen to their look-alike class;
    anything else becomes an escaped literal.

    Example:
        >>> separator_token_for_symbol(",").fragment
        '\\\\,'
        >>> separator_token_for_symbol("\\u202f").fragment == SPACE_SEPARATORS
        True
    """
    if symbol in SPACE_LIKE_CHARACTERS:
        return SeparatorToken(SPACE_SEPARATORS)
    if symbol in APOSTROPHE_LIKE_CHARACTERS:
        return SeparatorToken(APOSTROPHE_SEPARATORS)
    return SeparatorToken.literal(symbol)


def config_from_cldr(locale_code: str) -> LocaleNumberConfig | None:
    """Derive a number configuration from CLDR data.

    Args:
        locale_code: BCP-47 or POSIX locale code

    Returns:
        Config built from the locale's CLDR symbols, or None if Babel does
        not know the locale or its symbols cannot form a valid config

    Raises:
        BabelImportError: If Babel is not installed

    Example:
        >>> config = config_from_cldr("en-IN")
        >>> config.indian
        True
        >>> config_from_cldr("unsupported-locale") is None
        True
    """
    require_babel("config_from_cldr")
    unknown_locale_error = get_unknown_locale_error()
    numbers = get_babel_numbers()

    try:
        locale = get_babel_locale(locale_code)
    except (unknown_locale_error, ValueError):
        logger.debug("CLDR has no data for locale %r", locale_code)
        return None

    group_symbol = numbers.get_group_symbol(locale)
    decimal_symbol = numbers.get_decimal_symbol(locale)

    decimal_format = locale.decimal_formats.get(None)
    indian = (
        decimal_format is not None
        and decimal_format.grouping[1] == _INDIAN_SECONDARY_GROUPING
    )

    try:
        config = LocaleNumberConfig(
            separator_token_for_symbol(group_symbol),
            separator_token_for_symbol(decimal_symbol),
            indian,
        )
    except LocaleConfigError as e:
        logger.debug("CLDR symbols for %r are unusable: %s", locale_code, e)
        return None

    logger.debug(
        "Derived CLDR number config for %r (group=%r, decimal=%r, indian=%s)",
        locale_code, group_symbol, decimal_symbol, indian,
    )
    return config
