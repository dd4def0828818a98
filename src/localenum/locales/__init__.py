"""Locale number configuration sources.

- LocaleTable / DEFAULT_LOCALE_TABLE: static, validated configs
- config_from_cldr: configs derived from Babel's CLDR data (optional extra)

The CLDR bridge resolves Babel at call time, so importing this package never
loads Babel.

Python 3.13+.
"""

from .cldr import config_from_cldr, separator_token_for_symbol
from .table import DEFAULT_LOCALE_TABLE, LocaleTable

__all__ = [
    "DEFAULT_LOCALE_TABLE",
    "LocaleTable",
    "config_from_cldr",
    "separator_token_for_symbol",
]
