"""localenum - Locale-aware parsing of grouped number representations.

Parses human-written numbers such as "1.234,56", "1,234.56", "1 234,56",
"20'000.5" and Indian-grouped "12,34,567" into exact decimals, rejecting
anything that is not correctly grouped for the requested locale.

Public API:
    parse_decimal - Parse to Decimal, errors returned in a tuple
    parse_number - Parse to float, errors returned in a tuple
    get_number - Parse to float, None on failure
    NumberParser - Parser over a custom locale table (optionally CLDR-backed)
    build_validation_pattern - Validation pattern for two separator tokens
    normalize - Validate and convert to a canonical decimal string
    LocaleNumberConfig - Thousands/decimal tokens plus grouping style
    SeparatorToken - Validated separator regex fragment
    LocaleTable - Immutable locale -> config mapping

Exceptions:
    LocaleNumError - Base exception class
    NumberParseError - Parse failure (returned, never raised)
    LocaleConfigError - Invalid locale configuration (raised at load time)
    SeparatorTokenError - Invalid separator token (raised at load time)

Submodules:
    localenum.core - Pure pattern building and normalization
    localenum.locales - Static table and CLDR-derived configs
    localenum.parsing - Parsing entry points and type guards
    localenum.diagnostics - Error types and diagnostic formatting
"""

from .core import (
    LocaleNumberConfig,
    SeparatorToken,
    build_validation_pattern,
    normalize,
)
from .diagnostics import (
    LocaleConfigError,
    LocaleNumError,
    NumberParseError,
    SeparatorTokenError,
)
from .locales import DEFAULT_LOCALE_TABLE, LocaleTable
from .parsing import NumberParser, get_number, parse_decimal, parse_number

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localenum")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_LOCALE_TABLE",
    "LocaleConfigError",
    "LocaleNumError",
    "LocaleNumberConfig",
    "LocaleTable",
    "NumberParseError",
    "NumberParser",
    "SeparatorToken",
    "SeparatorTokenError",
    "__version__",
    "build_validation_pattern",
    "get_number",
    "normalize",
    "parse_decimal",
    "parse_number",
]
