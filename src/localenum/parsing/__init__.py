"""Locale-aware number parsing: display strings back to numeric values.

- Functions NEVER raise exceptions for bad input - errors are returned in tuple
- Unsupported locales are logged and reported as errors, not raised

Public API:
    Parsing Functions:
        parse_decimal - Returns tuple[Decimal | None, tuple[NumberParseError, ...]]
        parse_number - Returns tuple[float | None, tuple[NumberParseError, ...]]
        get_number - Returns float | None

    Parser:
        NumberParser - Parser over a custom locale table, optionally CLDR-backed

    Type Guards:
        is_valid_decimal - TypeIs guard for finite Decimal
        is_valid_number - TypeIs guard for finite float

Example:
    >>> from localenum.parsing import parse_decimal, is_valid_decimal
    >>> result, errors = parse_decimal("1 234,56", "fr-CH")
    >>> if is_valid_decimal(result):
    ...     total = result.quantize(Decimal("0.01"))

Python 3.13+.
"""

from .guards import is_valid_decimal, is_valid_number
from .numbers import NumberParser, get_number, parse_decimal, parse_number

__all__ = [
    # Parser
    "NumberParser",
    # Parsing functions
    "get_number",
    # Type guards
    "is_valid_decimal",
    "is_valid_number",
    "parse_decimal",
    "parse_number",
]
