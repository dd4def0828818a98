"""Type guard functions for parsing result type narrowing.

All parse_* functions return tuple[result, tuple[NumberParseError, ...]].
Type guards check the result component to narrow types for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Note: All guards accept None and return False. This simplifies the pattern from
`if not errors and is_valid_decimal(result)` to just `if is_valid_decimal(result)`.

Example:
    >>> from localenum.parsing import parse_decimal
    >>> from localenum.parsing.guards import is_valid_decimal
    >>> result, errors = parse_decimal("1.234,56", "pt")
    >>> if is_valid_decimal(result):
    ...     amount = result.quantize(Decimal("0.01"))
"""

import math
from decimal import Decimal
from typing import TypeIs

__all__ = [
    "is_valid_decimal",
    "is_valid_number",
]


def is_valid_decimal(value: Decimal | None) -> TypeIs[Decimal]:
    """Type guard: Check if parsed decimal is valid (not None/NaN/Infinity).

    Args:
        value: Decimal from parse_decimal() result tuple (may be None on error)

    Returns:
        True if value is a finite Decimal, False otherwise
    """
    return value is not None and value.is_finite()


def is_valid_number(value: float | None) -> TypeIs[float]:
    """Type guard: Check if parsed number is valid (not None/NaN/Infinity).

    Args:
        value: Float from parse_number() result tuple (may be None on error)

    Returns:
        True if value is a finite float, False otherwise
    """
    return value is not None and math.isfinite(value)
