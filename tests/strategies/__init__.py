"""Hypothesis strategies for localenum property-based testing.

Usage:
    from tests.strategies import grouped_numbers, misgrouped_numbers
    from tests.strategies.numbers import LOCALE_GLYPHS, group_digits

Event-Emitting Strategies (HypoFuzz-Optimized):
    - grouped_numbers, misgrouped_numbers
"""

from .numbers import (
    LOCALE_GLYPHS,
    LocaleGlyphs,
    canonical_digits,
    group_digits,
    grouped_numbers,
    misgrouped_numbers,
)

__all__ = [
    "LOCALE_GLYPHS",
    "LocaleGlyphs",
    "canonical_digits",
    "group_digits",
    "grouped_numbers",
    "misgrouped_numbers",
]
