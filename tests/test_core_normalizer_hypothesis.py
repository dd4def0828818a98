"""Property-based tests for the pattern builder and normalizer.

Properties:
- Correctly grouped numbers normalize to their canonical form
- Normalized output is always a plain decimal literal
- Wrongly sized groups are always rejected
- Western patterns never accept Indian grouping of 6+ digit integers
"""

from __future__ import annotations

import re
from decimal import Decimal

from hypothesis import event, given
from hypothesis import strategies as st

from localenum.core import build_validation_pattern, normalize
from localenum.locales import DEFAULT_LOCALE_TABLE
from tests.strategies import grouped_numbers, misgrouped_numbers
from tests.strategies.numbers import group_digits

_CANONICAL = re.compile(r"-?[0-9]+(?:\.[0-9]+)?")


def _grouped_normalize(raw: str, locale: str) -> str | None:
    config = DEFAULT_LOCALE_TABLE.lookup(locale)
    assert config is not None
    pattern = build_validation_pattern(config.thousands, config.decimal, config.indian)
    return normalize(raw, pattern, config)


class TestNormalizeProperties:
    """Properties of normalize() over generated inputs."""

    @given(case=grouped_numbers())
    def test_grouped_numbers_normalize_to_canonical(self, case: tuple[str, str, str]) -> None:
        """Every correctly grouped number yields its canonical string."""
        locale, raw, canonical = case
        assert _grouped_normalize(raw, locale) == canonical

    @given(case=grouped_numbers())
    def test_output_is_plain_decimal_literal(self, case: tuple[str, str, str]) -> None:
        """Output contains only an optional '-', digits and one '.'."""
        locale, raw, _ = case
        result = _grouped_normalize(raw, locale)
        assert result is not None
        assert _CANONICAL.fullmatch(result)
        Decimal(result)

    @given(case=misgrouped_numbers())
    def test_wrong_group_sizes_rejected(self, case: tuple[str, str]) -> None:
        """A group of 1, 2 or 4 digits after a separator never validates."""
        locale, raw = case
        assert _grouped_normalize(raw, locale) is None

    @given(integer=st.integers(min_value=100_000, max_value=10**12))
    def test_western_rejects_indian_grouping(self, integer: int) -> None:
        """Indian grouping of large numbers is not Western grouping."""
        raw = ",".join(group_digits(str(integer), indian=True))
        event(f"digits={len(str(integer))}")
        assert _grouped_normalize(raw, "en-IE") is None
        assert _grouped_normalize(raw, "en-IN") == str(integer)

    @given(text=st.text(max_size=20))
    def test_arbitrary_text_never_raises(self, text: str) -> None:
        """normalize() returns a string or None for any input."""
        result = _grouped_normalize(text, "fr-CH")
        event(f"outcome={'none' if result is None else 'match'}")
        assert result is None or _CANONICAL.fullmatch(result)
