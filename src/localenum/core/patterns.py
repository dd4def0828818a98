"""Validation pattern construction.

Builds the anchored regular expressions that decide whether a string is a
correctly grouped number for a locale. Patterns are assembled from the
locale's separator fragments:

Western grouping (uniform groups of three)::

    [+-]? ( [1-9][0-9]{0,2} (T[0-9]{3})* | 0 ) (D[0-9]+)?

Indian grouping (groups of two, then a final group of three)::

    [+-]? ( ([1-9][0-9]{0,1}T)+ ([0-9]{2}T)* [0-9]{3} | [1-9][0-9]{0,2} | 0 ) (D[0-9]+)?

Separators are never digits, so each input admits at most one grouping and
the patterns stay unambiguous. Named groups (``sign``, ``integer``,
``fraction``) let the normalizer work on each part separately.

PatternTable is the explicit, immutable lookup from config key to compiled
patterns. It is built once from a locale table and injected where needed;
nothing in this module keeps hidden state.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .config import LocaleNumberConfig, PatternKey
from .tokens import SeparatorToken

__all__ = [
    "PatternTable",
    "ValidationPatterns",
    "build_patterns",
    "build_ungrouped_pattern",
    "build_validation_pattern",
]

_SIGN = r"(?P<sign>[+-])?"
_ZERO = "0"
_SHORT_NUMBER = "[1-9][0-9]{0,2}"


def _group(token: SeparatorToken) -> str:
    # Non-capturing wrapper keeps alternations inside a fragment local
    return f"(?:{token.fragment})"


def _assemble(integer: str, decimal: SeparatorToken) -> re.Pattern[str]:
    return re.compile(
        rf"\A{_SIGN}(?P<integer>{integer})(?P<fraction>{_group(decimal)}[0-9]+)?\Z"
    )


def build_validation_pattern(
    thousands: SeparatorToken | str,
    decimal: SeparatorToken | str,
    is_indian: bool = False,
) -> re.Pattern[str]:
    """Build the validation pattern for a pair of separator tokens.

    Args:
        thousands: Thousands-separator token or raw regex fragment
        decimal: Decimal-separator token or raw regex fragment
        is_indian: Use Indian grouping instead of uniform 3-digit groups

    Returns:
        Compiled pattern anchored at both ends

    Raises:
        SeparatorTokenError: If a raw fragment is not a safe regex fragment

    Example:
        >>> pattern = build_validation_pattern(r"\\,", r"\\.")
        >>> bool(pattern.fullmatch("1,234.5"))
        True
        >>> bool(pattern.fullmatch("12,34.5"))
        False
    """
    t = _group(SeparatorToken.coerce(thousands))
    d = SeparatorToken.coerce(decimal)

    if is_indian:
        integer = (
            rf"(?:[1-9][0-9]{{0,1}}{t})+(?:[0-9]{{2}}{t})*[0-9]{{3}}"
            rf"|{_SHORT_NUMBER}|{_ZERO}"
        )
    else:
        integer = rf"{_SHORT_NUMBER}(?:{t}[0-9]{{3}})*|{_ZERO}"

    return _assemble(integer, d)


def build_ungrouped_pattern(decimal: SeparatorToken | str) -> re.Pattern[str]:
    """Build the pattern for numbers written without any grouping.

    Accepts the same sign and fraction syntax as build_validation_pattern(),
    with a plain run of digits (no leading zeros) as the integer part.

    Example:
        >>> bool(build_ungrouped_pattern(r"\\,").fullmatch("12054100,55"))
        True
    """
    return _assemble(f"[1-9][0-9]*|{_ZERO}", SeparatorToken.coerce(decimal))


@dataclass(frozen=True, slots=True)
class ValidationPatterns:
    """The pair of patterns used to validate input for one config.

    Attributes:
        grouped: Pattern requiring correct grouping when separators appear
        ungrouped: Pattern for plain digit runs with an optional fraction
    """

    grouped: re.Pattern[str]
    ungrouped: re.Pattern[str]

    def __iter__(self) -> Iterator[re.Pattern[str]]:
        """Yield patterns in the order they should be tried."""
        yield self.grouped
        yield self.ungrouped


def build_patterns(config: LocaleNumberConfig) -> ValidationPatterns:
    """Build both validation patterns for ``config``."""
    return ValidationPatterns(
        grouped=build_validation_pattern(config.thousands, config.decimal, config.indian),
        ungrouped=build_ungrouped_pattern(config.decimal),
    )


class PatternTable(Mapping[PatternKey, ValidationPatterns]):
    """Immutable mapping from config key to precompiled patterns.

    Locales sharing separators share one entry. Lookups never build or
    store anything, so a table can be shared freely between threads.

    Example:
        >>> config = LocaleNumberConfig(r"\\.", r"\\,")
        >>> table = PatternTable.from_configs([config])
        >>> bool(table[config.cache_key].grouped.fullmatch("1.234,5"))
        True
    """

    __slots__ = ("_patterns",)

    def __init__(self, patterns: Mapping[PatternKey, ValidationPatterns]) -> None:
        self._patterns: Mapping[PatternKey, ValidationPatterns] = MappingProxyType(
            dict(patterns)
        )

    @classmethod
    def from_configs(cls, configs: Iterable[LocaleNumberConfig]) -> PatternTable:
        """Precompile patterns for every distinct config in ``configs``."""
        patterns: dict[PatternKey, ValidationPatterns] = {}
        for config in configs:
            if config.cache_key not in patterns:
                patterns[config.cache_key] = build_patterns(config)
        return cls(patterns)

    def __getitem__(self, key: PatternKey) -> ValidationPatterns:
        return self._patterns[key]

    def __iter__(self) -> Iterator[PatternKey]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def patterns_for(self, config: LocaleNumberConfig) -> ValidationPatterns:
        """Return precompiled patterns for ``config``, or build them fresh.

        Configs absent from the table (e.g. derived from CLDR at call time)
        get newly compiled patterns that are not stored.
        """
        found = self._patterns.get(config.cache_key)
        if found is not None:
            return found
        return build_patterns(config)
