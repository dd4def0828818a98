"""Normalization of validated number representations.

normalize() turns a locale-formatted number into a canonical decimal literal:
an optional leading ``-``, digits, and optionally ``.`` followed by digits.
It validates first and cleans second; a string that does not fully match the
validation pattern is rejected with ``None`` and never repaired.

Cleanup is token-aware. The match splits the input into its integer and
fraction parts, the thousands token is removed from the integer part only,
and the decimal token is replaced in the fraction part only. A thousands
token can therefore never consume the decimal mark (or the reverse), even
when both tokens cover look-alike glyphs such as apostrophes.

Thread-safe. Pure function: no I/O, no logging, no shared state.

Python 3.13+. Zero external dependencies.
"""

import re

from localenum.diagnostics import ErrorTemplate, LocaleConfigError

from .config import LocaleNumberConfig

__all__ = ["normalize"]

_REQUIRED_GROUPS: tuple[str, ...] = ("sign", "integer", "fraction")


def normalize(
    raw: str,
    pattern: re.Pattern[str],
    config: LocaleNumberConfig,
) -> str | None:
    """Normalize a number representation into a canonical decimal string.

    Args:
        raw: Number representation as written (e.g., "1.200,00")
        pattern: Pattern from build_validation_pattern() (or
            build_ungrouped_pattern()) for the same config
        config: Separator tokens used to build ``pattern``

    Returns:
        Canonical decimal string (e.g., "1200.00"), or None if ``raw`` does
        not match ``pattern``

    Raises:
        LocaleConfigError: If ``pattern`` lacks the ``sign``, ``integer`` or
            ``fraction`` group (i.e. was not produced by the pattern builders)

    Example:
        >>> config = LocaleNumberConfig(r"\\.", r"\\,")
        >>> pattern = build_validation_pattern(config.thousands, config.decimal)
        >>> normalize("1.200,00", pattern, config)
        '1200.00'
        >>> normalize("50,000.12", pattern, config) is None
        True
    """
    missing = [name for name in _REQUIRED_GROUPS if name not in pattern.groupindex]
    if missing:
        raise LocaleConfigError(
            ErrorTemplate.pattern_groups_missing(pattern.pattern, ", ".join(missing))
        )

    match = pattern.fullmatch(raw)
    if match is None:
        return None

    sign = "-" if match.group("sign") == "-" else ""
    integer = config.thousands.remove(match.group("integer"))

    fraction = match.group("fraction")
    if fraction is None:
        return f"{sign}{integer}"

    return f"{sign}{integer}{config.decimal.replace(fraction, '.')}"
