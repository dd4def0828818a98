"""Shared constants for localenum.

Centralizes the separator fragments used by the locale table and the
CLDR bridge, plus the size limits applied at the parsing boundary.

Constants are grouped by domain:
- Separator fragments: Regex fragments reused across many locales
- Input limits: DoS prevention via size constraints
- Cache limits: Memory bounds for Babel locale lookups

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Separator fragments
    "COMMA",
    "PERIOD",
    "SPACE_SEPARATORS",
    "APOSTROPHE_SEPARATORS",
    "SPACE_LIKE_CHARACTERS",
    "APOSTROPHE_LIKE_CHARACTERS",
    # Input limits
    "MAX_INPUT_LENGTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# SEPARATOR FRAGMENTS
# ============================================================================
#
# Fragments are spliced verbatim into generated validation patterns, so they
# must already be valid regex syntax. Single characters are escaped; groups of
# look-alike glyphs are bracketed classes.

COMMA: str = r"\,"
PERIOD: str = r"\."

# Narrow no-break space, no-break space, en quad, em quad, em space, plus any
# Unicode whitespace. CLDR uses U+202F / U+00A0 for grouping while people type
# a plain space; all of them are accepted.
SPACE_SEPARATORS: str = r"[\u202F\u00A0\u2000\u2001\u2003\s]"

# ASCII apostrophe, Greek tonos and right single quotation mark.
APOSTROPHE_SEPARATORS: str = "['\u0384\u2019]"

# Characters that widen a CLDR group symbol to one of the classes above.
SPACE_LIKE_CHARACTERS: frozenset[str] = frozenset(
    {" ", "\u202f", "\u00a0", "\u2000", "\u2001", "\u2003"}
)
APOSTROPHE_LIKE_CHARACTERS: frozenset[str] = frozenset({"'", "\u0384", "\u2019"})

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Longest number representation accepted by the parsing layer.
# Validation is linear in input length, but nothing legitimate comes close.
MAX_INPUT_LENGTH: int = 1000

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale instances (see locale_utils.get_babel_locale).
MAX_LOCALE_CACHE_SIZE: int = 128
