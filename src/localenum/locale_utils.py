"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale code normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent table keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from localenum.constants import MAX_LOCALE_CACHE_SIZE
from localenum.core.babel_compat import get_locale_class

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "locale_fallback_chain",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to lowercase POSIX format.

    BCP-47 uses hyphens (en-IE), while Babel/POSIX uses underscores (en_IE).
    Locale codes are case-insensitive, so the result is lowercased to give
    one canonical table key per locale.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "fr-CH", "pt_PT")

    Returns:
        Lowercase POSIX-formatted locale code (e.g., "fr_ch", "pt_pt")

    Example:
        >>> normalize_locale("en-IE")
        'en_ie'
        >>> normalize_locale("PT")
        'pt'
    """
    return locale_code.strip().replace("-", "_").lower()


def locale_fallback_chain(locale_code: str) -> tuple[str, ...]:
    """Return normalized lookup keys from most to least specific.

    Each step drops the last subtag, so a regional variant falls back to its
    language when the table has no entry for the region.

    Example:
        >>> locale_fallback_chain("pt-BR")
        ('pt_br', 'pt')
        >>> locale_fallback_chain("zh-Hant-TW")
        ('zh_hant_tw', 'zh_hant', 'zh')
    """
    normalized = normalize_locale(locale_code)
    if not normalized:
        return ()
    parts = [part for part in normalized.split("_") if part]
    return tuple("_".join(parts[:end]) for end in range(len(parts), 0, -1))


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    locale_class = get_locale_class()
    return locale_class.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache used by get_babel_locale()."""
    get_babel_locale.cache_clear()
