"""Static locale number configuration table.

Maps locale codes to LocaleNumberConfig. Keys are stored normalized
(lowercase POSIX), and lookups fall back from region to language, so
"pt-BR" resolves to the "pt" entry while "pt-PT" has its own. Regions whose
conventions differ from their language (es-MX, de-AT, en-ZA) carry their own
entries.

Tables are immutable once built. LocaleTable.from_mapping() validates plain
data (e.g. loaded from JSON) entry by entry and fails at load time on the
first malformed entry.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from types import MappingProxyType

from localenum.constants import APOSTROPHE_SEPARATORS, COMMA, PERIOD, SPACE_SEPARATORS
from localenum.core import LocaleNumberConfig
from localenum.diagnostics import ErrorTemplate, LocaleConfigError
from localenum.locale_utils import locale_fallback_chain, normalize_locale

__all__ = ["DEFAULT_LOCALE_TABLE", "LocaleTable"]

logger = logging.getLogger(__name__)


class LocaleTable(Mapping[str, LocaleNumberConfig]):
    """Immutable mapping of normalized locale code to number configuration.

    Example:
        >>> table = LocaleTable({"pt": LocaleNumberConfig(r"\\.", r"\\,")})
        >>> table.lookup("pt-BR") is table["pt"]
        True
        >>> table.lookup("unsupported-locale") is None
        True
    """

    __slots__ = ("_configs",)

    def __init__(self, configs: Mapping[str, LocaleNumberConfig]) -> None:
        normalized: dict[str, LocaleNumberConfig] = {}
        for locale_code, config in configs.items():
            key = normalize_locale(locale_code)
            if not key:
                raise LocaleConfigError(
                    ErrorTemplate.config_entry_invalid(locale_code, "empty locale code")
                )
            if key in normalized:
                raise LocaleConfigError(
                    ErrorTemplate.config_entry_invalid(locale_code, "duplicate locale code")
                )
            if not isinstance(config, LocaleNumberConfig):
                raise LocaleConfigError(
                    ErrorTemplate.config_entry_wrong_type(locale_code, type(config).__name__)
                )
            normalized[key] = config
        self._configs: Mapping[str, LocaleNumberConfig] = MappingProxyType(normalized)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Mapping[str, object]]) -> LocaleTable:
        """Build a table from plain data.

        Args:
            data: ``{locale_code: {"thousands": str, "decimal": str,
                "indian": bool}}``; "indian" is optional

        Returns:
            Validated LocaleTable

        Raises:
            LocaleConfigError: On the first malformed entry or token

        Example:
            >>> table = LocaleTable.from_mapping(
            ...     {"en-IN": {"thousands": r"\\,", "decimal": r"\\.", "indian": True}}
            ... )
            >>> table["en_in"].indian
            True
        """
        configs: dict[str, LocaleNumberConfig] = {}
        for locale_code, entry in data.items():
            if not isinstance(entry, Mapping):
                raise LocaleConfigError(
                    ErrorTemplate.config_entry_invalid(locale_code, "entry is not a mapping")
                )
            thousands = entry.get("thousands")
            decimal = entry.get("decimal")
            indian = entry.get("indian", False)
            if not isinstance(thousands, str) or not isinstance(decimal, str):
                raise LocaleConfigError(
                    ErrorTemplate.config_entry_invalid(
                        locale_code, "'thousands' and 'decimal' must be strings"
                    )
                )
            if not isinstance(indian, bool):
                raise LocaleConfigError(
                    ErrorTemplate.config_entry_invalid(locale_code, "'indian' must be a bool")
                )
            configs[locale_code] = LocaleNumberConfig(thousands, decimal, indian)

        table = cls(configs)
        logger.debug("Loaded %d locale number configs", len(table))
        return table

    def lookup(
        self, locale_code: str, *, fallback: bool = True
    ) -> LocaleNumberConfig | None:
        """Find the config for ``locale_code``.

        Args:
            locale_code: BCP-47 or POSIX locale code
            fallback: Drop subtags one at a time until an entry matches;
                when False only the exact (normalized) code is tried

        Returns:
            The most specific matching config, or None if unsupported

        Example:
            >>> table = LocaleTable({"es": LocaleNumberConfig(r"\\.", r"\\,")})
            >>> table.lookup("es-AR") is table["es"]
            True
            >>> table.lookup("es-AR", fallback=False) is None
            True
        """
        if not fallback:
            return self._configs.get(normalize_locale(locale_code))
        for key in locale_fallback_chain(locale_code):
            config = self._configs.get(key)
            if config is not None:
                return config
        return None

    def __getitem__(self, locale_code: str) -> LocaleNumberConfig:
        return self._configs[normalize_locale(locale_code)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._configs)

    def __len__(self) -> int:
        return len(self._configs)

    def __repr__(self) -> str:
        return f"LocaleTable({len(self)} locales)"


_COMMA_PERIOD = LocaleNumberConfig(COMMA, PERIOD)
_PERIOD_COMMA = LocaleNumberConfig(PERIOD, COMMA)
_SPACE_COMMA = LocaleNumberConfig(SPACE_SEPARATORS, COMMA)
_APOSTROPHE_PERIOD = LocaleNumberConfig(APOSTROPHE_SEPARATORS, PERIOD)
_INDIAN = LocaleNumberConfig(COMMA, PERIOD, indian=True)

# Locales sharing conventions share one config (and one compiled pattern pair).
DEFAULT_LOCALE_TABLE: LocaleTable = LocaleTable({
    # 1,234,567.89
    "en": _COMMA_PERIOD,
    "en-AU": _COMMA_PERIOD,
    "en-CA": _COMMA_PERIOD,
    "en-GB": _COMMA_PERIOD,
    "en-IE": _COMMA_PERIOD,
    "en-NZ": _COMMA_PERIOD,
    "en-US": _COMMA_PERIOD,
    "es-419": _COMMA_PERIOD,
    "es-DO": _COMMA_PERIOD,
    "es-GT": _COMMA_PERIOD,
    "es-HN": _COMMA_PERIOD,
    "es-MX": _COMMA_PERIOD,
    "es-NI": _COMMA_PERIOD,
    "es-PA": _COMMA_PERIOD,
    "es-PE": _COMMA_PERIOD,
    "es-PR": _COMMA_PERIOD,
    "es-SV": _COMMA_PERIOD,
    "es-US": _COMMA_PERIOD,
    "ga": _COMMA_PERIOD,
    "he": _COMMA_PERIOD,
    "ja": _COMMA_PERIOD,
    "ko": _COMMA_PERIOD,
    "th": _COMMA_PERIOD,
    "zh": _COMMA_PERIOD,
    # 12,34,567.89
    "en-IN": _INDIAN,
    "hi": _INDIAN,
    "mr": _INDIAN,
    # 1.234.567,89
    "da": _PERIOD_COMMA,
    "de": _PERIOD_COMMA,
    "el": _PERIOD_COMMA,
    "es": _PERIOD_COMMA,
    "hr": _PERIOD_COMMA,
    "id": _PERIOD_COMMA,
    "it": _PERIOD_COMMA,
    "nl": _PERIOD_COMMA,
    "pt": _PERIOD_COMMA,
    "ro": _PERIOD_COMMA,
    "sl": _PERIOD_COMMA,
    "sr": _PERIOD_COMMA,
    "tr": _PERIOD_COMMA,
    "vi": _PERIOD_COMMA,
    # 1 234 567,89
    "bg": _SPACE_COMMA,
    "cs": _SPACE_COMMA,
    "de-AT": _SPACE_COMMA,
    "en-ZA": _SPACE_COMMA,
    "et": _SPACE_COMMA,
    "fi": _SPACE_COMMA,
    "fr": _SPACE_COMMA,
    "fr-CH": _SPACE_COMMA,
    "hu": _SPACE_COMMA,
    "lt": _SPACE_COMMA,
    "lv": _SPACE_COMMA,
    "nb": _SPACE_COMMA,
    "no": _SPACE_COMMA,
    "pl": _SPACE_COMMA,
    "pt-PT": _SPACE_COMMA,
    "ru": _SPACE_COMMA,
    "sk": _SPACE_COMMA,
    "sv": _SPACE_COMMA,
    "uk": _SPACE_COMMA,
    # 1'234'567.89
    "de-CH": _APOSTROPHE_PERIOD,
    "de-LI": _APOSTROPHE_PERIOD,
    "it-CH": _APOSTROPHE_PERIOD,
})
