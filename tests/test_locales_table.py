"""Tests for locales.table: the static locale number table."""

from __future__ import annotations

import logging

import pytest

from localenum.constants import APOSTROPHE_SEPARATORS, COMMA, PERIOD, SPACE_SEPARATORS
from localenum.core import LocaleNumberConfig
from localenum.diagnostics import DiagnosticCode, LocaleConfigError, SeparatorTokenError
from localenum.locales import DEFAULT_LOCALE_TABLE, LocaleTable


class TestDefaultLocaleTable:
    """Separators of the bundled locales."""

    @pytest.mark.parametrize(
        ("locale_code", "thousands", "decimal", "indian"),
        [
            ("en-IE", COMMA, PERIOD, False),
            ("fr-CH", SPACE_SEPARATORS, COMMA, False),
            ("pl", SPACE_SEPARATORS, COMMA, False),
            ("pt-PT", SPACE_SEPARATORS, COMMA, False),
            ("pt", PERIOD, COMMA, False),
            ("de", PERIOD, COMMA, False),
            ("de-CH", APOSTROPHE_SEPARATORS, PERIOD, False),
            ("en-IN", COMMA, PERIOD, True),
            ("es-MX", COMMA, PERIOD, False),
            ("es-US", COMMA, PERIOD, False),
            ("es-ES", PERIOD, COMMA, False),
            ("de-AT", SPACE_SEPARATORS, COMMA, False),
            ("en-ZA", SPACE_SEPARATORS, COMMA, False),
        ],
    )
    def test_entries(
        self, locale_code: str, thousands: str, decimal: str, indian: bool
    ) -> None:
        """Bundled locales carry the expected separators."""
        config = DEFAULT_LOCALE_TABLE.lookup(locale_code)
        assert config is not None
        assert config.thousands.fragment == thousands
        assert config.decimal.fragment == decimal
        assert config.indian is indian

    def test_shared_conventions_share_config(self) -> None:
        """Locales with the same conventions reuse one config object."""
        assert DEFAULT_LOCALE_TABLE["fr-CH"] is DEFAULT_LOCALE_TABLE["pl"]
        assert DEFAULT_LOCALE_TABLE["en-IE"] is DEFAULT_LOCALE_TABLE["en-US"]

    def test_unsupported_locale(self) -> None:
        """Unknown locales yield None."""
        assert DEFAULT_LOCALE_TABLE.lookup("unsupported-locale") is None
        assert DEFAULT_LOCALE_TABLE.lookup("") is None

    def test_repr(self) -> None:
        """repr shows the entry count."""
        assert repr(DEFAULT_LOCALE_TABLE) == f"LocaleTable({len(DEFAULT_LOCALE_TABLE)} locales)"


class TestLocaleTableLookup:
    """Key normalization and language fallback."""

    @pytest.fixture
    def table(self) -> LocaleTable:
        return LocaleTable({
            "pt": LocaleNumberConfig(PERIOD, COMMA),
            "pt-PT": LocaleNumberConfig(SPACE_SEPARATORS, COMMA),
        })

    def test_keys_are_normalized(self, table: LocaleTable) -> None:
        """Keys are stored as lowercase POSIX codes."""
        assert set(table) == {"pt", "pt_pt"}

    @pytest.mark.parametrize("code", ["pt-PT", "pt_PT", "PT-pt", " pt-PT "])
    def test_lookup_is_case_and_separator_insensitive(
        self, table: LocaleTable, code: str
    ) -> None:
        """BCP-47 and POSIX spellings find the same entry."""
        assert table.lookup(code) is table["pt_pt"]

    def test_region_falls_back_to_language(self, table: LocaleTable) -> None:
        """pt-BR has no entry of its own and resolves to pt."""
        assert table.lookup("pt-BR") is table["pt"]

    def test_region_entry_wins(self, table: LocaleTable) -> None:
        """The most specific entry is preferred."""
        assert table.lookup("pt-PT") is not table["pt"]

    def test_getitem_normalizes(self, table: LocaleTable) -> None:
        """Indexing normalizes but does not fall back."""
        assert table["PT-PT"] is table["pt_pt"]
        with pytest.raises(KeyError):
            table["pt-BR"]

    def test_lookup_without_fallback(self, table: LocaleTable) -> None:
        """fallback=False only returns exact entries."""
        assert table.lookup("pt-BR", fallback=False) is None
        assert table.lookup("PT_pt", fallback=False) is table["pt_pt"]
        assert table.lookup("pt", fallback=False) is table["pt"]

    def test_immutable(self, table: LocaleTable) -> None:
        """The table exposes no mutation."""
        with pytest.raises(TypeError):
            table["de"] = LocaleNumberConfig(PERIOD, COMMA)  # type: ignore[index]


class TestLocaleTableValidation:
    """Malformed tables fail at construction."""

    def test_empty_code_rejected(self) -> None:
        """Blank locale codes are invalid."""
        with pytest.raises(LocaleConfigError) as exc_info:
            LocaleTable({" ": LocaleNumberConfig(COMMA, PERIOD)})
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CONFIG_ENTRY_INVALID

    def test_duplicate_code_rejected(self) -> None:
        """Two spellings of one locale collide."""
        config = LocaleNumberConfig(COMMA, PERIOD)
        with pytest.raises(LocaleConfigError, match="duplicate"):
            LocaleTable({"en-IE": config, "en_ie": config})

    def test_non_config_value_rejected(self) -> None:
        """Values must be LocaleNumberConfig instances."""
        with pytest.raises(LocaleConfigError, match="expected LocaleNumberConfig") as exc_info:
            LocaleTable({"en": (COMMA, PERIOD)})  # type: ignore[dict-item]
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.CONFIG_ENTRY_INVALID
        assert diagnostic.locale_code == "en"
        assert "tuple" in diagnostic.message


class TestLocaleTableFromMapping:
    """Building tables from plain data."""

    def test_builds_configs(self) -> None:
        """Entries become validated configs."""
        table = LocaleTable.from_mapping({
            "en-IN": {"thousands": COMMA, "decimal": PERIOD, "indian": True},
            "de-CH": {"thousands": APOSTROPHE_SEPARATORS, "decimal": PERIOD},
        })
        assert table["en-IN"].indian is True
        assert table["de-CH"].indian is False
        assert table["de-CH"].thousands.fragment == APOSTROPHE_SEPARATORS

    def test_logs_entry_count(self, caplog: pytest.LogCaptureFixture) -> None:
        """Loading logs the number of entries at debug level."""
        with caplog.at_level(logging.DEBUG, logger="localenum.locales.table"):
            LocaleTable.from_mapping({"pt": {"thousands": PERIOD, "decimal": COMMA}})
        assert "Loaded 1 locale number configs" in caplog.text

    @pytest.mark.parametrize(
        "entry",
        [
            "not a mapping",
            {"thousands": COMMA},
            {"decimal": PERIOD},
            {"thousands": 1, "decimal": PERIOD},
            {"thousands": COMMA, "decimal": PERIOD, "indian": "yes"},
        ],
    )
    def test_malformed_entries_rejected(self, entry: object) -> None:
        """Missing or mistyped fields raise LocaleConfigError."""
        with pytest.raises(LocaleConfigError) as exc_info:
            LocaleTable.from_mapping({"xx": entry})  # type: ignore[dict-item]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CONFIG_ENTRY_INVALID
        assert exc_info.value.diagnostic.locale_code == "xx"

    def test_unsafe_token_rejected(self) -> None:
        """Token validation runs for every entry."""
        with pytest.raises(SeparatorTokenError):
            LocaleTable.from_mapping({"xx": {"thousands": r"\d", "decimal": PERIOD}})

    def test_identical_separators_rejected(self) -> None:
        """Configs with one separator for both roles fail to load."""
        with pytest.raises(LocaleConfigError, match="both"):
            LocaleTable.from_mapping({"xx": {"thousands": COMMA, "decimal": COMMA}})
