"""
Unit tests for the AppSettings accessor.
"""

from decimal import Decimal

import pytest

from config_assistant.adapters.mapping_store import MappingSettingsStore
from config_assistant.core.app_settings import AppSettings
from config_assistant.errors.errors import ConfigurationError, ErrorKind
from config_assistant.types.aliases import Int32
from config_assistant.types.types import SplitOptions

BLANK_VALUES = ["", " ", "   ", "\t", "\r\n"]


def _settings(**values: str) -> AppSettings:
    return AppSettings(MappingSettingsStore(values))


class Recorder:
    """Converts segments, failing on 'bad'; remembers what it saw."""

    seen: list[str] = []

    @classmethod
    def parse(cls, raw: str) -> str:
        cls.seen.append(raw)
        if raw == "bad":
            raise ValueError("bad segment")
        return raw.upper()


class TestGet:
    """Tests for AppSettings.get."""

    def test_converts_present_value(self) -> None:
        settings = _settings(Retries="3")
        assert settings.get("Retries", int) == 3

    @pytest.mark.parametrize(
        "target,expected",
        [(int, 0), (float, 0.0), (bool, False), (str, ""), (Decimal, Decimal("0")), (Int32, 0)],
    )
    def test_missing_key_returns_default(self, target, expected) -> None:
        assert _settings().get("Missing", target) == expected

    def test_missing_key_for_reference_type_returns_none(self) -> None:
        assert _settings().get("Missing", list[int]) is None

    @pytest.mark.parametrize("blank", BLANK_VALUES)
    def test_blank_value_behaves_as_missing(self, blank: str) -> None:
        settings = _settings(Retries=blank)
        assert settings.get("Retries", int) == 0
        assert settings.get("Retries") == ""

    def test_explicit_default_for_missing_key(self) -> None:
        assert _settings().get("Port", int, default=8080) == 8080

    def test_explicit_default_ignored_when_present(self) -> None:
        assert _settings(Port="9000").get("Port", int, default=8080) == 9000

    def test_string_overload_matches_typed_get(self) -> None:
        settings = _settings(Name=" primary ")
        assert settings.get("Name") == settings.get("Name", str) == " primary "
        assert settings.get("Missing") == settings.get("Missing", str)

    def test_keys_are_case_sensitive(self) -> None:
        settings = _settings(Mode="fast")
        assert settings.get("mode") == ""
        assert settings.get("Mode") == "fast"

    def test_conversion_failure_propagates(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            _settings(Retries="three").get("Retries", int)
        assert exc_info.value.kind is ErrorKind.BAD_FORMAT
        assert exc_info.value.key == "Retries"


class TestGetRequired:
    """Tests for AppSettings.get_required."""

    def test_returns_converted_value(self) -> None:
        assert _settings(Ratio="0.25").get_required("Ratio", float) == 0.25

    def test_missing_key_raises(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            _settings().get_required("ApiUrl", int)
        error = exc_info.value
        assert error.kind is ErrorKind.MISSING_SETTING
        assert error.key == "ApiUrl"
        assert "ApiUrl" in str(error)
        assert error.__cause__ is None

    @pytest.mark.parametrize("blank", BLANK_VALUES)
    def test_blank_value_raises(self, blank: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            _settings(ApiUrl=blank).get_required("ApiUrl")
        assert exc_info.value.kind is ErrorKind.MISSING_SETTING

    def test_string_overload(self) -> None:
        settings = _settings(ApiUrl="https://example.com")
        assert settings.get_required("ApiUrl") == settings.get_required("ApiUrl", str)

    def test_overflow(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            _settings(Max="99999999999999999999").get_required("Max", Int32)
        assert exc_info.value.kind is ErrorKind.OVERFLOW

    @pytest.mark.parametrize("raw", ["1e400", "-1e400"])
    def test_float_overflow(self, raw: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            _settings(Ratio=raw).get_required("Ratio", float)
        assert exc_info.value.kind is ErrorKind.OVERFLOW
        assert exc_info.value.key == "Ratio"

    @pytest.mark.parametrize("raw", ["yes", "no", "1", "on", "t", "y"])
    def test_bool_accepts_only_true_or_false(self, raw: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            _settings(Enabled=raw).get("Enabled", bool)
        assert exc_info.value.kind is ErrorKind.BAD_FORMAT

    @pytest.mark.parametrize("raw", ["1.0", "1_000"])
    def test_int32_rejects_lax_spellings(self, raw: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            _settings(Max=raw).get_required("Max", Int32)
        assert exc_info.value.kind is ErrorKind.BAD_FORMAT


class TestRoundTrip:
    """Formatting a value and reading it back yields the original."""

    @pytest.mark.parametrize("value", [0, -1, 42, 2**31 - 1, -(2**31)])
    def test_int(self, value: int) -> None:
        settings = _settings(Value=str(value))
        assert settings.get("Value", int) == value
        assert settings.get("Value", Int32) == value

    @pytest.mark.parametrize("value", [True, False])
    def test_bool(self, value: bool) -> None:
        assert _settings(Value=str(value)).get("Value", bool) is value

    @pytest.mark.parametrize("value", ["plain", "with spaces", "Server=db;Port=5432"])
    def test_str(self, value: str) -> None:
        assert _settings(Value=value).get("Value", str) == value


class TestSplitAndGet:
    """Tests for AppSettings.split_and_get."""

    def test_splits_and_converts_in_order(self) -> None:
        assert _settings(Ids="1;2;3").split_and_get("Ids", int) == [1, 2, 3]

    def test_defaults_to_strings(self) -> None:
        assert _settings(Hosts="a;b; c").split_and_get("Hosts") == ["a", "b", " c"]

    def test_missing_key_returns_empty_list(self) -> None:
        assert _settings().split_and_get("Ids", int) == []

    @pytest.mark.parametrize("blank", BLANK_VALUES)
    def test_blank_value_returns_empty_list(self, blank: str) -> None:
        assert _settings(Ids=blank).split_and_get("Ids", int) == []

    def test_remove_empty_entries(self) -> None:
        settings = _settings(Ids="1;;3;")
        assert settings.split_and_get("Ids", int) == [1, 3]
        assert settings.split_and_get("Ids", int, options=SplitOptions.REMOVE_EMPTY_ENTRIES) == [1, 3]

    def test_keep_empty_entries_fails_conversion(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            _settings(Ids="1;;3").split_and_get("Ids", int, options=SplitOptions.NONE)
        assert exc_info.value.kind is ErrorKind.BAD_FORMAT
        assert exc_info.value.key == "Ids"

    def test_keep_empty_entries_for_strings(self) -> None:
        result = _settings(Tags="a;;b").split_and_get("Tags", options=SplitOptions.NONE)
        assert result == ["a", "", "b"]

    def test_custom_delimiter(self) -> None:
        assert _settings(Ids="4,5,6").split_and_get("Ids", int, delimiter=",") == [4, 5, 6]

    def test_multi_character_delimiter(self) -> None:
        settings = _settings(Paths="/a::/b::/c")
        assert settings.split_and_get("Paths", delimiter="::") == ["/a", "/b", "/c"]

    def test_empty_delimiter_splits_on_whitespace(self) -> None:
        settings = _settings(Ids="1 2\t3  4\n5")
        assert settings.split_and_get("Ids", int, delimiter="") == [1, 2, 3, 4, 5]

    def test_empty_delimiter_keeps_empty_whitespace_runs(self) -> None:
        result = _settings(Tags="a  b").split_and_get("Tags", delimiter="", options=SplitOptions.NONE)
        assert result == ["a", "", "b"]

    def test_segment_bool_spelling_is_strict(self) -> None:
        settings = _settings(Flags="True;false;yes")
        with pytest.raises(ConfigurationError) as exc_info:
            settings.split_and_get("Flags", bool)
        assert exc_info.value.kind is ErrorKind.BAD_FORMAT

    def test_segment_float_overflow(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            _settings(Ratios="0.5;1e400").split_and_get("Ratios", float)
        assert exc_info.value.kind is ErrorKind.OVERFLOW

    def test_first_failure_wins(self) -> None:
        Recorder.seen = []
        with pytest.raises(ConfigurationError) as exc_info:
            _settings(Items="a;bad;c;bad").split_and_get("Items", Recorder)
        assert exc_info.value.kind is ErrorKind.BAD_FORMAT
        assert Recorder.seen == ["a", "bad"]

    def test_segment_overflow(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            _settings(Ids="1;99999999999").split_and_get("Ids", Int32)
        assert exc_info.value.kind is ErrorKind.OVERFLOW


class TestFromEnviron:
    def test_reads_prefixed_variables(self, monkeypatch) -> None:
        monkeypatch.setenv("APPSETTING_Timeout", "30")
        settings = AppSettings.from_environ(prefix="APPSETTING_")
        assert settings.get_required("Timeout", int) == 30

    def test_missing_variable(self, monkeypatch) -> None:
        monkeypatch.delenv("APPSETTING_Timeout", raising=False)
        settings = AppSettings.from_environ(prefix="APPSETTING_")
        assert settings.get("Timeout", int) == 0
