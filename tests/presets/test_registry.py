import logging

import pytest
from returns.pipeline import is_successful
from returns.result import Success

from exceptions import PresetAlreadyRegisteredError, PresetNotFoundError
from filters import Alpha, Brightness, Contrast, Gamma
from presets import DEFAULT_PRESETS, PresetLookup, PresetTable, get_default_presets


@pytest.fixture
def presets() -> PresetTable:
    return PresetTable({"Soft": Contrast(-40)})


class TestPresetTable:
    def test_lookup_returns_registered_filter(self, presets: PresetTable):
        assert presets.lookup("Soft") == Success(Contrast(-40))

    def test_unknown_name_is_a_failure(self, presets: PresetTable):
        result = presets.lookup("Vivid")

        assert not is_successful(result)
        error = result.failure()
        assert isinstance(error, PresetNotFoundError)
        assert error.preset_name == "Vivid"

    def test_unknown_name_logs_warning(
        self, presets: PresetTable, caplog: pytest.LogCaptureFixture
    ):
        with caplog.at_level(logging.DEBUG):
            _ = presets.lookup("Vivid")

        assert "Failed to find preset" in caplog.text
        assert "WARNING" in {record.levelname for record in caplog.records}

    def test_getitem_raises_not_found(self, presets: PresetTable):
        with pytest.raises(PresetNotFoundError, match="Vivid"):
            _ = presets["Vivid"]

    def test_getitem_returns_filter(self, presets: PresetTable):
        assert presets["Soft"] == Contrast(-40)

    def test_table_is_a_lookup(self, presets: PresetTable):
        assert isinstance(presets, PresetLookup)
        assert presets("Soft") == presets.lookup("Soft")

    def test_register_adds_preset(self, presets: PresetTable):
        presets.register("Bright", Brightness(1.5))

        assert "Bright" in presets
        assert len(presets) == 2
        assert presets.names() == ["Soft", "Bright"]
        assert list(presets) == presets.names()

    def test_duplicate_name_is_rejected(self, presets: PresetTable):
        with pytest.raises(PresetAlreadyRegisteredError, match="Soft"):
            presets.register("Soft", Brightness(1.5))

    def test_empty_name_is_rejected(self, presets: PresetTable):
        with pytest.raises(ValueError, match="cannot be empty"):
            presets.register("", Brightness(1.5))

    def test_empty_table_has_no_presets(self):
        assert len(PresetTable()) == 0


@pytest.mark.parametrize(
    "name, expected",
    [
        pytest.param("110% Brightness", Brightness(1.1), id="brightness"),
        pytest.param("3x Contrast", Contrast(128), id="contrast"),
        pytest.param("Lena", Gamma(0.25), id="lena"),
        pytest.param("Mandrill", Gamma(2.0), id="mandrill"),
        pytest.param("80% Transparency", Alpha(0.8), id="transparency"),
    ],
)
def test_default_presets(name: str, expected):
    assert get_default_presets()[name] == expected


def test_default_presets_table_is_shared():
    assert get_default_presets() is get_default_presets()
    assert set(get_default_presets().names()) >= set(DEFAULT_PRESETS)
