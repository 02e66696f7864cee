"""Unit tests for civiltime.config."""

import pytest

from civiltime import config


class TestGetDefaultOffset:
    """Reading CIVILTIME_DEFAULT_OFFSET."""

    @staticmethod
    def test_unset(monkeypatch: pytest.MonkeyPatch) -> None:
        """No variable means no default offset."""
        monkeypatch.delenv(config.DEFAULT_OFFSET_ENV, raising=False)
        assert config.get_default_offset() is None

    @staticmethod
    def test_empty(monkeypatch: pytest.MonkeyPatch) -> None:
        """An empty variable counts as unset."""
        monkeypatch.setenv(config.DEFAULT_OFFSET_ENV, "")
        assert config.get_default_offset() is None

    @staticmethod
    @pytest.mark.parametrize(
        ("value", "minutes"), [("Z", 0), ("+05:30", 330), (" -08:00 ", -480)]
    )
    def test_valid(monkeypatch: pytest.MonkeyPatch, value: str, minutes: int) -> None:
        """Offsets are returned in minutes east of UTC."""
        monkeypatch.setenv(config.DEFAULT_OFFSET_ENV, value)
        assert config.get_default_offset() == minutes

    @staticmethod
    @pytest.mark.parametrize("value", ["UTC", "+5:00", "+24:00", "05:00"])
    def test_invalid(monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        """Anything else is rejected with the offending value."""
        monkeypatch.setenv(config.DEFAULT_OFFSET_ENV, value)
        with pytest.raises(config.InvalidDefaultOffsetError) as excinfo:
            config.get_default_offset()
        assert excinfo.value.value == value
        assert "CIVILTIME_DEFAULT_OFFSET" in str(excinfo.value)


def test_env_var_name() -> None:
    """The variable name is derived from the project prefix."""
    assert config.DEFAULT_OFFSET_ENV == "CIVILTIME_DEFAULT_OFFSET"
