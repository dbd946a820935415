"""Unit tests for settings and the radio factory."""

from __future__ import annotations

import pytest

from tuner.core.config import APISettings, RadioSettings, Settings
from tuner.radio import ConfigurationError, ExecutableRadio, MockRadio, get_radio


class TestRadioSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("RADIO_BACKEND", "RADIO_EXECUTABLE", "RADIO_STRICT"):
            monkeypatch.delenv(name, raising=False)
        radio = RadioSettings()

        assert radio.backend == "executable"
        assert radio.executable == "/usr/local/bin/piradio"
        assert radio.strict is False
        assert radio.tune_timeout > 0
        assert radio.status_timeout > 0

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RADIO_BACKEND", " Mock ")
        monkeypatch.setenv("RADIO_EXECUTABLE", "/opt/radio/bin/piradio")
        monkeypatch.setenv("RADIO_STATUS_TIMEOUT", "2.5")
        monkeypatch.setenv("RADIO_STRICT", "true")
        radio = RadioSettings()

        assert radio.backend == "mock"
        assert radio.executable == "/opt/radio/bin/piradio"
        assert radio.status_timeout == 2.5
        assert radio.strict is True

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ValueError):
            RadioSettings(tune_timeout=0)


class TestAPISettings:
    def test_cors_origins_from_string(self) -> None:
        api = APISettings(cors_origins="http://a.example, http://b.example,")
        assert api.cors_origins == ["http://a.example", "http://b.example"]


class TestSettings:
    def test_nested_groups(self) -> None:
        settings = Settings(radio=RadioSettings(strict=True))
        assert settings.radio.strict is True
        assert settings.logging.level


class TestGetRadio:
    def test_executable(self) -> None:
        radio = get_radio(RadioSettings(backend="executable", executable="/bin/true", status_timeout=1.5))
        assert isinstance(radio, ExecutableRadio)
        assert radio.executable == "/bin/true"
        assert radio.status_timeout == 1.5

    def test_mock(self) -> None:
        assert isinstance(get_radio(RadioSettings(backend="mock")), MockRadio)

    def test_unknown(self) -> None:
        with pytest.raises(ConfigurationError):
            get_radio(RadioSettings(backend="hackrf"))
