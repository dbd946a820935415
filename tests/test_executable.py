"""Unit tests for the subprocess-backed radio controller."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from tuner.api import dependencies
from tuner.api.main import app
from tuner.radio import (
    ExecutableRadio,
    RadioBackend,
    RadioCommandError,
    RadioNotFoundError,
    RadioTimeoutError,
)


class TestExecutableRadio:
    def test_status_captures_stdout(self, stub_executable: Path) -> None:
        radio = ExecutableRadio(str(stub_executable))
        result = radio.status()

        assert result.ok
        assert result.args == []
        assert result.returncode == 0
        assert result.lines == ["Station: Radio 4", "Frequency: 93.5 MHz"]

    def test_tune_passes_station_as_single_argument(
        self, stub_executable: Path, tmp_path: Path
    ) -> None:
        radio = ExecutableRadio(str(stub_executable))
        result = radio.tune("r4")

        assert result.ok
        assert result.args == ["r4"]
        assert (tmp_path / "tune.log").read_text() == "r4\n"

    def test_tune_rejects_empty_station(self, stub_executable: Path) -> None:
        radio = ExecutableRadio(str(stub_executable))
        with pytest.raises(ValueError):
            radio.tune("")

    def test_status_lines(self, stub_executable: Path) -> None:
        radio = ExecutableRadio(str(stub_executable))
        assert radio.status_lines() == ["Station: Radio 4", "Frequency: 93.5 MHz"]

    def test_missing_executable(self, tmp_path: Path) -> None:
        radio = ExecutableRadio(str(tmp_path / "nope"))
        result = radio.status()

        assert not result.ok
        assert not result.spawned
        assert result.not_found
        assert result.lines == []
        with pytest.raises(RadioNotFoundError):
            result.raise_for_status()

    def test_not_executable(self, tmp_path: Path) -> None:
        path = tmp_path / "piradio"
        path.write_text("#!/bin/sh\necho hi\n")
        path.chmod(0o644)
        radio = ExecutableRadio(str(path))

        assert not radio.check()
        result = radio.status()
        assert not result.spawned
        assert not result.not_found
        assert result.error is not None
        with pytest.raises(RadioCommandError):
            result.raise_for_status()

    def test_non_zero_exit(self, tmp_path: Path, write_script) -> None:
        path = write_script(tmp_path / "piradio", "echo partial\necho boom >&2\nexit 3\n")
        result = ExecutableRadio(str(path)).status()

        assert result.spawned
        assert not result.ok
        assert result.returncode == 3
        assert result.lines == ["partial"]
        with pytest.raises(RadioCommandError, match="boom"):
            result.raise_for_status()

    def test_timeout(self, tmp_path: Path, write_script) -> None:
        path = write_script(tmp_path / "piradio", "exec sleep 5\n")
        radio = ExecutableRadio(str(path), status_timeout=0.2)
        result = radio.status()

        assert result.timed_out
        assert result.returncode is None
        assert not result.ok
        assert result.duration < 5
        with pytest.raises(RadioTimeoutError):
            result.raise_for_status()

    def test_check(self, stub_executable: Path, tmp_path: Path) -> None:
        assert ExecutableRadio(str(stub_executable)).check()
        assert not ExecutableRadio(str(tmp_path / "nope")).check()

    def test_backend(self, stub_executable: Path) -> None:
        assert ExecutableRadio(str(stub_executable)).backend is RadioBackend.EXECUTABLE

    def test_invalid_utf8_is_replaced(self, tmp_path: Path, write_script) -> None:
        path = write_script(tmp_path / "piradio", "printf 'Station: Caf\\351 FM\\nFrequency: 93.5\\n'\n")
        result = ExecutableRadio(str(path)).status()

        assert result.ok
        assert result.lines == ["Station: Caf\ufffd FM", "Frequency: 93.5"]

    def test_invalid_utf8_status_is_served(self, tmp_path: Path, write_script) -> None:
        path = write_script(tmp_path / "piradio", "printf 'Station: Caf\\351 FM\\nFrequency: 93.5\\n'\n")
        radio = ExecutableRadio(str(path))
        app.dependency_overrides[dependencies.get_radio] = lambda: radio
        try:
            response = TestClient(app, raise_server_exceptions=False).get("/tune")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 200
        assert response.text == "Station: Caf\ufffd FM\nFrequency: 93.5\n"

    def test_control_characters_stay_inside_lines(self, tmp_path: Path, write_script) -> None:
        path = write_script(tmp_path / "piradio", "printf 'Station:\\fRadio 4\\nA\\035B\\n'\n")
        result = ExecutableRadio(str(path)).status()

        assert result.lines == ["Station:\x0cRadio 4", "A\x1dB"]
