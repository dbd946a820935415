"""Shared fixtures for the Radio Tuner tests."""

from __future__ import annotations

import stat
from pathlib import Path
from typing import Callable, Iterator

import pytest
from fastapi.testclient import TestClient

from tuner.api import dependencies
from tuner.api.main import app
from tuner.radio import MockRadio


def _write_script(path: Path, body: str) -> Path:
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


@pytest.fixture
def write_script() -> Callable[[Path, str], Path]:
    """Factory writing an executable shell script and returning its path."""
    return _write_script


@pytest.fixture
def mock_radio() -> MockRadio:
    """Mock radio tuned to Radio 4."""
    return MockRadio(current="r4")


@pytest.fixture
def client(mock_radio: MockRadio) -> Iterator[TestClient]:
    """Test client whose radio dependency is the mock radio."""
    app.dependency_overrides[dependencies.get_radio] = lambda: mock_radio
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        dependencies.reset_radio()


@pytest.fixture
def stub_executable(tmp_path: Path) -> Path:
    """Stub radio program logging tune calls and printing padded status text."""
    log = tmp_path / "tune.log"
    return _write_script(
        tmp_path / "piradio",
        f'if [ $# -gt 0 ]; then echo "$1" >> "{log}"; echo "tuned $1"; exit 0; fi\n'
        "printf '\\n  Station: Radio 4  \\n\\t\\nFrequency: 93.5 MHz\\n   \\n'\n",
    )
