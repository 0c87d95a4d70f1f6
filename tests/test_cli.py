from __future__ import annotations

import logging

import pytest

from homesphere.cli import main
from homesphere.hs_logging import ROOT_LOGGER


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch):
    for name in ("HOMESPHERE_LOG_LEVEL", "HOMESPHERE_DEMO_SCENE_ID", "HOMESPHERE_REPORT_HOURS"):
        monkeypatch.delenv(name, raising=False)
    root = logging.getLogger(ROOT_LOGGER)
    previous = root.level
    yield
    root.setLevel(previous)


def test_demo_scene_runs(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--log-level", "error"]) == 0
    out = capsys.readouterr().out
    assert '"scene_name": "Good night"' in out
    assert '"succeeded": 2' in out
    assert '"Living Room AC": 16.8' in out


def test_unknown_scene_returns_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--scene", "99", "--log-level", "error"]) == 1
    assert "Scene 99 not found" in capsys.readouterr().out
