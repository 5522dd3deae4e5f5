# ==============================
# Integration fixtures
# ==============================
from __future__ import annotations

import os
from pathlib import Path

import pytest


@pytest.fixture
def quiet_repo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Repo root with console logging off, so stdout only carries command output.
    Real EMBEDDATA__ env overrides are cleared to keep the settings deterministic.
    """
    configs = tmp_path / "configs"
    configs.mkdir()
    (configs / "logging.yaml").write_text("console: false\n", encoding="utf-8")
    for key in list(os.environ):
        if key.startswith("EMBEDDATA__"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
