from __future__ import annotations

from pathlib import Path

import pytest


def pytest_sessionfinish(session: pytest.Session, exitstatus: int) -> None:
    # Pytest uses exit code 5 when no tests are collected (for example when a
    # marker filter deselects everything); treat that as success.
    if exitstatus == 5:
        session.exitstatus = 0


def pytest_ignore_collect(collection_path: Path, config: pytest.Config) -> bool:
    del config
    ignored_parts = {
        ".uv-cache",
        ".uv_cache",
        ".venv",
        "__pycache__",
        "build",
        "dist",
    }
    return any(part in collection_path.parts for part in ignored_parts)


@pytest.fixture(autouse=True)
def _quiet_telemetry(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LIVE_TRANSLATOR_LOGGING", "0")
