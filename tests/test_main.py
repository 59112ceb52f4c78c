from __future__ import annotations

from pathlib import Path

from live_translator import main as main_module
from live_translator.config import config_path, default_config, save_config


def test_reset_removes_config(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.delenv("LIVE_TRANSLATOR_RUNTIME_NAMESPACE", raising=False)
    save_config(default_config())
    monkeypatch.setenv("LIVE_TRANSLATOR_RESET", "1")

    main_module._reset_if_requested()

    assert not config_path().exists()


def test_reset_is_skipped_without_flag(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.delenv("LIVE_TRANSLATOR_RESET", raising=False)
    save_config(default_config())

    main_module._reset_if_requested()

    assert config_path().exists()


def test_headless_mode_runs_terminal_host(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    calls: list[object] = []
    monkeypatch.setattr(main_module.repl, "run", lambda host: calls.append(host) or 0)

    assert main_module.main(["--headless"]) == 0
    assert len(calls) == 1
