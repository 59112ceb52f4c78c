from __future__ import annotations

from live_translator import runtime_namespace


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("LIVE_TRANSLATOR_APP_ID", raising=False)
    monkeypatch.delenv("LIVE_TRANSLATOR_RUNTIME_NAMESPACE", raising=False)

    assert runtime_namespace.app_id() == "com.livetranslator.desktop"
    assert runtime_namespace.runtime_namespace() == "live_translator"


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("LIVE_TRANSLATOR_APP_ID", "com.livetranslator.desktop.dev")
    monkeypatch.setenv("LIVE_TRANSLATOR_RUNTIME_NAMESPACE", " live_translator-dev ")

    assert runtime_namespace.app_id() == "com.livetranslator.desktop.dev"
    assert runtime_namespace.runtime_namespace() == "live_translator-dev"
