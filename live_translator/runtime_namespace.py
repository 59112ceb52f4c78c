from __future__ import annotations

import os

DEFAULT_APP_ID = "com.livetranslator.desktop"
DEFAULT_RUNTIME_NAMESPACE = "live_translator"


def app_id() -> str:
    value = os.environ.get("LIVE_TRANSLATOR_APP_ID", "").strip()
    return value or DEFAULT_APP_ID


def runtime_namespace() -> str:
    value = os.environ.get("LIVE_TRANSLATOR_RUNTIME_NAMESPACE", "").strip()
    return value or DEFAULT_RUNTIME_NAMESPACE
