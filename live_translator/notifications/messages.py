from __future__ import annotations

from live_translator.application.session import CommitEvent
from live_translator.notifications.models import (
    Notification,
    NotificationLevel,
)

PREVIEW_LIMIT = 40


def history_saved(value: str) -> Notification:
    return Notification(
        f"Saved to history: {_preview(value)}",
        NotificationLevel.SUCCESS,
    )


def history_already_present(value: str) -> Notification:
    return Notification(
        f"Already in history: {_preview(value)}",
        NotificationLevel.INFO,
    )


def for_commit(event: CommitEvent) -> Notification:
    if event.appended:
        return history_saved(event.value)
    return history_already_present(event.value)


def _preview(value: str) -> str:
    text = " ".join(value.split())
    if len(text) <= PREVIEW_LIMIT:
        return text
    return f"{text[:PREVIEW_LIMIT - 1]}..."
