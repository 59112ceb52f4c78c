from __future__ import annotations

from live_translator.notifications.models import (
    Notification as Notification,
    NotificationDuration as NotificationDuration,
    NotificationLevel as NotificationLevel,
)

__all__ = [
    "Notification",
    "NotificationDuration",
    "NotificationLevel",
]
