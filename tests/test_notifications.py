from __future__ import annotations

from live_translator.application.session import CommitEvent, DisengageTrigger
from live_translator.notifications import messages
from live_translator.notifications.models import NotificationDuration, NotificationLevel


def test_saved_mentions_value() -> None:
    note = messages.history_saved("HELLO")
    assert note.message == "Saved to history: HELLO"
    assert note.level is NotificationLevel.SUCCESS


def test_long_values_are_shortened() -> None:
    note = messages.history_already_present("A" * 100)
    assert note.message.endswith("...")
    assert len(note.message) < 100
    assert note.level is NotificationLevel.INFO


def test_commit_event_maps_to_notification() -> None:
    saved = CommitEvent(value="ABC", trigger=DisengageTrigger.BLUR, appended=True)
    duplicate = CommitEvent(
        value="ABC", trigger=DisengageTrigger.SUBMIT, appended=False
    )

    assert messages.for_commit(saved).level is NotificationLevel.SUCCESS
    assert messages.for_commit(duplicate).message == "Already in history: ABC"


def test_notifications_use_the_short_duration() -> None:
    assert [duration.value for duration in NotificationDuration] == [2000]
    assert messages.history_saved("x").duration is NotificationDuration.SHORT
