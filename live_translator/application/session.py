from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from live_translator.application.history import HistoryLog
from live_translator.application.keyboard import (
    DEFAULT_KEYBOARD_HIDDEN_RATIO,
    is_keyboard_visible,
)
from live_translator.application.ports import (
    InputSurfaceProbe,
    Scheduler,
    SessionEffects,
)
from live_translator.application.transform import DEFAULT_TRANSFORM, LiveTransform
from live_translator import telemetry


class DisengageTrigger(Enum):
    BLUR = "blur"
    KEYBOARD_HIDDEN = "keyboard_hidden"
    OUTSIDE_TAP = "outside_tap"
    BACK = "back"
    SUBMIT = "submit"


class BackOutcome(Enum):
    CONSUMED = "consumed"
    PROPAGATED = "propagated"


@dataclass(slots=True)
class SessionState:
    input_text: str = ""
    live_translation: str = ""
    is_focused: bool = False
    pending_save: bool = False
    history: HistoryLog = field(default_factory=HistoryLog)


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    input_text: str
    live_translation: str
    is_focused: bool
    pending_save: bool
    history: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class CommitEvent:
    value: str
    trigger: DisengageTrigger
    appended: bool


class TranslationSession:
    """Focus/back/history state machine of the translation screen.

    Every way of leaving the input field goes through ``_disengage``: commits
    are either immediate or deferred to the next scheduler tick, and always
    guarded by the same check, so a value reaches the history at most once no
    matter how many triggers fire for the same disengagement.
    """

    def __init__(
        self,
        *,
        effects: SessionEffects,
        scheduler: Scheduler,
        transform: LiveTransform = DEFAULT_TRANSFORM,
        keyboard_hidden_ratio: float = DEFAULT_KEYBOARD_HIDDEN_RATIO,
        on_change: Callable[[SessionSnapshot], None] | None = None,
        on_commit: Callable[[CommitEvent], None] | None = None,
    ) -> None:
        self._effects = effects
        self._scheduler = scheduler
        self._transform = transform
        self._keyboard_hidden_ratio = keyboard_hidden_ratio
        self._on_change = on_change
        self._on_commit = on_commit
        self._state = SessionState()
        self._flush_scheduled = False
        self._pending_trigger: DisengageTrigger | None = None
        self._releasing = False

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def history(self) -> tuple[str, ...]:
        return self._state.history.snapshot()

    def snapshot(self) -> SessionSnapshot:
        state = self._state
        return SessionSnapshot(
            input_text=state.input_text,
            live_translation=state.live_translation,
            is_focused=state.is_focused,
            pending_save=state.pending_save,
            history=state.history.snapshot(),
        )

    def on_text_changed(self, text: str) -> None:
        if text == self._state.input_text:
            return
        self._state.input_text = text
        self._state.live_translation = self._transform(text)
        self._notify_change()

    def on_focus_changed(self, focused: bool) -> None:
        was_focused = self._state.is_focused
        self._state.is_focused = focused
        if self._releasing:
            # Echo of our own clear_focus; the running transition commits.
            return
        if focused:
            if not was_focused:
                self._notify_change()
            return
        if self._commit(DisengageTrigger.BLUR) is None and was_focused:
            self._notify_change()

    def on_viewport_changed(self, ratio: float) -> None:
        self.on_keyboard_visibility(
            is_keyboard_visible(ratio, self._keyboard_hidden_ratio)
        )

    def on_keyboard_visibility(self, visible: bool) -> None:
        if visible or not self._state.is_focused:
            return
        self._disengage(DisengageTrigger.KEYBOARD_HIDDEN, defer=True)

    def poll(self, probe: InputSurfaceProbe) -> None:
        self.on_keyboard_visibility(probe.is_input_surface_visible())

    def on_outside_tap(self) -> None:
        if not self._state.is_focused:
            return
        self._disengage(DisengageTrigger.OUTSIDE_TAP, defer=True)

    def on_back_action(self) -> BackOutcome:
        if not self._state.is_focused:
            telemetry.log_event("session.back", outcome=BackOutcome.PROPAGATED.value)
            self._effects.propagate_back_to_host()
            return BackOutcome.PROPAGATED
        self._disengage(DisengageTrigger.BACK, defer=False)
        telemetry.log_event("session.back", outcome=BackOutcome.CONSUMED.value)
        return BackOutcome.CONSUMED

    def on_submit(self) -> CommitEvent | None:
        event = self._commit(DisengageTrigger.SUBMIT)
        if event is None and self._state.live_translation:
            # Already in history.
            event = CommitEvent(
                value=self._state.live_translation,
                trigger=DisengageTrigger.SUBMIT,
                appended=False,
            )
            if self._on_commit is not None:
                self._on_commit(event)
        self._release_input()
        return event

    def flush_pending(self) -> bool:
        self._flush_scheduled = False
        if not self._state.pending_save:
            return False
        trigger = self._pending_trigger or DisengageTrigger.KEYBOARD_HIDDEN
        event = self._commit(trigger)
        if event is None:
            self._state.pending_save = False
            self._pending_trigger = None
            self._notify_change()
        return event is not None

    def _disengage(self, trigger: DisengageTrigger, *, defer: bool) -> None:
        if trigger is DisengageTrigger.OUTSIDE_TAP:
            self._release_input(hide_first=False)
        else:
            self._release_input()
        if defer:
            self._request_commit(trigger)
        else:
            self._commit(trigger)

    def _release_input(self, *, hide_first: bool = True) -> None:
        self._state.is_focused = False
        self._releasing = True
        try:
            if hide_first:
                self._effects.hide_keyboard()
                self._effects.clear_focus()
            else:
                self._effects.clear_focus()
                self._effects.hide_keyboard()
        finally:
            self._releasing = False
        self._notify_change()

    def _request_commit(self, trigger: DisengageTrigger) -> None:
        if not self._can_commit():
            return
        self._state.pending_save = True
        self._pending_trigger = trigger
        telemetry.log_event("session.pending", trigger=trigger.value)
        self._notify_change()
        if self._flush_scheduled:
            return
        self._flush_scheduled = True
        self._scheduler.call_soon(self.flush_pending)

    def _can_commit(self) -> bool:
        state = self._state
        if not state.input_text or not state.live_translation:
            return False
        return state.live_translation not in state.history

    def _commit(self, trigger: DisengageTrigger) -> CommitEvent | None:
        if not self._can_commit():
            return None
        value = self._state.live_translation
        self._state.history.append(value)
        self._state.pending_save = False
        self._pending_trigger = None
        telemetry.log_event(
            "session.commit",
            trigger=trigger.value,
            history_size=len(self._state.history),
            **telemetry.text_meta(value),
        )
        event = CommitEvent(value=value, trigger=trigger, appended=True)
        if self._on_commit is not None:
            self._on_commit(event)
        self._notify_change()
        return event

    def _notify_change(self) -> None:
        if self._on_change is not None:
            self._on_change(self.snapshot())
