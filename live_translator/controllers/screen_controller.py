from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from live_translator.application.ports import Scheduler, SessionEffects
from live_translator.application.session import (
    CommitEvent,
    SessionSnapshot,
    TranslationSession,
)
from live_translator.application.transform import DEFAULT_TRANSFORM, LiveTransform
from live_translator.application.view_state import ScreenPresenter, ScreenViewState
from live_translator.config import AppConfig
from live_translator.notifications import Notification
from live_translator.notifications import messages as notify_messages
from live_translator import gtk_types
from live_translator import telemetry


class ScreenWindowProtocol(Protocol):
    def present(self) -> None: ...

    def close(self) -> None: ...

    def release(self) -> None: ...

    def clear_focus(self) -> None: ...

    def hide_keyboard(self) -> None: ...

    def apply_state(self, state: ScreenViewState) -> None: ...

    def show_banner(self, notification: Notification) -> None: ...

    def is_input_surface_visible(self) -> bool: ...


class WindowFactory(Protocol):
    def __call__(
        self,
        *,
        app: gtk_types.Gtk.Application,
        controller: "ScreenController",
        width: int,
        height: int,
    ) -> ScreenWindowProtocol: ...


def _build_window(
    *,
    app: gtk_types.Gtk.Application,
    controller: "ScreenController",
    width: int,
    height: int,
) -> ScreenWindowProtocol:
    from live_translator.ui.screen_window import ScreenCallbacks, ScreenWindow

    return ScreenWindow(
        app=app,
        callbacks=ScreenCallbacks(
            on_text_changed=controller.session.on_text_changed,
            on_focus_changed=controller.session.on_focus_changed,
            on_submit=controller.handle_submit,
            on_outside_tap=controller.session.on_outside_tap,
            on_back=controller.handle_back,
            on_surface_changed=controller.handle_surface_change,
            on_close_request=controller.handle_close_request,
        ),
        width=width,
        height=height,
    )


def _default_scheduler() -> Scheduler:
    from live_translator.ui.glib_scheduler import GLibIdleScheduler

    return GLibIdleScheduler()


class ScreenController(SessionEffects):
    """Owns one translation screen: its session, its window and their wiring.

    The window's event handlers are registered once in ``open`` and released
    once, either by an unfocused back action or by the window closing.
    """

    def __init__(
        self,
        *,
        app: gtk_types.Gtk.Application,
        config: AppConfig,
        on_exit: Callable[[], None],
        scheduler: Scheduler | None = None,
        window_factory: WindowFactory = _build_window,
        transform: LiveTransform = DEFAULT_TRANSFORM,
    ) -> None:
        self._app = app
        self._config = config
        self._on_exit = on_exit
        self._window_factory = window_factory
        self._presenter = ScreenPresenter(placeholder=config.screen.placeholder)
        self._session = TranslationSession(
            effects=self,
            scheduler=scheduler if scheduler is not None else _default_scheduler(),
            transform=transform,
            keyboard_hidden_ratio=config.screen.keyboard_hidden_ratio,
            on_change=self._render,
            on_commit=self._notify_commit,
        )
        self._window: ScreenWindowProtocol | None = None
        self._closed = False

    @property
    def session(self) -> TranslationSession:
        return self._session

    @property
    def view_state(self) -> ScreenViewState:
        return self._presenter.state

    @property
    def is_open(self) -> bool:
        return self._window is not None and not self._closed

    def open(self) -> None:
        if self._closed:
            return
        if self._window is None:
            self._window = self._window_factory(
                app=self._app,
                controller=self,
                width=self._config.window.width,
                height=self._config.window.height,
            )
            self._window.apply_state(self._presenter.state)
            telemetry.log_event("screen.bind")
        self._window.present()

    def close(self) -> None:
        window = self._teardown()
        if window is not None:
            window.close()

    def handle_back(self) -> None:
        self._session.on_back_action()

    def handle_submit(self) -> None:
        self._session.on_submit()

    def handle_surface_change(self) -> None:
        if self._window is None or self._closed:
            return
        self._session.poll(self._window)

    def handle_close_request(self) -> None:
        if self._teardown() is not None:
            self._on_exit()

    def hide_keyboard(self) -> None:
        if self._window is not None:
            self._window.hide_keyboard()

    def clear_focus(self) -> None:
        if self._window is not None:
            self._window.clear_focus()

    def propagate_back_to_host(self) -> None:
        if not self._config.screen.close_on_back:
            return
        window = self._teardown()
        if window is None:
            return
        window.close()
        self._on_exit()

    def _teardown(self) -> ScreenWindowProtocol | None:
        if self._closed or self._window is None:
            return None
        self._closed = True
        window = self._window
        window.release()
        telemetry.log_event("screen.release", history_size=len(self._session.history))
        return window

    def _render(self, snapshot: SessionSnapshot) -> None:
        state = self._presenter.render(snapshot)
        if self._window is not None and not self._closed:
            self._window.apply_state(state)

    def _notify_commit(self, event: CommitEvent) -> None:
        if self._window is None or self._closed:
            return
        self._window.show_banner(notify_messages.for_commit(event))
