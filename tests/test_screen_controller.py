from __future__ import annotations

from live_translator.application.scheduling import DeferredQueue
from live_translator.application.view_state import ScreenViewState
from live_translator.config import AppConfig, ScreenConfig, default_config
from live_translator.controllers.screen_controller import ScreenController
from live_translator.notifications import Notification


class _FakeWindow:
    def __init__(self, width: int, height: int) -> None:
        self.size = (width, height)
        self.states: list[ScreenViewState] = []
        self.banners: list[Notification] = []
        self.calls: list[str] = []
        self.surface_visible = True

    def present(self) -> None:
        self.calls.append("present")

    def close(self) -> None:
        self.calls.append("close")

    def release(self) -> None:
        self.calls.append("release")

    def clear_focus(self) -> None:
        self.calls.append("clear_focus")

    def hide_keyboard(self) -> None:
        self.calls.append("hide_keyboard")

    def apply_state(self, state: ScreenViewState) -> None:
        self.states.append(state)

    def show_banner(self, notification: Notification) -> None:
        self.banners.append(notification)

    def is_input_surface_visible(self) -> bool:
        return self.surface_visible


class _Host:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.windows: list[_FakeWindow] = []
        self.exits = 0
        self.queue = DeferredQueue()
        self.controller = ScreenController(
            app=object(),
            config=config or default_config(),
            on_exit=self._on_exit,
            scheduler=self.queue,
            window_factory=self._build_window,
        )

    def _build_window(
        self, *, app: object, controller: ScreenController, width: int, height: int
    ) -> _FakeWindow:
        window = _FakeWindow(width, height)
        self.windows.append(window)
        return window

    def _on_exit(self) -> None:
        self.exits += 1

    @property
    def window(self) -> _FakeWindow:
        return self.windows[0]


def _no_close_config() -> AppConfig:
    defaults = default_config()
    return AppConfig(
        screen=ScreenConfig(
            placeholder=defaults.screen.placeholder,
            keyboard_hidden_ratio=defaults.screen.keyboard_hidden_ratio,
            close_on_back=False,
        ),
        window=defaults.window,
    )


def test_open_builds_window_once() -> None:
    host = _Host()

    host.controller.open()
    host.controller.open()

    assert len(host.windows) == 1
    assert host.window.size == (420, 520)
    assert host.window.calls == ["present", "present"]
    assert host.window.states == [ScreenViewState.empty()]
    assert host.controller.is_open is True


def test_typing_renders_live_translation() -> None:
    host = _Host()
    host.controller.open()
    session = host.controller.session

    session.on_focus_changed(True)
    session.on_text_changed("hello")

    assert host.window.states[-1].live_translation == "Live Translation: HELLO"
    assert host.controller.view_state is host.window.states[-1]


def test_submit_shows_saved_banner_and_history() -> None:
    host = _Host()
    host.controller.open()
    session = host.controller.session
    session.on_focus_changed(True)
    session.on_text_changed("hello")

    host.controller.handle_submit()

    assert host.window.banners[-1].message == "Saved to history: HELLO"
    assert host.window.states[-1].history_lines == ("- HELLO",)
    assert host.window.calls[-2:] == ["hide_keyboard", "clear_focus"]


def test_outside_tap_saves_on_next_tick() -> None:
    host = _Host()
    host.controller.open()
    session = host.controller.session
    session.on_focus_changed(True)
    session.on_text_changed("tap")

    session.on_outside_tap()
    assert host.window.states[-1].saving is True

    host.queue.drain()
    assert host.window.states[-1].saving is False
    assert host.window.states[-1].history_lines == ("- TAP",)


def test_back_without_focus_closes_screen_and_exits() -> None:
    host = _Host()
    host.controller.open()

    host.controller.handle_back()
    host.controller.handle_back()

    assert host.exits == 1
    assert host.window.calls.count("release") == 1
    assert host.window.calls.count("close") == 1
    assert host.controller.is_open is False


def test_back_with_focus_saves_and_keeps_screen() -> None:
    host = _Host()
    host.controller.open()
    session = host.controller.session
    session.on_focus_changed(True)
    session.on_text_changed("abc")

    host.controller.handle_back()

    assert session.history == ("ABC",)
    assert host.exits == 0
    assert host.controller.is_open is True


def test_back_is_ignored_when_closing_is_disabled() -> None:
    host = _Host(_no_close_config())
    host.controller.open()

    host.controller.handle_back()

    assert host.exits == 0
    assert "release" not in host.window.calls


def test_close_request_releases_handlers_once() -> None:
    host = _Host()
    host.controller.open()

    host.controller.handle_close_request()
    host.controller.handle_close_request()
    host.controller.close()

    assert host.exits == 1
    assert host.window.calls.count("release") == 1
    assert "close" not in host.window.calls


def test_closed_screen_stops_rendering() -> None:
    host = _Host()
    host.controller.open()
    host.controller.close()
    rendered = len(host.window.states)

    host.controller.session.on_text_changed("late")

    assert len(host.window.states) == rendered
    assert host.controller.view_state.live_translation == "Live Translation: LATE"


def test_input_surface_loss_saves_through_window_probe() -> None:
    host = _Host()
    host.controller.open()
    session = host.controller.session
    session.on_focus_changed(True)
    session.on_text_changed("away")

    host.controller.handle_surface_change()
    assert session.history == ()

    host.window.surface_visible = False
    host.controller.handle_surface_change()
    host.queue.drain()

    assert session.history == ("AWAY",)
    assert host.window.calls[-2:] == ["hide_keyboard", "clear_focus"]


def test_surface_change_after_close_is_ignored() -> None:
    host = _Host()
    host.controller.open()
    session = host.controller.session
    session.on_focus_changed(True)
    session.on_text_changed("late")
    host.controller.close()

    host.window.surface_visible = False
    host.controller.handle_surface_change()
    host.queue.drain()

    assert session.history == ()
    assert session.state.is_focused is True
