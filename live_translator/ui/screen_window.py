from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import importlib

from live_translator.application.view_state import ScreenViewState
from live_translator.notifications import Notification
from live_translator.notifications.banner import BannerHost
from live_translator.ui.bindings import SignalBindings
from live_translator.ui.theme import apply_theme
from live_translator import gtk_types

gi = importlib.import_module("gi")
require_version = getattr(gi, "require_version", None)
if callable(require_version):
    require_version("Gdk", "4.0")
    require_version("Gtk", "4.0")
Gdk = importlib.import_module("gi.repository.Gdk")
Gtk = importlib.import_module("gi.repository.Gtk")

WINDOW_TITLE = "Live Translator"
_BACK_KEYS = ("KEY_Escape", "KEY_Back")


@dataclass(frozen=True, slots=True)
class ScreenCallbacks:
    on_text_changed: Callable[[str], None]
    on_focus_changed: Callable[[bool], None]
    on_submit: Callable[[], None]
    on_outside_tap: Callable[[], None]
    on_back: Callable[[], None]
    on_surface_changed: Callable[[], None]
    on_close_request: Callable[[], None]


class ScreenWindow:
    def __init__(
        self,
        *,
        app: gtk_types.Gtk.Application,
        callbacks: ScreenCallbacks,
        width: int,
        height: int,
    ) -> None:
        self._callbacks = callbacks
        self._bindings = SignalBindings()

        window = Gtk.ApplicationWindow(application=app)
        window.set_title(WINDOW_TITLE)
        window.set_default_size(width, height)

        root = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=16)
        root.set_margin_top(16)
        root.set_margin_bottom(16)
        root.set_margin_start(16)
        root.set_margin_end(16)
        root.set_vexpand(True)
        self._banner = BannerHost()
        root.append(self._banner.widget)

        entry = Gtk.Entry()
        entry.set_hexpand(True)
        root.append(entry)

        live_label = Gtk.Label(label="")
        live_label.set_xalign(0.0)
        live_label.set_wrap(True)
        live_label.set_wrap_mode(Gtk.WrapMode.WORD_CHAR)
        live_label.set_selectable(True)
        live_label.add_css_class("live-translation")
        root.append(live_label)

        history_title = Gtk.Label(label="")
        history_title.set_xalign(0.0)
        history_title.add_css_class("history-title")
        root.append(history_title)

        history_list = Gtk.ListBox()
        history_list.set_selection_mode(Gtk.SelectionMode.NONE)
        scroller = Gtk.ScrolledWindow()
        scroller.set_vexpand(True)
        scroller.set_child(history_list)
        root.append(scroller)

        window.set_child(root)
        apply_theme()

        self._window = window
        self._root = root
        self._entry = entry
        self._live_label = live_label
        self._history_title = history_title
        self._history_list = history_list
        self._rendered_state: ScreenViewState | None = None
        self._bind()

    def present(self) -> None:
        self._window.present()

    def close(self) -> None:
        self.release()
        self._window.close()

    def release(self) -> None:
        self._bindings.release()

    def clear_focus(self) -> None:
        self._window.set_focus(None)

    def hide_keyboard(self) -> None:
        # The on-screen keyboard follows the input method context of the entry.
        if hasattr(self._entry, "reset_im_context"):
            self._entry.reset_im_context()
        self._window.set_focus_visible(False)

    def is_input_surface_visible(self) -> bool:
        return bool(self._window.is_active())

    def show_banner(self, notification: Notification) -> None:
        self._banner.notify(notification)

    def apply_state(self, state: ScreenViewState) -> None:
        previous = self._rendered_state
        if previous == state:
            return
        if self._entry.get_text() != state.input_text:
            self._entry.set_text(state.input_text)
        if previous is None or state.placeholder != previous.placeholder:
            self._entry.set_placeholder_text(state.placeholder)
        if previous is None or state.live_translation != previous.live_translation:
            self._live_label.set_text(state.live_translation)
        if previous is None or state.saving != previous.saving:
            if state.saving:
                self._live_label.add_css_class("saving")
            else:
                self._live_label.remove_css_class("saving")
        if previous is None or state.history_title != previous.history_title:
            self._history_title.set_text(state.history_title)
        if previous is None or state.history_lines != previous.history_lines:
            self._render_history(state.history_lines)
        self._rendered_state = state

    def _bind(self) -> None:
        bindings = self._bindings
        bindings.connect(self._entry, "changed", self._handle_changed)
        bindings.connect(self._entry, "activate", self._handle_activate)

        focus = Gtk.EventControllerFocus()
        bindings.connect(focus, "enter", self._handle_focus_enter)
        bindings.connect(focus, "leave", self._handle_focus_leave)
        bindings.attach(self._entry, focus)

        keys = Gtk.EventControllerKey()
        bindings.connect(keys, "key-pressed", self._handle_key_pressed)
        bindings.attach(self._window, keys)

        click = Gtk.GestureClick()
        click.set_propagation_phase(Gtk.PropagationPhase.CAPTURE)
        bindings.connect(click, "pressed", self._handle_pressed)
        bindings.attach(self._root, click)

        bindings.connect(self._window, "notify::is-active", self._handle_active)
        bindings.connect(self._window, "close-request", self._handle_close_request)

    def _render_history(self, lines: tuple[str, ...]) -> None:
        child = self._history_list.get_first_child()
        while child is not None:
            next_child = child.get_next_sibling()
            self._history_list.remove(child)
            child = next_child
        for line in lines:
            label = Gtk.Label(label=line)
            label.set_xalign(0.0)
            label.set_wrap(True)
            label.set_wrap_mode(Gtk.WrapMode.WORD_CHAR)
            label.set_selectable(True)
            label.add_css_class("history-item")
            self._history_list.append(label)

    def _handle_changed(self, entry: gtk_types.Gtk.Entry) -> None:
        self._callbacks.on_text_changed(entry.get_text())

    def _handle_activate(self, _entry: gtk_types.Gtk.Entry) -> None:
        self._callbacks.on_submit()

    def _handle_focus_enter(self, _controller: object) -> None:
        self._callbacks.on_focus_changed(True)

    def _handle_focus_leave(self, _controller: object) -> None:
        self._callbacks.on_focus_changed(False)

    def _handle_key_pressed(
        self, _controller: object, keyval: int, _keycode: int, _state: int
    ) -> bool:
        for name in _BACK_KEYS:
            if keyval == getattr(Gdk, name, None):
                self._callbacks.on_back()
                return True
        return False

    def _handle_pressed(
        self, _gesture: object, _n_press: int, x: float, y: float
    ) -> None:
        if self._is_inside_entry(x, y):
            return
        self._callbacks.on_outside_tap()

    def _handle_active(self, _window: object, _pspec: object) -> None:
        self._callbacks.on_surface_changed()

    def _handle_close_request(self, _window: object) -> bool:
        self._callbacks.on_close_request()
        return False

    def _is_inside_entry(self, x: float, y: float) -> bool:
        target = self._root.pick(x, y, Gtk.PickFlags.DEFAULT)
        while target is not None:
            if target is self._entry:
                return True
            target = target.get_parent()
        return False
