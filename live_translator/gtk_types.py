from __future__ import annotations

from typing import Callable


class Gtk:
    STYLE_PROVIDER_PRIORITY_APPLICATION: int

    class Application:
        def __init__(self, application_id: str | None = None, flags: int = 0) -> None:
            raise NotImplementedError

        def run(self, argv: list[str] | None = None) -> int:
            raise NotImplementedError

        def quit(self) -> None:
            raise NotImplementedError

        def connect(self, name: str, callback: object) -> int:
            raise NotImplementedError

        def get_active_window(self) -> Gtk.ApplicationWindow | None:
            raise NotImplementedError

    class Widget:
        def add_css_class(self, name: str) -> None:
            raise NotImplementedError

        def remove_css_class(self, name: str) -> None:
            raise NotImplementedError

        def set_hexpand(self, expand: bool) -> None:
            raise NotImplementedError

        def set_vexpand(self, expand: bool) -> None:
            raise NotImplementedError

        def set_visible(self, visible: bool) -> None:
            raise NotImplementedError

        def get_next_sibling(self) -> Gtk.Widget | None:
            raise NotImplementedError

        def add_controller(self, controller: object) -> None:
            raise NotImplementedError

        def remove_controller(self, controller: object) -> None:
            raise NotImplementedError

        def pick(self, x: float, y: float, flags: int) -> Gtk.Widget | None:
            raise NotImplementedError

        def get_parent(self) -> Gtk.Widget | None:
            raise NotImplementedError

        def grab_focus(self) -> bool:
            raise NotImplementedError

        def connect(self, name: str, callback: Callable[..., object]) -> int:
            raise NotImplementedError

        def disconnect(self, handler_id: int) -> None:
            raise NotImplementedError

    class ApplicationWindow(Widget):
        def __init__(self, application: Gtk.Application | None = None) -> None:
            raise NotImplementedError

        def present(self) -> None:
            raise NotImplementedError

        def set_child(self, child: Gtk.Widget | None) -> None:
            raise NotImplementedError

        def set_title(self, title: str) -> None:
            raise NotImplementedError

        def set_default_size(self, width: int, height: int) -> None:
            raise NotImplementedError

        def set_focus(self, focus: Gtk.Widget | None) -> None:
            raise NotImplementedError

        def set_focus_visible(self, setting: bool) -> None:
            raise NotImplementedError

        def is_active(self) -> bool:
            raise NotImplementedError

        def close(self) -> None:
            raise NotImplementedError

        def destroy(self) -> None:
            raise NotImplementedError

    class Box(Widget):
        def __init__(self, orientation: int = 0, spacing: int = 0) -> None:
            raise NotImplementedError

        def append(self, child: Gtk.Widget) -> None:
            raise NotImplementedError

        def remove(self, child: Gtk.Widget) -> None:
            raise NotImplementedError

        def get_first_child(self) -> Gtk.Widget | None:
            raise NotImplementedError

        def set_margin_top(self, margin: int) -> None:
            raise NotImplementedError

        def set_margin_bottom(self, margin: int) -> None:
            raise NotImplementedError

        def set_margin_start(self, margin: int) -> None:
            raise NotImplementedError

        def set_margin_end(self, margin: int) -> None:
            raise NotImplementedError

    class Label(Widget):
        def __init__(self, label: str = "") -> None:
            raise NotImplementedError

        def set_text(self, text: str) -> None:
            raise NotImplementedError

        def set_wrap(self, wrap: bool) -> None:
            raise NotImplementedError

        def set_wrap_mode(self, mode: int) -> None:
            raise NotImplementedError

        def set_xalign(self, align: float) -> None:
            raise NotImplementedError

        def set_selectable(self, selectable: bool) -> None:
            raise NotImplementedError

    class Entry(Widget):
        def get_text(self) -> str:
            raise NotImplementedError

        def set_text(self, text: str) -> None:
            raise NotImplementedError

        def set_placeholder_text(self, text: str | None) -> None:
            raise NotImplementedError

    class Revealer(Widget):
        def set_reveal_child(self, reveal: bool) -> None:
            raise NotImplementedError

        def set_transition_duration(self, duration: int) -> None:
            raise NotImplementedError

        def set_child(self, child: Gtk.Widget | None) -> None:
            raise NotImplementedError

    class ListBox(Widget):
        def append(self, child: Gtk.Widget) -> None:
            raise NotImplementedError

        def remove(self, child: Gtk.Widget) -> None:
            raise NotImplementedError

        def get_first_child(self) -> Gtk.Widget | None:
            raise NotImplementedError

    class ScrolledWindow(Widget):
        def set_child(self, child: Gtk.Widget | None) -> None:
            raise NotImplementedError

    class CssProvider:
        def load_from_data(self, data: bytes) -> None:
            raise NotImplementedError

    class StyleContext:
        @staticmethod
        def add_provider_for_display(
            display: Gdk.Display, provider: Gtk.CssProvider, priority: int
        ) -> None:
            raise NotImplementedError


class Gdk:
    class Display:
        @staticmethod
        def get_default() -> Gdk.Display | None:
            raise NotImplementedError
