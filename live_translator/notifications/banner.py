from __future__ import annotations

import importlib

from live_translator.notifications.models import Notification, NotificationLevel
from live_translator import gtk_types

gi = importlib.import_module("gi")
require_version = getattr(gi, "require_version", None)
if callable(require_version):
    require_version("GLib", "2.0")
    require_version("Gtk", "4.0")
GLib = importlib.import_module("gi.repository.GLib")
Gtk = importlib.import_module("gi.repository.Gtk")


TRANSITION_MS = 150
SPACING = 8


_LEVEL_CLASSES: dict[NotificationLevel, str] = {
    NotificationLevel.SUCCESS: "banner-success",
    NotificationLevel.INFO: "banner-info",
    NotificationLevel.WARNING: "banner-warning",
    NotificationLevel.ERROR: "banner-error",
}


class BannerHost:
    """Revealer strip that shows one notification and hides it after its duration."""

    def __init__(self) -> None:
        self._label = Gtk.Label(label="")
        self._label.set_xalign(0.0)
        self._label.set_wrap(True)
        self._label.set_wrap_mode(Gtk.WrapMode.WORD_CHAR)
        self._label.set_hexpand(True)

        box = Gtk.Box(
            orientation=Gtk.Orientation.HORIZONTAL,
            spacing=SPACING,
        )
        box.add_css_class("banner")
        box.append(self._label)
        self._box = box

        revealer = Gtk.Revealer()
        revealer.set_reveal_child(False)
        revealer.set_transition_duration(TRANSITION_MS)
        revealer.set_child(box)
        self._revealer = revealer
        self._hide_source_id: int | None = None

    @property
    def widget(self) -> gtk_types.Gtk.Revealer:
        return self._revealer

    def notify(self, notification: Notification) -> None:
        GLib.idle_add(self._show_notification, notification)

    def _show_notification(self, notification: Notification) -> bool:
        self._apply_level(notification.level)
        self._label.set_text(notification.message)
        self._revealer.set_reveal_child(True)
        self._cancel_hide()
        self._hide_source_id = GLib.timeout_add(
            notification.duration.value, self._hide_expired
        )
        return False

    def _hide_expired(self) -> bool:
        self._hide_source_id = None
        self._revealer.set_reveal_child(False)
        return False

    def _cancel_hide(self) -> None:
        if self._hide_source_id is None:
            return
        GLib.source_remove(self._hide_source_id)
        self._hide_source_id = None

    def _apply_level(self, level: NotificationLevel) -> None:
        for css_class in _LEVEL_CLASSES.values():
            self._box.remove_css_class(css_class)
        self._box.add_css_class(_LEVEL_CLASSES[level])
