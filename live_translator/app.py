from __future__ import annotations

import importlib
import logging

from live_translator.config import AppConfig, load_config
from live_translator.controllers.screen_controller import ScreenController
from live_translator.runtime_namespace import app_id, runtime_namespace
from live_translator import gtk_types
from live_translator import telemetry

gi = importlib.import_module("gi")
require_version = getattr(gi, "require_version", None)
if callable(require_version):
    require_version("GLib", "2.0")
    require_version("Gtk", "4.0")
GLib = importlib.import_module("gi.repository.GLib")
Gtk = importlib.import_module("gi.repository.Gtk")
setattr(gtk_types.Gtk, "Application", getattr(Gtk, "Application"))

logger = logging.getLogger(__name__)


class LiveTranslatorApp(gtk_types.Gtk.Application):
    def __init__(self, config: AppConfig | None = None) -> None:
        super().__init__(application_id=app_id())
        self._config = config if config is not None else load_config()
        self._screen: ScreenController | None = None
        self.connect("startup", self._on_startup)
        self.connect("activate", self._on_activate)
        self.connect("shutdown", self._on_shutdown)

    def _on_startup(self, _app: gtk_types.Gtk.Application) -> None:
        GLib.set_application_name("Live Translator")
        GLib.set_prgname(runtime_namespace())
        telemetry.log_event("app.startup", app_id=app_id())

    def _on_activate(self, _app: gtk_types.Gtk.Application) -> None:
        if self._screen is None or not self._screen.is_open:
            self._screen = ScreenController(
                app=self,
                config=self._config,
                on_exit=self._on_screen_exit,
            )
        self._screen.open()

    def _on_screen_exit(self) -> None:
        telemetry.log_event("app.screen_exit")
        self.quit()

    def _on_shutdown(self, _app: gtk_types.Gtk.Application) -> None:
        if self._screen is not None:
            try:
                self._screen.close()
            except Exception:
                logger.exception("failed to close translation screen")
            self._screen = None
        telemetry.log_event("app.shutdown")
