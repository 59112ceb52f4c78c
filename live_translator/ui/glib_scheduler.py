from __future__ import annotations

from collections.abc import Callable
import importlib

from live_translator.application.ports import Scheduler

gi = importlib.import_module("gi")
require_version = getattr(gi, "require_version", None)
if callable(require_version):
    require_version("GLib", "2.0")
GLib = importlib.import_module("gi.repository.GLib")


class GLibIdleScheduler(Scheduler):
    """Defers callbacks to the next idle iteration of the GLib main loop."""

    def call_soon(self, callback: Callable[[], None]) -> None:
        def run_once() -> bool:
            callback()
            return False

        GLib.idle_add(run_once)
