from __future__ import annotations

import importlib

gi = importlib.import_module("gi")
require_version = getattr(gi, "require_version", None)
if callable(require_version):
    require_version("Gdk", "4.0")
    require_version("Gtk", "4.0")
Gdk = importlib.import_module("gi.repository.Gdk")
Gtk = importlib.import_module("gi.repository.Gtk")

_STYLESHEET = b"""
window { background-color: #ececec; color: #202020; }
entry {
  background-color: #ffffff;
  color: #202020;
  border: 1px solid #d0d0d0;
  border-radius: 8px;
  padding: 12px;
  font-size: 16px;
}
.live-translation { font-size: 18px; margin-top: 8px; }
.live-translation.saving { color: #5a5a5a; }
.history-title { font-size: 16px; margin-top: 16px; font-weight: 600; }
.history-item { font-size: 16px; }
list { background-color: transparent; }
.banner {
  padding: 6px 10px;
  border-radius: 8px;
  margin-bottom: 6px;
  color: #ffffff;
}
.banner-success { background-color: #2d5a3a; }
.banner-info { background-color: #2d4b6a; }
.banner-warning { background-color: #6a4b2d; }
.banner-error { background-color: #6a2d2d; }
"""

_applied = False


def apply_theme() -> None:
    global _applied
    if _applied:
        return
    display = Gdk.Display.get_default()
    if display is None:
        return
    provider = Gtk.CssProvider()
    provider.load_from_data(_STYLESHEET)
    Gtk.StyleContext.add_provider_for_display(
        display,
        provider,
        Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION,
    )
    _applied = True
