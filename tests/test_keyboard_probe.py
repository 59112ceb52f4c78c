from __future__ import annotations

import pytest

from live_translator.application.keyboard import (
    DEFAULT_KEYBOARD_HIDDEN_RATIO,
    StaticProbe,
    ViewportKeyboardProbe,
    is_keyboard_visible,
    obscured_ratio,
)


def test_obscured_ratio_from_geometry() -> None:
    assert obscured_ratio(1000, 600) == pytest.approx(0.4)
    assert obscured_ratio(1000, 1000) == 0.0
    assert obscured_ratio(1000, 1200) == 0.0
    assert obscured_ratio(0, 100) == 0.0


def test_threshold_is_fifteen_percent_inclusive() -> None:
    assert DEFAULT_KEYBOARD_HIDDEN_RATIO == 0.15
    assert is_keyboard_visible(0.15) is True
    assert is_keyboard_visible(0.149) is False
    assert is_keyboard_visible(0.3, threshold=0.5) is False


def test_viewport_probe_tracks_latest_layout() -> None:
    probe = ViewportKeyboardProbe()
    probe.update(screen_height=2000, visible_bottom=1200)
    assert probe.is_input_surface_visible() is True

    probe.update(screen_height=2000, visible_bottom=1950)
    assert probe.is_input_surface_visible() is False


def test_static_probe() -> None:
    assert StaticProbe().is_input_surface_visible() is True
    assert StaticProbe(visible=False).is_input_surface_visible() is False
