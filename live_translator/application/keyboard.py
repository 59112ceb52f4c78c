from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from live_translator.application.ports import InputSurfaceProbe

DEFAULT_KEYBOARD_HIDDEN_RATIO: Final[float] = 0.15


def obscured_ratio(screen_height: int, visible_bottom: int) -> float:
    """Share of the screen hidden below the visible frame (0.0 when unknown)."""
    if screen_height <= 0:
        return 0.0
    keypad_height = max(screen_height - visible_bottom, 0)
    return keypad_height / screen_height


def is_keyboard_visible(
    ratio: float, threshold: float = DEFAULT_KEYBOARD_HIDDEN_RATIO
) -> bool:
    return ratio >= threshold


@dataclass(slots=True)
class ViewportKeyboardProbe(InputSurfaceProbe):
    threshold: float = DEFAULT_KEYBOARD_HIDDEN_RATIO
    screen_height: int = 0
    visible_bottom: int = 0

    def update(self, *, screen_height: int, visible_bottom: int) -> None:
        self.screen_height = screen_height
        self.visible_bottom = visible_bottom

    def is_input_surface_visible(self) -> bool:
        ratio = obscured_ratio(self.screen_height, self.visible_bottom)
        return is_keyboard_visible(ratio, self.threshold)


@dataclass(slots=True)
class StaticProbe(InputSurfaceProbe):
    visible: bool = True

    def is_input_surface_visible(self) -> bool:
        return self.visible
