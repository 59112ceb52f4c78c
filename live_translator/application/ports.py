from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class SessionEffects(Protocol):
    def hide_keyboard(self) -> None: ...

    def clear_focus(self) -> None: ...

    def propagate_back_to_host(self) -> None: ...


class Scheduler(Protocol):
    def call_soon(self, callback: Callable[[], None]) -> None: ...


class InputSurfaceProbe(Protocol):
    def is_input_surface_visible(self) -> bool: ...
