from __future__ import annotations

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field

from live_translator.application.ports import Scheduler


def _default_queue() -> deque[Callable[[], None]]:
    return deque()


@dataclass(slots=True)
class DeferredQueue(Scheduler):
    """Runs callbacks on the next tick, when the host calls ``drain``."""

    _queue: deque[Callable[[], None]] = field(default_factory=_default_queue)

    def call_soon(self, callback: Callable[[], None]) -> None:
        self._queue.append(callback)

    def drain(self) -> int:
        # Callbacks scheduled while draining run on the following tick.
        count = len(self._queue)
        for _ in range(count):
            callback = self._queue.popleft()
            callback()
        return count

    def __len__(self) -> int:
        return len(self._queue)
