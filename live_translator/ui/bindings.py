from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class SignalSource(Protocol):
    def connect(self, name: str, callback: Callable[..., object], *args: object) -> int: ...

    def disconnect(self, handler_id: int) -> None: ...


class ControllerHost(Protocol):
    def add_controller(self, controller: object) -> None: ...

    def remove_controller(self, controller: object) -> None: ...


@dataclass(slots=True)
class _SignalHandle:
    source: SignalSource
    handler_id: int


@dataclass(slots=True)
class _ControllerHandle:
    host: ControllerHost
    controller: object


@dataclass(slots=True)
class SignalBindings:
    """Handlers registered for one screen, released together exactly once.

    Usable as a context manager: leaving the block releases everything.
    """

    _signals: list[_SignalHandle] = field(default_factory=list)
    _controllers: list[_ControllerHandle] = field(default_factory=list)
    _released: bool = False

    @property
    def released(self) -> bool:
        return self._released

    def __len__(self) -> int:
        return len(self._signals) + len(self._controllers)

    def connect(
        self,
        source: SignalSource,
        name: str,
        callback: Callable[..., object],
        *args: object,
    ) -> int:
        if self._released:
            raise RuntimeError("bindings already released")
        handler_id = source.connect(name, callback, *args)
        self._signals.append(_SignalHandle(source=source, handler_id=handler_id))
        return handler_id

    def attach(self, host: ControllerHost, controller: object) -> None:
        if self._released:
            raise RuntimeError("bindings already released")
        host.add_controller(controller)
        self._controllers.append(_ControllerHandle(host=host, controller=controller))

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        signals, self._signals = self._signals, []
        controllers, self._controllers = self._controllers, []
        for handle in reversed(signals):
            try:
                handle.source.disconnect(handle.handler_id)
            except Exception:
                logger.warning("failed to disconnect handler %s", handle.handler_id)
        for entry in reversed(controllers):
            try:
                entry.host.remove_controller(entry.controller)
            except Exception:
                logger.warning("failed to remove event controller")

    def __enter__(self) -> "SignalBindings":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()
