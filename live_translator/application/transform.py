from __future__ import annotations

from typing import Protocol


class LiveTransform(Protocol):
    def __call__(self, text: str) -> str: ...


def uppercase(text: str) -> str:
    return text.upper()


DEFAULT_TRANSFORM: LiveTransform = uppercase
