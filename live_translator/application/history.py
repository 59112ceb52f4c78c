from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(slots=True)
class HistoryLog:
    """Ordered, append-only log of committed translations.

    Values are unique by exact string equality and never empty.
    """

    _items: list[str] = field(default_factory=list)

    def append(self, value: str) -> bool:
        if not value:
            return False
        if value in self._items:
            return False
        self._items.append(value)
        return True

    def snapshot(self) -> tuple[str, ...]:
        return tuple(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._items))

    def __len__(self) -> int:
        return len(self._items)
