"""Pending queue of decorator descriptors."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from interpose.domain.model.descriptor import DecoratorDescriptor


class PendingQueue:
    """Ordered descriptors waiting for the next method definition on one owner.

    Contract:
      - append() keeps registration order
      - drain() returns the whole contents and clears, atomically
      - each definition event owns everything queued before it

    Thread Safety:
      - _lock protects _items; a drain never observes a partial append
    """

    __slots__ = ("_items", "_lock")

    def __init__(self) -> None:
        """Initialize empty queue."""
        self._items: list[DecoratorDescriptor] = []
        self._lock = threading.Lock()

    def append(self, descriptor: DecoratorDescriptor) -> None:
        """Queue descriptor after all previously queued ones."""
        with self._lock:
            self._items.append(descriptor)

    def drain(self) -> tuple[DecoratorDescriptor, ...]:
        """Snapshot contents in order and clear the queue.

        Returns:
            Queued descriptors, oldest first. Empty tuple if nothing pending.
        """
        with self._lock:
            items = tuple(self._items)
            self._items.clear()
        return items

    def snapshot(self) -> tuple[DecoratorDescriptor, ...]:
        """Current contents without draining."""
        with self._lock:
            return tuple(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __iter__(self) -> Iterator[DecoratorDescriptor]:
        return iter(self.snapshot())
