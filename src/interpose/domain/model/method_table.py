"""Decorated-method table: method name -> DecoratedMethodEntry for one owner."""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from interpose.domain.model.method_entry import DecoratedMethodEntry


class DecoratedMethodTable:
    """Per-owner mapping from method name to its decorated entry.

    Written only by the interception hook. Entries are frozen; put()
    replaces an existing entry for the same name (prior instances dropped,
    never merged). Readers get read-only views.
    """

    __slots__ = ("_entries", "_lock")

    def __init__(self) -> None:
        """Initialize empty table."""
        self._entries: dict[str, DecoratedMethodEntry] = {}
        self._lock = threading.Lock()

    def put(self, entry: DecoratedMethodEntry) -> DecoratedMethodEntry | None:
        """Store entry under its method name.

        Returns:
            Replaced entry, or None if the name was not decorated before.
        """
        with self._lock:
            previous = self._entries.get(entry.method_name)
            self._entries[entry.method_name] = entry
        return previous

    def get(self, method_name: str) -> DecoratedMethodEntry | None:
        """Entry for method name. Returns None if not decorated."""
        with self._lock:
            return self._entries.get(method_name)

    def decorators_of(self, method_name: str) -> tuple[Any, ...]:
        """Ordered decorator instances for method name. Empty if not decorated."""
        entry = self.get(method_name)
        return () if entry is None else entry.decorators

    def entries(self) -> Mapping[str, DecoratedMethodEntry]:
        """Read-only snapshot of all entries, in first-decoration order."""
        with self._lock:
            return MappingProxyType(dict(self._entries))

    def as_mapping(self) -> Mapping[str, tuple[Any, ...]]:
        """Read-only snapshot: method name -> decorator instances."""
        with self._lock:
            return MappingProxyType({name: e.decorators for name, e in self._entries.items()})

    def __contains__(self, method_name: object) -> bool:
        with self._lock:
            return method_name in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        with self._lock:
            return iter(tuple(self._entries))
