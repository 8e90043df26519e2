"""Shorthand registry: static table name -> decorator type.

Populated once per decorator type when it is declared. A shorthand call
``name(*args)`` is equivalent to ``decorate(DecoratorType, *args)``.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from interpose.domain.exceptions import UnknownShorthandError
from interpose.domain.model.descriptor import DecoratorDescriptor
from interpose.domain.naming import derive_shorthand

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

DECORATOR_NAME_ATTRIBUTE = "decorator_name"


@dataclass(frozen=True, slots=True)
class ShorthandRegistration:
    """One shorthand binding.

    Attributes:
        name: Shorthand identifier.
        decorator_type: Decorator type the shorthand stands for.
        explicit: True if declared by the type, False if derived from its name.
    """

    name: str
    decorator_type: type
    explicit: bool = False

    def descriptor(self, *args: Any, **kwargs: Any) -> DecoratorDescriptor:
        """Descriptor for one shorthand call."""
        return DecoratorDescriptor.of(self.decorator_type, *args, **kwargs)


class ShorthandRegistry:
    """Process-wide shorthand table.

    Explicit names are registered as given (not validated). Derived names
    that fail the identifier grammar are skipped silently. On collision the
    latest registration wins.
    """

    __slots__ = ("_entries", "_lock")

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._entries: dict[str, ShorthandRegistration] = {}
        self._lock = threading.Lock()

    def declare(self, decorator_type: type) -> ShorthandRegistration | None:
        """Register shorthand for a newly declared decorator type.

        Uses the type's own ``decorator_name`` attribute if set (not
        inherited), else the name derived from its qualified name.

        Returns:
            Registration, or None if the derived name is not an identifier.
        """
        explicit = vars(decorator_type).get(DECORATOR_NAME_ATTRIBUTE)
        if explicit is not None:
            return self.register(explicit, decorator_type, explicit=True)

        name = derive_shorthand(decorator_type.__qualname__)
        if name is None:
            logger.debug("no shorthand for %s: not an identifier", decorator_type.__qualname__)
            return None
        return self.register(name, decorator_type, explicit=False)

    def register(
        self,
        name: str,
        decorator_type: type,
        *,
        explicit: bool = True,
    ) -> ShorthandRegistration:
        """Bind name to decorator type, replacing any previous binding."""
        registration = ShorthandRegistration(
            name=name,
            decorator_type=decorator_type,
            explicit=explicit,
        )
        with self._lock:
            previous = self._entries.get(name)
            self._entries[name] = registration

        if previous is not None and previous.decorator_type is not decorator_type:
            logger.warning(
                "shorthand %r rebound from %s to %s",
                name,
                previous.decorator_type.__qualname__,
                decorator_type.__qualname__,
            )
        else:
            logger.debug("shorthand %r -> %s", name, decorator_type.__qualname__)
        return registration

    def unregister(self, name: str) -> ShorthandRegistration | None:
        """Remove binding. Returns removed registration or None."""
        with self._lock:
            return self._entries.pop(name, None)

    def get(self, name: str) -> ShorthandRegistration | None:
        """Registration for name. Returns None if not registered."""
        with self._lock:
            return self._entries.get(name)

    def resolve(self, name: str) -> ShorthandRegistration:
        """Registration for name.

        Raises:
            UnknownShorthandError: If name is not registered.
        """
        registration = self.get(name)
        if registration is None:
            raise UnknownShorthandError(name)
        return registration

    def names(self) -> frozenset[str]:
        """All registered shorthand names."""
        with self._lock:
            return frozenset(self._entries)

    def snapshot(self) -> Mapping[str, ShorthandRegistration]:
        """Read-only copy of the whole table."""
        with self._lock:
            return MappingProxyType(dict(self._entries))

    def restore(self, snapshot: Mapping[str, ShorthandRegistration]) -> None:
        """Replace the whole table with a previous snapshot."""
        with self._lock:
            self._entries = dict(snapshot)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


shorthands = ShorthandRegistry()
