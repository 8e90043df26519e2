"""Class-body declaration support.

    class Widget(Decorated):
        decorate(Logged)
        surround_it()                 # any registered shorthand

        def render(self):
            ...

Inside the body, ``decorate`` and registered shorthands resolve as bare
names. A shorthand never shadows a name visible in the defining scope
(locals, module globals, builtins): those resolve as in any other class.
Each ``def`` drains what was queued before it. Decorators are instantiated
in a finalization pass once the owner type exists.
"""

from __future__ import annotations

import functools
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from interpose.application.hook import end_of_unit, install, is_definition, method_defined
from interpose.application.owner_state import ensure_state, state_for
from interpose.application.shorthand_registry import shorthands
from interpose.domain.model.descriptor import DecoratorDescriptor
from interpose.domain.model.pending_queue import PendingQueue

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from interpose.application.shorthand_registry import (
        ShorthandRegistration,
        ShorthandRegistry,
    )
    from interpose.domain.model.configuration import DecorationConfig

DECORATE_NAME = "decorate"
CONFIG_KEYWORD = "interpose_config"


@dataclass(frozen=True, slots=True)
class PendingDefinition:
    """Method defined in a class body with the descriptors it drained."""

    name: str
    function: Callable[..., Any]
    descriptors: tuple[DecoratorDescriptor, ...]


class DeclarationNamespace(dict[str, Any]):
    """Class body namespace that records decorated definitions.

    Lookups of names absent from the body fall back to ``decorate``. Other
    names resolve through the defining scopes first (enclosing locals,
    globals, builtins); only names none of them bind reach the shorthand
    table. Rebinding a name drops its earlier recorded definition.
    """

    def __init__(
        self,
        queue: PendingQueue,
        registry: ShorthandRegistry,
        scopes: tuple[Mapping[str, Any], ...] = (),
    ) -> None:
        """Initialize empty namespace bound to the unit's queue.

        Args:
            queue: Pending queue of the declaration unit.
            registry: Shorthand table consulted last.
            scopes: Namespaces of the defining frame, in lookup order.
        """
        super().__init__()
        self.queue = queue
        self._registry = registry
        self._scopes = scopes
        self._definitions: dict[str, PendingDefinition] = {}

    @property
    def definitions(self) -> tuple[PendingDefinition, ...]:
        """Recorded definitions in definition order."""
        return tuple(self._definitions.values())

    def decorate(self, decorator_type: Any, *args: Any, **kwargs: Any) -> None:
        """Queue decorator type for the next definition in this body."""
        self.queue.append(DecoratorDescriptor.of(decorator_type, *args, **kwargs))

    def _shorthand(self, registration: ShorthandRegistration, *args: Any, **kwargs: Any) -> None:
        self.queue.append(registration.descriptor(*args, **kwargs))

    def __getitem__(self, key: str) -> Any:
        try:
            return super().__getitem__(key)
        except KeyError:
            if key == DECORATE_NAME:
                return self.decorate
            if any(key in scope for scope in self._scopes):
                raise
            registration = self._registry.get(key)
            if registration is None:
                raise
            return functools.partial(self._shorthand, registration)

    def __setitem__(self, key: str, value: Any) -> None:
        self._definitions.pop(key, None)
        if is_definition(key, value):
            descriptors = self.queue.drain()
            if descriptors:
                self._definitions[key] = PendingDefinition(key, value, descriptors)
        super().__setitem__(key, value)


def _inherited_config(bases: tuple[type, ...]) -> DecorationConfig | None:
    """Config of the nearest base that has decoration state."""
    for base in bases:
        for klass in base.__mro__:
            state = state_for(klass)
            if state is not None:
                return state.config
    return None


class DecoratedMeta(type):
    """Metaclass making method definitions interceptable.

    Class keyword ``interpose_config`` sets the owner's DecorationConfig;
    otherwise the nearest decorated base's config is used.
    Later ``Owner.name = function`` assignments are definition events too.
    """

    @classmethod
    def __prepare__(
        mcs, name: str, bases: tuple[type, ...], /, **kwargs: Any
    ) -> DeclarationNamespace:
        frame = sys._getframe(1)
        scopes = (frame.f_locals, frame.f_globals, frame.f_builtins)
        return DeclarationNamespace(PendingQueue(), shorthands, scopes)

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        **kwargs: Any,
    ) -> DecoratedMeta:
        config = kwargs.pop(CONFIG_KEYWORD, None) or _inherited_config(bases)
        cls = super().__new__(mcs, name, bases, dict(namespace), **kwargs)

        if isinstance(namespace, DeclarationNamespace):
            queue, definitions = namespace.queue, namespace.definitions
        else:
            queue, definitions = PendingQueue(), ()

        state = ensure_state(cls, queue=queue, config=config)
        with state.lock:
            for definition in definitions:
                install(state, definition.name, definition.function, definition.descriptors)
        end_of_unit(state, f"class body of {cls.__qualname__}")
        return cls

    def __init__(
        cls,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        /,
        **kwargs: Any,
    ) -> None:
        kwargs.pop(CONFIG_KEYWORD, None)
        super().__init__(name, bases, namespace, **kwargs)

    def __setattr__(cls, name: str, value: Any) -> None:
        if is_definition(name, value):
            method_defined(cls, name, value)
        else:
            super().__setattr__(name, value)


class Decorated(metaclass=DecoratedMeta):
    """Convenience base: subclass to declare decorated methods in the body."""

    __slots__ = ()
