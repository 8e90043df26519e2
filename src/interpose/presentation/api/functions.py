"""Functional API over owner types."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from interpose.application.declaration import Declaration
from interpose.application.dispatcher import is_dispatcher
from interpose.application.hook import enqueue
from interpose.application.owner_state import state_for
from interpose.domain.model.descriptor import DecoratorDescriptor
from interpose.domain.model.enums import DecorationState

if TYPE_CHECKING:
    from collections.abc import Mapping

    from interpose.domain.model.configuration import DecorationConfig

__all__ = [
    "declare",
    "decorate",
    "decorated_methods",
    "decorators_of",
    "is_dispatcher",
    "pending_of",
    "state_of",
]


def decorate(owner: type, decorator_type: Any, *args: Any, **kwargs: Any) -> None:
    """Queue decorator on owner for its next method definition.

    Decorator type and arguments are not checked here; constructor
    arguments are checked when a method definition consumes the descriptor.

    Raises:
        TypeError: If owner does not accept attributes (builtin types).
    """
    enqueue(owner, DecoratorDescriptor.of(decorator_type, *args, **kwargs))


def declare(owner: type, *, config: DecorationConfig | None = None) -> Declaration:
    """Open explicit declaration unit on owner."""
    return Declaration(owner, config=config)


def decorated_methods(owner: type) -> Mapping[str, tuple[Any, ...]]:
    """Read-only view: method name -> decorator instances, for owner itself.

    Inherited decorated methods are not listed; query the declaring base.
    """
    state = state_for(owner)
    if state is None:
        return MappingProxyType({})
    return state.table.as_mapping()


def decorators_of(owner: type, method_name: str) -> tuple[Any, ...]:
    """Decorator instances of owner.method_name in registration order."""
    state = state_for(owner)
    return () if state is None else state.table.decorators_of(method_name)


def pending_of(owner: type) -> tuple[DecoratorDescriptor, ...]:
    """Descriptors queued on owner and not consumed yet."""
    state = state_for(owner)
    return () if state is None else state.queue.snapshot()


def state_of(owner: type, method_name: str) -> DecorationState:
    """Lifecycle state of owner.method_name."""
    state = state_for(owner)
    if state is None:
        return DecorationState.UNDECORATED
    return state.state_of(method_name)
