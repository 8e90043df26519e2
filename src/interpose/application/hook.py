"""Interception hook: the method-definition event.

Every definition path (class body finalization, ``Owner.name = fn`` on a
DecoratedMeta class, ``Declaration.define``) ends here:

    queue empty      -> method stored as is, no indirection
    queue non-empty  -> drain, instantiate in order, record entry,
                        install dispatcher under the public name

Descriptors never followed by a definition stay pending and attach to the
next method defined on the same owner, whatever it is.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any

from interpose.application.decorator import Decorator
from interpose.application.dispatcher import make_dispatcher, require_call
from interpose.application.owner_state import ensure_state, state_for
from interpose.domain.model.method_entry import DecoratedMethodEntry

if TYPE_CHECKING:
    from collections.abc import Callable

    from interpose.application.owner_state import OwnerState
    from interpose.domain.model.descriptor import DecoratorDescriptor

logger = logging.getLogger(__name__)

# Compiler-generated class body functions (PEP 649).
_IMPLICIT_NAMES = frozenset({"__annotate__", "__annotate_func__"})


def is_definition(name: str, value: object) -> bool:
    """Check if binding value to name counts as a method definition."""
    return inspect.isfunction(value) and name not in _IMPLICIT_NAMES


def enqueue(owner: type, descriptor: DecoratorDescriptor) -> None:
    """Queue descriptor on owner for its next method definition."""
    ensure_state(owner).queue.append(descriptor)
    logger.debug("queued %s on %s", descriptor.type_name, owner.__qualname__)


def method_defined(owner: type, name: str, function: Callable[..., Any]) -> Callable[..., Any]:
    """Handle definition of method name on owner.

    Args:
        owner: Owner type.
        name: Public method name.
        function: Method body as declared.

    Returns:
        What ends up stored under name: function itself if nothing was
        pending, otherwise the installed dispatcher.
    """
    state = state_for(owner)
    if state is None:
        type.__setattr__(owner, name, function)
        return function

    with state.lock:
        descriptors = state.queue.drain()
        if not descriptors:
            type.__setattr__(owner, name, function)
            return function
        return install(state, name, function, descriptors)


def install(
    state: OwnerState,
    name: str,
    function: Callable[..., Any],
    descriptors: tuple[DecoratorDescriptor, ...],
) -> Callable[..., Any]:
    """Instantiate decorators and install dispatcher for name.

    Replaces any previous entry for name wholesale. Constructor errors
    propagate; the drained descriptors are not re-queued.

    Returns:
        Installed dispatcher.
    """
    owner = state.owner
    with state.decorating(name):
        decorators = tuple(descriptor.instantiate(owner, name) for descriptor in descriptors)
        if state.config.check_capability_on_install:
            for decorator in decorators:
                require_call(decorator)

        entry = DecoratedMethodEntry(
            owner=owner,
            method_name=name,
            decorators=decorators,
            original=function,
            descriptors=descriptors,
        )
        for decorator in decorators:
            if isinstance(decorator, Decorator):
                decorator.attach(entry)
        dispatcher = make_dispatcher(entry, state.config)
        previous = state.table.put(entry)
        type.__setattr__(owner, name, dispatcher)

    if previous is not None:
        logger.debug(
            "re-decorated %s.%s, %d prior decorator(s) dropped",
            owner.__qualname__,
            name,
            len(previous),
        )
    logger.debug(
        "decorated %s.%s with %s",
        owner.__qualname__,
        name,
        ", ".join(d.type_name for d in descriptors),
    )
    return dispatcher


def end_of_unit(state: OwnerState, unit: str) -> None:
    """Close one declaration unit. Leftover descriptors stay pending."""
    pending = state.queue.snapshot()
    if pending and state.config.warn_on_pending:
        logger.warning(
            "%s ended with %d pending decorator(s) (%s); they will attach to the "
            "next method defined on %s",
            unit,
            len(pending),
            ", ".join(d.type_name for d in pending),
            state.owner.__qualname__,
        )
