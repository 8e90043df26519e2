"""interpose application layer: registration, hook and dispatch."""

from interpose.application.declaration import Declaration
from interpose.application.decorator import Decorator
from interpose.application.dispatcher import is_dispatcher, make_dispatcher
from interpose.application.hook import enqueue, install, is_definition, method_defined
from interpose.application.owner_state import OwnerState, ensure_state, state_for
from interpose.application.shorthand_registry import (
    ShorthandRegistration,
    ShorthandRegistry,
    shorthands,
)

__all__ = [
    "Declaration",
    "Decorator",
    "OwnerState",
    "ShorthandRegistration",
    "ShorthandRegistry",
    "enqueue",
    "ensure_state",
    "install",
    "is_definition",
    "is_dispatcher",
    "make_dispatcher",
    "method_defined",
    "shorthands",
    "state_for",
]
