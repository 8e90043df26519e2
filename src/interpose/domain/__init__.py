"""interpose domain layer.

Pure values and rules, no framework state.
Only imports: typing, dataclasses, enum, re, threading, types, collections.abc
"""

from interpose.domain.exceptions import (
    DeclarationClosedError,
    InterposeError,
    MissingCapabilityError,
    NotDecoratedError,
    UnknownShorthandError,
)
from interpose.domain.model import (
    DEFAULT_CONFIG,
    DecoratedMethodEntry,
    DecoratedMethodTable,
    DecorationConfig,
    DecorationState,
    DecoratorDescriptor,
    PendingQueue,
    ResultPolicy,
)
from interpose.domain.naming import derive_shorthand, is_identifier
from interpose.domain.ports import DecoratorLike

__all__ = [
    # Exceptions
    "InterposeError",
    "MissingCapabilityError",
    "NotDecoratedError",
    "UnknownShorthandError",
    "DeclarationClosedError",
    # Model
    "DecorationState",
    "ResultPolicy",
    "DecoratorDescriptor",
    "DecoratedMethodEntry",
    "DecoratedMethodTable",
    "DecorationConfig",
    "DEFAULT_CONFIG",
    "PendingQueue",
    # Naming
    "derive_shorthand",
    "is_identifier",
    # Ports
    "DecoratorLike",
]
