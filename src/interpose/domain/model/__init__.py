"""Domain model entities."""

from interpose.domain.model.configuration import DEFAULT_CONFIG, DecorationConfig
from interpose.domain.model.descriptor import DecoratorDescriptor
from interpose.domain.model.enums import DecorationState, ResultPolicy
from interpose.domain.model.method_entry import DecoratedMethodEntry
from interpose.domain.model.method_table import DecoratedMethodTable
from interpose.domain.model.pending_queue import PendingQueue

__all__ = [
    # Enums
    "DecorationState",
    "ResultPolicy",
    # Value objects
    "DecoratorDescriptor",
    "DecoratedMethodEntry",
    "DecorationConfig",
    "DEFAULT_CONFIG",
    # Containers
    "PendingQueue",
    "DecoratedMethodTable",
]
