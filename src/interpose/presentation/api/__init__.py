"""Public API: class-body declarations and functional helpers."""

from interpose.presentation.api.functions import (
    declare,
    decorate,
    decorated_methods,
    decorators_of,
    is_dispatcher,
    pending_of,
    state_of,
)
from interpose.presentation.api.meta import Decorated, DecoratedMeta, DeclarationNamespace

__all__ = [
    "Decorated",
    "DecoratedMeta",
    "DeclarationNamespace",
    "declare",
    "decorate",
    "decorated_methods",
    "decorators_of",
    "is_dispatcher",
    "pending_of",
    "state_of",
]
