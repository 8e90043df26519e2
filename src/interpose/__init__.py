"""interpose - ordered method decorators attached at declaration time."""

import logging

__version__ = "0.1.0"

from interpose.application import Declaration, Decorator, shorthands
from interpose.application.reporters import DecorationReporter, ReportConfig
from interpose.domain import (
    DEFAULT_CONFIG,
    DeclarationClosedError,
    DecorationConfig,
    DecorationState,
    InterposeError,
    MissingCapabilityError,
    NotDecoratedError,
    ResultPolicy,
    UnknownShorthandError,
)
from interpose.presentation.api import (
    Decorated,
    DecoratedMeta,
    declare,
    decorate,
    decorated_methods,
    decorators_of,
    is_dispatcher,
    pending_of,
    state_of,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_CONFIG",
    "Declaration",
    "DeclarationClosedError",
    "Decorated",
    "DecoratedMeta",
    "DecorationConfig",
    "DecorationReporter",
    "DecorationState",
    "Decorator",
    "InterposeError",
    "MissingCapabilityError",
    "NotDecoratedError",
    "ReportConfig",
    "ResultPolicy",
    "UnknownShorthandError",
    "__version__",
    "declare",
    "decorate",
    "decorated_methods",
    "decorators_of",
    "is_dispatcher",
    "pending_of",
    "state_of",
    "shorthands",
]
