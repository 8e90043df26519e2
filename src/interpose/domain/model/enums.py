"""Domain enumerations."""

from enum import Enum, auto


class DecorationState(Enum):
    """Lifecycle of one (owner, method name) pair."""

    UNDECORATED = auto()  # no entry, plain method or absent
    DECORATING = auto()  # inside the interception hook
    DECORATED = auto()  # dispatcher installed


class ResultPolicy(Enum):
    """What a dispatcher returns to its caller.

    No policy aggregates results across decorators.
    """

    LAST = auto()  # return value of the last decorator in the chain
    NONE = auto()  # always None, chain is side effects only
