"""Dispatcher: callable installed in place of a decorated method.

Built once per decoration as a closure over the frozen decorator tuple.
On each call it runs every decorator's ``call`` in registration order with
the same receiver and the same arguments. It never calls the original
implementation itself.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from interpose.domain.exceptions import MissingCapabilityError
from interpose.domain.model.enums import ResultPolicy

if TYPE_CHECKING:
    from collections.abc import Callable

    from interpose.domain.model.configuration import DecorationConfig
    from interpose.domain.model.method_entry import DecoratedMethodEntry

DISPATCHER_MARKER = "__interpose_dispatcher__"


def require_call(decorator: object) -> Callable[..., Any]:
    """Bound ``call`` of decorator.

    Raises:
        MissingCapabilityError: If decorator has no callable ``call``.
    """
    call = getattr(decorator, "call", None)
    if not callable(call):
        raise MissingCapabilityError(type(decorator))
    return call


def make_dispatcher(entry: DecoratedMethodEntry, config: DecorationConfig) -> Callable[..., Any]:
    """Build dispatcher for entry.

    Args:
        entry: Decorated method entry. Its decorator tuple is captured as is.
        config: Owner config. Only result_policy is read.

    Returns:
        Plain function usable as a method. Receives (receiver, *args, **kwargs)
        and forwards them verbatim, ``callback`` included when supplied.
    """
    decorators = entry.decorators
    return_last = config.result_policy is ResultPolicy.LAST

    def dispatch(receiver: Any, /, *args: Any, **kwargs: Any) -> Any:
        result = None
        for decorator in decorators:
            result = require_call(decorator)(receiver, *args, **kwargs)
        return result if return_last else None

    original = entry.original
    dispatch.__name__ = entry.method_name
    dispatch.__qualname__ = getattr(
        original, "__qualname__", f"{entry.owner.__qualname__}.{entry.method_name}"
    )
    dispatch.__module__ = getattr(original, "__module__", entry.owner.__module__)
    dispatch.__doc__ = getattr(original, "__doc__", None)
    setattr(dispatch, DISPATCHER_MARKER, True)
    return dispatch


def is_dispatcher(obj: object) -> bool:
    """Check if obj is a dispatcher installed by interpose."""
    return getattr(obj, DISPATCHER_MARKER, False) is True
