"""Decorator capability port."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DecoratorLike(Protocol):
    """Anything the dispatcher can drive.

    Constructed as ``DecoratorType(owner, method_name, *extra_args)``.
    ``call`` receives the receiver, the forwarded positional and keyword
    arguments, and ``callback`` only when the caller supplied one.
    """

    def call(self, receiver: Any, /, *args: Any, **kwargs: Any) -> Any:
        """Handle one invocation of the decorated method."""
        ...
