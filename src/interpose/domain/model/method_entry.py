"""Decorated method entry."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from interpose.domain.model.descriptor import DecoratorDescriptor


@dataclass(frozen=True, slots=True)
class DecoratedMethodEntry:
    """Ordered decorator instances attached to one (owner, method name).

    Frozen once built: a later decoration of the same name produces a new
    entry that replaces this one wholesale.

    Attributes:
        owner: Type on which the method was defined.
        method_name: Public method name.
        decorators: Decorator instances in registration order (non-empty).
        original: Method body as declared, never called automatically.
        descriptors: Descriptors the decorators were built from, same order.
    """

    owner: type
    method_name: str
    decorators: tuple[Any, ...]
    original: Callable[..., Any]
    descriptors: tuple[DecoratorDescriptor, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.method_name:
            raise ValueError("method_name must not be empty")
        if not self.decorators:
            raise ValueError("decorated method must have at least one decorator")
        if not callable(self.original):
            raise TypeError(f"original must be callable, got {type(self.original).__name__}")

    def __len__(self) -> int:
        return len(self.decorators)

    def bind_original(self, receiver: object) -> Callable[..., Any]:
        """Original implementation bound to receiver."""
        binder = getattr(self.original, "__get__", None)
        if binder is None:
            return self.original
        bound: Callable[..., Any] = binder(receiver, type(receiver))
        return bound
