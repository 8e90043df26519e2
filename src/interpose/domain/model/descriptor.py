"""Decorator descriptor value object."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


def _freeze_kwargs(kwargs: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return MappingProxyType(dict(kwargs or {}))


@dataclass(frozen=True, slots=True)
class DecoratorDescriptor:
    """Decorator type plus extra constructor arguments, captured at registration.

    Immutable once created. Not validated: constraints are checked when the
    descriptor is consumed by a method definition.

    Attributes:
        decorator_type: Type (or any callable) producing the decorator instance.
        args: Extra positional constructor arguments, in registration order.
        kwargs: Extra keyword constructor arguments (read-only view).
            Compared for equality, left out of the hash.
    """

    decorator_type: Any
    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    @classmethod
    def of(cls, decorator_type: Any, *args: Any, **kwargs: Any) -> DecoratorDescriptor:
        """Build descriptor from call-style arguments."""
        return cls(decorator_type=decorator_type, args=args, kwargs=_freeze_kwargs(kwargs))

    def instantiate(self, owner: type, method_name: str) -> Any:
        """Construct decorator instance for (owner, method name).

        Extra arguments are forwarded verbatim after owner and method name.
        Constructor errors propagate unmodified.
        """
        return self.decorator_type(owner, method_name, *self.args, **self.kwargs)

    @property
    def type_name(self) -> str:
        """Qualified name of the decorator type, for reports and logs."""
        return getattr(self.decorator_type, "__qualname__", repr(self.decorator_type))
