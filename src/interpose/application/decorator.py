"""Decorator base capability.

Subclass and implement ``call(self, receiver, /, *args, **kwargs)``. The base
stores the construction arguments, registers a shorthand for the subclass
and gives access to the preserved original implementation.

Example:
    class Surround(Decorator):
        decorator_name = "surround_it"

        def call(self, receiver, /, *args, **kwargs):
            print("before")
            self.undecorated(receiver, *args, **kwargs)
            print("after")
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from interpose.application.owner_state import state_for
from interpose.application.shorthand_registry import shorthands
from interpose.domain.exceptions import NotDecoratedError

if TYPE_CHECKING:
    from collections.abc import Callable

    from interpose.domain.model.method_entry import DecoratedMethodEntry


class Decorator:
    """Base for reusable method decorators.

    Attributes:
        decorator_name: Explicit shorthand name. None = derive from class name.
        owner: Type the decorated method was defined on.
        method_name: Decorated method name.
        args: Extra positional arguments given at registration.
        kwargs: Extra keyword arguments given at registration.
    """

    decorator_name: ClassVar[str | None] = None
    _entry: DecoratedMethodEntry | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        shorthands.declare(cls)

    def __init__(self, owner: type, method_name: str, /, *args: Any, **kwargs: Any) -> None:
        """Initialize with owner, method name and extra registration arguments."""
        self.owner = owner
        self.method_name = method_name
        self.args = args
        self.kwargs = kwargs

    def attach(self, entry: DecoratedMethodEntry) -> None:
        """Pin the entry this instance was installed with.

        original() then keeps returning that entry's body after the
        method is re-decorated.
        """
        self._entry = entry

    def original(
        self, receiver: object, /, method_name: str | None = None
    ) -> Callable[..., Any]:
        """Preserved original implementation bound to receiver.

        Args:
            receiver: Instance to bind to.
            method_name: Decorated method of the same owner. Defaults to
                the method this decorator is attached to.

        Raises:
            NotDecoratedError: If (owner, method_name) has no decorated entry.
        """
        name = method_name or self.method_name
        entry = self._entry if name == self.method_name else None
        if entry is None:
            state = state_for(self.owner)
            entry = None if state is None else state.table.get(name)
        if entry is None:
            raise NotDecoratedError(self.owner, name)
        return entry.bind_original(receiver)

    def undecorated(self, receiver: object, /, *args: Any, **kwargs: Any) -> Any:
        """Call the original implementation on receiver with given arguments."""
        return self.original(receiver)(*args, **kwargs)

    def __repr__(self) -> str:
        extra = [repr(a) for a in self.args]
        extra.extend(f"{k}={v!r}" for k, v in self.kwargs.items())
        suffix = f", {', '.join(extra)}" if extra else ""
        return f"{type(self).__name__}({self.owner.__qualname__}.{self.method_name}{suffix})"
