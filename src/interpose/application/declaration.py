"""Declaration: explicit builder for decorating methods of an existing type.

Works on any class, no metaclass needed:

    with Declaration(Widget) as decl:
        decl.decorate(Logged, "render")
        decl.surround_it()            # shorthand lookup

        @decl.method
        def render(self):
            ...

Descriptors queued on the builder go to the owner's own queue, so leftovers
survive the builder and attach to the owner's next definition.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Any, Self

from interpose.application.hook import end_of_unit, enqueue, method_defined
from interpose.application.owner_state import ensure_state
from interpose.application.shorthand_registry import shorthands
from interpose.domain.exceptions import DeclarationClosedError
from interpose.domain.model.descriptor import DecoratorDescriptor

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from interpose.application.shorthand_registry import ShorthandRegistry
    from interpose.domain.model.configuration import DecorationConfig


class Declaration:
    """One declaration unit on an owner type.

    FAIL-FIRST: any use after close() raises DeclarationClosedError.
    """

    def __init__(
        self,
        owner: type,
        *,
        config: DecorationConfig | None = None,
        registry: ShorthandRegistry | None = None,
    ) -> None:
        """Open declaration unit on owner.

        Args:
            owner: Type to declare methods on.
            config: Replaces owner config when given.
            registry: Shorthand table. Process-wide table if None.
        """
        self._state = ensure_state(owner, config=config)
        self._registry = registry if registry is not None else shorthands
        self._closed = False

    @property
    def owner(self) -> type:
        """Owner type."""
        return self._state.owner

    @property
    def closed(self) -> bool:
        """True after close()."""
        return self._closed

    @property
    def pending(self) -> tuple[DecoratorDescriptor, ...]:
        """Descriptors waiting for the owner's next definition."""
        return self._state.queue.snapshot()

    def decorate(self, decorator_type: Any, *args: Any, **kwargs: Any) -> Self:
        """Queue decorator type with extra constructor arguments.

        Returns:
            Self for chaining
        """
        self._check_open()
        enqueue(self.owner, DecoratorDescriptor.of(decorator_type, *args, **kwargs))
        return self

    def use(self, name: str, *args: Any, **kwargs: Any) -> Self:
        """Queue decorator by shorthand name.

        Raises:
            UnknownShorthandError: If name is not registered.
        """
        self._check_open()
        registration = self._registry.resolve(name)
        enqueue(self.owner, registration.descriptor(*args, **kwargs))
        return self

    def define(self, name: str, function: Callable[..., Any]) -> Callable[..., Any]:
        """Define method name on owner, consuming everything pending.

        Returns:
            Stored callable: function itself or the installed dispatcher.
        """
        self._check_open()
        return method_defined(self.owner, name, function)

    def method(self, function: Callable[..., Any]) -> Callable[..., Any]:
        """Function decorator form of define(), using the function's name."""
        return self.define(function.__name__, function)

    def close(self) -> None:
        """End the unit. Idempotent. Pending descriptors are kept."""
        if self._closed:
            return
        self._closed = True
        end_of_unit(self._state, f"declaration of {self.owner.__qualname__}")

    def __getattr__(self, name: str) -> Callable[..., Self]:
        if name.startswith("_"):
            raise AttributeError(name)
        if self._registry.get(name) is None:
            raise AttributeError(f"{type(self).__name__!r} has no attribute or shorthand {name!r}")
        return functools.partial(self.use, name)

    def __enter__(self) -> Self:
        self._check_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _check_open(self) -> None:
        if self._closed:
            raise DeclarationClosedError(self.owner)

    def __repr__(self) -> str:
        status = "closed" if self._closed else "open"
        return f"Declaration({self.owner.__qualname__}, {status}, pending={len(self.pending)})"
