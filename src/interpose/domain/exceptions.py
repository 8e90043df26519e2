"""Domain exceptions: all public errors of interpose.

All exceptions visible to users are defined in domain.
Application/Presentation raise these, never define their own public exceptions.

Registration does not validate decorator types. Errors raised by decorator
constructors, decorator call bodies or original implementations propagate
unmodified.
"""

from __future__ import annotations


class InterposeError(Exception):
    """Base for all interpose exceptions.

    Allows: except InterposeError to catch all library errors.
    """


class MissingCapabilityError(InterposeError, TypeError):
    """Decorator instance lacks a usable capability.

    Raised at dispatch time when a decorator has no callable ``call``.
    Inherits TypeError for semantic correctness (object of wrong kind).

    Attributes:
        decorator_type: Type of the offending decorator instance.
        capability: Name of the missing capability.
    """

    def __init__(self, decorator_type: type, capability: str = "call") -> None:
        """Initialize with decorator type and capability name."""
        self.decorator_type = decorator_type
        self.capability = capability
        super().__init__(
            f"{decorator_type.__qualname__} has no callable {capability!r}",
        )


class NotDecoratedError(InterposeError, LookupError):
    """No decorated entry exists for (owner, method name).

    Raised when the original implementation is requested for a method
    that never went through decoration.

    Attributes:
        owner: Owner type.
        method_name: Requested method name.
    """

    def __init__(self, owner: type, method_name: str) -> None:
        """Initialize with owner and method name."""
        self.owner = owner
        self.method_name = method_name
        super().__init__(f"{owner.__qualname__}.{method_name} is not decorated")


class UnknownShorthandError(InterposeError, LookupError):
    """No shorthand registered under the given name.

    Attributes:
        name: Requested shorthand name.
    """

    def __init__(self, name: str) -> None:
        """Initialize with requested name."""
        self.name = name
        super().__init__(f"no decorator shorthand registered as {name!r}")


class DeclarationClosedError(InterposeError, RuntimeError):
    """Declaration builder used after its declaration unit ended.

    Attributes:
        owner: Owner type of the closed declaration.
    """

    def __init__(self, owner: type) -> None:
        """Initialize with owner type."""
        self.owner = owner
        super().__init__(f"declaration of {owner.__qualname__} is closed")
