"""Test decorators shared across test modules.

Declared at module level so their derived shorthands are valid identifiers:
    recorder, extraParams, twice, announcer, surround_it (explicit)
"""

from __future__ import annotations

from typing import Any

from interpose import Decorator


class Recorder(Decorator):
    """Appends (label, receiver, args, kwargs) to a shared log, returns label."""

    def __init__(self, owner: type, method_name: str, log: list[Any], label: str = "rec") -> None:
        super().__init__(owner, method_name, log, label)
        self.log = log
        self.label = label

    def call(self, receiver: Any, /, *args: Any, **kwargs: Any) -> str:
        self.log.append((self.label, receiver, args, kwargs))
        return self.label


class Surround(Decorator):
    """Prints before/after around the original."""

    decorator_name = "surround_it"

    def call(self, receiver: Any, /, *args: Any, **kwargs: Any) -> Any:
        print("before")
        result = self.undecorated(receiver, *args, **kwargs)
        print("after")
        return result


class ExtraParams(Decorator):
    """Appends its registration arguments to the forwarded ones."""

    def call(self, receiver: Any, /, *args: Any) -> Any:
        return self.undecorated(receiver, *(args + self.args))


class Twice(Decorator):
    """Calls the original twice, returns both results."""

    def call(self, receiver: Any, /, *args: Any, **kwargs: Any) -> tuple[Any, Any]:
        return (
            self.undecorated(receiver, *args, **kwargs),
            self.undecorated(receiver, *args, **kwargs),
        )


class Announcer(Decorator):
    """Prints forwarded args and whether a callback was supplied."""

    def call(self, receiver: Any, /, *args: Any, callback: Any = None) -> None:
        print(list(args))
        if callback is not None:
            print("CALLBACK")
            callback()


class PlainDecorator:
    """Decorator that does not inherit Decorator (no shorthand, no base helpers)."""

    def __init__(self, owner: type, method_name: str) -> None:
        print(f"Initializing PlainDecorator for {owner.__name__}")
        self.method_name = method_name

    def call(self, receiver: Any) -> None:
        print("Inside PlainDecorator.call")


class PlainDecorator2:
    """Second plain decorator, to check construction order."""

    def __init__(self, owner: type, method_name: str) -> None:
        print(f"Initializing PlainDecorator2 for {owner.__name__}")

    def call(self, receiver: Any) -> None:
        print("Inside PlainDecorator2.call")


class NoCall:
    """Constructible but has no call capability."""

    def __init__(self, owner: type, method_name: str) -> None:
        self.owner = owner


class NotCallableCall:
    """Has a ``call`` attribute that is not callable."""

    call = "not a method"

    def __init__(self, owner: type, method_name: str) -> None:
        self.owner = owner
