"""Tests for presentation/api/meta.py."""

from __future__ import annotations

import inspect
import logging
from typing import Any

import pytest

from interpose import (
    Decorated,
    DecoratedMeta,
    DecorationConfig,
    ResultPolicy,
    decorate,
    decorated_methods,
    is_dispatcher,
    pending_of,
)
from interpose.application.owner_state import state_for
from interpose.application.shorthand_registry import ShorthandRegistry
from interpose.domain.model.pending_queue import PendingQueue
from interpose.presentation.api.meta import DeclarationNamespace
from tests.factories import ExtraParams, Recorder, Surround


def retry(function: Any) -> Any:
    """Module-level helper sharing its name with a registered shorthand."""
    function.retried = True
    return function


class TestClassBody:
    """Declarations inside a class body."""

    def test_decorate_attaches_to_next_def(self) -> None:
        calls: list[Any] = []

        class Widget(Decorated):
            decorate(Recorder, calls, "a")

            def render(self) -> None:
                pass

            def plain(self) -> str:
                return "plain"

        assert is_dispatcher(vars(Widget)["render"])
        assert not is_dispatcher(vars(Widget)["plain"])
        assert inspect.isfunction(vars(Widget)["plain"])
        assert Widget().plain() == "plain"

    def test_instances_built_with_real_owner(self) -> None:
        calls: list[Any] = []

        class Widget(Decorated):
            decorate(Recorder, calls, "a")
            decorate(Recorder, calls, "b")

            def render(self) -> None:
                pass

        decorators = decorated_methods(Widget)["render"]
        assert [d.label for d in decorators] == ["a", "b"]
        assert all(d.owner is Widget for d in decorators)

    def test_decorate_not_left_in_namespace(self) -> None:
        class Widget(Decorated):
            decorate(Surround)

            def render(self) -> None:
                pass

        assert "decorate" not in vars(Widget)

    def test_shorthands_resolve_as_bare_names(self) -> None:
        class Widget(Decorated):
            extraParams("c", "d")  # noqa: F821

            def function(self, a: str, b: str, c: str, d: str) -> list[str]:
                return [a, b, c, d]

        assert Widget().function("a", "b") == ["a", "b", "c", "d"]

    def test_non_functions_do_not_consume(self) -> None:
        calls: list[Any] = []

        class Widget(Decorated):
            decorate(Recorder, calls, "a")

            @staticmethod
            def helper() -> str:
                return "static"

            label = "x"

            def render(self) -> None:
                pass

        assert Widget.helper() == "static"
        assert list(decorated_methods(Widget)) == ["render"]

    def test_rebinding_plain_drops_decoration(self) -> None:
        class Widget(Decorated):
            decorate(Surround)

            def render(self) -> str:
                return "first"

            def render(self) -> str:  # noqa: F811
                return "second"

        assert not is_dispatcher(vars(Widget)["render"])
        assert dict(decorated_methods(Widget)) == {}
        assert Widget().render() == "second"

    def test_second_decorated_definition_wins(self) -> None:
        calls: list[Any] = []

        class Widget(Decorated):
            decorate(Recorder, calls, "old")

            def render(self) -> None:
                pass

            decorate(Recorder, calls, "new")

            def render(self) -> None:  # noqa: F811
                pass

        Widget().render()
        assert [c[0] for c in calls] == ["new"]

    def test_module_global_wins_over_shorthand(
        self, isolated_shorthands: ShorthandRegistry
    ) -> None:
        isolated_shorthands.register("retry", Surround)

        class Service(Decorated):
            @retry
            def fetch(self) -> str:
                return "fetched"

        assert Service().fetch() == "fetched"
        assert vars(Service)["fetch"].retried is True
        assert not is_dispatcher(vars(Service)["fetch"])
        assert pending_of(Service) == ()

    def test_enclosing_local_wins_over_shorthand(
        self, isolated_shorthands: ShorthandRegistry
    ) -> None:
        isolated_shorthands.register("traced", Surround)

        def traced(function: Any) -> Any:
            return function

        class Service(Decorated):
            @traced
            def fetch(self) -> str:
                return "fetched"

        assert Service().fetch() == "fetched"
        assert pending_of(Service) == ()

    def test_builtin_wins_over_shorthand(self, isolated_shorthands: ShorthandRegistry) -> None:
        isolated_shorthands.register("len", Surround)

        class Service(Decorated):
            size = len("abc")

        assert Service.size == 3
        assert pending_of(Service) == ()

    def test_leftover_pending_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):

            class Widget(Decorated):
                def render(self) -> None:
                    pass

                decorate(Surround)

        assert "class body of" in caplog.text
        assert [d.decorator_type for d in pending_of(Widget)] == [Surround]


class TestLaterDefinitions:
    """Assigning functions on the class after creation."""

    def test_assignment_consumes_leftovers(self) -> None:
        calls: list[Any] = []

        class Widget(Decorated):
            decorate(Recorder, calls, "stray")

        def later(self: Any) -> None:
            pass

        Widget.later = later  # type: ignore[attr-defined]

        assert is_dispatcher(vars(Widget)["later"])
        Widget().later()  # type: ignore[attr-defined]
        assert calls[0][0] == "stray"

    def test_functional_decorate_then_assign(self) -> None:
        class Widget(Decorated):
            pass

        decorate(Widget, ExtraParams, "z")
        Widget.echo = lambda self, *args: args  # type: ignore[attr-defined]

        assert Widget().echo("y") == ("y", "z")  # type: ignore[attr-defined]

    def test_plain_assignment_untouched(self) -> None:
        class Widget(Decorated):
            pass

        def later(self: Any) -> str:
            return "plain"

        Widget.later = later  # type: ignore[attr-defined]
        Widget.value = 3  # type: ignore[attr-defined]

        assert vars(Widget)["later"] is later
        assert Widget.value == 3  # type: ignore[attr-defined]


class TestInheritance:
    """Owner state is per class."""

    def test_subclass_uses_inherited_dispatcher(self) -> None:
        calls: list[Any] = []

        class Base(Decorated):
            decorate(Recorder, calls, "a")

            def render(self) -> None:
                pass

        class Child(Base):
            pass

        child = Child()
        child.render()

        assert calls[0][1] is child
        assert dict(decorated_methods(Child)) == {}
        assert state_for(Child) is not state_for(Base)

    def test_original_bound_to_subclass_receiver(self) -> None:
        class Base(Decorated):
            decorate(Surround)

            def name(self) -> str:
                return type(self).__name__

        class Child(Base):
            pass

        assert Child().name() == "Child"

    def test_subclass_queue_is_separate(self) -> None:
        class Base(Decorated):
            pass

        decorate(Base, Surround)

        class Child(Base):
            def render(self) -> None:
                pass

        assert not is_dispatcher(vars(Child)["render"])
        assert len(pending_of(Base)) == 1


class TestConfig:
    """Class keyword configuration."""

    def test_config_keyword(self) -> None:
        config = DecorationConfig(result_policy=ResultPolicy.NONE)

        class Widget(Decorated, interpose_config=config):
            decorate(Recorder, [])

            def render(self) -> None:
                pass

        assert state_for(Widget).config is config
        assert Widget().render() is None

    def test_config_inherited(self) -> None:
        config = DecorationConfig(result_policy=ResultPolicy.NONE)

        class Base(Decorated, interpose_config=config):
            pass

        class Child(Base):
            pass

        assert state_for(Child).config is config

    def test_other_class_keywords_reach_init_subclass(self) -> None:
        seen: list[str] = []

        class Base(Decorated):
            def __init_subclass__(cls, tag: str = "", **kwargs: Any) -> None:
                super().__init_subclass__(**kwargs)
                seen.append(tag)

        class Child(Base, tag="hello"):
            pass

        assert seen == ["hello"]

    def test_metaclass_directly(self) -> None:
        class Widget(metaclass=DecoratedMeta):
            decorate(Surround)

            def render(self) -> str:
                return "ok"

        assert is_dispatcher(vars(Widget)["render"])


class TestDeclarationNamespace:
    """Namespace behaviour in isolation."""

    def test_lookup_falls_back_to_shorthands(self) -> None:
        registry = ShorthandRegistry()
        registry.register("wrap", Surround)
        namespace = DeclarationNamespace(PendingQueue(), registry)

        namespace["wrap"]("x")

        (descriptor,) = namespace.queue.snapshot()
        assert descriptor.decorator_type is Surround
        assert descriptor.args == ("x",)

    def test_unknown_name_raises_key_error(self) -> None:
        namespace = DeclarationNamespace(PendingQueue(), ShorthandRegistry())
        with pytest.raises(KeyError):
            namespace["missing"]

    def test_stored_value_wins_over_shorthand(self) -> None:
        registry = ShorthandRegistry()
        registry.register("wrap", Surround)
        namespace = DeclarationNamespace(PendingQueue(), registry)
        namespace["wrap"] = 1
        assert namespace["wrap"] == 1

    def test_definitions_recorded_in_order(self) -> None:
        namespace = DeclarationNamespace(PendingQueue(), ShorthandRegistry())

        def first(self: Any) -> None:
            pass

        def second(self: Any) -> None:
            pass

        namespace.decorate(Surround)
        namespace["first"] = first
        namespace["undecorated"] = lambda self: None
        namespace.decorate(Surround)
        namespace["second"] = second

        assert [d.name for d in namespace.definitions] == ["first", "second"]
        assert namespace.definitions[0].function is first

    def test_scope_name_wins_over_shorthand(self) -> None:
        registry = ShorthandRegistry()
        registry.register("wrap", Surround)
        namespace = DeclarationNamespace(PendingQueue(), registry, ({"wrap": print},))

        with pytest.raises(KeyError):
            namespace["wrap"]
        assert namespace.queue.snapshot() == ()

    def test_decorate_resolves_despite_scope(self) -> None:
        namespace = DeclarationNamespace(
            PendingQueue(), ShorthandRegistry(), ({"decorate": print},)
        )
        assert namespace["decorate"] == namespace.decorate
