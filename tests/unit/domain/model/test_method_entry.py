"""Tests for domain/model/method_entry.py."""

from dataclasses import FrozenInstanceError

import pytest

from interpose.domain.model.method_entry import DecoratedMethodEntry


class Owner:
    def greet(self, name: str) -> str:
        return f"hi {name} from {type(self).__name__}"


class Child(Owner):
    pass


def _entry(**overrides: object) -> DecoratedMethodEntry:
    values: dict[str, object] = {
        "owner": Owner,
        "method_name": "greet",
        "decorators": (object(),),
        "original": Owner.greet,
    }
    values.update(overrides)
    return DecoratedMethodEntry(**values)  # type: ignore[arg-type]


class TestCreation:
    """Tests for valid entries."""

    def test_fields(self) -> None:
        entry = _entry()
        assert entry.owner is Owner
        assert entry.method_name == "greet"
        assert len(entry) == 1
        assert entry.descriptors == ()

    def test_is_frozen(self) -> None:
        entry = _entry()
        with pytest.raises(FrozenInstanceError):
            entry.decorators = ()  # type: ignore[misc]


class TestFailFirst:
    """Tests for FAIL-FIRST validation."""

    def test_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="method_name must not be empty"):
            _entry(method_name="")

    def test_no_decorators_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one decorator"):
            _entry(decorators=())

    def test_non_callable_original_raises(self) -> None:
        with pytest.raises(TypeError, match="original must be callable"):
            _entry(original=42)


class TestBindOriginal:
    """Tests for bind_original."""

    def test_binds_to_receiver(self) -> None:
        bound = _entry().bind_original(Owner())
        assert bound("ann") == "hi ann from Owner"

    def test_binds_to_subclass_receiver(self) -> None:
        bound = _entry().bind_original(Child())
        assert bound("bob") == "hi bob from Child"

    def test_non_descriptor_callable_returned_as_is(self) -> None:
        class Callable_:
            def __call__(self, *args: object) -> tuple[object, ...]:
                return args

        original = Callable_()
        assert _entry(original=original).bind_original(Owner()) is original
