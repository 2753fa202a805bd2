# topmark:header:start
#
#   project      : TypeBinder
#   file         : test_binding.py
#   file_relpath : tests/core/test_binding.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `Binding`: matching, construction, population and metadata."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import pytest

from tests.samples_typebinder import CountingPredicate, Other, Parent, Shape, TintedShape, View
from typebinder.binding import Binding, BindingMeta, type_label
from typebinder.errors import BindingConfigurationError, TypeBinderError


@runtime_checkable
class HasTint(Protocol):
    """Capability interface: anything exposing a ``tint`` attribute."""

    tint: str


def test_matches_instances_and_subclasses_without_predicate() -> None:
    """A binding without predicate matches every instance of its data type."""
    binding: Binding[Shape, View] = Binding(Shape, View)

    assert binding.matches(Shape("a")) is True
    assert binding.matches(TintedShape("b")) is True
    assert binding.matches(Other()) is False


def test_predicate_is_not_called_when_type_check_fails() -> None:
    """The predicate only runs for items of the right type."""
    predicate = CountingPredicate(result=True)
    binding: Binding[Shape, View] = Binding(Shape, View).configure_predicate(predicate)

    assert binding.matches(Other()) is False
    assert predicate.calls == 0

    assert binding.matches(Shape("a")) is True
    assert predicate.calls == 1


def test_predicate_result_decides_match() -> None:
    """A falsy predicate result rejects an item of the right type."""
    binding: Binding[Shape, View] = Binding(Shape, View).configure_predicate(
        lambda item: item.headline
    )

    assert binding.matches(Shape("plain")) is False
    assert binding.matches(Shape("title", headline=True)) is True


def test_predicate_can_be_cleared() -> None:
    """Passing None removes a previously configured predicate."""
    binding: Binding[Shape, View] = Binding(Shape, View).configure_predicate(CountingPredicate(result=False))
    assert binding.matches(Shape("a")) is False

    binding.configure_predicate(None)
    assert binding.predicate is None
    assert binding.matches(Shape("a")) is True


def test_predicate_exceptions_propagate() -> None:
    """Errors raised by a predicate reach the caller unchanged."""

    def boom(item: Shape) -> bool:
        raise RuntimeError(f"cannot inspect {item.label}")

    binding: Binding[Shape, View] = Binding(Shape, View).configure_predicate(boom)

    with pytest.raises(RuntimeError, match="cannot inspect a"):
        binding.matches(Shape("a"))


def test_protocol_and_union_data_types() -> None:
    """Runtime-checkable protocols, unions and tuples act as data types."""
    by_protocol: Binding[HasTint, View] = Binding(HasTint, View)
    assert by_protocol.matches(TintedShape("t")) is True
    assert by_protocol.matches(Shape("s")) is False

    by_tuple = Binding((TintedShape, Other), View)  # type: ignore[arg-type]
    assert by_tuple.matches(Other()) is True
    assert by_tuple.matches(Shape("s")) is False

    by_union = Binding(TintedShape | Other, View)  # type: ignore[arg-type]
    assert by_union.matches(Other()) is True
    assert by_union.matches(Shape("s")) is False


def test_create_passes_context_through() -> None:
    """The constructor receives the context unchanged and its result is returned."""
    seen: list[Parent] = []

    def build(parent: Parent) -> View:
        seen.append(parent)
        return View(parent, "x")

    parent = Parent()
    binding: Binding[Shape, View] = Binding(Shape, View).configure_constructor(build)

    view: View = binding.create(parent)

    assert seen == [parent]
    assert seen[0] is parent
    assert view.parent is parent
    assert parent.built == [view]


def test_create_returns_fresh_objects() -> None:
    """Each create call builds a new render object."""
    parent = Parent()
    binding: Binding[Shape, View] = Binding(Shape, View).configure_constructor(
        lambda p: View(p, "x")
    )

    assert binding.create(parent) is not binding.create(parent)
    assert len(parent.built) == 2


def test_create_without_constructor_raises() -> None:
    """Creating through an unconfigured binding is a configuration error."""
    binding: Binding[Shape, View] = Binding(Shape, View, name="bare")

    with pytest.raises(BindingConfigurationError) as excinfo:
        binding.create(Parent())

    assert isinstance(excinfo.value, TypeBinderError)
    assert excinfo.value.binding_name == "bare"
    assert excinfo.value.missing == "constructor"
    assert "bare" in str(excinfo.value)


def test_populate_without_populator_is_noop() -> None:
    """An unconfigured populator leaves the render object untouched."""
    view = View(Parent(), "x")
    view.text = "before"
    binding: Binding[Shape, View] = Binding(Shape, View)

    binding.populate(Shape("a"), view)

    assert view.text == "before"


def test_populate_calls_populator_with_item_and_object() -> None:
    """The populator is called with (item, render_object)."""
    calls: list[tuple[Shape, View]] = []
    view = View(Parent(), "x")
    item = Shape("a")
    binding: Binding[Shape, View] = Binding(Shape, View).configure_populator(
        lambda i, v: calls.append((i, v))
    )

    binding.populate(item, view)
    binding.populate(item, view)

    assert calls == [(item, view), (item, view)]


def test_configure_methods_chain() -> None:
    """Each configure_* call returns the binding; the properties expose what was set."""
    binding: Binding[Shape, View] = Binding(Shape, View)
    assert binding.constructor is None
    assert binding.populator is None

    def predicate(item: Shape) -> bool:
        return True

    def constructor(parent: Parent) -> View:
        return View(parent, "x")

    def populator(item: Shape, view: View) -> None:
        view.text = item.label

    assert binding.configure_predicate(predicate) is binding
    assert binding.configure_constructor(constructor) is binding
    assert binding.configure_populator(populator) is binding

    assert binding.predicate is predicate
    assert binding.constructor is constructor
    assert binding.populator is populator


def test_default_name_and_describe() -> None:
    """The default name joins type labels; describe reflects configuration."""
    binding: Binding[Shape, View] = Binding(TintedShape, View).configure_constructor(
        lambda p: View(p, "x")
    )

    assert binding.name == "TintedShape -> View"
    assert repr(binding) == "Binding('TintedShape -> View')"

    meta: BindingMeta = binding.describe(3)
    assert meta.to_dict() == {
        "index": 3,
        "name": "TintedShape -> View",
        "data_type": "TintedShape",
        "render_type": "View",
        "has_predicate": False,
        "has_constructor": True,
        "has_populator": False,
    }


def test_type_label_variants() -> None:
    """type_label renders classes, tuples and unions."""
    assert type_label(Shape) == "Shape"
    assert type_label((Shape, Other)) == "Shape | Other"
    assert type_label(Shape | Other) == "Shape | Other"
