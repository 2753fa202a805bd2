# topmark:header:start
#
#   project      : TypeBinder
#   file         : binding.py
#   file_relpath : src/typebinder/binding.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Binding rules that connect an item shape to a render-object shape.

A [`Binding`][typebinder.binding.Binding] describes how one kind of list item
is rendered. It combines:

* a **data type** that items must be instances of (subclasses included),
* an optional **predicate** that inspects the item's contents,
* a **constructor** that builds a fresh render object from a construction
  context supplied by the caller (typically a parent container), and
* an optional **populator** that copies item data onto a render object.

Bindings are configured once with the chainable ``configure_*`` methods and then
handed to a [`Registry`][typebinder.registry.Registry], which only reads them.

Example:
    ```python
    binding = (
        Binding(ListItem, TextRow)
        .configure_predicate(lambda item: item.headline)
        .configure_constructor(lambda container: TextRow(container, layout="headline"))
        .configure_populator(lambda item, row: row.set_text(item.name))
    )
    ```

Type descriptors:
    ``data_type`` and ``render_type`` accept anything that `isinstance` accepts:
    plain classes, ``@runtime_checkable`` protocols (capability interfaces),
    ``X | Y`` unions and tuples of classes.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from typebinder.config.logging import get_logger
from typebinder.errors import BindingConfigurationError

if TYPE_CHECKING:
    from typebinder.config.logging import TypeBinderLogger

logger: TypeBinderLogger = get_logger(__name__)

D = TypeVar("D")
R = TypeVar("R")


def type_label(tp: object) -> str:
    """Return a short, human-readable label for a type descriptor.

    Args:
        tp (object): A class, protocol, union or tuple of classes.

    Returns:
        str: ``__qualname__`` for classes, ``A | B`` for unions and tuples,
            ``repr(tp)`` otherwise.
    """
    if isinstance(tp, tuple):
        return " | ".join(type_label(t) for t in tp)
    qualname = getattr(tp, "__qualname__", None)
    if isinstance(qualname, str):
        return qualname
    args = getattr(tp, "__args__", None)
    if isinstance(args, tuple) and args:
        return " | ".join(type_label(t) for t in args)
    return repr(tp)


@dataclass(frozen=True)
class BindingMeta:
    """Stable, serializable metadata about a registered Binding."""

    index: int
    name: str
    data_type: str
    render_type: str
    has_predicate: bool = False
    has_constructor: bool = False
    has_populator: bool = False

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly dict view of this metadata."""
        return asdict(self)


class Binding(Generic[D, R]):
    """Rule mapping items of ``data_type`` to render objects of ``render_type``.

    Args:
        data_type (type[D]): Type descriptor the item must be an instance of.
        render_type (type[R]): Type descriptor of the render object produced by
            the constructor. Informational: it is not enforced at runtime.
        name (str | None): Optional label used in logs and introspection.
            Defaults to ``"<DataType> -> <RenderType>"``.
    """

    def __init__(
        self,
        data_type: type[D],
        render_type: type[R],
        *,
        name: str | None = None,
    ) -> None:
        self._data_type: type[D] = data_type
        self._render_type: type[R] = render_type
        self._name: str = name or f"{type_label(data_type)} -> {type_label(render_type)}"
        self._predicate: Callable[[D], bool] | None = None
        self._constructor: Callable[[Any], R] | None = None
        self._populator: Callable[[D, R], None] | None = None

    def __repr__(self) -> str:
        """Return a debugging representation."""
        return f"Binding({self._name!r})"

    @property
    def data_type(self) -> type[D]:
        """Type descriptor matched by this binding."""
        return self._data_type

    @property
    def render_type(self) -> type[R]:
        """Type descriptor of the render objects this binding produces."""
        return self._render_type

    @property
    def name(self) -> str:
        """Human-readable label of this binding."""
        return self._name

    @property
    def predicate(self) -> Callable[[D], bool] | None:
        """The configured content predicate, if any."""
        return self._predicate

    @property
    def constructor(self) -> Callable[[Any], R] | None:
        """The configured constructor, if any."""
        return self._constructor

    @property
    def populator(self) -> Callable[[D, R], None] | None:
        """The configured populator, if any."""
        return self._populator

    # --- Configuration (chainable) ---

    def configure_predicate(self, predicate: Callable[[D], bool] | None) -> Binding[D, R]:
        """Set the content predicate consulted after the type check.

        Only needed when the item's *contents* decide which render object to use.
        A binding without a predicate matches every instance of its data type.

        Args:
            predicate (Callable[[D], bool] | None): Pure function receiving the item;
                ``None`` clears a previously configured predicate.

        Returns:
            Binding[D, R]: This binding, for chaining.
        """
        self._predicate = predicate
        return self

    def configure_constructor(self, constructor: Callable[[Any], R]) -> Binding[D, R]:
        """Set the function that builds a fresh render object.

        Args:
            constructor (Callable[[Any], R]): Called with the construction context
                supplied to `create` (passed through unchanged).

        Returns:
            Binding[D, R]: This binding, for chaining.
        """
        self._constructor = constructor
        return self

    def configure_populator(self, populator: Callable[[D, R], None] | None) -> Binding[D, R]:
        """Set the function that copies item data onto a render object.

        Args:
            populator (Callable[[D, R], None] | None): Called with ``(item, render_object)``;
                ``None`` makes `populate` a no-op.

        Returns:
            Binding[D, R]: This binding, for chaining.
        """
        self._populator = populator
        return self

    # --- Operations ---

    def matches(self, item: object) -> bool:
        """Return True if ``item`` is handled by this binding.

        The type check runs first; the predicate is only invoked for items that
        are instances of ``data_type``. Exceptions raised by the predicate
        propagate to the caller.

        Args:
            item (object): The list item to test.

        Returns:
            bool: True if the item has the right type and passes the predicate.
        """
        if not isinstance(item, self._data_type):
            return False
        if self._predicate is None:
            return True
        return bool(self._predicate(item))

    def create(self, context: Any) -> R:
        """Build a new render object through the configured constructor.

        Args:
            context (Any): Opaque construction context (e.g. a parent container).

        Returns:
            R: The object returned by the constructor.

        Raises:
            BindingConfigurationError: If no constructor has been configured.
        """
        if self._constructor is None:
            raise BindingConfigurationError(self._name, "constructor")
        logger.trace("Creating render object via binding %s", self._name)
        return self._constructor(context)

    def populate(self, item: D, render_object: R) -> None:
        """Populate ``render_object`` from ``item`` (no-op without a populator).

        Args:
            item (D): The list item providing the data.
            render_object (R): A render object previously built by `create`.
        """
        if self._populator is None:
            return
        self._populator(item, render_object)

    def describe(self, index: int) -> BindingMeta:
        """Return serializable metadata for this binding at ``index``.

        Args:
            index (int): Position of the binding inside its registry.

        Returns:
            BindingMeta: Metadata snapshot.
        """
        return BindingMeta(
            index=index,
            name=self._name,
            data_type=type_label(self._data_type),
            render_type=type_label(self._render_type),
            has_predicate=self._predicate is not None,
            has_constructor=self._constructor is not None,
            has_populator=self._populator is not None,
        )
