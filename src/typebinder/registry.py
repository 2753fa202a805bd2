# topmark:header:start
#
#   project      : TypeBinder
#   file         : registry.py
#   file_relpath : src/typebinder/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered registry of bindings with first-match classification.

The [`Registry`][typebinder.registry.Registry] is what a list-rendering surface
talks to. Its contract is split the same way list adapters split theirs:

1. ``classify(item)`` answers "what view type is this position?" and returns the
   index of the **first** binding that matches the item (or ``NO_MATCH``).
2. ``create_at(index, context)`` builds a fresh render object for a view type,
   typically only when the surface has no reusable object at hand.
3. ``populate_at(item, index, render_object)`` (or the reclassifying
   ``populate(item, render_object)``) fills a render object on every display.

The integer index is the join key between these calls. It stays valid as long as
the binding sequence is unchanged; calling `add` after indices have been handed
out invalidates them. This is a documented constraint and is not guarded.

Precedence:
    Bindings are tried in insertion order and the first match wins. Register
    narrow bindings (subclasses, content predicates) before broad fallbacks.
    Duplicates and overlaps are legal and resolved purely by order.

Threading:
    The registry performs no locking. Once the sequence is frozen (no more
    `add` calls), concurrent read-only use from several threads is safe.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, Iterable, Iterator, TypeVar

from typebinder.config.logging import get_logger
from typebinder.constants import NO_MATCH
from typebinder.errors import BindingIndexError

if TYPE_CHECKING:
    from typebinder.binding import Binding, BindingMeta
    from typebinder.config.logging import TypeBinderLogger

logger: TypeBinderLogger = get_logger(__name__)

D = TypeVar("D")
R = TypeVar("R")


class Registry(Generic[D, R]):
    """Ordered collection of bindings for items of base type ``D``.

    ``D`` is the base type of the list items and ``R`` the base type of the
    render objects; bindings may narrow both.

    Args:
        bindings (Iterable[Binding[Any, Any]]): Optional initial bindings, added
            in iteration order.
    """

    def __init__(self, bindings: Iterable[Binding[Any, Any]] = ()) -> None:
        self._bindings: list[Binding[Any, Any]] = []
        for binding in bindings:
            self.add(binding)

    def __len__(self) -> int:
        """Return the number of registered bindings."""
        return len(self._bindings)

    def __iter__(self) -> Iterator[Binding[Any, Any]]:
        """Iterate bindings in precedence order."""
        return iter(tuple(self._bindings))

    def __repr__(self) -> str:
        """Return a debugging representation."""
        names = ", ".join(b.name for b in self._bindings)
        return f"Registry([{names}])"

    @property
    def bindings(self) -> tuple[Binding[Any, Any], ...]:
        """Immutable snapshot of the bindings in precedence order."""
        return tuple(self._bindings)

    def add(self, binding: Binding[Any, Any]) -> Registry[D, R]:
        """Append ``binding`` as the lowest-precedence rule.

        No uniqueness or overlap check is performed.

        Args:
            binding (Binding[Any, Any]): A configured binding.

        Returns:
            Registry[D, R]: This registry, for chaining.
        """
        self._bindings.append(binding)
        logger.debug("Registered binding #%d: %s", len(self._bindings) - 1, binding.name)
        return self

    def classify(self, item: D) -> int:
        """Return the index of the first binding matching ``item``.

        Args:
            item (D): The list item to classify.

        Returns:
            int: Index into the binding sequence, or ``NO_MATCH`` (-1) when no
                binding matches. ``NO_MATCH`` is a valid outcome; callers must
                check it before passing the index on.
        """
        for index, binding in enumerate(self._bindings):
            if binding.matches(item):
                logger.trace("Classified %s as #%d (%s)", type(item).__name__, index, binding.name)
                return index
        logger.trace("No binding matches %s", type(item).__name__)
        return NO_MATCH

    def binding_at(self, index: int) -> Binding[Any, Any]:
        """Return the binding addressed by a view-type ``index``.

        Negative indices are rejected (no Python-style wrap-around).

        Args:
            index (int): Index previously returned by `classify`.

        Returns:
            Binding[Any, Any]: The addressed binding.

        Raises:
            BindingIndexError: If ``index`` is outside ``0 <= index < len(self)``,
                including ``NO_MATCH``.
        """
        if not 0 <= index < len(self._bindings):
            raise BindingIndexError(index, len(self._bindings))
        return self._bindings[index]

    def create_at(self, index: int, context: Any) -> R:
        """Build a render object using the binding at ``index``.

        Args:
            index (int): Index previously returned by `classify`.
            context (Any): Construction context passed unchanged to the constructor.

        Returns:
            R: The freshly constructed render object.

        Raises:
            BindingIndexError: If ``index`` does not address a binding.
            BindingConfigurationError: If that binding has no constructor.
        """
        return self.binding_at(index).create(context)

    def populate_at(self, item: D, index: int, render_object: R) -> None:
        """Populate ``render_object`` from ``item`` using the binding at ``index``.

        Args:
            item (D): The list item providing the data.
            index (int): Index previously returned by `classify` for ``item``.
            render_object (R): The render object to fill.

        Raises:
            BindingIndexError: If ``index`` does not address a binding.
        """
        self.binding_at(index).populate(item, render_object)

    def populate(self, item: D, render_object: R) -> None:
        """Reclassify ``item`` and populate ``render_object`` accordingly.

        Args:
            item (D): The list item providing the data.
            render_object (R): The render object to fill.

        Raises:
            BindingIndexError: If no binding matches ``item``.
        """
        self.populate_at(item, self.classify(item), render_object)

    def iter_meta(self) -> Iterator[BindingMeta]:
        """Yield serializable metadata for each binding in precedence order.

        Yields:
            BindingMeta: Metadata for one binding.
        """
        for index, binding in enumerate(self._bindings):
            yield binding.describe(index)
