# topmark:header:start
#
#   project      : ObsList
#   file         : collection.py
#   file_relpath : src/obslist/collection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ordered collection that reports additions, removals and clears.

[`ObservableList`][obslist.collection.ObservableList] keeps its elements in a
private ``list`` and exposes three [`EventChannel`][obslist.core.events.EventChannel]
attributes:

- ``item_added``: fired by `add` with an `ItemEventArgs` payload.
- ``item_removed``: fired by `remove` with an `ItemEventArgs` payload, only when an
  element was actually removed.
- ``cleared``: fired by `clear` with `EventArgs.EMPTY`, even when the list was
  already empty.

Each notification is delivered after the storage change is complete and before
the mutating call returns.

Notes:
    - The class is not thread-safe. Serialize access externally (one lock around
      the whole list) when it is shared between threads.
    - Handlers may mutate the list they observe; the result is the same as
      calling the mutator directly from inside the outer mutator.
    - Mutating the list while iterating over it is not supported: the iterator
      raises ``RuntimeError`` on its next step.
"""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, MutableSequence
from typing import TYPE_CHECKING, Final, Generic, TypeVar

from obslist.config.logging import get_logger
from obslist.core.errors import IndexOutOfRangeError, InvalidArgumentError
from obslist.core.events import EventArgs, EventChannel, ItemEventArgs

if TYPE_CHECKING:
    from obslist.config.logging import ObsListLogger

logger: ObsListLogger = get_logger(__name__)

T = TypeVar("T")


class _Missing:
    """Sentinel type telling `ObservableList()` apart from `ObservableList(None)`."""

    def __repr__(self) -> str:
        return "<missing>"


_MISSING: Final[_Missing] = _Missing()


class ObservableList(Generic[T]):
    """A mutable, ordered collection with change notifications.

    Args:
        items (Iterable[T]): Optional source to copy the initial elements from.
            Omit it for an empty list. Passing ``None`` explicitly is an error.

    Attributes:
        item_added (EventChannel[ItemEventArgs[T]]): Fired after each `add`.
        item_removed (EventChannel[ItemEventArgs[T]]): Fired after a successful `remove`.
        cleared (EventChannel[EventArgs]): Fired after each `clear`.

    Raises:
        InvalidArgumentError: If ``items`` is ``None`` or not iterable.

    Example:
        ```python
        lst: ObservableList[int] = ObservableList()
        lst.item_added.subscribe(lambda sender, args: print("added", args.item))
        lst.add(5)  # prints "added 5"
        ```
    """

    item_added: EventChannel[ItemEventArgs[T]]
    item_removed: EventChannel[ItemEventArgs[T]]
    cleared: EventChannel[EventArgs]

    def __init__(self, items: Iterable[T] | _Missing = _MISSING) -> None:
        if items is None:
            raise InvalidArgumentError("items must not be None")
        if isinstance(items, _Missing):
            self._items: list[T] = []
        else:
            try:
                self._items = list(items)
            except TypeError as exc:
                raise InvalidArgumentError(f"items must be iterable, got {items!r}") from exc
        # Bumped on every mutation so live iterators can detect it.
        self._version: int = 0

        self.item_added = EventChannel("item_added")
        self.item_removed = EventChannel("item_removed")
        self.cleared = EventChannel("cleared")

    # --- Queries ---

    @property
    def count(self) -> int:
        """Number of elements currently in the list."""
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        """True if the list holds no elements."""
        return not self._items

    @property
    def is_read_only(self) -> bool:
        """Always False: an ObservableList can always be mutated."""
        return False

    def contains(self, item: T) -> bool:
        """Return True if an element equal to ``item`` is present."""
        return item in self._items

    def at(self, index: int) -> T:
        """Return the element at ``index``.

        Only indexes in ``[0, count)`` are accepted; there is no counting from
        the end. Any object implementing ``__index__`` other than ``bool`` is
        accepted as an integer.

        Args:
            index (int): Zero-based position.

        Returns:
            T: The element stored at ``index``.

        Raises:
            InvalidArgumentError: If ``index`` is not an integer.
            IndexOutOfRangeError: If ``index`` is negative or not less than `count`.
        """
        if isinstance(index, bool):
            raise InvalidArgumentError("index must be an int, got bool")
        try:
            index = operator.index(index)
        except TypeError as exc:
            raise InvalidArgumentError(
                f"index must be an int, got {type(index).__name__}"
            ) from exc
        if index < 0 or index >= len(self._items):
            raise IndexOutOfRangeError(
                f"index {index} out of range for ObservableList of count {len(self._items)}"
            )
        return self._items[index]

    def to_list(self) -> list[T]:
        """Return a shallow copy of the elements as a plain ``list``."""
        return list(self._items)

    def copy_to(self, destination: MutableSequence[T], index: int = 0) -> None:
        """Copy all elements into ``destination`` starting at position ``index``.

        ``destination`` is written in place and never resized. Nothing is
        written unless every element fits.

        Args:
            destination (MutableSequence[T]): Pre-sized target sequence.
            index (int): Position in ``destination`` receiving the first element.

        Raises:
            InvalidArgumentError: If ``destination`` is ``None`` or has fewer than
                ``count`` slots from ``index`` onwards.
            IndexOutOfRangeError: If ``index`` is negative.
        """
        if destination is None:
            raise InvalidArgumentError("destination must not be None")
        if index < 0:
            raise IndexOutOfRangeError(f"destination index {index} must not be negative")
        available = len(destination) - index
        if available < len(self._items):
            raise InvalidArgumentError(
                f"destination too small: {len(self._items)} element(s) needed from index "
                f"{index}, {max(available, 0)} slot(s) available"
            )
        for offset, item in enumerate(self._items):
            destination[index + offset] = item

    # --- Mutations ---

    def add(self, item: T) -> None:
        """Append ``item`` and fire `item_added`.

        Duplicates and ``None`` are accepted.
        """
        self._items.append(item)
        self._version += 1
        logger.trace("add %r (count=%d)", item, len(self._items))
        self._on_item_added(item)

    def remove(self, item: T) -> bool:
        """Remove the first element equal to ``item``.

        `item_removed` fires only when an element was removed.

        Returns:
            bool: True if an element was removed, False if none matched.
        """
        try:
            self._items.remove(item)
        except ValueError:
            logger.trace("remove %r: no match", item)
            return False
        self._version += 1
        logger.trace("remove %r (count=%d)", item, len(self._items))
        self._on_item_removed(item)
        return True

    def clear(self) -> None:
        """Remove every element and fire `cleared`, even if the list was empty."""
        self._items.clear()
        self._version += 1
        logger.trace("clear")
        self._on_cleared()

    # --- Notification hooks ---

    def _on_item_added(self, item: T) -> None:
        """Fire `item_added`. Subclasses may override to intercept the notification."""
        self.item_added.emit(self, ItemEventArgs(item))

    def _on_item_removed(self, item: T) -> None:
        """Fire `item_removed`. Subclasses may override to intercept the notification."""
        self.item_removed.emit(self, ItemEventArgs(item))

    def _on_cleared(self) -> None:
        """Fire `cleared`. Subclasses may override to intercept the notification."""
        self.cleared.emit(self, EventArgs.EMPTY)

    # --- Python protocols ---

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __getitem__(self, index: int) -> T:
        return self.at(index)

    def __iter__(self) -> Iterator[T]:
        version = self._version
        for item in self._items:
            yield item
            if self._version != version:
                raise RuntimeError("ObservableList mutated during iteration")

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
