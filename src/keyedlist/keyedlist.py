from __future__ import annotations

import enum
import logging
from collections.abc import Sequence
from operator import index as op_index
from typing import TYPE_CHECKING, Generic, Literal, TypeVar

if TYPE_CHECKING:
    import sys
    from collections.abc import Callable, Iterable, Iterator
    from typing import SupportsIndex

    if sys.version_info < (3, 11):
        from typing_extensions import Self
    else:
        from typing import Self

T = TypeVar("T")
S = TypeVar("S")

KeyOrder = Literal["numeric", "lexicographic"]

_KEY_ORDERS = ("numeric", "lexicographic")

logger = logging.getLogger(__name__)


class Absent(enum.Enum):
    """Marker type for the "no result" value returned by empty operations."""

    ABSENT = "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return self.value


ABSENT = Absent.ABSENT


class keyedlist(Generic[T]):  # noqa: N801
    """An ordered collection stored as a dict of index -> item."""

    _data: dict[int, T]
    _length: int
    _key_order: KeyOrder

    def __init__(self, data: Iterable[T] | None = None, *, key_order: KeyOrder = "numeric") -> None:
        """Initialize a keyedlist.

        Args:
            data: Initial items (optional, defaults to empty). Items populate
                indices 0, 1, 2, etc.
            key_order: How keys are ordered when the list is reindexed.
                - "numeric": ascending integer order
                - "lexicographic": ascending order of the keys' decimal
                  strings, so "10" sorts before "2"

        Raises:
            TypeError: If key_order is not a string
            ValueError: If key_order is not a known ordering
        """
        if not isinstance(key_order, str):
            raise TypeError("key_order must be a string")
        if key_order not in _KEY_ORDERS:
            raise ValueError(f"key_order must be one of {', '.join(map(repr, _KEY_ORDERS))}")

        self._data = {}
        self._length = 0
        self._key_order = key_order

        if data is not None:
            for item in data:
                self._data[self._length] = item
                self._length += 1

    @property
    def length(self) -> int:
        """Number of items in the list."""
        return self._length

    @property
    def key_order(self) -> KeyOrder:
        """Ordering applied to keys on reindex. Read-only."""
        return self._key_order

    def _reindex(self) -> None:
        """Renumber keys to 0..n-1 following the configured key order."""
        if self._key_order == "lexicographic":
            keys = sorted(self._data, key=str)
        else:
            keys = sorted(self._data)

        self._data = {new_key: self._data[old_key] for new_key, old_key in enumerate(keys)}
        self._length = len(self._data)
        logger.debug("reindexed %d keys (%s order)", self._length, self._key_order)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        """Return an iterator over the items in index order."""
        i = 0
        while i < self._length:
            yield self._data[i]
            i += 1

    def __getitem__(self, key: SupportsIndex) -> T:
        """Get the item at index.

        Args:
            key: Integer index (anything supporting __index__)

        Raises:
            TypeError: If key does not support __index__
            IndexError: If index is out of range
        """
        idx = op_index(key)

        # Normalize negative index
        if idx < 0:
            idx += self._length
        if not 0 <= idx < self._length:
            raise IndexError("keyedlist index out of range")
        return self._data[idx]

    def __contains__(self, value: object) -> bool:
        return value in self._data.values()

    def __eq__(self, other: object) -> bool:
        """Compare element-wise with another keyedlist or any sequence.

        Strings and bytes are not treated as sequences of items.
        """
        if self is other:
            return True
        if isinstance(other, (str, bytes, bytearray)) or not isinstance(other, (keyedlist, Sequence)):
            return NotImplemented
        if self._length != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        items = ", ".join(repr(item) for item in self)
        if self._key_order == "numeric":
            return f"keyedlist([{items}])"
        return f"keyedlist([{items}], key_order={self._key_order!r})"

    def __copy__(self) -> Self:
        return type(self)(self, key_order=self._key_order)

    def copy(self) -> Self:
        """Return a shallow copy with the same key order."""
        return self.__copy__()

    def clear(self) -> None:
        """Remove all items from the list."""
        self._data.clear()
        self._length = 0

    def append(self, *items: T) -> int:
        """Add an item to the end of the list.

        Exactly one item must be given. Any other number of arguments is
        ignored and the list is left untouched.

        Returns:
            The length of the list after the call
        """
        if len(items) != 1:
            logger.debug("append() ignored: expected 1 item, got %d", len(items))
            return self._length

        self._data[self._length] = items[0]
        self._length += 1
        return self._length

    def remove_last(self) -> T | Literal[Absent.ABSENT]:
        """Remove and return the last item, or ABSENT if the list is empty."""
        if not self._length:
            return ABSENT

        item = self._data.pop(self._length - 1)
        self._length -= 1
        return item

    def remove_first(self) -> T | Literal[Absent.ABSENT]:
        """Remove and return the first item, or ABSENT if the list is empty.

        Falsy items (0, "", None, ...) are removed like any other item.
        """
        if 0 not in self._data:
            return ABSENT

        item = self._data.pop(0)
        self._reindex()
        return item

    def insert_first(self, *items: T) -> int:
        """Insert an item at the front of the list.

        The item is stored under key -1 and folded into position 0 by a
        reindex. Exactly one item must be given, as with append().

        Returns:
            The length of the list after the call
        """
        if len(items) != 1:
            logger.debug("insert_first() ignored: expected 1 item, got %d", len(items))
            return self._length

        self._data[-1] = items[0]
        self._reindex()
        return self._length

    def for_each(self, callback: Callable[[T, int], object]) -> None:
        """Call callback(item, index) for every item in index order."""
        for i in range(self._length):
            callback(self._data[i], i)

    def map(self, callback: Callable[[T, int], S]) -> keyedlist[S] | Literal[Absent.ABSENT]:
        """Return a new keyedlist of callback(item, index) results.

        Returns ABSENT instead of an empty list when there is nothing to map.
        """
        if not self._length:
            return ABSENT

        result: keyedlist[S] = keyedlist(key_order=self._key_order)
        for i in range(self._length):
            result.append(callback(self._data[i], i))
        return result

    def filter(self, callback: Callable[[T], object]) -> keyedlist[T] | Literal[Absent.ABSENT]:
        """Return a new keyedlist of the items for which callback(item) is truthy.

        Returns ABSENT when the list is empty. A non-empty list whose items
        are all rejected gives an empty keyedlist.
        """
        if not self._length:
            return ABSENT

        result: keyedlist[T] = keyedlist(key_order=self._key_order)
        for i in range(self._length):
            item = self._data[i]
            if callback(item):
                result.append(item)
        return result

    def reduce(self, callback: Callable[[S, T, int], S], state: S) -> S | Literal[Absent.ABSENT]:
        """Fold the list with state = callback(state, item, index).

        Note:
            An empty list returns ABSENT, not the initial state.
        """
        if not self._length:
            return ABSENT

        for i in range(self._length):
            state = callback(state, self._data[i], i)
        return state

    # Names used by the JavaScript-style API
    push = append
    pop = remove_last
    shift = remove_first
    unshift = insert_first
    removeLast = remove_last  # noqa: N815
    removeFirst = remove_first  # noqa: N815
    insertFirst = insert_first  # noqa: N815
    forEach = for_each  # noqa: N815
