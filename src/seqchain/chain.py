"""
SequentialChain - singly-linked sequential container.

The chain keeps three pieces of state in lock-step:

- ``_head``: first ChainLink; every node is reachable from it via ``_next``
- ``_tail``: last ChainLink, cached so insert_tail() is O(1)
- ``_count``: number of live nodes

``_count == 0``, ``_head is None`` and ``_tail is None`` are always all true
or all false. Positional operations walk from the head, so they cost
O(position).
"""

from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, TypeVar

from seqchain.base import LinkedSequence
from seqchain.errors import InvalidArgumentError, OutOfRangeError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ChainLink(Generic[T]):
    """Storage unit: one value and the link to the next node."""

    __slots__ = ("value", "_next")

    def __init__(self, value: T) -> None:
        self.value = value
        self._next: ChainLink[T] | None = None


class SequentialChain(LinkedSequence[T]):
    """
    Ordered container built from individually allocated ChainLinks.

    Values are kept in insertion order. ``None`` cannot be stored.
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        self._head: ChainLink[T] | None = None
        self._tail: ChainLink[T] | None = None
        self._count: int = 0
        if values is not None:
            for value in values:
                self.insert_tail(value)

    def insert_tail(self, value: T) -> None:
        """
        Append value at the end of the chain.

        Raises:
            InvalidArgumentError: If value is None.
        """
        if value is None:
            raise InvalidArgumentError("Element cannot be None")

        node = ChainLink(value)
        if self._tail is None:
            self._head = node
            self._tail = node
        else:
            self._tail._next = node
            self._tail = node
        self._count += 1

    def element_at(self, position: int) -> T:
        """
        Return the value at position.

        Raises:
            OutOfRangeError: If position is negative or >= length().
        """
        self._check_position(position)
        return self._locate(position).value

    def remove_at(self, position: int) -> T:
        """
        Remove and return the value at position.

        Head removal advances the head; tail removal moves the tail back to
        the preceding node; anything else is unlinked from its predecessor.

        Raises:
            OutOfRangeError: If position is negative or >= length().
        """
        self._check_position(position)

        if position == 0:
            return self._remove_head()

        preceding = self._locate(position - 1)
        removed = preceding._next
        assert removed is not None
        preceding._next = removed._next
        if preceding._next is None:
            self._tail = preceding
        self._count -= 1
        return removed.value

    def remove_value(self, value: T) -> bool:
        """
        Remove the first element equal to value.

        Returns False, leaving the chain untouched, if value is None or
        not present.
        """
        if value is None or self._head is None:
            return False

        if self._head.value == value:
            self._remove_head()
            return True

        current = self._head
        while current._next is not None and not current._next.value == value:
            current = current._next

        if current._next is None:
            return False

        current._next = current._next._next
        if current._next is None:
            self._tail = current
        self._count -= 1
        return True

    def length(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def clear(self) -> None:
        """
        Remove all elements.

        Unlinked nodes are left to the garbage collector.
        """
        if self._count:
            logger.debug("Clearing chain of %d elements", self._count)
        self._head = None
        self._tail = None
        self._count = 0

    def contains(self, value: T) -> bool:
        return self.find_position(value) != -1

    def find_position(self, value: T) -> int:
        """Return the position of the first element equal to value, or -1."""
        if value is None:
            return -1

        position = 0
        current = self._head
        while current is not None:
            if current.value == value:
                return position
            current = current._next
            position += 1
        return -1

    def render(self) -> str:
        return "[" + ", ".join(str(value) for value in self) + "]"

    def has_cycle(self) -> bool:
        """
        Check whether following links from the head ever revisits a node.

        Floyd's tortoise and hare: the slow reference moves one node per
        step, the fast one two. They meet only if the links loop.
        """
        slow = self._head
        fast = self._head
        while fast is not None and fast._next is not None:
            slow = slow._next  # type: ignore[union-attr]
            fast = fast._next._next
            if slow is fast:
                logger.warning("Cycle detected in chain of %d elements", self._count)
                return True
        return False

    def __iter__(self) -> Iterator[T]:
        """Iterate over values from head to tail."""
        current = self._head
        while current is not None:
            yield current.value
            current = current._next

    def __repr__(self) -> str:
        return f"{type(self).__name__}([{', '.join(repr(value) for value in self)}])"

    def _remove_head(self) -> T:
        """Internal: unlink the head node and return its value."""
        head = self._head
        assert head is not None
        self._head = head._next
        if self._head is None:
            self._tail = None
        self._count -= 1
        return head.value

    def _locate(self, position: int) -> ChainLink[T]:
        """Internal: walk position steps from the head. Position must be valid."""
        current = self._head
        for _ in range(position):
            current = current._next  # type: ignore[union-attr]
        assert current is not None
        return current

    def _check_position(self, position: int) -> None:
        if isinstance(position, bool) or not isinstance(position, int):
            raise TypeError(f"Position must be an int, not {type(position).__name__}")
        if position < 0 or position >= self._count:
            raise OutOfRangeError(position, self._count)
