"""
LinkedSequence - abstract contract for sequential containers.

Declares the operations every chain provides and maps the Python
protocols (len, in, str) onto them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class LinkedSequence(ABC, Generic[T]):
    """
    Abstract base class for ordered containers.

    Positions are zero-based. Values are compared with ``==``.
    """

    @abstractmethod
    def insert_tail(self, value: T) -> None:
        """Append value as the new last element."""
        ...

    @abstractmethod
    def element_at(self, position: int) -> T:
        """Return the value at position."""
        ...

    @abstractmethod
    def remove_at(self, position: int) -> T:
        """Remove and return the value at position."""
        ...

    @abstractmethod
    def remove_value(self, value: T) -> bool:
        """Remove the first element equal to value; return whether one was found."""
        ...

    @abstractmethod
    def length(self) -> int:
        """Return the number of elements."""
        ...

    @abstractmethod
    def is_empty(self) -> bool:
        """Check if the container holds no elements."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Remove all elements."""
        ...

    @abstractmethod
    def contains(self, value: T) -> bool:
        """Check if an element equal to value is present."""
        ...

    @abstractmethod
    def find_position(self, value: T) -> int:
        """Return the position of the first element equal to value, or -1."""
        ...

    @abstractmethod
    def render(self) -> str:
        """Return the elements as ``[v1, v2, ...]``."""
        ...

    def __len__(self) -> int:
        """Python-style length."""
        return self.length()

    def __contains__(self, value: object) -> bool:
        return self.contains(value)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.render()
