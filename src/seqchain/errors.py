"""
Exceptions raised by SeqChain containers.

Each error also derives from the builtin that Python code would normally
catch for the same mistake, so ``except IndexError`` keeps working.
"""

from __future__ import annotations


class ChainError(Exception):
    """Base class for every error raised by seqchain."""


class InvalidArgumentError(ChainError, ValueError):
    """A value the container cannot store (``None``) was supplied."""


class OutOfRangeError(ChainError, IndexError):
    """
    A position outside ``[0, size)`` was requested.

    Attributes:
        position: The rejected position.
        size: Number of elements in the chain when the call was made.
    """

    def __init__(self, position: int, size: int) -> None:
        super().__init__(f"Invalid position: {position}, size: {size}")
        self.position = position
        self.size = size
