"""
SeqChain - singly-linked sequential container.

A generic ordered container with tail insertion, positional access,
removal by position or value, search, and cycle detection.
"""

from seqchain.base import LinkedSequence
from seqchain.chain import ChainLink, SequentialChain
from seqchain.errors import ChainError, InvalidArgumentError, OutOfRangeError

__version__ = "0.1.0"
__all__ = [
    # Containers
    "LinkedSequence",
    "SequentialChain",
    "ChainLink",
    # Errors
    "ChainError",
    "InvalidArgumentError",
    "OutOfRangeError",
]
