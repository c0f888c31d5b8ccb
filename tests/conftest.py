"""
Pytest configuration and fixtures for SeqChain tests.
"""

from pathlib import Path
from typing import Callable

import pytest

from seqchain import SequentialChain

EXAMPLES_ROOT = Path(__file__).resolve().parent.parent / "examples"


@pytest.fixture
def chain() -> SequentialChain[str]:
    """Create a fresh, empty chain."""
    return SequentialChain()


@pytest.fixture
def fruit_chain() -> SequentialChain[str]:
    """Chain holding Apple, Banana, Orange, Grape in that order."""
    return SequentialChain(["Apple", "Banana", "Orange", "Grape"])


@pytest.fixture
def demo_script() -> Path:
    """Path to the demonstration script."""
    path = EXAMPLES_ROOT / "chain_demo.py"
    if not path.exists():
        pytest.skip(f"Demo script not found: {path}")
    return path


def assert_chain_consistent(chain: SequentialChain) -> None:
    """
    Check the head/tail/count bookkeeping of a chain.

    Args:
        chain: Chain to inspect (must not contain a cycle)
    """
    count = chain._count
    if count == 0:
        assert chain._head is None, "empty chain has a head"
        assert chain._tail is None, "empty chain has a tail"
        return

    assert chain._head is not None and chain._tail is not None
    node = chain._head
    for _ in range(count - 1):
        assert node.value is not None
        node = node._next
        assert node is not None, f"chain ends before {count} nodes"
    assert node is chain._tail, f"node {count - 1} is not the tail"
    assert node._next is None, "tail has a successor"


@pytest.fixture
def check_invariants() -> Callable[[SequentialChain], None]:
    """Invariant checker usable from any test."""
    return assert_chain_consistent
