"""
SequentialChain demonstration.

Walks through the container operations step by step:
- Filling a chain with fruit names
- Reading elements by position
- Membership and position lookups
- Removal by position and by value
- Clearing the chain

Finishes with a small numeric chain.
"""

from __future__ import annotations

import logging

from seqchain import SequentialChain


def print_state(chain: SequentialChain[str], label: str) -> None:
    """Print the rendered chain and its derived statistics."""
    print(f"{label}: {chain}")
    print(f"Number of elements: {chain.length()}")
    print(f"Chain is empty: {chain.is_empty()}")


def demo_text_chain() -> None:
    """Demonstrate a chain of strings."""
    chain: SequentialChain[str] = SequentialChain()

    for fruit in ("Apple", "Banana", "Orange", "Grape"):
        chain.insert_tail(fruit)

    print_state(chain, "Initial chain")

    print()
    print("--- Elements by position ---")
    print(f"Element at position 1: {chain.element_at(1)}")
    print(f"Element at position 2: {chain.element_at(2)}")

    print()
    print("--- Membership ---")
    print(f"Contains 'Apple': {chain.contains('Apple')}")
    print(f"Contains 'Mango': {chain.contains('Mango')}")

    print()
    print("--- Positions ---")
    print(f"Position of 'Orange': {chain.find_position('Orange')}")
    print(f"Position of 'Mango': {chain.find_position('Mango')}")

    print()
    print("--- Removal by position ---")
    removed = chain.remove_at(1)
    print(f"Removed from position 1: {removed}")
    print(f"Chain after removal: {chain}")

    print()
    print("--- Removal by value ---")
    found = chain.remove_value("Grape")
    print(f"'Grape' removed: {found}")
    print(f"Chain after removal: {chain}")

    print()
    print("--- Clearing ---")
    chain.clear()
    print_state(chain, "Chain after clear")


def demo_number_chain() -> None:
    """Demonstrate a chain of integers."""
    print()
    print("--- Numeric chain ---")
    numbers = SequentialChain([100, 200, 300])
    print(f"Numeric chain: {numbers}")
    print(f"Sum of first two elements: {numbers.element_at(0) + numbers.element_at(1)}")


def main() -> None:
    """Run the demonstration."""
    logging.basicConfig(level=logging.INFO)

    print("=== SequentialChain demonstration ===")
    demo_text_chain()
    demo_number_chain()
    print()
    print("=== Demonstration complete ===")


if __name__ == "__main__":
    main()
