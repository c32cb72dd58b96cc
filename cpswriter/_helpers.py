"""Internal helpers for cpswriter.

Common functions used across multiple modules.
These are not part of the public API but can be used for building custom monads."""

from __future__ import annotations

from ._types import Pair

# Chain = persistent cons list, newest element first.
# Shared between branches of a nondeterministic inner monad, so never mutated.
type Chain[T] = tuple[T, Chain[T]] | None


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def first[A, W](pair: Pair[A, W]) -> A:
    """Result half of a (result, accumulator) pair."""
    return pair[0]


def second[A, W](pair: Pair[A, W]) -> W:
    """Accumulator half of a (result, accumulator) pair."""
    return pair[1]


def snoc[T](chain: Chain[T], item: T) -> Chain[T]:
    """Append item to a persistent chain in O(1)."""
    return (item, chain)


def unwind[T](chain: Chain[T]) -> list[T]:
    """Materialize a chain in insertion order."""
    items: list[T] = []
    while chain is not None:
        item, chain = chain
        items.append(item)
    items.reverse()
    return items


__all__ = (
    "Chain",
    "identity",
    "first",
    "second",
    "snoc",
    "unwind",
)
