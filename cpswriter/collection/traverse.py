"""Traverse combinators

Monadic traverse and fold for writers. Both loop through Layer.tail_rec, so
the number of items is not bounded by the interpreter's recursion limit, and
every item's output is combined before the next item runs."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from .._helpers import Chain, snoc, unwind
from .._types import Done, Loop, Step
from ..writer import Layer, WriterT


def traverse[W, A, T](
    layer: Layer[W],
    items: Sequence[A],
    handler: Callable[[A], WriterT[W, T]],
) -> WriterT[W, list[T]]:
    """Monadic map: A -> WriterT[W, T]. Sequential, outputs in item order."""
    count = len(items)

    def step(state: tuple[int, Chain[T]]) -> WriterT[W, Step[tuple[int, Chain[T]], list[T]]]:
        index, chain = state
        if index == count:
            return layer.pure(Done(unwind(chain)))
        return handler(items[index]).map(lambda value: Loop((index + 1, snoc(chain, value))))

    return layer.tail_rec(step, (0, None))


def fold[W, A, T](
    layer: Layer[W],
    items: Sequence[A],
    handler: Callable[[T, A], WriterT[W, T]],
    *,
    initial: T,
) -> WriterT[W, T]:
    """Effectful fold: build up state through sequential writer steps."""
    count = len(items)

    def step(state: tuple[int, T]) -> WriterT[W, Step[tuple[int, T], T]]:
        index, acc = state
        if index == count:
            return layer.pure(Done(acc))
        return handler(acc, items[index]).map(lambda new_acc: Loop((index + 1, new_acc)))

    return layer.tail_rec(step, (0, initial))


__all__ = ("fold", "traverse")
