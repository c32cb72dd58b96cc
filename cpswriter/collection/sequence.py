"""Sequence combinators

Run a list of writers left to right."""

from __future__ import annotations

from collections.abc import Sequence

from .._helpers import identity
from .._types import Done, Loop, Step
from ..writer import Layer, WriterT
from .traverse import traverse


def sequence[W, T](layer: Layer[W], writers: Sequence[WriterT[W, T]]) -> WriterT[W, list[T]]:
    """[WriterT[W, T]] -> WriterT[W, [T]]. Outputs combined in list order."""
    return traverse(layer, writers, identity)


def sequence_[W](layer: Layer[W], writers: Sequence[WriterT[W, object]]) -> WriterT[W, None]:
    """Run all writers for their output, discard results."""
    count = len(writers)

    def step(index: int) -> WriterT[W, Step[int, None]]:
        if index == count:
            return layer.pure(Done(None))
        return writers[index].map(lambda _: Loop(index + 1))

    return layer.tail_rec(step, 0)


__all__ = ("sequence", "sequence_")
