"""Replicate combinators

Multiple sequential runs of one writer."""

from __future__ import annotations

from .._types import Done, Loop, Step
from ..writer import WriterT


def replicate[W, T](writer: WriterT[W, T], *, n: int) -> WriterT[W, list[T]]:
    """Run N times, collect all results (Haskell's replicateM)."""
    if n < 0:
        raise ValueError(f"replicate(): n must be >= 0, got {n}")

    from .sequence import sequence
    return sequence(writer.layer, [writer] * n)


def replicate_[W, T](writer: WriterT[W, T], *, n: int) -> WriterT[W, None]:
    """Run N times for the output only, in constant memory besides the accumulator."""
    if n < 0:
        raise ValueError(f"replicate_(): n must be >= 0, got {n}")

    layer = writer.layer

    def step(remaining: int) -> WriterT[W, Step[int, None]]:
        if remaining == 0:
            return layer.pure(Done(None))
        return writer.map(lambda _: Loop(remaining - 1))

    return layer.tail_rec(step, n)


__all__ = ("replicate", "replicate_")
