"""Writer operations as plain functions.

Function-style spelling of the WriterT / Layer methods, plus the pure-writer
helpers for layers over IDENTITY (run_writer, exec_writer, map_writer)."""

from __future__ import annotations

import dataclasses
import typing
from collections.abc import Callable

from .._types import Inner, Pair
from ..monad import IDENTITY
from ..monoid import Monoid
from .layer import Layer
from .transformer import WriterT


def from_pair[W, A](layer: Layer[W], value: A, output: W) -> WriterT[W, A]:
    """Construct a writer from a (result, output) pair. Inverse of run()."""
    return layer.writer(value, output)


def run[W, A](writer: WriterT[W, A]) -> Inner:
    """Execute from the neutral accumulator: M[(result, output)]."""
    return writer.run()


def extract_output[W, A](writer: WriterT[W, A]) -> Inner:
    """Execute and keep only the output: extract_output(t) == fmap(snd, run(t))."""
    return writer.exec()


def remap[W, A, V, B](
    f: Callable[[Inner], Inner],
    writer: WriterT[W, A],
    *,
    layer: Layer[V] | None = None,
) -> WriterT[V, B]:
    """Transform the underlying computation: run(remap(f, t)) == f(run(t))."""
    return writer.remap(f, layer=layer)


def emit[W](layer: Layer[W], output: W) -> WriterT[W, None]:
    """Record output, no result."""
    return layer.emit(output)


def observe[W, A](writer: WriterT[W, A]) -> WriterT[W, tuple[A, W]]:
    return writer.observe()


def observe_with[W, A, B](f: Callable[[W], B], writer: WriterT[W, A]) -> WriterT[W, tuple[A, B]]:
    return writer.observe_with(f)


def restrict[W, B, V](
    writer: WriterT[W, tuple[B, Callable[[W], V]]],
    *,
    monoid: Monoid[V] | None = None,
) -> WriterT[V, B]:
    return writer.restrict(monoid=monoid)


def rewrite[W, A](f: Callable[[W], W], writer: WriterT[W, A]) -> WriterT[W, A]:
    return writer.rewrite(f)


# Pure writer (inner monad = IDENTITY)


def _require_identity(writer: WriterT[typing.Any, typing.Any], caller: str) -> None:
    if writer.layer.monad is not IDENTITY:
        raise ValueError(f"{caller}() requires a layer over IDENTITY, got {writer.layer.monad.name!r}")


def run_writer[W, A](writer: WriterT[W, A]) -> Pair[A, W]:
    """Unwrap a pure writer as a (result, output) pair."""
    _require_identity(writer, "run_writer")
    return writer.run()


def exec_writer[W, A](writer: WriterT[W, A]) -> W:
    """Output of a pure writer: exec_writer(t) == run_writer(t)[1]."""
    _require_identity(writer, "exec_writer")
    return writer.exec()


def map_writer[W, A, V, B](
    f: Callable[[Pair[A, W]], Pair[B, V]],
    writer: WriterT[W, A],
    *,
    monoid: Monoid[V] | None = None,
) -> WriterT[V, B]:
    """
    Map both result and output of a pure writer.

    run_writer(map_writer(f, t)) == f(run_writer(t))
    """
    _require_identity(writer, "map_writer")
    layer = writer.layer if monoid is None else dataclasses.replace(writer.layer, monoid=monoid)
    return writer.remap(f, layer=layer)


# Aliases in classic writer vocabulary
tell = emit
listen = observe
listens = observe_with
censor = rewrite

__all__ = (
    "from_pair",
    "run",
    "extract_output",
    "remap",
    "emit",
    "observe",
    "observe_with",
    "restrict",
    "rewrite",
    "run_writer",
    "exec_writer",
    "map_writer",
    "tell",
    "listen",
    "listens",
    "censor",
)
