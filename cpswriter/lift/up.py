"""
Lift values into a writer layer.

Bridges for plain values, kungfu Results, Optionals and exception-based code.
All of them need a layer whose inner monad supports `fail`.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Never, assert_never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import Inner
from ..monad import LAZY
from ..writer import Layer, WriterT


def from_result[W, T, E](layer: Layer[W], value: Result[T, E]) -> WriterT[W, T]:
    """
    Lift an already-computed Result: Ok -> pure, Error -> fail.

    Example:
        w = Layer.result(Log.monoid())
        L.up.from_result(w, Ok(42)).run()  # Ok((42, Log([])))
    """
    match value:
        case Ok(v):
            return layer.pure(v)
        case Error(e):
            return layer.fail(e)
        case _ as unreachable:
            assert_never(unreachable)


def optional[W, T, E](
    layer: Layer[W],
    value: T | None,
    *,
    error: Callable[[], E],
) -> WriterT[W, T]:
    """
    Convert Optional to a writer. None becomes fail(error()).

    NOTE: error is a thunk to avoid building the error when value is present.
    """
    if value is None:
        return layer.fail(error())
    return layer.pure(value)


def catching[W, T, E](
    layer: Layer[W],
    thunk: Callable[[], T],
    *,
    on_error: Callable[[Exception], E],
) -> WriterT[W, T]:
    """
    Call sync thunk each time the writer runs; exceptions become fail(on_error(exc)).

    Example:
        parsed = L.up.catching(w, lambda: json.loads(raw), on_error=ParseError.from_exc)
    """
    fail = layer.monad.require("fail")
    pure = layer.monad.pure

    def step(acc: W) -> Inner:
        try:
            value = thunk()
        except Exception as exc:
            return fail(on_error(exc))
        return pure((value, acc))

    return layer.wrap(step)


def catching_async[W, T, E](
    layer: Layer[W],
    thunk: Callable[[], Awaitable[T]],
    *,
    on_error: Callable[[Exception], E],
) -> WriterT[W, T]:
    """Async version of catching(). Only for layers over LAZY."""
    if layer.monad is not LAZY:
        raise ValueError(f"catching_async() requires a layer over LAZY, got {layer.monad.name!r}")

    def step(acc: W) -> LazyCoroResult[tuple[T, W], E]:
        async def run() -> Result[tuple[T, W], E]:
            try:
                value = await thunk()
            except Exception as exc:
                return Error(on_error(exc))
            return Ok((value, acc))

        return LazyCoroResult(run)

    return layer.wrap(step)


def fail[W, E](layer: Layer[W], error: E) -> WriterT[W, Never]:
    """Always-failing writer. Dual of pure()."""
    return layer.fail(error)


def pure[W, T](layer: Layer[W], value: T) -> WriterT[W, T]:
    """Always-succeeding writer with no output."""
    return layer.pure(value)


__all__ = (
    "pure",
    "fail",
    "from_result",
    "optional",
    "catching",
    "catching_async",
)
