"""
Run writers and extract plain values.

Sync helpers expect a layer over RESULT, async ones a layer over LAZY.
"""

from __future__ import annotations

from typing import assert_never

from kungfu import Error, Ok, Result

from ..monad import LAZY, RESULT, Monad
from ..writer import WriterT


def _expect(writer: WriterT[object, object], monad: Monad, caller: str) -> None:
    if writer.layer.monad is not monad:
        raise ValueError(
            f"{caller}() requires a layer over {monad.name.upper()}, got {writer.layer.monad.name!r}"
        )


def to_result[W, T](writer: WriterT[W, T]) -> Result[tuple[T, W], object]:
    """Run and return Result[(value, output), E]."""
    _expect(writer, RESULT, "to_result")
    return writer.run()


def unsafe[W, T](writer: WriterT[W, T]) -> tuple[T, W]:
    """
    Run and unwrap, raises on Error.

    NOTE: The error's output is lost with it; a failed run carries none.
    """
    _expect(writer, RESULT, "unsafe")
    return writer.run().unwrap()


def or_else[W, T](writer: WriterT[W, T], default: T) -> tuple[T, W]:
    """Run; on Error return (default, empty output)."""
    _expect(writer, RESULT, "or_else")
    match writer.run():
        case Ok(pair):
            return pair
        case Error(_):
            return default, writer.layer.monoid.empty()
        case _ as unreachable:
            assert_never(unreachable)


async def to_result_async[W, T](writer: WriterT[W, T]) -> Result[tuple[T, W], object]:
    """Await the run of a LAZY writer."""
    _expect(writer, LAZY, "to_result_async")
    return await writer.run()()


async def unsafe_async[W, T](writer: WriterT[W, T]) -> tuple[T, W]:
    """Await the run of a LAZY writer and unwrap, raises on Error."""
    _expect(writer, LAZY, "unsafe_async")
    result = await writer.run()()
    return result.unwrap()


__all__ = (
    "to_result",
    "unsafe",
    "or_else",
    "to_result_async",
    "unsafe_async",
)
