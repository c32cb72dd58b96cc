"""
Lazy async monad over kungfu.LazyCoroResult
===========================================

Every operation builds a new LazyCoroResult; nothing runs until the final
computation is awaited.

- fail: Error(error).to_async()
- plus: run the second alternative only if the first one fails
- tail_rec: plain `while` loop inside one coroutine
- embed: accepts a zero-arg async thunk
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import Done, Loop, Step
from .later import Later
from .protocol import Monad


def _pure[T](value: T) -> LazyCoroResult[T, typing.Never]:
    return LazyCoroResult.pure(value)


def _bind[T, U, E](
    m: LazyCoroResult[T, E],
    f: Callable[[T], LazyCoroResult[U, E]],
) -> LazyCoroResult[U, E]:
    async def run() -> Result[U, E]:
        result = await m()
        match result:
            case Ok(value):
                return await f(value)()
            case Error(_):
                return result
            case _ as unreachable:
                typing.assert_never(unreachable)

    return LazyCoroResult(run)


def _map[T, U, E](m: LazyCoroResult[T, E], f: Callable[[T], U]) -> LazyCoroResult[U, E]:
    async def run() -> Result[U, E]:
        result = await m()
        match result:
            case Ok(value):
                return Ok(f(value))
            case Error(_):
                return result
            case _ as unreachable:
                typing.assert_never(unreachable)

    return LazyCoroResult(run)


def _fail[E](error: E) -> LazyCoroResult[typing.Never, E]:
    return Error(error).to_async()


def _plus[T, E](
    m: LazyCoroResult[T, E],
    alternative: Callable[[], LazyCoroResult[T, E]],
) -> LazyCoroResult[T, E]:
    async def run() -> Result[T, E]:
        result = await m()
        match result:
            case Ok(_):
                return result
            case Error(_):
                return await alternative()()
            case _ as unreachable:
                typing.assert_never(unreachable)

    return LazyCoroResult(run)


def _fix[T, E](f: Callable[[Later[T]], LazyCoroResult[T, E]]) -> LazyCoroResult[T, E]:
    async def run() -> Result[T, E]:
        later: Later[T] = Later()
        result = await f(later)()
        match result:
            case Ok(value):
                later.resolve(value)
        return result

    return LazyCoroResult(run)


def _tail_rec[S, B, E](
    step: Callable[[S], LazyCoroResult[Step[S, B], E]],
    seed: S,
) -> LazyCoroResult[B, E]:
    async def run() -> Result[B, E]:
        state = seed
        while True:
            result = await step(state)()
            match result:
                case Ok(Loop(s)):
                    state = s
                case Ok(Done(value)):
                    return Ok(value)
                case Error(_):
                    return result
                case _ as unreachable:
                    typing.assert_never(unreachable)

    return LazyCoroResult(run)


def _embed[T](thunk: Callable[[], Awaitable[T]]) -> LazyCoroResult[T, typing.Never]:
    async def run() -> Result[T, typing.Never]:
        return Ok(await thunk())

    return LazyCoroResult(run)


LAZY: typing.Final = Monad(
    name="lazy",
    pure=_pure,
    bind=_bind,
    map=_map,
    fail=_fail,
    plus=_plus,
    fix=_fix,
    tail_rec=_tail_rec,
    embed=_embed,
)

__all__ = ("LAZY",)
