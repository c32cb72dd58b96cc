"""
Result monad over kungfu.Result
===============================

- pure: Ok
- bind: short-circuits on Error
- fail: Error(error)
- plus: first Ok wins, otherwise the second alternative is built and returned
- fix / tail_rec / embed: supported

No `zero`: an empty choice would need an error value out of thin air.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Error, Ok, Result

from .._types import Done, Loop, Step
from .later import Later
from .protocol import Monad


def _bind[T, U, E](
    m: Result[T, E],
    f: Callable[[T], Result[U, E]],
) -> Result[U, E]:
    match m:
        case Ok(value):
            return f(value)
        case Error(_):
            return m
        case _ as unreachable:
            typing.assert_never(unreachable)


def _map[T, U, E](m: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:
    match m:
        case Ok(value):
            return Ok(f(value))
        case Error(_):
            return m
        case _ as unreachable:
            typing.assert_never(unreachable)


def _plus[T, E](m: Result[T, E], alternative: Callable[[], Result[T, E]]) -> Result[T, E]:
    match m:
        case Ok(_):
            return m
        case Error(_):
            return alternative()
        case _ as unreachable:
            typing.assert_never(unreachable)


def _fix[T, E](f: Callable[[Later[T]], Result[T, E]]) -> Result[T, E]:
    later: Later[T] = Later()
    result = f(later)
    match result:
        case Ok(value):
            later.resolve(value)
    return result


def _tail_rec[S, B, E](
    step: Callable[[S], Result[Step[S, B], E]],
    seed: S,
) -> Result[B, E]:
    state = seed
    while True:
        result = step(state)
        match result:
            case Ok(Loop(s)):
                state = s
            case Ok(Done(value)):
                return Ok(value)
            case Error(_):
                return result
            case _ as unreachable:
                typing.assert_never(unreachable)


def _embed[T](thunk: Callable[[], T]) -> Result[T, typing.Never]:
    return Ok(thunk())


def _fail[E](error: E) -> Result[typing.Never, E]:
    return Error(error)


RESULT: typing.Final = Monad(
    name="result",
    pure=Ok,
    bind=_bind,
    map=_map,
    fail=_fail,
    plus=_plus,
    fix=_fix,
    tail_rec=_tail_rec,
    embed=_embed,
)

__all__ = ("RESULT",)
