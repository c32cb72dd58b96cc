"""Identity monad: plain values, no effects.

A writer over IDENTITY is the classic pure writer; running it yields the
(result, output) pair directly."""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._types import Done, Loop, Step
from .later import Later
from .protocol import Monad


def _bind(m: typing.Any, f: Callable[[typing.Any], typing.Any]) -> typing.Any:
    return f(m)


def _map(m: typing.Any, f: Callable[[typing.Any], typing.Any]) -> typing.Any:
    return f(m)


def _fix[A](f: Callable[[Later[A]], A]) -> A:
    later: Later[A] = Later()
    value = f(later)
    later.resolve(value)
    return value


def _tail_rec[S, B](step: Callable[[S], Step[S, B]], seed: S) -> B:
    state = seed
    while True:
        match step(state):
            case Loop(s):
                state = s
            case Done(value):
                return value
            case _ as unreachable:
                typing.assert_never(unreachable)


def _embed[T](thunk: Callable[[], T]) -> T:
    return thunk()


def _pure[T](value: T) -> T:
    return value


IDENTITY: typing.Final = Monad(
    name="identity",
    pure=_pure,
    bind=_bind,
    map=_map,
    fix=_fix,
    tail_rec=_tail_rec,
    embed=_embed,
)

__all__ = ("IDENTITY",)
