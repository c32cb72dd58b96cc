"""List monad: nondeterministic choice.

Each computation is a list of alternatives. bind explores them depth-first,
left to right. An empty list is failure; plus concatenates alternatives.
There is no `fix`: tying a knot per alternative needs lazy lists."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterator

from .._types import Done, Loop, Step
from .protocol import Monad


def _pure[T](value: T) -> list[T]:
    return [value]


def _bind[T, U](m: list[T], f: Callable[[T], list[U]]) -> list[U]:
    return [u for t in m for u in f(t)]


def _map[T, U](m: list[T], f: Callable[[T], U]) -> list[U]:
    return [f(t) for t in m]


def _fail(error: object) -> list[typing.Never]:
    _ = error
    return []


def _zero() -> list[typing.Never]:
    return []


def _plus[T](m: list[T], alternative: Callable[[], list[T]]) -> list[T]:
    return [*m, *alternative()]


def _tail_rec[S, B](step: Callable[[S], list[Step[S, B]]], seed: S) -> list[B]:
    out: list[B] = []
    stack: list[Iterator[Step[S, B]]] = [iter(step(seed))]
    while stack:
        for marker in stack[-1]:
            match marker:
                case Loop(s):
                    stack.append(iter(step(s)))
                    break
                case Done(value):
                    out.append(value)
                case _ as unreachable:
                    typing.assert_never(unreachable)
        else:
            stack.pop()
    return out


def _embed[T](thunk: Callable[[], T]) -> list[T]:
    return [thunk()]


MANY: typing.Final = Monad(
    name="many",
    pure=_pure,
    bind=_bind,
    map=_map,
    fail=_fail,
    zero=_zero,
    plus=_plus,
    tail_rec=_tail_rec,
    embed=_embed,
)

__all__ = ("MANY",)
