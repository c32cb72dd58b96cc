"""
Guard combinators
=================

Validation through the inner monad's failure.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from .._types import Predicate
from ..writer import WriterT


def ensure[W, T](
    writer: WriterT[W, T],
    *,
    predicate: Predicate[T],
    error: Callable[[T], typing.Any],
) -> WriterT[W, T]:
    """Fail with error(value) if value FAILS the check. Output so far is dropped with it."""
    layer = writer.layer
    layer.monad.require("fail")

    def check(value: T) -> WriterT[W, T]:
        return layer.pure(value) if predicate(value) else layer.fail(error(value))

    return writer.then(check)


def reject[W, T](
    writer: WriterT[W, T],
    *,
    predicate: Predicate[T],
    error: Callable[[T], typing.Any],
) -> WriterT[W, T]:
    """Fail with error(value) if value MATCHES the condition. Dual of ensure."""
    layer = writer.layer
    layer.monad.require("fail")

    def check(value: T) -> WriterT[W, T]:
        return layer.fail(error(value)) if predicate(value) else layer.pure(value)

    return writer.then(check)


__all__ = ("ensure", "reject")
