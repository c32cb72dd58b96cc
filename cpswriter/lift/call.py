"""
Call functions with automatic lifting into a writer.

The call itself is deferred until the writer runs, so building a pipeline
never triggers effects.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps

from .._types import Inner
from ..writer import Layer, WriterT


def call[W, T, **P](
    layer: Layer[W],
    func: Callable[P, Inner],
    *args: P.args,
    **kwargs: P.kwargs,
) -> WriterT[W, T]:
    """
    Call a function returning an inner computation M[T]; no output.

    Example:
        w = Layer.result(Log.monoid())
        user = L.call(w, fetch_user, 42)  # fetch_user(42) -> Result[User, E]
    """
    fmap = layer.monad.fmap

    def step(acc: W) -> Inner:
        return fmap(func(*args, **kwargs), lambda value: (value, acc))

    return layer.wrap(step)


def call_writer[W, T, **P](
    layer: Layer[W],
    func: Callable[P, Inner],
    *args: P.args,
    **kwargs: P.kwargs,
) -> WriterT[W, T]:
    """
    Call a function returning M[(value, output)] and fold the output in.

    Use for "pure" writer functions that report their own output.
    """
    fmap = layer.monad.fmap
    combine = layer.monoid.combine

    def step(acc: W) -> Inner:
        def fold_in(pair: tuple[T, W]) -> tuple[T, W]:
            value, output = pair
            total = combine(acc, output)
            return value, total

        return fmap(func(*args, **kwargs), fold_in)

    return layer.wrap(step)


def lifted[W](layer: Layer[W]) -> Callable[[Callable[..., Inner]], Callable[..., WriterT[W, object]]]:
    """
    Decorator: make a function returning M[T] return WriterT[W, T].

    Example:
        @L.lifted(w)
        def fetch_user(user_id: int) -> Result[User, APIError]: ...

        fetch_user(42)  # WriterT, nothing called yet
    """

    def decorator(func: Callable[..., Inner]) -> Callable[..., WriterT[W, object]]:
        @wraps(func)
        def wrapper(*args: object, **kwargs: object) -> WriterT[W, object]:
            return call(layer, func, *args, **kwargs)

        return wrapper

    return decorator


__all__ = (
    "call",
    "call_writer",
    "lifted",
)
