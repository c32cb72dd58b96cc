"""
Layer - where writer computations are built
===========================================

A Layer binds an accumulator Monoid to an inner Monad. It is the
configuration record every WriterT carries, and the namespace for the
constructors that need to know both (emit, pure, lift, fail, fix...).

Example:
    from cpswriter import Layer, Log

    w = Layer.identity(Log.monoid())
    prog = w.emit(Log.of("a")).then(lambda _: w.emit(Log.of("b")))
    prog.run()  # (None, Log(["a", "b"]))
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._helpers import first
from .._types import Done, Inner, Loop, Pair, Step
from ..monad import IDENTITY, LAZY, MANY, RESULT, Later, Monad
from ..monoid import Monoid
from .transformer import WriterT


@dataclass(frozen=True, slots=True)
class Layer[W]:
    """Monoid for the output + inner monad for the steps."""

    monoid: Monoid[W]
    monad: Monad = IDENTITY

    def __post_init__(self) -> None:
        if not isinstance(self.monoid, Monoid):
            raise TypeError(f"Layer.monoid must be a Monoid, got {type(self.monoid).__name__}")
        if not isinstance(self.monad, Monad):
            raise TypeError(f"Layer.monad must be a Monad, got {type(self.monad).__name__}")

    # Factories for the bundled inner monads

    @classmethod
    def identity(cls, monoid: Monoid[W]) -> Layer[W]:
        """Pure writer: run() returns the (result, output) pair itself."""
        return cls(monoid=monoid, monad=IDENTITY)

    @classmethod
    def result(cls, monoid: Monoid[W]) -> Layer[W]:
        """Writer over kungfu.Result: run() returns Result[(result, output), E]."""
        return cls(monoid=monoid, monad=RESULT)

    @classmethod
    def lazy(cls, monoid: Monoid[W]) -> Layer[W]:
        """Writer over kungfu.LazyCoroResult: run() returns an awaitable LazyCoroResult."""
        return cls(monoid=monoid, monad=LAZY)

    @classmethod
    def many(cls, monoid: Monoid[W]) -> Layer[W]:
        """Nondeterministic writer: run() returns a list of (result, output) pairs."""
        return cls(monoid=monoid, monad=MANY)

    # Construction

    def wrap[A](self, step: Callable[[W], Inner], /) -> WriterT[W, A]:
        """Wrap a raw step `acc -> M[(result, acc')]`. The step must combine eagerly."""
        return WriterT(step, self)

    def writer[A](self, value: A, output: W, /) -> WriterT[W, A]:
        """
        Computation with a fixed result and output.

        The incoming accumulator and `output` are combined before the inner
        computation is even constructed.
        """
        combine = self.monoid.combine
        pure = self.monad.pure

        def step(acc: W) -> Inner:
            total = combine(acc, output)
            return pure((value, total))

        return WriterT(step, self)

    def emit(self, output: W, /) -> WriterT[W, None]:
        """Record output, no result."""
        return self.writer(None, output)

    def pure[A](self, value: A, /) -> WriterT[W, A]:
        """Result with no output; accumulator passes through untouched."""
        pure = self.monad.pure

        def step(acc: W) -> Inner:
            return pure((value, acc))

        return WriterT(step, self)

    def lift[A](self, m: Inner, /) -> WriterT[W, A]:
        """Embed an inner computation; its result is paired with the unchanged accumulator."""
        fmap = self.monad.fmap

        def step(acc: W) -> Inner:
            return fmap(m, lambda a: (a, acc))

        return WriterT(step, self)

    def embed[A](self, thunk: Callable[[], typing.Any], /) -> WriterT[W, A]:
        """
        Run an external computation through the inner monad's `embed`.

        The thunk is called each time the writer runs, never at construction.
        """
        embed = self.monad.require("embed")
        fmap = self.monad.fmap

        def step(acc: W) -> Inner:
            return fmap(embed(thunk), lambda a: (a, acc))

        return WriterT(step, self)

    # Failure and choice

    def fail(self, error: typing.Any, /) -> WriterT[W, typing.Never]:
        """Delegate to the inner monad's failure; the accumulator is dropped."""
        fail = self.monad.require("fail")

        def step(_acc: W) -> Inner:
            return fail(error)

        return WriterT(step, self)

    def empty(self) -> WriterT[W, typing.Never]:
        """Choice with no alternatives (inner `zero`)."""
        zero = self.monad.require("zero")

        def step(_acc: W) -> Inner:
            return zero()

        return WriterT(step, self)

    # Recursion

    def fix[A](self, f: Callable[[Later[A]], WriterT[W, A]], /) -> WriterT[W, A]:
        """
        Self-referential computation.

        f receives a Later handle on the final result (never the accumulator)
        and may capture it in the value it builds; forcing the handle before
        the computation finishes raises FixpointError.

        Example:
            w.fix(lambda me: w.writer(Node(next=me.force), Log.of("node")))
        """
        mfix = self.monad.require("fix")

        def step(acc: W) -> Inner:
            def body(later: Later[Pair[A, W]]) -> Inner:
                return f(later.map(first))(acc)

            return mfix(body)

        return WriterT(step, self)

    def tail_rec[S, B](
        self,
        step: Callable[[S], WriterT[W, Step[S, B]]],
        seed: S,
        /,
    ) -> WriterT[W, B]:
        """
        Iterate `step` from `seed` until it yields Done, in constant stack.

        The accumulator travels in the loop state and is combined by each
        iteration before the next one starts.
        """
        monad = self.monad

        def reshape(pair: Pair[Step[S, B], W]) -> Step[Pair[S, W], Pair[B, W]]:
            match pair:
                case (Loop(state), acc):
                    return Loop((state, acc))
                case (Done(value), acc):
                    return Done((value, acc))
                case _ as unreachable:
                    raise TypeError(f"tail_rec step must yield Loop or Done, got {unreachable!r}")

        def body(state: Pair[S, W]) -> Inner:
            s, acc = state
            return monad.fmap(step(s)(acc), reshape)

        def looped(acc: W) -> Inner:
            return monad.loop(body, (seed, acc))

        return WriterT(looped, self)


__all__ = ("Layer",)
