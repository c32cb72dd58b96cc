"""WriterT - strict writer transformer in continuation-passing style.

A writer step is stored as a function from the accumulator so far to an inner
computation yielding (result, new accumulator). Every step combines its own
output into the incoming accumulator before returning, so sequencing N steps
never leaves N pending combinations behind.

Contrast with the pair-based writer (`(result, log)` then `log.combine(...)`
after the fact), where the combine of step N waits for everything after it.

`then` and `map` do not compose step functions. They record a bind node
(source + continuation), and running walks the nodes in a loop driven by the
inner monad's `loop`, so chains of any length and association run in
constant stack."""

from __future__ import annotations

import dataclasses
import typing
from collections.abc import Callable

from .._helpers import Chain, identity, second
from .._types import Done, Inner, Loop, Pair
from ..monoid import Monoid

if typing.TYPE_CHECKING:
    from .layer import Layer


class WriterT[W, A]:
    """Accumulator-threading computation over an inner monad.

    Monadic laws (given lawful monoid and inner monad):
    - Left identity: layer.pure(a).then(f) == f(a)
    - Right identity: m.then(layer.pure) == m
    - Associativity: m.then(f).then(g) == m.then(lambda x: f(x).then(g))
    """

    __slots__ = ("_step", "_source", "_cont", "_layer")

    def __init__(self, step: Callable[[W], Inner], /, layer: Layer[W]) -> None:
        """Wrap a raw step `acc -> M[(result, acc')]` built in `layer`."""
        self._step: Callable[[W], Inner] | None = step
        self._source: WriterT[W, typing.Any] | None = None
        self._cont: Callable[[typing.Any], WriterT[W, A]] | None = None
        self._layer = layer

    @classmethod
    def _bound(
        cls,
        source: WriterT[W, typing.Any],
        cont: Callable[[typing.Any], WriterT[W, A]],
    ) -> WriterT[W, A]:
        node = cls.__new__(cls)
        node._step = None
        node._source = source
        node._cont = cont
        node._layer = source._layer
        return node

    @property
    def layer(self) -> Layer[W]:
        """Monoid + inner monad this computation was built with."""
        return self._layer

    # Execution

    def __call__(self, acc: W, /) -> Inner:
        """Run the continuation from an explicit accumulator."""
        if self._step is not None:
            return self._step(acc)
        return self._interpret(acc)

    def _interpret(self, acc: W) -> Inner:
        # Loop state: (node to run, pending continuations, accumulator).
        fmap = self._layer.monad.fmap

        def body(state: tuple[WriterT[W, typing.Any], Chain[Callable], W]) -> Inner:
            node, pending, acc = state
            while node._step is None:
                pending = (node._cont, pending)
                node = node._source

            def resume(pair: Pair[typing.Any, W]) -> Loop | Done:
                value, total = pair
                if pending is None:
                    return Done((value, total))
                cont, rest = pending
                return Loop((cont(value), rest, total))

            return fmap(node._step(acc), resume)

        return self._layer.monad.loop(body, (self, None, acc))

    def run_with(self, acc: W, /) -> Inner:
        """Run from `acc` instead of the neutral accumulator."""
        return self(acc)

    def run(self) -> Inner:
        """Run from the neutral accumulator: M[(result, output)]."""
        return self(self._layer.monoid.empty())

    def exec(self) -> Inner:
        """Run and keep only the output: M[output]."""
        return self._layer.monad.fmap(self.run(), second)

    # Functor / Applicative / Monad

    def map[B](self, f: Callable[[A], B], /) -> WriterT[W, B]:
        """Apply f to the result, accumulator untouched."""
        pure = self._layer.pure
        return WriterT._bound(self, lambda a: pure(f(a)))

    def then[B](self, f: Callable[[A], WriterT[W, B]], /) -> WriterT[W, B]:
        """
        Monadic bind (>>=).

        Runs self with the incoming accumulator, then f(result) with the
        accumulator self returned. Each side combines its own output on
        the way, so nothing is deferred. Stack use does not grow with the
        length of the chain, whichever way it is associated.
        """
        return WriterT._bound(self, f)

    def then_inner[B](self, f: Callable[[A], Inner], /) -> WriterT[W, B]:
        """Bind with a function returning a plain inner computation (no output)."""
        lift = self._layer.lift
        return self.then(lambda a: lift(f(a)))

    def ap[B, C](
        self: WriterT[W, Callable[[B], C]],
        other: WriterT[W, B],
        /,
    ) -> WriterT[W, C]:
        """Apply the function produced by self to the result of other (self runs first)."""
        return self.then(lambda f: other.map(f))

    def zip[B](self, other: WriterT[W, B], /) -> WriterT[W, tuple[A, B]]:
        """Run self then other, pair the results."""
        return self.then(lambda a: other.map(lambda b: (a, b)))

    def or_else(self, other: WriterT[W, A], /) -> WriterT[W, A]:
        """
        Choice between two computations via the inner monad's `plus`.

        Both alternatives start from the same incoming accumulator; which
        output survives is decided by the inner monad (fallback for Result,
        all branches for lists). `other` is only started if the inner monad
        asks for it, so a successful Result never runs the fallback.
        """
        plus = self._layer.monad.require("plus")

        def chosen(acc: W) -> Inner:
            return plus(self(acc), lambda: other(acc))

        return WriterT(chosen, self._layer)

    # Writer operations

    def observe(self) -> WriterT[W, tuple[A, W]]:
        """Attach own output to the result, still propagating it upward."""
        return self.observe_with(identity)

    def observe_with[B](self, f: Callable[[W], B], /) -> WriterT[W, tuple[A, B]]:
        """Attach f(own output) to the result, still propagating the output."""
        fmap = self._layer.monad.fmap
        combine = self._layer.monoid.combine
        run = self.run

        def observed(acc: W) -> Inner:
            def attach(pair: Pair[A, W]) -> Pair[tuple[A, B], W]:
                value, output = pair
                total = combine(acc, output)
                return (value, f(output)), total

            return fmap(run(), attach)

        return WriterT(observed, self._layer)

    def restrict[B, V](
        self: WriterT[W, tuple[B, Callable[[W], V]]],
        *,
        monoid: Monoid[V] | None = None,
    ) -> WriterT[V, B]:
        """
        Result is (value, g): fold g(own output) into the enclosing accumulator
        instead of the output itself, and keep only value.

        Pass `monoid` when g changes the accumulator type.
        """
        layer = self._layer if monoid is None else dataclasses.replace(self._layer, monoid=monoid)
        fmap = layer.monad.fmap
        combine = layer.monoid.combine
        run = self.run

        def restricted(acc: V) -> Inner:
            def fold_in(pair: Pair[tuple[B, Callable[[W], V]], W]) -> Pair[B, V]:
                (value, g), output = pair
                total = combine(acc, g(output))
                return value, total

            return fmap(run(), fold_in)

        return WriterT(restricted, layer)

    def rewrite(self, f: Callable[[W], W], /) -> WriterT[W, A]:
        """Post-process own output with f, result unchanged."""
        return self.map(lambda a: (a, f)).restrict()

    def remap[B, V](
        self,
        f: Callable[[Inner], Inner],
        /,
        *,
        layer: Layer[V] | None = None,
    ) -> WriterT[V, B]:
        """
        Transform the whole underlying computation.

        f receives M[(result, output)] of self run from neutral and returns
        N[(b, output')] in the target layer (defaults to self's layer).
        Law: remap(f).run() == f(self.run()).
        """
        target = self._layer if layer is None else layer
        fmap = target.monad.fmap
        combine = target.monoid.combine
        run = self.run

        def remapped(acc: V) -> Inner:
            def fold_in(pair: Pair[B, V]) -> Pair[B, V]:
                value, output = pair
                total = combine(acc, output)
                return value, total

            return fmap(f(run()), fold_in)

        return WriterT(remapped, target)

    def __repr__(self) -> str:
        return f"WriterT(monoid={self._layer.monoid.name!r}, monad={self._layer.monad.name!r})"


__all__ = ("WriterT",)
