"""
Monad - inner capability record
===============================

The writer transformer runs its steps inside an opaque inner computation.
Python cannot abstract over type constructors, so an inner monad is described
by a record of functions rather than by a base class.

Required:
- pure(value) -> M[value]
- bind(m, f) -> M[b]        where f: a -> M[b]

Optional (None = unsupported):
- fmap(m, f)                defaults to bind + pure
- fail(error)               failure
- zero() / plus(m, alt)     choice; alt is a thunk, called only if needed
- fix(f)                    f: Later[a] -> M[a]
- tail_rec(step, seed)      step: s -> M[Loop[s] | Done[b]], constant stack
- embed(thunk)              run an external computation inside M
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._errors import UnsupportedCapabilityError
from .._types import Done, Inner, Loop, Step
from .later import Later

logger = logging.getLogger(__name__)

type Bind = Callable[[Inner, Callable[[typing.Any], Inner]], Inner]
type Fmap = Callable[[Inner, Callable[[typing.Any], typing.Any]], Inner]
type TailRec = Callable[[Callable[[typing.Any], Inner], typing.Any], Inner]
type Fix = Callable[[Callable[[Later[typing.Any]], Inner]], Inner]


@dataclass(frozen=True, slots=True)
class Monad:
    """
    Typeclass record for an inner monad.

    Laws (the instance author's responsibility):
    - Left identity: bind(pure(a), f) == f(a)
    - Right identity: bind(m, pure) == m
    - Associativity: bind(bind(m, f), g) == bind(m, lambda x: bind(f(x), g))
    """

    name: str
    pure: Callable[[typing.Any], Inner]
    bind: Bind
    map: Fmap | None = None
    fail: Callable[[typing.Any], Inner] | None = None
    zero: Callable[[], Inner] | None = None
    plus: Callable[[Inner, Callable[[], Inner]], Inner] | None = None
    fix: Fix | None = None
    tail_rec: TailRec | None = None
    embed: Callable[[Callable[[], typing.Any]], Inner] | None = None

    def fmap(self, m: Inner, f: Callable[[typing.Any], typing.Any], /) -> Inner:
        """Functor map, falling back to bind + pure."""
        if self.map is not None:
            return self.map(m, f)
        pure = self.pure
        return self.bind(m, lambda a: pure(f(a)))

    def supports(self, capability: str, /) -> bool:
        return getattr(self, capability) is not None

    def require(self, capability: str, /) -> typing.Any:
        """Return an optional capability or raise UnsupportedCapabilityError."""
        fn = getattr(self, capability)
        if fn is None:
            logger.debug("monad %s lacks capability %s", self.name, capability)
            raise UnsupportedCapabilityError(capability, self.name)
        return fn

    def loop[S, B](self, step: Callable[[S], Inner], seed: S, /) -> Inner:
        """
        Iterate step until it produces Done.

        Uses the instance's tail_rec when present, otherwise recursive bind
        (correct, but limited by the interpreter's recursion depth).
        """
        if self.tail_rec is not None:
            return self.tail_rec(step, seed)

        logger.debug("monad %s has no tail_rec, looping through recursive bind", self.name)
        pure, bind = self.pure, self.bind

        def go(state: S) -> Inner:
            def next_(marker: Step[S, B]) -> Inner:
                match marker:
                    case Loop(s):
                        return go(s)
                    case Done(value):
                        return pure(value)
                    case _ as unreachable:
                        typing.assert_never(unreachable)

            return bind(step(state), next_)

        return go(seed)


__all__ = ("Monad",)
