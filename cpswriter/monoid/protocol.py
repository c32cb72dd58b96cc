"""
Monoid - accumulator description
================================

A writer needs two things from its accumulator type: a neutral value and an
associative combine. Python has no typeclasses, so both are carried in an
explicit record and passed to the writer layer.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass


class Combinable[W](typing.Protocol):
    """Value type with a monoidal combine method (see Log, Sum, Product)."""

    def combine(self, other: W, /) -> W: ...


@dataclass(frozen=True, slots=True)
class Monoid[W]:
    """
    Neutral element + associative combine for accumulator type W.

    Laws the caller is responsible for:
    - Left identity: combine(empty(), x) == x
    - Right identity: combine(x, empty()) == x
    - Associativity: combine(combine(x, y), z) == combine(x, combine(y, z))

    `empty` is a factory so that mutable accumulators are never shared.
    """

    empty: Callable[[], W]
    combine: Callable[[W, W], W]
    name: str = "monoid"

    def concat(self, items: typing.Iterable[W], /) -> W:
        """Fold items left to right, starting from empty()."""
        total = self.empty()
        for item in items:
            total = self.combine(total, item)
        return total

    @classmethod
    def of[C: Combinable[typing.Any]](cls, kind: type[C]) -> Monoid[C]:
        """
        Monoid for a class with a no-argument constructor and `combine`.

        Example:
            Monoid.of(Log)  # empty = Log(), combine = Log.combine
        """

        def combine(left: C, right: C) -> C:
            return left.combine(right)

        return cls(empty=kind, combine=combine, name=kind.__name__)

    @classmethod
    def of_list(cls) -> Monoid[list[typing.Any]]:
        """Concatenation of plain lists."""

        def combine(left: list[typing.Any], right: list[typing.Any]) -> list[typing.Any]:
            return [*left, *right]

        return cls(empty=list, combine=combine, name="list")

    @classmethod
    def of_tuple(cls) -> Monoid[tuple[typing.Any, ...]]:
        """Concatenation of tuples."""

        def combine(
            left: tuple[typing.Any, ...],
            right: tuple[typing.Any, ...],
        ) -> tuple[typing.Any, ...]:
            return left + right

        return cls(empty=tuple, combine=combine, name="tuple")

    @classmethod
    def of_str(cls) -> Monoid[str]:
        """Concatenation of strings."""

        def combine(left: str, right: str) -> str:
            return left + right

        return cls(empty=str, combine=combine, name="str")


__all__ = ("Combinable", "Monoid")
