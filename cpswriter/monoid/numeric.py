"""Numeric accumulators: running sum and running product."""

from __future__ import annotations

from dataclasses import dataclass

from .protocol import Monoid


@dataclass(frozen=True, slots=True)
class Sum:
    """Additive accumulator, neutral element 0."""

    value: int | float = 0

    @staticmethod
    def monoid() -> Monoid[Sum]:
        return Monoid.of(Sum)

    def combine(self, other: Sum, /) -> Sum:
        return Sum(self.value + other.value)


@dataclass(frozen=True, slots=True)
class Product:
    """Multiplicative accumulator, neutral element 1."""

    value: int | float = 1

    @staticmethod
    def monoid() -> Monoid[Product]:
        return Monoid.of(Product)

    def combine(self, other: Product, /) -> Product:
        return Product(self.value * other.value)


__all__ = ("Product", "Sum")
