"""
Log - list accumulator for writers
==================================
"""

from __future__ import annotations

from .protocol import Monoid


class Log[A](list[A]):
    """
    Ordered log of entries.

    A list subclass with monoidal operations:
    - empty: Log()
    - combine: concatenation into a fresh Log (operands are never mutated)

    Example:
        Log.of("a", "b").combine(Log.of("c"))  # Log(["a", "b", "c"])
    """

    @staticmethod
    def of[T](*items: T) -> Log[T]:
        """Create log with items."""
        return Log[T](items)

    @staticmethod
    def monoid() -> Monoid[Log[A]]:
        """Monoid instance for use in a writer layer."""
        return Monoid.of(Log)

    def combine(self, other: Log[A], /) -> Log[A]:
        """Combine two logs (monoidal append)."""
        result: Log[A] = Log(self)
        result.extend(other)
        return result

    def tell(self, item: A, /) -> Log[A]:
        """Append single item, equivalent to self.combine(Log.of(item))."""
        result: Log[A] = Log(self)
        result.append(item)
        return result


__all__ = ("Log",)
