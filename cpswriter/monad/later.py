"""
Later - lazy cell for fixpoint construction
===========================================

Python evaluates eagerly, so a computation that refers to its own result
receives a Later handle instead of the value. The handle is resolved once the
fixpoint has produced its result; forcing it earlier raises FixpointError.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable

from .._errors import FixpointError

logger = logging.getLogger(__name__)

_UNSET: typing.Final = object()


class Later[T]:
    """Value that becomes available after construction finishes."""

    __slots__ = ("_value", "_source", "_f")

    def __init__(self) -> None:
        self._value: typing.Any = _UNSET
        self._source: Later[typing.Any] | None = None
        self._f: Callable[[typing.Any], T] | None = None

    @property
    def ready(self) -> bool:
        """True once the value can be forced without raising. Never runs mapped functions."""
        if self._value is not _UNSET:
            return True
        if self._source is None:
            return False
        return self._source.ready

    def resolve(self, value: T, /) -> None:
        """Tie the knot. Only the fixpoint combinator calls this."""
        if self._source is not None:
            raise RuntimeError("Later.resolve() called on a derived handle")
        if self._value is not _UNSET:
            raise RuntimeError("Later.resolve() called twice")
        self._value = value
        logger.debug("fixpoint resolved to %r", value)

    def force(self) -> T:
        """Return the value, raising FixpointError if not produced yet."""
        if self._value is _UNSET:
            if self._source is None or self._f is None:
                raise FixpointError()
            self._value = self._f(self._source.force())
            self._source = self._f = None
        return self._value

    def map[U](self, f: Callable[[T], U], /) -> Later[U]:
        """Derived handle; f runs on first force."""
        derived: Later[U] = Later()
        derived._source = self
        derived._f = f
        return derived

    def __repr__(self) -> str:
        if self._value is _UNSET:
            return "Later(<pending>)"
        return f"Later({self._value!r})"


__all__ = ("Later",)
