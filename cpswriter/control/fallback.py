"""
Fallback combinators
====================

Choice between writers through the inner monad's `plus`.
"""

from __future__ import annotations

import functools

from ..writer import WriterT


def fallback[W, T](
    primary: WriterT[W, T],
    secondary: WriterT[W, T],
) -> WriterT[W, T]:
    """
    Try secondary if primary fails.

    NOTE: Both start from the same accumulator. With RESULT / LAZY secondary
    is not started while primary succeeds, and the failed branch's output is
    discarded; with MANY both branches run and are kept.
    """
    return primary.or_else(secondary)


def fallback_chain[W, T](*writers: WriterT[W, T]) -> WriterT[W, T]:
    """Try each until one succeeds. Returns last failure if all fail."""
    if not writers:
        raise ValueError("fallback_chain() requires at least one writer")
    return functools.reduce(fallback, writers)


__all__ = ("fallback", "fallback_chain")
