"""
Core type definitions for cpswriter.

Type aliases and step markers shared across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Pair = (result, accumulator) as produced by a writer step
type Pair[A, W] = tuple[A, W]

# Inner = a value of the inner monad; Python has no higher-kinded types
type Inner = typing.Any

# NoError = type representing "never fails" semantic
type NoError = typing.Never

# ============================================================================
# Loop markers for stack-safe iteration (tail_rec)
# ============================================================================


@dataclass(frozen=True, slots=True)
class Loop[S]:
    """Continue iterating with a new state."""

    state: S


@dataclass(frozen=True, slots=True)
class Done[B]:
    """Stop iterating and produce a value."""

    value: B


type Step[S, B] = Loop[S] | Done[B]

__all__ = (
    "Predicate",
    "Pair",
    "Inner",
    "NoError",
    "Loop",
    "Done",
    "Step",
)
