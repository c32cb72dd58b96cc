"""
Inner monads
============

Capability records the writer transformer runs inside:
- IDENTITY: plain values
- RESULT: kungfu.Result (failure, fallback choice)
- LAZY: kungfu.LazyCoroResult (async, failure, fallback choice)
- MANY: lists (nondeterminism)

Custom monads: build a Monad record with at least pure and bind.
"""

from .identity import IDENTITY
from .later import Later
from .lazy import LAZY
from .many import MANY
from .protocol import Monad
from .result import RESULT

__all__ = (
    "IDENTITY",
    "LAZY",
    "Later",
    "MANY",
    "Monad",
    "RESULT",
)
