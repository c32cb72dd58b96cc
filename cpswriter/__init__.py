"""
Strict continuation-passing writer for Python.

Run a sequence of steps that each produce a result plus an output, where
outputs are combined with a monoid eagerly at every step instead of being
appended after the fact.

Architecture:
- Monoid: how outputs combine (Log, Sum, Product, or your own)
- Monad: the inner computation steps run in (IDENTITY, RESULT, LAZY, MANY)
- Layer: Monoid + Monad, builds WriterT computations
- WriterT: the transformer itself (then, map, observe, restrict, rewrite...)
"""

# Core types
from ._types import Done, Loop, NoError, Pair, Predicate, Step

# Internal helpers (for custom monads)
from . import _helpers

# Accumulators
from . import monoid
from .monoid import Log, Monoid, Product, Sum

# Inner monads
from . import monad
from .monad import IDENTITY, LAZY, MANY, RESULT, Later, Monad

# Writer transformer
from . import writer
from .writer import (
    Layer,
    WriterT,
    censor,
    emit,
    exec_writer,
    extract_output,
    from_pair,
    listen,
    listens,
    map_writer,
    observe,
    observe_with,
    remap,
    restrict,
    rewrite,
    run,
    run_writer,
    tell,
)

# Lift helpers
from . import lift

# Collection operations
from .collection import fold, replicate, replicate_, sequence, sequence_, traverse

# Control flow
from .control import ensure, fallback, fallback_chain, reject

# Errors
from ._errors import FixpointError, UnsupportedCapabilityError

__all__ = (
    # Types
    "Done",
    "Loop",
    "NoError",
    "Pair",
    "Predicate",
    "Step",
    # Internal helpers (for custom monads)
    "_helpers",
    # Accumulators
    "monoid",
    "Log",
    "Monoid",
    "Product",
    "Sum",
    # Inner monads
    "monad",
    "IDENTITY",
    "LAZY",
    "MANY",
    "RESULT",
    "Later",
    "Monad",
    # Writer
    "writer",
    "Layer",
    "WriterT",
    "censor",
    "emit",
    "exec_writer",
    "extract_output",
    "from_pair",
    "listen",
    "listens",
    "map_writer",
    "observe",
    "observe_with",
    "remap",
    "restrict",
    "rewrite",
    "run",
    "run_writer",
    "tell",
    # Lift
    "lift",
    # Collection
    "fold",
    "replicate",
    "replicate_",
    "sequence",
    "sequence_",
    "traverse",
    # Control
    "ensure",
    "fallback",
    "fallback_chain",
    "reject",
    # Errors
    "FixpointError",
    "UnsupportedCapabilityError",
)
