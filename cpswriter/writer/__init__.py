"""
Strict CPS writer
=================

WriterT - accumulator-threading transformer:
- output combined eagerly at every step (no deferred combines)
- any inner monad described by a Monad record
- accumulator described by a Monoid record

Layer binds the two and builds computations.
"""

from .layer import Layer
from .ops import (
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
from .transformer import WriterT

__all__ = (
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
)
