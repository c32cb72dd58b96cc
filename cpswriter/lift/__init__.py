"""
Lift helpers with semantic namespaces.

    from cpswriter import lift as L

    # Up: values into a writer
    user = L.up.from_result(w, Ok(User(id=42)))
    maybe = L.up.optional(w, db_row, error=NotFound)

    # Call: deferred function calls
    user = L.call(w, fetch_user, 42)

    # Down: run and extract
    value, log = L.down.unsafe(user)
"""

from __future__ import annotations

from . import down, up
from .call import call, call_writer, lifted
from .up import catching, catching_async, from_result, optional

__all__ = (
    # Namespaces
    "up",
    "down",
    # Call
    "call",
    "call_writer",
    "lifted",
    # Up
    "from_result",
    "optional",
    "catching",
    "catching_async",
)
