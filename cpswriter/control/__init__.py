from .fallback import fallback, fallback_chain
from .guard import ensure, reject

__all__ = (
    "ensure",
    "fallback",
    "fallback_chain",
    "reject",
)
