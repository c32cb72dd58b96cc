from .replicate import replicate, replicate_
from .sequence import sequence, sequence_
from .traverse import fold, traverse

__all__ = (
    "fold",
    "replicate",
    "replicate_",
    "sequence",
    "sequence_",
    "traverse",
)
