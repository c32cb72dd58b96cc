from __future__ import annotations


class UnsupportedCapabilityError(Exception):
    """Inner monad does not provide an optional capability (fail, plus, fix...)."""

    capability: str
    monad: str

    def __init__(self, capability: str, monad: str) -> None:
        self.capability = capability
        self.monad = monad
        super().__init__(f"Monad {monad!r} does not support {capability!r}")


class FixpointError(Exception):
    """A fixpoint result was forced before it was produced."""

    def __init__(self) -> None:
        super().__init__("Later value forced before the fixpoint produced it")


__all__ = ("FixpointError", "UnsupportedCapabilityError")
