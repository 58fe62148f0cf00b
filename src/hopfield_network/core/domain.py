"""Value domains a Hopfield network state may live in."""
from __future__ import annotations

from enum import Enum


class NetworkDomain(Enum):
    """Set of legal per-unit values.

    ``UNSPECIFIED`` is a placeholder for configurations that have not picked
    a domain yet. It is rejected whenever a network or generator is built.
    """

    UNSPECIFIED = "unspecified"
    BINARY = "binary"
    BIPOLAR = "bipolar"
    CONTINUOUS = "continuous"

    @classmethod
    def concrete(cls) -> tuple["NetworkDomain", ...]:
        """Domains that can be used to build a network."""

        return (cls.BINARY, cls.BIPOLAR, cls.CONTINUOUS)
