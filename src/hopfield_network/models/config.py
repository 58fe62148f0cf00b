"""Configuration dataclasses for the Hopfield network engine."""
from __future__ import annotations

from dataclasses import dataclass

from ..core.domain import NetworkDomain
from ..core.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class NetworkConfig:
    """Parameters describing a Hopfield network.

    Parameters
    ----------
    dimension:
        Number of units, i.e. the size of the square weight matrix. Must be a
        positive integer.
    domain:
        Value domain of the units. Selects the activation function and must
        not be :attr:`NetworkDomain.UNSPECIFIED`.
    random_init:
        Initialise the weight matrix with standard Gaussian values drawn from
        the network generator. When ``False`` the matrix starts at zero.
    force_symmetric:
        Make ``W[i][j] == W[j][i]`` when :meth:`HopfieldNetwork.clean_matrix`
        is called. Not applied automatically.
    force_zero_diagonal:
        Zero the diagonal when :meth:`HopfieldNetwork.clean_matrix` is called.
        Not applied automatically.
    max_iterations:
        Maximum number of sweeps performed by a single relaxation.
    max_unstable_units:
        A relaxation stops once strictly fewer units than this are unstable.
        With the default of ``0`` a relaxation always runs the full
        ``max_iterations`` sweeps.
    seed:
        Seed of the network generator. ``0`` picks a fresh non-deterministic
        seed, reported afterwards as :attr:`HopfieldNetwork.seed`.
    """

    dimension: int
    domain: NetworkDomain
    random_init: bool = False
    force_symmetric: bool = True
    force_zero_diagonal: bool = True
    max_iterations: int = 100
    max_unstable_units: int = 0
    seed: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.dimension, bool) or not isinstance(self.dimension, int) or self.dimension <= 0:
            raise ConfigurationError(
                f"dimension must be explicitly set to a positive integer, got {self.dimension!r}"
            )
        if not isinstance(self.domain, NetworkDomain) or self.domain is NetworkDomain.UNSPECIFIED:
            raise ConfigurationError("domain must be explicitly set to a concrete NetworkDomain")
        if self.max_iterations <= 0:
            raise ConfigurationError("max_iterations must be positive")
        if self.max_unstable_units < 0:
            raise ConfigurationError("max_unstable_units must be non-negative")
        if not 0 <= self.seed < 2**64:
            raise ConfigurationError(f"seed must be in [0, 2**64), got {self.seed}")
