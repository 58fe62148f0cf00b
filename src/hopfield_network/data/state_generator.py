"""Random, domain-valid initial states for Hopfield networks."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List

import torch
from torch import Tensor

from ..core.activation import activation_for
from ..core.domain import NetworkDomain
from ..core.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class StateGeneratorConfig:
    """Parameters for :class:`StateGenerator`.

    Raw unit values are drawn uniformly from ``[lower_bound, upper_bound)``
    before the domain activation is applied. A ``seed`` of ``0`` requests a
    fresh random seed per generator built from this config.
    """

    dimension: int
    domain: NetworkDomain
    lower_bound: float = -1.0
    upper_bound: float = 1.0
    seed: int = 0

    def __post_init__(self) -> None:
        if not self.lower_bound < self.upper_bound:
            raise ConfigurationError("lower_bound must be strictly smaller than upper_bound")
        if not math.isfinite(self.upper_bound - self.lower_bound):
            raise ConfigurationError("upper_bound - lower_bound must be a finite number")
        if isinstance(self.dimension, bool) or not isinstance(self.dimension, int) or self.dimension <= 0:
            raise ConfigurationError(f"dimension must be a strictly positive integer, got {self.dimension!r}")
        if not isinstance(self.domain, NetworkDomain) or self.domain is NetworkDomain.UNSPECIFIED:
            raise ConfigurationError("domain must be a concrete NetworkDomain")
        if not 0 <= self.seed < 2**64:
            raise ConfigurationError(f"seed must be in [0, 2**64), got {self.seed}")


class StateGenerator:
    """Draw random states already mapped onto the configured domain.

    Several generators may be built from one config. With a non-zero seed
    they all produce the same sequence of states.
    """

    def __init__(self, config: StateGeneratorConfig) -> None:
        self.config = config
        self._activation = activation_for(config.domain)
        self._generator = torch.Generator()
        if config.seed:
            self._generator.manual_seed(config.seed)
            self._seed = config.seed
        else:
            self._seed = self._generator.seed()

    @property
    def seed(self) -> int:
        """Seed actually used, so a run can be repeated."""

        return self._seed

    @property
    def domain(self) -> NetworkDomain:
        return self.config.domain

    @property
    def dimension(self) -> int:
        return self.config.dimension

    def next_state(self) -> Tensor:
        """Return one new state of length ``dimension``."""

        low, high = self.config.lower_bound, self.config.upper_bound
        raw = torch.rand(self.dimension, generator=self._generator, dtype=torch.float64)
        return self._activation(low + (high - low) * raw)

    def create_state_collection(self, num_states: int) -> List[Tensor]:
        """Return ``num_states`` states drawn one after another."""

        if num_states < 0:
            raise ValueError("num_states must be non-negative")
        return [self.next_state() for _ in range(num_states)]

    def __repr__(self) -> str:
        return (
            f"StateGenerator(dimension={self.dimension}, domain={self.domain.name}, "
            f"lower_bound={self.config.lower_bound}, upper_bound={self.config.upper_bound}, "
            f"seed={self._seed})"
        )
