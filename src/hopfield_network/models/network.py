"""Hopfield network engine owning the weight matrix and relaxation loop."""
from __future__ import annotations

import logging
from typing import List, Sequence

import torch
from torch import Tensor

from ..core.activation import activation_for
from ..core.energy import all_unit_energies, state_energy, unit_energy
from ..core.errors import ConfigurationError
from ..solvers.concurrent import relax_concurrently
from ..solvers.relaxation import RelaxationResult, relax, sweep
from .config import NetworkConfig

logger = logging.getLogger(__name__)


class HopfieldNetwork:
    """Fully connected Hopfield network relaxed by asynchronous unit updates.

    The network owns its weight matrix and a private ``torch.Generator``
    used to shuffle the unit visiting order. States passed to the update
    methods are copied first; the caller's tensors are never modified.

    Parameters
    ----------
    config:
        Validated network parameters.
    matrix:
        Optional initial weights of shape ``(dimension, dimension)``. When
        omitted the matrix is zero, or standard Gaussian if
        ``config.random_init`` is set.
    """

    def __init__(self, config: NetworkConfig, *, matrix: Tensor | None = None) -> None:
        self.config = config
        self.dimension = config.dimension
        self.domain = config.domain
        self.activation_fn = activation_for(config.domain)

        self.generator = torch.Generator()
        if config.seed:
            self.generator.manual_seed(config.seed)
            self._seed = config.seed
        else:
            self._seed = self.generator.seed()

        if matrix is not None:
            self._matrix = self._validate_matrix(matrix)
        elif config.random_init:
            self._matrix = torch.randn(
                self.dimension, self.dimension, generator=self.generator, dtype=torch.float64
            )
        else:
            self._matrix = torch.zeros(self.dimension, self.dimension, dtype=torch.float64)
        logger.debug("Built %s network of dimension %d (seed=%d)", self.domain.value, self.dimension, self._seed)

    @property
    def seed(self) -> int:
        """Seed the network generator was initialised with."""

        return self._seed

    @property
    def matrix(self) -> Tensor:
        """Copy of the current weight matrix."""

        return self._matrix.clone()

    @matrix.setter
    def matrix(self, value: Tensor) -> None:
        self._matrix = self._validate_matrix(value)

    def clean_matrix(self) -> None:
        """Apply the configured zero-diagonal and symmetry constraints.

        The diagonal is zeroed first; the lower triangle is then overwritten
        with the upper triangle.
        """

        if self.config.force_zero_diagonal:
            self._matrix.fill_diagonal_(0.0)
        if self.config.force_symmetric:
            upper = torch.triu(self._matrix)
            self._matrix = upper + torch.triu(self._matrix, diagonal=1).t()

    def state_energy(self, state: Tensor) -> float:
        """Energy of the whole state."""

        return state_energy(self._matrix, self._validate_state(state))

    def unit_energy(self, state: Tensor, unit_index: int) -> float:
        """Energy of the unit at ``unit_index``."""

        if not 0 <= unit_index < self.dimension:
            raise IndexError(f"unit_index {unit_index} out of range for dimension {self.dimension}")
        return unit_energy(self._matrix, self._validate_state(state), unit_index)

    def all_unit_energies(self, state: Tensor) -> Tensor:
        """Energy of every unit in ``state``."""

        return all_unit_energies(self._matrix, self._validate_state(state))

    def update_state(self, state: Tensor) -> Tensor:
        """Run one asynchronous sweep over every unit and return the new state."""

        return sweep(self._matrix, self._working_copy(state), self.activation_fn, self.generator)

    def relax_state(self, state: Tensor) -> Tensor:
        """Sweep ``state`` until stable or until ``max_iterations`` is reached.

        No error is raised when the budget runs out; check
        :meth:`all_unit_energies` or :meth:`state_energy` on the result to
        find out whether it is actually stable.
        """

        return self.relax_state_with_info(state, track_energy=False).state

    def relax_state_with_info(self, state: Tensor, *, track_energy: bool = True) -> RelaxationResult:
        """Relax ``state`` and report iterations, stability and energies.

        Consumes the network generator exactly like :meth:`relax_state`.
        """

        result = relax(
            self._matrix,
            self._working_copy(state),
            self.activation_fn,
            self.generator,
            max_iterations=self.config.max_iterations,
            max_unstable_units=self.config.max_unstable_units,
            track_energy=track_energy,
        )
        if not result.converged:
            logger.debug(
                "Relaxation stopped after %d iterations with %d unstable units",
                result.iterations,
                result.unstable_units,
            )
        return result

    def concurrent_relax_state_collection(
        self, states: Sequence[Tensor], worker_count: int
    ) -> List[Tensor]:
        """Relax a batch of states on ``worker_count`` threads.

        The result list matches the order of ``states``. For a fixed network
        seed and worker count the outcome is reproducible; changing the worker
        count changes both the partitioning and the per-worker seeds.
        """

        working = [self._working_copy(state) for state in states]
        return relax_concurrently(
            self._matrix,
            working,
            self.activation_fn,
            self.generator,
            worker_count,
            max_iterations=self.config.max_iterations,
            max_unstable_units=self.config.max_unstable_units,
        )

    def __str__(self) -> str:
        return (
            "HopfieldNetwork\n"
            f"\tDimension: {self.dimension}\n"
            f"\tDomain: {self.domain.name}\n"
            f"\tForce Symmetric: {self.config.force_symmetric}\n"
            f"\tForce Zero Diagonal: {self.config.force_zero_diagonal}\n"
            f"\tMaximum Relaxation Iterations: {self.config.max_iterations}\n"
            f"\tMaximum Relaxation Unstable Units: {self.config.max_unstable_units}"
        )

    def _validate_matrix(self, matrix: Tensor) -> Tensor:
        matrix = torch.as_tensor(matrix, dtype=torch.float64)
        if matrix.shape != (self.dimension, self.dimension):
            raise ConfigurationError(
                f"matrix must have shape ({self.dimension}, {self.dimension}), got {tuple(matrix.shape)}"
            )
        return matrix.clone()

    def _validate_state(self, state: Tensor) -> Tensor:
        state = torch.as_tensor(state, dtype=torch.float64)
        if state.shape != (self.dimension,):
            raise ConfigurationError(
                f"state must be a vector of length {self.dimension}, got shape {tuple(state.shape)}"
            )
        return state

    def _working_copy(self, state: Tensor) -> Tensor:
        return self._validate_state(state).clone()
