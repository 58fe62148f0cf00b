"""Asynchronous sweeps and the relax-to-stability loop."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import torch
from torch import Tensor

from ..core.activation import ActivationFunction
from ..core.energy import count_unstable_units, state_energy


@dataclass(slots=True)
class RelaxationResult:
    """Outcome of a single relaxation run.

    ``converged`` is ``True`` when the run stopped early because fewer than
    ``max_unstable_units`` units were unstable. A run that exhausts its
    iteration budget still returns its last state.
    """

    state: Tensor
    iterations: int
    unstable_units: int
    converged: bool
    energy_history: List[float] = field(default_factory=list)


def sweep(
    matrix: Tensor,
    state: Tensor,
    activation: ActivationFunction,
    generator: torch.Generator,
) -> Tensor:
    """Update every unit exactly once, in a random order.

    The update is asynchronous: unit ``i`` is set to ``activation(W @ V)[i]``
    where ``V`` already contains every update made earlier in the sweep.
    ``state`` is modified in place and returned. Exactly one permutation is
    drawn from ``generator``.
    """

    order = torch.randperm(state.numel(), generator=generator)
    for index in order.tolist():
        # Only row ``index`` of W @ V is needed; the activation is element-wise.
        local_field = torch.mv(matrix[index : index + 1], state)
        state[index] = activation(local_field)[0]
    return state


def relax(
    matrix: Tensor,
    state: Tensor,
    activation: ActivationFunction,
    generator: torch.Generator,
    *,
    max_iterations: int,
    max_unstable_units: int,
    track_energy: bool = False,
) -> RelaxationResult:
    """Sweep ``state`` until it is stable enough or the budget runs out.

    After each sweep the number of units with positive energy is counted;
    the loop stops as soon as that count is strictly below
    ``max_unstable_units``. ``state`` is modified in place.
    """

    energy_history: List[float] = []
    unstable_units = count_unstable_units(matrix, state)
    iterations = 0
    converged = False
    for iteration in range(max_iterations):
        state = sweep(matrix, state, activation, generator)
        iterations = iteration + 1
        unstable_units = count_unstable_units(matrix, state)
        if track_energy:
            energy_history.append(state_energy(matrix, state))
        if unstable_units < max_unstable_units:
            converged = True
            break
    return RelaxationResult(
        state=state,
        iterations=iterations,
        unstable_units=unstable_units,
        converged=converged,
        energy_history=energy_history,
    )
