r"""Hopfield energy functions.

The energy of a state ``V`` under weights ``W`` is
:math:`E = -\sum_i \sum_j W_{ij} V_i V_j`. No ``1/2`` factor is applied;
stability checks only compare energies against zero.
"""
from __future__ import annotations

import torch
from torch import Tensor


def state_energy(matrix: Tensor, state: Tensor) -> float:
    """Total energy of ``state``."""

    return float(-(torch.mv(matrix, state) * state).sum())


def unit_energy(matrix: Tensor, state: Tensor, index: int) -> float:
    """Energy contributed by unit ``index`` alone: ``-(W[i] . V) * V[i]``."""

    return float(-torch.dot(matrix[index], state) * state[index])


def all_unit_energies(matrix: Tensor, state: Tensor) -> Tensor:
    """Energy of every unit, computed with a single matrix-vector product."""

    return -torch.mv(matrix, state) * state


def count_unstable_units(matrix: Tensor, state: Tensor) -> int:
    """Number of units whose energy is strictly positive."""

    return int((all_unit_energies(matrix, state) > 0).sum())
