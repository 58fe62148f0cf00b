"""Relaxation loops used by :class:`~hopfield_network.models.HopfieldNetwork`."""

from .concurrent import draw_worker_seeds, partition_round_robin, relax_concurrently
from .relaxation import RelaxationResult, relax, sweep

__all__ = [
    "RelaxationResult",
    "draw_worker_seeds",
    "partition_round_robin",
    "relax",
    "relax_concurrently",
    "sweep",
]
