"""Hopfield associative-memory networks relaxed on CPU.

The package is organised as:
- ``core``: network domains, activation functions and energy functions,
- ``data``: random state generators,
- ``models``: the :class:`~hopfield_network.models.HopfieldNetwork` engine,
- ``solvers``: sequential and concurrent relaxation loops,
- ``utils``: plotting helpers.
"""

from .core import ConfigurationError, NetworkDomain
from .data import StateGenerator, StateGeneratorConfig
from .models import HopfieldNetwork, NetworkConfig
from .solvers import RelaxationResult

__all__ = [
    "ConfigurationError",
    "HopfieldNetwork",
    "NetworkConfig",
    "NetworkDomain",
    "RelaxationResult",
    "StateGenerator",
    "StateGeneratorConfig",
    "core",
    "data",
    "models",
    "solvers",
    "utils",
]
