"""Core building blocks shared by the network engine and the generators."""

from .activation import (
    ActivationFunction,
    activation_for,
    binary_activation,
    bipolar_activation,
    identity_activation,
)
from .domain import NetworkDomain
from .energy import all_unit_energies, count_unstable_units, state_energy, unit_energy
from .errors import ConfigurationError

__all__ = [
    "ActivationFunction",
    "ConfigurationError",
    "NetworkDomain",
    "activation_for",
    "all_unit_energies",
    "binary_activation",
    "bipolar_activation",
    "count_unstable_units",
    "identity_activation",
    "state_energy",
    "unit_energy",
]
