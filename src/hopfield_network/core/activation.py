"""Activation functions mapping raw unit inputs onto a network domain."""
from __future__ import annotations

from typing import Callable

import torch
from torch import Tensor

from .domain import NetworkDomain
from .errors import ConfigurationError

ActivationFunction = Callable[[Tensor], Tensor]


def binary_activation(vector: Tensor) -> Tensor:
    """Map ``x <= 0`` to ``0.0`` and everything else to ``1.0``."""

    return torch.where(vector <= 0, torch.zeros_like(vector), torch.ones_like(vector))


def bipolar_activation(vector: Tensor) -> Tensor:
    """Map ``x <= 0`` to ``-1.0`` and everything else to ``1.0``."""

    return torch.where(vector <= 0, -torch.ones_like(vector), torch.ones_like(vector))


def identity_activation(vector: Tensor) -> Tensor:
    """Continuous domain: values pass through unchanged."""

    return vector.clone()


def activation_for(domain: NetworkDomain) -> ActivationFunction:
    """Return the activation function associated with ``domain``.

    Raises
    ------
    ConfigurationError
        If ``domain`` is :attr:`NetworkDomain.UNSPECIFIED`. Callers are
        expected to have picked a concrete domain before reaching this point.
    """

    if domain is NetworkDomain.BINARY:
        return binary_activation
    if domain is NetworkDomain.BIPOLAR:
        return bipolar_activation
    if domain is NetworkDomain.CONTINUOUS:
        return identity_activation
    raise ConfigurationError(f"No activation function for domain {domain!r}; a concrete domain is required")
