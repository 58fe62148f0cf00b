"""Exceptions raised while building networks and generators."""
from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a network or generator is built from invalid parameters.

    These errors are fatal for the construction attempt and are always raised
    eagerly, never during relaxation.
    """
