"""Hopfield network engine and its configuration."""

from .config import NetworkConfig
from .network import HopfieldNetwork

__all__ = ["HopfieldNetwork", "NetworkConfig"]
