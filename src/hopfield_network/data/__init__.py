"""Random state generation."""

from .state_generator import StateGenerator, StateGeneratorConfig

__all__ = ["StateGenerator", "StateGeneratorConfig"]
