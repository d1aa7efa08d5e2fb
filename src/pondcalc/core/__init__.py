"""Core utilities shared across pondcalc modules."""

from .errors import PondCalcValueError
from .types import ProjectInputs

__all__ = ["PondCalcValueError", "ProjectInputs"]
