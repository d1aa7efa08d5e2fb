"""Timeline estimate result and calculation error types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Bottleneck(str, Enum):
    EXCAVATION = "Excavation"
    HAULING = "Hauling"


class ConfidenceLevel(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class CalculationResult:
    """Timeline estimate for one pond.

    Attributes
    ----------
    timeline_in_days:
        Whole work days needed (always rounded up, at least 1).
    total_hours:
        Productive hours at the bottleneck rate.
    excavation_rate / hauling_rate:
        Cubic yards per hour delivered by the digging and hauling stages.
    bottleneck:
        Slower stage; exact ties are reported as ``Bottleneck.EXCAVATION``.
    confidence:
        Qualitative confidence tag supplied by the caller (defaults to high).
    assumptions:
        Human-readable modelling assumptions behind the estimate.
    warnings:
        Human-readable caveats about the inputs or the fleet balance.
    """

    timeline_in_days: int
    total_hours: float
    excavation_rate: float
    hauling_rate: float
    bottleneck: Bottleneck
    confidence: ConfidenceLevel
    assumptions: tuple[str, ...]
    warnings: tuple[str, ...]


@dataclass(frozen=True)
class CalculationError:
    """Base class for calculation failures (returned, never raised)."""

    def describe(self) -> str:
        return "Calculation failed."


@dataclass(frozen=True)
class InsufficientEquipment(CalculationError):
    """No active excavator and/or no active truck is available."""

    missing: tuple[str, ...] = ()

    def describe(self) -> str:
        kinds = " and ".join(f"{kind}s" for kind in self.missing) or "equipment"
        return f"No active {kinds} available. Add or activate at least one of each type."


@dataclass(frozen=True)
class InvalidConfiguration(CalculationError):
    reason: str

    def describe(self) -> str:
        return self.reason


__all__ = [
    "Bottleneck",
    "ConfidenceLevel",
    "CalculationResult",
    "CalculationError",
    "InsufficientEquipment",
    "InvalidConfiguration",
]
