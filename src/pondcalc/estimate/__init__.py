"""Timeline estimation (pond geometry, bottleneck analysis, result types)."""

from .geometry import CUBIC_FEET_PER_CUBIC_YARD, pond_volume_cubic_yards
from .models import (
    Bottleneck,
    CalculationError,
    CalculationResult,
    ConfidenceLevel,
    InsufficientEquipment,
    InvalidConfiguration,
)
from .timeline import (
    IMBALANCE_RATIO,
    STANDARD_ASSUMPTIONS,
    CalculationOutcome,
    calculate_timeline,
    estimate_project,
    perform_calculation,
)

__all__ = [
    "Bottleneck",
    "CUBIC_FEET_PER_CUBIC_YARD",
    "CalculationError",
    "CalculationOutcome",
    "CalculationResult",
    "ConfidenceLevel",
    "IMBALANCE_RATIO",
    "InsufficientEquipment",
    "InvalidConfiguration",
    "STANDARD_ASSUMPTIONS",
    "calculate_timeline",
    "estimate_project",
    "perform_calculation",
    "pond_volume_cubic_yards",
]
