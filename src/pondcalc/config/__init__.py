"""Calculator configuration models and loaders."""

from .loaders import config_warnings, load_config, load_default_config, parse_config
from .models import (
    CalculatorConfig,
    EquipmentDefaults,
    ExcavatorDefaults,
    FleetLimits,
    ProjectDefaults,
    TruckDefaults,
    ValidationRange,
    ValidationRules,
)

__all__ = [
    "CalculatorConfig",
    "EquipmentDefaults",
    "ExcavatorDefaults",
    "FleetLimits",
    "ProjectDefaults",
    "TruckDefaults",
    "ValidationRange",
    "ValidationRules",
    "config_warnings",
    "load_config",
    "load_default_config",
    "parse_config",
]
