"""Equipment records, fleet editing helpers, presets, and CSV import."""

from .io import load_fleet_csv
from .models import Equipment, Excavator, Truck
from .operations import (
    add_unit,
    ensure_unique_ids,
    fleet_from_defaults,
    next_unit_id,
    remove_unit,
    set_unit_active,
    update_unit,
)
from .profiles import (
    FLEET_PROFILES,
    POND_PROFILES,
    FleetProfile,
    PondProfile,
    get_fleet_profile,
    get_pond_profile,
    list_fleet_profiles,
)

__all__ = [
    "Equipment",
    "Excavator",
    "Truck",
    "FleetProfile",
    "PondProfile",
    "FLEET_PROFILES",
    "POND_PROFILES",
    "add_unit",
    "ensure_unique_ids",
    "fleet_from_defaults",
    "get_fleet_profile",
    "get_pond_profile",
    "list_fleet_profiles",
    "load_fleet_csv",
    "next_unit_id",
    "remove_unit",
    "set_unit_active",
    "update_unit",
]
