"""Named fleet and pond presets for quick estimates."""

from __future__ import annotations

from dataclasses import dataclass

from pondcalc.fleet.models import Excavator, Truck


@dataclass(frozen=True)
class FleetProfile:
    """Preset fleet sized for a class of project."""

    name: str
    description: str
    excavators: tuple[Excavator, ...]
    trucks: tuple[Truck, ...]


@dataclass(frozen=True)
class PondProfile:
    """Preset pond geometry (feet) and work schedule (hours/day)."""

    key: str
    description: str
    length: float
    width: float
    depth: float
    work_hours: float


def _excavators(*specs: tuple[float, float, str]) -> tuple[Excavator, ...]:
    return tuple(
        Excavator(id=f"excavator-{idx + 1}", bucket_capacity=cap, cycle_time=cycle, name=name)
        for idx, (cap, cycle, name) in enumerate(specs)
    )


def _trucks(*specs: tuple[float, float, str]) -> tuple[Truck, ...]:
    return tuple(
        Truck(id=f"truck-{idx + 1}", capacity=cap, round_trip_time=trip, name=name)
        for idx, (cap, trip, name) in enumerate(specs)
    )


FLEET_PROFILES: dict[str, FleetProfile] = {
    "residential": FleetProfile(
        name="residential",
        description="Small residential jobs: compact excavators and light dump trucks.",
        excavators=_excavators((1.5, 2.5, "Mini Excavator"), (2.0, 2.2, "Compact Excavator")),
        trucks=_trucks((8.0, 12.0, "Small Dump Truck"), (10.0, 15.0, "Medium Dump Truck")),
    ),
    "commercial": FleetProfile(
        name="commercial",
        description="Commercial water features with a mid-sized mixed fleet.",
        excavators=_excavators(
            (2.5, 2.0, "Standard Excavator"),
            (3.0, 1.8, "Large Excavator"),
            (3.5, 1.6, "Heavy Excavator"),
        ),
        trucks=_trucks(
            (15.0, 18.0, "Commercial Truck 1"),
            (18.0, 22.0, "Commercial Truck 2"),
            (20.0, 25.0, "Heavy Dump Truck"),
        ),
    ),
    "industrial": FleetProfile(
        name="industrial",
        description="Retention ponds and other large earthworks.",
        excavators=_excavators(
            (4.0, 1.4, "Industrial Excavator 1"),
            (4.5, 1.2, "Industrial Excavator 2"),
            (5.0, 1.0, "Heavy Industrial"),
            (3.8, 1.5, "Support Excavator"),
        ),
        trucks=_trucks(
            (22.0, 28.0, "Industrial Truck 1"),
            (25.0, 30.0, "Industrial Truck 2"),
            (20.0, 26.0, "Industrial Truck 3"),
            (28.0, 35.0, "Heavy Industrial Truck"),
            (24.0, 32.0, "Support Truck"),
        ),
    ),
    "maximum": FleetProfile(
        name="maximum",
        description="Largest supported high-performance fleet.",
        excavators=_excavators(
            (5.5, 0.8, "Max Performance 1"),
            (5.2, 0.9, "Max Performance 2"),
            (4.8, 1.0, "Max Performance 3"),
            (5.0, 0.85, "Max Performance 4"),
            (4.5, 1.1, "Support Max 1"),
            (4.7, 1.05, "Support Max 2"),
        ),
        trucks=_trucks(
            (30.0, 20.0, "Ultra Truck 1"),
            (28.0, 22.0, "Ultra Truck 2"),
            (32.0, 24.0, "Ultra Truck 3"),
            (29.0, 21.0, "Ultra Truck 4"),
            (31.0, 23.0, "Ultra Truck 5"),
            (27.0, 19.0, "Ultra Truck 6"),
            (26.0, 25.0, "Support Ultra 1"),
            (33.0, 26.0, "Support Ultra 2"),
        ),
    ),
}


def _ponds(
    category: str, **entries: tuple[float, float, float, float, str]
) -> dict[str, PondProfile]:
    return {
        f"{category}.{size}": PondProfile(
            key=f"{category}.{size}",
            description=description,
            length=length,
            width=width,
            depth=depth,
            work_hours=hours,
        )
        for size, (length, width, depth, hours, description) in entries.items()
    }


POND_PROFILES: dict[str, PondProfile] = {
    **_ponds(
        "backyard",
        small=(12.0, 8.0, 3.0, 6.0, "Small backyard pond"),
        medium=(18.0, 12.0, 4.0, 7.0, "Medium backyard pond"),
        large=(25.0, 15.0, 5.0, 8.0, "Large backyard pond"),
    ),
    **_ponds(
        "commercial",
        small=(35.0, 25.0, 6.0, 8.0, "Small commercial pond"),
        medium=(50.0, 35.0, 7.0, 9.0, "Medium commercial pond"),
        large=(75.0, 50.0, 8.0, 10.0, "Large commercial pond"),
    ),
    **_ponds(
        "industrial",
        small=(80.0, 60.0, 10.0, 10.0, "Small retention pond"),
        medium=(120.0, 80.0, 12.0, 11.0, "Medium retention pond"),
        large=(180.0, 120.0, 15.0, 12.0, "Large retention pond"),
    ),
    **_ponds(
        "agricultural",
        small=(60.0, 40.0, 8.0, 9.0, "Small irrigation pond"),
        medium=(100.0, 70.0, 10.0, 10.0, "Medium irrigation pond"),
        large=(150.0, 100.0, 12.0, 11.0, "Large irrigation pond"),
    ),
    **_ponds(
        "extreme",
        tiny=(5.0, 3.0, 1.0, 4.0, "Extremely small pond"),
        narrow=(100.0, 5.0, 6.0, 8.0, "Long narrow pond"),
        deep=(30.0, 20.0, 20.0, 10.0, "Very deep pond"),
        massive=(250.0, 200.0, 18.0, 14.0, "Massive industrial pond"),
    ),
}


def get_fleet_profile(name: str) -> FleetProfile:
    key = name.lower()
    if key not in FLEET_PROFILES:
        available = ", ".join(sorted(FLEET_PROFILES))
        raise KeyError(f"Unknown fleet profile '{name}'. Available: {available}")
    return FLEET_PROFILES[key]


def get_pond_profile(key: str) -> PondProfile:
    """Look up a pond preset by ``"<category>.<size>"`` (e.g. ``"backyard.medium"``)."""

    normalized = key.lower()
    if normalized not in POND_PROFILES:
        available = ", ".join(sorted(POND_PROFILES))
        raise KeyError(f"Unknown pond profile '{key}'. Available: {available}")
    return POND_PROFILES[normalized]


def list_fleet_profiles() -> tuple[FleetProfile, ...]:
    return tuple(FLEET_PROFILES[key] for key in sorted(FLEET_PROFILES))


__all__ = [
    "FleetProfile",
    "PondProfile",
    "FLEET_PROFILES",
    "POND_PROFILES",
    "get_fleet_profile",
    "get_pond_profile",
    "list_fleet_profiles",
]
