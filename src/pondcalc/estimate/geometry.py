"""Pond geometry helpers."""

from __future__ import annotations

CUBIC_FEET_PER_CUBIC_YARD = 27.0


def pond_volume_cubic_yards(length_ft: float, width_ft: float, depth_ft: float) -> float:
    """Volume of a rectangular pond given in feet, expressed in cubic yards."""

    return length_ft * width_ft * depth_ft / CUBIC_FEET_PER_CUBIC_YARD


__all__ = ["CUBIC_FEET_PER_CUBIC_YARD", "pond_volume_cubic_yards"]
