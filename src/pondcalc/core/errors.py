"""Common pondcalc-specific exceptions."""

class PondCalcValueError(ValueError):
    """Raised when pondcalc detects invalid user-provided data outside the pure engines."""


__all__ = ["PondCalcValueError"]
