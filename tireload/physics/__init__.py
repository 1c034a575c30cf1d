"""
Load and pressure calculations for tire compliance checks.

This module provides:
- Unit conversions (pint) between tons, kg, psi and kPa
- Speed table row resolution
- Load per tire, limit load and ETRTO inflation pressure

All functions are pure and deterministic.
"""

from tireload.physics.units import ureg, Q_, tonnes_to_kg, psi_to_kpa
from tireload.physics.speed import (
    resolve_speed_row,
    is_below_table,
    EmptySpeedTableError,
)
from tireload.physics.loads import (
    calculate_load_per_tire,
    calculate_limit_load,
    calculate_inflation_pressure,
    ETRTO_PRESSURE_EXPONENT,
)

__all__ = [
    # Units
    "ureg",
    "Q_",
    "tonnes_to_kg",
    "psi_to_kpa",
    # Speed table
    "resolve_speed_row",
    "is_below_table",
    "EmptySpeedTableError",
    # Loads
    "calculate_load_per_tire",
    "calculate_limit_load",
    "calculate_inflation_pressure",
    "ETRTO_PRESSURE_EXPONENT",
]
