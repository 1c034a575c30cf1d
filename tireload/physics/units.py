"""
Unit registry and helpers for load and pressure conversions.

Uses the pint library so that vehicle loads (metric tons), tire loads (kg)
and pressures (psi / kPa) are converted consistently everywhere.
"""

import pint

# Create a shared unit registry for the entire application
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity

# Common unit definitions for convenience
kilogram = ureg.kilogram
metric_ton = ureg.metric_ton
psi = ureg.psi
kPa = ureg.kilopascal


def magnitude_in(quantity: pint.Quantity, unit: str) -> float:
    """Get the magnitude of a quantity in specified units."""
    return quantity.to(unit).magnitude


def tonnes_to_kg(mass_t: float) -> float:
    """Convert metric tons to kilograms."""
    return magnitude_in(Q_(mass_t, metric_ton), "kilogram")


def psi_to_kpa(pressure_psi: float) -> float:
    """Convert psi to kPa."""
    return magnitude_in(Q_(pressure_psi, psi), "kilopascal")
