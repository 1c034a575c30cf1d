"""
Tire load and inflation pressure calculations.

Implements the ETRTO-style formulas used for the load & I/P calculation:

    Load/Tire      = (Total Load [t] * Load Distribution / Tires) -> kg
    Limit Load     = LOAD INDEX * speed factor for the tire's speed symbol
    I/P by ETRTO   = (Load/Tire / LOAD INDEX) ^ 1.25 * STD I/P

ASSUMPTIONS:
- Load is shared equally between the tires of one axle position
- Load index is the rated load in kg at reference conditions
- No rounding happens here; rounding is a presentation concern
"""

from tireload.models.inputs import SpeedFactorRow, SpeedSymbol
from tireload.physics.units import tonnes_to_kg

# Exponent of the ETRTO load/pressure relationship
ETRTO_PRESSURE_EXPONENT = 1.25


def calculate_load_per_tire(
    total_load_t: float,
    load_distribution: float,
    tires_at_position: int,
) -> float:
    """
    Calculate the load carried by each tire of an axle position.

    Args:
        total_load_t: Total vehicle load in metric tons
        load_distribution: Share of total load on this position (0-1)
        tires_at_position: Tires at this position (2 single, 4 tandem)

    Returns:
        Load per tire in kg

    Example:
        35 t * 0.18 / 2 tires = 3.15 t = 3150 kg per tire
    """
    load_per_position_t = total_load_t * load_distribution
    return tonnes_to_kg(load_per_position_t / tires_at_position)


def calculate_limit_load(
    load_index: float,
    row: SpeedFactorRow,
    symbol: SpeedSymbol | str,
) -> float:
    """
    Calculate the permissible tire load at the row's speed.

    Args:
        load_index: Tire load index in kg
        row: Speed table row resolved for the vehicle speed
        symbol: Tire speed symbol

    Returns:
        Limit load in kg. Zero when the symbol has no factor at this speed;
        callers decide how to present that.
    """
    return load_index * row.factor(symbol)


def calculate_inflation_pressure(
    load_per_tire_kg: float,
    load_index: float,
    std_pressure_psi: float,
) -> float:
    """
    Calculate the required inflation pressure by the ETRTO formula.

    Args:
        load_per_tire_kg: Actual load on one tire in kg
        load_index: Tire load index in kg
        std_pressure_psi: Standard inflation pressure in psi

    Returns:
        Inflation pressure in psi

    Raises:
        ValueError: If load_index is not positive

    Notes:
        A position with zero (or negative) load gets zero pressure.
    """
    if load_index <= 0:
        raise ValueError(f"Load index must be positive, got {load_index}")

    load_ratio = load_per_tire_kg / load_index
    if load_ratio <= 0:
        return 0.0
    return load_ratio ** ETRTO_PRESSURE_EXPONENT * std_pressure_psi
