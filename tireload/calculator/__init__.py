"""
Position calculator for vehicle tire configurations.

Applies the load, pressure and compliance formulas to every axle position.
"""

from tireload.calculator.positions import (
    LoadCalculator,
    TireNotFoundError,
    calculate_position,
)

__all__ = ["LoadCalculator", "TireNotFoundError", "calculate_position"]
