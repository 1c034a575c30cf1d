"""
Tire Load & I/P Calculator (tireload)

Computes load per tire and inflation pressure for each axle position of a
vehicle and checks them against ETRTO-style reference tables: overload at
115% of the load index, pressure to be consulted at 110% of the standard
inflation pressure.

Usage:
    python -m tireload make-example
    python -m tireload calculate --input example_input.json
    python -m tireload export --input example_input.json --format pdf
    python -m tireload serve --port 8000
"""

__version__ = "0.1.0"
__author__ = "Tire Load Project"

from tireload.models.inputs import (
    AxlePosition,
    CalculationInputs,
    ComplianceThresholds,
    ReferenceData,
    SpeedFactorRow,
    SpeedSymbol,
    TireSpec,
)
from tireload.models.outputs import (
    CalculationResult,
    LoadVerdict,
    PositionResult,
    PressureVerdict,
)
from tireload.calculator.positions import LoadCalculator

__all__ = [
    "AxlePosition",
    "CalculationInputs",
    "ComplianceThresholds",
    "ReferenceData",
    "SpeedFactorRow",
    "SpeedSymbol",
    "TireSpec",
    "CalculationResult",
    "LoadVerdict",
    "PositionResult",
    "PressureVerdict",
    "LoadCalculator",
]
