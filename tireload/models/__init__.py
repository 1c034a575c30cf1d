"""
Pydantic models for tire load calculation inputs and outputs.
"""

from tireload.models.inputs import (
    LOAD_MARGIN_RATIO,
    PRESSURE_MARGIN_RATIO,
    SpeedSymbol,
    TireSpec,
    SpeedFactorRow,
    AxlePosition,
    ComplianceThresholds,
    CalculationInputs,
    ReferenceData,
)
from tireload.models.outputs import (
    DAMAGE_OK,
    LoadVerdict,
    PressureVerdict,
    LoadEvaluation,
    PressureEvaluation,
    DamagePair,
    PositionResult,
    CalculationResult,
)

__all__ = [
    "LOAD_MARGIN_RATIO",
    "PRESSURE_MARGIN_RATIO",
    "SpeedSymbol",
    "TireSpec",
    "SpeedFactorRow",
    "AxlePosition",
    "ComplianceThresholds",
    "CalculationInputs",
    "ReferenceData",
    "DAMAGE_OK",
    "LoadVerdict",
    "PressureVerdict",
    "LoadEvaluation",
    "PressureEvaluation",
    "DamagePair",
    "PositionResult",
    "CalculationResult",
]
