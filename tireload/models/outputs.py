"""
Output models for tire load calculations.

A PositionResult is derived entirely from (tire, total load, speed row,
axle position); results are recomputed from scratch on every request.
"""

from enum import Enum

from pydantic import BaseModel, Field

from tireload.models.inputs import AxlePosition, SpeedFactorRow, TireSpec


DAMAGE_OK = "OK"


class LoadVerdict(str, Enum):
    """Load compliance verdict."""
    OK = "OK"
    OVERLOAD = "Over Load"


class PressureVerdict(str, Enum):
    """Inflation pressure compliance verdict."""
    OK = "OK"
    CONSULT_SPEC = "CONSULT TO BS"


class LoadEvaluation(BaseModel):
    """Verdict and damage estimate for load per tire."""
    verdict: LoadVerdict
    damage_percent: str = Field(..., description="'OK' or an integer percentage such as '16%'")


class PressureEvaluation(BaseModel):
    """Verdict and damage estimate for inflation pressure."""
    verdict: PressureVerdict
    damage_percent: str = Field(..., description="'OK' or an integer percentage such as '12%'")


class DamagePair(BaseModel):
    """Possibility of tire damage by load and by inflation pressure."""
    load: str = Field(..., description="Damage by load")
    ip: str = Field(..., description="Damage by inflation pressure")


class PositionResult(BaseModel):
    """
    Calculation result for one axle position.

    Loads in kg, pressures in psi.
    """
    position: AxlePosition = Field(..., description="Source axle position")
    row: SpeedFactorRow = Field(..., description="Speed table row used for this pass")
    load_per_tire_kg: float = Field(..., description="Load carried by each tire")
    limit_load_kg: float = Field(
        ...,
        ge=0,
        description="Load index adjusted by the speed factor (0 when the symbol is not rated)",
    )
    ip_by_etrto_psi: float = Field(..., ge=0, description="Inflation pressure by ETRTO formula")
    result_load: LoadVerdict = Field(..., description="Load verdict")
    result_ip: PressureVerdict = Field(..., description="Inflation pressure verdict")
    damage: DamagePair = Field(..., description="Damage percentages (load, I/P)")

    @property
    def is_ok(self) -> bool:
        return self.result_load == LoadVerdict.OK and self.result_ip == PressureVerdict.OK


class CalculationResult(BaseModel):
    """
    Complete output of one calculation pass.

    Every position shares the speed row that was resolved once for the
    requested speed.
    """
    tire: TireSpec = Field(..., description="Selected tire")
    total_load_t: float = Field(..., description="Total vehicle load in metric tons")
    speed_kmh: float = Field(..., description="Average vehicle speed in km/h")
    speed_row: SpeedFactorRow = Field(..., description="Resolved speed table row")
    positions: list[PositionResult] = Field(..., description="Results in input order")
    warnings: list[str] = Field(
        default_factory=list,
        description="Non-fatal issues with the inputs or results",
    )

    @property
    def total_tires(self) -> int:
        return sum(r.position.tires_per_position for r in self.positions)

    @property
    def overall_result_load(self) -> LoadVerdict:
        """Over Load if any position is overloaded."""
        if any(r.result_load != LoadVerdict.OK for r in self.positions):
            return LoadVerdict.OVERLOAD
        return LoadVerdict.OK

    @property
    def overall_result_ip(self) -> PressureVerdict:
        """CONSULT TO BS if any position needs it."""
        if any(r.result_ip != PressureVerdict.OK for r in self.positions):
            return PressureVerdict.CONSULT_SPEC
        return PressureVerdict.OK

    @property
    def all_ok(self) -> bool:
        return all(r.is_ok for r in self.positions)
