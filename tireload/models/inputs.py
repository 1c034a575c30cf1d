"""
Input models for tire load calculations.

Reference entities (tires, speed/load-factor rows) are loaded once from the
reference file and never mutated. Axle positions and calculation inputs are
what the user configures; all range validation for user input happens here,
before anything reaches the calculation engine.
"""

from enum import Enum
from typing import Literal, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator


# Compliance margins from the reference standard. Load and pressure margins
# are independent and must stay separate constants.
LOAD_MARGIN_RATIO = 1.15
PRESSURE_MARGIN_RATIO = 1.10


class SpeedSymbol(str, Enum):
    """Tire speed rating symbol."""
    F = "F"
    G = "G"
    J = "J"
    K = "K"
    L = "L"
    M = "M"


class TireSpec(BaseModel):
    """
    Tire specification from the reference data file.

    Load index is the rated load in kg at reference conditions, standard
    inflation pressure is in psi.
    """
    model_config = ConfigDict(frozen=True)

    size: str = Field(
        ...,
        validation_alias=AliasChoices("size", "TIRE Size"),
        description="Tire size / pattern, e.g. '11.00R20 / XZY3'",
    )
    load_index: float = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("load_index", "LOAD INDEX"),
        description="Rated load capacity in kg",
    )
    std_pressure_psi: float = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("std_pressure_psi", "STD I/P"),
        description="Standard inflation pressure in psi",
    )
    speed_symbol: SpeedSymbol = Field(
        ...,
        validation_alias=AliasChoices("speed_symbol", "Speed symbol"),
        description="Speed rating symbol (F-M)",
    )


class SpeedFactorRow(BaseModel):
    """
    One row of the speed / load-factor table.

    Each speed symbol column holds a load multiplier. A missing value or a
    zero both mean the symbol is not rated at this speed.
    """
    model_config = ConfigDict(frozen=True)

    speed: float = Field(..., ge=0, description="Speed in km/h")
    F: Optional[float] = Field(default=None, ge=0)
    G: Optional[float] = Field(default=None, ge=0)
    J: Optional[float] = Field(default=None, ge=0)
    K: Optional[float] = Field(default=None, ge=0)
    L: Optional[float] = Field(default=None, ge=0)
    M: Optional[float] = Field(default=None, ge=0)
    psi: float = Field(default=0.0, description="Pressure compensation in psi")

    def factor(self, symbol: SpeedSymbol | str) -> float:
        """Load factor for a speed symbol, 0.0 when absent."""
        value = getattr(self, SpeedSymbol(symbol).value)
        return value or 0.0

    @property
    def factors(self) -> dict[str, Optional[float]]:
        """Factors keyed by symbol letter, in table column order."""
        return {s.value: getattr(self, s.value) for s in SpeedSymbol}


class AxlePosition(BaseModel):
    """
    A configured axle position on the vehicle.

    tires_per_position is 2 for a single axle and 4 for a tandem (dual) set.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Position identifier, unique per calculation")
    load_distribution: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Share of total vehicle load carried by this position (0-1)",
    )
    tires_per_position: Literal[2, 4] = Field(
        default=2,
        description="Tire count at this position: 2 (single) or 4 (tandem)",
    )

    @property
    def is_tandem(self) -> bool:
        return self.tires_per_position == 4


class ComplianceThresholds(BaseModel):
    """Margins used to classify overload and over-pressure."""
    model_config = ConfigDict(frozen=True)

    load_margin: float = Field(
        default=LOAD_MARGIN_RATIO,
        ge=1.0,
        description="Overload when load/tire >= load index * load_margin",
    )
    pressure_margin: float = Field(
        default=PRESSURE_MARGIN_RATIO,
        ge=1.0,
        description="Consult tire spec when I/P by ETRTO >= STD I/P * pressure_margin",
    )


class CalculationInputs(BaseModel):
    """
    Everything one calculation pass needs besides the reference data.

    Total load is in metric tons, speed in km/h. Positions are evaluated
    and reported in the order given.
    """
    tire_size: str = Field(..., min_length=1, description="Tire size / pattern from the reference data")
    total_load_t: float = Field(..., gt=0, description="Total vehicle load in metric tons")
    speed_kmh: float = Field(..., ge=0, description="Average vehicle speed in km/h")
    positions: list[AxlePosition] = Field(
        ...,
        min_length=1,
        description="Axle positions, evaluated in order",
    )
    thresholds: ComplianceThresholds = Field(
        default_factory=ComplianceThresholds,
        description="Compliance margins",
    )

    @field_validator("positions")
    @classmethod
    def validate_unique_ids(cls, v: list[AxlePosition]) -> list[AxlePosition]:
        """Position ids must be unique."""
        ids = [p.id for p in v]
        duplicates = sorted({i for i in ids if ids.count(i) > 1})
        if duplicates:
            raise ValueError(f"Duplicate position ids: {', '.join(duplicates)}")
        return v

    @property
    def total_tires(self) -> int:
        """Total tire count over all positions."""
        return sum(p.tires_per_position for p in self.positions)

    @property
    def distribution_total(self) -> float:
        """Sum of all load distribution fractions."""
        return sum(p.load_distribution for p in self.positions)

    @classmethod
    def example(cls) -> "CalculationInputs":
        """Three-axle truck at 35 t and 50 km/h on 11.00R20 tires."""
        return cls.model_validate(cls.model_config["json_schema_extra"]["example"])

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "tire_size": "11.00R20 / XZY3",
                "total_load_t": 35,
                "speed_kmh": 50,
                "positions": [
                    {"id": "1", "load_distribution": 0.18, "tires_per_position": 2},
                    {"id": "2", "load_distribution": 0.41, "tires_per_position": 4},
                    {"id": "3", "load_distribution": 0.41, "tires_per_position": 4},
                ],
            }
        },
    )


class ReferenceData(BaseModel):
    """
    Reference tire table and speed / load-factor table.

    Duplicate speeds make the row lookup ambiguous, so they are rejected
    when the data is loaded.
    """
    model_config = ConfigDict(frozen=True)

    tires: list[TireSpec] = Field(default_factory=list)
    speed_table: list[SpeedFactorRow] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_unique_speeds(self) -> "ReferenceData":
        seen: set[float] = set()
        duplicates = []
        for row in self.speed_table:
            if row.speed in seen:
                duplicates.append(row.speed)
            seen.add(row.speed)
        if duplicates:
            listed = ", ".join(f"{s:g}" for s in sorted(set(duplicates)))
            raise ValueError(f"Duplicate speed values in speed table: {listed}")
        return self

    def sorted_tires(self) -> list[TireSpec]:
        """Tires ordered by size string."""
        return sorted(self.tires, key=lambda t: t.size.casefold())

    def find_tire(self, size: str) -> Optional[TireSpec]:
        """Return the tire with this exact size / pattern, if any."""
        for tire in self.tires:
            if tire.size == size:
                return tire
        return None
