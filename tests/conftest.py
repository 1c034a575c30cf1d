"""
Pytest configuration and shared fixtures.
"""

import json

import pytest

from tireload.models.inputs import (
    AxlePosition,
    CalculationInputs,
    ReferenceData,
    SpeedFactorRow,
    TireSpec,
)


@pytest.fixture
def raw_reference() -> dict:
    """Reference data as stored on disk, with spreadsheet-style tire keys."""
    return {
        "tires": [
            {"TIRE Size": "11.00R20 / XZY3", "LOAD INDEX": 2722, "STD I/P": 120, "Speed symbol": "J"},
            {"TIRE Size": "295/80R22.5 / TRD", "LOAD INDEX": 3150, "STD I/P": 120, "Speed symbol": "M"},
            {"TIRE Size": "12.00R24 / RLB", "LOAD INDEX": 3750, "STD I/P": 120, "Speed symbol": "G"},
        ],
        "speed_table": [
            {"speed": 90, "G": 0.87, "J": 0.88, "K": 0.89, "L": 0.9, "M": 0.91, "psi": 7},
            {"speed": 10, "F": 1.0, "G": 1.0, "J": 1.0, "K": 1.0, "L": 1.0, "M": 1.0, "psi": 0},
            {"speed": 50, "F": 0.94, "G": 0.95, "J": 0.96, "K": 0.97, "L": 0.98, "M": 0.99, "psi": 3},
            {"speed": 130, "M": 0.83, "psi": 11},
        ],
    }


@pytest.fixture
def reference_data(raw_reference) -> ReferenceData:
    """Validated reference data."""
    return ReferenceData.model_validate(raw_reference)


@pytest.fixture
def reference_file(tmp_path, raw_reference):
    """Reference data written to a temporary JSON file."""
    path = tmp_path / "tire_data.json"
    path.write_text(json.dumps(raw_reference))
    return path


@pytest.fixture
def speed_table(reference_data) -> list[SpeedFactorRow]:
    """Unsorted speed table (90, 10, 50, 130 km/h)."""
    return list(reference_data.speed_table)


@pytest.fixture
def tire_xzy3() -> TireSpec:
    """11.00R20 truck tire: 2722 kg, 120 psi, symbol J."""
    return TireSpec(size="11.00R20 / XZY3", load_index=2722, std_pressure_psi=120, speed_symbol="J")


@pytest.fixture
def basic_inputs() -> CalculationInputs:
    """Three-axle truck at 35 t and 50 km/h."""
    return CalculationInputs(
        tire_size="11.00R20 / XZY3",
        total_load_t=35.0,
        speed_kmh=50.0,
        positions=[
            AxlePosition(id="1", load_distribution=0.18, tires_per_position=2),
            AxlePosition(id="2", load_distribution=0.41, tires_per_position=4),
            AxlePosition(id="3", load_distribution=0.41, tires_per_position=4),
        ],
    )


@pytest.fixture
def light_inputs() -> CalculationInputs:
    """Single position well inside the tire's limits."""
    return CalculationInputs(
        tire_size="11.00R20 / XZY3",
        total_load_t=27.0,
        speed_kmh=50.0,
        positions=[AxlePosition(id="1", load_distribution=0.2, tires_per_position=2)],
    )
