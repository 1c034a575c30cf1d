"""
Tests for the position calculator.

Tests cover:
- Reference scenarios (overload and within limits)
- Shared speed row and input order
- Configuration warnings
- Unknown tires and empty speed tables
"""

import pytest

from tireload.calculator.positions import LoadCalculator, TireNotFoundError, calculate_position
from tireload.models.inputs import (
    AxlePosition,
    CalculationInputs,
    ComplianceThresholds,
    ReferenceData,
)
from tireload.models.outputs import LoadVerdict, PressureVerdict
from tireload.physics.speed import EmptySpeedTableError


class TestCalculatePosition:
    """Tests for a single position."""

    def test_overloaded_single_axle(self, tire_xzy3, speed_table):
        row = next(r for r in speed_table if r.speed == 50)
        position = AxlePosition(id="1", load_distribution=0.18, tires_per_position=2)

        result = calculate_position(tire_xzy3, 35.0, row, position)

        assert result.load_per_tire_kg == pytest.approx(3150.0)
        assert result.limit_load_kg == pytest.approx(2613.12)
        assert result.ip_by_etrto_psi == pytest.approx(144.03, abs=0.05)
        assert result.result_load == LoadVerdict.OVERLOAD
        assert result.result_ip == PressureVerdict.CONSULT_SPEC
        assert result.damage.load == "16%"
        assert result.damage.ip == "20%"
        assert not result.is_ok

    def test_position_within_limits(self, tire_xzy3, speed_table):
        row = next(r for r in speed_table if r.speed == 50)
        position = AxlePosition(id="1", load_distribution=0.2, tires_per_position=2)

        result = calculate_position(tire_xzy3, 27.0, row, position)

        assert result.load_per_tire_kg == pytest.approx(2700.0)
        assert result.ip_by_etrto_psi == pytest.approx(118.8, abs=0.05)
        assert result.result_load == LoadVerdict.OK
        assert result.result_ip == PressureVerdict.OK
        assert result.damage.load == "OK"
        assert result.damage.ip == "OK"
        assert result.is_ok

    def test_custom_thresholds(self, tire_xzy3, speed_table):
        row = speed_table[0]
        # 28 t * 0.2 / 2 = 2800 kg, just above the 2722 kg load index
        position = AxlePosition(id="1", load_distribution=0.2, tires_per_position=2)
        strict = ComplianceThresholds(load_margin=1.0, pressure_margin=1.0)

        default = calculate_position(tire_xzy3, 28.0, row, position)
        result = calculate_position(tire_xzy3, 28.0, row, position, strict)

        assert default.is_ok
        assert result.result_load == LoadVerdict.OVERLOAD
        assert result.result_ip == PressureVerdict.CONSULT_SPEC
        assert result.damage.load == "3%"
        assert result.damage.ip == "4%"

    def test_zero_distribution(self, tire_xzy3, speed_table):
        position = AxlePosition(id="1", load_distribution=0.0)
        result = calculate_position(tire_xzy3, 35.0, speed_table[0], position)
        assert result.load_per_tire_kg == 0.0
        assert result.ip_by_etrto_psi == 0.0
        assert result.is_ok


class TestLoadCalculator:
    """Tests for LoadCalculator."""

    def test_positions_in_input_order(self, reference_data, basic_inputs):
        result = LoadCalculator(reference_data, basic_inputs).generate_result()
        assert [r.position.id for r in result.positions] == ["1", "2", "3"]

    def test_all_positions_share_speed_row(self, reference_data, basic_inputs):
        result = LoadCalculator(reference_data, basic_inputs).generate_result()
        assert result.speed_row.speed == 50
        assert all(r.row == result.speed_row for r in result.positions)

    def test_tandem_positions(self, reference_data, basic_inputs):
        result = LoadCalculator(reference_data, basic_inputs).generate_result()
        # 35 t * 0.41 / 4 = 3587.5 kg
        assert result.positions[1].load_per_tire_kg == pytest.approx(3587.5)
        assert result.positions[2].load_per_tire_kg == pytest.approx(3587.5)
        assert result.total_tires == 10

    def test_overall_verdicts(self, reference_data, basic_inputs, light_inputs):
        heavy = LoadCalculator(reference_data, basic_inputs).generate_result()
        assert heavy.overall_result_load == LoadVerdict.OVERLOAD
        assert heavy.overall_result_ip == PressureVerdict.CONSULT_SPEC
        assert not heavy.all_ok

        light = LoadCalculator(reference_data, light_inputs).generate_result()
        assert light.overall_result_load == LoadVerdict.OK
        assert light.overall_result_ip == PressureVerdict.OK
        assert light.all_ok

    def test_result_echoes_inputs(self, reference_data, basic_inputs):
        result = LoadCalculator(reference_data, basic_inputs).generate_result()
        assert result.tire.size == "11.00R20 / XZY3"
        assert result.total_load_t == 35.0
        assert result.speed_kmh == 50.0

    def test_deterministic(self, reference_data, basic_inputs):
        first = LoadCalculator(reference_data, basic_inputs).generate_result()
        second = LoadCalculator(reference_data, basic_inputs).generate_result()
        assert first == second

    def test_unknown_tire(self, reference_data):
        inputs = CalculationInputs(
            tire_size="9.00R20 / NOPE",
            total_load_t=10,
            speed_kmh=40,
            positions=[AxlePosition(id="1", load_distribution=1.0)],
        )
        with pytest.raises(TireNotFoundError, match="9.00R20"):
            LoadCalculator(reference_data, inputs)

    def test_unknown_tire_is_value_error(self, reference_data):
        inputs = CalculationInputs(
            tire_size="unknown",
            total_load_t=10,
            speed_kmh=40,
            positions=[AxlePosition(id="1", load_distribution=1.0)],
        )
        with pytest.raises(ValueError):
            LoadCalculator(reference_data, inputs)

    def test_empty_speed_table(self, reference_data, basic_inputs):
        reference = ReferenceData(tires=reference_data.tires, speed_table=[])
        with pytest.raises(EmptySpeedTableError):
            LoadCalculator(reference, basic_inputs)


class TestWarnings:
    """Tests for configuration warnings."""

    def test_no_warnings_for_valid_configuration(self, reference_data, basic_inputs):
        result = LoadCalculator(reference_data, basic_inputs).generate_result()
        assert result.warnings == []

    def test_distribution_not_summing_to_one(self, reference_data, light_inputs):
        result = LoadCalculator(reference_data, light_inputs).generate_result()
        assert any("sum to 20%" in w for w in result.warnings)

    def test_distribution_within_tolerance(self, reference_data):
        inputs = CalculationInputs(
            tire_size="11.00R20 / XZY3",
            total_load_t=20,
            speed_kmh=50,
            positions=[
                AxlePosition(id="1", load_distribution=0.333),
                AxlePosition(id="2", load_distribution=0.333),
                AxlePosition(id="3", load_distribution=0.333),
            ],
        )
        result = LoadCalculator(reference_data, inputs).generate_result()
        assert not any("sum to" in w for w in result.warnings)

    def test_symbol_not_rated_at_speed(self, reference_data):
        inputs = CalculationInputs(
            tire_size="11.00R20 / XZY3",
            total_load_t=20,
            speed_kmh=140,
            positions=[AxlePosition(id="1", load_distribution=1.0, tires_per_position=4)],
        )
        result = LoadCalculator(reference_data, inputs).generate_result()

        assert result.speed_row.speed == 130
        assert result.positions[0].limit_load_kg == 0.0
        assert any("Speed symbol J" in w for w in result.warnings)

    def test_speed_below_table(self, reference_data):
        inputs = CalculationInputs(
            tire_size="11.00R20 / XZY3",
            total_load_t=20,
            speed_kmh=5,
            positions=[AxlePosition(id="1", load_distribution=1.0, tires_per_position=4)],
        )
        result = LoadCalculator(reference_data, inputs).generate_result()

        assert result.speed_row.speed == 10
        assert any("below the speed table" in w for w in result.warnings)
