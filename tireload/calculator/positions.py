"""
Position calculator.

Runs the load / pressure formulas and compliance checks over every axle
position of a vehicle configuration.
"""

from tireload.compliance.evaluator import evaluate_load, evaluate_pressure
from tireload.models.inputs import (
    AxlePosition,
    CalculationInputs,
    ComplianceThresholds,
    ReferenceData,
    SpeedFactorRow,
    TireSpec,
)
from tireload.models.outputs import CalculationResult, DamagePair, PositionResult
from tireload.physics.loads import (
    calculate_inflation_pressure,
    calculate_limit_load,
    calculate_load_per_tire,
)
from tireload.physics.speed import is_below_table, resolve_speed_row


# Allowed deviation of the summed load distribution from 100%
DISTRIBUTION_TOLERANCE = 0.005


class TireNotFoundError(ValueError):
    """Raised when the requested tire size is not in the reference data."""


def calculate_position(
    tire: TireSpec,
    total_load_t: float,
    speed_row: SpeedFactorRow,
    position: AxlePosition,
    thresholds: ComplianceThresholds | None = None,
) -> PositionResult:
    """
    Calculate load, pressure and compliance for one axle position.

    Args:
        tire: Selected tire specification
        total_load_t: Total vehicle load in metric tons
        speed_row: Speed table row resolved for this calculation pass
        position: Axle position to evaluate
        thresholds: Compliance margins (defaults 1.15 load / 1.10 pressure)

    Returns:
        PositionResult for this position
    """
    thresholds = thresholds or ComplianceThresholds()

    load_per_tire = calculate_load_per_tire(
        total_load_t, position.load_distribution, position.tires_per_position
    )
    limit_load = calculate_limit_load(tire.load_index, speed_row, tire.speed_symbol)
    ip_by_etrto = calculate_inflation_pressure(
        load_per_tire, tire.load_index, tire.std_pressure_psi
    )

    load_eval = evaluate_load(load_per_tire, tire.load_index, thresholds.load_margin)
    pressure_eval = evaluate_pressure(
        ip_by_etrto, tire.std_pressure_psi, thresholds.pressure_margin
    )

    return PositionResult(
        position=position,
        row=speed_row,
        load_per_tire_kg=load_per_tire,
        limit_load_kg=limit_load,
        ip_by_etrto_psi=ip_by_etrto,
        result_load=load_eval.verdict,
        result_ip=pressure_eval.verdict,
        damage=DamagePair(load=load_eval.damage_percent, ip=pressure_eval.damage_percent),
    )


class LoadCalculator:
    """
    Calculator for a complete vehicle configuration.

    Looks up the tire and resolves the speed row once, then evaluates each
    axle position against that same row.
    """

    def __init__(self, reference: ReferenceData, inputs: CalculationInputs):
        """
        Initialize calculator with reference data and inputs.

        Args:
            reference: Loaded tire and speed tables
            inputs: Vehicle configuration to evaluate

        Raises:
            TireNotFoundError: If inputs.tire_size is not in the reference data
            EmptySpeedTableError: If the reference speed table is empty
        """
        self.reference = reference
        self.inputs = inputs

        tire = reference.find_tire(inputs.tire_size)
        if tire is None:
            raise TireNotFoundError(f"Tire size not found in reference data: {inputs.tire_size!r}")
        self.tire = tire

        self.speed_row = resolve_speed_row(reference.speed_table, inputs.speed_kmh)

    def calculate_positions(self) -> list[PositionResult]:
        """Evaluate every position, preserving input order."""
        return [
            calculate_position(
                self.tire,
                self.inputs.total_load_t,
                self.speed_row,
                position,
                self.inputs.thresholds,
            )
            for position in self.inputs.positions
        ]

    def _generate_warnings(self) -> list[str]:
        """Collect non-fatal issues with the configuration."""
        warnings = []

        distribution_total = self.inputs.distribution_total
        if abs(distribution_total - 1.0) > DISTRIBUTION_TOLERANCE:
            warnings.append(
                f"Load distributions sum to {distribution_total * 100:.0f}%, not 100%"
            )

        if self.speed_row.factor(self.tire.speed_symbol) == 0:
            warnings.append(
                f"Speed symbol {self.tire.speed_symbol.value} has no load factor at "
                f"{self.speed_row.speed:g} km/h; limit load is 0"
            )

        if is_below_table(self.reference.speed_table, self.inputs.speed_kmh):
            warnings.append(
                f"Speed {self.inputs.speed_kmh:g} km/h is below the speed table; "
                f"using the {self.speed_row.speed:g} km/h row"
            )

        return warnings

    def generate_result(self) -> CalculationResult:
        """
        Run the full calculation.

        Returns:
            CalculationResult with per-position results and warnings
        """
        return CalculationResult(
            tire=self.tire,
            total_load_t=self.inputs.total_load_t,
            speed_kmh=self.inputs.speed_kmh,
            speed_row=self.speed_row,
            positions=self.calculate_positions(),
            warnings=self._generate_warnings(),
        )
