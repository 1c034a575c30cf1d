"""
Compliance evaluation for tire load and inflation pressure.

Classifies computed values against the reference margins and estimates the
possibility of tire damage:

    Result Load = "Over Load"      if Load/Tire >= LOAD INDEX * 115%
    Result I/P  = "CONSULT TO BS"  if I/P by ETRTO >= STD I/P * 110%
    Damage      = (actual - rated) / rated, as an integer percentage,
                  or "OK" when the verdict is OK

There is no warning tier: anything below the margin is simply OK.
"""

import math

from tireload.models.inputs import LOAD_MARGIN_RATIO, PRESSURE_MARGIN_RATIO
from tireload.models.outputs import (
    DAMAGE_OK,
    LoadEvaluation,
    LoadVerdict,
    PressureEvaluation,
    PressureVerdict,
)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def format_damage_percent(actual: float, rated: float) -> str:
    """Overage of actual over rated as an integer percentage string."""
    return f"{round_half_up((actual - rated) / rated * 100)}%"


def _check_margin(margin: float) -> None:
    if margin < 1:
        raise ValueError(f"Compliance margin must be at least 1, got {margin}")


def evaluate_load(
    load_per_tire_kg: float,
    load_index: float,
    margin: float = LOAD_MARGIN_RATIO,
) -> LoadEvaluation:
    """
    Check load per tire against the load index margin.

    Args:
        load_per_tire_kg: Actual load on one tire in kg
        load_index: Tire load index in kg
        margin: Overload ratio (default 1.15)

    Returns:
        LoadEvaluation with verdict and damage percentage

    Raises:
        ValueError: If margin is below 1

    Check:
        - Exactly load_index * margin is already Over Load
    """
    _check_margin(margin)
    if load_per_tire_kg >= load_index * margin:
        return LoadEvaluation(
            verdict=LoadVerdict.OVERLOAD,
            damage_percent=format_damage_percent(load_per_tire_kg, load_index),
        )
    return LoadEvaluation(verdict=LoadVerdict.OK, damage_percent=DAMAGE_OK)


def evaluate_pressure(
    ip_by_etrto_psi: float,
    std_pressure_psi: float,
    margin: float = PRESSURE_MARGIN_RATIO,
) -> PressureEvaluation:
    """
    Check the ETRTO inflation pressure against the standard pressure margin.

    Args:
        ip_by_etrto_psi: Pressure from the ETRTO formula in psi
        std_pressure_psi: Tire standard inflation pressure in psi
        margin: Over-pressure ratio (default 1.10)

    Returns:
        PressureEvaluation with verdict and damage percentage

    Raises:
        ValueError: If margin is below 1

    Check:
        - Exactly std_pressure * margin already needs the tire spec consulted
    """
    _check_margin(margin)
    if ip_by_etrto_psi >= std_pressure_psi * margin:
        return PressureEvaluation(
            verdict=PressureVerdict.CONSULT_SPEC,
            damage_percent=format_damage_percent(ip_by_etrto_psi, std_pressure_psi),
        )
    return PressureEvaluation(verdict=PressureVerdict.OK, damage_percent=DAMAGE_OK)
