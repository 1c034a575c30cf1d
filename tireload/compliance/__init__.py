"""
Load and inflation pressure compliance checks.
"""

from tireload.compliance.evaluator import (
    evaluate_load,
    evaluate_pressure,
    format_damage_percent,
    round_half_up,
)

__all__ = [
    "evaluate_load",
    "evaluate_pressure",
    "format_damage_percent",
    "round_half_up",
]
