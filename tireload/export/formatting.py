"""
Value formatting shared by the spreadsheet and PDF exports.

Damage percentages and verdicts are already strings committed by the
compliance evaluator; exporters print them as-is and never re-round them.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

from tireload.compliance.evaluator import round_half_up


TITLE = "Load & I/P Calculation"
SPEED_TABLE_TITLE = "Variasi Kapasitas Pembebanan (%)"
SPEED_TABLE_HEADERS = ["Speed (km/h)", "F", "G", "J", "K", "L", "M", "Kompensasi Tekanan"]
SUMMARY_HEADERS = [
    "Position",
    "Load Distribution",
    "Load/Tire",
    "I/P by ETRTO",
    "Result Load",
    "Result I/P",
    "Damage Load",
    "Damage I/P",
]


def fmt_percent(fraction: Optional[float]) -> str:
    """0.18 -> '18%'. Blank for missing or zero values."""
    if not fraction:
        return ""
    return f"{round_half_up(fraction * 100)}%"


def fmt_distribution(fraction: float) -> str:
    """Load distribution as a whole percentage, '0%' included."""
    return f"{round_half_up(fraction * 100)}%"


def fmt_kg(value: float, decimals: int = 0) -> str:
    return f"{value:.{decimals}f} Kg"


def fmt_psi(value: float) -> str:
    return f"{value:.1f} Psi"


def fmt_speed(value: float) -> str:
    return f"{value:g} Km/h"


def fmt_number(value: float) -> str:
    """Drop a trailing .0 on whole numbers (35.0 -> '35')."""
    return f"{value:g}"


def position_label(position_id: str) -> str:
    return f"Position {position_id}"


def axle_label(tires_per_position: int) -> str:
    return "Single" if tires_per_position == 2 else "Tandem"


def default_filename(tire_size: str, extension: str, on: Optional[date] = None) -> str:
    """
    Build the export filename for a tire.

    Example:
        default_filename("295/80R22.5 / TRD", "xlsx", date(2024, 5, 1))
        -> 'Load_IP_Calc_295-80R22.5 - TRD_2024-05-01.xlsx'
    """
    on = on or date.today()
    clean = re.sub(r"[/\\]", "-", tire_size)
    return f"Load_IP_Calc_{clean}_{on.isoformat()}.{extension}"
