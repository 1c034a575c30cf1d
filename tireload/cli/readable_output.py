"""
Helpers to turn JSON calculation outputs into a compact, human-readable
console summary. Useful for quickly scanning calculation_output.json files.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from tireload.physics.units import psi_to_kpa


def _fmt_float(value: Any, unit: str = "", decimals: int = 1, default: str = "n/a") -> str:
    """Safely format a float with optional unit suffix."""
    try:
        fval = float(value)
    except (TypeError, ValueError):
        return default
    suffix = f" {unit}" if unit else ""
    return f"{fval:,.{decimals}f}{suffix}"


def _fmt_pressure(psi: Any) -> str:
    """Pressure in psi with the kPa equivalent."""
    try:
        fval = float(psi)
    except (TypeError, ValueError):
        return "n/a"
    return f"{fval:.1f} psi ({psi_to_kpa(fval):.0f} kPa)"


def _print_position(idx: int, result: dict[str, Any]) -> None:
    position = result.get("position", {})
    damage = result.get("damage", {})
    tires = position.get("tires_per_position")
    axle = "tandem" if tires == 4 else "single"

    print(
        f"\n[{idx}] Position {position.get('id', '?')} | "
        f"{_fmt_float((position.get('load_distribution') or 0) * 100, '%', decimals=0)} | "
        f"{tires} tires ({axle})"
    )
    print(
        f"  Load/tire {_fmt_float(result.get('load_per_tire_kg'), 'kg', decimals=0)} | "
        f"limit {_fmt_float(result.get('limit_load_kg'), 'kg', decimals=0)} | "
        f"I/P by ETRTO {_fmt_pressure(result.get('ip_by_etrto_psi'))}"
    )
    print(
        f"  Result load: {result.get('result_load', '?')} (damage {damage.get('load', '?')}) | "
        f"Result I/P: {result.get('result_ip', '?')} (damage {damage.get('ip', '?')})"
    )


def print_result(data: dict[str, Any]) -> None:
    """
    Print a human-friendly summary of a calculation result.

    Args:
        data: CalculationResult as a JSON-compatible dict
    """
    tire = data.get("tire", {})
    row = data.get("speed_row", {})
    positions = data.get("positions", [])

    print(
        f"Tire: {tire.get('size', '?')} | load index {_fmt_float(tire.get('load_index'), 'kg', decimals=0)} | "
        f"STD I/P {_fmt_pressure(tire.get('std_pressure_psi'))} | symbol {tire.get('speed_symbol', '?')}"
    )
    print(
        f"Total load: {_fmt_float(data.get('total_load_t'), 't')} | "
        f"Speed: {_fmt_float(data.get('speed_kmh'), 'km/h', decimals=0)} "
        f"(table row {_fmt_float(row.get('speed'), 'km/h', decimals=0)})"
    )
    print(f"Positions: {len(positions)} | Tires: {sum(p.get('position', {}).get('tires_per_position', 0) for p in positions)}")

    warnings = data.get("warnings") or []
    if warnings:
        print("Warnings:")
        for w in warnings:
            print(f"  - {w}")

    for idx, result in enumerate(positions, 1):
        _print_position(idx, result)


def print_readable_output(json_path: Path) -> None:
    """
    Print a human-friendly summary of a calculation JSON file.

    Args:
        json_path: Path to the JSON output file.
    """
    data = json.loads(Path(json_path).read_text())
    print_result(data)
