"""
Speed table row resolution.

The speed / load-factor table is reference data keyed by speed. A vehicle
speed maps to the closest row at or below it.
"""

from typing import Sequence

from tireload.models.inputs import SpeedFactorRow


class EmptySpeedTableError(ValueError):
    """Raised when a speed row is requested from an empty table."""


def resolve_speed_row(
    table: Sequence[SpeedFactorRow],
    target_speed: float,
) -> SpeedFactorRow:
    """
    Find the speed table row that applies to a target speed.

    Args:
        table: Speed table rows, in any order
        target_speed: Vehicle speed in km/h

    Returns:
        The row with the greatest speed <= target_speed. Speeds below the
        lowest row are clamped to the lowest row.

    Raises:
        EmptySpeedTableError: If the table has no rows

    Notes:
        - Rows are sorted by speed before the scan, so storage order never
          changes the result
        - With duplicate speeds the later row in sorted order wins; the
          reference loader rejects duplicates before they get here
    """
    if not table:
        raise EmptySpeedTableError("Speed table is empty; cannot resolve a speed row")

    ordered = sorted(table, key=lambda r: r.speed)

    row = ordered[0]
    for candidate in ordered:
        if candidate.speed <= target_speed:
            row = candidate
    return row


def is_below_table(table: Sequence[SpeedFactorRow], target_speed: float) -> bool:
    """True when target_speed is below every row (the lookup clamps)."""
    return bool(table) and target_speed < min(r.speed for r in table)
