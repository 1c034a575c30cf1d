"""
Spreadsheet export of a calculation result.

Builds a single "Calculation" sheet with openpyxl: inputs, per-position
loads and pressures, tire information, verdicts, damage estimates, the
speed / load-factor table (resolved row highlighted) and a summary table.
"""

from __future__ import annotations

from io import BytesIO
from pathlib import Path
from typing import Optional, Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from tireload.export.formatting import (
    SPEED_TABLE_HEADERS,
    SPEED_TABLE_TITLE,
    SUMMARY_HEADERS,
    TITLE,
    fmt_distribution,
    fmt_kg,
    fmt_percent,
    fmt_psi,
    fmt_speed,
    position_label,
)
from tireload.models.inputs import SpeedFactorRow, SpeedSymbol
from tireload.models.outputs import DAMAGE_OK, CalculationResult, LoadVerdict, PressureVerdict


SHEET_TITLE = "Calculation"

# Fill colours (RGB hex)
HEADER_FILL = "EDEDED"
DISTRIBUTION_FILL = "0099FF"
TIRE_INFO_FILL = "CDEFFF"
SYMBOL_FILL = "FFF2B3"
OK_FILL = "B7E1CD"
OVERLOAD_FILL = "FFC1C1"
CONSULT_FILL = "FFF2B3"
PLAIN_FILL = "FFFFFF"
ACTIVE_SPEED_FILL = "FF9999"
ACTIVE_ROW_FILL = "FFEEEE"

# Speed table placement (column N)
SPEED_TABLE_COL = 14

COLUMN_WIDTHS = [3, 18, 12, 12, 20, 18, 5, 15, 15, 12, 12, 3, 3, 12, 8, 8, 8, 8, 8, 8, 20]

_THIN = Side(style="thin", color="999999")
BORDER_THIN = Border(top=_THIN, bottom=_THIN, left=_THIN, right=_THIN)
CENTER = Alignment(horizontal="center", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")


def _set_cell(
    ws: Worksheet,
    row: int,
    col: int,
    value,
    *,
    bold: bool = False,
    fill: Optional[str] = None,
    align: Optional[Alignment] = None,
    border: bool = False,
) -> None:
    """Write a value with optional styling."""
    cell = ws.cell(row=row, column=col, value=value)
    if bold:
        cell.font = Font(bold=True)
    if fill:
        cell.fill = PatternFill(fill_type="solid", fgColor=fill)
    if align:
        cell.alignment = align
    if border:
        cell.border = BORDER_THIN


def _header(ws: Worksheet, row: int, col: int, value: str) -> None:
    _set_cell(ws, row, col, value, bold=True, fill=HEADER_FILL, align=CENTER, border=True)


def _verdict_fill(value: str) -> str:
    if value == LoadVerdict.OK.value:
        return OK_FILL
    if value == LoadVerdict.OVERLOAD.value:
        return OVERLOAD_FILL
    return CONSULT_FILL


def _write_positions(ws: Worksheet, result: CalculationResult, start_row: int) -> int:
    """Load distribution / load per tire / I/P table. Returns next free row."""
    row = start_row
    for col, header in enumerate(["Load Distribution", "Load/Tire", "I/P by ETRTO"], start=2):
        _header(ws, row, col, header)
    row += 1

    for r in result.positions:
        _set_cell(ws, row, 2, fmt_distribution(r.position.load_distribution),
                  fill=DISTRIBUTION_FILL, align=CENTER, border=True)
        _set_cell(ws, row, 3, fmt_kg(r.load_per_tire_kg), align=RIGHT, border=True)
        _set_cell(ws, row, 4, fmt_psi(r.ip_by_etrto_psi), align=RIGHT, border=True)
        row += 1
    return row


def _write_tire_info(ws: Worksheet, result: CalculationResult, start_row: int) -> None:
    tire = result.tire
    row = start_row

    _set_cell(ws, row, 5, "Tire size / Pattern:", bold=True)
    _set_cell(ws, row, 6, tire.size, fill=TIRE_INFO_FILL, border=True)
    _set_cell(ws, row, 8, "Speed Symbol", bold=True)
    row += 1

    _set_cell(ws, row, 5, "Load Index:", bold=True)
    _set_cell(ws, row, 6, fmt_kg(tire.load_index), fill=TIRE_INFO_FILL, border=True)
    _set_cell(ws, row, 8, tire.speed_symbol.value, fill=SYMBOL_FILL, align=CENTER, border=True)
    row += 1

    _set_cell(ws, row, 5, "Ave. Speed:", bold=True)
    _set_cell(ws, row, 6, fmt_speed(result.speed_kmh), fill=TIRE_INFO_FILL, border=True)
    row += 1

    _set_cell(ws, row, 5, "STD I/P:", bold=True)
    _set_cell(ws, row, 6, fmt_psi(tire.std_pressure_psi), border=True)
    row += 1

    overall = result.overall_result_ip
    _set_cell(ws, row, 5, "Result I/P", bold=True)
    _set_cell(ws, row, 6, overall.value,
              fill=OK_FILL if overall == PressureVerdict.OK else CONSULT_FILL,
              align=CENTER, border=True)


def _write_results(ws: Worksheet, result: CalculationResult, start_row: int) -> int:
    """Verdict columns and the damage block. Returns next free row."""
    row = start_row
    _header(ws, row, 9, "Result Load")
    _header(ws, row, 10, "Result I/P")
    row += 1

    for r in result.positions:
        _set_cell(ws, row, 9, r.result_load.value,
                  fill=_verdict_fill(r.result_load.value), align=CENTER, border=True)
        _set_cell(ws, row, 10, r.result_ip.value,
                  fill=_verdict_fill(r.result_ip.value), align=CENTER, border=True)
        row += 1

    row += 2
    _set_cell(ws, row, 9, "Possibility Tire Damage by :", bold=True)
    row += 1
    _header(ws, row, 10, "I/P")
    _header(ws, row, 11, "Load")
    row += 1

    for r in result.positions:
        ip_ok = r.result_ip == PressureVerdict.OK
        _set_cell(ws, row, 9, r.result_ip.value,
                  fill=OK_FILL if ip_ok else PLAIN_FILL, align=CENTER, border=True)
        _set_cell(ws, row, 10, r.damage.ip,
                  fill=OK_FILL if r.damage.ip == DAMAGE_OK else PLAIN_FILL, align=CENTER, border=True)
        _set_cell(ws, row, 11, r.damage.load,
                  fill=OK_FILL if r.damage.load == DAMAGE_OK else PLAIN_FILL, align=CENTER, border=True)
        row += 1
    return row


def _write_speed_table(
    ws: Worksheet,
    speed_table: Sequence[SpeedFactorRow],
    active_speed: float,
) -> int:
    """Speed table on the right-hand side. Returns next free row."""
    col = SPEED_TABLE_COL
    _set_cell(ws, 2, col, SPEED_TABLE_TITLE, bold=True)

    _set_cell(ws, 3, col + 1, "Simbol Kecepatan", bold=True, align=CENTER)
    ws.merge_cells(start_row=3, start_column=col + 1, end_row=3, end_column=col + 6)

    for idx, header in enumerate(SPEED_TABLE_HEADERS):
        _header(ws, 4, col + idx, header)

    row = 5
    for speed_row in sorted(speed_table, key=lambda r: r.speed):
        active = speed_row.speed == active_speed
        row_fill = ACTIVE_ROW_FILL if active else None

        _set_cell(ws, row, col, speed_row.speed, bold=active,
                  fill=ACTIVE_SPEED_FILL if active else None)
        for idx, symbol in enumerate(SpeedSymbol, start=1):
            value = speed_row.factors[symbol.value]
            if value is not None:
                _set_cell(ws, row, col + idx, fmt_percent(value),
                          fill=row_fill, align=CENTER, border=True)
        _set_cell(ws, row, col + 7, fmt_psi(speed_row.psi),
                  fill=row_fill, align=RIGHT, border=True)
        row += 1
    return row


def _write_summary(ws: Worksheet, result: CalculationResult, start_row: int) -> None:
    row = start_row
    for idx, header in enumerate(SUMMARY_HEADERS, start=2):
        _header(ws, row, idx, header)
    row += 1

    for r in result.positions:
        values = [
            (position_label(r.position.id), None),
            (fmt_distribution(r.position.load_distribution), CENTER),
            (fmt_kg(r.load_per_tire_kg, decimals=2), RIGHT),
            (fmt_psi(r.ip_by_etrto_psi), RIGHT),
            (r.result_load.value, CENTER),
            (r.result_ip.value, CENTER),
            (r.damage.load, CENTER),
            (r.damage.ip, CENTER),
        ]
        for idx, (value, align) in enumerate(values, start=2):
            _set_cell(ws, row, idx, value, align=align, border=True)
        row += 1


def build_workbook(
    result: CalculationResult,
    speed_table: Sequence[SpeedFactorRow],
) -> Workbook:
    """
    Build the calculation workbook.

    Args:
        result: Calculation result to export
        speed_table: Full reference speed table (the resolved row is highlighted)

    Returns:
        openpyxl Workbook with a single "Calculation" sheet
    """
    wb = Workbook()
    ws = wb.active
    ws.title = SHEET_TITLE

    # Title across A..I
    _set_cell(ws, 1, 1, TITLE, bold=True, align=CENTER)
    ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=9)

    _set_cell(ws, 3, 2, "Total Load", bold=True)
    _set_cell(ws, 3, 3, result.total_load_t, align=RIGHT)
    _set_cell(ws, 3, 4, "Ton", align=RIGHT)

    row = _write_positions(ws, result, start_row=5)

    tire_info_row = row + 2
    _write_tire_info(ws, result, tire_info_row)
    row = _write_results(ws, result, tire_info_row)

    speed_end = _write_speed_table(ws, speed_table, result.speed_row.speed)

    _write_summary(ws, result, max(speed_end, row) + 3)

    for idx, width in enumerate(COLUMN_WIDTHS, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = width

    return wb


def workbook_bytes(result: CalculationResult, speed_table: Sequence[SpeedFactorRow]) -> bytes:
    """Render the workbook to XLSX bytes."""
    buffer = BytesIO()
    build_workbook(result, speed_table).save(buffer)
    return buffer.getvalue()


def export_to_excel(
    result: CalculationResult,
    speed_table: Sequence[SpeedFactorRow],
    path: Path,
) -> Path:
    """Write the workbook to path and return it."""
    path = Path(path)
    build_workbook(result, speed_table).save(path)
    return path
