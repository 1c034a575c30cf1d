"""
PDF export of a calculation result.

Lays out vehicle and tire information, a vehicle frame sketch (single or
tandem wheel sets per position), the position results table and the speed
/ load-factor table using reportlab.
"""

from __future__ import annotations

from datetime import datetime
from io import BytesIO
from pathlib import Path
from typing import Optional, Sequence
from xml.sax.saxutils import escape

from reportlab.graphics.shapes import Circle, Drawing, Line, Rect, String
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from tireload.export.formatting import (
    SPEED_TABLE_HEADERS,
    SPEED_TABLE_TITLE,
    TITLE,
    axle_label,
    fmt_distribution,
    fmt_kg,
    fmt_number,
    fmt_percent,
    fmt_psi,
    position_label,
)
from tireload.models.inputs import AxlePosition, SpeedFactorRow, SpeedSymbol
from tireload.models.outputs import CalculationResult, LoadVerdict, PressureVerdict


POSITION_HEADERS = [
    "Position",
    "Load Dist.",
    "Load/Tire",
    "I/P by ETRTO",
    "Result Load",
    "Result I/P",
    "Dmg Load",
    "Dmg I/P",
]

HEADER_BLUE = colors.Color(66 / 255, 139 / 255, 202 / 255)
HEADER_GREY = colors.Color(100 / 255, 100 / 255, 100 / 255)
WHEEL_GREY = colors.Color(60 / 255, 60 / 255, 60 / 255)
AXLE_GREY = colors.Color(150 / 255, 150 / 255, 150 / 255)
OK_GREEN = colors.Color(0, 128 / 255, 0)
CONSULT_ORANGE = colors.Color(1, 140 / 255, 0)
ACTIVE_ROW = colors.Color(1, 230 / 255, 230 / 255)

# Vehicle frame geometry (points)
WHEEL_W = 4 * mm
WHEEL_H = 8 * mm
WHEEL_GAP = 1 * mm
TANDEM_SET_GAP = 4 * mm
POSITION_SPACING = 16 * mm
BADGE_R = 4 * mm
FRAME_LEFT = 10 * mm


def _wheel_set(drawing: Drawing, x: float, y: float, tandem: bool) -> None:
    """Two wheels, or two pairs for a tandem set."""
    offsets = [0, WHEEL_W + WHEEL_GAP]
    if tandem:
        offsets += [
            WHEEL_W * 2 + WHEEL_GAP + TANDEM_SET_GAP,
            WHEEL_W * 3 + WHEEL_GAP * 2 + TANDEM_SET_GAP,
        ]
    for offset in offsets:
        drawing.add(Rect(x + offset, y, WHEEL_W, WHEEL_H, fillColor=WHEEL_GREY, strokeColor=None))


def build_vehicle_frame(positions: Sequence[AxlePosition]) -> Drawing:
    """
    Sketch the vehicle frame, one row per axle position.

    Wheel sets sit left and right of a numbered badge; tandem positions
    draw four wheels per side.
    """
    tandem_width = WHEEL_W * 4 + WHEEL_GAP * 2 + TANDEM_SET_GAP
    single_width = WHEEL_W * 2 + WHEEL_GAP
    center_x = FRAME_LEFT + tandem_width + 8 * mm
    right_x = center_x + 8 * mm
    text_x = right_x + tandem_width + 5 * mm

    height = max(len(positions), 1) * POSITION_SPACING
    drawing = Drawing(text_x + 40 * mm, height)

    for idx, pos in enumerate(positions):
        y = height - (idx + 1) * POSITION_SPACING + (POSITION_SPACING - WHEEL_H) / 2
        axle_y = y + WHEEL_H / 2

        left_x = FRAME_LEFT if pos.is_tandem else center_x - 8 * mm - single_width
        left_end = left_x + (tandem_width if pos.is_tandem else single_width)
        _wheel_set(drawing, left_x, y, pos.is_tandem)
        _wheel_set(drawing, right_x, y, pos.is_tandem)

        drawing.add(Line(left_end + 1, axle_y, center_x - BADGE_R - 1, axle_y,
                         strokeColor=AXLE_GREY, strokeWidth=0.5 * mm))
        drawing.add(Line(center_x + BADGE_R + 1, axle_y, right_x - 1, axle_y,
                         strokeColor=AXLE_GREY, strokeWidth=0.5 * mm))

        drawing.add(Circle(center_x, axle_y, BADGE_R, fillColor=HEADER_BLUE, strokeColor=None))
        drawing.add(String(center_x, axle_y - 2.5, f"P{pos.id}", fontName="Helvetica-Bold",
                           fontSize=8, fillColor=colors.white, textAnchor="middle"))
        drawing.add(String(text_x, axle_y - 2.5,
                           f"{fmt_distribution(pos.load_distribution)} - {axle_label(pos.tires_per_position)}",
                           fontName="Helvetica", fontSize=8))

    return drawing


def _position_table(result: CalculationResult) -> Table:
    rows = [POSITION_HEADERS]
    for r in result.positions:
        rows.append([
            position_label(r.position.id),
            fmt_distribution(r.position.load_distribution),
            fmt_kg(r.load_per_tire_kg, decimals=2),
            fmt_psi(r.ip_by_etrto_psi),
            r.result_load.value,
            r.result_ip.value,
            r.damage.load,
            r.damage.ip,
        ])

    style = [
        ("FONTSIZE", (0, 0), (-1, -1), 8),
        ("BACKGROUND", (0, 0), (-1, 0), HEADER_BLUE),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
    ]
    for idx, r in enumerate(result.positions, start=1):
        load_color = OK_GREEN if r.result_load == LoadVerdict.OK else colors.red
        ip_color = OK_GREEN if r.result_ip == PressureVerdict.OK else CONSULT_ORANGE
        style += [
            ("TEXTCOLOR", (4, idx), (4, idx), load_color),
            ("TEXTCOLOR", (5, idx), (5, idx), ip_color),
            ("FONTNAME", (4, idx), (5, idx), "Helvetica-Bold"),
        ]

    widths = [22 * mm, 20 * mm, 22 * mm, 25 * mm, 22 * mm, 25 * mm, 20 * mm, 20 * mm]
    return Table(rows, colWidths=widths, style=TableStyle(style), hAlign="LEFT")


def _speed_table(speed_table: Sequence[SpeedFactorRow], active_speed: float) -> Table:
    ordered = sorted(speed_table, key=lambda r: r.speed)
    rows = [SPEED_TABLE_HEADERS]
    for row in ordered:
        rows.append(
            [fmt_number(row.speed)]
            + [fmt_percent(row.factors[s.value]) for s in SpeedSymbol]
            + [fmt_psi(row.psi)]
        )

    style = [
        ("FONTSIZE", (0, 0), (-1, -1), 7),
        ("ALIGN", (0, 0), (-1, -1), "CENTER"),
        ("BACKGROUND", (0, 0), (-1, 0), HEADER_GREY),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ("FONTNAME", (0, 1), (0, -1), "Helvetica-Bold"),
        ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
    ]
    for idx, row in enumerate(ordered, start=1):
        if row.speed == active_speed:
            style += [
                ("BACKGROUND", (0, idx), (-1, idx), ACTIVE_ROW),
                ("FONTNAME", (0, idx), (-1, idx), "Helvetica-Bold"),
            ]

    return Table(rows, colWidths=[20 * mm] + [14 * mm] * 6 + [30 * mm],
                 style=TableStyle(style), hAlign="LEFT")


def _make_footer(generated: datetime):
    def draw_footer(canvas, doc) -> None:
        canvas.saveState()
        canvas.setFont("Helvetica", 8)
        width, _ = doc.pagesize
        canvas.drawCentredString(width / 2, 10 * mm, f"Page {canvas.getPageNumber()}")
        canvas.drawString(14 * mm, 10 * mm, f"Generated: {generated:%Y-%m-%d %H:%M:%S}")
        canvas.restoreState()
    return draw_footer


def build_pdf(
    result: CalculationResult,
    speed_table: Sequence[SpeedFactorRow],
    generated: Optional[datetime] = None,
) -> bytes:
    """
    Render the calculation report as PDF bytes.

    Args:
        result: Calculation result to export
        speed_table: Full reference speed table (the resolved row is highlighted)
        generated: Timestamp printed in the footer (default: now)

    Returns:
        PDF document bytes
    """
    generated = generated or datetime.now()
    styles = getSampleStyleSheet()
    body = styles["Normal"]
    heading = styles["Heading3"]
    tire = result.tire

    story = [
        Paragraph(escape(TITLE), styles["Title"]),
        Paragraph("Vehicle Information", heading),
        Paragraph(f"Total Load: {fmt_number(result.total_load_t)} Ton", body),
        Paragraph(f"Speed: {fmt_number(result.speed_kmh)} km/h", body),
        Spacer(1, 4 * mm),
        Paragraph("Tire Information", heading),
        Paragraph(f"Tire Size / Pattern: {escape(tire.size)}", body),
        Paragraph(f"Load Index: {fmt_number(tire.load_index)} Kg", body),
        Paragraph(f"STD I/P: {fmt_number(tire.std_pressure_psi)} Psi", body),
        Paragraph(f"Speed Symbol: {tire.speed_symbol.value}", body),
        Spacer(1, 4 * mm),
        Paragraph(f"Vehicle Frame ({len(result.positions)} positions, {result.total_tires} tires)", heading),
        build_vehicle_frame([r.position for r in result.positions]),
        Spacer(1, 4 * mm),
        Paragraph("Position Calculations", heading),
        _position_table(result),
        Spacer(1, 6 * mm),
        Paragraph(SPEED_TABLE_TITLE, heading),
        _speed_table(speed_table, result.speed_row.speed),
    ]

    if result.warnings:
        story.append(Spacer(1, 4 * mm))
        story.append(Paragraph("Warnings", heading))
        story.extend(Paragraph(f"- {escape(w)}", body) for w in result.warnings)

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        title=TITLE,
        leftMargin=14 * mm,
        rightMargin=14 * mm,
        topMargin=15 * mm,
        bottomMargin=20 * mm,
    )
    footer = _make_footer(generated)
    doc.build(story, onFirstPage=footer, onLaterPages=footer)
    return buffer.getvalue()


def export_to_pdf(
    result: CalculationResult,
    speed_table: Sequence[SpeedFactorRow],
    path: Path,
) -> Path:
    """Write the PDF report to path and return it."""
    path = Path(path)
    path.write_bytes(build_pdf(result, speed_table))
    return path
