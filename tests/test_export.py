"""
Tests for spreadsheet and PDF exports.
"""

from datetime import date, datetime
from io import BytesIO

import pytest
from openpyxl import load_workbook

from tireload.calculator.positions import LoadCalculator
from tireload.export.excel import SPEED_TABLE_COL, build_workbook, export_to_excel, workbook_bytes
from tireload.export.formatting import (
    TITLE,
    axle_label,
    default_filename,
    fmt_distribution,
    fmt_kg,
    fmt_percent,
    fmt_psi,
)
from tireload.export.pdf import build_pdf, build_vehicle_frame, export_to_pdf


@pytest.fixture
def result(reference_data, basic_inputs):
    return LoadCalculator(reference_data, basic_inputs).generate_result()


class TestFormatting:
    """Tests for shared value formatting."""

    def test_percent(self):
        assert fmt_percent(0.96) == "96%"
        assert fmt_percent(None) == ""
        assert fmt_percent(0.0) == ""

    def test_distribution_keeps_zero(self):
        assert fmt_distribution(0.18) == "18%"
        assert fmt_distribution(0.0) == "0%"

    def test_units(self):
        assert fmt_kg(3150.0000001) == "3150 Kg"
        assert fmt_kg(3587.5, decimals=2) == "3587.50 Kg"
        assert fmt_psi(118.79) == "118.8 Psi"

    def test_axle_label(self):
        assert axle_label(2) == "Single"
        assert axle_label(4) == "Tandem"

    def test_default_filename(self):
        name = default_filename("295/80R22.5 / TRD", "xlsx", date(2024, 5, 1))
        assert name == "Load_IP_Calc_295-80R22.5 - TRD_2024-05-01.xlsx"

    def test_default_filename_backslash(self):
        assert default_filename("a\\b", "pdf", date(2024, 1, 2)) == "Load_IP_Calc_a-b_2024-01-02.pdf"


class TestExcelExport:
    """Tests for the XLSX workbook."""

    def test_sheet_layout(self, result, speed_table):
        ws = build_workbook(result, speed_table)["Calculation"]

        assert ws["A1"].value == TITLE
        assert ws["B3"].value == "Total Load"
        assert ws["C3"].value == 35.0
        # Position rows follow the header on row 5
        assert ws["B5"].value == "Load Distribution"
        assert [ws.cell(row=r, column=2).value for r in (6, 7, 8)] == ["18%", "41%", "41%"]
        assert ws["C6"].value == "3150 Kg"

    def test_speed_table_sorted(self, result, speed_table):
        ws = build_workbook(result, speed_table)["Calculation"]

        assert ws.cell(row=4, column=SPEED_TABLE_COL).value == "Speed (km/h)"
        speeds = [ws.cell(row=r, column=SPEED_TABLE_COL).value for r in range(5, 9)]
        assert speeds == [10, 50, 90, 130]

    def test_resolved_speed_row_highlighted(self, result, speed_table):
        ws = build_workbook(result, speed_table)["Calculation"]
        # 50 km/h is the second table row
        assert ws.cell(row=6, column=SPEED_TABLE_COL).font.bold
        assert not ws.cell(row=5, column=SPEED_TABLE_COL).font.bold

    def test_verdicts_written(self, result, speed_table):
        ws = build_workbook(result, speed_table)["Calculation"]
        values = {cell.value for row in ws.iter_rows() for cell in row}
        assert "Over Load" in values
        assert "CONSULT TO BS" in values
        assert "16%" in values

    def test_bytes_reopen(self, result, speed_table):
        wb = load_workbook(BytesIO(workbook_bytes(result, speed_table)))
        assert wb.sheetnames == ["Calculation"]

    def test_export_to_file(self, result, speed_table, tmp_path):
        path = export_to_excel(result, speed_table, tmp_path / "out.xlsx")
        assert path.exists()
        assert load_workbook(path)["Calculation"]["A1"].value == TITLE


class TestPdfExport:
    """Tests for the PDF report."""

    def test_pdf_bytes(self, result, speed_table):
        content = build_pdf(result, speed_table, generated=datetime(2024, 5, 1, 12, 0))
        assert content.startswith(b"%PDF")

    def test_pdf_with_warnings(self, reference_data, light_inputs, speed_table):
        result = LoadCalculator(reference_data, light_inputs).generate_result()
        assert result.warnings
        assert build_pdf(result, speed_table).startswith(b"%PDF")

    def test_export_to_file(self, result, speed_table, tmp_path):
        path = export_to_pdf(result, speed_table, tmp_path / "out.pdf")
        assert path.read_bytes().startswith(b"%PDF")

    def test_vehicle_frame_grows_with_positions(self, result):
        positions = [r.position for r in result.positions]
        one = build_vehicle_frame(positions[:1])
        three = build_vehicle_frame(positions)
        assert three.height == pytest.approx(one.height * 3)
