"""
Spreadsheet (XLSX) and PDF exports of calculation results.
"""

from tireload.export.excel import build_workbook, export_to_excel, workbook_bytes
from tireload.export.pdf import build_pdf, export_to_pdf
from tireload.export.formatting import default_filename

__all__ = [
    "build_workbook",
    "export_to_excel",
    "workbook_bytes",
    "build_pdf",
    "export_to_pdf",
    "default_filename",
]
