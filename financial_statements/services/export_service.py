"""
Spreadsheet export.

Renders already computed reports into a single xlsx worksheet.
Nothing is recalculated here: each report is written exactly as
the client sent it back.

Layout, per report and in a fixed order:
    title row
    header row (field names)
    data row (values)
    blank row
"""

import logging
from io import BytesIO
from typing import Any

from openpyxl import Workbook
from openpyxl.styles import Font

from financial_statements.exceptions import MissingReportForExport
from financial_statements.schemas.reports import ExportRequest

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = (
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
)

# (ExportRequest field, section title), in rendering order
SECTIONS = (
    ("balance_sheet", "Balance General"),
    ("income_statement", "Estado de Resultados"),
    ("equity_changes", "Cambios en el Capital"),
    ("cash_flow", "Flujos de Efectivo"),
)


def require_reports(request: ExportRequest) -> None:
    """Raise MissingReportForExport unless all four reports are present."""
    missing = [
        ExportRequest.model_fields[field].alias
        for field, _ in SECTIONS
        if getattr(request, field) is None
    ]
    if missing:
        logger.info("Rejected export: missing %s", ", ".join(missing))
        raise MissingReportForExport(missing)


def _cell_value(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    return str(value)


def _add_section(sheet, title: str, report: dict[str, Any] | None) -> bool:
    if not report:
        return False
    sheet.append([title])
    sheet.cell(row=sheet.max_row, column=1).font = Font(bold=True)
    sheet.append(list(report.keys()))
    sheet.append([_cell_value(v) for v in report.values()])
    sheet.append([])
    return True


def build_workbook(request: ExportRequest, sheet_title: str) -> bytes:
    """
    Render the reports into an xlsx document and return its bytes.

    Raises MissingReportForExport if any report is absent. A report
    with no fields at all is skipped rather than rendered empty.
    """
    require_reports(request)

    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_title

    rendered = sum(
        _add_section(sheet, title, getattr(request, field))
        for field, title in SECTIONS
    )

    buffer = BytesIO()
    workbook.save(buffer)
    logger.debug("Exported %d report sections", rendered)
    return buffer.getvalue()
