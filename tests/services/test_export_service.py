"""
Tests for the spreadsheet export.

Tests cover:
- Section order and row layout
- Skipping reports with no fields
- Missing reports
"""

from io import BytesIO

import pytest
from openpyxl import load_workbook

from financial_statements.exceptions import MissingReportForExport
from financial_statements.schemas.reports import ExportRequest
from financial_statements.services.export_service import (
    build_workbook,
    require_reports,
)
from financial_statements.services.statement_service import generate_statements


def read_rows(content: bytes, title: str = "Estados Financieros"):
    """Load the single worksheet and return rows without trailing blanks."""
    workbook = load_workbook(BytesIO(content))
    assert workbook.sheetnames == [title]
    rows = []
    for row in workbook[title].iter_rows(values_only=True):
        values = list(row)
        while values and values[-1] is None:
            values.pop()
        rows.append(values)
    return rows


@pytest.fixture
def export_request(sample_entries):
    return ExportRequest.from_statements(generate_statements(sample_entries))


class TestBuildWorkbook:

    def test_sections_in_fixed_order(self, export_request):
        rows = read_rows(build_workbook(export_request, "Estados Financieros"))

        assert rows[0] == ["Balance General"]
        assert rows[1] == ["assets", "liabilities", "equity", "balance"]
        assert rows[2] == [1000, 400, 250, 350]
        assert rows[3] == []

        assert rows[4] == ["Estado de Resultados"]
        assert rows[5] == ["revenue", "expense", "netIncome"]
        assert rows[6] == [800, 350, 450]
        assert rows[7] == []

        assert rows[8] == ["Cambios en el Capital"]
        assert rows[9] == [
            "contributions", "withdrawals", "retainedEarnings", "endingEquity",
        ]
        assert rows[10] == [500, 120, 450, 830]
        assert rows[11] == []

        assert rows[12] == ["Flujos de Efectivo"]
        assert rows[13] == ["operating", "investing", "financing", "netCashFlow"]
        assert rows[14] == [600, -300, 75, 375]

    def test_reports_are_written_as_given(self):
        request = ExportRequest(
            balance_sheet={"assets": 1, "balance": 999},
            income_statement={"revenue": 2},
            equity_changes={"contributions": 3},
            cash_flow={"operating": 4},
        )
        rows = read_rows(build_workbook(request, "Sheet"), "Sheet")

        assert rows[1] == ["assets", "balance"]
        assert rows[2] == [1, 999]

    def test_empty_report_is_skipped(self, export_request):
        request = export_request.model_copy(update={"equity_changes": {}})
        rows = read_rows(build_workbook(request, "Estados Financieros"))

        titles = [r[0] for r in rows if len(r) == 1]
        assert titles == [
            "Balance General",
            "Estado de Resultados",
            "Flujos de Efectivo",
        ]
        assert rows[8] == ["Flujos de Efectivo"]

    def test_title_row_is_bold(self, export_request):
        content = build_workbook(export_request, "Estados Financieros")
        sheet = load_workbook(BytesIO(content)).active
        assert sheet["A1"].font.bold is True
        assert sheet["A2"].font.bold is not True


class TestRequireReports:

    def test_all_present_passes(self, export_request):
        require_reports(export_request)

    def test_missing_reports_named_by_wire_key(self, export_request):
        request = export_request.model_copy(
            update={"income_statement": None, "cash_flow": None}
        )
        with pytest.raises(MissingReportForExport) as exc_info:
            require_reports(request)

        assert exc_info.value.missing == ["estadoResultados", "flujosEfectivo"]

    def test_build_refuses_incomplete_request(self):
        with pytest.raises(MissingReportForExport):
            build_workbook(ExportRequest(), "Estados Financieros")
