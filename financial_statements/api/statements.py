"""
Financial statement API endpoints.

The API layer is thin: it decodes the body, delegates to the
services, and shapes the response. Rejections raised by the
services are turned into 400 responses by the handler in main.
Each route also answers on the path the first version of the
API used.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from financial_statements.config import Settings, get_settings
from financial_statements.schemas.entries import StatementsRequest
from financial_statements.schemas.reports import ExportRequest, FinancialStatements
from financial_statements.services.export_service import (
    XLSX_MEDIA_TYPE,
    build_workbook,
)
from financial_statements.services.statement_service import generate_statements

router = APIRouter(prefix="/api", tags=["Statements"])


@router.post("/estados-financieros", response_model=FinancialStatements)
@router.post("/financial-statements", response_model=FinancialStatements)
def create_statements(request: StatementsRequest):
    """
    Compute all four financial statements from a list of entries.

    Fails with 400 on the first invalid entry; no partial
    result is ever returned.
    """
    return generate_statements(request.entries)


@router.post("/exportar/excel")
@router.post("/export/excel")
def export_excel(
    request: ExportRequest,
    settings: Settings = Depends(get_settings),
):
    """
    Download previously computed statements as an xlsx workbook.

    All four statements must be present in the body.
    """
    content = build_workbook(request, settings.EXPORT_SHEET_TITLE)
    return Response(
        content=content,
        media_type=XLSX_MEDIA_TYPE,
        headers={
            "Content-Disposition": (
                f"attachment; filename={settings.EXPORT_FILENAME}"
            ),
        },
    )
