"""
Financial Statements API — FastAPI Application.

This is the entry point for the application.
All routers and error handlers are registered here.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from financial_statements.config import get_settings
from financial_statements.exceptions import FinancialStatementsError
from financial_statements.logging_config import configure_logging
from financial_statements.api.health import router as health_router
from financial_statements.api.statements import router as statements_router

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Balance sheet, income statement, changes in equity "
                "and cash flow from a list of accounting entries",
    debug=settings.DEBUG,
)


@app.exception_handler(FinancialStatementsError)
async def handle_rejected_request(
    request: Request, exc: FinancialStatementsError
):
    """Every client-input error becomes a 400 with an "error" message."""
    return JSONResponse(status_code=400, content={"error": str(exc)})


# Register routers
app.include_router(health_router)
app.include_router(statements_router)
