"""Request and response schemas."""

from financial_statements.schemas.entries import Entry, StatementsRequest
from financial_statements.schemas.reports import (
    BalanceSheet,
    CashFlow,
    EquityChanges,
    ExportRequest,
    FinancialStatements,
    IncomeStatement,
)

__all__ = [
    "Entry",
    "StatementsRequest",
    "BalanceSheet",
    "IncomeStatement",
    "EquityChanges",
    "CashFlow",
    "FinancialStatements",
    "ExportRequest",
]
