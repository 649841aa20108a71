"""
Pydantic schemas for the four financial reports.

Field names are snake_case in Python and camelCase on the wire,
so a report serializes as {"netIncome": ...} rather than
{"net_income": ...}. The envelope keeps the keys the first
version of the API used.
"""

from typing import Any

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class Report(BaseModel):
    """Common configuration for every report."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
        "allow_inf_nan": False,
    }


class BalanceSheet(Report):
    assets: float = 0.0
    liabilities: float = 0.0
    equity: float = 0.0
    balance: float = 0.0


class IncomeStatement(Report):
    revenue: float = 0.0
    expense: float = 0.0
    net_income: float = 0.0


class EquityChanges(Report):
    contributions: float = 0.0
    withdrawals: float = 0.0
    retained_earnings: float = 0.0
    ending_equity: float = 0.0


class CashFlow(Report):
    operating: float = 0.0
    investing: float = 0.0
    financing: float = 0.0
    net_cash_flow: float = 0.0


class FinancialStatements(BaseModel):
    """All four reports, computed from the same entry list."""
    balance_sheet: BalanceSheet = Field(alias="balanceGeneral")
    income_statement: IncomeStatement = Field(alias="estadoResultados")
    equity_changes: EquityChanges = Field(alias="cambiosCapital")
    cash_flow: CashFlow = Field(alias="flujosEfectivo")

    model_config = {"populate_by_name": True}


class ExportRequest(BaseModel):
    """
    Body of the export endpoint.

    Reports arrive exactly as the statements endpoint returned them
    and are rendered as given. Each one is a plain mapping so an
    empty report ({}) can still be told apart from a missing one.
    """
    balance_sheet: dict[str, Any] | None = Field(
        default=None, alias="balanceGeneral"
    )
    income_statement: dict[str, Any] | None = Field(
        default=None, alias="estadoResultados"
    )
    equity_changes: dict[str, Any] | None = Field(
        default=None, alias="cambiosCapital"
    )
    cash_flow: dict[str, Any] | None = Field(
        default=None, alias="flujosEfectivo"
    )

    model_config = {"populate_by_name": True}

    @classmethod
    def from_statements(cls, statements: FinancialStatements) -> "ExportRequest":
        """Build an export request from freshly computed statements."""
        return cls.model_validate(statements.model_dump(by_alias=True))
