"""
Report reducers.

Each reducer folds a list of validated entries into one report.
A reducer only looks at the categories it owns and skips the
rest, so a revenue entry never touches the balance sheet.

Totals use math.fsum: the result is the correctly rounded sum
of the amounts, so it does not depend on the entry order.
Validation caps the absolute amounts well below the float limit,
so no total or derived field can overflow.
"""

import math
from collections.abc import Iterable, Mapping

from financial_statements.models.enums import EntryCategory
from financial_statements.schemas.entries import Entry
from financial_statements.schemas.reports import (
    BalanceSheet,
    CashFlow,
    EquityChanges,
    IncomeStatement,
)

BALANCE_SHEET_FIELDS = {
    EntryCategory.ASSET: "assets",
    EntryCategory.LIABILITY: "liabilities",
    EntryCategory.EQUITY: "equity",
}

INCOME_STATEMENT_FIELDS = {
    EntryCategory.REVENUE: "revenue",
    EntryCategory.EXPENSE: "expense",
}

EQUITY_CHANGES_FIELDS = {
    EntryCategory.CONTRIBUTION: "contributions",
    EntryCategory.WITHDRAWAL: "withdrawals",
    EntryCategory.RETAINED_EARNINGS: "retained_earnings",
}

CASH_FLOW_FIELDS = {
    EntryCategory.OPERATING: "operating",
    EntryCategory.INVESTING: "investing",
    EntryCategory.FINANCING: "financing",
}


def _sum_by_category(
    entries: Iterable[Entry] | None,
    fields: Mapping[EntryCategory, str],
) -> dict[str, float]:
    """Single pass over the entries, one bucket per field."""
    buckets: dict[str, list[float]] = {name: [] for name in fields.values()}
    for entry in entries or ():
        name = fields.get(entry.category)
        if name is not None:
            buckets[name].append(entry.amount)
    return {name: math.fsum(amounts) for name, amounts in buckets.items()}


def reduce_balance_sheet(entries: Iterable[Entry] | None) -> BalanceSheet:
    totals = _sum_by_category(entries, BALANCE_SHEET_FIELDS)
    return BalanceSheet(
        **totals,
        balance=totals["assets"] - (totals["liabilities"] + totals["equity"]),
    )


def reduce_income_statement(entries: Iterable[Entry] | None) -> IncomeStatement:
    totals = _sum_by_category(entries, INCOME_STATEMENT_FIELDS)
    return IncomeStatement(
        **totals,
        net_income=totals["revenue"] - totals["expense"],
    )


def reduce_equity_changes(entries: Iterable[Entry] | None) -> EquityChanges:
    totals = _sum_by_category(entries, EQUITY_CHANGES_FIELDS)
    return EquityChanges(
        **totals,
        ending_equity=(
            totals["contributions"]
            - totals["withdrawals"]
            + totals["retained_earnings"]
        ),
    )


def reduce_cash_flow(entries: Iterable[Entry] | None) -> CashFlow:
    totals = _sum_by_category(entries, CASH_FLOW_FIELDS)
    return CashFlow(
        **totals,
        net_cash_flow=math.fsum(totals.values()),
    )
