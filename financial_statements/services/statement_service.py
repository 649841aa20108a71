"""
Statement service — builds all four reports from one entry list.

The request is all-or-nothing: either every entry validates and
all four reports come back, or the first validation error is
raised and no report is computed. Reports whose categories never
appear are still returned, with every field at zero.
"""

import logging
from typing import Any

from financial_statements.exceptions import EntryValidationError, MissingEntryList
from financial_statements.schemas.reports import FinancialStatements
from financial_statements.services.reducers import (
    reduce_balance_sheet,
    reduce_cash_flow,
    reduce_equity_changes,
    reduce_income_statement,
)
from financial_statements.services.validation import validate_entries

logger = logging.getLogger(__name__)


def generate_statements(raw_entries: Any) -> FinancialStatements:
    """
    Validate the entries, then run the four reducers over them.

    Raises MissingEntryList if raw_entries is not a list, or the
    first EntryValidationError found in the list.
    """
    if not isinstance(raw_entries, list):
        logger.info("Rejected request: entry list missing or not a list")
        raise MissingEntryList()

    try:
        entries = validate_entries(raw_entries)
    except EntryValidationError as e:
        logger.info("Rejected entries: %s", e)
        raise

    statements = FinancialStatements(
        balance_sheet=reduce_balance_sheet(entries),
        income_statement=reduce_income_statement(entries),
        equity_changes=reduce_equity_changes(entries),
        cash_flow=reduce_cash_flow(entries),
    )
    logger.debug("Generated statements from %d entries", len(entries))
    return statements
