"""Business logic services."""

from financial_statements.services.export_service import build_workbook
from financial_statements.services.statement_service import generate_statements
from financial_statements.services.validation import validate_entries

__all__ = ["generate_statements", "validate_entries", "build_workbook"]
