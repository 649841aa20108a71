"""
Domain enumerations.

The service keeps no database, so the only domain model shared
across layers is the category taxonomy.
"""

from financial_statements.models.enums import (
    EntryCategory,
    NON_NEGATIVE_CATEGORIES,
)

__all__ = [
    "EntryCategory",
    "NON_NEGATIVE_CATEGORIES",
]
