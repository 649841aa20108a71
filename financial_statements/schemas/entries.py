"""
Pydantic schemas for accounting entries.

An Entry is only ever built by the validator, after the raw
payload has passed every rule, so the rest of the service can
trust its category and amount.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, Field

from financial_statements.models.enums import EntryCategory

# Largest magnitude accepted for one amount, and for the sum of all
# amounts in a request. Far enough below the float limit that any
# report total or derived field stays finite.
MAX_AMOUNT = 1e300


class Entry(BaseModel):
    """A single categorised amount. Immutable once built."""
    category: EntryCategory
    amount: float = Field(allow_inf_nan=False, ge=-MAX_AMOUNT, le=MAX_AMOUNT)

    model_config = {"frozen": True}


class StatementsRequest(BaseModel):
    """
    Body of the statements endpoint.

    The entry list is left untyped on purpose: the service decides
    whether it is a list and whether each entry is well formed, so
    that every rejection carries the same error shape. Older clients
    send the list under "asientos".
    """
    entries: Any = Field(
        default=None,
        validation_alias=AliasChoices("entries", "asientos"),
    )
