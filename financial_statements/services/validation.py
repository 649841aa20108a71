"""
Entry validation.

Runs before any aggregation. Entries are checked in the order
they were submitted and the first rule violation is raised;
nothing after it is inspected.

Rules, per entry:
1. Category is a string and amount is a number
2. Category belongs to the taxonomy
3. Asset, liability and contribution amounts are not negative
4. Amount is finite and no larger than MAX_AMOUNT

Once every entry passes, the absolute amounts together must
also stay within MAX_AMOUNT, so no report total can overflow.
"""

import math
from collections.abc import Iterable, Mapping
from typing import Any

from financial_statements.exceptions import (
    AmountOutOfRange,
    MalformedEntry,
    NegativeAmountNotAllowed,
    TotalOutOfRange,
    UnknownCategory,
)
from financial_statements.models.enums import EntryCategory
from financial_statements.schemas.entries import MAX_AMOUNT, Entry


def _field(raw: Mapping, *names: str) -> Any:
    for name in names:
        if name in raw:
            return raw[name]
    return None


def _is_number(value: Any) -> bool:
    # bool is a subclass of int but is not an amount
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _as_amount(category: str, value: int | float) -> float:
    try:
        amount = float(value)
    except OverflowError:
        # integers too long for a float
        raise AmountOutOfRange(category) from None
    if not math.isfinite(amount) or abs(amount) > MAX_AMOUNT:
        raise AmountOutOfRange(category)
    return amount


def validate_entry(raw: Any) -> Entry:
    """
    Check a single raw entry and return it as an Entry.

    Accepts a mapping spelled either category/amount or the
    legacy tipo/monto. An Entry passes through unchanged.
    """
    if isinstance(raw, Entry):
        return raw
    if not isinstance(raw, Mapping):
        raise MalformedEntry()

    category = _field(raw, "category", "tipo")
    amount = _field(raw, "amount", "monto")

    if not isinstance(category, str) or not _is_number(amount):
        raise MalformedEntry()

    try:
        member = EntryCategory(category)
    except ValueError:
        raise UnknownCategory(category) from None

    if member.non_negative and amount < 0:
        raise NegativeAmountNotAllowed(category)

    return Entry(category=member, amount=_as_amount(category, amount))


def validate_entries(raw_entries: Iterable[Any]) -> list[Entry]:
    """
    Validate every entry, failing on the first bad one.

    Returns the entries as immutable Entry objects, in the
    order they were given. Raises TotalOutOfRange if the
    amounts are individually valid but too large together.
    """
    entries = [validate_entry(raw) for raw in raw_entries]

    try:
        total = math.fsum(abs(entry.amount) for entry in entries)
    except OverflowError:
        total = math.inf
    if total > MAX_AMOUNT:
        raise TotalOutOfRange()

    return entries
