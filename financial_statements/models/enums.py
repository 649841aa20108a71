"""
Category taxonomy for accounting entries.

Every entry submitted to the service is tagged with exactly one
of these categories. The set is fixed; it never changes at runtime.
"""

import enum


# Labels used by the first version of the API. They still resolve
# to the matching category so older clients keep working.
LEGACY_LABELS = {
    "activo": "asset",
    "pasivo": "liability",
    "capital": "equity",
    "ingreso": "revenue",
    "gasto": "expense",
    "aportacion": "contribution",
    "retiro": "withdrawal",
    "utilidad": "retainedEarnings",
    "operacion": "operating",
    "inversion": "investing",
    "financiamiento": "financing",
}


class EntryCategory(str, enum.Enum):
    """The eleven recognised entry categories."""
    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    REVENUE = "revenue"
    EXPENSE = "expense"
    CONTRIBUTION = "contribution"
    WITHDRAWAL = "withdrawal"
    RETAINED_EARNINGS = "retainedEarnings"
    OPERATING = "operating"
    INVESTING = "investing"
    FINANCING = "financing"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str) and value in LEGACY_LABELS:
            return cls(LEGACY_LABELS[value])
        return None

    @property
    def non_negative(self) -> bool:
        """True when entries of this category may not carry a negative amount."""
        return self in NON_NEGATIVE_CATEGORIES


NON_NEGATIVE_CATEGORIES = frozenset({
    EntryCategory.ASSET,
    EntryCategory.LIABILITY,
    EntryCategory.CONTRIBUTION,
})
