"""
Client-input errors raised by the service layer.

All of them derive from ValueError, like every other rule
violation the services report. The API layer turns any
FinancialStatementsError into an HTTP 400 response.
"""


class FinancialStatementsError(ValueError):
    """Base class for every rejected request."""


class EntryValidationError(FinancialStatementsError):
    """An entry in the submitted list breaks a validation rule."""


class MalformedEntry(EntryValidationError):
    def __init__(self):
        super().__init__(
            "Each entry must have a category (string) and an amount (number)."
        )


class UnknownCategory(EntryValidationError):
    def __init__(self, category: str):
        self.category = category
        super().__init__(f"Invalid entry category: {category}")


class NegativeAmountNotAllowed(EntryValidationError):
    def __init__(self, category: str):
        self.category = category
        super().__init__(
            f"Amount cannot be negative for category: {category}"
        )


class MissingEntryList(FinancialStatementsError):
    def __init__(self):
        super().__init__("An array of accounting entries is required.")


class MissingReportForExport(FinancialStatementsError):
    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            "One or more financial statements are missing from the "
            f"request: {', '.join(missing)}"
        )


class AmountOutOfRange(EntryValidationError):
    def __init__(self, category: str):
        self.category = category
        super().__init__(
            f"Amount is not a finite number within range for category: {category}"
        )


class TotalOutOfRange(EntryValidationError):
    def __init__(self):
        super().__init__("Entry amounts are too large to add up.")
