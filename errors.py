"""
Exceptions raised by SalesTracker core operations.
All of them are recoverable and meant to be shown to the user.
"""
from __future__ import annotations


class SalesTrackerError(Exception):
    """Base class for all SalesTracker errors"""


class ValidationError(SalesTrackerError):
    """Missing or invalid field; the collection is left unmodified"""


class DuplicatePartyError(ValidationError):
    """A party with the same case-insensitive name already exists"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Party already exists: {name}")


class TransactionNotFoundError(SalesTrackerError):
    """No transaction with the given id"""

    def __init__(self, txn_id: str):
        self.txn_id = txn_id
        super().__init__(f"Transaction not found: {txn_id}")


class ParseError(SalesTrackerError):
    """Malformed or empty input file; nothing from it is applied"""


class EmptyInputWarning(SalesTrackerError):
    """Calculation requested with no transactions"""

    def __init__(self, message: str = "No transactions to calculate"):
        super().__init__(message)
