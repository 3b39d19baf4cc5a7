"""
Domain exceptions for bills app.

Service-level errors derive from BillServiceError; views turn them into
400 responses.
"""


class BillServiceError(Exception):
    """Base exception for bill service errors."""
    pass


class EmptyBillError(BillServiceError):
    """Raised when a bill is saved without any items."""
    pass


class InvalidBillItemError(BillServiceError):
    """Raised when an item lacks a metal or has an unusable rate or weight."""
    pass


class BillAmountTooLargeError(BillServiceError):
    """Raised when a line amount or bill total does not fit the money columns."""
    pass


class BillNumberConflictError(BillServiceError):
    """Raised when no free bill number could be claimed."""
    pass
