"""
Domain exceptions for expenses app.
"""


class ExpenseServiceError(Exception):
    """Base exception for expense service errors."""
    pass


class InvalidExpenseError(ExpenseServiceError):
    """Raised when an expense has no type or a negative amount or GST."""
    pass
