"""
Tracker Errors

Every error raised by the tracker carries the message shown to the user.
Any of them ends the current session without saving.
"""


class ExpenseTrackerError(Exception):
    """Base exception for expense tracker operations."""
    pass


class InvalidInputError(ExpenseTrackerError):
    """Input could not be understood (e.g. a non-numeric amount)."""
    pass


class OutOfRangeError(ExpenseTrackerError):
    """A numeric amount outside the accepted range."""
    pass


class EmptyStateError(ExpenseTrackerError):
    """Operation needs at least one recorded expense."""
    pass
