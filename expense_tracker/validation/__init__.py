"""Input validation package."""

from expense_tracker.validation.validator import (
    EMPTY_CATEGORY_MESSAGE,
    INVALID_AMOUNT_MESSAGE,
    NEGATIVE_AMOUNT_MESSAGE,
    TOO_LARGE_AMOUNT_MESSAGE,
    ExpenseValidator,
)

__all__ = [
    "EMPTY_CATEGORY_MESSAGE",
    "INVALID_AMOUNT_MESSAGE",
    "NEGATIVE_AMOUNT_MESSAGE",
    "TOO_LARGE_AMOUNT_MESSAGE",
    "ExpenseValidator",
]
