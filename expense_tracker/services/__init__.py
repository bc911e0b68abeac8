"""Services package."""

from expense_tracker.services.storage import (
    ExpenseStorageInterface,
    FlatFileExpenseStorage,
    InMemoryExpenseStorage,
    StorageError,
)

__all__ = [
    "ExpenseStorageInterface",
    "FlatFileExpenseStorage",
    "InMemoryExpenseStorage",
    "StorageError",
]
