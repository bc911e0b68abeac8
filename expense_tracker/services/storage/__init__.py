"""
Storage Services Package

Provides the abstract storage interface and its implementations.
The flat text file is the default backend.
"""

from expense_tracker.services.storage.interface import (
    ExpenseStorageInterface,
    StorageError,
)
from expense_tracker.services.storage.flat_file import FlatFileExpenseStorage
from expense_tracker.services.storage.memory import InMemoryExpenseStorage

__all__ = [
    # Interfaces
    "ExpenseStorageInterface",
    # Exceptions
    "StorageError",
    # Implementations
    "FlatFileExpenseStorage",
    "InMemoryExpenseStorage",
]
