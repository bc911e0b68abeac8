"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep the flat text file as the default backend
2. Use in-memory storage for testing
3. Keep tracker logic decoupled from the file format

The interface is intentionally simple. The tracker reads everything once
at startup and writes everything once at the end.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from expense_tracker.models.expense import Expense


class ExpenseStorageInterface(ABC):
    """
    Abstract interface for expense storage operations.

    Any storage implementation must implement these methods.
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable description of where expenses are stored."""
        pass

    @abstractmethod
    def exists(self) -> bool:
        """
        Check whether previously saved expenses are available.

        Returns:
            False if nothing has ever been saved here
        """
        pass

    @abstractmethod
    def load(self) -> list[Expense]:
        """
        Load all stored expenses in their saved order.

        Returns:
            The stored expenses (empty if nothing is stored)
        """
        pass

    @abstractmethod
    def save(self, expenses: Sequence[Expense]) -> int:
        """
        Replace the stored expenses.

        Args:
            expenses: All expenses, in insertion order

        Returns:
            Number of expenses written

        Raises:
            StorageError: If the write fails
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass
