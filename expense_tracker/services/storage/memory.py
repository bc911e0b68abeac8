"""In-memory storage, used by tests and when embedding the tracker."""

from collections.abc import Iterable, Sequence
from typing import Optional

from expense_tracker.models.expense import Expense
from expense_tracker.services.storage.interface import ExpenseStorageInterface


class InMemoryExpenseStorage(ExpenseStorageInterface):
    """Keeps the saved expenses in a list. `None` means never saved."""

    def __init__(self, expenses: Optional[Iterable[Expense]] = None):
        self._expenses: Optional[list[Expense]] = (
            list(expenses) if expenses is not None else None
        )
        self.save_count = 0

    @property
    def location(self) -> str:
        return "memory"

    @property
    def saved(self) -> list[Expense]:
        return list(self._expenses or [])

    def exists(self) -> bool:
        return self._expenses is not None

    def load(self) -> list[Expense]:
        return list(self._expenses or [])

    def save(self, expenses: Sequence[Expense]) -> int:
        self._expenses = list(expenses)
        self.save_count += 1
        return len(self._expenses)
