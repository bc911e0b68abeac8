"""
Flat File Storage Implementation

File format: one record per line, "<category> <amount>", amount written in
plain decimal notation. No header, no escaping.

TRADEOFFS:
- Categories containing whitespace cannot be stored
- Reading is token based: the file is split on any whitespace and consumed
  in (category, amount) pairs, so the line layout itself does not matter
- The first bad pair ends the load; everything after it is dropped silently
"""

from collections.abc import Iterator, Sequence
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from expense_tracker.audit.logger import get_logger
from expense_tracker.models.expense import Expense
from expense_tracker.services.storage.interface import (
    ExpenseStorageInterface,
    StorageError,
)


logger = get_logger(__name__)


class FlatFileExpenseStorage(ExpenseStorageInterface):
    """Expense storage backed by a whitespace separated text file."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self._path = Path(path)
        self._encoding = encoding

    @property
    def path(self) -> Path:
        return self._path

    @property
    def location(self) -> str:
        return str(self._path)

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> list[Expense]:
        if not self.exists():
            logger.debug("expense_file_missing", path=self.location)
            return []

        try:
            text = self._path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Could not read {self.location}: {e}") from e

        return list(self._parse(text))

    def _parse(self, text: str) -> Iterator[Expense]:
        tokens = text.split()
        for index in range(0, len(tokens), 2):
            pair = tokens[index:index + 2]
            if len(pair) < 2:
                logger.debug(
                    "expense_file_truncated",
                    path=self.location,
                    token_index=index,
                    reason="dangling category",
                )
                return

            category, raw_amount = pair
            try:
                amount = Decimal(raw_amount)
                if not amount.is_finite():
                    raise InvalidOperation(raw_amount)
                expense = Expense(category=category, amount=amount)
            except (InvalidOperation, ValidationError):
                logger.debug(
                    "expense_file_truncated",
                    path=self.location,
                    token_index=index,
                    reason=f"bad amount {raw_amount!r}",
                )
                return

            yield expense

    def save(self, expenses: Sequence[Expense]) -> int:
        lines = [
            f"{expense.category} {expense.amount}\n"
            for expense in expenses
        ]
        try:
            with self._path.open("w", encoding=self._encoding) as fh:
                fh.writelines(lines)
        except OSError as e:
            raise StorageError(f"Could not write {self.location}: {e}") from e

        logger.debug("expense_file_written", path=self.location, count=len(lines))
        return len(lines)
