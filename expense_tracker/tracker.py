"""
Expense Tracker

Owns the ordered list of expenses for one session and answers the
questions a user can ask about it.

Flow:
1. Construct -> load previously saved expenses from storage
2. add_expense / search_expense while the session runs
3. display_expenses + calculate_total for the summary
4. save -> overwrite storage with every expense, in entry order

DESIGN DECISION: Every operation both prints its report to the console
and returns its result, so callers and tests never have to scrape output.
"""

from decimal import Decimal
from pathlib import Path
from typing import Optional, Union

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from expense_tracker.audit import AuditLogger
from expense_tracker.config import TrackerSettings, get_settings
from expense_tracker.errors import EmptyStateError, ExpenseTrackerError
from expense_tracker.models.expense import (
    CategoryTotal,
    Expense,
    ExpenseSummary,
    SearchResult,
)
from expense_tracker.services.storage import (
    ExpenseStorageInterface,
    FlatFileExpenseStorage,
    StorageError,
)
from expense_tracker.validation import ExpenseValidator


EMPTY_TOTAL_MESSAGE = (
    "Error: No expenses recorded. Please add expenses before calculating the total."
)


def create_console() -> Console:
    """Console used for all user-facing output."""
    return Console(highlight=False, soft_wrap=True)


class ExpenseTracker:
    """
    In-memory owner of every expense in the session.

    Expenses are kept in insertion order. Categories may repeat; each
    entry stays separate and is listed and summed on its own.
    """

    def __init__(
        self,
        storage: ExpenseStorageInterface,
        console: Optional[Console] = None,
        validator: Optional[ExpenseValidator] = None,
        audit_logger: Optional[AuditLogger] = None,
        settings: Optional[TrackerSettings] = None,
    ):
        """
        Initialize the tracker and load saved expenses.

        Args:
            storage: Where expenses are loaded from and saved to
            console: Output console. Defaults to stdout.
            validator: Input validator. Built from settings if None.
            audit_logger: Event log. A fresh session logger if None.
            settings: Defaults to the cached application settings.
        """
        self._settings = settings or get_settings()
        self._storage = storage
        self._console = console or create_console()
        self._validator = validator or ExpenseValidator(self._settings)
        self._audit = audit_logger or AuditLogger()
        self._expenses: list[Expense] = []

        self.load()

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs) -> "ExpenseTracker":
        """Build a tracker backed by the flat expense file at `path`."""
        return cls(FlatFileExpenseStorage(path), **kwargs)

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def expenses(self) -> tuple[Expense, ...]:
        return tuple(self._expenses)

    @property
    def storage(self) -> ExpenseStorageInterface:
        return self._storage

    @property
    def audit_logger(self) -> AuditLogger:
        return self._audit

    def __len__(self) -> int:
        return len(self._expenses)

    @property
    def currency_symbol(self) -> str:
        return self._settings.currency_symbol

    def format_amount(self, amount: Decimal) -> str:
        return f"{self.currency_symbol}{amount:,.2f}"

    def _say(self, text: str = "", style: Optional[str] = None) -> None:
        # User data goes out verbatim; never interpret it as rich markup
        self._console.print(text, style=style, markup=False)

    def _say_expense(self, expense: Expense) -> None:
        self._say(f"- {expense.category}: {self.format_amount(expense.amount)}")

    # -------------------------------------------------------------------------
    # Persistence
    # -------------------------------------------------------------------------

    def load(self) -> int:
        """
        Replace the in-memory expenses with what storage holds.

        The path is the one bound to the storage (see `from_file`).

        A missing file is not an error; the tracker just starts empty.
        Malformed data at the end of the file is dropped silently.

        Returns:
            Number of expenses loaded
        """
        found = self._storage.exists()
        self._expenses = self._storage.load()

        if found:
            self._say(
                f"Welcome back! Your expenses are stored in "
                f"{self._storage.location}. Continue to add below:"
            )
        else:
            self._say("No existing expense file found. Starting fresh.")

        self._audit.log_expenses_loaded(
            location=self._storage.location,
            count=len(self._expenses),
            found=found,
        )
        return len(self._expenses)

    def save(self) -> int:
        """
        Overwrite storage with every expense, in insertion order.

        Writes to the path bound to the storage (see `from_file`).

        Raises:
            StorageError: If the write fails
        """
        try:
            count = self._storage.save(self._expenses)
        except StorageError as e:
            self._audit.log_save_failed(self._storage.location, str(e))
            raise

        self._say("Expenses saved to file.")
        self._audit.log_expenses_saved(self._storage.location, count)
        return count

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def add_expense(self, category: str, raw_amount: str) -> Expense:
        """
        Validate and record a new expense.

        Raises:
            InvalidInputError: Amount is not numeric (or category is blank)
            OutOfRangeError: Amount is negative or too large
        """
        try:
            name = self._validator.validate_category(category)
            amount = self._validator.parse_amount(raw_amount)
        except ExpenseTrackerError as e:
            self._audit.log_expense_rejected(
                category=category,
                raw_amount=raw_amount,
                reason=str(e),
            )
            raise

        expense = Expense(category=name, amount=amount)
        self._expenses.append(expense)

        self._say(f"Added expense: {expense.category} - {self.format_amount(amount)}")
        self._audit.log_expense_added(expense.category, expense.amount)
        return expense

    def search_expense(self, category: str) -> SearchResult:
        """Print every expense in `category`, in the order they were added."""
        name = category.strip()
        result = SearchResult(
            category=name,
            matches=tuple(e for e in self._expenses if e.category == name),
        )

        for expense in result.matches:
            self._say_expense(expense)
        if not result.found:
            self._say(f"No expenses found in category: {name}")

        self._audit.log_search_executed(name, len(result.matches))
        return result

    def calculate_total(self) -> Decimal:
        """
        Sum every recorded expense.

        Raises:
            EmptyStateError: Nothing has been recorded
        """
        if not self._expenses:
            raise EmptyStateError(EMPTY_TOTAL_MESSAGE)

        total = sum((e.amount for e in self._expenses), Decimal(0))

        self._say()
        self._say(f"Total spending: {self.format_amount(total)}", style="bold")
        self._audit.log_total_calculated(total, len(self._expenses))
        return total

    def display_expenses(self) -> None:
        if not self._expenses:
            self._say("No expenses recorded yet.")
            return

        self._say()
        self._say("Recorded Expenses:", style="bold")
        for expense in self._expenses:
            self._say_expense(expense)

    def totals_by_category(self) -> list[CategoryTotal]:
        """Per-category totals, in the order categories first appeared."""
        totals: dict[str, Decimal] = {}
        counts: dict[str, int] = {}
        for expense in self._expenses:
            totals[expense.category] = (
                totals.get(expense.category, Decimal(0)) + expense.amount
            )
            counts[expense.category] = counts.get(expense.category, 0) + 1

        return [
            CategoryTotal(category=category, total=total, count=counts[category])
            for category, total in totals.items()
        ]

    def summarize(self) -> ExpenseSummary:
        return ExpenseSummary(
            expense_count=len(self._expenses),
            total=sum((e.amount for e in self._expenses), Decimal(0)),
            by_category=tuple(self.totals_by_category()),
        )

    def display_category_breakdown(self) -> list[CategoryTotal]:
        """Render per-category totals as a table. Prints nothing when empty."""
        totals = self.totals_by_category()
        if not totals:
            return totals

        table = Table(
            title="Spending by Category",
            box=box.ROUNDED,
            title_style="bold",
            header_style="bold",
        )
        table.add_column("Category", min_width=12)
        table.add_column("Entries", justify="right")
        table.add_column("Amount", justify="right", min_width=10)

        for row in totals:
            table.add_row(
                escape(row.category),
                str(row.count),
                escape(self.format_amount(row.total)),
            )

        self._say()
        self._console.print(table)
        return totals

