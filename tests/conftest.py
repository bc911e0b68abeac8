"""Shared fixtures: a captured rich console and isolated settings."""

import io
from decimal import Decimal

import pytest
from rich.console import Console

from expense_tracker.config import TrackerSettings
from expense_tracker.models import Expense
from expense_tracker.services.storage import InMemoryExpenseStorage
from expense_tracker.tracker import ExpenseTracker


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output) -> Console:
    return Console(
        file=output,
        width=120,
        color_system=None,
        highlight=False,
        soft_wrap=True,
    )


@pytest.fixture
def settings() -> TrackerSettings:
    return TrackerSettings(_env_file=None)


@pytest.fixture
def make_tracker(console, settings):
    """Build a tracker over in-memory storage seeded with (category, amount) pairs."""
    def _make(pairs=None, **kwargs) -> ExpenseTracker:
        expenses = None
        if pairs is not None:
            expenses = [
                Expense(category=category, amount=Decimal(str(amount)))
                for category, amount in pairs
            ]
        storage = kwargs.pop("storage", None) or InMemoryExpenseStorage(expenses)
        kwargs.setdefault("console", console)
        kwargs.setdefault("settings", settings)
        return ExpenseTracker(storage, **kwargs)
    return _make
