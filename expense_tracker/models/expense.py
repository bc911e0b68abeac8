"""
Core Data Models for Expense Tracker

These models define the schemas for all data flowing through the tracker.
They are designed to:
1. Enforce type safety at runtime
2. Stay immutable once created
3. Be easy to render and persist

DESIGN DECISION: Amounts are Decimal, never float.
Money typed in by a user should come back out exactly as it went in.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


# Amounts must stay below one quadrillion
AMOUNT_CEILING = Decimal("1000000000000000")


class Expense(BaseModel):
    """
    A single category/amount record.

    Expenses are never edited after creation. Duplicate categories are
    expected; each entry stays its own record.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    category: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Free-text spending category"
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        lt=AMOUNT_CEILING,
        description="Amount spent"
    )


class SearchResult(BaseModel):
    """Result of looking up a category."""
    model_config = ConfigDict(frozen=True)

    category: str
    matches: tuple[Expense, ...] = Field(
        default=(),
        description="Matching expenses in insertion order"
    )

    @property
    def found(self) -> bool:
        """Did any expense match?"""
        return len(self.matches) > 0

    @property
    def total(self) -> Decimal:
        return sum((e.amount for e in self.matches), Decimal(0))


class CategoryTotal(BaseModel):
    """Aggregated spending for one category."""
    model_config = ConfigDict(frozen=True)

    category: str
    total: Decimal = Field(ge=0)
    count: int = Field(ge=1)


class ExpenseSummary(BaseModel):
    """
    Totals over the whole session.

    `by_category` is ordered by the first time each category was seen.
    """
    model_config = ConfigDict(frozen=True)

    expense_count: int = Field(ge=0)
    total: Decimal = Field(ge=0)
    by_category: tuple[CategoryTotal, ...] = ()
