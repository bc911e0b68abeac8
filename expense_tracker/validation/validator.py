"""
Expense Input Validation

DESIGN DECISION: Raw user input is validated before an Expense is built.
The Expense model enforces the same rules again, but the validator owns the
messages the user sees.

IMPORTANT: Validation NEVER silently fixes issues.
An amount like "12abc" is rejected, not truncated to 12.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional

from expense_tracker.audit.logger import get_logger
from expense_tracker.config import TrackerSettings, get_settings
from expense_tracker.errors import InvalidInputError, OutOfRangeError
from expense_tracker.models.expense import AMOUNT_CEILING


INVALID_AMOUNT_MESSAGE = (
    "Error: Invalid input. Please enter a numeric value for the amount."
)
NEGATIVE_AMOUNT_MESSAGE = "Error: Expense amount cannot be negative."
TOO_LARGE_AMOUNT_MESSAGE = "Error: Expense amount is too large."
EMPTY_CATEGORY_MESSAGE = "Error: Invalid input. Category name cannot be empty."

MAX_CATEGORY_LENGTH = 200


logger = get_logger(__name__)


class ExpenseValidator:
    """Turns raw category and amount strings into validated values."""

    def __init__(self, settings: Optional[TrackerSettings] = None):
        self._settings = settings or get_settings()

    def parse_amount(self, raw_amount: str) -> Decimal:
        """
        Parse a user-entered amount.

        Raises:
            InvalidInputError: Not a finite decimal number
            OutOfRangeError: Negative, too large, or above the configured maximum
        """
        text = (raw_amount or "").strip()
        if not text:
            raise InvalidInputError(INVALID_AMOUNT_MESSAGE)

        try:
            amount = Decimal(text)
        except InvalidOperation:
            raise InvalidInputError(INVALID_AMOUNT_MESSAGE) from None

        if not amount.is_finite():
            raise InvalidInputError(INVALID_AMOUNT_MESSAGE)

        if amount < 0:
            raise OutOfRangeError(NEGATIVE_AMOUNT_MESSAGE)

        # Must hold before the amount is ever formatted
        if amount >= AMOUNT_CEILING:
            raise OutOfRangeError(TOO_LARGE_AMOUNT_MESSAGE)

        max_amount = self._settings.max_amount
        if max_amount is not None and amount > max_amount:
            raise OutOfRangeError(
                f"Error: Expense amount cannot exceed "
                f"{self._settings.currency_symbol}{max_amount:,.2f}."
            )

        # "-0" parses as a negative zero
        if amount.is_zero():
            amount = amount.copy_abs()

        return amount

    def validate_category(self, category: str) -> str:
        """
        Normalise a category name.

        Inner whitespace is allowed but the flat file cannot store it,
        so the record will not survive a reload.
        """
        name = (category or "").strip()
        if not name:
            raise InvalidInputError(EMPTY_CATEGORY_MESSAGE)
        if len(name) > MAX_CATEGORY_LENGTH:
            raise InvalidInputError(
                f"Error: Invalid input. Category name cannot be longer than "
                f"{MAX_CATEGORY_LENGTH} characters."
            )

        if any(ch.isspace() for ch in name):
            logger.warning(
                "category_not_persistable",
                category=name,
                reason="whitespace cannot be stored in the expense file",
            )

        return name
