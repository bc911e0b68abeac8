"""Tests for amount and category validation."""

import pytest
from decimal import Decimal

from expense_tracker.config import TrackerSettings
from expense_tracker.errors import InvalidInputError, OutOfRangeError
from expense_tracker.validation import (
    EMPTY_CATEGORY_MESSAGE,
    INVALID_AMOUNT_MESSAGE,
    NEGATIVE_AMOUNT_MESSAGE,
    TOO_LARGE_AMOUNT_MESSAGE,
    ExpenseValidator,
)


@pytest.fixture
def validator(settings) -> ExpenseValidator:
    return ExpenseValidator(settings)


class TestParseAmount:
    """Tests for ExpenseValidator.parse_amount."""

    @pytest.mark.parametrize("raw, expected", [
        ("10", Decimal("10")),
        ("5.5", Decimal("5.5")),
        (" 12.50 ", Decimal("12.50")),
        ("0", Decimal("0")),
        ("1e2", Decimal("100")),
    ])
    def test_valid_amounts(self, validator, raw, expected):
        assert validator.parse_amount(raw) == expected

    def test_keeps_entered_precision(self, validator):
        assert str(validator.parse_amount("12.50")) == "12.50"

    @pytest.mark.parametrize("raw", ["abc", "", "   ", "12abc", "1,000", "nan", "inf", "-inf"])
    def test_non_numeric_is_invalid_input(self, validator, raw):
        with pytest.raises(InvalidInputError) as exc_info:
            validator.parse_amount(raw)
        assert str(exc_info.value) == INVALID_AMOUNT_MESSAGE

    @pytest.mark.parametrize("raw", ["-5", "-0.01"])
    def test_negative_is_out_of_range(self, validator, raw):
        with pytest.raises(OutOfRangeError) as exc_info:
            validator.parse_amount(raw)
        assert str(exc_info.value) == NEGATIVE_AMOUNT_MESSAGE

    def test_negative_zero_is_normalised(self, validator):
        amount = validator.parse_amount("-0")
        assert amount == 0
        assert not amount.is_signed()

    def test_no_limit_by_default(self, validator):
        assert validator.parse_amount("99999999") == Decimal("99999999")

    @pytest.mark.parametrize("raw", ["1e999999999", "1000000000000000", "1E+15", "9e99"])
    def test_huge_amount_is_out_of_range(self, validator, raw):
        with pytest.raises(OutOfRangeError) as exc_info:
            validator.parse_amount(raw)
        assert str(exc_info.value) == TOO_LARGE_AMOUNT_MESSAGE

    def test_largest_accepted_amount(self, validator):
        assert validator.parse_amount("999999999999999.99") == Decimal("999999999999999.99")

    def test_configured_maximum(self):
        validator = ExpenseValidator(
            TrackerSettings(_env_file=None, max_amount=Decimal("100"))
        )
        assert validator.parse_amount("100") == Decimal("100")
        with pytest.raises(OutOfRangeError, match=r"cannot exceed \$100\.00"):
            validator.parse_amount("100.01")


class TestValidateCategory:
    """Tests for ExpenseValidator.validate_category."""

    def test_strips_whitespace(self, validator):
        assert validator.validate_category("  food  ") == "food"

    def test_empty_category_is_invalid(self, validator):
        with pytest.raises(InvalidInputError) as exc_info:
            validator.validate_category("   ")
        assert str(exc_info.value) == EMPTY_CATEGORY_MESSAGE

    def test_overlong_category_is_invalid(self, validator):
        with pytest.raises(InvalidInputError, match="longer than 200"):
            validator.validate_category("x" * 201)

    def test_inner_whitespace_is_accepted(self, validator):
        assert validator.validate_category("eating out") == "eating out"
