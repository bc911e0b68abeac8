"""Tests for the flat file and in-memory storage backends."""

import pytest
from decimal import Decimal

from expense_tracker.models import Expense
from expense_tracker.services.storage import (
    FlatFileExpenseStorage,
    InMemoryExpenseStorage,
    StorageError,
)


def pairs(expenses):
    return [(e.category, e.amount) for e in expenses]


class TestFlatFileStorage:
    """Tests for FlatFileExpenseStorage."""

    def test_missing_file_loads_empty(self, tmp_path):
        storage = FlatFileExpenseStorage(tmp_path / "nope.txt")
        assert storage.exists() is False
        assert storage.load() == []

    def test_save_writes_one_line_per_expense(self, tmp_path):
        path = tmp_path / "expenses.txt"
        storage = FlatFileExpenseStorage(path)

        count = storage.save([
            Expense(category="food", amount=Decimal("10")),
            Expense(category="gas", amount=Decimal("5.5")),
            Expense(category="food", amount=Decimal("2.00")),
        ])

        assert count == 3
        assert path.read_text() == "food 10\ngas 5.5\nfood 2.00\n"

    def test_save_then_load_keeps_order(self, tmp_path):
        storage = FlatFileExpenseStorage(tmp_path / "expenses.txt")
        expenses = [
            Expense(category="rent", amount=Decimal("800")),
            Expense(category="food", amount=Decimal("0.1")),
            Expense(category="rent", amount=Decimal("12.345")),
        ]

        storage.save(expenses)

        assert pairs(storage.load()) == pairs(expenses)

    def test_save_overwrites(self, tmp_path):
        path = tmp_path / "expenses.txt"
        path.write_text("old 1\nold 2\nold 3\n")

        FlatFileExpenseStorage(path).save([Expense(category="new", amount=Decimal("4"))])

        assert path.read_text() == "new 4\n"

    def test_save_empty_list_truncates_file(self, tmp_path):
        path = tmp_path / "expenses.txt"
        path.write_text("old 1\n")

        FlatFileExpenseStorage(path).save([])

        assert path.read_text() == ""

    def test_malformed_amount_truncates_silently(self, tmp_path):
        path = tmp_path / "expenses.txt"
        path.write_text("food 10\ngas abc\nrent 5\n")

        assert pairs(FlatFileExpenseStorage(path).load()) == [("food", Decimal("10"))]

    def test_dangling_category_is_dropped(self, tmp_path):
        path = tmp_path / "expenses.txt"
        path.write_text("food 10\ngas\n")

        assert pairs(FlatFileExpenseStorage(path).load()) == [("food", Decimal("10"))]

    @pytest.mark.parametrize("bad", ["-5", "nan", "inf", "1e999999999"])
    def test_unacceptable_amount_truncates(self, tmp_path, bad):
        path = tmp_path / "expenses.txt"
        path.write_text(f"food 10\ngas {bad}\nrent 5\n")

        assert len(FlatFileExpenseStorage(path).load()) == 1

    def test_reading_is_token_based(self, tmp_path):
        path = tmp_path / "expenses.txt"
        path.write_text("food 10 gas\n5.5\n\n   rent    700\n")

        assert pairs(FlatFileExpenseStorage(path).load()) == [
            ("food", Decimal("10")),
            ("gas", Decimal("5.5")),
            ("rent", Decimal("700")),
        ]

    def test_whitespace_category_does_not_round_trip(self, tmp_path):
        """Known limitation of the file format: no escaping."""
        storage = FlatFileExpenseStorage(tmp_path / "expenses.txt")
        storage.save([
            Expense(category="food", amount=Decimal("1")),
            Expense(category="eating out", amount=Decimal("20")),
        ])

        assert pairs(storage.load()) == [("food", Decimal("1"))]

    def test_empty_file_exists_but_is_empty(self, tmp_path):
        path = tmp_path / "expenses.txt"
        path.write_text("")
        storage = FlatFileExpenseStorage(path)

        assert storage.exists() is True
        assert storage.load() == []

    def test_undecodable_file_raises_storage_error(self, tmp_path):
        path = tmp_path / "expenses.txt"
        path.write_bytes(b"food \xff\xfe\n")

        with pytest.raises(StorageError, match="Could not read"):
            FlatFileExpenseStorage(path).load()

    def test_unwritable_path_raises_storage_error(self, tmp_path):
        storage = FlatFileExpenseStorage(tmp_path / "missing-dir" / "expenses.txt")

        with pytest.raises(StorageError, match="Could not write"):
            storage.save([Expense(category="food", amount=Decimal("1"))])

    def test_location_is_the_path(self, tmp_path):
        path = tmp_path / "expenses.txt"
        assert FlatFileExpenseStorage(path).location == str(path)
        assert FlatFileExpenseStorage(str(path)).path == path


class TestInMemoryStorage:
    """Tests for InMemoryExpenseStorage."""

    def test_never_saved(self):
        storage = InMemoryExpenseStorage()
        assert storage.exists() is False
        assert storage.load() == []

    def test_seeded(self):
        expense = Expense(category="food", amount=Decimal("1"))
        storage = InMemoryExpenseStorage([expense])
        assert storage.exists() is True
        assert storage.load() == [expense]

    def test_save_replaces_contents(self):
        storage = InMemoryExpenseStorage([Expense(category="old", amount=Decimal("1"))])
        new = [Expense(category="new", amount=Decimal("2"))]

        assert storage.save(new) == 1
        assert storage.saved == new
        assert storage.save_count == 1
