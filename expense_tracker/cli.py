"""
Terminal Frontend for Expense Tracker

The interactive prompt loop a user works in:
1. Enter a category, then its amount -> expense recorded
2. SEARCH -> look up a category, loop continues
3. DONE (or end of input) -> list everything, print the total, save

Any validation error ends the session immediately, and nothing entered
in that session is saved.
"""

import argparse
import logging
from pathlib import Path
from typing import Optional, TextIO

from rich.console import Console

from expense_tracker import __version__
from expense_tracker.audit import AuditLogger, configure_logging
from expense_tracker.config import get_settings
from expense_tracker.errors import ExpenseTrackerError
from expense_tracker.services.storage import FlatFileExpenseStorage, StorageError
from expense_tracker.tracker import ExpenseTracker, create_console


DONE_COMMAND = "DONE"
SEARCH_COMMAND = "SEARCH"

INSTRUCTIONS = (
    "Personal Expense Tracker to keep you organized and well-balanced!\n"
    "Log your expenses by categorizing them and adding the amount. "
    f"Type '{DONE_COMMAND}' when ready for a summary.\n"
)
CATEGORY_PROMPT = (
    f"\nEnter an expense category (or type '{SEARCH_COMMAND}' to look up a "
    f"category. Otherwise '{DONE_COMMAND}' to finish): "
)
SEARCH_PROMPT = "Enter category to search: "
FAREWELL = "\nGreat job on staying on top of your finances!"

EXIT_OK = 0
EXIT_ABORTED = 1
EXIT_INTERRUPTED = 130


class ExpenseSession:
    """
    One run of the interactive prompt loop.

    Reads from `stream` when given (tests, piped input), otherwise from
    the terminal.
    """

    def __init__(
        self,
        tracker: ExpenseTracker,
        console: Console,
        stream: Optional[TextIO] = None,
    ):
        self._tracker = tracker
        self._console = console
        self._stream = stream

    def _ask(self, prompt: str) -> str:
        line = self._console.input(prompt, markup=False, stream=self._stream)
        # readline() signals end of input with an empty string
        if self._stream is not None and not line:
            raise EOFError
        return line.strip()

    def collect(self) -> None:
        """Prompt for expenses until DONE or end of input."""
        while True:
            try:
                category = self._ask(CATEGORY_PROMPT)
            except EOFError:
                self._console.print()
                return

            if category == DONE_COMMAND:
                return
            if not category:
                continue

            if category == SEARCH_COMMAND:
                try:
                    search_category = self._ask(SEARCH_PROMPT)
                except EOFError:
                    self._console.print()
                    return
                self._tracker.search_expense(search_category)
                continue

            amount_prompt = (
                f"Enter the amount spent on {category}: "
                f"{self._tracker.currency_symbol}"
            )
            try:
                raw_amount = self._ask(amount_prompt)
            except EOFError:
                raw_amount = ""
            self._tracker.add_expense(category, raw_amount)

    def run(self) -> int:
        """
        Run the session to completion.

        Returns:
            Process exit status
        """
        try:
            self.collect()
            self._tracker.display_expenses()
            self._tracker.calculate_total()
            self._tracker.display_category_breakdown()
        except ExpenseTrackerError as e:
            self._console.print(str(e), style="bold red", markup=False)
            self._tracker.audit_logger.log_session_aborted(
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return EXIT_ABORTED

        try:
            self._tracker.save()
        except StorageError as e:
            self._console.print(f"Error: {e}", style="bold red", markup=False)
            return EXIT_ABORTED

        self._console.print(FAREWELL, markup=False)
        return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="expense-tracker",
        description="Log expenses by category and keep a running total.",
    )
    parser.add_argument(
        "-f", "--file",
        type=Path,
        default=None,
        help="expense file to load and save (default: $EXPENSE_TRACKER_DATA_FILE "
             "or expenses.txt)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="write debug logs to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(
    argv: Optional[list[str]] = None,
    stream: Optional[TextIO] = None,
    console: Optional[Console] = None,
) -> int:
    """Command line entry point."""
    args = build_parser().parse_args(argv)

    settings = get_settings()
    if args.file is not None:
        settings = settings.model_copy(update={"data_file": args.file})

    configure_logging(
        logging.DEBUG if args.verbose else settings.effective_log_level
    )

    console = console or create_console()
    console.print(INSTRUCTIONS, markup=False)

    try:
        tracker = ExpenseTracker(
            FlatFileExpenseStorage(settings.data_file),
            console=console,
            audit_logger=AuditLogger(),
            settings=settings,
        )
        return ExpenseSession(tracker, console, stream=stream).run()
    except StorageError as e:
        console.print(f"Error: {e}", style="bold red", markup=False)
        return EXIT_ABORTED
    except KeyboardInterrupt:
        console.print("\nInterrupted. Nothing was saved.", markup=False)
        return EXIT_INTERRUPTED
