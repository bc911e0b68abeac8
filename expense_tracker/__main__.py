"""Allow ``python -m expense_tracker``."""

import sys

from expense_tracker.cli import main

if __name__ == "__main__":
    sys.exit(main())
