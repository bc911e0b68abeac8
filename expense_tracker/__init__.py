"""
Expense Tracker - Source Package

A small personal expense log for the terminal.

DESIGN PRINCIPLES:
1. Validate before storing, never after
2. Fail early, fail visibly
3. No silent corrections of user input
4. Storage layer is swappable
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Team"
