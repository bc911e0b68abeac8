"""
Data Models Package

This package contains all Pydantic models used by the Expense Tracker.
"""

from expense_tracker.models.expense import (
    AMOUNT_CEILING,
    CategoryTotal,
    Expense,
    ExpenseSummary,
    SearchResult,
)
from expense_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Expense models
    "AMOUNT_CEILING",
    "CategoryTotal",
    "Expense",
    "ExpenseSummary",
    "SearchResult",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
