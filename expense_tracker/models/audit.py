"""
Audit Models for Expense Tracker

Every significant action in a session is logged as a structured event.
This provides:
1. Traceability of what was entered and what was rejected
2. Debugging information when a session aborts

DESIGN DECISION: Events are append-only and never change after creation.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


DESCRIPTION_TEXT_LIMIT = 80


def _clip(text: str) -> str:
    """Shorten user-supplied text for a description; `details` keeps it whole."""
    if len(text) <= DESCRIPTION_TEXT_LIMIT:
        return text
    return text[:DESCRIPTION_TEXT_LIMIT - 3] + "..."


class AuditEventType(str, Enum):
    """Types of events we audit."""
    # Persistence
    EXPENSES_LOADED = "expenses_loaded"
    EXPENSES_SAVED = "expenses_saved"
    SAVE_FAILED = "save_failed"

    # User entry
    EXPENSE_ADDED = "expense_added"
    EXPENSE_REJECTED = "expense_rejected"

    # Queries
    SEARCH_EXECUTED = "search_executed"
    TOTAL_CALCULATED = "total_calculated"

    # Session
    SESSION_ABORTED = "session_aborted"


class AuditSeverity(str, Enum):
    """Severity level for audit events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class AuditEvent(BaseModel):
    """
    A single audit event.

    This is the core unit of the audit trail.
    """
    model_config = ConfigDict(frozen=True)

    # Identity
    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    # Event classification
    event_type: AuditEventType
    severity: AuditSeverity = AuditSeverity.INFO

    # Correlation - all events of one session share this
    session_id: Optional[UUID] = None

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(default_factory=dict)
    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered directly by user input?"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "session_id": str(self.session_id) if self.session_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.expense_added(
            category="food",
            amount=Decimal("12.50"),
            session_id=session_id,
        )
    """

    @staticmethod
    def expenses_loaded(
        location: str,
        count: int,
        found: bool,
        session_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSES_LOADED,
            session_id=session_id,
            description=f"Loaded {count} expense(s) from {_clip(location)}",
            details={"location": location, "count": count, "found": found},
        )

    @staticmethod
    def expenses_saved(
        location: str,
        count: int,
        session_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSES_SAVED,
            session_id=session_id,
            description=f"Saved {count} expense(s) to {_clip(location)}",
            details={"location": location, "count": count},
        )

    @staticmethod
    def save_failed(
        location: str,
        error_message: str,
        session_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SAVE_FAILED,
            severity=AuditSeverity.ERROR,
            session_id=session_id,
            description=f"Could not save expenses to {_clip(location)}",
            details={"location": location},
            error_message=error_message,
        )

    @staticmethod
    def expense_added(
        category: str,
        amount: Decimal,
        session_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_ADDED,
            session_id=session_id,
            description=f"Expense added in category '{_clip(category)}'",
            details={"category": category, "amount": str(amount)},
            is_user_action=True,
        )

    @staticmethod
    def expense_rejected(
        category: str,
        raw_amount: str,
        reason: str,
        session_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.EXPENSE_REJECTED,
            severity=AuditSeverity.WARNING,
            session_id=session_id,
            description=f"Expense rejected for category '{_clip(category)}'",
            details={"category": category, "raw_amount": raw_amount},
            error_message=reason,
            is_user_action=True,
        )

    @staticmethod
    def search_executed(
        category: str,
        result_count: int,
        session_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SEARCH_EXECUTED,
            session_id=session_id,
            description=f"Searched category '{_clip(category)}'",
            details={"category": category, "result_count": result_count},
            is_user_action=True,
        )

    @staticmethod
    def total_calculated(
        total: Decimal,
        count: int,
        session_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.TOTAL_CALCULATED,
            session_id=session_id,
            description="Total spending calculated",
            details={"total": str(total), "count": count},
        )

    @staticmethod
    def session_aborted(
        error_type: str,
        error_message: str,
        session_id: Optional[UUID] = None,
    ) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_ABORTED,
            severity=AuditSeverity.ERROR,
            session_id=session_id,
            description="Session ended without saving",
            details={"error_type": error_type},
            error_message=error_message,
        )
