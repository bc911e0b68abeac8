"""
Audit Logger

DESIGN DECISION: Every significant action in a session is logged.
This provides:
1. Traceability of entered and rejected expenses
2. Debugging capability when a session aborts

The audit logger:
- Writes structured JSON lines to stderr, so stdout stays for the user
- Supports a session ID to tie the events of one run together
"""

import logging
import sys
from decimal import Decimal
from typing import Any, Callable, Optional
from uuid import UUID, uuid4

import structlog

from expense_tracker.models.audit import AuditEvent, AuditEventBuilder


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


def get_logger(name: str):
    """Structured logger for a module, using the configuration above."""
    return structlog.get_logger(name)


def configure_logging(level: int = logging.WARNING) -> None:
    """
    Route stdlib logging (and therefore structlog) to stderr.

    structlog renders the JSON itself, so the handler only prints the message.
    """
    logging.basicConfig(
        stream=sys.stderr,
        level=level,
        format="%(message)s",
        force=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    Every event goes to the structured local log at a level matching its
    severity.
    """

    def __init__(self, session_id: Optional[UUID] = None):
        self.session_id = session_id or create_session_id()
        self._logger = get_logger("expense_tracker.audit")

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns False if the event could not be written. Never raises.
        """
        try:
            self._emit(event)
        except Exception as e:
            self._report_failure(event.event_type.value, e)
            return False
        return True

    def _emit(self, event: AuditEvent) -> None:
        log_dict = event.to_log_dict()

        if event.severity.value == "error":
            self._logger.error("audit_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

    def _record(self, build: Callable[..., AuditEvent], **kwargs: Any) -> bool:
        """Build an event and log it; a failure while building is logged too."""
        try:
            event = build(session_id=self.session_id, **kwargs)
        except Exception as e:
            # Log failure but don't raise
            self._report_failure(build.__name__, e)
            return False
        return self.log(event)

    def _report_failure(self, event_name: str, error: Exception) -> None:
        self._logger.error(
            "audit_event_failed",
            audit_event=event_name,
            error=str(error)[:200],
        )

    def log_expenses_loaded(self, location: str, count: int, found: bool) -> None:
        self._record(
            AuditEventBuilder.expenses_loaded,
            location=location,
            count=count,
            found=found,
        )

    def log_expenses_saved(self, location: str, count: int) -> None:
        self._record(
            AuditEventBuilder.expenses_saved,
            location=location,
            count=count,
        )

    def log_save_failed(self, location: str, error_message: str) -> None:
        self._record(
            AuditEventBuilder.save_failed,
            location=location,
            error_message=error_message,
        )

    def log_expense_added(self, category: str, amount: Decimal) -> None:
        self._record(
            AuditEventBuilder.expense_added,
            category=category,
            amount=amount,
        )

    def log_expense_rejected(
        self,
        category: str,
        raw_amount: str,
        reason: str,
    ) -> None:
        self._record(
            AuditEventBuilder.expense_rejected,
            category=category,
            raw_amount=raw_amount,
            reason=reason,
        )

    def log_search_executed(self, category: str, result_count: int) -> None:
        self._record(
            AuditEventBuilder.search_executed,
            category=category,
            result_count=result_count,
        )

    def log_total_calculated(self, total: Decimal, count: int) -> None:
        self._record(
            AuditEventBuilder.total_calculated,
            total=total,
            count=count,
        )

    def log_session_aborted(self, error_type: str, error_message: str) -> None:
        self._record(
            AuditEventBuilder.session_aborted,
            error_type=error_type,
            error_message=error_message,
        )


def create_session_id() -> UUID:
    """
    Create a new session ID for tracking related events.

    One interactive run of the tracker gets one session ID.
    """
    return uuid4()
