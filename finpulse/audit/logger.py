"""
Audit Logger

DESIGN DECISION: Every change to session or ledger state is logged.
This provides:
1. Traceability of what happened in a session
2. Debugging capability

The audit logger:
- Is synchronous, every event is written inside the handler that caused it
- Never raises into the caller if the log sink fails
- Supports correlation IDs to tie events to one browser session
"""

import logging
from typing import Optional
from uuid import UUID, uuid4

import structlog

from finpulse.models.audit import AuditEvent, AuditEventBuilder, AuditSeverity


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


def configure_logging(level: str = "INFO") -> None:
    """Route structlog output through the stdlib root logger at `level`."""
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)


class AuditLogger:
    """
    Central audit logging service.

    Writes every event to the structured local log.
    """

    def __init__(self, correlation_id: Optional[UUID] = None):
        """
        Initialize audit logger.

        Args:
            correlation_id: Attached to every event this logger writes.
                           A fresh one is created if omitted.
        """
        self._correlation_id = correlation_id or create_correlation_id()
        self._logger = structlog.get_logger("finpulse.audit")

    @property
    def correlation_id(self) -> UUID:
        return self._correlation_id

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Returns True if the event was written.
        """
        if event.correlation_id is None:
            event = event.model_copy(update={"correlation_id": self._correlation_id})

        log_dict = event.to_log_dict()

        try:
            if event.severity == AuditSeverity.ERROR:
                self._logger.error("audit_event", **log_dict)
            elif event.severity == AuditSeverity.WARNING:
                self._logger.warning("audit_event", **log_dict)
            elif event.severity == AuditSeverity.DEBUG:
                self._logger.debug("audit_event", **log_dict)
            else:
                self._logger.info("audit_event", **log_dict)
        except Exception as e:
            # A broken log sink must not take the dashboard down with it
            logging.getLogger(__name__).warning(
                "audit log write failed for %s: %s", event.event_id, e
            )
            return False

        return True

    def log_login_succeeded(self, username: str) -> None:
        """Log a successful login."""
        self.log(AuditEventBuilder.login_succeeded(username=username))

    def log_logged_out(self, username: str) -> None:
        """Log a logout."""
        self.log(AuditEventBuilder.logged_out(username=username))

    def log_expense_added(
        self,
        expense_id: int,
        amount: str,
        category: str,
    ) -> None:
        """Log an added expense."""
        event = AuditEventBuilder.expense_added(
            expense_id=expense_id,
            amount=amount,
            category=category,
        )
        self.log(event)

    def log_expense_deleted(
        self,
        expense_id: int,
        amount: str,
        category: str,
    ) -> None:
        """Log a deleted expense."""
        event = AuditEventBuilder.expense_deleted(
            expense_id=expense_id,
            amount=amount,
            category=category,
        )
        self.log(event)

    def log_expense_add_ignored(self, amount_text: str) -> None:
        """Log an add request that was absorbed as a no-op."""
        self.log(AuditEventBuilder.expense_add_ignored(amount_text=amount_text))

    def log_expense_delete_ignored(self, expense_id: int) -> None:
        """Log a delete request for an id that is not in the ledger."""
        self.log(AuditEventBuilder.expense_delete_ignored(expense_id=expense_id))

    def log_error(
        self,
        error_type: str,
        error_message: str,
        details: Optional[dict] = None,
    ) -> None:
        """Log an error."""
        event = AuditEventBuilder.system_error(
            error_type=error_type,
            error_message=error_message,
            details=details,
        )
        self.log(event)


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    One is created per browser session.
    """
    return uuid4()
