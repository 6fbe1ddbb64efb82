"""
Audit Logger

DESIGN DECISION: Every action in the menu is logged.
This provides:
1. Traceability of what happened to each bill
2. Debugging capability when input goes wrong
3. A session history that can be inspected in memory

The audit logger:
- Writes to stderr so log lines never mix with the menu on stdout
- Gracefully handles storage failures (doesn't crash the session)
- Tags every event with the session's correlation ID
"""

import logging
import sys
from typing import Optional, TextIO
from uuid import UUID, uuid4

import structlog

from bill_manager.models.audit import AuditEvent, AuditEventBuilder
from bill_manager.services.storage import AuditStorageInterface


def configure_logging(
    level: int = logging.WARNING,
    json_output: bool = False,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog on top of stdlib logging.

    Args:
        level: Minimum stdlib level that gets through
        json_output: Render JSON lines instead of console text
        stream: Where log lines go. Defaults to stderr.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=stream or sys.stderr,
        level=level,
        force=True,
    )

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

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
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


class AuditLogger:
    """
    Central audit logging service.

    Logs events both to:
    1. Structured local log (for debugging)
    2. Audit storage (for in-session history), when configured
    """

    def __init__(
        self,
        storage: Optional[AuditStorageInterface] = None,
        correlation_id: Optional[UUID] = None,
    ):
        """
        Initialize audit logger.

        Args:
            storage: Storage backend for the audit trail.
                    If None, only logs locally.
            correlation_id: Session ID stamped on every event.
                    A new one is created if not given.
        """
        self._storage = storage
        self._logger = structlog.get_logger("bill_manager.audit")
        self.correlation_id = correlation_id or create_correlation_id()

    @property
    def storage(self) -> Optional[AuditStorageInterface]:
        return self._storage

    def log(self, event: AuditEvent) -> bool:
        """
        Log an audit event.

        Always logs locally. Appends to storage if available.

        Returns True if storage write succeeded (or no storage configured).
        """
        log_dict = event.to_log_dict()

        if event.severity.value == "error":
            self._logger.error("audit_event", **log_dict)
        elif event.severity.value == "warning":
            self._logger.warning("audit_event", **log_dict)
        elif event.severity.value == "debug":
            self._logger.debug("audit_event", **log_dict)
        else:
            self._logger.info("audit_event", **log_dict)

        if self._storage:
            try:
                return self._storage.append_event(event)
            except Exception as e:
                # Log failure but don't raise
                self._logger.error(
                    "audit_storage_failed",
                    error=str(e),
                    event_id=str(event.event_id),
                )
                return False

        return True

    def log_session_started(self) -> None:
        self.log(AuditEventBuilder.session_started(self.correlation_id))

    def log_session_ended(self, bill_count: int) -> None:
        self.log(AuditEventBuilder.session_ended(bill_count, self.correlation_id))

    def log_bill_added(self, name: str, amount: float) -> None:
        """Log a bill being added (or overwritten)."""
        self.log(AuditEventBuilder.bill_added(name, amount, self.correlation_id))

    def log_bill_updated(self, name: str, amount: float) -> None:
        """Log an amount change."""
        self.log(AuditEventBuilder.bill_updated(name, amount, self.correlation_id))

    def log_bill_removed(self, name: str) -> None:
        """Log a bill removal."""
        self.log(AuditEventBuilder.bill_removed(name, self.correlation_id))

    def log_bill_not_found(self, name: str, action: str) -> None:
        """Log an update or removal that named a missing bill."""
        self.log(AuditEventBuilder.bill_not_found(name, action, self.correlation_id))

    def log_action_cancelled(self, action: str, field: str) -> None:
        """Log the user backing out of an action."""
        self.log(AuditEventBuilder.action_cancelled(action, field, self.correlation_id))

    def log_invalid_amount(self, raw_input: str) -> None:
        self.log(AuditEventBuilder.invalid_amount(raw_input, self.correlation_id))

    def log_input_stream_failed(self, error_message: str) -> None:
        self.log(AuditEventBuilder.input_stream_failed(error_message, self.correlation_id))


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking related events.

    One is created per interactive session.
    """
    return uuid4()
