"""
Audit Models for Bill Manager

Every action the user takes in a session is recorded as an audit event.
This gives:
1. A trace of what happened to each bill during the session
2. Debugging information when input goes wrong
3. A way to reconstruct the session from the log output

DESIGN DECISION: Audit events are append-only. We never modify or
remove them once recorded.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AuditEventType(str, Enum):
    """
    Types of events we audit.

    Each menu action has its own event type, plus the session lifecycle.
    """
    # Session lifecycle
    SESSION_STARTED = "session_started"
    SESSION_ENDED = "session_ended"

    # Bill changes
    BILL_ADDED = "bill_added"
    BILL_UPDATED = "bill_updated"
    BILL_REMOVED = "bill_removed"
    BILL_NOT_FOUND = "bill_not_found"

    # User input
    ACTION_CANCELLED = "action_cancelled"
    INVALID_AMOUNT = "invalid_amount"

    # System events
    INPUT_STREAM_FAILED = "input_stream_failed"


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
    Every action in the menu creates one of these.
    """

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
    event_type: AuditEventType = Field(
        ...,
        description="Type of event"
    )
    severity: AuditSeverity = Field(
        default=AuditSeverity.INFO,
        description="Event severity"
    )

    # Context - which bill is this about?
    entity_type: Optional[str] = Field(
        default=None,
        description="Type of entity (e.g., 'bill', 'session')"
    )
    entity_name: Optional[str] = Field(
        default=None,
        description="Name of the entity this event relates to"
    )

    # Correlation - one ID per interactive session
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID shared by all events in one session"
    )

    # User-typed names go in entity_name, never in description
    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    error_message: Optional[str] = None

    is_user_action: bool = Field(
        default=False,
        description="Was this triggered by a user action?"
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
            "entity_type": self.entity_type,
            "entity_name": self.entity_name,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
            "error_message": self.error_message,
            "is_user_action": self.is_user_action,
        }


class AuditEventBuilder:
    """
    Helper class to build audit events with common patterns.

    Usage:
        event = AuditEventBuilder.bill_added("Rent", 1200.0, session_id)
        event = AuditEventBuilder.action_cancelled("remove", "name", session_id)
    """

    @staticmethod
    def session_started(correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_STARTED,
            entity_type="session",
            correlation_id=correlation_id,
            description="Bill manager session started",
        )

    @staticmethod
    def session_ended(bill_count: int, correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.SESSION_ENDED,
            entity_type="session",
            correlation_id=correlation_id,
            description=f"Session ended with {bill_count} bill(s) in memory",
            details={"bill_count": bill_count},
            is_user_action=True,
        )

    @staticmethod
    def bill_added(name: str, amount: float, correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BILL_ADDED,
            entity_type="bill",
            entity_name=name,
            correlation_id=correlation_id,
            description="Bill added",
            details={"amount": amount},
            is_user_action=True,
        )

    @staticmethod
    def bill_updated(name: str, amount: float, correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BILL_UPDATED,
            entity_type="bill",
            entity_name=name,
            correlation_id=correlation_id,
            description="Bill amount updated",
            details={"amount": amount},
            is_user_action=True,
        )

    @staticmethod
    def bill_removed(name: str, correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BILL_REMOVED,
            entity_type="bill",
            entity_name=name,
            correlation_id=correlation_id,
            description="Bill removed",
            is_user_action=True,
        )

    @staticmethod
    def bill_not_found(name: str, action: str, correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.BILL_NOT_FOUND,
            severity=AuditSeverity.DEBUG,
            entity_type="bill",
            entity_name=name,
            correlation_id=correlation_id,
            description=f"No bill with that name to {action}",
            details={"action": action},
            is_user_action=True,
        )

    @staticmethod
    def action_cancelled(action: str, field: str, correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.ACTION_CANCELLED,
            correlation_id=correlation_id,
            description=f"{action} cancelled at {field} prompt",
            details={"action": action, "field": field},
            is_user_action=True,
        )

    @staticmethod
    def invalid_amount(raw_input: str, correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INVALID_AMOUNT,
            severity=AuditSeverity.DEBUG,
            correlation_id=correlation_id,
            description="Amount input was not a number",
            details={"raw_input": raw_input},
            is_user_action=True,
        )

    @staticmethod
    def input_stream_failed(error_message: str, correlation_id: UUID) -> AuditEvent:
        return AuditEvent(
            event_type=AuditEventType.INPUT_STREAM_FAILED,
            severity=AuditSeverity.ERROR,
            entity_type="session",
            correlation_id=correlation_id,
            description="Input stream could not be read",
            error_message=error_message,
        )
