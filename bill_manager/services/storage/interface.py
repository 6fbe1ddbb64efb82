"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep the menu handlers decoupled from how bills are held
2. Swap the in-memory store for something durable later
3. Use the same contract for the audit trail

The interface is intentionally small. Just the operations the menu needs.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from bill_manager.models.audit import AuditEvent
from bill_manager.models.bill import Bill


class BillStorageInterface(ABC):
    """
    Abstract interface for bill storage operations.

    Bills are keyed by name. There is at most one bill per name.
    """

    @abstractmethod
    def add_bill(self, bill: Bill) -> None:
        """
        Insert a bill, overwriting any existing bill with the same name.

        Args:
            bill: The bill to store
        """
        pass

    @abstractmethod
    def get_bill(self, name: str) -> Optional[Bill]:
        """
        Retrieve a bill by name.

        Returns:
            A copy of the bill if found, None otherwise
        """
        pass

    @abstractmethod
    def list_bills(self) -> list[Bill]:
        """
        List every stored bill.

        Returns:
            Copies of all bills, in no particular order
        """
        pass

    @abstractmethod
    def remove_bill(self, name: str) -> bool:
        """
        Remove a bill by name.

        Returns:
            True if a bill existed and was removed
        """
        pass

    @abstractmethod
    def update_bill(self, name: str, amount: float) -> bool:
        """
        Replace the amount of an existing bill.

        Args:
            name: Name of the bill to change
            amount: The new amount

        Returns:
            True if the bill existed and was updated.
            False if there is no such bill (nothing is created).
        """
        pass

    @abstractmethod
    def total(self) -> float:
        """
        Sum of all stored amounts.

        Returns:
            0.0 when the store is empty
        """
        pass


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Returns:
            True if logged successfully
        """
        pass

    @abstractmethod
    def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        """
        Get all events for a correlation ID (one session).

        Returns:
            List of related events in chronological order
        """
        pass

    @abstractmethod
    def get_events_by_entity(
        self,
        entity_type: str,
        entity_name: str,
    ) -> list[AuditEvent]:
        """
        Get all events for a specific entity, e.g. ('bill', 'Rent').

        Returns:
            List of events in chronological order
        """
        pass

    @abstractmethod
    def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        """
        Get the most recent audit events.

        Returns:
            List of recent events (newest first)
        """
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass
