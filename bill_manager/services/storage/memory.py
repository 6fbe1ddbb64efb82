"""
In-Memory Storage

Bills and audit events are held in process memory for the length of a
session and discarded on exit. Nothing is written anywhere.

The bill store hands out copies, never the records it owns, so callers
can't change a stored bill behind the store's back.
"""

from typing import Optional
from uuid import UUID

from bill_manager.models.audit import AuditEvent
from bill_manager.models.bill import Bill
from bill_manager.services.storage.interface import (
    AuditStorageInterface,
    BillStorageInterface,
)


class InMemoryBillStorage(BillStorageInterface):
    """Bill store backed by a dict keyed on bill name."""

    def __init__(self):
        self._bills: dict[str, Bill] = {}

    def add_bill(self, bill: Bill) -> None:
        # Last write wins
        self._bills[bill.name] = bill.model_copy()

    def get_bill(self, name: str) -> Optional[Bill]:
        bill = self._bills.get(name)
        return bill.model_copy() if bill else None

    def list_bills(self) -> list[Bill]:
        return [bill.model_copy() for bill in self._bills.values()]

    def remove_bill(self, name: str) -> bool:
        return self._bills.pop(name, None) is not None

    def update_bill(self, name: str, amount: float) -> bool:
        bill = self._bills.get(name)
        if bill is None:
            return False
        self._bills[name] = bill.model_copy(update={"amount": amount})
        return True

    def total(self) -> float:
        return float(sum(bill.amount for bill in self._bills.values()))

    def __len__(self) -> int:
        return len(self._bills)

    def __contains__(self, name: object) -> bool:
        return name in self._bills


class InMemoryAuditStorage(AuditStorageInterface):
    """Append-only audit trail held in a list."""

    def __init__(self):
        self._events: list[AuditEvent] = []

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        return [e for e in self._events if e.correlation_id == correlation_id]

    def get_events_by_entity(
        self,
        entity_type: str,
        entity_name: str,
    ) -> list[AuditEvent]:
        return [
            e for e in self._events
            if e.entity_type == entity_type and e.entity_name == entity_name
        ]

    def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        return list(reversed(self._events))[:limit]

    def __len__(self) -> int:
        return len(self._events)
