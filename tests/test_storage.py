"""Tests for the in-memory bill and audit stores."""

import pytest

from bill_manager.audit import create_correlation_id
from bill_manager.models.audit import AuditEventBuilder
from bill_manager.models.bill import Bill
from bill_manager.services.storage import (
    BillStorageInterface,
    InMemoryAuditStorage,
    InMemoryBillStorage,
)


@pytest.fixture
def bills():
    return InMemoryBillStorage()


class TestInMemoryBillStorage:
    """Tests for InMemoryBillStorage."""

    def test_implements_interface(self, bills):
        assert isinstance(bills, BillStorageInterface)

    def test_starts_empty(self, bills):
        assert bills.list_bills() == []
        assert len(bills) == 0

    def test_add_then_list(self, bills):
        """An added bill shows up in the listing."""
        bills.add_bill(Bill(name="Rent", amount=1200.0))
        assert bills.list_bills() == [Bill(name="Rent", amount=1200.0)]

    def test_add_same_name_overwrites(self, bills):
        """Last write wins; never two entries for one name."""
        bills.add_bill(Bill(name="Rent", amount=1200.0))
        bills.add_bill(Bill(name="Rent", amount=900.0))

        listing = bills.list_bills()
        assert len(listing) == 1
        assert listing[0].amount == 900.0

    def test_list_is_a_snapshot(self, bills):
        """Changing a listed bill doesn't touch the store."""
        bills.add_bill(Bill(name="Rent", amount=1200.0))
        listing = bills.list_bills()
        listing[0].amount = 1.0
        listing.clear()

        assert bills.get_bill("Rent").amount == 1200.0

    def test_added_bill_is_copied(self, bills):
        bill = Bill(name="Rent", amount=1200.0)
        bills.add_bill(bill)
        bill.amount = 5.0
        assert bills.get_bill("Rent").amount == 1200.0

    def test_remove_present(self, bills):
        bills.add_bill(Bill(name="Rent", amount=1200.0))
        assert bills.remove_bill("Rent") is True
        assert "Rent" not in bills

    def test_remove_absent_leaves_store_unchanged(self, bills):
        bills.add_bill(Bill(name="Rent", amount=1200.0))
        assert bills.remove_bill("Gym") is False
        assert bills.list_bills() == [Bill(name="Rent", amount=1200.0)]

    def test_update_present_changes_only_amount(self, bills):
        bills.add_bill(Bill(name="Rent", amount=1200.0))
        assert bills.update_bill("Rent", 1350.0) is True

        bill = bills.get_bill("Rent")
        assert bill.name == "Rent"
        assert bill.amount == 1350.0

    def test_update_absent_creates_nothing(self, bills):
        assert bills.update_bill("Gym", 40.0) is False
        assert bills.list_bills() == []
        assert bills.get_bill("Gym") is None

    def test_total(self, bills):
        bills.add_bill(Bill(name="Rent", amount=1200.0))
        bills.add_bill(Bill(name="Power", amount=80.5))
        assert bills.total() == pytest.approx(1280.5)

    def test_total_empty(self, bills):
        assert bills.total() == 0.0

    def test_end_to_end(self, bills):
        """Add, update, remove, remove again."""
        bills.add_bill(Bill(name="Rent", amount=1200.0))
        assert bills.list_bills() == [Bill(name="Rent", amount=1200.0)]

        assert bills.update_bill("Rent", 1350.0) is True
        assert bills.list_bills() == [Bill(name="Rent", amount=1350.0)]

        assert bills.remove_bill("Rent") is True
        assert bills.list_bills() == []

        assert bills.remove_bill("Rent") is False


class TestInMemoryAuditStorage:
    """Tests for InMemoryAuditStorage."""

    def test_append_and_query(self):
        storage = InMemoryAuditStorage()
        session = create_correlation_id()
        other = create_correlation_id()

        storage.append_event(AuditEventBuilder.session_started(session))
        storage.append_event(AuditEventBuilder.bill_added("Rent", 1.0, session))
        storage.append_event(AuditEventBuilder.bill_removed("Rent", session))
        storage.append_event(AuditEventBuilder.session_started(other))

        assert len(storage) == 4
        assert len(storage.get_events_by_correlation_id(session)) == 3

        rent_events = storage.get_events_by_entity("bill", "Rent")
        assert [e.event_type.value for e in rent_events] == [
            "bill_added", "bill_removed",
        ]

    def test_recent_events_newest_first(self):
        storage = InMemoryAuditStorage()
        session = create_correlation_id()
        for name in ("A", "B", "C"):
            storage.append_event(AuditEventBuilder.bill_added(name, 1.0, session))

        recent = storage.get_recent_events(limit=2)
        assert [e.entity_name for e in recent] == ["C", "B"]
