"""
Bill Actions and Application Wiring

This module holds the handler for each menu choice and the factory that
builds a ready-to-run session.

DESIGN DECISION: The handlers don't own the bill store. It is passed into
every call, so there is exactly one store per session and nothing else can
reach it.

Every handler follows the same rule: if the user enters an empty line at
any prompt, stop right there and change nothing.
"""

from typing import Optional

from bill_manager.audit import AuditLogger
from bill_manager.config import AppSettings, get_settings
from bill_manager.console import Console
from bill_manager.menu import MenuController
from bill_manager.models.bill import Bill
from bill_manager.services.storage import (
    BillStorageInterface,
    InMemoryAuditStorage,
    InMemoryBillStorage,
)


class BillActions:
    """
    Interactive sub-dialogues for Add, View, Remove and Update.

    Each method returns once the dialogue is finished, whether or not it
    changed anything.
    """

    def __init__(
        self,
        console: Console,
        audit_logger: Optional[AuditLogger] = None,
        currency_symbol: str = "",
    ):
        self._console = console
        self._audit_logger = audit_logger
        self._currency_symbol = currency_symbol

    def _cancelled(self, action: str, field: str) -> None:
        if self._audit_logger:
            self._audit_logger.log_action_cancelled(action, field)

    def add_bill(self, bills: BillStorageInterface) -> None:
        """Ask for a name and amount, then store the bill."""
        name = self._console.ask("Bill name: ")
        if name is None:
            self._cancelled("add", "name")
            return

        amount = self._console.get_amount("Amount: ")
        if amount is None:
            self._cancelled("add", "amount")
            return

        bill = Bill(name=name, amount=amount)
        bills.add_bill(bill)
        if self._audit_logger:
            self._audit_logger.log_bill_added(bill.name, bill.amount)
        self._console.write("Bill added")

    def view_bills(self, bills: BillStorageInterface) -> None:
        """Print every bill and the running total."""
        listing = bills.list_bills()
        if not listing:
            self._console.write("No bills")
            return

        for bill in listing:
            self._console.write(bill.display(self._currency_symbol))

        total = bills.total()
        self._console.write(f"Total: {self._currency_symbol}{total:.2f}")

    def remove_bill(self, bills: BillStorageInterface) -> None:
        """Show the bills, then remove one by name."""
        self.view_bills(bills)
        name = self._console.ask("Enter bill name to remove: ")
        if name is None:
            self._cancelled("remove", "name")
            return

        if bills.remove_bill(name):
            if self._audit_logger:
                self._audit_logger.log_bill_removed(name)
            self._console.write("Bill removed")
        else:
            if self._audit_logger:
                self._audit_logger.log_bill_not_found(name, "remove")
            self._console.write("Bill not removed")

    def update_bill(self, bills: BillStorageInterface) -> None:
        """Show the bills, then change the amount of one of them."""
        self.view_bills(bills)
        name = self._console.ask("Enter bill name to update: ")
        if name is None:
            self._cancelled("update", "name")
            return

        amount = self._console.get_amount("New amount: ")
        if amount is None:
            self._cancelled("update", "amount")
            return

        if bills.update_bill(name, amount):
            if self._audit_logger:
                self._audit_logger.log_bill_updated(name, amount)
            self._console.write("Bill updated")
        else:
            if self._audit_logger:
                self._audit_logger.log_bill_not_found(name, "update")
            self._console.write("Bill not found")


def create_app_components(
    settings: Optional[AppSettings] = None,
    console: Optional[Console] = None,
) -> tuple[MenuController, InMemoryBillStorage, AuditLogger]:
    """
    Factory function to create all application components.

    Args:
        settings: Settings to use. Loaded from the environment if None.
        console: Console to prompt on. stdin/stdout if None.

    Returns:
        (menu_controller, bill_storage, audit_logger)
    """
    settings = settings or get_settings()

    if settings.audit_enabled:
        audit_logger = AuditLogger(InMemoryAuditStorage())
    else:
        audit_logger = AuditLogger()  # Local-only logging

    console = console or Console(audit_logger=audit_logger)

    actions = BillActions(
        console,
        audit_logger=audit_logger,
        currency_symbol=settings.currency_symbol,
    )
    controller = MenuController(console, actions, title=settings.app_title)

    return controller, InMemoryBillStorage(), audit_logger
