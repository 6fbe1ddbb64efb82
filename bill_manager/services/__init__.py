"""Services package."""

from bill_manager.services.storage import (
    AuditStorageInterface,
    BillStorageInterface,
    InMemoryAuditStorage,
    InMemoryBillStorage,
    StorageError,
)

__all__ = [
    # Storage services
    "AuditStorageInterface",
    "BillStorageInterface",
    "InMemoryAuditStorage",
    "InMemoryBillStorage",
    "StorageError",
]
