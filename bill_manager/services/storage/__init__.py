"""
Storage Services Package

Provides abstract interfaces and the in-memory implementations used
for a single interactive session.
"""

from bill_manager.services.storage.interface import (
    AuditStorageInterface,
    BillStorageInterface,
    StorageError,
)
from bill_manager.services.storage.memory import (
    InMemoryAuditStorage,
    InMemoryBillStorage,
)

__all__ = [
    # Interfaces
    "AuditStorageInterface",
    "BillStorageInterface",
    # Exceptions
    "StorageError",
    # In-memory implementation
    "InMemoryAuditStorage",
    "InMemoryBillStorage",
]
