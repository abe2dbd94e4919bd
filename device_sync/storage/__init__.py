"""
Storage

Persistence for device records.

Main components:
- DeviceEntity / SaveResult: Record and per-row outcome data classes
- DeviceStore: Abstract store contract (find, create_many, update_many)
- PostgresDeviceStore: psycopg2-backed store for catalog.devices
- InMemoryDeviceStore: Dict-backed store for dry runs and tests
- PersistenceGateway: Bulk create/rewrite that tolerates per-row failures
"""

from .base import DeviceStore
from .db_operations import DatabaseError, PostgresDeviceStore
from .gateway import PersistenceGateway
from .inmemory import InMemoryDeviceStore
from .models import DeviceEntity, SaveResult

__all__ = [
    "DatabaseError",
    "DeviceEntity",
    "DeviceStore",
    "InMemoryDeviceStore",
    "PersistenceGateway",
    "PostgresDeviceStore",
    "SaveResult",
]
