"""Device Store Base Class.

Defines the persistence surface the sync pipeline relies on. Bulk writes must
not abort on a single bad row: they return one SaveResult per input instead.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .models import DeviceEntity, SaveResult


class DeviceStore(ABC):
    """Abstract base class for device stores."""

    @abstractmethod
    def find_existing_names(self) -> set[str]:
        """Return every distinct non-null device name currently stored."""

    @abstractmethod
    def find_by_capacity(self, capacity: str) -> list[DeviceEntity]:
        """Return all stored devices whose capacity equals ``capacity`` exactly."""

    @abstractmethod
    def create_many(self, entities: Sequence[DeviceEntity]) -> list[SaveResult]:
        """
        Insert ``entities``, continuing past rows that fail.

        Returns:
            One SaveResult per input, in input order. Successful results carry
            the entity with its assigned ``id``.
        """

    @abstractmethod
    def update_many(self, entities: Sequence[DeviceEntity]) -> list[SaveResult]:
        """
        Update ``entities`` by id, continuing past rows that fail.

        Returns:
            One SaveResult per input, in input order.
        """
