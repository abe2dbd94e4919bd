"""In-memory implementation of DeviceStore.

Backs dry runs and tests. It mirrors the PostgreSQL store's behaviour,
including the unique constraint on ``name``, so partial failures can be
exercised without a database.
"""

from collections.abc import Iterable, Sequence
from dataclasses import replace
from typing import Optional

from .base import DeviceStore
from .models import DeviceEntity, SaveResult


class InMemoryDeviceStore(DeviceStore):
    """Dict-backed device store.

    Args:
        devices: Records to seed the store with
        reject_names: Names whose writes always fail (to simulate bad rows)
    """

    def __init__(
        self,
        devices: Optional[Iterable[DeviceEntity]] = None,
        reject_names: Optional[Iterable[str]] = None,
    ):
        self._devices: dict[int, DeviceEntity] = {}
        self._next_id = 1
        self.reject_names = set(reject_names or ())
        self.create_calls = 0
        self.update_calls = 0
        for device in devices or ():
            self._insert(device)

    @property
    def devices(self) -> list[DeviceEntity]:
        """Copies of all stored records, in insertion order."""
        return [replace(device) for device in self._devices.values()]

    def _insert(self, entity: DeviceEntity) -> DeviceEntity:
        stored = replace(entity, id=self._next_id)
        self._devices[stored.id] = stored
        self._next_id += 1
        return replace(stored)

    def find_existing_names(self) -> set[str]:
        return {d.name for d in self._devices.values() if d.name is not None}

    def find_by_capacity(self, capacity: str) -> list[DeviceEntity]:
        return [replace(d) for d in self._devices.values() if d.capacity == capacity]

    def create_many(self, entities: Sequence[DeviceEntity]) -> list[SaveResult]:
        self.create_calls += 1
        results = []
        for entity in entities:
            if entity.name in self.reject_names:
                results.append(SaveResult(entity, False, f"rejected device: {entity.name}"))
            elif entity.name in self.find_existing_names():
                results.append(
                    SaveResult(entity, False, f"duplicate key value for name: {entity.name}")
                )
            else:
                results.append(SaveResult(self._insert(entity), True))
        return results

    def update_many(self, entities: Sequence[DeviceEntity]) -> list[SaveResult]:
        self.update_calls += 1
        results = []
        for entity in entities:
            if entity.name in self.reject_names:
                results.append(SaveResult(entity, False, f"rejected device: {entity.name}"))
            elif entity.id not in self._devices:
                results.append(SaveResult(entity, False, f"device not found: id={entity.id}"))
            else:
                # only capacity is writable once a device exists
                stored = replace(self._devices[entity.id], capacity=entity.capacity)
                self._devices[entity.id] = stored
                results.append(SaveResult(replace(stored), True))
        return results
