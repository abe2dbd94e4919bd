"""
Persistence Gateway

Sits between the orchestrator and a DeviceStore and applies the partial
failure policy: a bulk write that fails for some rows still succeeds for the
rest, failed rows are logged and left out of the returned list, and nothing is
raised for them.
"""

import logging
from collections.abc import Sequence
from dataclasses import replace

from .base import DeviceStore
from .models import DeviceEntity, SaveResult

logger = logging.getLogger(__name__)


class PersistenceGateway:
    """Bulk create and capacity rewrite on top of a DeviceStore."""

    def __init__(self, store: DeviceStore):
        self.store = store
        self.create_failures = 0
        self.update_failures = 0

    def create_devices(self, entities: Sequence[DeviceEntity]) -> list[DeviceEntity]:
        """
        Create ``entities`` in one bulk operation.

        Args:
            entities: Deduplicated records to insert

        Returns:
            The records that were created, in input order
        """
        if not entities:
            logger.info("No devices to create")
            return []

        results = self.store.create_many(entities)
        created, failed = self._split_results(results, "create")
        self.create_failures += failed

        logger.info(
            "Bulk create completed",
            extra={"total": len(entities), "created_count": len(created), "failed": failed},
        )
        return created

    def rewrite_capacity(self, old_value: str, new_value: str) -> list[DeviceEntity]:
        """
        Replace ``old_value`` with ``new_value`` in the capacity of every stored device.

        This sweeps the whole table, not just rows created in the current run.

        Args:
            old_value: Exact capacity to match (e.g. "64 GB")
            new_value: Replacement capacity (e.g. "46GB")

        Returns:
            The records that were updated
        """
        matches = self.store.find_by_capacity(old_value)
        if not matches:
            logger.info("No devices need a capacity rewrite", extra={"capacity": old_value})
            return []

        updates = [replace(entity, capacity=new_value) for entity in matches]
        results = self.store.update_many(updates)
        updated, failed = self._split_results(results, "update")
        self.update_failures += failed

        logger.info(
            "Capacity rewrite completed",
            extra={
                "from_capacity": old_value,
                "to_capacity": new_value,
                "matched": len(matches),
                "updated": len(updated),
                "failed": failed,
            },
        )
        return updated

    @staticmethod
    def _split_results(
        results: Sequence[SaveResult], operation: str
    ) -> tuple[list[DeviceEntity], int]:
        succeeded: list[DeviceEntity] = []
        failed = 0
        for result in results:
            if result.success:
                succeeded.append(result.entity)
                continue
            failed += 1
            logger.warning(
                f"Failed to {operation} device",
                extra={
                    "device_name": result.entity.name,
                    "device_id": result.entity.id,
                    "error": result.error,
                },
            )
        return succeeded, failed
