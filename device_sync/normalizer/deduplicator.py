"""
Device Deduplication

A device is identified by its name. A candidate is kept only when its name is
not already stored and has not appeared earlier in the same batch, so the
first occurrence of a name wins.

The existing names are a snapshot read once per run. Two concurrent runs can
both see a name as new; the unique index on ``catalog.devices.name`` is what
ultimately rejects the second insert.
"""

import logging
from collections.abc import Iterable

from ..storage.models import DeviceEntity

logger = logging.getLogger(__name__)


def deduplicate(
    candidates: Iterable[DeviceEntity], existing_names: Iterable[str]
) -> list[DeviceEntity]:
    """
    Drop candidates whose name exists in the store or repeats in the batch.

    Names are compared exactly (case-sensitive).

    Args:
        candidates: Records to check, in batch order
        existing_names: Names already persisted

    Returns:
        The unique candidates, in their original order
    """
    existing = set(existing_names)
    seen: set[str] = set()
    unique: list[DeviceEntity] = []

    for candidate in candidates:
        if candidate.name in existing:
            logger.debug("Skipping device already stored", extra={"device_name": candidate.name})
            continue
        if candidate.name in seen:
            logger.debug("Skipping duplicate device in batch", extra={"device_name": candidate.name})
            continue
        seen.add(candidate.name)
        unique.append(candidate)

    return unique
