"""Maps parsed catalog entries to device records."""

from collections.abc import Iterable
from decimal import Decimal

from ..storage.models import DeviceEntity
from .parser import ParsedDevice


def build_device_entities(
    devices: Iterable[ParsedDevice], price: Decimal
) -> list[DeviceEntity]:
    """
    Build one DeviceEntity per parsed device, in order.

    Args:
        devices: Parsed catalog entries
        price: Fixed price stamped on every new record

    Returns:
        List of unsaved DeviceEntity objects
    """
    return [
        DeviceEntity(
            name=device.name,
            color=device.color,
            capacity=device.capacity,
            price=price,
        )
        for device in devices
    ]
