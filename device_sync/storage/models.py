"""Record types shared by the normalizer and the stores."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..config import DEFAULT_FIXED_PRICE


@dataclass
class DeviceEntity:
    """A device row in ``catalog.devices``.

    ``id`` stays None until the store assigns one. Once persisted, only
    ``capacity`` is ever changed by the sync.
    """

    name: str
    color: Optional[str] = None
    capacity: Optional[str] = None
    price: Decimal = DEFAULT_FIXED_PRICE
    id: Optional[int] = None


@dataclass
class SaveResult:
    """Outcome of one row in a bulk create or update."""

    entity: DeviceEntity
    success: bool
    error: Optional[str] = None
