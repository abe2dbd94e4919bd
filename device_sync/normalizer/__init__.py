"""
Normalizer

Turns the raw catalog payload into device records ready for persistence.

Key responsibilities:
- Decode the JSON array and drop entries without a usable name
- Resolve color/capacity from inconsistently spelled keys
- Build device records with the fixed price
- Drop names that already exist or repeat within the batch
"""

from .deduplicator import deduplicate
from .field_normalizer import CAPACITY_KEYS, COLOR_KEYS, normalize_capacity, normalize_color
from .parser import ParsedCatalog, ParsedDevice, parse_catalog, parse_devices
from .record_builder import build_device_entities

__all__ = [
    "CAPACITY_KEYS",
    "COLOR_KEYS",
    "ParsedCatalog",
    "ParsedDevice",
    "build_device_entities",
    "deduplicate",
    "normalize_capacity",
    "normalize_color",
    "parse_catalog",
    "parse_devices",
]
