"""
Catalog Response Parser

Decodes the catalog body (a JSON array of loosely structured objects) into
``ParsedDevice`` records.

Rules:
- The body must decode to an array whose elements are all objects; anything
  else raises ParseError and nothing is returned
- Entries with a missing or blank ``name`` are dropped and only counted
- Kept names are stored exactly as sent; whitespace only matters for the blank check
- A missing or null ``data`` leaves color and capacity unset
- Output keeps input order
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional, Union

from ..errors import ParseError
from .field_normalizer import normalize_capacity, normalize_color, to_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedDevice:
    """A catalog entry after parsing; ``name`` is always non-blank."""

    name: str
    color: Optional[str] = None
    capacity: Optional[str] = None


@dataclass
class ParsedCatalog:
    """Parser output plus the counts the orchestrator reports."""

    devices: list[ParsedDevice] = field(default_factory=list)
    entries: int = 0
    dropped: int = 0


def _decode(body: Union[str, bytes]) -> Any:
    try:
        # Decimal keeps "256.5" as written instead of a binary float
        return json.loads(body, parse_float=Decimal)
    except (ValueError, TypeError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors;
        # RecursionError comes from pathologically nested arrays
        logger.error(
            "Failed to decode catalog payload",
            extra={"error": str(e), "error_type": type(e).__name__},
        )
        raise ParseError(str(e)) from e


def _extract_name(value: Any) -> Optional[str]:
    if value is None:
        return None
    name = to_text(value)
    return name if name.strip() else None


def parse_catalog(body: Union[str, bytes]) -> ParsedCatalog:
    """
    Parse the catalog payload and count what was dropped.

    Args:
        body: Raw response body

    Returns:
        ParsedCatalog with devices in payload order, the number of array
        entries and the number of entries dropped for a blank name

    Raises:
        ParseError: If the body is not a JSON array of objects
    """
    payload = _decode(body)

    if not isinstance(payload, list):
        raise ParseError(
            f"expected a JSON array at the top level, got {type(payload).__name__}"
        )

    catalog = ParsedCatalog(entries=len(payload))

    for index, item in enumerate(payload):
        if not isinstance(item, Mapping):
            raise ParseError(
                f"element {index} is not an object (got {type(item).__name__})"
            )

        name = _extract_name(item.get("name"))
        if name is None:
            catalog.dropped += 1
            logger.debug(
                "Dropping catalog entry without a name",
                extra={"index": index, "entry_id": item.get("id")},
            )
            continue

        color: Optional[str] = None
        capacity: Optional[str] = None
        data = item.get("data")

        if isinstance(data, Mapping):
            color = normalize_color(data)
            capacity = normalize_capacity(data)
        elif data is not None:
            logger.warning(
                "Ignoring non-object data for catalog entry",
                extra={"index": index, "device_name": name, "data_type": type(data).__name__},
            )

        catalog.devices.append(ParsedDevice(name=name, color=color, capacity=capacity))

    logger.info(
        "Parsed device catalog",
        extra={
            "entries": catalog.entries,
            "parsed": len(catalog.devices),
            "dropped": catalog.dropped,
        },
    )

    return catalog


def parse_devices(body: Union[str, bytes]) -> list[ParsedDevice]:
    """
    Parse the catalog payload.

    Example:
        >>> parse_devices('[{"name": ""}, {"name": "X"}]')
        [ParsedDevice(name='X', color=None, capacity=None)]
    """
    return parse_catalog(body).devices
