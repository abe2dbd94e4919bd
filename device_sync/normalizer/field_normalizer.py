"""
Field Normalization Logic

The catalog's ``data`` objects have no fixed schema: the same attribute shows
up under different spellings ("color", "Colour", "Strap Colour", ...) and with
different value types (``"128 GB"`` vs ``512``). This module resolves those
into plain optional strings.

Resolution rule: candidate keys are tried in order and the first key that is
PRESENT wins, even if its value is null. A null value for a matched key
resolves to None instead of falling through to a lower-priority key.

All functions here are pure.
"""

import json
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any, Optional

# Priority order matters: earlier keys win.
COLOR_KEYS = ("color", "Color", "Colour", "Strap Colour", "strap_colour")
CAPACITY_KEYS = ("capacity", "Capacity", "capacity GB", "Capacity GB", "storage", "Storage")

CAPACITY_UNIT = "GB"

_MISSING = object()


def resolve_field(data: Mapping[str, Any], candidates: Sequence[str]) -> Any:
    """
    Return the value of the first candidate key present in ``data``.

    Args:
        data: Key-value structure from the payload
        candidates: Key names in priority order

    Returns:
        The matched value (possibly None), or None when no key is present

    Examples:
        >>> resolve_field({"Color": "Red", "color": "Blue"}, COLOR_KEYS)
        'Blue'
        >>> resolve_field({"color": None, "Colour": "Red"}, COLOR_KEYS) is None
        True
    """
    for key in candidates:
        value = data.get(key, _MISSING)
        if value is not _MISSING:
            return value
    return None


def _is_number(value: Any) -> bool:
    # bool is an int subclass but JSON true/false is not a number
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def to_text(value: Any) -> str:
    """
    Render a JSON value as text.

    Strings pass through, booleans use their JSON spelling, numbers use their
    decimal form and anything else (objects, arrays) is rendered as JSON.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_number(value):
        return _decimal_text(value)
    return json.dumps(value, default=str, ensure_ascii=False)


def _decimal_text(value: Any) -> str:
    if isinstance(value, float):
        # repr gives the shortest round-tripping form (256.5, not 256.500000001)
        return repr(value)
    if isinstance(value, Decimal):
        # plain notation: 1E+2 -> 100
        return format(value, "f")
    return str(value)


def normalize_color(data: Mapping[str, Any]) -> Optional[str]:
    """Resolve the device color from ``data``."""
    value = resolve_field(data, COLOR_KEYS)
    if value is None:
        return None
    return to_text(value)


def normalize_capacity(data: Mapping[str, Any]) -> Optional[str]:
    """
    Resolve the device capacity from ``data``.

    Text values are kept verbatim; numbers get a " GB" suffix.

    Examples:
        >>> normalize_capacity({"capacity GB": 512})
        '512 GB'
        >>> normalize_capacity({"Capacity": "128 GB"})
        '128 GB'
    """
    value = resolve_field(data, CAPACITY_KEYS)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if _is_number(value):
        return f"{_decimal_text(value)} {CAPACITY_UNIT}"
    return to_text(value)
