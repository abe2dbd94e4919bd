"""
Configuration loader for the device sync service.

This module reads the sync settings from `config/sync.yml` and applies
environment overrides (loaded from `.env` when present). The CLI, the
orchestrator and the tests all go through `load_sync_config` so the constants
live in exactly one place.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://api.restful-api.dev/objects"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_FIXED_PRICE = Decimal("2025.07")
DEFAULT_REWRITE_FROM = "64 GB"
DEFAULT_REWRITE_TO = "46GB"


@dataclass(frozen=True)
class SyncConfig:
    """Immutable settings injected into the orchestrator."""

    api_url: str = DEFAULT_API_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    fixed_price: Decimal = DEFAULT_FIXED_PRICE
    rewrite_from: str = DEFAULT_REWRITE_FROM
    rewrite_to: str = DEFAULT_REWRITE_TO


def _project_root() -> Path:
    """Return the project root path based on this file's location."""
    return Path(__file__).resolve().parent.parent


def _section(raw_config: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = raw_config.get(name) or {}
    if not isinstance(section, Mapping):
        raise ValueError(f"`{name}` section must be a mapping in sync configuration")
    return section


def _parse_price(value: Any) -> Decimal:
    try:
        price = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"`pricing.fixed_price` is not a valid decimal: {value!r}") from exc
    if not price.is_finite():
        raise ValueError(f"`pricing.fixed_price` must be finite, got {value!r}")
    return price


def load_sync_config(config_path: str | None = None) -> SyncConfig:
    """
    Load sync configuration from YAML, then apply environment overrides.

    Args:
        config_path: Optional override for the config file path. When omitted,
            the function reads `config/sync.yml` relative to the project root.

    Returns:
        A `SyncConfig` instance.

    Raises:
        FileNotFoundError: If an explicit `config_path` does not exist.
        ValueError: If the YAML file cannot be parsed or has invalid structure.
    """
    path = Path(config_path) if config_path else _project_root() / "config" / "sync.yml"
    raw_config: Mapping[str, Any] | None = None

    if path.exists():
        try:
            with path.open("r", encoding="utf-8") as handle:
                raw_config = yaml.safe_load(handle)
        except yaml.YAMLError as exc:
            logger.error("Failed to parse sync configuration: %s", exc)
            raise ValueError(f"Invalid YAML in sync configuration: {exc}") from exc
    elif config_path:
        logger.error("Sync configuration file not found: %s", path)
        raise FileNotFoundError(f"Sync configuration file not found: {path}")
    else:
        logger.warning("Sync configuration file not found, using defaults: %s", path)

    raw_config = raw_config or {}
    if not isinstance(raw_config, Mapping):
        raise ValueError("Sync configuration must be a mapping at the top level")

    api = _section(raw_config, "api")
    pricing = _section(raw_config, "pricing")
    rewrite = _section(raw_config, "capacity_rewrite")

    api_url = os.getenv("DEVICE_API_URL") or api.get("url", DEFAULT_API_URL)
    if not isinstance(api_url, str) or not api_url.strip():
        raise ValueError("`api.url` must be a non-empty string")

    timeout = api.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS)
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ValueError("`api.timeout_seconds` must be a positive number")

    rewrite_from = rewrite.get("from", DEFAULT_REWRITE_FROM)
    rewrite_to = rewrite.get("to", DEFAULT_REWRITE_TO)
    if not isinstance(rewrite_from, str) or not isinstance(rewrite_to, str):
        raise ValueError("`capacity_rewrite.from` and `capacity_rewrite.to` must be strings")

    config = SyncConfig(
        api_url=api_url.strip(),
        timeout_seconds=float(timeout),
        fixed_price=_parse_price(pricing.get("fixed_price", DEFAULT_FIXED_PRICE)),
        rewrite_from=rewrite_from,
        rewrite_to=rewrite_to,
    )

    logger.info(
        "Loaded sync configuration",
        extra={
            "api_url": config.api_url,
            "timeout_seconds": config.timeout_seconds,
            "fixed_price": str(config.fixed_price),
        },
    )
    return config


__all__ = ["SyncConfig", "load_sync_config"]
