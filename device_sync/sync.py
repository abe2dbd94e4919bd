"""
Device Sync Orchestrator

Runs one sync: fetch → parse → build → dedupe → persist → rewrite.

Failure policy:
- Fetch and parse failures abort the run (ApiError / ParseError)
- Any unexpected error after parsing is wrapped in SyncError
- Individual rows that fail to persist never abort the run; they are logged
  by the PersistenceGateway and left out of the result
"""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from .config import SyncConfig
from .errors import ApiError, DeviceSyncError, SyncError
from .normalizer import ParsedDevice, build_device_entities, deduplicate, parse_catalog
from .source_extractor import DeviceSource
from .storage import DeviceEntity, DeviceStore, PersistenceGateway

logger = logging.getLogger(__name__)


class SyncStage(str, Enum):
    """Stages of a sync run, in execution order."""

    PENDING = "pending"
    FETCHING = "fetching"
    PARSING = "parsing"
    # color and capacity are resolved per entry during PARSING
    NORMALIZING = "normalizing"
    BUILDING = "building"
    DEDUPLICATING = "deduplicating"
    PERSISTING = "persisting"
    REWRITING = "rewriting"
    DONE = "done"
    FAILED = "failed"


class DeviceSync:
    """
    Orchestrates a device catalog sync.

    Usage:
        sync = DeviceSync(RestfulApiAdapter(), PostgresDeviceStore(url), load_sync_config())
        created = sync.run()
    """

    def __init__(
        self,
        source: DeviceSource,
        store: DeviceStore,
        config: Optional[SyncConfig] = None,
    ):
        """
        Args:
            source: Where the catalog is fetched from
            store: Where device records are persisted
            config: Fixed price and capacity rewrite values (default: SyncConfig())
        """
        self.source = source
        self.store = store
        self.config = config or SyncConfig()
        self.gateway = PersistenceGateway(store)
        self.stage = SyncStage.PENDING
        self.stats: dict[str, int] = {}

    def _reset_stats(self) -> None:
        self.stats = {
            "fetched": 0,
            "parsed": 0,
            "dropped_blank": 0,
            "duplicates": 0,
            "created": 0,
            "create_failed": 0,
            "rewritten": 0,
            "rewrite_failed": 0,
        }

    def run(self) -> list[DeviceEntity]:
        """
        Execute one sync run.

        Returns:
            Devices created in this run (empty list is a valid outcome)

        Raises:
            ApiError: Non-2xx response or unreachable endpoint
            ParseError: Body is not a JSON array of objects
            SyncError: Any other failure after parsing
        """
        self._reset_stats()
        start_time = datetime.now(timezone.utc)

        logger.info(
            "Starting device sync",
            extra={"source": self.source.source_name, "store": type(self.store).__name__},
        )

        try:
            self.stage = SyncStage.FETCHING
            response = self.source.fetch()
            if not response.ok:
                logger.error(
                    "Device catalog request failed",
                    extra={"status_code": response.status_code, "body": response.body[:200]},
                )
                raise ApiError(
                    response.status_code,
                    f"Device catalog request failed with status {response.status_code}",
                )

            self.stage = SyncStage.PARSING
            catalog = parse_catalog(response.body)
            devices = catalog.devices
            self.stats["fetched"] = catalog.entries
            self.stats["parsed"] = len(devices)
            self.stats["dropped_blank"] = catalog.dropped
        except DeviceSyncError:
            self.stage = SyncStage.FAILED
            raise
        except Exception:
            logger.error(
                "Device sync failed",
                extra={"stage": self.stage.value},
                exc_info=True,
            )
            self.stage = SyncStage.FAILED
            raise

        if not devices:
            logger.warning("Device catalog is empty, nothing to sync")
            self.stage = SyncStage.DONE
            return []

        try:
            created = self._persist(devices)
            self._rewrite()
        except Exception as e:
            failed_stage = self.stage
            self.stage = SyncStage.FAILED
            logger.error(
                "Device sync failed",
                extra={
                    "stage": failed_stage.value,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
                exc_info=True,
            )
            raise SyncError(f"{failed_stage.value}: {e}") from e

        self.stage = SyncStage.DONE
        duration = (datetime.now(timezone.utc) - start_time).total_seconds()
        logger.info(
            "Device sync completed",
            extra={"duration_seconds": duration, "stats": dict(self.stats)},
        )
        return created

    def _persist(self, devices: list[ParsedDevice]) -> list[DeviceEntity]:
        self.stage = SyncStage.BUILDING
        candidates = build_device_entities(devices, self.config.fixed_price)

        self.stage = SyncStage.DEDUPLICATING
        unique = deduplicate(candidates, self.store.find_existing_names())
        self.stats["duplicates"] = len(candidates) - len(unique)

        self.stage = SyncStage.PERSISTING
        failures_before = self.gateway.create_failures
        created = self.gateway.create_devices(unique)
        self.stats["created"] = len(created)
        self.stats["create_failed"] = self.gateway.create_failures - failures_before
        return created

    def _rewrite(self) -> list[DeviceEntity]:
        self.stage = SyncStage.REWRITING
        failures_before = self.gateway.update_failures
        rewritten = self.gateway.rewrite_capacity(
            self.config.rewrite_from, self.config.rewrite_to
        )
        self.stats["rewritten"] = len(rewritten)
        self.stats["rewrite_failed"] = self.gateway.update_failures - failures_before
        return rewritten

    def rewrite_only(self) -> list[DeviceEntity]:
        """
        Run only the capacity rewrite sweep, without fetching.

        Returns:
            Devices whose capacity was rewritten

        Raises:
            SyncError: If the store fails
        """
        self._reset_stats()
        try:
            rewritten = self._rewrite()
        except Exception as e:
            self.stage = SyncStage.FAILED
            logger.error(
                "Capacity rewrite failed",
                extra={"error": str(e), "error_type": type(e).__name__},
            )
            raise SyncError(str(e)) from e
        self.stage = SyncStage.DONE
        return rewritten
