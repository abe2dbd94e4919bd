"""
Device Sync - Main Entry Point

Command-line interface for the device catalog sync.

Usage:
    python -m device_sync.main [OPTIONS]

Options:
    --config PATH        Path to sync.yml (default: config/sync.yml)
    --api-url URL        Override the catalog endpoint
    --dry-run            Sync into an in-memory store instead of the database
    --rewrite-only       Only run the capacity rewrite sweep
    --verbose            Enable debug logging
    --help               Show this message and exit

Examples:
    # Run a full sync against DATABASE_URL:
    python -m device_sync.main

    # See what a sync would create without touching the database:
    python -m device_sync.main --dry-run --verbose

Exit Codes:
    0: Success
    1: Completed, but some rows failed to persist
    2: Fatal error (API, payload, database, configuration)
"""

import argparse
import logging
import os
import sys
from collections.abc import Sequence
from dataclasses import replace
from typing import Optional

from dotenv import load_dotenv

from .config import SyncConfig, load_sync_config
from .errors import ApiError, ParseError, SyncError
from .source_extractor.adapters import RestfulApiAdapter
from .storage import DatabaseError, DeviceStore, InMemoryDeviceStore, PostgresDeviceStore
from .sync import DeviceSync

load_dotenv()

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description="Sync the public device catalog into the devices table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to the sync configuration file",
        default=None,
    )

    parser.add_argument(
        "--api-url",
        type=str,
        help="Override the device catalog endpoint",
        default=None,
        dest="api_url",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Use an in-memory store instead of DATABASE_URL",
        dest="dry_run",
    )

    parser.add_argument(
        "--rewrite-only",
        action="store_true",
        help="Skip fetching and only run the capacity rewrite sweep",
        dest="rewrite_only",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _build_store(dry_run: bool) -> Optional[DeviceStore]:
    if dry_run:
        logger.info("DRY RUN: syncing into an in-memory store")
        return InMemoryDeviceStore()

    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        logger.error("DATABASE_URL environment variable must be set")
        return None

    logger.info("Connecting to database")
    return PostgresDeviceStore(database_url)


def run(config: SyncConfig, store: DeviceStore, rewrite_only: bool = False) -> int:
    """
    Run the sync and map the outcome to an exit code.

    Args:
        config: Loaded sync configuration
        store: Target device store
        rewrite_only: Only run the capacity rewrite sweep

    Returns:
        Exit code (0 = success, 1 = some rows failed, 2 = fatal error)
    """
    source = RestfulApiAdapter(config.api_url, timeout_seconds=config.timeout_seconds)
    sync = DeviceSync(source, store, config)

    try:
        if rewrite_only:
            rewritten = sync.rewrite_only()
            logger.info(f"Rewrote capacity on {len(rewritten)} devices")
        else:
            created = sync.run()
            logger.info(f"Created {len(created)} devices")
    except ApiError as e:
        logger.error(f"Device catalog API error: {e}", extra={"status_code": e.status_code})
        return 2
    except ParseError as e:
        logger.error(f"Invalid device catalog payload: {e}")
        return 2
    except SyncError as e:
        logger.error(f"Device sync failed: {e}")
        return 2

    failed = sync.stats["create_failed"] + sync.stats["rewrite_failed"]
    if failed:
        logger.warning(f"Completed with errors: {failed} rows failed to persist")
        return 1

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the device sync.

    Returns:
        Exit code (0 = success, 1 = partial failure, 2 = fatal error)
    """
    args = parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = load_sync_config(args.config)
        if args.api_url:
            config = replace(config, api_url=args.api_url)

        store = _build_store(args.dry_run)
        if store is None:
            return 2  # Fatal error - cannot proceed without database

        return run(config, store, rewrite_only=args.rewrite_only)

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 2

    except DatabaseError as e:
        logger.error(f"Database error: {e}")
        return 2

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # Standard Unix exit code for SIGINT

    except Exception as e:
        logger.error(
            "Unexpected fatal error",
            extra={
                "error": str(e),
                "error_type": type(e).__name__,
            },
            exc_info=True,
        )
        return 2


if __name__ == "__main__":
    sys.exit(main())
