"""Exceptions raised by a sync run.

Every failure that aborts a run is a ``DeviceSyncError`` so callers can treat
them as a single failure signal while still telling them apart when needed.
"""

from typing import Optional


class DeviceSyncError(Exception):
    """Base class for errors that abort a sync run."""


class ApiError(DeviceSyncError):
    """Raised when the catalog API returns a non-2xx status or cannot be reached."""

    def __init__(self, status_code: Optional[int], message: str):
        self.status_code = status_code
        super().__init__(message)


class ParseError(DeviceSyncError):
    """Raised when the payload is not a well-formed JSON array of objects."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Failed to parse device catalog: {detail}")


class SyncError(DeviceSyncError):
    """Raised for any unexpected failure after the payload has been parsed."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Device sync failed: {detail}")
