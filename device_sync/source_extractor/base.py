"""Device Source Base Class.

This module defines the interface every catalog source must implement, so the
orchestrator can fetch from the real REST endpoint or from canned data alike.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ApiResponse:
    """Raw response from a catalog source.

    The body is kept as text; decoding it is the parser's job.
    """

    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        """True for any 2xx status."""
        return 200 <= self.status_code < 300


class DeviceSource(ABC):
    """Abstract base class for device catalog sources.

    Usage:
        class MySource(DeviceSource):
            def __init__(self):
                super().__init__(source_name="my_source")

            def fetch(self):
                # Issue the request and wrap status + body
                ...
    """

    def __init__(self, source_name: str):
        """Initialize the source.

        Args:
            source_name: Unique identifier for this source (e.g., "restful_api")
        """
        self.source_name = source_name

    @abstractmethod
    def fetch(self) -> ApiResponse:
        """Fetch the full device catalog.

        Implementations return whatever status the endpoint answered with;
        judging the status is left to the caller.

        Returns:
            ApiResponse with the HTTP status code and the raw body

        Raises:
            ApiError: If the endpoint cannot be reached at all
                      (connection error, timeout)
        """

    def __repr__(self) -> str:
        """String representation of the source."""
        return f"{self.__class__.__name__}(source='{self.source_name}')"
