"""
REST catalog adapter.

Issues a single unauthenticated GET against the device catalog endpoint and
returns the status code and body as-is. No retries and no pagination: the
endpoint returns the whole catalog in one JSON array.
"""

import logging
from typing import Optional

import requests

from ...config import DEFAULT_API_URL, DEFAULT_TIMEOUT_SECONDS
from ...errors import ApiError
from ..base import ApiResponse, DeviceSource

logger = logging.getLogger(__name__)


class RestfulApiAdapter(DeviceSource):
    """
    Adapter for the public REST device catalog.

    Environment Variables:
        DEVICE_API_URL: Endpoint override (applied by load_sync_config)
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """
        Initialize the adapter.

        Args:
            api_url: Catalog endpoint (default: https://api.restful-api.dev/objects)
            timeout_seconds: Timeout for the whole request (default: 10)
        """
        super().__init__(source_name="restful_api")
        self.api_url = api_url or DEFAULT_API_URL
        self.timeout_seconds = timeout_seconds
        self.api_call_count = 0

    def fetch(self) -> ApiResponse:
        """
        Fetch the device catalog.

        Returns:
            ApiResponse with whatever status the endpoint answered

        Raises:
            ApiError: On connection errors or timeouts (status_code is None)
        """
        self.api_call_count += 1

        logger.debug(
            "Requesting device catalog",
            extra={"url": self.api_url, "timeout_seconds": self.timeout_seconds},
        )

        try:
            response = requests.get(self.api_url, timeout=self.timeout_seconds)
        except requests.exceptions.RequestException as e:
            logger.error(
                "Failed to reach device catalog",
                extra={
                    "url": self.api_url,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            raise ApiError(None, f"Failed to reach {self.api_url}: {e}") from e

        logger.info(
            "Device catalog request completed",
            extra={
                "url": self.api_url,
                "status_code": response.status_code,
                "body_length": len(response.text or ""),
            },
        )

        return ApiResponse(status_code=response.status_code, body=response.text)

    def __repr__(self) -> str:
        """String representation of the adapter."""
        return (
            f"RestfulApiAdapter(source='{self.source_name}', "
            f"url='{self.api_url}', "
            f"api_calls={self.api_call_count})"
        )
