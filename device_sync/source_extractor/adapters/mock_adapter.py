"""Mock Adapter for Testing.

This adapter stands in for the REST catalog. It makes no HTTP requests and
returns a canned payload shaped like the real endpoint's response.
"""

import json
from typing import Any, Optional

from ..base import ApiResponse, DeviceSource

# Mirrors the shapes the live catalog returns: null data, numeric capacity,
# alternate color spelling and a "64 GB" capacity.
SAMPLE_CATALOG: list[dict[str, Any]] = [
    {
        "id": "1",
        "name": "Google Pixel 6 Pro",
        "data": {"color": "Cloudy White", "capacity": "128 GB"},
    },
    {
        "id": "2",
        "name": "Apple iPhone 12 Mini, 256GB, Blue",
        "data": None,
    },
    {
        "id": "3",
        "name": "Apple iPhone 12 Pro Max",
        "data": {"color": "Cloudy White", "capacity GB": 512},
    },
    {
        "id": "5",
        "name": "Samsung Galaxy Z Fold2",
        "data": {"price": 689.99, "color": "Brown"},
    },
    {
        "id": "7",
        "name": "Apple MacBook Pro 16",
        "data": {
            "year": 2019,
            "price": 1849.99,
            "CPU model": "Intel Core i9",
            "Hard disk size": "1 TB",
        },
    },
    {
        "id": "11",
        "name": "Apple iPad Mini 5th Gen",
        "data": {"Capacity": "64 GB", "Screen size": 7.9},
    },
    {
        "id": "13",
        "name": "Apple Watch Series 8",
        "data": {"Strap Colour": "Elderberry", "Case Size": "41mm"},
    },
]


class MockAdapter(DeviceSource):
    """Mock source that returns a fixed catalog.

    Useful for:
    - Unit testing without hitting the real API
    - Dry runs without network access
    - Simulating error statuses and malformed bodies

    Example:
        adapter = MockAdapter(status_code=500, body="boom")
        response = adapter.fetch()
        assert not response.ok
    """

    def __init__(
        self,
        records: Optional[list[dict[str, Any]]] = None,
        status_code: int = 200,
        body: Optional[str] = None,
    ):
        """Initialize the mock adapter.

        Args:
            records: Catalog entries to serve (default: SAMPLE_CATALOG)
            status_code: HTTP status to report
            body: Raw body to serve verbatim; overrides ``records`` when set
        """
        super().__init__(source_name="mock_api")
        self.records = records if records is not None else SAMPLE_CATALOG
        self.status_code = status_code
        self.body = body
        self.fetch_count = 0

    def fetch(self) -> ApiResponse:
        """Return the canned response."""
        self.fetch_count += 1
        body = self.body if self.body is not None else json.dumps(self.records)
        return ApiResponse(status_code=self.status_code, body=body)
