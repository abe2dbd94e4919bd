"""Device Catalog Adapters.

Concrete implementations of the DeviceSource interface.

Available adapters:
- RestfulApiAdapter: Public REST catalog (restful_api_adapter.py)
- MockAdapter: Canned catalog for tests and offline runs (mock_adapter.py)
"""

from .mock_adapter import MockAdapter
from .restful_api_adapter import RestfulApiAdapter

__all__ = ["MockAdapter", "RestfulApiAdapter"]
