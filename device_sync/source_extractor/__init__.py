"""Source Extractor.

Fetches the raw device catalog from an external API and hands the response
body to the normalizer untouched.

Main components:
- DeviceSource: Abstract base class for all catalog sources
- ApiResponse: Data class for the raw HTTP response
- Adapters: Source-specific implementations (in adapters/ directory)
"""

from .base import ApiResponse, DeviceSource

__all__ = ["DeviceSource", "ApiResponse"]
