"""Device Catalog Sync Package.

This package contains the services that keep the device catalog in sync with
the public REST catalog:
- source_extractor: Fetches the raw device catalog from the REST endpoint
- normalizer: Parses the payload, resolves field spellings, builds and dedupes records
- storage: Persists device records (PostgreSQL or in-memory) with partial failure tolerance
- sync: Orchestrates one end-to-end sync run
"""

__version__ = "0.1.0"
