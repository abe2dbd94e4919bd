"""Device Sync Test Suite.

This package contains unit and integration tests for the device catalog sync.

Test Structure:
- unit/: Unit tests for individual functions and classes
- integration/: Tests that need a real PostgreSQL database
"""
