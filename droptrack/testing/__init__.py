"""
droptrack - Testing Utilities

pytest helpers built on DropRegistry.

Components:
    drop_registry        - Per-test registry fixture (pytest plugin)
    DropAssertions       - Bulk release assertions
    create_tracked_items - Mint several items at once

Usage:
    def test_pool_releases_on_close(drop_registry, drop_assertions):
        pool = Pool(create_tracked_items(drop_registry, 4))
        pool.close()
        drop_assertions.assert_all_dropped()
"""

from droptrack.testing.assertions import (
    DropAssertions,
    DropSnapshot,
)

from droptrack.testing.fixtures import create_tracked_items

__all__ = [
    # Assertions
    "DropAssertions",
    "DropSnapshot",
    # Helpers
    "create_tracked_items",
]
