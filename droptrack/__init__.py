"""
droptrack - Assert when tracked items are released.

Helps test code that manages the lifetime of other objects (reference
counted wrappers, containers, pools, caches):

    - Assert that an item was released
    - Assert that an item was not released
    - Assert that no item was released more than once (checked implicitly)

Public API (stable):
    DropRegistry    - Mints items and records their release.
    Item            - A tracked item. Released explicitly, via `with`, or
                      when its last reference goes away.
    DropConfig      - Registry configuration.

Example:
    from droptrack import DropRegistry

    registry = DropRegistry()
    item_id, item = registry.new_item()

    shared = [item, item]
    del item
    shared.pop()
    registry.assert_no_drop(item_id)

    shared.pop()
    registry.assert_drop(item_id)

Errors:
    DropAssertionError  - assert_drop / assert_no_drop mismatch
    DoubleReleaseError  - the same item released twice
    ItemIndexError      - identifier not minted by this registry
    DetachedItemError   - item released after its registry was gone
"""

from droptrack.config import DropConfig
from droptrack.errors import (
    DetachedItemError,
    DoubleReleaseError,
    DropAssertionError,
    DropTrackError,
    ItemIndexError,
)
from droptrack.item import Item
from droptrack.registry import DropRegistry
from droptrack.states import DropState

__version__ = "0.1.0"

__all__ = [
    "DropRegistry",
    "Item",
    "DropConfig",
    "DropState",
    # Errors
    "DropTrackError",
    "DropAssertionError",
    "DoubleReleaseError",
    "ItemIndexError",
    "DetachedItemError",
]
