"""
Drop Registry — the authoritative release table for tracked items.

This is the main entry point of droptrack. A registry mints Items and
records, per item, whether it has been released. Tests then assert on
that record.

Architecture:
    1. Test mints an item (new_item) — a LIVE slot is appended
    2. Item is handed to the code under test
    3. Item is released (explicitly, via `with`, or by its finalizer)
    4. Item notifies the registry (record_release) — slot flips to RELEASED
    5. Test asserts (assert_drop / assert_no_drop)

A second release of the same slot is a double release. It raises
DoubleReleaseError and is latched on the registry, so it surfaces even
when it happened inside a finalizer where exceptions cannot propagate.

Usage:
    registry = DropRegistry()
    item_id, item = registry.new_item()

    container.add(item)
    del item
    registry.assert_no_drop(item_id)

    container.clear()
    registry.assert_drop(item_id)
"""

from __future__ import annotations

import gc
import logging
import weakref
from typing import Any

from .config import DropConfig
from .errors import DoubleReleaseError, DropAssertionError, ItemIndexError
from .item import Item
from .states import DropState, is_valid_transition

logger = logging.getLogger(__name__)


class DropRegistry:
    """
    The Drop Registry — single authority for item release state.

    This class:
    1. Mints items with monotonically increasing identifiers
    2. Records each item's single release
    3. Asserts on release state
    4. Latches double releases as a fatal fault

    Not thread-safe. One registry belongs to one test scenario.
    """

    def __init__(self, config: DropConfig | None = None) -> None:
        self.config = config or DropConfig()
        self._drops = 0
        self._is_dropped: list[bool] = []
        self._fault: DoubleReleaseError | None = None
        self._fault_surfaced = False
        # Shared by every minted item; doubles as this registry's identity.
        self._ref = weakref.ref(self)

    def __repr__(self) -> str:
        return (
            f"DropRegistry(name={self.config.name!r}, "
            f"tracked={len(self._is_dropped)}, dropped={self._drops})"
        )

    def __enter__(self) -> DropRegistry:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.check()

    # =========================================================================
    # Minting
    # =========================================================================

    def new_item(self) -> tuple[int, Item]:
        """
        Mint a new tracked item.

        Returns:
            (item_id, item). The id equals the number of items tracked
            before this call, so the first item is 0.
        """
        self.check()
        item_id = len(self._is_dropped)
        self._is_dropped.append(False)
        logger.debug(f"[{self.config.name}] minted item {item_id}")
        return item_id, Item(item_id, self._ref)

    mint_item = new_item

    # =========================================================================
    # Queries
    # =========================================================================

    def num_tracked_items(self) -> int:
        """Number of items minted so far."""
        self._prepare_query()
        return len(self._is_dropped)

    def num_dropped_items(self) -> int:
        """Number of items released so far."""
        self._prepare_query()
        return self._drops

    tracked_count = num_tracked_items
    released_count = num_dropped_items

    def is_dropped(self, item_id: int) -> bool:
        """Whether the item has been released."""
        self._prepare_query()
        return self._slot(item_id)

    def state_of(self, item_id: int) -> DropState:
        """Lifecycle state of the item."""
        return DropState.of(self.is_dropped(item_id))

    def states(self) -> tuple[DropState, ...]:
        """Lifecycle state of every tracked item, in id order."""
        self._prepare_query()
        return tuple(DropState.of(dropped) for dropped in self._is_dropped)

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_drop(self, item_id: int) -> None:
        """
        Assert that an item was released.

        Raises:
            DropAssertionError: If the item was not released.
        """
        if not self.is_dropped(item_id):
            raise DropAssertionError(item_id, expected_dropped=True)

    def assert_no_drop(self, item_id: int) -> None:
        """
        Assert that an item was not released.

        Raises:
            DropAssertionError: If the item was released.
        """
        if self.is_dropped(item_id):
            raise DropAssertionError(item_id, expected_dropped=False)

    assert_released = assert_drop
    assert_not_released = assert_no_drop

    # =========================================================================
    # Faults
    # =========================================================================

    @property
    def fault(self) -> DoubleReleaseError | None:
        """The latched double release, if one happened."""
        return self._fault

    @property
    def fault_pending(self) -> bool:
        """Whether a double release happened that no caller has seen yet."""
        return self._fault is not None and not self._fault_surfaced

    def check(self) -> None:
        """Re-raise a latched double release."""
        if self._fault is not None:
            self._fault_surfaced = True
            raise self._fault

    # =========================================================================
    # Release path (Item only)
    # =========================================================================

    def record_release(self, item_id: int) -> None:
        """
        Record the release of an item.

        Called by Item when it is released. Not part of the test-facing
        API.

        Raises:
            DoubleReleaseError: If the item was already released.
        """
        if self.fault_pending:
            self.check()
        error = self.latch_release(item_id)
        if error is not None:
            if error is self._fault:
                self._fault_surfaced = True
            raise error

    def latch_release(self, item_id: int) -> DoubleReleaseError | None:
        """
        Record the release of an item without raising a double release.

        Used by the Item finalizer, where an exception cannot propagate.
        The double release is latched and returned instead.
        """
        current = DropState.of(self._slot(item_id))
        if not is_valid_transition(current, DropState.RELEASED):
            error = DoubleReleaseError(
                item_id,
                details={"registry": self.config.name},
            )
            if self._fault is None:
                self._fault = error
            logger.error(f"[{self.config.name}] {error.message}")
            return error

        self._is_dropped[item_id] = True
        self._drops += 1
        logger.debug(f"[{self.config.name}] released item {item_id}")
        return None

    # =========================================================================
    # Internals
    # =========================================================================

    def _prepare_query(self) -> None:
        if self.config.collect_before_query:
            gc.collect()
        self.check()

    def _slot(self, item_id: Any) -> bool:
        valid = (
            isinstance(item_id, int)
            and not isinstance(item_id, bool)
            and 0 <= item_id < len(self._is_dropped)
        )
        if not valid:
            raise ItemIndexError(item_id, len(self._is_dropped))
        return self._is_dropped[item_id]
