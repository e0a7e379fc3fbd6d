"""
Tracked Item — the handle whose release the registry observes.

An Item reports its own release to the registry that minted it. There
are three ways for that to happen:
    - item.release()          explicit
    - with item: ...          released on block exit
    - last reference dropped  released by the finalizer

The back-reference is a weakref: an item never keeps its registry alive.
"""

from __future__ import annotations

import logging
import weakref
from typing import TYPE_CHECKING, Any

from .errors import DetachedItemError

if TYPE_CHECKING:
    from .registry import DropRegistry

logger = logging.getLogger(__name__)


class Item:
    """
    An item tracked by DropRegistry.

    Created by DropRegistry.new_item(); never construct directly.

    Example:
        item_id, item = registry.new_item()
        with item:
            registry.assert_no_drop(item_id)
        registry.assert_drop(item_id)
    """

    __slots__ = ("_id", "_owner", "_released", "__weakref__")

    def __init__(self, item_id: int, owner: weakref.ref[DropRegistry]):
        self._id = item_id
        self._owner = owner
        self._released = False

    @property
    def id(self) -> int:
        """Identifier of this item within its registry."""
        return self._id

    @property
    def released(self) -> bool:
        """Whether this handle has delivered a release."""
        return self._released

    def release(self) -> None:
        """
        Release this item.

        Every call notifies the registry, so calling it twice is a
        double release.

        Raises:
            DoubleReleaseError: If the item was already released.
            DetachedItemError: If the registry no longer exists.
        """
        owner = self._owner()
        if owner is None:
            raise DetachedItemError(self._id)
        self._released = True
        owner.record_release(self._id)

    def __enter__(self) -> Item:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __del__(self) -> None:
        if self._released:
            return
        self._released = True
        owner = self._owner()
        if owner is None:
            logger.warning(f"item {self._id} finalized after its registry was gone")
            return
        # A double release here is latched and re-raised by the next
        # registry call.
        owner.latch_release(self._id)

    def __copy__(self) -> Item:
        # Raw duplicate: same id and registry, released independently.
        duplicate = Item(self._id, self._owner)
        duplicate._released = self._released
        return duplicate

    def __deepcopy__(self, memo: dict[int, Any]) -> Item:
        return self.__copy__()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self._id == other._id and self._owner is other._owner

    def __hash__(self) -> int:
        return hash((self._id, id(self._owner)))

    def __repr__(self) -> str:
        return f"Item(id={self._id})"
