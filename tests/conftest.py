"""
Shared test infrastructure.

Provides small ownership-managing types that stand in for the code under
test, so the suite exercises droptrack the way its users do.
"""

from __future__ import annotations

from typing import Any

import pytest

from droptrack import DropRegistry


# =============================================================================
# Code under test stand-ins
# =============================================================================

class Shared:
    """
    Minimal reference-counted owner.
    
    Every clone shares one box; the value is let go only when the last
    clone is dropped.
    """
    
    def __init__(self, value: Any):
        self._box = {"value": value, "count": 1}
        self._dropped = False
    
    def clone(self) -> Shared:
        self._box["count"] += 1
        other = Shared.__new__(Shared)
        other._box = self._box
        other._dropped = False
        return other
    
    @property
    def count(self) -> int:
        return self._box["count"]
    
    def drop(self) -> None:
        if self._dropped:
            raise RuntimeError("clone dropped twice")
        self._dropped = True
        self._box["count"] -= 1
        if self._box["count"] == 0:
            self._box["value"] = None


class LeakyPool:
    """Pool that releases its items on close but forgets it already did."""
    
    def __init__(self, items: list):
        self._items = list(items)
    
    def close(self) -> None:
        for item in self._items:
            item.release()


class Pool:
    """Pool that owns its items and releases each exactly once on close."""
    
    def __init__(self, items: list):
        self._items = list(items)
    
    def close(self) -> None:
        items, self._items = self._items, []
        for item in items:
            item.release()


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def registry() -> DropRegistry:
    """A plain registry, not checked at teardown."""
    return DropRegistry()
