"""
Drop Tracking Errors — Fatal error types.

Error hierarchy:
    DropTrackError (base)
    ├── DropAssertionError (also an AssertionError)
    ├── DoubleReleaseError (HALT-level)
    ├── ItemIndexError (also an IndexError)
    └── DetachedItemError

None of these are meant to be caught by the code under test. They stop
the current test at the point where an ownership invariant broke.
"""

from __future__ import annotations

from typing import Any


class DropTrackError(Exception):
    """Base error for all drop tracking errors."""
    
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DropAssertionError(DropTrackError, AssertionError):
    """
    Raised when an item's release state does not match the expectation.
    
    Subclasses AssertionError so test runners report it as a failure
    rather than an error.
    """
    
    def __init__(
        self,
        item_id: int,
        expected_dropped: bool,
        details: dict[str, Any] | None = None,
    ):
        if expected_dropped:
            message = f"{item_id} should be dropped, but was not"
        else:
            message = f"{item_id} should not be dropped, but was"
        super().__init__(message, details)
        self.item_id = item_id
        self.expected_dropped = expected_dropped


class DoubleReleaseError(DropTrackError):
    """
    CRITICAL: Raised when the same item is released a second time.
    
    This is a HALT-level error. It always points at a bug in the code
    under test (a value duplicated without going through its ownership
    transfer), never at the registry.
    """
    
    def __init__(self, item_id: int, details: dict[str, Any] | None = None):
        super().__init__(f"{item_id} is already dropped", details)
        self.item_id = item_id
        self.halt_required = True


class ItemIndexError(DropTrackError, IndexError):
    """
    Raised when an identifier does not name a tracked item.
    
    Examples:
    - Negative identifier
    - Identifier minted by a different, larger registry
    """
    
    def __init__(
        self,
        item_id: Any,
        tracked: int,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(
            f"item id {item_id!r} out of range: registry tracks {tracked} item(s)",
            details,
        )
        self.item_id = item_id
        self.tracked = tracked


class DetachedItemError(DropTrackError):
    """Raised when an item is released after its registry is gone."""
    
    def __init__(self, item_id: int, details: dict[str, Any] | None = None):
        super().__init__(
            f"{item_id} outlived its registry; release has nowhere to go",
            details,
        )
        self.item_id = item_id
