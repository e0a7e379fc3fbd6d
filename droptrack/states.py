"""
Item State Model — the per-item release lifecycle.

Each tracked item has exactly two states:

    LIVE ──release──▶ RELEASED

The transition is one-directional. RELEASED → RELEASED is the
double-release condition and is never valid.
"""

from __future__ import annotations

from enum import Enum


class DropState(Enum):
    """Release lifecycle of a tracked item."""
    LIVE = "live"
    RELEASED = "released"
    
    @classmethod
    def of(cls, dropped: bool) -> DropState:
        """Map a registry slot value to its state."""
        return cls.RELEASED if dropped else cls.LIVE


# Valid state transitions (from -> to)
VALID_TRANSITIONS: dict[DropState, set[DropState]] = {
    DropState.LIVE: {DropState.RELEASED},
    DropState.RELEASED: set(),
}


def is_valid_transition(from_state: DropState, to_state: DropState) -> bool:
    """Check if a state transition is valid."""
    return to_state in VALID_TRANSITIONS.get(from_state, set())
