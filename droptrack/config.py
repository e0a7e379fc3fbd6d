"""
Registry configuration.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DropConfig:
    """Configuration for a DropRegistry.
    
    Attributes:
        name: Label used in log records and repr.
        collect_before_query: Run a full garbage collection before every
            query and assertion. Only needed on interpreters where
            finalizers do not run as soon as the last reference goes.
    """
    name: str = "drop-registry"
    collect_before_query: bool = False
