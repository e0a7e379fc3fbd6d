"""
Test Fixtures - pytest integration.

Registered as a pytest plugin, so the fixtures are available in any test
once droptrack is installed.

Provides:
    - drop_registry: a fresh registry per test, checked at teardown
    - drop_assertions: DropAssertions over that registry
    - create_tracked_items: mint several items at once
"""

from __future__ import annotations

from typing import Iterator

import pytest

from droptrack.config import DropConfig
from droptrack.item import Item
from droptrack.registry import DropRegistry
from droptrack.testing.assertions import DropAssertions


def create_tracked_items(registry: DropRegistry, count: int) -> list[Item]:
    """
    Mint `count` items.
    
    Args:
        registry: Registry to mint from
        count: Number of items
        
    Returns:
        Items in mint order; their ids are consecutive.
    """
    return [registry.new_item()[1] for _ in range(count)]


@pytest.fixture
def drop_registry(request: pytest.FixtureRequest) -> Iterator[DropRegistry]:
    """A registry for one test.
    
    Fails the test at teardown if a double release happened in a
    finalizer and was never reported.
    """
    registry = DropRegistry(DropConfig(name=request.node.name))
    yield registry
    if registry.fault_pending:
        registry.check()


@pytest.fixture
def drop_assertions(drop_registry: DropRegistry) -> DropAssertions:
    """Bulk assertions over drop_registry."""
    return DropAssertions(drop_registry)
