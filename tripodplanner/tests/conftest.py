"""Shared fixtures for tripodplanner unit tests.

SourceDataHandler loads the bundled sample catalog CSVs; it is session-scoped.
Small hand-made catalogs live here so scenario tests and property tests share them.
"""
import pytest

from tripodplanner import Item, SourceDataHandler


@pytest.fixture(scope="session")
def ds() -> SourceDataHandler:
    """Real SourceDataHandler using bundled sample resources. Loaded once per run."""
    return SourceDataHandler()


@pytest.fixture
def abc_items() -> list[Item]:
    """A: row 0, cost 5, [1]; B: row 1, cost 3, [1, 2]; C: row 0, cost 1, [2]."""
    return [
        Item(name="A", category=0, cost=5, traits=(1,)),
        Item(name="B", category=1, cost=3, traits=(1, 2)),
        Item(name="C", category=0, cost=1, traits=(2,)),
    ]


@pytest.fixture
def mixed_items() -> list[Item]:
    """Eight items over three rows; items 1 + 2 obtain both priority tripods."""
    return [
        Item(category=0, cost=4, traits=(1, 3)),
        Item(category=1, cost=2, traits=(2,)),
        Item(category=1, cost=1, traits=(1, 4)),
        Item(category=2, cost=3, traits=(2, 5)),
        Item(category=0, cost=1, traits=(3,)),
        Item(category=1, cost=5, traits=(5, 6)),
        Item(category=2, cost=2, traits=(6,)),
        Item(category=0, cost=0, traits=(4, 5)),
    ]


@pytest.fixture
def mixed_capacity() -> dict[int, int]:
    return {0: 1, 1: 2, 2: 1}
