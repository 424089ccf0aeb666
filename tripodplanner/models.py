"""Pydantic models for items, plans, and optimizer results.

These are the FastAPI-ready schemas. Keep field names stable.
"""
from typing import NamedTuple, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field

from tripodplanner.constants import NO_TRAIT, default_capacity


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------

class Item(BaseModel):
    """An item that can be stored in the library. Immutable catalog entry."""
    model_config = ConfigDict(frozen=True)

    category: int           # library row, index into CATEGORIES
    cost: int = 0           # gold to buy; 0 for owned items
    traits: tuple[int, ...] = ()
    name: str = ""

    @computed_field
    @property
    def trait_ids(self) -> list[int]:
        return [t for t in self.traits if t != NO_TRAIT]


# ---------------------------------------------------------------------------
# Scores
# ---------------------------------------------------------------------------

class Score(NamedTuple):
    """Traits obtained (bit t-1 == trait t) and total cost of selected items."""
    traits: int = 0
    cost: int = 0

    def trait_count(self, mask: int = -1) -> int:
        return bin(self.traits & mask).count("1")

    def has(self, trait: int) -> bool:
        return bool(self.traits >> (trait - 1) & 1)

    def covers(self, mask: int) -> bool:
        return self.traits & mask == mask

    def add(self, item_mask: int, cost: int) -> "Score":
        return Score(self.traits | item_mask, self.cost + cost)


# ---------------------------------------------------------------------------
# Plan definition
# ---------------------------------------------------------------------------

class PlanDefinition(BaseModel):
    """User-defined library plan. Stable API schema."""
    id: str = ""
    name: str = ""
    capacity: dict[int, int] = Field(default_factory=default_capacity)
    priority_count: int = 0
    items: list[Item] = Field(default_factory=list)
    trait_names: list[str] = Field(default_factory=list)  # index 0 == trait 1
    priority_prune: bool = True
    redundancy_prune: bool = True
    time_limit: Optional[float] = None  # seconds; None = search to exhaustion


# ---------------------------------------------------------------------------
# Optimizer results
# ---------------------------------------------------------------------------

class Solution(BaseModel):
    """An improving assignment reported by the optimizer."""
    priority_count: int
    trait_count: int
    cost: int
    traits: int                 # raw bitmask, bit t-1 == trait t
    items: list[int]            # catalog indices of the selected items, ascending

    @computed_field
    @property
    def trait_ids(self) -> list[int]:
        return [i + 1 for i in range(self.traits.bit_length()) if self.traits >> i & 1]

    @computed_field
    @property
    def bitmask(self) -> str:
        return format(self.traits, "064b") if self.traits < 1 << 64 else format(self.traits, "b")
