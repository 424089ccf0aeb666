"""Candidate index: trait id -> items able to grant it."""
from typing import Optional

from tripodplanner.checker import CatalogChecker
from tripodplanner.constants import CATEGORIES, NO_TRAIT
from tripodplanner.models import Item


class CandidateIndex:
    """Per-trait candidate lists over an immutable catalog (not Pydantic, internal use)."""

    def __init__(self, items: list[Item], trait_count: Optional[int] = None,
                 num_categories: int = len(CATEGORIES)):
        self.items: tuple[Item, ...] = tuple(items)
        self.checker = CatalogChecker(num_categories, trait_count)
        self.checker.validate_items(list(self.items))

        highest = max((t for it in self.items for t in it.trait_ids), default=0)
        self.trait_count: int = max(highest, trait_count or 0)
        # _candidates[t - 1] holds catalog indices, in catalog order
        self._candidates: list[list[int]] = [[] for _ in range(self.trait_count)]
        self._masks: list[int] = []
        self._build()

    def _build(self) -> None:
        for i, item in enumerate(self.items):
            mask = 0
            for trait in item.traits:
                if trait == NO_TRAIT:
                    continue
                self._candidates[trait - 1].append(i)
                mask |= 1 << (trait - 1)
            self._masks.append(mask)

    @classmethod
    def build(cls, items: list[Item], trait_count: Optional[int] = None) -> "CandidateIndex":
        return cls(items, trait_count)

    def candidates(self, trait: int) -> list[int]:
        """Catalog indices of items granting trait (1-based)."""
        return self._candidates[trait - 1]

    def item_mask(self, index: int) -> int:
        return self._masks[index]

    def unobtainable(self) -> list[int]:
        """Traits no item in the catalog grants."""
        return [t + 1 for t, c in enumerate(self._candidates) if not c]

    def __len__(self) -> int:
        return self.trait_count
