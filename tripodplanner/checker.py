"""Catalog validity checking. Pure validation, no search state."""
import logging
from enum import IntEnum, auto, unique
from typing import Mapping, Optional

from tripodplanner.constants import CATEGORIES, MAX_TRAITS, NO_TRAIT
from tripodplanner.models import Item

logger = logging.getLogger(__name__)


@unique
class InvalidReason(IntEnum):
    NONE                  = 0
    CATEGORY_OUT_OF_RANGE = auto()
    NEGATIVE_COST         = auto()
    TOO_MANY_TRAITS       = auto()
    TRAIT_OUT_OF_RANGE    = auto()
    DUPLICATE_TRAIT       = auto()
    NEGATIVE_CAPACITY     = auto()
    NEGATIVE_PRIORITY     = auto()
    INVALID_VALUE         = auto()


class CatalogError(ValueError):
    """Raised when catalog, capacity or priority input cannot be searched."""

    def __init__(self, reason: InvalidReason, message: str,
                 item_index: Optional[int] = None):
        super().__init__(message)
        self.reason = reason
        self.item_index = item_index


class CatalogChecker:
    """Validates items against the library layout before indexing."""

    def __init__(self, num_categories: int = len(CATEGORIES),
                 trait_count: Optional[int] = None):
        self.num_categories = num_categories
        self.trait_count = trait_count  # None = no upper bound on trait ids

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def check_invalidity(self, item: Item, return_1st_invalid_idx: bool = False
                         ) -> InvalidReason | tuple[InvalidReason, int]:
        """Return the first InvalidReason for an item, or NONE if valid.

        If return_1st_invalid_idx, returns (reason, 0-based trait slot or -1).
        """
        def ret(reason, idx=-1):
            return (reason, idx) if return_1st_invalid_idx else reason

        if not 0 <= item.category < self.num_categories:
            return ret(InvalidReason.CATEGORY_OUT_OF_RANGE)
        if item.cost < 0:
            return ret(InvalidReason.NEGATIVE_COST)
        if len(item.traits) > MAX_TRAITS:
            return ret(InvalidReason.TOO_MANY_TRAITS, MAX_TRAITS)

        seen: set[int] = set()
        for idx, trait in enumerate(item.traits):
            if trait == NO_TRAIT:
                continue
            if trait < 0 or (self.trait_count is not None and trait > self.trait_count):
                return ret(InvalidReason.TRAIT_OUT_OF_RANGE, idx)
            if trait in seen:
                return ret(InvalidReason.DUPLICATE_TRAIT, idx)
            seen.add(trait)
        return ret(InvalidReason.NONE)

    def validate_items(self, items: list[Item]) -> None:
        """Raise CatalogError for the first invalid item."""
        for i, item in enumerate(items):
            reason, slot = self.check_invalidity(item, return_1st_invalid_idx=True)
            if reason != InvalidReason.NONE:
                where = f" (trait slot {slot})" if slot != -1 else ""
                raise CatalogError(
                    reason, f"Item #{i:02d} {item.name!r}: {reason.name}{where}",
                    item_index=i)

    # ------------------------------------------------------------------
    # Capacity / priority
    # ------------------------------------------------------------------

    def normalize_capacity(self, capacity: Mapping[int, int],
                           items: list[Item]) -> list[int]:
        """Dense per-category capacity list. Missing categories get zero slots."""
        table = [0] * self.num_categories
        for category, free in capacity.items():
            if free < 0:
                raise CatalogError(
                    InvalidReason.NEGATIVE_CAPACITY,
                    f"Capacity for category {category} is negative: {free}")
            if 0 <= category < self.num_categories:
                table[category] = free
            else:
                logger.warning("Ignoring capacity for unknown category %s", category)

        missing = sorted({it.category for it in items} - set(capacity))
        if missing:
            logger.warning(
                "No capacity given for categories %s; their items are never selected",
                missing)
        return table

    @staticmethod
    def clamp_priority(priority_count: int, trait_count: int) -> int:
        if priority_count < 0:
            raise CatalogError(
                InvalidReason.NEGATIVE_PRIORITY,
                f"Priority count must not be negative: {priority_count}")
        if priority_count > trait_count:
            logger.warning("Priority count %d exceeds trait count %d; clamping",
                           priority_count, trait_count)
            return trait_count
        return priority_count
