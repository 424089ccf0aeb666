"""
Catalog data loader: reads item / tripod CSV files into queryable DataFrames.

All methods are read-only. Constructor takes an optional resources_dir so
paths can be overridden (useful for testing and the HTTP adapter).

items.csv:  name, category, cost, trait_1, trait_2, trait_3
            category is a row name ("Helmet") or index; trait cells are tripod
            ids or tripod names, 0 / blank for an empty slot.
traits.csv: id, name[, priority]
            priority rows must come first; their count is the priority count.
"""
import logging
from pathlib import Path
from typing import Mapping, Optional

import pandas as pd

from tripodplanner.checker import CatalogError, InvalidReason
from tripodplanner.constants import CATEGORIES, CATEGORY_MAP, MAX_TRAITS, NO_TRAIT, default_capacity
from tripodplanner.models import Item, PlanDefinition

logger = logging.getLogger(__name__)

TRAIT_COLUMNS = [f"trait_{i}" for i in range(1, MAX_TRAITS + 1)]


def _to_int(value, what: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise CatalogError(InvalidReason.INVALID_VALUE, f"Invalid {what}: {value!r}") from e


class SourceDataHandler:
    """Loads and queries catalog reference data (items, tripods)."""

    ITEMS_FILE  = "items.csv"
    TRAITS_FILE = "traits.csv"

    def __init__(self, resources_dir: Path | None = None,
                 items_file: str | None = None, traits_file: str | None = None):
        if resources_dir is None:
            resources_dir = Path(__file__).parent / "resources"
        self._resources_dir = resources_dir

        self.item_table: pd.DataFrame = pd.read_csv(
            resources_dir / (items_file or self.ITEMS_FILE),
            dtype={"name": str, "category": str},
            keep_default_na=False,
        )
        for col in ["name", "cost"] + TRAIT_COLUMNS:
            if col not in self.item_table.columns:
                self.item_table[col] = "" if col == "name" else 0

        traits_path = resources_dir / (traits_file or self.TRAITS_FILE)
        if traits_path.exists():
            self.trait_table: pd.DataFrame = pd.read_csv(traits_path).set_index("id")
        else:
            self.trait_table = pd.DataFrame(columns=["name", "priority"]).rename_axis("id")
        if "priority" not in self.trait_table.columns:
            self.trait_table["priority"] = 0
        self.trait_table["priority"] = self.trait_table["priority"].fillna(0)

        self._trait_ids_by_name: dict[str, int] = {
            str(name).casefold(): int(tid) for tid, name in self.trait_table["name"].items()
        }

    # ------------------------------------------------------------------
    # Tripods
    # ------------------------------------------------------------------

    def get_trait_count(self) -> int:
        return int(self.trait_table.index.max()) if len(self.trait_table) else 0

    def get_trait_name(self, trait_id: int) -> str:
        if trait_id == NO_TRAIT:
            return "Empty"
        try:
            return str(self.trait_table.at[trait_id, "name"])
        except KeyError:
            return f"Tripod {trait_id}"

    def get_trait_names(self) -> list[str]:
        """Dense name list; index 0 == tripod 1."""
        return [self.get_trait_name(t) for t in range(1, self.get_trait_count() + 1)]

    def get_trait_id(self, value) -> int:
        """Resolve a CSV trait cell (id, name or blank) to a tripod id."""
        if value is None or (isinstance(value, float) and pd.isna(value)):
            return NO_TRAIT
        text = str(value).strip()
        if text in ("", "0"):
            return NO_TRAIT
        if text.lstrip("-").isdigit():
            return int(text)
        trait_id = self._trait_ids_by_name.get(text.casefold())
        if trait_id is None:
            raise CatalogError(InvalidReason.TRAIT_OUT_OF_RANGE, f"Unknown tripod {text!r}")
        return trait_id

    def get_priority_count(self) -> int:
        """Number of leading priority tripods in traits.csv."""
        count = 0
        flags = [bool(_to_int(p, f"priority of tripod {tid}"))
                 for tid, p in self.trait_table.sort_index()["priority"].items()]
        for flag in flags:
            if not flag:
                break
            count += 1
        if any(flags[count:]):
            logger.warning("Priority tripods after tripod %d are treated as low priority", count)
        return count

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    @staticmethod
    def get_category_id(value) -> int:
        text = str(value).strip()
        if text.lstrip("-").isdigit():
            return int(text)
        category = CATEGORY_MAP.get(text.capitalize())
        if category is None:
            raise CatalogError(
                InvalidReason.CATEGORY_OUT_OF_RANGE,
                f"Unknown category {text!r}; expected one of {CATEGORIES}")
        return category

    def get_items(self) -> list[Item]:
        items: list[Item] = []
        for row in self.item_table.itertuples(index=False):
            cost = str(row.cost).strip()
            items.append(Item(
                name=str(row.name),
                category=self.get_category_id(row.category),
                cost=_to_int(cost, f"cost of item {row.name!r}") if cost else 0,
                traits=tuple(self.get_trait_id(getattr(row, c)) for c in TRAIT_COLUMNS),
            ))
        return items

    # ------------------------------------------------------------------
    # Plans
    # ------------------------------------------------------------------

    def get_plan(self, capacity: Optional[Mapping[int, int]] = None,
                 name: str = "Sample library") -> PlanDefinition:
        """A PlanDefinition over this catalog."""
        return PlanDefinition(
            name=name,
            capacity=dict(capacity) if capacity is not None else default_capacity(),
            priority_count=self.get_priority_count(),
            items=self.get_items(),
            trait_names=self.get_trait_names(),
        )
