"""Public catalog endpoints. No auth required.

All data is static and loaded once at startup via the SourceDataHandler singleton.
"""
from typing import Any

from fastapi import APIRouter

from app.core.catalog_data import CatalogDataDep
from tripodplanner.constants import CATEGORIES, DEFAULT_CAPACITY
from tripodplanner.models import Item

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/categories")
def get_categories() -> list[dict[str, Any]]:
    """Library rows with their ids and default free slots."""
    return [
        {"id": idx, "name": name, "default_capacity": DEFAULT_CAPACITY}
        for idx, name in enumerate(CATEGORIES)
    ]


@router.get("/traits")
def get_traits(ds: CatalogDataDep) -> list[dict[str, Any]]:
    """Bundled tripods: id, name, and whether it is a priority tripod."""
    priority_count = ds.get_priority_count()
    return [
        {"id": tid, "name": name, "priority": tid <= priority_count}
        for tid, name in enumerate(ds.get_trait_names(), start=1)
    ]


@router.get("/items", response_model=list[Item])
def get_items(ds: CatalogDataDep) -> list[Item]:
    """Bundled catalog items in index order."""
    return ds.get_items()
