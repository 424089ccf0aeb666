"""SourceDataHandler singleton, loaded once at startup, shared across all requests."""
from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from tripodplanner import SourceDataHandler


@lru_cache(maxsize=1)
def get_catalog_data() -> SourceDataHandler:
    return SourceDataHandler()


CatalogDataDep = Annotated[SourceDataHandler, Depends(get_catalog_data)]
