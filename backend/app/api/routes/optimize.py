"""Library optimization endpoint.

Supports two modes:
- **Inline mode**: provide a full PlanDefinition (items, capacity, priority count).
- **Sample mode**: omit the plan to search the bundled catalog, optionally
  overriding capacity and priority count.

Every run is capped at settings.OPTIMIZE_TIME_LIMIT seconds.
"""
from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from app.core.catalog_data import CatalogDataDep
from app.core.config import settings
from tripodplanner.checker import CatalogError
from tripodplanner.models import PlanDefinition, Solution
from tripodplanner.optimizer import LibraryOptimizer

router = APIRouter(prefix="/optimize", tags=["optimize"])


class OptimizeRequest(BaseModel):
    # --- Inline mode ---
    plan: PlanDefinition | None = None

    # --- Sample mode ---
    capacity: dict[int, int] | None = None
    priority_count: int | None = None


def _run_optimizer(plan: PlanDefinition) -> list[Solution]:
    limit = settings.OPTIMIZE_TIME_LIMIT
    plan = plan.model_copy(update={
        "time_limit": min(plan.time_limit, limit) if plan.time_limit is not None else limit,
    })
    try:
        optimizer = LibraryOptimizer.from_plan(plan)
    except CatalogError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    return list(optimizer.run())


@router.post("/", response_model=list[Solution])
def run_optimize(req: OptimizeRequest, ds: CatalogDataDep) -> list[Solution]:
    """Run the library optimizer and return every improving Solution, best last.

    **Inline mode**: supply the whole plan:
    ```json
    { "plan": {"capacity": {"0": 1}, "priority_count": 1, "items": [...]} }
    ```

    **Sample mode**: search the bundled catalog:
    ```json
    { "capacity": {"0": 4, "1": 4}, "priority_count": 20 }
    ```
    """
    if req.plan is not None and (req.capacity is not None or req.priority_count is not None):
        raise HTTPException(
            status_code=422,
            detail="Provide either plan or (capacity / priority_count), not both.",
        )

    if req.plan is not None:
        if len(req.plan.items) > settings.MAX_ITEMS_PER_OPTIMIZE:
            raise HTTPException(
                status_code=422,
                detail=f"Too many items (max {settings.MAX_ITEMS_PER_OPTIMIZE}).",
            )
        plan = req.plan
    else:
        plan = ds.get_plan(req.capacity)
        if req.priority_count is not None:
            plan.priority_count = req.priority_count

    return _run_optimizer(plan)
