"""Employee endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, Request

from cachedrest.api.dependencies import get_filter_engine, get_store
from cachedrest.core.entities.query_spec import QuerySpec
from cachedrest.core.interfaces.resource_store import IResourceStore
from cachedrest.core.services.filter_engine import FilterEngine

router = APIRouter(tags=["employees"])


@router.get("/employees")
async def list_employees(
    request: Request,
    store: IResourceStore = Depends(get_store),
    engine: FilterEngine = Depends(get_filter_engine),
) -> list[dict[str, Any]]:
    """List employees, optionally filtered by ``firstName``, ``lastName`` and ``age``."""
    spec = QuerySpec.from_params(request.query_params)
    return [employee.to_dict() for employee in engine.apply(store.employees(), spec)]
