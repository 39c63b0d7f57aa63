"""
Admin / observability endpoints
===============================

GET /api/v1/admin/health      -- simple health check
GET /api/v1/admin/components  -- active cost components, in evaluation order
"""

from fastapi import APIRouter, Depends

from trip_estimator.api.dependencies import get_estimator
from trip_estimator.api.schemas import HealthResponse
from trip_estimator.domain.estimator import TripEstimator

router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health():
    return HealthResponse()


@router.get(
    "/components",
    response_model=list[str],
    summary="List the active cost components in evaluation order",
)
async def list_components(estimator: TripEstimator = Depends(get_estimator)):
    return [c.name for c in estimator.components]
