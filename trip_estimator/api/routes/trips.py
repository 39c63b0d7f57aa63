"""
Trip endpoints
==============

POST /api/v1/trips/estimate -- estimate a trip and (optionally) log it
GET  /api/v1/trips/history  -- raw lines of the trip history log
"""

from __future__ import annotations

import logging
import math

from fastapi import APIRouter, Depends, HTTPException

from trip_estimator.api.dependencies import get_estimator, get_trip_log
from trip_estimator.api.schemas import (
    CostLine,
    HistoryResponse,
    TripEstimateRequest,
    TripEstimateResponse,
)
from trip_estimator.domain.entities import TripContext
from trip_estimator.domain.enums import describe_options, options_from_choices
from trip_estimator.domain.errors import PersistenceFailure
from trip_estimator.domain.estimator import TripEstimator
from trip_estimator.domain.vehicles import build_vehicle
from trip_estimator.infrastructure.trip_log import TripLog

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/trips", tags=["trips"])


@router.post(
    "/estimate",
    response_model=TripEstimateResponse,
    summary="Estimate the cost of a multi-day trip",
)
def estimate_trip(
    body: TripEstimateRequest,
    estimator: TripEstimator = Depends(get_estimator),
    trip_log: TripLog = Depends(get_trip_log),
):
    vehicle = build_vehicle(body.vehicle.kind, *body.vehicle.parameters())
    options = options_from_choices(body.sightseeing, body.shopping, body.luxury_stay)
    ctx = TripContext.from_days(
        body.trip_name,
        vehicle,
        [(d.distance_km, d.food, d.stay, d.toll) for d in body.days],
        options,
    )
    estimate = estimator.estimate(ctx)
    if not math.isfinite(estimate.total):
        raise HTTPException(status_code=422, detail="Trip cost is too large to represent")

    response = TripEstimateResponse(
        trip_name=ctx.trip_name,
        vehicle=vehicle.name,
        days=ctx.num_days,
        options=describe_options(ctx.options),
        breakdown=[
            CostLine(name=name, amount=round(value, 2))
            for name, value in estimate.breakdown.items()
        ],
        total=round(estimate.total, 2),
        cross_check=round(estimate.cross_check, 2),
        average_per_day=round(estimate.average_per_day, 2),
    )

    # ── Persist (failure never voids the estimate) ───────────────
    if body.save:
        try:
            trip_log.append(ctx, estimate.total)
            response.saved = True
        except PersistenceFailure as exc:
            logger.error("Trip %r estimated but not saved: %s", ctx.trip_name, exc)
            response.save_error = str(exc)
    return response


@router.get(
    "/history",
    response_model=HistoryResponse,
    summary="Raw trip history log",
)
def get_history(trip_log: TripLog = Depends(get_trip_log)):
    try:
        lines = trip_log.read_lines()
    except PersistenceFailure as exc:
        raise HTTPException(status_code=503, detail=f"Error reading history: {exc}")
    if lines is None:
        return HistoryResponse(lines=[], exists=False)
    return HistoryResponse(lines=lines)
