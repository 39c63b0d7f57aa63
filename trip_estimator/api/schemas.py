"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, model_validator

from trip_estimator.domain.enums import VehicleKind

# Parameters each vehicle kind needs, in ``build_vehicle`` order
_VEHICLE_PARAMETERS: dict[VehicleKind, tuple[str, str]] = {
    VehicleKind.CAR: ("mileage_km_per_litre", "fuel_price_per_litre"),
    VehicleKind.BIKE: ("mileage_km_per_litre", "fuel_price_per_litre"),
    VehicleKind.EV: ("range_per_charge_km", "cost_per_charge"),
}


def _amount(default=..., **kwargs):
    """A finite, non-negative float field."""
    return Field(default, ge=0, allow_inf_nan=False, **kwargs)


# ── Requests ──────────────────────────────────────────────────────────


class VehicleRequest(BaseModel):
    kind: VehicleKind
    # CAR / BIKE
    mileage_km_per_litre: Optional[float] = _amount(None)
    fuel_price_per_litre: Optional[float] = _amount(None)
    # EV
    range_per_charge_km: Optional[float] = _amount(None)
    cost_per_charge: Optional[float] = _amount(None)

    @model_validator(mode="after")
    def _require_kind_parameters(self) -> "VehicleRequest":
        missing = [
            name for name in _VEHICLE_PARAMETERS[self.kind] if getattr(self, name) is None
        ]
        if missing:
            raise ValueError(f"{self.kind.value} requires {', '.join(missing)}")
        return self

    def parameters(self) -> tuple[float, float]:
        """The two numeric parameters ``build_vehicle`` expects for this kind."""
        first, second = _VEHICLE_PARAMETERS[self.kind]
        return getattr(self, first), getattr(self, second)


class DayRequest(BaseModel):
    distance_km: float = _amount()
    food: float = _amount(0)
    stay: float = _amount(0)
    toll: float = _amount(0)


class TripEstimateRequest(BaseModel):
    # one log line per field, so no control characters
    trip_name: str = Field(..., max_length=200, pattern=r"^[^\x00-\x1f\x7f]*$")
    vehicle: VehicleRequest
    days: list[DayRequest] = Field(..., min_length=1)
    sightseeing: bool = False
    shopping: bool = False
    luxury_stay: bool = False
    save: bool = Field(
        True, description="Append the summary to the trip history log."
    )


# ── Responses ─────────────────────────────────────────────────────────


class CostLine(BaseModel):
    name: str
    amount: float


class TripEstimateResponse(BaseModel):
    trip_name: str
    vehicle: str
    days: int
    options: str
    breakdown: list[CostLine]
    total: float
    cross_check: float
    average_per_day: float
    saved: bool = False
    save_error: Optional[str] = None


class HistoryResponse(BaseModel):
    lines: list[str] = []
    exists: bool = True


class HealthResponse(BaseModel):
    status: str = "ok"
