"""
Shared test fixtures.

The trip log always lives under ``tmp_path`` so tests never touch the
working directory's ``trips_data.txt``.
"""

import pytest

from trip_estimator.domain.entities import TripContext
from trip_estimator.domain.enums import TripOption
from trip_estimator.domain.vehicles import Car
from trip_estimator.infrastructure.trip_log import TripLog


# ── Domain fixtures ───────────────────────────────────────────────────


@pytest.fixture
def car() -> Car:
    return Car(mileage_km_per_litre=15.0, fuel_price_per_litre=100.0)


@pytest.fixture
def goa_trip(car: Car) -> TripContext:
    """Two-day Goa trip by car with luxury stay only."""
    return TripContext.from_days(
        "Goa",
        car,
        [
            (150.0, 500.0, 1000.0, 50.0),
            (100.0, 400.0, 1000.0, 30.0),
        ],
        TripOption.LUXURY_STAY,
    )


# ── Persistence fixtures ──────────────────────────────────────────────


@pytest.fixture
def log_path(tmp_path):
    return tmp_path / "trips_data.txt"


@pytest.fixture
def trip_log(log_path) -> TripLog:
    return TripLog(log_path)
