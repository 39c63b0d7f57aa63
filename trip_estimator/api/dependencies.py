"""FastAPI dependency injection helpers."""

from trip_estimator.config import settings
from trip_estimator.domain.estimator import TripEstimator
from trip_estimator.infrastructure.trip_log import TripLog


def get_trip_log() -> TripLog:
    """Trip history log at the configured path."""
    return TripLog(settings.history_file)


def get_estimator() -> TripEstimator:
    """Base pipeline plus the configured extras, resolved per request."""
    return TripEstimator.with_extras(settings.extra_components)
