"""
Domain entities for a single trip estimation.

- ``TripSegment`` holds one day's raw figures; all four are non-negative.
- ``TripContext`` aggregates everything the cost pipeline reads.  Both are
  frozen so no cost component can mutate them.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import TripOption
from .errors import InvalidInput
from .vehicles import Vehicle


# ── Value Object ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class TripSegment:
    distance_km: float
    food: float
    stay: float
    toll: float
    name: str = ""

    def __post_init__(self) -> None:
        for attr in ("distance_km", "food", "stay", "toll"):
            if getattr(self, attr) < 0:
                raise InvalidInput(f"{attr} cannot be negative")

    def raw_cost(self, vehicle: Vehicle) -> float:
        """Fuel + food + stay + toll for this day, without options."""
        fuel = vehicle.calculate_fuel_cost(self.distance_km)
        return fuel + self.food + self.stay + self.toll


# ── Aggregate ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TripContext:
    trip_name: str
    vehicle: Vehicle
    segments: tuple[TripSegment, ...] = ()
    options: TripOption = TripOption.NONE

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))
        object.__setattr__(self, "options", TripOption(self.options))

    @property
    def num_days(self) -> int:
        return len(self.segments)

    @classmethod
    def from_days(
        cls,
        trip_name: str,
        vehicle: Vehicle,
        days: list[tuple[float, float, float, float]],
        options: int = 0,
    ) -> "TripContext":
        """Build a context from ``(distance, food, stay, toll)`` tuples in day order."""
        segments = tuple(
            TripSegment(*values, name=f"Day-{i}") for i, values in enumerate(days, 1)
        )
        return cls(trip_name, vehicle, segments, TripOption(options))
