"""
Trip Cost Components  (Strategy Pattern)
========================================

Each component computes one cost category from a ``TripContext``:

* **Fuel Cost**            = sum( vehicle.calculate_fuel_cost(day.distance_km) )
* **Food / Stay / Toll**   = straight sums of the per-day fields
* **Options & Activities** = days x (500 sightseeing + 300 shopping + 800 luxury stay)

Extra components live in a static registry keyed by a stable identifier.
Unknown identifiers are skipped rather than raised, so a stale entry in the
settings never breaks an estimate.

Complexity: O(D) per component, D = number of days.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable

from .entities import TripContext
from .enums import TripOption

logger = logging.getLogger(__name__)


# ── Strategy hierarchy ────────────────────────────────────────────────


class CostComponent(ABC):
    name: str = ""

    @abstractmethod
    def compute(self, ctx: TripContext) -> float: ...


class FuelCost(CostComponent):
    name = "Fuel Cost"

    def compute(self, ctx: TripContext) -> float:
        return sum(
            ctx.vehicle.calculate_fuel_cost(s.distance_km) for s in ctx.segments
        )


class FoodCost(CostComponent):
    name = "Food Cost"

    def compute(self, ctx: TripContext) -> float:
        return sum(s.food for s in ctx.segments)


class StayCost(CostComponent):
    name = "Stay Cost"

    def compute(self, ctx: TripContext) -> float:
        return sum(s.stay for s in ctx.segments)


class TollCost(CostComponent):
    name = "Toll & Parking"

    def compute(self, ctx: TripContext) -> float:
        return sum(s.toll for s in ctx.segments)


class OptionCost(CostComponent):
    """Per-day surcharge for each active option; flags are independent."""

    name = "Options & Activities"

    RATES_PER_DAY = {
        TripOption.SIGHTSEEING: 500.0,
        TripOption.SHOPPING: 300.0,
        TripOption.LUXURY_STAY: 800.0,
    }

    def compute(self, ctx: TripContext) -> float:
        days = ctx.num_days
        extra = 0.0
        for flag, rate in self.RATES_PER_DAY.items():
            if ctx.options & flag:
                extra += rate * days
        return extra


class EmergencyBufferCost(CostComponent):
    """5 % of the base cost (fuel + food + stay + toll) across all days."""

    name = "Emergency Buffer (5%)"

    RATE = 0.05

    def compute(self, ctx: TripContext) -> float:
        base = sum(s.raw_cost(ctx.vehicle) for s in ctx.segments)
        return base * self.RATE


# ── Pipeline definition ───────────────────────────────────────────────


def base_components() -> list[CostComponent]:
    """The fixed components, in evaluation (and display) order."""
    return [FuelCost(), FoodCost(), StayCost(), TollCost(), OptionCost()]


# identifier -> factory; insertion order is the default resolution order
EXTRA_COMPONENT_REGISTRY: dict[str, Callable[[], CostComponent]] = {
    "emergency_buffer": EmergencyBufferCost,
}


def resolve_extra_components(
    names: Iterable[str],
    registry: dict[str, Callable[[], CostComponent]] | None = None,
) -> list[CostComponent]:
    """
    Instantiate the registered components named in *names*, in that order.

    Names missing from the registry, and factories that fail, are left out
    of the result.  Nothing is raised to the caller.
    """
    registry = EXTRA_COMPONENT_REGISTRY if registry is None else registry
    resolved: list[CostComponent] = []
    for name in names:
        factory = registry.get(name)
        if factory is None:
            logger.debug("Extra cost component %r is not registered – skipping", name)
            continue
        try:
            component = factory()
        except Exception:
            logger.warning("Could not build extra cost component %r", name, exc_info=True)
            continue
        if not isinstance(component, CostComponent):
            logger.warning("Factory for %r did not return a CostComponent", name)
            continue
        resolved.append(component)
    return resolved
