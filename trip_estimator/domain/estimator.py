"""
Trip Estimation Pipeline
========================

Runs every cost component once over a ``TripContext`` and folds the
results into a total in the same pass.  The breakdown keeps evaluation
order, which is also the report order.

Cross-check
-----------
Day-wise raw costs (fuel + food + stay + toll) are summed again with a
recursive helper.  That figure deliberately leaves out options and extra
components, so it matches ``Fuel + Food + Stay + Toll`` rather than the
grand total.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Sequence

from .costs import CostComponent, base_components, resolve_extra_components
from .entities import TripContext
from .errors import InvalidInput


@dataclass(frozen=True)
class CostEstimate:
    breakdown: dict[str, float] = field(default_factory=dict)
    total: float = 0.0
    cross_check: float = 0.0
    num_days: int = 0

    @property
    def average_per_day(self) -> float:
        return self.total / self.num_days if self.num_days else 0.0


def recursive_sum(
    values: Sequence[float], lo: int = 0, hi: Optional[int] = None
) -> float:
    """
    Sum ``values[lo:hi]`` recursively by halving the range.

    Recursion depth is O(log n), so trips of any length stay well inside
    the interpreter's recursion limit.
    """
    if hi is None:
        hi = len(values)
    if hi <= lo:
        return 0.0
    if hi - lo == 1:
        return float(values[lo])
    mid = (lo + hi) // 2
    return recursive_sum(values, lo, mid) + recursive_sum(values, mid, hi)


class TripEstimator:
    """High-level API used by the console flow and the HTTP layer."""

    def __init__(self, components: Optional[list[CostComponent]] = None):
        self.components = components if components is not None else base_components()

    @classmethod
    def with_extras(cls, extra_names: Sequence[str]) -> "TripEstimator":
        """Base pipeline followed by whichever *extra_names* resolve."""
        return cls(base_components() + resolve_extra_components(extra_names))

    def estimate(self, ctx: TripContext) -> CostEstimate:
        if ctx.num_days <= 0:
            raise InvalidInput("a trip needs at least one day")

        breakdown: dict[str, float] = {}
        total = 0.0
        for component in self.components:
            if component.name in breakdown:
                raise ValueError(f"duplicate cost component name {component.name!r}")
            value = component.compute(ctx)
            breakdown[component.name] = value
            total += value

        day_costs = [s.raw_cost(ctx.vehicle) for s in ctx.segments]
        return CostEstimate(
            breakdown=breakdown,
            total=total,
            cross_check=recursive_sum(day_costs),
            num_days=ctx.num_days,
        )
