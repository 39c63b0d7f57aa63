"""Plain-text rendering of a trip estimate and of its log block."""

from __future__ import annotations

from trip_estimator.domain.entities import TripContext
from trip_estimator.domain.enums import describe_options
from trip_estimator.domain.estimator import CostEstimate

RULE = "-" * 46
LOG_SEPARATOR = "-" * 30


def format_report(ctx: TripContext, estimate: CostEstimate, currency: str = "₹") -> str:
    lines = [
        "",
        "================ TRIP SUMMARY ================",
        f"Trip Name : {ctx.trip_name}",
        f"Vehicle   : {ctx.vehicle.name}",
        f"Days      : {ctx.num_days}",
        f"Options   : {describe_options(ctx.options)}",
        RULE,
    ]
    for name, value in estimate.breakdown.items():
        lines.append(f"{name:<20} : {currency} {value:.2f}")
    lines += [
        RULE,
        f"Total Trip Cost       : {currency} {estimate.total:.2f}",
        f"(Check – recursive sum: {currency} {estimate.cross_check:.2f})",
        f"Avg cost per day      : {currency} {estimate.average_per_day:.2f}",
        "==============================================",
    ]
    return "\n".join(lines)


def format_log_block(ctx: TripContext, total: float) -> list[str]:
    """The fixed six-line block appended to the trip log per saved trip."""
    return [
        f"Trip: {ctx.trip_name}",
        f"Vehicle: {ctx.vehicle.name}",
        f"Days: {ctx.num_days}",
        f"Options: {describe_options(ctx.options)}",
        f"Total Cost: {total:.2f}",
        LOG_SEPARATOR,
    ]
