"""
Console front-end
=================

``trip-estimator``           -- interactive main menu (default)
``trip-estimator menu``      -- same as above
``trip-estimator history``   -- print the saved trip log and exit

Per-day and vehicle values are re-requested until they parse; a bad day
count cancels the trip.  Nothing raised inside a trip flow escapes the
menu loop.
"""

from __future__ import annotations

import logging

import click

from trip_estimator.config import settings
from trip_estimator.domain.entities import TripContext, TripSegment
from trip_estimator.domain.enums import MENU_VEHICLE_KINDS, TripOption, VehicleKind
from trip_estimator.domain.errors import PersistenceFailure
from trip_estimator.domain.estimator import TripEstimator
from trip_estimator.domain.parsing import parse_int, parse_non_negative, parse_yes
from trip_estimator.domain.vehicles import Vehicle, build_vehicle
from trip_estimator.infrastructure.trip_log import TripLog
from trip_estimator.reporting import format_report

logger = logging.getLogger(__name__)

_FUEL_PROMPTS = ("Enter mileage (km/l): ", "Enter fuel price per litre ({currency}): ")

_VEHICLE_PROMPTS: dict[VehicleKind, tuple[str, str]] = {
    VehicleKind.CAR: _FUEL_PROMPTS,
    VehicleKind.BIKE: _FUEL_PROMPTS,
    VehicleKind.EV: (
        "Enter range per full charge (km): ",
        "Enter cost per full charge ({currency}): ",
    ),
}


# ── Prompt helpers ────────────────────────────────────────────────────


def _ask(message: str) -> str:
    return click.prompt(message, default="", show_default=False, prompt_suffix="")


def _ask_non_negative(message: str) -> float:
    while True:
        result = parse_non_negative(_ask(message))
        if result.ok:
            return result.value
        click.echo(result.error)


def _choose_vehicle() -> Vehicle:
    while True:
        click.echo("\nChoose vehicle type:")
        click.echo("1. Petrol Car")
        click.echo("2. Bike")
        click.echo("3. Electric Vehicle")
        choice = parse_int(_ask("Enter choice: "))
        if not choice.ok:
            click.echo(choice.error)
            continue
        kind = MENU_VEHICLE_KINDS.get(choice.value)
        if kind is None:
            click.echo("Invalid choice, try again.")
            continue
        first_prompt, second_prompt = _VEHICLE_PROMPTS[kind]
        currency = settings.currency_symbol
        first = _ask_non_negative(first_prompt.format(currency=currency))
        second = _ask_non_negative(second_prompt.format(currency=currency))
        return build_vehicle(kind, first, second)


def _collect_options() -> TripOption:
    options = TripOption.NONE
    click.echo("\nSelect optional activities (y/n):")
    if parse_yes(_ask("  Include sightseeing? ")):
        options |= TripOption.SIGHTSEEING
    if parse_yes(_ask("  Include shopping? ")):
        options |= TripOption.SHOPPING
    if parse_yes(_ask("  Luxury stay? ")):
        options |= TripOption.LUXURY_STAY
    return options


# ── Flows ─────────────────────────────────────────────────────────────


def create_trip(history: TripLog) -> None:
    """Collect one trip, print its report and append it to *history*."""
    trip_name = _ask("Enter trip name: ")

    num_days = parse_int(_ask("Number of travel days: "))
    if not num_days.ok:
        click.echo("Invalid numeric input. Trip creation cancelled.")
        return
    if num_days.value <= 0:
        click.echo("Number of days must be positive.")
        return

    vehicle = _choose_vehicle()
    options = _collect_options()

    currency = settings.currency_symbol
    segments = []
    for day in range(1, num_days.value + 1):
        click.echo(f"\nDay {day} details:")
        segments.append(
            TripSegment(
                distance_km=_ask_non_negative("  Distance travelled (km): "),
                food=_ask_non_negative(f"  Food cost ({currency}): "),
                stay=_ask_non_negative(f"  Stay cost ({currency}): "),
                toll=_ask_non_negative(f"  Toll & parking ({currency}): "),
                name=f"Day-{day}",
            )
        )

    ctx = TripContext(trip_name, vehicle, tuple(segments), options)
    estimator = TripEstimator.with_extras(settings.extra_components)
    estimate = estimator.estimate(ctx)
    click.echo(format_report(ctx, estimate, currency))

    try:
        history.append(ctx, estimate.total)
    except PersistenceFailure as exc:
        click.echo(f"Unable to save trip data: {exc}")
        return
    click.echo(f"Trip summary saved to file: {history.path}")


def show_history(history: TripLog) -> None:
    click.echo("\n========= SAVED TRIP HISTORY =========")
    try:
        lines = history.read_lines()
    except PersistenceFailure as exc:
        click.echo(f"Error reading history: {exc}")
    else:
        if lines is None:
            click.echo("No history file found.")
        elif not lines:
            click.echo("No trips saved yet.")
        else:
            for line in lines:
                click.echo(line)
    click.echo("======================================")


def run_menu(history: TripLog) -> None:
    click.echo("==============================================")
    click.echo("        INTELLIGENT TRIP COST ESTIMATOR       ")
    click.echo("==============================================")

    while True:
        click.echo("\nMain Menu")
        click.echo("1. Create new Trip Estimation")
        click.echo("2. View saved trip history")
        click.echo("3. Exit")
        choice = parse_int(_ask("Enter your choice: "))
        if not choice.ok:
            click.echo(choice.error)
            continue

        if choice.value == 1:
            try:
                create_trip(history)
            except click.Abort:
                raise
            except Exception as exc:
                logger.exception("Trip creation failed")
                click.echo(f"Unexpected error: {exc}")
        elif choice.value == 2:
            show_history(history)
        elif choice.value == 3:
            click.echo("Thank you. Goodbye!")
            return
        else:
            click.echo("Invalid choice. Try again.")


# ── Commands ──────────────────────────────────────────────────────────


@click.group(invoke_without_command=True)
@click.option(
    "--history-file",
    default=None,
    help="Trip log path (defaults to HISTORY_FILE / trips_data.txt)",
)
@click.pass_context
def cli(ctx: click.Context, history_file: str | None) -> None:
    """Estimate multi-day trip costs."""
    logging.basicConfig(level=settings.log_level.upper())
    ctx.obj = TripLog(history_file or settings.history_file)
    if ctx.invoked_subcommand is None:
        run_menu(ctx.obj)


@cli.command()
@click.pass_obj
def menu(trip_log: TripLog) -> None:
    """Run the interactive main menu."""
    run_menu(trip_log)


@cli.command()
@click.pass_obj
def history(trip_log: TripLog) -> None:
    """Print the saved trip history."""
    show_history(trip_log)


if __name__ == "__main__":
    cli()
