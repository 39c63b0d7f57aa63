"""Domain enumerations and the trip-option flag set."""

import enum


class VehicleKind(str, enum.Enum):
    CAR = "CAR"
    BIKE = "BIKE"
    EV = "EV"


# Console menu choice -> vehicle kind
MENU_VEHICLE_KINDS: dict[int, VehicleKind] = {
    1: VehicleKind.CAR,
    2: VehicleKind.BIKE,
    3: VehicleKind.EV,
}


class TripOption(enum.IntFlag):
    """Optional activities packed into one integer; any combination is valid."""

    NONE = 0
    SIGHTSEEING = 1
    SHOPPING = 2
    LUXURY_STAY = 4


# Fixed display order, independent of the order flags were set in
OPTION_LABELS: tuple[tuple[TripOption, str], ...] = (
    (TripOption.SIGHTSEEING, "Sightseeing"),
    (TripOption.SHOPPING, "Shopping"),
    (TripOption.LUXURY_STAY, "Luxury stay"),
)


def describe_options(options: int) -> str:
    """Return the comma-joined labels of the active flags, or ``"None"``."""
    labels = [label for flag, label in OPTION_LABELS if options & flag]
    return ", ".join(labels) if labels else "None"


def options_from_choices(
    sightseeing: bool = False, shopping: bool = False, luxury_stay: bool = False
) -> TripOption:
    options = TripOption.NONE
    if sightseeing:
        options |= TripOption.SIGHTSEEING
    if shopping:
        options |= TripOption.SHOPPING
    if luxury_stay:
        options |= TripOption.LUXURY_STAY
    return options
