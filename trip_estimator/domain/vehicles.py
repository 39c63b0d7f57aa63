"""
Vehicle fuel-cost models  (Strategy Pattern)
============================================

Formulas
--------
* **Car / Bike**:        cost = (distance / mileage) x fuel_price
* **Electric vehicle**:  cost = ceil(distance / range_per_charge) x cost_per_charge

A non-positive mileage or range yields a cost of 0 instead of dividing by
zero.  A ratio too large to represent gives an infinite cost rather than
an error.  Complexity: O(1) per call.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .enums import VehicleKind


# ── Strategy hierarchy ────────────────────────────────────────────────


def _priced(units: float, unit_price: float) -> float:
    # a free unit stays free even for an unbounded number of units
    if unit_price <= 0:
        return 0.0
    return units * unit_price


class Vehicle(ABC):
    name: str

    @abstractmethod
    def calculate_fuel_cost(self, distance_km: float) -> float: ...


@dataclass(frozen=True)
class _CombustionVehicle(Vehicle):
    mileage_km_per_litre: float
    fuel_price_per_litre: float

    def calculate_fuel_cost(self, distance_km: float) -> float:
        if self.mileage_km_per_litre <= 0:
            return 0.0
        litres = distance_km / self.mileage_km_per_litre
        return _priced(litres, self.fuel_price_per_litre)


@dataclass(frozen=True)
class Car(_CombustionVehicle):
    name: str = "Petrol Car"


@dataclass(frozen=True)
class Bike(_CombustionVehicle):
    name: str = "Bike"


@dataclass(frozen=True)
class ElectricVehicle(Vehicle):
    range_per_charge_km: float
    cost_per_charge: float
    name: str = "EV"

    def calculate_fuel_cost(self, distance_km: float) -> float:
        if self.range_per_charge_km <= 0:
            return 0.0
        charges = distance_km / self.range_per_charge_km
        if math.isfinite(charges):
            charges = math.ceil(charges)
        return _priced(charges, self.cost_per_charge)


# ── Factory ───────────────────────────────────────────────────────────


_VEHICLE_TYPES: dict[VehicleKind, type[Vehicle]] = {
    VehicleKind.CAR: Car,
    VehicleKind.BIKE: Bike,
    VehicleKind.EV: ElectricVehicle,
}


def build_vehicle(kind: VehicleKind, first: float, second: float) -> Vehicle:
    """
    Construct the vehicle for *kind* from its two numeric parameters.

    For CAR / BIKE these are (mileage km/l, fuel price per litre); for EV
    they are (range per full charge in km, cost per full charge).
    """
    return _VEHICLE_TYPES[VehicleKind(kind)](first, second)
