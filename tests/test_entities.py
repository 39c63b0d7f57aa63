"""Unit tests for trip segments, the trip context and option flags."""

import dataclasses

import pytest

from trip_estimator.domain.entities import TripContext, TripSegment
from trip_estimator.domain.enums import (
    TripOption,
    describe_options,
    options_from_choices,
)
from trip_estimator.domain.errors import InvalidInput
from trip_estimator.domain.vehicles import Car, ElectricVehicle


class TestTripSegment:
    def test_raw_cost_adds_fuel_and_expenses(self):
        seg = TripSegment(distance_km=150, food=500, stay=1000, toll=50)
        assert seg.raw_cost(Car(15, 100)) == 1000 + 500 + 1000 + 50

    def test_raw_cost_with_ev(self):
        seg = TripSegment(250, 0, 0, 0)
        assert seg.raw_cost(ElectricVehicle(200, 300)) == 600

    @pytest.mark.parametrize("field", ["distance_km", "food", "stay", "toll"])
    def test_negative_field_rejected(self, field):
        values = dict(distance_km=1.0, food=1.0, stay=1.0, toll=1.0)
        values[field] = -0.01
        with pytest.raises(InvalidInput):
            TripSegment(**values)

    def test_zero_values_allowed(self):
        assert TripSegment(0, 0, 0, 0).raw_cost(Car(15, 100)) == 0

    def test_segment_is_immutable(self):
        seg = TripSegment(1, 2, 3, 4)
        with pytest.raises(dataclasses.FrozenInstanceError):
            seg.food = 10  # type: ignore[misc]


class TestTripContext:
    def test_from_days_labels_in_order(self, goa_trip):
        assert [s.name for s in goa_trip.segments] == ["Day-1", "Day-2"]
        assert goa_trip.segments[0].distance_km == 150.0
        assert goa_trip.num_days == 2

    def test_segments_stored_as_tuple(self, car):
        ctx = TripContext("X", car, [TripSegment(1, 1, 1, 1)])
        assert isinstance(ctx.segments, tuple)

    def test_options_coerced_to_flag(self, car):
        ctx = TripContext("X", car, (), 5)
        assert ctx.options == TripOption.SIGHTSEEING | TripOption.LUXURY_STAY

    def test_context_is_immutable(self, goa_trip):
        with pytest.raises(dataclasses.FrozenInstanceError):
            goa_trip.trip_name = "Other"  # type: ignore[misc]


class TestTripOptions:
    def test_flag_values(self):
        assert TripOption.SIGHTSEEING == 1
        assert TripOption.SHOPPING == 2
        assert TripOption.LUXURY_STAY == 4

    def test_describe_none(self):
        assert describe_options(0) == "None"

    def test_describe_fixed_order(self):
        flags = TripOption.SHOPPING | TripOption.SIGHTSEEING
        assert describe_options(flags) == "Sightseeing, Shopping"

    def test_describe_all(self):
        assert describe_options(7) == "Sightseeing, Shopping, Luxury stay"

    def test_describe_luxury_only(self):
        assert describe_options(TripOption.LUXURY_STAY) == "Luxury stay"

    def test_options_from_choices(self):
        assert options_from_choices() == TripOption.NONE
        assert options_from_choices(shopping=True, luxury_stay=True) == 6
