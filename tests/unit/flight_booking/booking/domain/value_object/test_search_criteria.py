from datetime import date

import pytest

from flight_booking.booking.domain.enum import CabinClass, TripType
from flight_booking.booking.domain.value_object import (
    Airport,
    FlightSegment,
    PassengerCount,
    SearchCriteria,
)


@pytest.fixture
def outbound(dxb, lhr):
    return FlightSegment(origin=dxb, destination=lhr, departure_date=date(2026, 7, 15))


@pytest.fixture
def inbound(dxb, lhr):
    return FlightSegment(origin=lhr, destination=dxb, departure_date=date(2026, 7, 22))


class TestAirport:
    def test_code_is_normalized(self):
        airport = Airport(code="dxb", name="Dubai", city="Dubai", country="UAE")
        assert airport.code == "DXB"

    def test_invalid_code_raises_error(self):
        with pytest.raises(ValueError):
            Airport(code="DUBAI", name="Dubai", city="Dubai", country="UAE")


class TestPassengerCount:
    def test_total(self):
        assert PassengerCount(adults=2, children=1, infants=1).total == 4

    def test_defaults(self):
        count = PassengerCount(adults=1)
        assert count.children == 0
        assert count.infants == 0

    def test_zero_adults_raises_error(self):
        with pytest.raises(ValueError, match="Adults must be between 1 and 9"):
            PassengerCount(adults=0)

    def test_negative_children_raises_error(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            PassengerCount(adults=1, children=-1)

    def test_total_over_nine_raises_error(self):
        with pytest.raises(ValueError, match="Total passengers must be between 1 and 9"):
            PassengerCount(adults=5, children=5)

    def test_infants_exceeding_adults_raises_error(self):
        with pytest.raises(ValueError, match="infants cannot exceed"):
            PassengerCount(adults=1, infants=2)

    def test_nine_passengers_is_valid(self):
        assert PassengerCount(adults=3, children=3, infants=3).total == 9


class TestSearchCriteria:
    def test_one_way(self, outbound):
        criteria = SearchCriteria(
            trip_type=TripType.ONE_WAY,
            segments=[outbound],
            passengers=PassengerCount(adults=1),
        )
        assert criteria.segments == (outbound,)
        assert criteria.cabin_class == CabinClass.ECONOMY

    def test_one_way_with_two_segments_raises_error(self, outbound, inbound):
        with pytest.raises(ValueError, match="exactly 1 segment"):
            SearchCriteria(
                trip_type=TripType.ONE_WAY,
                segments=[outbound, inbound],
                passengers=PassengerCount(adults=1),
            )

    def test_round_trip(self, outbound, inbound):
        criteria = SearchCriteria(
            trip_type=TripType.ROUND_TRIP,
            segments=[outbound, inbound],
            passengers=PassengerCount(adults=2),
        )
        assert len(criteria.segments) == 2

    def test_round_trip_return_must_reverse_outbound(self, outbound, dxb):
        other = Airport(code="CDG", name="Charles de Gaulle", city="Paris", country="FR")
        wrong_return = FlightSegment(
            origin=other, destination=dxb, departure_date=date(2026, 7, 22)
        )
        with pytest.raises(ValueError, match="reverse the outbound"):
            SearchCriteria(
                trip_type=TripType.ROUND_TRIP,
                segments=[outbound, wrong_return],
                passengers=PassengerCount(adults=1),
            )

    def test_round_trip_return_date_must_be_after_departure(self, outbound, dxb, lhr):
        same_day_return = FlightSegment(
            origin=lhr, destination=dxb, departure_date=outbound.departure_date
        )
        with pytest.raises(ValueError, match="Return date must be after"):
            SearchCriteria(
                trip_type=TripType.ROUND_TRIP,
                segments=[outbound, same_day_return],
                passengers=PassengerCount(adults=1),
            )

    def test_multi_city_allows_up_to_five_segments(self, outbound):
        criteria = SearchCriteria(
            trip_type=TripType.MULTI_CITY,
            segments=[outbound] * 5,
            passengers=PassengerCount(adults=1),
        )
        assert len(criteria.segments) == 5

    def test_multi_city_with_six_segments_raises_error(self, outbound):
        with pytest.raises(ValueError, match="between 1 and 5 segments"):
            SearchCriteria(
                trip_type=TripType.MULTI_CITY,
                segments=[outbound] * 6,
                passengers=PassengerCount(adults=1),
            )
