from datetime import date, datetime
from decimal import Decimal

import pytest

from flight_booking.booking.domain.enum import (
    CabinClass,
    Gender,
    InsuranceType,
    PassengerType,
    SeatPosition,
    SeatType,
    TripType,
)
from flight_booking.booking.domain.value_object import (
    Airline,
    Airport,
    BaggageExtra,
    ContactInfo,
    FareBreakdown,
    Flight,
    FlightPoint,
    FlightPrice,
    FlightSegment,
    FlightSegmentDetail,
    InsuranceExtra,
    LoungeExtra,
    MealExtra,
    PassengerCount,
    PassengerInfo,
    PassportInfo,
    SearchCriteria,
    Seat,
)
from flight_booking.shared.domain import Currency

DXB = Airport(code="DXB", name="Dubai International Airport", city="Dubai", country="UAE")
LHR = Airport(code="LHR", name="London Heathrow Airport", city="London", country="UK")


@pytest.fixture
def dxb():
    return DXB


@pytest.fixture
def lhr():
    return LHR


@pytest.fixture
def search_criteria():
    """往復の検索条件フィクスチャ"""
    return SearchCriteria(
        trip_type=TripType.ROUND_TRIP,
        segments=[
            FlightSegment(origin=DXB, destination=LHR, departure_date=date(2026, 7, 15)),
            FlightSegment(origin=LHR, destination=DXB, departure_date=date(2026, 7, 22)),
        ],
        passengers=PassengerCount(adults=2, children=1),
        cabin_class=CabinClass.BUSINESS,
    )


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        flight_id: str = "flight-ey-11",
        base_fare: Decimal = Decimal("700"),
        taxes: Decimal = Decimal("100"),
        fees: Decimal = Decimal("50"),
        currency: str = "USD",
    ) -> Flight:
        return Flight(
            id=flight_id,
            airline=Airline(code="EY", name="Etihad Airways", logo="/logos/ey.png"),
            flight_number="EY11",
            segments=[
                FlightSegmentDetail(
                    departure=FlightPoint(
                        airport=DXB,
                        date_time=datetime(2026, 7, 15, 14, 30),
                        terminal="3",
                    ),
                    arrival=FlightPoint(
                        airport=LHR,
                        date_time=datetime(2026, 7, 15, 19, 0),
                        terminal="4",
                    ),
                    duration=450,
                    aircraft="Boeing 787-9",
                )
            ],
            price=FlightPrice(
                amount=base_fare + taxes + fees,
                currency=Currency(currency),
                breakdown=FareBreakdown(base_fare=base_fare, taxes=taxes, fees=fees),
            ),
            cabin_class=CabinClass.BUSINESS,
            available_seats=28,
        )

    return _factory


@pytest.fixture
def create_seat():
    """Seat を生成する Factory fixture"""

    def _factory(
        row: int = 5,
        column: str = "A",
        price: Decimal = Decimal("50"),
        seat_type: SeatType = SeatType.EXTRA_LEGROOM,
        position: SeatPosition = SeatPosition.WINDOW,
    ) -> Seat:
        return Seat.at(row, column, type=seat_type, position=position, price=price)

    return _factory


@pytest.fixture
def create_passenger():
    """PassengerInfo を生成する Factory fixture"""

    def _factory(
        passenger_id: str = "passenger-1",
        first_name: str = "Ahmed",
        passenger_type: PassengerType = PassengerType.ADULT,
        with_contact: bool = False,
    ) -> PassengerInfo:
        return PassengerInfo(
            id=passenger_id,
            type=passenger_type,
            first_name=first_name,
            last_name="Al-Mansoori",
            date_of_birth=date(1985, 3, 20),
            gender=Gender.MALE,
            passport=PassportInfo(
                number="A12345678",
                expiry_date=date(2030, 3, 20),
                nationality="UAE",
                issuing_country="UAE",
            ),
            contact=(
                ContactInfo(
                    email="ahmed@example.com", phone="501234567", country_code="+971"
                )
                if with_contact
                else None
            ),
        )

    return _factory


@pytest.fixture
def baggage():
    return BaggageExtra(weight=32, price=Decimal("100"))


@pytest.fixture
def meal():
    return MealExtra(type="halal", price=Decimal("30"))


@pytest.fixture
def insurance():
    return InsuranceExtra(
        type=InsuranceType.COMPREHENSIVE, coverage=Decimal("100000"), price=Decimal("75")
    )


@pytest.fixture
def lounge():
    return LoungeExtra(airport="DXB", price=Decimal("150"))
