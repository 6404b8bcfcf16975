from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Sequence

from flight_booking.booking.domain.enum import CabinClass
from flight_booking.shared.domain import Currency

from .airport import Airport


@dataclass(frozen=True)
class Airline:
    code: str
    name: str
    logo: str = ""


@dataclass(frozen=True)
class FlightPoint:
    """発着地点（空港 + 日時 + ターミナル）"""

    airport: Airport
    date_time: datetime
    terminal: str | None = None


@dataclass(frozen=True)
class FlightSegmentDetail:
    """運航区間

    duration は分単位。
    """

    departure: FlightPoint
    arrival: FlightPoint
    duration: int
    aircraft: str
    operating_airline: Airline | None = None


@dataclass(frozen=True)
class FareBreakdown:
    """運賃内訳（基本運賃 + 税 + 手数料）"""

    base_fare: Decimal
    taxes: Decimal
    fees: Decimal

    def __post_init__(self) -> None:
        if min(self.base_fare, self.taxes, self.fees) < 0:
            raise ValueError("Fare components cannot be negative")

    @property
    def total(self) -> Decimal:
        return self.base_fare + self.taxes + self.fees


@dataclass(frozen=True)
class FlightPrice:
    amount: Decimal
    currency: Currency
    breakdown: FareBreakdown

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")


@dataclass(frozen=True)
class Flight:
    """選択されたフライト

    価格は提供元の値をそのまま保持し、区間から再計算しない。
    """

    id: str
    airline: Airline
    flight_number: str
    segments: Sequence[FlightSegmentDetail]
    price: FlightPrice
    cabin_class: CabinClass
    available_seats: int

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Flight id cannot be empty")
        object.__setattr__(self, "segments", tuple(self.segments))

    @property
    def currency(self) -> Currency:
        return self.price.currency
