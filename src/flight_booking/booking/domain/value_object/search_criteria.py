from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import ClassVar, Sequence

from flight_booking.booking.domain.enum import CabinClass, TripType

from .airport import Airport


@dataclass(frozen=True)
class FlightSegment:
    """検索区間（出発地 + 到着地 + 出発日）"""

    origin: Airport
    destination: Airport
    departure_date: date

    def is_return_of(self, outbound: FlightSegment) -> bool:
        """outbound の折り返し区間かどうか"""
        return (
            self.origin.code == outbound.destination.code
            and self.destination.code == outbound.origin.code
        )


@dataclass(frozen=True)
class PassengerCount:
    """旅客数（大人・小児・幼児）"""

    MAX_TOTAL: ClassVar[int] = 9

    adults: int
    children: int = 0
    infants: int = 0

    def __post_init__(self) -> None:
        if not 1 <= self.adults <= self.MAX_TOTAL:
            raise ValueError("Adults must be between 1 and 9")
        if self.children < 0 or self.infants < 0:
            raise ValueError("Passenger counts cannot be negative")
        if not 1 <= self.total <= self.MAX_TOTAL:
            raise ValueError("Total passengers must be between 1 and 9")
        if self.infants > self.adults:
            raise ValueError("Number of infants cannot exceed number of adults")

    @property
    def total(self) -> int:
        return self.adults + self.children + self.infants


@dataclass(frozen=True)
class SearchCriteria:
    """フライト検索条件

    旅程種別ごとの区間数ルール:
    - one-way: 1区間
    - round-trip: 往路と復路の2区間（復路は往路の折り返し、かつ往路より後の日付）
    - multi-city: 1〜5区間
    """

    MAX_MULTI_CITY_SEGMENTS: ClassVar[int] = 5

    trip_type: TripType
    segments: Sequence[FlightSegment]
    passengers: PassengerCount
    cabin_class: CabinClass = CabinClass.ECONOMY

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))
        if self.trip_type == TripType.ONE_WAY:
            self._validate_one_way()
        elif self.trip_type == TripType.ROUND_TRIP:
            self._validate_round_trip()
        else:
            self._validate_multi_city()

    def _validate_one_way(self) -> None:
        if len(self.segments) != 1:
            raise ValueError("One-way trip must have exactly 1 segment")

    def _validate_round_trip(self) -> None:
        if len(self.segments) != 2:
            raise ValueError("Round-trip must have exactly 2 segments")
        outbound, inbound = self.segments
        if not inbound.is_return_of(outbound):
            raise ValueError("Return segment must reverse the outbound segment")
        if inbound.departure_date <= outbound.departure_date:
            raise ValueError("Return date must be after departure date")

    def _validate_multi_city(self) -> None:
        if not 1 <= len(self.segments) <= self.MAX_MULTI_CITY_SEGMENTS:
            raise ValueError("Multi-city trip must have between 1 and 5 segments")
