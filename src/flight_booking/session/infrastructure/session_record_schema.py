"""予約セッションの JSON エンコーディング

旅客ID をキーとするマップ（座席・手荷物・機内食）は、順序を保った
{"passenger_id": ..., <値>} の配列として表現する。日付は ISO 8601 文字列、
金額は文字列化した Decimal で保存し、読み込み時に date / datetime / Decimal へ戻す。
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated, Iterable

from pydantic import BaseModel, BeforeValidator, Field, model_validator

from flight_booking.booking.domain.enum import (
    BookingStep,
    CabinClass,
    Gender,
    InsuranceType,
    PassengerType,
    SeatPosition,
    SeatStatus,
    SeatType,
    TripType,
)
from flight_booking.booking.domain.service.price_calculator import (
    validate_price_breakdown,
)
from flight_booking.booking.domain.value_object import (
    Airline,
    Airport,
    BaggageExtra,
    ContactInfo,
    DetailedPriceBreakdown,
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
    SelectedExtras,
)
from flight_booking.session.domain.value_object import SessionRecord
from flight_booking.shared.domain import Currency
from flight_booking.shared.utils import to_decimal

Amount = Annotated[Decimal, BeforeValidator(to_decimal), Field(ge=0)]


# ===== 検索条件 =====


class AirportModel(BaseModel):
    code: str = Field(..., min_length=3, max_length=3)
    name: str
    city: str
    country: str

    @classmethod
    def from_domain(cls, airport: Airport) -> AirportModel:
        return cls(
            code=airport.code,
            name=airport.name,
            city=airport.city,
            country=airport.country,
        )

    def to_domain(self) -> Airport:
        return Airport(
            code=self.code, name=self.name, city=self.city, country=self.country
        )


class FlightSegmentModel(BaseModel):
    origin: AirportModel
    destination: AirportModel
    departure_date: date

    def to_domain(self) -> FlightSegment:
        return FlightSegment(
            origin=self.origin.to_domain(),
            destination=self.destination.to_domain(),
            departure_date=self.departure_date,
        )


class PassengerCountModel(BaseModel):
    adults: int
    children: int = 0
    infants: int = 0


class SearchCriteriaModel(BaseModel):
    """検索条件のスキーマ"""

    trip_type: TripType
    segments: list[FlightSegmentModel] = Field(..., min_length=1, max_length=5)
    passengers: PassengerCountModel
    cabin_class: CabinClass

    @classmethod
    def from_domain(cls, criteria: SearchCriteria) -> SearchCriteriaModel:
        return cls(
            trip_type=criteria.trip_type,
            segments=[
                FlightSegmentModel(
                    origin=AirportModel.from_domain(s.origin),
                    destination=AirportModel.from_domain(s.destination),
                    departure_date=s.departure_date,
                )
                for s in criteria.segments
            ],
            passengers=PassengerCountModel(
                adults=criteria.passengers.adults,
                children=criteria.passengers.children,
                infants=criteria.passengers.infants,
            ),
            cabin_class=criteria.cabin_class,
        )

    def to_domain(self) -> SearchCriteria:
        return SearchCriteria(
            trip_type=self.trip_type,
            segments=[s.to_domain() for s in self.segments],
            passengers=PassengerCount(
                adults=self.passengers.adults,
                children=self.passengers.children,
                infants=self.passengers.infants,
            ),
            cabin_class=self.cabin_class,
        )


# ===== フライト =====


class AirlineModel(BaseModel):
    code: str
    name: str
    logo: str = ""

    @classmethod
    def from_domain(cls, airline: Airline) -> AirlineModel:
        return cls(code=airline.code, name=airline.name, logo=airline.logo)

    def to_domain(self) -> Airline:
        return Airline(code=self.code, name=self.name, logo=self.logo)


class FlightPointModel(BaseModel):
    airport: AirportModel
    date_time: datetime
    terminal: str | None = None

    @classmethod
    def from_domain(cls, point: FlightPoint) -> FlightPointModel:
        return cls(
            airport=AirportModel.from_domain(point.airport),
            date_time=point.date_time,
            terminal=point.terminal,
        )

    def to_domain(self) -> FlightPoint:
        return FlightPoint(
            airport=self.airport.to_domain(),
            date_time=self.date_time,
            terminal=self.terminal,
        )


class FlightSegmentDetailModel(BaseModel):
    departure: FlightPointModel
    arrival: FlightPointModel
    duration: int = Field(..., ge=0, description="所要時間（分）")
    aircraft: str
    operating_airline: AirlineModel | None = None

    @classmethod
    def from_domain(cls, segment: FlightSegmentDetail) -> FlightSegmentDetailModel:
        return cls(
            departure=FlightPointModel.from_domain(segment.departure),
            arrival=FlightPointModel.from_domain(segment.arrival),
            duration=segment.duration,
            aircraft=segment.aircraft,
            operating_airline=(
                AirlineModel.from_domain(segment.operating_airline)
                if segment.operating_airline
                else None
            ),
        )

    def to_domain(self) -> FlightSegmentDetail:
        return FlightSegmentDetail(
            departure=self.departure.to_domain(),
            arrival=self.arrival.to_domain(),
            duration=self.duration,
            aircraft=self.aircraft,
            operating_airline=(
                self.operating_airline.to_domain() if self.operating_airline else None
            ),
        )


class FareBreakdownModel(BaseModel):
    base_fare: Amount
    taxes: Amount
    fees: Amount


class FlightPriceModel(BaseModel):
    amount: Amount
    currency: str = Field(..., pattern="^[A-Z]{3}$")
    breakdown: FareBreakdownModel


class FlightModel(BaseModel):
    """選択済みフライトのスキーマ"""

    id: str = Field(..., min_length=1)
    airline: AirlineModel
    flight_number: str
    segments: list[FlightSegmentDetailModel]
    price: FlightPriceModel
    cabin_class: CabinClass
    available_seats: int = Field(..., ge=0)

    @classmethod
    def from_domain(cls, flight: Flight) -> FlightModel:
        fare = flight.price.breakdown
        return cls(
            id=flight.id,
            airline=AirlineModel.from_domain(flight.airline),
            flight_number=flight.flight_number,
            segments=[FlightSegmentDetailModel.from_domain(s) for s in flight.segments],
            price=FlightPriceModel(
                amount=flight.price.amount,
                currency=str(flight.price.currency),
                breakdown=FareBreakdownModel(
                    base_fare=fare.base_fare, taxes=fare.taxes, fees=fare.fees
                ),
            ),
            cabin_class=flight.cabin_class,
            available_seats=flight.available_seats,
        )

    def to_domain(self) -> Flight:
        fare = self.price.breakdown
        return Flight(
            id=self.id,
            airline=self.airline.to_domain(),
            flight_number=self.flight_number,
            segments=[s.to_domain() for s in self.segments],
            price=FlightPrice(
                amount=self.price.amount,
                currency=Currency(self.price.currency),
                breakdown=FareBreakdown(
                    base_fare=fare.base_fare, taxes=fare.taxes, fees=fare.fees
                ),
            ),
            cabin_class=self.cabin_class,
            available_seats=self.available_seats,
        )


# ===== 座席・旅客 =====


class SeatModel(BaseModel):
    id: str
    row: int = Field(..., ge=1)
    column: str
    status: SeatStatus
    type: SeatType
    position: SeatPosition
    price: Amount

    @classmethod
    def from_domain(cls, seat: Seat) -> SeatModel:
        return cls(
            id=seat.id,
            row=seat.row,
            column=seat.column,
            status=seat.status,
            type=seat.type,
            position=seat.position,
            price=seat.price,
        )

    def to_domain(self) -> Seat:
        return Seat(
            id=self.id,
            row=self.row,
            column=self.column,
            status=self.status,
            type=self.type,
            position=self.position,
            price=self.price,
        )


class SeatAssignmentEntry(BaseModel):
    passenger_id: str = Field(..., min_length=1)
    seat: SeatModel


class PassportModel(BaseModel):
    number: str
    expiry_date: date
    nationality: str
    issuing_country: str


class ContactModel(BaseModel):
    email: str
    phone: str
    country_code: str


class PassengerModel(BaseModel):
    """旅客情報のスキーマ"""

    id: str = Field(..., min_length=1)
    type: PassengerType
    first_name: str
    last_name: str
    date_of_birth: date
    gender: Gender
    passport: PassportModel | None = None
    contact: ContactModel | None = None

    @classmethod
    def from_domain(cls, passenger: PassengerInfo) -> PassengerModel:
        passport = passenger.passport
        contact = passenger.contact
        return cls(
            id=passenger.id,
            type=passenger.type,
            first_name=passenger.first_name,
            last_name=passenger.last_name,
            date_of_birth=passenger.date_of_birth,
            gender=passenger.gender,
            passport=(
                PassportModel(
                    number=passport.number,
                    expiry_date=passport.expiry_date,
                    nationality=passport.nationality,
                    issuing_country=passport.issuing_country,
                )
                if passport
                else None
            ),
            contact=(
                ContactModel(
                    email=contact.email,
                    phone=contact.phone,
                    country_code=contact.country_code,
                )
                if contact
                else None
            ),
        )

    def to_domain(self) -> PassengerInfo:
        return PassengerInfo(
            id=self.id,
            type=self.type,
            first_name=self.first_name,
            last_name=self.last_name,
            date_of_birth=self.date_of_birth,
            gender=self.gender,
            passport=(
                PassportInfo(
                    number=self.passport.number,
                    expiry_date=self.passport.expiry_date,
                    nationality=self.passport.nationality,
                    issuing_country=self.passport.issuing_country,
                )
                if self.passport
                else None
            ),
            contact=(
                ContactInfo(
                    email=self.contact.email,
                    phone=self.contact.phone,
                    country_code=self.contact.country_code,
                )
                if self.contact
                else None
            ),
        )


# ===== オプション =====


class BaggageEntry(BaseModel):
    passenger_id: str = Field(..., min_length=1)
    weight: int = Field(..., gt=0, description="重量（kg）")
    price: Amount


class MealEntry(BaseModel):
    passenger_id: str = Field(..., min_length=1)
    type: str
    price: Amount


class InsuranceModel(BaseModel):
    type: InsuranceType
    coverage: Amount
    price: Amount


class LoungeModel(BaseModel):
    airport: str
    price: Amount


class SelectedExtrasModel(BaseModel):
    """選択済みオプションのスキーマ"""

    baggage: list[BaggageEntry] = Field(default_factory=list)
    meals: list[MealEntry] = Field(default_factory=list)
    insurance: InsuranceModel | None = None
    lounge_access: LoungeModel | None = None

    @model_validator(mode="after")
    def check_unique_passengers(self) -> SelectedExtrasModel:
        _ensure_unique_passenger_ids(self.baggage, "baggage")
        _ensure_unique_passenger_ids(self.meals, "meals")
        return self

    @classmethod
    def from_domain(cls, extras: SelectedExtras) -> SelectedExtrasModel:
        insurance = extras.insurance
        lounge = extras.lounge_access
        return cls(
            baggage=[
                BaggageEntry(passenger_id=pid, weight=b.weight, price=b.price)
                for pid, b in extras.baggage.items()
            ],
            meals=[
                MealEntry(passenger_id=pid, type=m.type, price=m.price)
                for pid, m in extras.meals.items()
            ],
            insurance=(
                InsuranceModel(
                    type=insurance.type,
                    coverage=insurance.coverage,
                    price=insurance.price,
                )
                if insurance
                else None
            ),
            lounge_access=(
                LoungeModel(airport=lounge.airport, price=lounge.price)
                if lounge
                else None
            ),
        )

    def to_domain(self) -> SelectedExtras:
        return SelectedExtras(
            baggage={
                e.passenger_id: BaggageExtra(weight=e.weight, price=e.price)
                for e in self.baggage
            },
            meals={
                e.passenger_id: MealExtra(type=e.type, price=e.price)
                for e in self.meals
            },
            insurance=(
                InsuranceExtra(
                    type=self.insurance.type,
                    coverage=self.insurance.coverage,
                    price=self.insurance.price,
                )
                if self.insurance
                else None
            ),
            lounge_access=(
                LoungeExtra(
                    airport=self.lounge_access.airport,
                    price=self.lounge_access.price,
                )
                if self.lounge_access
                else None
            ),
        )


class PriceBreakdownModel(BaseModel):
    """料金内訳のスキーマ（total は構成要素の合計と一致しなければならない）"""

    base_fare: Amount = Decimal("0")
    taxes: Amount = Decimal("0")
    fees: Amount = Decimal("0")
    seat_fees: Amount = Decimal("0")
    extra_baggage: Amount = Decimal("0")
    meals: Amount = Decimal("0")
    insurance: Amount = Decimal("0")
    lounge_access: Amount = Decimal("0")
    total: Amount = Decimal("0")

    @model_validator(mode="after")
    def check_total(self) -> PriceBreakdownModel:
        components = self.model_dump(exclude={"total"})
        if not validate_price_breakdown(components, self.total):
            raise ValueError("Price breakdown total does not match its components")
        return self

    @classmethod
    def from_domain(cls, breakdown: DetailedPriceBreakdown) -> PriceBreakdownModel:
        return cls(**breakdown.components(), total=breakdown.total)

    def to_domain(self) -> DetailedPriceBreakdown:
        return DetailedPriceBreakdown(**self.model_dump(exclude={"total"}))


# ===== セッションレコード =====


class SessionRecordModel(BaseModel):
    """予約セッションレコードのスキーマ"""

    search_criteria: SearchCriteriaModel | None = None
    selected_flight: FlightModel | None = None
    selected_seats: list[SeatAssignmentEntry] = Field(default_factory=list)
    passengers: list[PassengerModel] = Field(default_factory=list)
    selected_extras: SelectedExtrasModel = Field(default_factory=SelectedExtrasModel)
    current_step: BookingStep = BookingStep.SEARCH
    price_breakdown: PriceBreakdownModel = Field(default_factory=PriceBreakdownModel)
    saved_at: datetime | None = None

    @model_validator(mode="after")
    def check_unique_passengers(self) -> SessionRecordModel:
        _ensure_unique_passenger_ids(self.selected_seats, "selected_seats")
        return self

    @classmethod
    def from_domain(cls, record: SessionRecord) -> SessionRecordModel:
        return cls(
            search_criteria=(
                SearchCriteriaModel.from_domain(record.search_criteria)
                if record.search_criteria
                else None
            ),
            selected_flight=(
                FlightModel.from_domain(record.selected_flight)
                if record.selected_flight
                else None
            ),
            selected_seats=[
                SeatAssignmentEntry(passenger_id=pid, seat=SeatModel.from_domain(seat))
                for pid, seat in record.selected_seats.items()
            ],
            passengers=[PassengerModel.from_domain(p) for p in record.passengers],
            selected_extras=SelectedExtrasModel.from_domain(record.selected_extras),
            current_step=record.current_step,
            price_breakdown=PriceBreakdownModel.from_domain(record.price_breakdown),
            saved_at=record.saved_at,
        )

    def to_domain(self) -> SessionRecord:
        return SessionRecord(
            search_criteria=(
                self.search_criteria.to_domain() if self.search_criteria else None
            ),
            selected_flight=(
                self.selected_flight.to_domain() if self.selected_flight else None
            ),
            selected_seats={
                e.passenger_id: e.seat.to_domain() for e in self.selected_seats
            },
            passengers=[p.to_domain() for p in self.passengers],
            selected_extras=self.selected_extras.to_domain(),
            current_step=self.current_step,
            price_breakdown=self.price_breakdown.to_domain(),
            saved_at=self.saved_at,
        )


def _ensure_unique_passenger_ids(entries: Iterable, field_name: str) -> None:
    seen: set[str] = set()
    for entry in entries:
        if entry.passenger_id in seen:
            raise ValueError(
                f"Duplicate passenger_id in {field_name}: {entry.passenger_id}"
            )
        seen.add(entry.passenger_id)


def encode_session_record(record: SessionRecord) -> bytes:
    """SessionRecord を UTF-8 の JSON バイト列に変換する"""
    return SessionRecordModel.from_domain(record).model_dump_json().encode("utf-8")


def decode_session_record(raw: bytes | str) -> SessionRecord:
    """JSON から SessionRecord を復元する

    構造が不正な場合は ValueError（pydantic.ValidationError を含む）を送出する。
    """
    return SessionRecordModel.model_validate_json(raw).to_domain()
