from dataclasses import dataclass
from datetime import date

from flight_booking.booking.domain.enum import Gender, PassengerType


@dataclass(frozen=True)
class PassportInfo:
    number: str
    expiry_date: date
    nationality: str
    issuing_country: str


@dataclass(frozen=True)
class ContactInfo:
    """連絡先（代表旅客のみ）"""

    email: str
    phone: str
    country_code: str


@dataclass(frozen=True)
class PassengerInfo:
    """旅客情報

    contact は先頭（代表）旅客のみが持つ。
    幼児と大人の対応付けは検索条件側で保証する。
    """

    id: str
    type: PassengerType
    first_name: str
    last_name: str
    date_of_birth: date
    gender: Gender
    passport: PassportInfo | None = None
    contact: ContactInfo | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Passenger id cannot be empty")
