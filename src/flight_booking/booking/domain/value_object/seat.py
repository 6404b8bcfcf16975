from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from flight_booking.booking.domain.enum import SeatPosition, SeatStatus, SeatType


@dataclass(frozen=True)
class Seat:
    """座席

    id は行番号 + 列記号から導出される（例: 12C）。
    price は追加料金で、standard 席は 0。
    """

    id: str
    row: int
    column: str
    status: SeatStatus
    type: SeatType
    position: SeatPosition
    price: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        if self.row < 1:
            raise ValueError("Seat row must be positive")
        if self.price < 0:
            raise ValueError("Seat price cannot be negative")

    @classmethod
    def at(
        cls,
        row: int,
        column: str,
        type: SeatType = SeatType.STANDARD,
        position: SeatPosition = SeatPosition.MIDDLE,
        price: Decimal = Decimal("0"),
        status: SeatStatus = SeatStatus.AVAILABLE,
    ) -> Seat:
        """行番号と列記号から座席を生成する"""
        column = column.upper()
        return cls(
            id=f"{row}{column}",
            row=row,
            column=column,
            status=status,
            type=type,
            position=position,
            price=price,
        )
