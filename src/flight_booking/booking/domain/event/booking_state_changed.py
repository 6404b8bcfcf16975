from dataclasses import dataclass

from flight_booking.booking.domain.enum import BookingStep


@dataclass(frozen=True)
class BookingStateChanged:
    """予約状態の変更イベント（未保存の変更の記録に使う）"""

    action: str
    step: BookingStep
