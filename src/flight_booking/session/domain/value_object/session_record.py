from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Mapping, Sequence

from flight_booking.booking.domain import BookingState, BookingStep
from flight_booking.booking.domain.value_object import (
    DetailedPriceBreakdown,
    Flight,
    PassengerInfo,
    SearchCriteria,
    Seat,
    SelectedExtras,
)
from flight_booking.shared.domain import SessionId


@dataclass(frozen=True)
class SessionRecord:
    """永続化された予約状態のスナップショット

    BookingState と同じ項目を持つ。price_breakdown は保存時点の参照用で、
    復元時には使わない。
    """

    search_criteria: SearchCriteria | None = None
    selected_flight: Flight | None = None
    selected_seats: Mapping[str, Seat] = field(default_factory=dict)
    passengers: Sequence[PassengerInfo] = ()
    selected_extras: SelectedExtras = field(default_factory=SelectedExtras)
    current_step: BookingStep = BookingStep.SEARCH
    price_breakdown: DetailedPriceBreakdown = field(
        default_factory=DetailedPriceBreakdown
    )
    saved_at: datetime | None = None

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "selected_seats", MappingProxyType(dict(self.selected_seats))
        )
        object.__setattr__(self, "passengers", tuple(self.passengers))

    @classmethod
    def from_booking_state(cls, state: BookingState) -> SessionRecord:
        """BookingState からスナップショットを生成する"""
        return cls(
            search_criteria=state.search_criteria,
            selected_flight=state.selected_flight,
            selected_seats=state.selected_seats,
            passengers=state.passengers,
            selected_extras=state.selected_extras,
            current_step=state.current_step,
            price_breakdown=state.price_breakdown,
            saved_at=datetime.now(timezone.utc),
        )

    def restore_into(self, state: BookingState, session_id: SessionId) -> None:
        """スナップショットの内容で BookingState を置き換える"""
        state.restore(
            session_id=session_id,
            search_criteria=self.search_criteria,
            selected_flight=self.selected_flight,
            selected_seats=self.selected_seats,
            passengers=self.passengers,
            selected_extras=self.selected_extras,
            current_step=self.current_step,
        )
