from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, Mapping

from flight_booking.booking.domain.enum import BookingStep
from flight_booking.booking.domain.event import BookingStateChanged
from flight_booking.booking.domain.service import NavigationGuard, PriceCalculator
from flight_booking.booking.domain.value_object import (
    BaggageExtra,
    DetailedPriceBreakdown,
    Flight,
    InsuranceExtra,
    LoungeExtra,
    MealExtra,
    PassengerInfo,
    SearchCriteria,
    Seat,
    SelectedExtras,
)
from flight_booking.shared.domain import AggregateRoot, SessionId


class BookingState(AggregateRoot[SessionId | None]):
    """予約フローの進行中状態（集約ルート）

    検索条件・フライト・座席・旅客・オプション・現在ステップ・セッションIDを
    一元的に保持する。料金を変え得る更新は必ず最後に料金を再計算するため、
    price_breakdown / total_price は常に読み取り専用の導出値となる。
    ID はセッションID で、採番前は None。
    """

    def __init__(
        self,
        price_calculator: PriceCalculator | None = None,
        navigation_guard: NavigationGuard | None = None,
    ) -> None:
        super().__init__(None)
        self._price_calculator = price_calculator or PriceCalculator()
        self._navigation_guard = navigation_guard or NavigationGuard()
        self._clear_fields()

    def _clear_fields(self) -> None:
        self._search_criteria: SearchCriteria | None = None
        self._selected_flight: Flight | None = None
        self._selected_seats: dict[str, Seat] = {}
        self._passengers: list[PassengerInfo] = []
        self._selected_extras = SelectedExtras()
        self._price_breakdown = DetailedPriceBreakdown()
        self._current_step = BookingStep.SEARCH

    # ===== 参照 =====

    @property
    def session_id(self) -> SessionId | None:
        return self._id

    @property
    def search_criteria(self) -> SearchCriteria | None:
        return self._search_criteria

    @property
    def selected_flight(self) -> Flight | None:
        return self._selected_flight

    @property
    def selected_seats(self) -> Mapping[str, Seat]:
        return MappingProxyType(self._selected_seats)

    @property
    def passengers(self) -> tuple[PassengerInfo, ...]:
        return tuple(self._passengers)

    @property
    def selected_extras(self) -> SelectedExtras:
        return self._selected_extras

    @property
    def price_breakdown(self) -> DetailedPriceBreakdown:
        return self._price_breakdown

    @property
    def total_price(self) -> Decimal:
        return self._price_breakdown.total

    @property
    def current_step(self) -> BookingStep:
        return self._current_step

    # ===== 検索条件 =====

    def set_search_criteria(self, criteria: SearchCriteria) -> None:
        """検索条件を設定する（料金には影響しない）"""
        self._search_criteria = criteria
        self._record("set_search_criteria")

    def clear_search_criteria(self) -> None:
        self._search_criteria = None
        self._record("clear_search_criteria")

    # ===== フライト =====

    def set_selected_flight(self, flight: Flight) -> None:
        self._selected_flight = flight
        self._recalculate_price()
        self._record("set_selected_flight")

    def clear_selected_flight(self) -> None:
        self._selected_flight = None
        self._recalculate_price()
        self._record("clear_selected_flight")

    # ===== 座席 =====

    def set_seat(self, passenger_id: str, seat: Seat) -> None:
        """旅客の座席を設定する（既存の割り当ては置き換える）"""
        self._selected_seats[passenger_id] = seat
        self._recalculate_price()
        self._record("set_seat")

    def remove_seat(self, passenger_id: str) -> None:
        """旅客の座席を外す（未割り当てなら何もしない）"""
        self._selected_seats.pop(passenger_id, None)
        self._recalculate_price()
        self._record("remove_seat")

    def clear_seats(self) -> None:
        self._selected_seats = {}
        self._recalculate_price()
        self._record("clear_seats")

    # ===== 旅客 =====

    def set_passengers(self, passengers: Iterable[PassengerInfo]) -> None:
        self._passengers = list(passengers)
        self._record("set_passengers")

    def update_passenger(self, passenger_id: str, passenger: PassengerInfo) -> None:
        """ID が一致する旅客を置き換える（該当なしの場合は何もしない）"""
        self._passengers = [
            passenger if p.id == passenger_id else p for p in self._passengers
        ]
        self._record("update_passenger")

    def clear_passengers(self) -> None:
        self._passengers = []
        self._record("clear_passengers")

    # ===== オプション =====

    def set_extras(self, extras: SelectedExtras) -> None:
        self._replace_extras(extras, "set_extras")

    def update_baggage(self, passenger_id: str, baggage: BaggageExtra | None) -> None:
        """旅客の手荷物を設定する（None の場合は削除）"""
        self._replace_extras(
            self._selected_extras.with_baggage(passenger_id, baggage),
            "update_baggage",
        )

    def update_meal(self, passenger_id: str, meal: MealExtra | None) -> None:
        """旅客の機内食を設定する（None の場合は削除）"""
        self._replace_extras(
            self._selected_extras.with_meal(passenger_id, meal), "update_meal"
        )

    def set_insurance(self, insurance: InsuranceExtra | None) -> None:
        self._replace_extras(
            self._selected_extras.with_insurance(insurance), "set_insurance"
        )

    def set_lounge_access(self, lounge: LoungeExtra | None) -> None:
        self._replace_extras(
            self._selected_extras.with_lounge_access(lounge), "set_lounge_access"
        )

    def clear_extras(self) -> None:
        self._replace_extras(SelectedExtras(), "clear_extras")

    def _replace_extras(self, extras: SelectedExtras, action: str) -> None:
        self._selected_extras = extras
        self._recalculate_price()
        self._record(action)

    # ===== ナビゲーション =====

    def go_to_step(self, step: BookingStep) -> None:
        """任意のステップへ移動する（編集フロー用、前段の完了は検証しない）"""
        self._current_step = step
        self._record("go_to_step")

    def next_step(self) -> None:
        self._current_step = self._navigation_guard.next_step(self._current_step)
        self._record("next_step")

    def previous_step(self) -> None:
        self._current_step = self._navigation_guard.previous_step(self._current_step)
        self._record("previous_step")

    def can_proceed(self) -> bool:
        return self._navigation_guard.can_proceed(self)

    # ===== セッション =====

    def assign_session(self, session_id: SessionId) -> None:
        self._id = session_id

    def release_session(self) -> None:
        self._id = None

    def restore(
        self,
        session_id: SessionId,
        search_criteria: SearchCriteria | None,
        selected_flight: Flight | None,
        selected_seats: Mapping[str, Seat],
        passengers: Iterable[PassengerInfo],
        selected_extras: SelectedExtras,
        current_step: BookingStep,
    ) -> None:
        """永続化された状態で全体を置き換える

        保存時の料金は採用せず、復元した選択内容から再計算する。
        復元直後は未保存の変更なしとして扱う。
        """
        self._id = session_id
        self._search_criteria = search_criteria
        self._selected_flight = selected_flight
        self._selected_seats = dict(selected_seats)
        self._passengers = list(passengers)
        self._selected_extras = selected_extras
        self._current_step = current_step
        self._recalculate_price()
        self.flush_domain_events()

    def reset(self) -> None:
        """初期状態に戻す（予約完了・放棄・セッション失効時）"""
        self._id = None
        self._clear_fields()
        self.flush_domain_events()

    def _recalculate_price(self) -> None:
        self._price_breakdown = self._price_calculator.calculate(
            self._selected_flight, self._selected_seats, self._selected_extras
        )

    def _record(self, action: str) -> None:
        self.add_domain_event(
            BookingStateChanged(action=action, step=self._current_step)
        )
