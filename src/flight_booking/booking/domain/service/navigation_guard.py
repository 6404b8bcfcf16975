from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from flight_booking.booking.domain.enum import BookingStep

if TYPE_CHECKING:
    from flight_booking.booking.domain.entity import BookingState

STEP_ORDER: tuple[BookingStep, ...] = (
    BookingStep.SEARCH,
    BookingStep.RESULTS,
    BookingStep.DETAILS,
    BookingStep.SEATS,
    BookingStep.PASSENGERS,
    BookingStep.EXTRAS,
    BookingStep.PAYMENT,
    BookingStep.CONFIRMATION,
)


def _always(state: BookingState) -> bool:
    return True


def _never(state: BookingState) -> bool:
    return False


_PROCEED_RULES: dict[BookingStep, Callable[[BookingState], bool]] = {
    BookingStep.SEARCH: lambda state: state.search_criteria is not None,
    BookingStep.RESULTS: lambda state: state.selected_flight is not None,
    BookingStep.DETAILS: lambda state: state.selected_flight is not None,
    BookingStep.SEATS: _always,
    BookingStep.PASSENGERS: lambda state: len(state.passengers) > 0,
    BookingStep.EXTRAS: _always,
    BookingStep.PAYMENT: lambda state: state.total_price > 0,
    BookingStep.CONFIRMATION: _never,
}


class NavigationGuard:
    """予約フローのステップ遷移

    遷移は固定順で1つずつ進退し、先頭・末尾で止まる（折り返さない）。
    can_proceed は助言的な判定で、next_step 自体は判定を参照しない。
    """

    def next_step(self, step: BookingStep) -> BookingStep:
        index = STEP_ORDER.index(step)
        return STEP_ORDER[min(index + 1, len(STEP_ORDER) - 1)]

    def previous_step(self, step: BookingStep) -> BookingStep:
        index = STEP_ORDER.index(step)
        return STEP_ORDER[max(index - 1, 0)]

    def can_proceed(self, state: BookingState) -> bool:
        """現在のステップから次へ進める状態かどうか"""
        rule = _PROCEED_RULES.get(state.current_step, _never)
        return rule(state)
