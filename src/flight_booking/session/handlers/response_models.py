from __future__ import annotations

from pydantic import BaseModel

from flight_booking.booking.domain import BookingState
from flight_booking.shared.domain import Currency


class SessionData(BaseModel):
    """保存済みセッションのレスポンスモデル"""

    session_id: str
    current_step: str
    total_price: str
    formatted_total: str


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: SessionData | None = None


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    message: str
    retryable: bool = False


def to_response(state: BookingState) -> dict:
    """BookingState をレスポンス辞書に変換する

    金額表示はフライトの通貨に従う（フライト未選択の場合は USD）。
    """
    flight = state.selected_flight
    currency = flight.currency if flight else Currency.usd()
    return SuccessResponse(
        data=SessionData(
            session_id=str(state.session_id),
            current_step=state.current_step.value,
            total_price=str(state.total_price),
            formatted_total=currency.format(state.total_price),
        )
    ).model_dump()


def error_response(message: str, retryable: bool = False) -> dict:
    return ErrorResponse(message=message, retryable=retryable).model_dump()
