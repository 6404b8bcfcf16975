from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping

from flight_booking.booking.domain.value_object import (
    DetailedPriceBreakdown,
    Flight,
    PassengerCount,
    Seat,
    SelectedExtras,
)
from flight_booking.shared.domain import Currency

_ZERO = Decimal("0")
PRICE_TOLERANCE = Decimal("0.01")


class PriceCalculator:
    """料金計算サービス

    フライト・座席・オプションから料金内訳を導出する。状態を持たず、
    同じ入力には常に同じ結果を返す。入力が欠けていても例外は出さず 0 として扱う。
    """

    def calculate(
        self,
        flight: Flight | None,
        seats: Mapping[str, Seat],
        extras: SelectedExtras,
    ) -> DetailedPriceBreakdown:
        """料金内訳を計算する"""
        base_fare = taxes = fees = _ZERO
        if flight is not None:
            fare = flight.price.breakdown
            base_fare, taxes, fees = fare.base_fare, fare.taxes, fare.fees

        return DetailedPriceBreakdown(
            base_fare=base_fare,
            taxes=taxes,
            fees=fees,
            seat_fees=sum((seat.price for seat in seats.values()), _ZERO),
            extra_baggage=sum((b.price for b in extras.baggage.values()), _ZERO),
            meals=sum((m.price for m in extras.meals.values()), _ZERO),
            insurance=extras.insurance.price if extras.insurance else _ZERO,
            lounge_access=(
                extras.lounge_access.price if extras.lounge_access else _ZERO
            ),
        )


def price_per_passenger(
    total: Decimal, passengers: PassengerCount | None
) -> Decimal:
    """旅客1人あたりの料金（大人・小児・幼児の合計で割る。旅客未設定の場合は 0）"""
    if passengers is None or passengers.total <= 0:
        return _ZERO
    return total / passengers.total


def base_fare_per_passenger(
    flight: Flight | None, passengers: PassengerCount | None
) -> Decimal:
    """旅客1人あたりの航空運賃（基本運賃 + 税 + 手数料、オプションは含まない）"""
    if flight is None:
        return _ZERO
    return price_per_passenger(flight.price.breakdown.total, passengers)


def validate_price_breakdown(components: Mapping[str, Decimal], total: Decimal) -> bool:
    """構成要素の合計が total と許容誤差内で一致するか"""
    return abs(sum(components.values(), _ZERO) - total) < PRICE_TOLERANCE


def round_price(amount: Decimal) -> Decimal:
    return amount.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def percentage_of_total(component: Decimal, total: Decimal) -> Decimal:
    """total に占める component の割合（0〜100）"""
    if total == 0:
        return _ZERO
    return component / total * 100


def format_currency(amount: Decimal, currency: str | Currency = "USD") -> str:
    if not isinstance(currency, Currency):
        currency = Currency(currency)
    return currency.format(amount)
