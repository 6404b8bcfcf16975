from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal

from flight_booking.shared.domain import Currency

_ZERO = Decimal("0")

_LINE_ITEM_LABELS = {
    "base_fare": "Base Fare",
    "taxes": "Taxes",
    "fees": "Fees",
    "seat_fees": "Seat Selection",
    "extra_baggage": "Extra Baggage",
    "meals": "Meals",
    "insurance": "Travel Insurance",
    "lounge_access": "Lounge Access",
}


@dataclass(frozen=True)
class PriceLineItem:
    """表示用の料金明細行"""

    label: str
    amount: Decimal
    formatted_amount: str
    is_total: bool = False


@dataclass(frozen=True)
class DetailedPriceBreakdown:
    """料金内訳

    8つの構成要素はすべて非負。total は構成要素の合計から導出される。
    """

    base_fare: Decimal = _ZERO
    taxes: Decimal = _ZERO
    fees: Decimal = _ZERO
    seat_fees: Decimal = _ZERO
    extra_baggage: Decimal = _ZERO
    meals: Decimal = _ZERO
    insurance: Decimal = _ZERO
    lounge_access: Decimal = _ZERO

    def __post_init__(self) -> None:
        for name, amount in self.components().items():
            if amount < 0:
                raise ValueError(f"Price component cannot be negative: {name}")

    @property
    def total(self) -> Decimal:
        return sum(self.components().values(), _ZERO)

    def components(self) -> dict[str, Decimal]:
        """構成要素を定義順の辞書で返す"""
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def line_items(self, currency: Currency) -> list[PriceLineItem]:
        """0 より大きい構成要素と合計行からなる明細を返す"""
        items = [
            PriceLineItem(
                label=_LINE_ITEM_LABELS[name],
                amount=amount,
                formatted_amount=currency.format(amount),
            )
            for name, amount in self.components().items()
            if amount > 0
        ]
        items.append(
            PriceLineItem(
                label="Total",
                amount=self.total,
                formatted_amount=currency.format(self.total),
                is_total=True,
            )
        )
        return items
