from __future__ import annotations

from dataclasses import dataclass, field, replace
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from flight_booking.booking.domain.enum import InsuranceType


def _validate_price(price: Decimal) -> None:
    if price < 0:
        raise ValueError("Extra price cannot be negative")


@dataclass(frozen=True)
class BaggageExtra:
    """追加受託手荷物

    weight は kg 単位（5, 10, 15, 20, 25, 32）。
    """

    weight: int
    price: Decimal

    def __post_init__(self) -> None:
        if self.weight <= 0:
            raise ValueError("Baggage weight must be positive")
        _validate_price(self.price)


@dataclass(frozen=True)
class MealExtra:
    """機内食（standard, vegetarian, vegan, halal など）"""

    type: str
    price: Decimal

    def __post_init__(self) -> None:
        _validate_price(self.price)


@dataclass(frozen=True)
class InsuranceExtra:
    type: InsuranceType
    coverage: Decimal
    price: Decimal

    def __post_init__(self) -> None:
        _validate_price(self.price)


@dataclass(frozen=True)
class LoungeExtra:
    """ラウンジ利用（airport は IATA コード）"""

    airport: str
    price: Decimal

    def __post_init__(self) -> None:
        _validate_price(self.price)


@dataclass(frozen=True)
class SelectedExtras:
    """選択済みオプション

    baggage / meals は旅客ID をキーとする読み取り専用マップ。
    insurance / lounge_access は予約全体で高々1つ。
    更新系メソッドは新しいインスタンスを返す。
    """

    baggage: Mapping[str, BaggageExtra] = field(default_factory=dict)
    meals: Mapping[str, MealExtra] = field(default_factory=dict)
    insurance: InsuranceExtra | None = None
    lounge_access: LoungeExtra | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "baggage", MappingProxyType(dict(self.baggage)))
        object.__setattr__(self, "meals", MappingProxyType(dict(self.meals)))

    def with_baggage(
        self, passenger_id: str, baggage: BaggageExtra | None
    ) -> SelectedExtras:
        """旅客の手荷物を設定する（None の場合は削除）"""
        return replace(self, baggage=_put(self.baggage, passenger_id, baggage))

    def with_meal(self, passenger_id: str, meal: MealExtra | None) -> SelectedExtras:
        """旅客の機内食を設定する（None の場合は削除）"""
        return replace(self, meals=_put(self.meals, passenger_id, meal))

    def with_insurance(self, insurance: InsuranceExtra | None) -> SelectedExtras:
        return replace(self, insurance=insurance)

    def with_lounge_access(self, lounge: LoungeExtra | None) -> SelectedExtras:
        return replace(self, lounge_access=lounge)

    def is_empty(self) -> bool:
        return (
            not self.baggage
            and not self.meals
            and self.insurance is None
            and self.lounge_access is None
        )


def _put(mapping: Mapping, key: str, value: object | None) -> dict:
    updated = dict(mapping)
    if value is None:
        updated.pop(key, None)
    else:
        updated[key] = value
    return updated
