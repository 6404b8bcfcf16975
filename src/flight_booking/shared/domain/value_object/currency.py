from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    サポート対象: AED, EUR, GBP, INR, JPY, USD
    """

    SYMBOLS: ClassVar[dict[str, str]] = {
        "AED": "AED ",
        "EUR": "€",
        "GBP": "£",
        "INR": "₹",
        "JPY": "¥",
        "USD": "$",
    }

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.upper()
        if normalized not in self.SYMBOLS:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.SYMBOLS))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def symbol(self) -> str:
        return self.SYMBOLS[self.code]

    def format(self, amount: Decimal) -> str:
        """記号・桁区切り・小数2桁で整形する（例: $1,234.50）"""
        quantized = Decimal(amount).quantize(Decimal("0.01"))
        sign = "-" if quantized < 0 else ""
        return f"{sign}{self.symbol}{abs(quantized):,.2f}"

    @classmethod
    def usd(cls) -> Currency:
        """米ドル"""
        return cls("USD")

    @classmethod
    def eur(cls) -> Currency:
        """ユーロ"""
        return cls("EUR")
