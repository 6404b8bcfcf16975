import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Airport:
    """空港

    code は IATA 3レターコード。例: DXB, LHR, JFK
    """

    code: str
    name: str
    city: str
    country: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Z]{3}$")

    def __post_init__(self) -> None:
        normalized = self.code.upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(
                f"Invalid airport code: {self.code}. "
                "Expected format: 3 uppercase letters"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code
