from enum import Enum


class SeatStatus(str, Enum):
    """座席の在庫状態"""

    AVAILABLE = "available"
    OCCUPIED = "occupied"
    BLOCKED = "blocked"
    SELECTED = "selected"


class SeatType(str, Enum):
    """座席種別"""

    STANDARD = "standard"
    EXTRA_LEGROOM = "extra-legroom"
    EXIT_ROW = "exit-row"
    PREFERRED = "preferred"


class SeatPosition(str, Enum):
    """座席位置"""

    WINDOW = "window"
    MIDDLE = "middle"
    AISLE = "aisle"
