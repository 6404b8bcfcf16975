from enum import Enum


class CabinClass(str, Enum):
    """搭乗クラス"""

    ECONOMY = "economy"
    BUSINESS = "business"
    FIRST = "first"
