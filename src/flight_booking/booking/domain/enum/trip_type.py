from enum import Enum


class TripType(str, Enum):
    """旅程種別"""

    ONE_WAY = "one-way"
    ROUND_TRIP = "round-trip"
    MULTI_CITY = "multi-city"
