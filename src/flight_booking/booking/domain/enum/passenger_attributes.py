from enum import Enum


class PassengerType(str, Enum):
    """旅客区分"""

    ADULT = "adult"
    CHILD = "child"
    INFANT = "infant"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
