from enum import Enum


class InsuranceType(str, Enum):
    """旅行保険プラン"""

    BASIC = "basic"
    COMPREHENSIVE = "comprehensive"
