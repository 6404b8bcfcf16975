from enum import Enum


class BookingStep(str, Enum):
    """予約フローのステップ（定義順がそのまま遷移順）"""

    SEARCH = "search"
    RESULTS = "results"
    DETAILS = "details"
    SEATS = "seats"
    PASSENGERS = "passengers"
    EXTRAS = "extras"
    PAYMENT = "payment"
    CONFIRMATION = "confirmation"
