import pytest

from flight_booking.booking.domain import BookingState, BookingStep
from flight_booking.session.infrastructure import KeyValueStore


class FakeClock:
    def __init__(self, now: float = 1_767_225_600.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class InMemoryKeyValueStore(KeyValueStore):
    """テスト用の TTL 付きインメモリストア"""

    def __init__(self, clock: FakeClock) -> None:
        self._clock = clock
        self._items: dict[str, tuple[bytes, float]] = {}

    def get(self, key):
        item = self._live(key)
        return item[0] if item else None

    def set_with_ttl(self, key, value, seconds):
        self._items[key] = (value, self._clock() + seconds)

    def delete(self, key):
        self._items.pop(key, None)

    def exists(self, key):
        return self._live(key) is not None

    def expire(self, key, seconds):
        item = self._live(key)
        if item is None:
            return False
        self._items[key] = (item[0], self._clock() + seconds)
        return True

    def ttl(self, key) -> float | None:
        item = self._live(key)
        return item[1] - self._clock() if item else None

    def _live(self, key):
        item = self._items.get(key)
        if item is None or item[1] <= self._clock():
            return None
        return item


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def kv_store(clock):
    return InMemoryKeyValueStore(clock)


@pytest.fixture
def populated_state(
    create_flight,
    create_seat,
    create_passenger,
    search_criteria,
    baggage,
    meal,
    insurance,
):
    """旅客2名・座席2席・手荷物1件・機内食1件・保険ありの予約状態"""
    state = BookingState()
    state.set_search_criteria(search_criteria)
    state.set_selected_flight(create_flight())
    state.set_passengers(
        [
            create_passenger("passenger-1", with_contact=True),
            create_passenger("passenger-2", first_name="Fatima"),
        ]
    )
    state.set_seat("passenger-1", create_seat(row=5, column="A"))
    state.set_seat("passenger-2", create_seat(row=5, column="B"))
    state.update_baggage("passenger-1", baggage)
    state.update_meal("passenger-2", meal)
    state.set_insurance(insurance)
    state.go_to_step(BookingStep.EXTRAS)
    return state
