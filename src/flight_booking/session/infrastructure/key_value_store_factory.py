import os

from flight_booking.session.infrastructure.dynamodb_key_value_store import (
    DynamoDBKeyValueStore,
)
from flight_booking.session.infrastructure.key_value_store import KeyValueStore
from flight_booking.session.infrastructure.redis_key_value_store import (
    RedisKeyValueStore,
)

_BACKENDS = {
    "redis": RedisKeyValueStore,
    "dynamodb": DynamoDBKeyValueStore,
}


def create_key_value_store(backend: str | None = None) -> KeyValueStore:
    """SESSION_BACKEND（redis / dynamodb）に応じたストアを生成する"""
    name = (backend or os.getenv("SESSION_BACKEND", "redis")).lower()
    if name not in _BACKENDS:
        raise ValueError(
            f"Unsupported session backend: {name}. "
            f"Supported: {', '.join(sorted(_BACKENDS))}"
        )
    return _BACKENDS[name]()
