import os

import redis

from flight_booking.session.infrastructure.key_value_store import (
    KeyValueStore,
    KeyValueStoreError,
)

DEFAULT_REDIS_URL = "redis://localhost:6379/0"


class RedisKeyValueStore(KeyValueStore):
    """Redis を使用した KeyValueStore の具象実装"""

    def __init__(self, client: redis.Redis | None = None) -> None:
        self.client = client or redis.Redis.from_url(
            os.getenv("REDIS_URL", DEFAULT_REDIS_URL)
        )

    def get(self, key: str) -> bytes | None:
        try:
            value = self.client.get(key)
        except redis.RedisError as e:
            raise KeyValueStoreError(f"Redis GET failed: {key}") from e
        if isinstance(value, str):
            return value.encode("utf-8")
        return value

    def set_with_ttl(self, key: str, value: bytes, seconds: int) -> None:
        try:
            self.client.setex(key, seconds, value)
        except redis.RedisError as e:
            raise KeyValueStoreError(f"Redis SETEX failed: {key}") from e

    def delete(self, key: str) -> None:
        try:
            self.client.delete(key)
        except redis.RedisError as e:
            raise KeyValueStoreError(f"Redis DEL failed: {key}") from e

    def exists(self, key: str) -> bool:
        try:
            return self.client.exists(key) == 1
        except redis.RedisError as e:
            raise KeyValueStoreError(f"Redis EXISTS failed: {key}") from e

    def expire(self, key: str, seconds: int) -> bool:
        try:
            return bool(self.client.expire(key, seconds))
        except redis.RedisError as e:
            raise KeyValueStoreError(f"Redis EXPIRE failed: {key}") from e
