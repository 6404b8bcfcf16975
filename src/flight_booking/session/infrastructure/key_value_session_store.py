from flight_booking.booking.domain import BookingState
from flight_booking.session.domain.repository import SESSION_TTL_SECONDS, SessionStore
from flight_booking.session.domain.value_object import SessionRecord
from flight_booking.session.infrastructure.key_value_store import (
    KeyValueStore,
    KeyValueStoreError,
)
from flight_booking.session.infrastructure.session_record_schema import (
    decode_session_record,
    encode_session_record,
)
from flight_booking.shared.domain import SessionId, SessionPersistenceException
from flight_booking.shared.utils import get_logger

KEY_PREFIX = "booking:session:"

logger = get_logger("booking-session-store")


class KeyValueSessionStore(SessionStore):
    """KeyValueStore を使用した SessionStore の具象実装

    キー: "booking:session:<session_id>"
    値: SessionRecord の JSON（UTF-8）
    同一セッションへの並行書き込みは後勝ち（比較交換なし）。
    """

    def __init__(
        self, kv_store: KeyValueStore, ttl_seconds: int = SESSION_TTL_SECONDS
    ) -> None:
        self._kv_store = kv_store
        self._ttl_seconds = ttl_seconds

    def save(self, session_id: SessionId, state: BookingState) -> None:
        """状態を保存する（既存レコードは全体を上書き）"""
        payload = encode_session_record(SessionRecord.from_booking_state(state))
        try:
            self._kv_store.set_with_ttl(
                self._key(session_id), payload, self._ttl_seconds
            )
        except KeyValueStoreError as e:
            logger.exception(
                "Failed to save session", extra={"session_id": str(session_id)}
            )
            raise SessionPersistenceException("Failed to save session data") from e

    def load(self, session_id: SessionId) -> SessionRecord | None:
        try:
            raw = self._kv_store.get(self._key(session_id))
        except KeyValueStoreError:
            logger.warning(
                "Failed to load session", extra={"session_id": str(session_id)}
            )
            return None

        if raw is None:
            return None

        try:
            return decode_session_record(raw)
        except ValueError as e:
            logger.warning(
                "Discarding malformed session record",
                extra={"session_id": str(session_id), "error": str(e)},
            )
            return None

    def clear(self, session_id: SessionId) -> None:
        try:
            self._kv_store.delete(self._key(session_id))
        except KeyValueStoreError:
            logger.warning(
                "Failed to clear session", extra={"session_id": str(session_id)}
            )

    def is_valid(self, session_id: SessionId) -> bool:
        try:
            return self._kv_store.exists(self._key(session_id))
        except KeyValueStoreError:
            logger.warning(
                "Failed to check session validity",
                extra={"session_id": str(session_id)},
            )
            return False

    def extend(self, session_id: SessionId) -> None:
        try:
            extended = self._kv_store.expire(self._key(session_id), self._ttl_seconds)
        except KeyValueStoreError:
            logger.warning(
                "Failed to extend session", extra={"session_id": str(session_id)}
            )
            return
        if not extended:
            logger.debug(
                "Session to extend does not exist",
                extra={"session_id": str(session_id)},
            )

    @staticmethod
    def _key(session_id: SessionId) -> str:
        return f"{KEY_PREFIX}{session_id}"
