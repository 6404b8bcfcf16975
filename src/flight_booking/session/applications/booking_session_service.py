from flight_booking.booking.domain import BookingState
from flight_booking.session.domain.repository import SessionStore
from flight_booking.shared.domain import (
    SessionId,
    SessionNotFoundException,
    SessionNotInitializedException,
)
from flight_booking.shared.utils import get_logger

logger = get_logger("booking-session")


class BookingSessionService:
    """予約状態とセッションストアを結び付けるユースケース"""

    def __init__(self, store: SessionStore, state: BookingState) -> None:
        self._store = store
        self._state = state

    @property
    def state(self) -> BookingState:
        return self._state

    def initialize_session(self) -> SessionId:
        """新しいセッションIDを採番して状態に割り当てる"""
        session_id = SessionId.generate()
        self._state.assign_session(session_id)
        logger.info("Session initialized", extra={"session_id": str(session_id)})
        return session_id

    def save_session(self) -> SessionId:
        """現在の状態を保存する（セッション未採番なら先に採番する）

        保存に失敗した場合は SessionPersistenceException が伝播する。
        """
        session_id = self._state.session_id or self.initialize_session()
        self._store.save(session_id, self._state)
        changes = self._state.flush_domain_events()
        logger.info(
            "Session saved",
            extra={"session_id": str(session_id), "changes": len(changes)},
        )
        return session_id

    def load_session(self, session_id: SessionId) -> None:
        """保存済みの状態を現在の集約へ復元する"""
        record = self._store.load(session_id)
        if record is None:
            raise SessionNotFoundException("Session not found or expired")
        record.restore_into(self._state, session_id)
        logger.info("Session restored", extra={"session_id": str(session_id)})

    def clear_session(self) -> None:
        """セッションを削除し、状態からセッションIDを外す"""
        session_id = self._state.session_id
        if session_id is None:
            return
        self._store.clear(session_id)
        self._state.release_session()

    def extend_session(self) -> None:
        """ユーザー操作に合わせて TTL を延長する"""
        self._store.extend(self._require_session_id())

    def is_session_valid(self) -> bool:
        return self._store.is_valid(self._require_session_id())

    def has_unsaved_changes(self) -> bool:
        return self._state.has_domain_events()

    def _require_session_id(self) -> SessionId:
        session_id = self._state.session_id
        if session_id is None:
            raise SessionNotInitializedException(
                "Session operation called before a session was initialized"
            )
        return session_id
