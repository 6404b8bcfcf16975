from abc import ABC, abstractmethod

from flight_booking.booking.domain import BookingState
from flight_booking.session.domain.value_object import SessionRecord
from flight_booking.shared.domain import SessionId

SESSION_TTL_SECONDS = 30 * 60


class SessionStore(ABC):
    """予約セッションストアのインターフェース

    セッションID ごとに1つの BookingState を TTL 付きで永続化する。
    - save の失敗は SessionPersistenceException として呼び出し側へ伝播する
    - load / clear / extend / is_valid の失敗は「セッションなし」として扱う
    """

    @abstractmethod
    def save(self, session_id: SessionId, state: BookingState) -> None:
        """状態を全体上書きで保存し、TTL を満期に戻す"""
        raise NotImplementedError

    @abstractmethod
    def load(self, session_id: SessionId) -> SessionRecord | None:
        """保存済みの状態を読み込む（存在しない・壊れている場合は None）"""
        raise NotImplementedError

    @abstractmethod
    def clear(self, session_id: SessionId) -> None:
        """セッションを削除する（冪等）"""
        raise NotImplementedError

    @abstractmethod
    def is_valid(self, session_id: SessionId) -> bool:
        """セッションが現在ストアに存在するか"""
        raise NotImplementedError

    @abstractmethod
    def extend(self, session_id: SessionId) -> None:
        """内容を変えずに TTL を満期に戻す"""
        raise NotImplementedError
