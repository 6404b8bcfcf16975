from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下の値へのアクセスは必ず集約ルートを経由
    - 変更はドメインイベントとして記録される
    """

    def __init__(self, id: ID) -> None:
        super().__init__(id)
        self._domain_events: list = []

    def add_domain_event(self, event: object) -> None:
        """ドメインイベントを追加する"""
        self._domain_events.append(event)

    def has_domain_events(self) -> bool:
        """未処理のドメインイベントがあるか"""
        return bool(self._domain_events)

    def flush_domain_events(self) -> list:
        """ドメインイベントを取り出してクリアする"""
        events = self._domain_events.copy()
        self._domain_events.clear()
        return events
