from abc import ABC, abstractmethod


class KeyValueStoreError(Exception):
    """キーバリューストアへの接続・操作に失敗した場合"""

    pass


class KeyValueStore(ABC):
    """TTL 付きキーバリューストアのインターフェース

    失効はストア自身の時計で判定される。実装はライブラリ固有の例外を
    KeyValueStoreError に変換して送出する。
    """

    @abstractmethod
    def get(self, key: str) -> bytes | None:
        raise NotImplementedError

    @abstractmethod
    def set_with_ttl(self, key: str, value: bytes, seconds: int) -> None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, key: str) -> None:
        raise NotImplementedError

    @abstractmethod
    def exists(self, key: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def expire(self, key: str, seconds: int) -> bool:
        """TTL を設定し直す（キーが存在しない場合は False）"""
        raise NotImplementedError
