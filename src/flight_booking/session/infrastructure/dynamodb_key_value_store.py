import os
import time
from typing import Callable

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import BotoCoreError, ClientError

from flight_booking.session.infrastructure.key_value_store import (
    KeyValueStore,
    KeyValueStoreError,
)


class DynamoDBKeyValueStore(KeyValueStore):
    """DynamoDB を使用した KeyValueStore の具象実装

    アイテム構造: PK（キー）, value（値）, expires_at（失効時刻の epoch 秒）
    expires_at はテーブルの TTL 属性として設定する。DynamoDB の TTL 削除は
    即時ではないため、失効済みアイテムは読み取り側で存在しないものとして扱う。
    """

    def __init__(
        self,
        table_name: str | None = None,
        table=None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.table_name = table_name or os.getenv("SESSION_TABLE_NAME")
        if table is None:
            self.dynamodb = boto3.resource("dynamodb")
            table = self.dynamodb.Table(self.table_name)
        self.table = table
        self._clock = clock

    def get(self, key: str) -> bytes | None:
        item = self._get_live_item(key)
        if item is None:
            return None
        return item["value"].encode("utf-8")

    def set_with_ttl(self, key: str, value: bytes, seconds: int) -> None:
        item = {
            "PK": key,
            "value": value.decode("utf-8"),
            "expires_at": self._expires_at(seconds),
        }
        try:
            self.table.put_item(Item=item)
        except (ClientError, BotoCoreError) as e:
            raise KeyValueStoreError(f"DynamoDB put_item failed: {key}") from e

    def delete(self, key: str) -> None:
        try:
            self.table.delete_item(Key={"PK": key})
        except (ClientError, BotoCoreError) as e:
            raise KeyValueStoreError(f"DynamoDB delete_item failed: {key}") from e

    def exists(self, key: str) -> bool:
        return self._get_live_item(key) is not None

    def expire(self, key: str, seconds: int) -> bool:
        try:
            self.table.update_item(
                Key={"PK": key},
                UpdateExpression="SET expires_at = :expires_at",
                ConditionExpression=Attr("PK").exists()
                & Attr("expires_at").gt(int(self._clock())),
                ExpressionAttributeValues={":expires_at": self._expires_at(seconds)},
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                return False
            raise KeyValueStoreError(f"DynamoDB update_item failed: {key}") from e
        except BotoCoreError as e:
            raise KeyValueStoreError(f"DynamoDB update_item failed: {key}") from e
        return True

    def _get_live_item(self, key: str) -> dict | None:
        try:
            response = self.table.get_item(Key={"PK": key}, ConsistentRead=True)
        except (ClientError, BotoCoreError) as e:
            raise KeyValueStoreError(f"DynamoDB get_item failed: {key}") from e
        item = response.get("Item")
        if not item:
            return None
        if int(item.get("expires_at", 0)) <= self._clock():
            return None
        return item

    def _expires_at(self, seconds: int) -> int:
        return int(self._clock()) + seconds
