from __future__ import annotations

import secrets
import string
import time
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class SessionId:
    """予約セッションID

    例: "session_1767225600000_k3j9x0a2b7c1q"
    タイムスタンプ + ランダム接尾辞。衝突しても上書きで自己修復されるため、
    暗号学的な一意性は要求しない。
    """

    PREFIX: ClassVar[str] = "session_"
    SUFFIX_LENGTH: ClassVar[int] = 13
    SUFFIX_ALPHABET: ClassVar[str] = string.ascii_lowercase + string.digits

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("SessionId cannot be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> SessionId:
        """新しいセッションIDを採番する"""
        millis = int(time.time() * 1000)
        suffix = "".join(
            secrets.choice(cls.SUFFIX_ALPHABET) for _ in range(cls.SUFFIX_LENGTH)
        )
        return cls(value=f"{cls.PREFIX}{millis}_{suffix}")
