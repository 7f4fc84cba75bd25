# backend/app/notifications/schemas.py

"""
通知まわりの共通スキーマ定義。

- NotificationChannel: 組み込みの通知チャンネル名
- SendOutcome: ドライバ内部での送信結果（ログに変換するだけで呼び出し元には返さない）
- /notifications/* 用のリクエスト・レスポンス
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class NotificationChannel(str, Enum):
    """
    組み込みの通知チャンネル。

    - EMAIL: メール送信基盤経由
    - SMS: SMS ゲートウェイ API 経由

    NotificationManager.extend() で任意の名前のチャンネルを追加できるため、
    ここに無い名前もチャンネル名として有効。
    """

    EMAIL = "email"
    SMS = "sms"


@dataclass(frozen=True)
class SendOutcome:
    """1回の送信試行の結果。"""

    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "SendOutcome":
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> "SendOutcome":
        return cls(success=False, error=error)


class NotificationSendRequest(BaseModel):
    """/notifications/send のリクエストボディ。"""

    message: str = Field(..., min_length=1, description="送信する本文（プレーンテキスト / HTML）。")
    channel: Optional[str] = Field(
        None,
        description="送信先チャンネル名。省略時は NOTIFICATION_DEFAULT_CHANNEL を使う。",
    )


class NotificationDispatchResponse(BaseModel):
    """
    送信要求を受け付けたことを示すレスポンス。

    送信の成否はログにのみ残るため、ここでは「送信を試みた」ことしか表さない。
    """

    channel: str = Field(..., description="実際に使われたチャンネル名。")
    detail: str = Field(..., description="人間向けの確認メッセージ。")


class NotificationChannelsResponse(BaseModel):
    """/notifications/channels のレスポンス。"""

    channels: List[str] = Field(..., description="登録済みのチャンネル名。")
    default_channel: Optional[str] = Field(
        None,
        description="設定済みのデフォルトチャンネル（未設定なら null）。",
    )
