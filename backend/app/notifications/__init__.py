# backend/app/notifications/__init__.py

"""
通知レイヤ用モジュール群。

設定で選んだチャンネル（Email / SMS / 追加チャンネル）のドライバを
NotificationManager が遅延生成・キャッシュし、呼び出し側は send() するだけでよい。

構成イメージ:
- config: チャンネルごとの設定値（環境変数由来）
- schemas: チャンネル名・送信結果・API スキーマ
- mail: メール送信基盤（SMTP）アダプタ
- drivers: ChannelDriver と Email / SMS ドライバ
- manager: チャンネル名 → ドライバの解決
- factory: アプリ全体で共有する NotificationManager の生成
- router: /notifications エンドポイント
"""

from .drivers import ChannelDriver, EmailChannelDriver, SmsChannelDriver  # noqa: F401
from .factory import get_notification_manager, reset_state  # noqa: F401
from .manager import (  # noqa: F401
    DefaultDriverNotConfiguredError,
    NotificationManager,
    NotificationManagerError,
    UnknownDriverError,
)
from .schemas import NotificationChannel, SendOutcome  # noqa: F401
