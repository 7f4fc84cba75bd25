# backend/app/notifications/factory.py

"""
通知マネージャの簡易ファクトリ。

- email / sms の 2チャンネルを登録した NotificationManager を生成する
- アプリ全体で共有するインスタンスを提供し、テスト時にリセットできるようにする

各ドライバの設定は、そのチャンネルが初めて解決されたときに環境変数から読み込む。
"""

from __future__ import annotations

from typing import Optional

from .config import get_default_channel, get_email_settings, get_mail_settings, get_sms_settings
from .drivers import EmailChannelDriver, SmsChannelDriver
from .mail import SmtpMailSender
from .manager import NotificationManager
from .schemas import NotificationChannel

_notification_manager: Optional[NotificationManager] = None


def _create_email_driver() -> EmailChannelDriver:
    return EmailChannelDriver(
        settings=get_email_settings(),
        mail_sender=SmtpMailSender(get_mail_settings()),
    )


def _create_sms_driver() -> SmsChannelDriver:
    return SmsChannelDriver(settings=get_sms_settings())


def build_notification_manager() -> NotificationManager:
    """
    組み込みチャンネルを登録した NotificationManager を新しく生成する。
    """
    manager = NotificationManager(default_channel=get_default_channel)
    manager.extend(NotificationChannel.EMAIL.value, _create_email_driver)
    manager.extend(NotificationChannel.SMS.value, _create_sms_driver)
    return manager


def get_notification_manager() -> NotificationManager:
    """
    アプリ全体で共有する NotificationManager を返す。

    初回呼び出し時にのみ生成し、それ以降は同じインスタンスを返す。
    """
    global _notification_manager
    if _notification_manager is None:
        _notification_manager = build_notification_manager()
    return _notification_manager


def reset_state() -> None:
    """
    テスト用に NotificationManager のシングルトン状態をリセットする。
    """
    global _notification_manager
    _notification_manager = None
