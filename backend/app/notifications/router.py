# backend/app/notifications/router.py
"""
通知送信用の FastAPI ルーター定義。

- POST /notifications/test/email
- POST /notifications/test/sms
- POST /notifications/send
- GET  /notifications/channels

送信の成否はレスポンスに反映しない（ログにのみ残る）。
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from app.utils.config import EnvVarMissingError

from .factory import get_notification_manager
from .manager import DefaultDriverNotConfiguredError, NotificationManager, UnknownDriverError
from .schemas import (
    NotificationChannel,
    NotificationChannelsResponse,
    NotificationDispatchResponse,
    NotificationSendRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])

TEST_EMAIL_MESSAGE = "This is a test email notification."
TEST_SMS_MESSAGE = "This is a test SMS notification."


def _dispatch(manager: NotificationManager, message: str, channel: Optional[str]) -> str:
    """
    チャンネルを解決して送信し、実際に使ったチャンネル名を返す。

    - 未登録チャンネル → 404 Not Found
    - デフォルト未設定 / 必須環境変数の欠落 → 500 Internal Server Error
    """
    try:
        name = channel if channel is not None else manager.default_driver_name()
        driver = manager.driver(name)
    except UnknownDriverError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exc),
        ) from exc
    except (DefaultDriverNotConfiguredError, EnvVarMissingError) as exc:
        logger.error("Notification channel is not configured: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Notification channel is not configured.",
        ) from exc

    driver.send(message)
    return name


@router.post(
    "/test/email",
    response_model=NotificationDispatchResponse,
    summary="テストメールの送信",
)
def send_test_email(
    manager: NotificationManager = Depends(get_notification_manager),
) -> NotificationDispatchResponse:
    """
    固定文面のテストメールを email チャンネルで送信する。
    """
    channel = _dispatch(manager, TEST_EMAIL_MESSAGE, NotificationChannel.EMAIL.value)
    logger.info("Test email dispatched.")
    return NotificationDispatchResponse(channel=channel, detail="Test email sent.")


@router.post(
    "/test/sms",
    response_model=NotificationDispatchResponse,
    summary="テスト SMS の送信",
)
def send_test_sms(
    manager: NotificationManager = Depends(get_notification_manager),
) -> NotificationDispatchResponse:
    """
    固定文面のテスト SMS を sms チャンネルで送信する。
    """
    channel = _dispatch(manager, TEST_SMS_MESSAGE, NotificationChannel.SMS.value)
    logger.info("Test SMS dispatched.")
    return NotificationDispatchResponse(channel=channel, detail="Test SMS sent.")


@router.post(
    "/send",
    response_model=NotificationDispatchResponse,
    summary="任意メッセージの送信",
    description="channel を省略した場合は NOTIFICATION_DEFAULT_CHANNEL のチャンネルで送信する。",
)
def send_notification(
    body: NotificationSendRequest,
    manager: NotificationManager = Depends(get_notification_manager),
) -> NotificationDispatchResponse:
    channel = _dispatch(manager, body.message, body.channel)
    logger.info("Notification dispatched via %s.", channel)
    return NotificationDispatchResponse(
        channel=channel,
        detail=f"Notification sent via {channel}.",
    )


@router.get(
    "/channels",
    response_model=NotificationChannelsResponse,
    summary="登録済みチャンネルの一覧",
)
def list_channels(
    manager: NotificationManager = Depends(get_notification_manager),
) -> NotificationChannelsResponse:
    try:
        default_channel: Optional[str] = manager.default_driver_name()
    except DefaultDriverNotConfiguredError:
        default_channel = None

    return NotificationChannelsResponse(
        channels=manager.registered_channels(),
        default_channel=default_channel,
    )
