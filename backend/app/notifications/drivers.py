# backend/app/notifications/drivers.py

"""
通知チャンネルのドライバ実装。

- ChannelDriver: send(message) だけを持つ最小インターフェース
- EmailChannelDriver: MailSender 経由でメールを 1通送る
- SmsChannelDriver: SMS ゲートウェイ API へ JSON を POST する

どのドライバも送信失敗を呼び出し元へ例外として伝えない（fire-and-forget）。
失敗は SendOutcome に変換し、ERROR ログとしてのみ残す。
"""

from __future__ import annotations

import html
import logging
from typing import Dict, Optional, Protocol

import httpx

from .config import EmailChannelSettings, SmsChannelSettings
from .mail import MailMessage, MailSender
from .schemas import SendOutcome

logger = logging.getLogger(__name__)

EMAIL_SUBJECT = "Notification"


class ChannelDriver(Protocol):
    """
    通知ドライバの最小インターフェース。

    実装例:
    - EmailChannelDriver
    - SmsChannelDriver
    - NotificationManager.extend() で登録する独自ドライバ
    """

    def send(self, message: str) -> None:  # pragma: no cover - Protocol
        ...


class EmailChannelDriver:
    """
    メール送信ドライバ。

    生成時に EmailChannelSettings を束縛し、以後すべての送信で同じ宛先を使う。
    """

    def __init__(
        self,
        settings: EmailChannelSettings,
        mail_sender: MailSender,
        logger_: logging.Logger | None = None,
    ) -> None:
        self._settings = settings
        self._mail_sender = mail_sender
        self._logger = logger_ or logger

    @property
    def settings(self) -> EmailChannelSettings:
        return self._settings

    def _build_mail(self, message: str) -> MailMessage:
        return MailMessage(
            to_address=self._settings.to_address,
            subject=EMAIL_SUBJECT,
            html_body=f"<p>{html.escape(message)}</p>",
        )

    def _deliver(self, message: str) -> SendOutcome:
        try:
            self._mail_sender.send_mail(self._build_mail(message))
        except Exception as exc:  # noqa: BLE001 - 送信失敗で呼び出し元を止めない
            return SendOutcome.failed(str(exc) or exc.__class__.__name__)
        return SendOutcome.ok()

    def send(self, message: str) -> None:
        """
        メールを 1通送信する。

        成功時は INFO、失敗時は ERROR を 1件だけ出力し、例外は投げない。
        """
        outcome = self._deliver(message)
        if outcome.success:
            self._logger.info("Email sent successfully: %s", message)
        else:
            self._logger.error("Failed to send email: %s", outcome.error)


class SmsChannelDriver:
    """
    SMS ゲートウェイ API への送信ドライバ。

    - POST {api_url}
    - Authorization: Bearer {api_token}
    - body: {"phone", "senderid", "message"}

    client を渡さない場合は settings.timeout_seconds をタイムアウトにした
    httpx.Client を自前で生成し、ドライバの生存期間中使い回す。
    """

    def __init__(
        self,
        settings: SmsChannelSettings,
        client: Optional[httpx.Client] = None,
        logger_: logging.Logger | None = None,
    ) -> None:
        self._settings = settings
        self._client = client or httpx.Client(timeout=settings.timeout_seconds)
        self._logger = logger_ or logger

    @property
    def settings(self) -> SmsChannelSettings:
        return self._settings

    @property
    def timeout(self) -> httpx.Timeout:
        return self._client.timeout

    def _build_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._settings.api_token}",
            "Content-Type": "application/json",
        }

    def _build_payload(self, message: str) -> Dict[str, str]:
        return {
            "phone": self._settings.to_number,
            "senderid": self._settings.sender_id,
            "message": message,
        }

    def _deliver(self, message: str) -> SendOutcome:
        try:
            response = self._client.post(
                self._settings.api_url,
                json=self._build_payload(message),
                headers=self._build_headers(),
            )
        except httpx.HTTPError as exc:  # 接続エラー・タイムアウト・不正レスポンスなど
            return SendOutcome.failed(str(exc) or exc.__class__.__name__)
        except Exception as exc:  # noqa: BLE001 - リクエスト組み立て時のエラー（エンコード不能な値など）
            return SendOutcome.failed(f"{exc.__class__.__name__}: {exc}")

        if response.status_code // 100 != 2:
            return SendOutcome.failed(
                f"status_code={response.status_code} body={response.text}"
            )
        return SendOutcome.ok()

    def send(self, message: str) -> None:
        """
        SMS を 1通送信する。

        2xx 以外や通信エラーは ERROR ログに残すだけで、例外は投げない。
        """
        outcome = self._deliver(message)
        if outcome.success:
            self._logger.info("SMS sent successfully: %s", message)
        else:
            self._logger.error("Failed to send SMS: %s", outcome.error)
