# backend/app/notifications/mail.py

"""
メール送信基盤（SMTP）への薄いアダプタ。

EmailChannelDriver からは MailSender プロトコルとしてのみ見え、
テストでは任意のダミー実装に差し替えられる。
"""

from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from email.message import EmailMessage
from typing import Any, Coroutine, Protocol

import aiosmtplib

from .config import MailSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MailMessage:
    """単一宛先・HTML 本文のメール 1通分。"""

    to_address: str
    subject: str
    html_body: str


class MailSender(Protocol):
    """
    メール送信の最小インターフェース。

    送信に失敗した場合は例外を投げる（握りつぶすかどうかは呼び出し側が決める）。
    """

    def send_mail(self, message: MailMessage) -> None:  # pragma: no cover - Protocol
        ...


def _run_sync(coro: Coroutine[Any, Any, None]) -> None:
    """
    コルーチンを完了までブロックして実行する。

    呼び出しスレッドでイベントループが動いている場合（async def の中など）は
    asyncio.run() が使えないため、別スレッドの新しいループで実行する。
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        asyncio.run(coro)
        return

    with ThreadPoolExecutor(max_workers=1) as executor:
        executor.submit(asyncio.run, coro).result()


class SmtpMailSender:
    """
    aiosmtplib で SMTP サーバーへ送信する MailSender 実装。

    send_mail() は同期 API で、送信完了までブロックする。
    イベントループ上から呼ばれた場合はワーカースレッドで送信する。
    """

    def __init__(self, settings: MailSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> MailSettings:
        return self._settings

    def _build_message(self, message: MailMessage) -> EmailMessage:
        mime = EmailMessage()
        mime["From"] = self._settings.from_address
        mime["To"] = message.to_address
        mime["Subject"] = message.subject
        mime.set_content("This message requires an HTML capable mail client.")
        mime.add_alternative(message.html_body, subtype="html")
        return mime

    async def _submit(self, mime: EmailMessage) -> None:
        await aiosmtplib.send(
            mime,
            hostname=self._settings.host,
            port=self._settings.port,
            username=self._settings.username,
            password=self._settings.password,
            start_tls=self._settings.use_tls,
            timeout=self._settings.timeout_seconds,
        )

    def send_mail(self, message: MailMessage) -> None:
        """
        メールを 1通送信する。

        :raises aiosmtplib.SMTPException: SMTP レベルのエラー
        :raises OSError: 接続エラーなど
        """
        mime = self._build_message(message)
        _run_sync(self._submit(mime))
        logger.debug(
            "Mail submitted to %s:%s for %s",
            self._settings.host,
            self._settings.port,
            message.to_address,
        )
