# backend/app/notifications/config.py

"""
通知チャンネルごとの設定値をまとめるモジュール。

- 各ドライバは生成時に一度だけ設定を読み込み、以後は読み取り専用で保持する
- 値はすべて環境変数由来（.env / システム環境変数）
"""

from dataclasses import dataclass
from typing import Optional

from app.utils.config import get_env, get_env_bool, get_env_float, get_env_int

DEFAULT_CHANNEL_ENV = "NOTIFICATION_DEFAULT_CHANNEL"


@dataclass(frozen=True)
class EmailChannelSettings:
    """
    Email チャンネル用の設定値。

    NOTE:
      - from_address は設定として保持するが、送信処理では参照しない。
        実際の送信元はメール送信基盤側（MailSettings.from_address）が決める。
    """

    from_address: Optional[str]
    to_address: str


@dataclass(frozen=True)
class SmsChannelSettings:
    """SMS ゲートウェイ API 用の設定値。"""

    sender_id: str
    api_token: str
    api_url: str
    to_number: str
    timeout_seconds: float = 10.0


@dataclass(frozen=True)
class MailSettings:
    """SMTP サーバー接続用の設定値。"""

    host: str
    from_address: str
    port: int = 587
    username: Optional[str] = None
    password: Optional[str] = None
    use_tls: bool = True
    timeout_seconds: float = 10.0


def get_default_channel() -> Optional[str]:
    """
    デフォルトの通知チャンネル名を返す。

    未設定の場合は None（呼び出し側で設定エラーとして扱う）。
    """
    return get_env(DEFAULT_CHANNEL_ENV, required=False)


def get_email_settings() -> EmailChannelSettings:
    """
    環境変数から Email チャンネル設定を読み込む。

    必須:
      - EMAIL_TO_ADDRESS

    任意:
      - EMAIL_FROM_ADDRESS
    """
    return EmailChannelSettings(
        from_address=get_env("EMAIL_FROM_ADDRESS", required=False),
        to_address=get_env("EMAIL_TO_ADDRESS"),
    )


def get_sms_settings() -> SmsChannelSettings:
    """
    環境変数から SMS チャンネル設定を読み込む。

    必須:
      - SMS_SENDER_ID
      - SMS_API_TOKEN
      - SMS_API_URL
      - SMS_TO_NUMBER

    任意:
      - SMS_TIMEOUT_SECONDS（デフォルト 10秒）
    """
    return SmsChannelSettings(
        sender_id=get_env("SMS_SENDER_ID"),
        api_token=get_env("SMS_API_TOKEN"),
        api_url=get_env("SMS_API_URL"),
        to_number=get_env("SMS_TO_NUMBER"),
        timeout_seconds=get_env_float("SMS_TIMEOUT_SECONDS", default=10.0),
    )


def get_mail_settings() -> MailSettings:
    """
    環境変数から SMTP 設定を読み込む。

    必須:
      - MAIL_HOST
      - MAIL_FROM_ADDRESS

    任意:
      - MAIL_PORT（デフォルト 587）
      - MAIL_USERNAME / MAIL_PASSWORD
      - MAIL_USE_TLS（デフォルト true, STARTTLS）
      - MAIL_TIMEOUT_SECONDS（デフォルト 10秒）
    """
    return MailSettings(
        host=get_env("MAIL_HOST"),
        from_address=get_env("MAIL_FROM_ADDRESS"),
        port=get_env_int("MAIL_PORT", default=587),
        username=get_env("MAIL_USERNAME", required=False),
        password=get_env("MAIL_PASSWORD", required=False),
        use_tls=get_env_bool("MAIL_USE_TLS", default=True),
        timeout_seconds=get_env_float("MAIL_TIMEOUT_SECONDS", default=10.0),
    )
