# backend/tests/test_notifications_factory.py

import pytest

from app.notifications import factory
from app.notifications.drivers import EmailChannelDriver, SmsChannelDriver
from app.notifications.manager import UnknownDriverError
from app.utils.config import EnvVarMissingError


def test_get_notification_manager_is_shared() -> None:
    assert factory.get_notification_manager() is factory.get_notification_manager()


def test_reset_state_drops_shared_manager() -> None:
    first = factory.get_notification_manager()
    factory.reset_state()

    assert factory.get_notification_manager() is not first


def test_builtin_channels_are_registered() -> None:
    manager = factory.build_notification_manager()

    assert manager.registered_channels() == ["email", "sms"]


def test_builtin_drivers_bind_env_settings(monkeypatch) -> None:
    monkeypatch.setenv("EMAIL_TO_ADDRESS", "alerts@example.com")
    monkeypatch.setenv("SMS_TO_NUMBER", "+15559990000")
    manager = factory.build_notification_manager()

    email = manager.driver("email")
    sms = manager.driver("sms")

    assert isinstance(email, EmailChannelDriver)
    assert email.settings.to_address == "alerts@example.com"
    assert isinstance(sms, SmsChannelDriver)
    assert sms.settings.to_number == "+15559990000"


def test_default_channel_comes_from_env(monkeypatch) -> None:
    monkeypatch.setenv("NOTIFICATION_DEFAULT_CHANNEL", "sms")
    manager = factory.build_notification_manager()

    assert isinstance(manager.driver(), SmsChannelDriver)


def test_unknown_default_channel_raises(monkeypatch) -> None:
    monkeypatch.setenv("NOTIFICATION_DEFAULT_CHANNEL", "fax")
    manager = factory.build_notification_manager()

    with pytest.raises(UnknownDriverError):
        manager.driver()


def test_missing_channel_config_raises_and_retries(monkeypatch) -> None:
    """
    必須設定が欠けている間は生成に失敗し、設定後の解決で生成されること。
    """
    monkeypatch.delenv("SMS_API_TOKEN", raising=False)
    manager = factory.build_notification_manager()

    with pytest.raises(EnvVarMissingError):
        manager.driver("sms")

    monkeypatch.setenv("SMS_API_TOKEN", "late-token")
    assert manager.driver("sms").settings.api_token == "late-token"
