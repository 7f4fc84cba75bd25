# backend/tests/conftest.py
"""
Pytest configuration for the notification backend tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import app.*` works correctly in tests.
- Ensures environment variables for the email / sms channels are set
  with safe dummy values.
- Resets the shared NotificationManager between tests.
"""

import os
import sys
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        # Insert at the beginning so it has priority over site-packages, etc.
        sys.path.insert(0, project_root_str)


def _ensure_test_env_vars() -> None:
    """
    Set dummy environment variables required for tests.

    These values are only for local testing and do NOT contain real secrets.
    In real environments, proper values should be provided via .env or system env.
    """
    os.environ.setdefault("EMAIL_FROM_ADDRESS", "noreply@example.com")
    os.environ.setdefault("EMAIL_TO_ADDRESS", "ops@example.com")
    os.environ.setdefault("SMS_SENDER_ID", "DUMMYID")
    os.environ.setdefault("SMS_API_TOKEN", "dummy-sms-token-for-tests")
    os.environ.setdefault("SMS_API_URL", "https://sms.example.com/api/v3/sms/send")
    os.environ.setdefault("SMS_TO_NUMBER", "+15550000000")
    os.environ.setdefault("MAIL_HOST", "smtp.example.com")
    os.environ.setdefault("MAIL_FROM_ADDRESS", "noreply@example.com")


_ensure_project_root_in_sys_path()
_ensure_test_env_vars()


@pytest.fixture(autouse=True)
def _reset_notification_manager():
    from app.notifications.factory import reset_state

    reset_state()
    yield
    reset_state()
