"""
Shared fixtures: explicit Settings, an AsyncMock standing in for
aiosmtplib.send, and a TestClient bound to an app built from both.
"""

import os

import pytest
from unittest.mock import AsyncMock

# Ensure env vars are set before importing anything that builds Settings
os.environ.setdefault("EMAIL_USER", "bookings@loksar.com")
os.environ.setdefault("EMAIL_PASS", "test-app-password")
os.environ.setdefault("ADMIN_EMAIL", "admin@loksar.com")

from fastapi.testclient import TestClient

from src.common.config import Settings
from src.common.utils.email_service import EmailDispatcher
from src.main import create_app

ADMIN_EMAIL = "admin@loksar.com"


def make_settings(**overrides) -> Settings:
    values = {
        "EMAIL_USER": "bookings@loksar.com",
        "EMAIL_PASS": "test-app-password",
        "ADMIN_EMAIL": ADMIN_EMAIL,
        "SMTP_HOST": "smtp.test.local",
        "SMTP_PORT": 465,
        "SMTP_USE_TLS": True,
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def transport():
    return AsyncMock(return_value=({}, "OK"))


@pytest.fixture
def dispatcher(settings, transport):
    return EmailDispatcher(settings, transport=transport)


@pytest.fixture
def client(settings, dispatcher):
    app = create_app(settings, dispatcher=dispatcher)
    return TestClient(app)


def sent_messages(transport):
    """EmailMessage objects handed to the transport, in send order."""
    return [call.args[0] for call in transport.await_args_list]


def html_of(message) -> str:
    return message.get_body(preferencelist=("html",)).get_content()
