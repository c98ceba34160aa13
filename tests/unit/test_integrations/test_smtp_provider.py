# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
from __future__ import annotations

import smtplib
from typing import ClassVar

import pytest

from src.config import Settings
from src.integrations.base import EmailDeliveryError
from src.integrations.smtp import SmtpProvider


class FakeSMTP:
    """SMTP stub capturing actions."""

    instances: ClassVar[list[FakeSMTP]] = []

    def __init__(self, host: str, port: int, timeout: float | None = None) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout
        self.started_tls = False
        self.logged_in: tuple[str, str] | None = None
        self.sent: list[tuple[str, list[str], str]] = []
        self.closed = False
        FakeSMTP.instances.append(self)

    def starttls(self) -> None:
        self.started_tls = True

    def login(self, username: str, password: str) -> None:
        self.logged_in = (username, password)

    def sendmail(self, from_addr: str, to_addrs: list[str], msg: str) -> None:
        self.sent.append((from_addr, to_addrs, msg))

    def quit(self) -> None:
        self.closed = True


class AuthFailSMTP(FakeSMTP):
    def login(self, username: str, password: str) -> None:
        raise smtplib.SMTPAuthenticationError(535, b"auth failed")


class RefusingSMTP(FakeSMTP):
    def sendmail(self, from_addr: str, to_addrs: list[str], msg: str) -> None:
        raise smtplib.SMTPRecipientsRefused({to_addrs[0]: (550, b"no such user")})


def smtp_config(**overrides) -> dict:
    config = {
        "host": "smtp.example.com",
        "port": 587,
        "username": "user",
        "password": "secret",
        "from_email": "alerts@gulfrate.example.com",
        "from_name": "Gulf Rate",
        "use_tls": True,
    }
    config.update(overrides)
    return config


def test_smtp_health_and_send_email(monkeypatch):
    FakeSMTP.instances.clear()
    monkeypatch.setattr("smtplib.SMTP", FakeSMTP)
    monkeypatch.setattr("smtplib.SMTP_SSL", FakeSMTP)

    provider = SmtpProvider(smtp_config())

    success, message = provider.health_check()
    assert success is True
    assert message == "Connected"
    assert FakeSMTP.instances[-1].started_tls is True
    assert FakeSMTP.instances[-1].logged_in == ("user", "secret")

    provider.send_email(
        to=["jane@example.com"],
        subject="Rate alert",
        body="Plain text",
        body_html="<p>HTML</p>",
    )
    server = FakeSMTP.instances[-1]
    sent = server.sent[0]
    assert sent[0] == "alerts@gulfrate.example.com"
    assert sent[1] == ["jane@example.com"]
    assert "Rate alert" in sent[2]
    assert "multipart/alternative" in sent[2]
    assert server.closed is True


def test_smtp_ssl_skips_starttls(monkeypatch):
    FakeSMTP.instances.clear()
    monkeypatch.setattr("smtplib.SMTP_SSL", FakeSMTP)

    provider = SmtpProvider(smtp_config(port=465, use_ssl=True, username=""))
    provider.send_email(to=["jane@example.com"], subject="Hi", body="Body")

    server = FakeSMTP.instances[-1]
    assert server.port == 465
    assert server.started_tls is False
    assert server.logged_in is None


def test_smtp_health_auth_failure(monkeypatch):
    monkeypatch.setattr("smtplib.SMTP", AuthFailSMTP)
    provider = SmtpProvider(smtp_config(username="bad"))

    success, message = provider.health_check()

    assert success is False
    assert message == "Authentication failed"


def test_smtp_send_failure_raises_delivery_error(monkeypatch):
    monkeypatch.setattr("smtplib.SMTP", RefusingSMTP)
    provider = SmtpProvider(smtp_config())

    with pytest.raises(EmailDeliveryError):
        provider.send_email(to=["ghost@example.com"], subject="Hi", body="Body")


def test_smtp_without_host():
    provider = SmtpProvider(smtp_config(host=""))

    assert provider.health_check() == (False, "SMTP host not configured")
    with pytest.raises(EmailDeliveryError):
        provider.send_email(to=["jane@example.com"], subject="Hi", body="Body")


def test_from_settings():
    provider = SmtpProvider.from_settings(
        Settings(
            smtp_host="mail.example.com",
            smtp_port=2525,
            email_from="noreply@example.com",
        )
    )

    assert provider.host == "mail.example.com"
    assert provider.port == 2525
    assert provider.from_email == "noreply@example.com"
    assert provider.get_type() == "smtp"
