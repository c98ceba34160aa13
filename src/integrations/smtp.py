# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""SMTP email provider."""

import logging
import smtplib
from email.message import EmailMessage
from email.utils import formataddr
from typing import Any

from src.config import Settings
from src.integrations.base import EmailDeliveryError, EmailProvider

logger = logging.getLogger(__name__)


class SmtpProvider(EmailProvider):
    """Sends mail through a plain SMTP server (STARTTLS or implicit TLS)."""

    @classmethod
    def get_type(cls) -> str:
        return "smtp"

    def __init__(self, config: dict[str, Any]):
        self.host: str = config.get("host", "")
        self.port: int = int(config.get("port", 587))
        self.username: str = config.get("username", "")
        self.password: str = config.get("password", "")
        self.from_email: str = config.get("from_email", "")
        self.from_name: str = config.get("from_name", "")
        self.use_tls: bool = config.get("use_tls", True)
        self.use_ssl: bool = config.get("use_ssl", False)
        self.timeout: float = float(config.get("timeout", 10.0))

    @classmethod
    def from_settings(cls, settings: Settings) -> "SmtpProvider":
        """Build a provider from application settings."""
        return cls(
            {
                "host": settings.smtp_host,
                "port": settings.smtp_port,
                "username": settings.smtp_username,
                "password": settings.smtp_password,
                "from_email": settings.email_from,
                "from_name": settings.email_from_name,
                "use_tls": settings.smtp_use_tls,
                "use_ssl": settings.smtp_use_ssl,
                "timeout": settings.smtp_timeout,
            }
        )

    def _connect(self) -> smtplib.SMTP:
        if self.use_ssl:
            server: smtplib.SMTP = smtplib.SMTP_SSL(
                self.host, self.port, timeout=self.timeout
            )
        else:
            server = smtplib.SMTP(self.host, self.port, timeout=self.timeout)
            if self.use_tls:
                server.starttls()
        if self.username:
            server.login(self.username, self.password)
        return server

    def health_check(self) -> tuple[bool, str]:
        if not self.host:
            return False, "SMTP host not configured"
        try:
            server = self._connect()
            server.quit()
            return True, "Connected"
        except smtplib.SMTPAuthenticationError:
            return False, "Authentication failed"
        except (smtplib.SMTPException, OSError) as e:
            return False, f"Connection failed: {e}"

    def send_email(
        self,
        to: list[str],
        subject: str,
        body: str,
        body_html: str | None = None,
    ) -> None:
        if not self.host:
            raise EmailDeliveryError("SMTP host not configured")

        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = (
            formataddr((self.from_name, self.from_email))
            if self.from_name
            else self.from_email
        )
        msg["To"] = ", ".join(to)
        msg.set_content(body)
        if body_html:
            msg.add_alternative(body_html, subtype="html")

        try:
            server = self._connect()
            try:
                server.sendmail(self.from_email, to, msg.as_string())
            finally:
                server.quit()
        except (smtplib.SMTPException, OSError) as e:
            raise EmailDeliveryError(f"Failed to send email: {e}") from e

        logger.info(f"Email sent to {', '.join(to)}: {subject}")
