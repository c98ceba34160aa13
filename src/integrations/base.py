# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Base classes for outbound integrations."""
from abc import ABC, abstractmethod
from typing import Any


class IntegrationError(Exception):
    """Base exception for integration failures."""


class EmailDeliveryError(IntegrationError):
    """An email could not be handed to the mail server."""


class EmailProvider(ABC):
    """Interface for email sending (SMTP, etc.)"""

    @classmethod
    @abstractmethod
    def get_type(cls) -> str:
        """Unique identifier for this provider type."""
        ...

    @abstractmethod
    def __init__(self, config: dict[str, Any]):
        """Initialize with provider config."""
        ...

    @abstractmethod
    def health_check(self) -> tuple[bool, str]:
        """Check connectivity. Returns (success, message)."""
        ...

    @abstractmethod
    def send_email(
        self,
        to: list[str],
        subject: str,
        body: str,
        body_html: str | None = None,
    ) -> None:
        """Send an email.

        Raises:
            EmailDeliveryError: If the message could not be sent.
        """
        ...
