# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Outbound integrations."""

from src.integrations.base import EmailDeliveryError, EmailProvider, IntegrationError
from src.integrations.smtp import SmtpProvider

__all__ = [
    "EmailDeliveryError",
    "EmailProvider",
    "IntegrationError",
    "SmtpProvider",
]
