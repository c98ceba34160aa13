# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from src.models.admin import Admin
from src.models.base import Base, TimestampMixin
from src.models.country import Country
from src.models.enums import AdminRole, FeeType
from src.models.exchange_rate import ExchangeRate
from src.models.lead import Lead
from src.models.provider import Provider
from src.models.session import Session

__all__ = [
    "Admin",
    "AdminRole",
    "Base",
    "Country",
    "ExchangeRate",
    "FeeType",
    "Lead",
    "Provider",
    "Session",
    "TimestampMixin",
]
