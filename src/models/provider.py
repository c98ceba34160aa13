# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Money-transfer provider model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from src.models.country import Country
    from src.models.exchange_rate import ExchangeRate


class Provider(Base, TimestampMixin):
    """A bank, wallet or remittance company whose rates are listed."""

    __tablename__ = "providers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    provider_key: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    logo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    # Shown instead of the logo image when it fails to load
    logo_fallback_text: Mapped[str | None] = mapped_column(String(20), nullable=True)
    logo_color_tag: Mapped[str | None] = mapped_column(String(30), nullable=True)
    website_url: Mapped[str] = mapped_column(String(500), nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)
    badge: Mapped[str | None] = mapped_column(String(50), nullable=True)
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    country_code: Mapped[str] = mapped_column(
        String(10),
        ForeignKey("countries.code"),
        nullable=False,
        index=True,
    )
    sort_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Relationships
    country: Mapped[Country] = relationship("Country", back_populates="providers")
    exchange_rates: Mapped[list[ExchangeRate]] = relationship(
        "ExchangeRate",
        back_populates="provider",
        cascade="all, delete-orphan",
    )
