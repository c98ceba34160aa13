# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Exchange rate model."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, utcnow
from src.models.enums import FeeType

if TYPE_CHECKING:
    from src.models.provider import Provider


class ExchangeRate(Base):
    """A timestamped quote from one provider for one currency pair.

    Several rows may exist for the same provider and pair; readers always
    use the one with the latest ``last_updated``.
    """

    __tablename__ = "exchange_rates"
    __table_args__ = (
        Index(
            "ix_exchange_rates_lookup",
            "provider_id",
            "from_currency",
            "to_currency",
            "last_updated",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    provider_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("providers.id", ondelete="CASCADE"),
        nullable=False,
    )
    from_currency: Mapped[str] = mapped_column(String(3), nullable=False)
    to_currency: Mapped[str] = mapped_column(String(3), nullable=False, index=True)
    rate: Mapped[Decimal] = mapped_column(Numeric(10, 4), nullable=False)
    rate_change: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 4), default=Decimal("0"), nullable=True
    )
    fees: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2), default=Decimal("0"), nullable=True
    )
    fee_type: Mapped[str] = mapped_column(
        String(30), default=FeeType.FIXED.value, nullable=False
    )
    transfer_time: Mapped[str] = mapped_column(String(50), nullable=False)
    rating: Mapped[Decimal] = mapped_column(Numeric(3, 1), nullable=False)
    highlight: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, nullable=False
    )

    # Relationships
    provider: Mapped[Provider] = relationship(
        "Provider", back_populates="exchange_rates"
    )
