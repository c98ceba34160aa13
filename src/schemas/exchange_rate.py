# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Exchange rate schemas."""

import datetime
from decimal import Decimal
from typing import Any

from pydantic import Field, field_validator, model_validator

from src.models.enums import FeeType
from src.schemas.common import CamelModel
from src.schemas.provider import ProviderResponse


def _normalize_currency(v: str) -> str:
    v = v.strip().upper()
    if len(v) != 3 or not v.isalpha():
        raise ValueError("Currency must be a 3-letter code")
    return v


class RateFields(CamelModel):
    """Mutable quote fields shared by create and update payloads."""

    rate: Decimal | None = Field(None, gt=0)
    rate_change: Decimal | None = None
    fees: Decimal | None = Field(None, ge=0)
    fee_type: FeeType | None = None
    transfer_time: str | None = Field(None, min_length=1, max_length=50)
    rating: Decimal | None = Field(None, ge=1, le=5)
    highlight: bool | None = None


class ExchangeRateCreate(CamelModel):
    """Schema for creating an exchange rate row."""

    provider_id: int
    from_currency: str | None = None
    to_currency: str
    rate: Decimal = Field(..., gt=0)
    rate_change: Decimal = Decimal("0")
    fees: Decimal = Field(default=Decimal("0"), ge=0)
    fee_type: FeeType = FeeType.FIXED
    transfer_time: str = Field(..., min_length=1, max_length=50)
    rating: Decimal = Field(..., ge=1, le=5)
    highlight: bool = False

    @field_validator("to_currency")
    @classmethod
    def validate_to_currency(cls, v: str) -> str:
        return _normalize_currency(v)

    @field_validator("from_currency")
    @classmethod
    def validate_from_currency(cls, v: str | None) -> str | None:
        return _normalize_currency(v) if v is not None else v


class ExchangeRateUpdate(RateFields):
    """Schema for a partial exchange rate update."""


class BulkRateUpdateItem(RateFields):
    """One entry of a bulk update.

    Targets a row either by ``id`` or by ``provider_id`` + ``to_currency``,
    in which case the provider's latest row for that currency is updated.
    """

    id: int | None = None
    provider_id: int | None = None
    to_currency: str | None = None
    # Sent by the bulk editor page for context, not used for lookup
    country_code: str | None = None

    @field_validator("to_currency")
    @classmethod
    def validate_to_currency(cls, v: str | None) -> str | None:
        return _normalize_currency(v) if v is not None else v

    @model_validator(mode="after")
    def check_target(self) -> "BulkRateUpdateItem":
        if self.id is None and (self.provider_id is None or self.to_currency is None):
            raise ValueError("Either id or providerId and toCurrency is required")
        return self


class BulkRateUpdateRequest(CamelModel):
    """Schema for POST /admin/bulk-update-rates.

    Items stay raw here; each one is validated on its own by the service so
    a bad entry fails alone instead of rejecting the whole batch.
    """

    rates: list[dict[str, Any]] = Field(..., min_length=1)


class ExchangeRateResponse(CamelModel):
    """Schema for exchange rate response."""

    id: int
    provider_id: int
    from_currency: str
    to_currency: str
    rate: float
    rate_change: float | None
    fees: float | None
    fee_type: str
    transfer_time: str
    rating: float
    highlight: bool
    last_updated: datetime.datetime


class ExchangeRateWithProviderResponse(ExchangeRateResponse):
    """Exchange rate joined with its provider."""

    provider: ProviderResponse


class RateRowResponse(CamelModel):
    """One provider's latest quote as shown in the comparison table."""

    id: int
    provider_key: str
    name: str
    logo_url: str | None
    logo_fallback_text: str | None
    logo_color_tag: str | None
    website_url: str
    type: str
    badge: str | None
    rate_id: int
    rate: float
    rate_change: float
    fees: float
    fee_type: str
    transfer_time: str
    rating: float
    highlight: bool
    last_updated: datetime.datetime


class RateSnapshotResponse(CamelModel):
    """Aggregated rates for a country and currency."""

    rates: list[RateRowResponse]
    last_updated: datetime.datetime


class BulkUpdateResultResponse(CamelModel):
    """Outcome of one bulk update item."""

    index: int
    id: int | None
    success: bool
    error: str | None = None
    rate: ExchangeRateResponse | None = None


class BulkUpdateResponse(CamelModel):
    """Per-item results of a bulk update."""

    updated: int
    failed: int
    results: list[BulkUpdateResultResponse]
