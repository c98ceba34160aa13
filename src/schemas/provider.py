# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Provider schemas."""

import datetime
import re

from pydantic import Field, field_validator

from src.schemas.common import CamelModel

PROVIDER_KEY_PATTERN = re.compile(r"^[a-z0-9][a-z0-9_-]*$")


class ProviderBase(CamelModel):
    """Base provider schema."""

    name: str = Field(..., min_length=1, max_length=200)
    logo_url: str | None = Field(None, max_length=500)
    logo_fallback_text: str | None = Field(None, max_length=20)
    logo_color_tag: str | None = Field(None, max_length=30)
    website_url: str = Field(..., min_length=1, max_length=500)
    type: str = Field(..., min_length=1, max_length=50)
    badge: str | None = Field(None, max_length=50)
    active: bool = True
    country_code: str = Field(..., min_length=1, max_length=10)
    sort_order: int = 0

    @field_validator("country_code")
    @classmethod
    def normalize_country_code(cls, v: str) -> str:
        return v.strip().lower()


class ProviderCreate(ProviderBase):
    """Schema for creating a provider."""

    provider_key: str = Field(..., min_length=1, max_length=50)

    @field_validator("provider_key")
    @classmethod
    def validate_provider_key(cls, v: str) -> str:
        """Provider keys are stable lowercase slugs."""
        v = v.strip().lower()
        if not PROVIDER_KEY_PATTERN.match(v):
            raise ValueError(
                "Provider key may only contain lowercase letters, digits, "
                "hyphens and underscores"
            )
        return v


class ProviderUpdate(CamelModel):
    """Schema for updating a provider. The provider key is immutable."""

    name: str | None = Field(None, min_length=1, max_length=200)
    logo_url: str | None = Field(None, max_length=500)
    logo_fallback_text: str | None = Field(None, max_length=20)
    logo_color_tag: str | None = Field(None, max_length=30)
    website_url: str | None = Field(None, min_length=1, max_length=500)
    type: str | None = Field(None, min_length=1, max_length=50)
    badge: str | None = Field(None, max_length=50)
    active: bool | None = None
    country_code: str | None = Field(None, min_length=1, max_length=10)
    sort_order: int | None = None

    @field_validator("country_code")
    @classmethod
    def normalize_country_code(cls, v: str | None) -> str | None:
        return v.strip().lower() if v is not None else v


class ProviderResponse(CamelModel):
    """Schema for provider response."""

    id: int
    provider_key: str
    name: str
    logo_url: str | None
    logo_fallback_text: str | None
    logo_color_tag: str | None
    website_url: str
    type: str
    badge: str | None
    active: bool
    country_code: str
    sort_order: int
    created_at: datetime.datetime
    updated_at: datetime.datetime
