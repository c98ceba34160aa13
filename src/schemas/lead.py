# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Lead schemas."""

from pydantic import EmailStr, Field, field_validator

from src.schemas.common import CamelModel


class LeadCreate(CamelModel):
    """Schema for the rate alert subscription form."""

    full_name: str = Field(..., min_length=2, max_length=200)
    email: EmailStr
    country_code: str = Field(..., min_length=1, max_length=10)
    phone: str = Field(..., min_length=9, max_length=30)
    from_currency: str = Field(..., min_length=1, max_length=10)
    to_currency: str = Field(..., min_length=1, max_length=10)
    target_rate: str | None = Field(None, max_length=30)
    consent: bool

    @field_validator("consent")
    @classmethod
    def require_consent(cls, v: bool) -> bool:
        if v is not True:
            raise ValueError("You must agree to receive alerts")
        return v


class LeadReference(CamelModel):
    """Identifier of a newly created lead."""

    id: int


class LeadCreatedResponse(CamelModel):
    """Response for POST /leads."""

    message: str
    lead: LeadReference
