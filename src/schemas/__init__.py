# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pydantic schemas package."""
from src.schemas.auth import (
    AdminResponse,
    CheckAuthResponse,
    LoginRequest,
    LoginResponse,
)
from src.schemas.common import (
    CamelModel,
    FieldError,
    HealthResponse,
    MessageResponse,
    ValidationErrorResponse,
)
from src.schemas.country import CountryResponse
from src.schemas.exchange_rate import (
    BulkRateUpdateItem,
    BulkRateUpdateRequest,
    BulkUpdateResponse,
    BulkUpdateResultResponse,
    ExchangeRateCreate,
    ExchangeRateResponse,
    ExchangeRateUpdate,
    ExchangeRateWithProviderResponse,
    RateRowResponse,
    RateSnapshotResponse,
)
from src.schemas.lead import (
    LeadCreate,
    LeadCreatedResponse,
    LeadReference,
)
from src.schemas.provider import ProviderCreate, ProviderResponse, ProviderUpdate

__all__ = [
    "AdminResponse",
    "BulkRateUpdateItem",
    "BulkRateUpdateRequest",
    "BulkUpdateResponse",
    "BulkUpdateResultResponse",
    "CamelModel",
    "CheckAuthResponse",
    "CountryResponse",
    "ExchangeRateCreate",
    "ExchangeRateResponse",
    "ExchangeRateUpdate",
    "ExchangeRateWithProviderResponse",
    "FieldError",
    "HealthResponse",
    "LeadCreate",
    "LeadCreatedResponse",
    "LeadReference",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "ProviderCreate",
    "ProviderResponse",
    "ProviderUpdate",
    "RateRowResponse",
    "RateSnapshotResponse",
    "ValidationErrorResponse",
]
