# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Back-office exchange rate endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, require_permission
from src.rbac.permissions import RATES_READ, RATES_WRITE
from src.schemas.exchange_rate import (
    BulkRateUpdateRequest,
    BulkUpdateResponse,
    BulkUpdateResultResponse,
    ExchangeRateCreate,
    ExchangeRateResponse,
    ExchangeRateUpdate,
    ExchangeRateWithProviderResponse,
)
from src.services import rate_editor_service
from src.services.rate_editor_service import (
    ExchangeRateNotFoundError,
    ProviderNotFoundError,
)
from src.services.rbac_service import AdminPrincipal

router = APIRouter()


@router.get(
    "/exchange-rates",
    response_model=list[ExchangeRateWithProviderResponse],
)
def list_exchange_rates(
    db: Session = Depends(get_db),
    principal: AdminPrincipal = Depends(require_permission(RATES_READ)),
) -> list[ExchangeRateWithProviderResponse]:
    """List every exchange rate row with its provider."""
    rates = rate_editor_service.list_exchange_rates_with_providers(db)
    return [ExchangeRateWithProviderResponse.model_validate(r) for r in rates]


@router.post(
    "/exchange-rates",
    response_model=ExchangeRateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_exchange_rate(
    data: ExchangeRateCreate,
    db: Session = Depends(get_db),
    principal: AdminPrincipal = Depends(require_permission(RATES_WRITE)),
) -> ExchangeRateResponse:
    """Add a new quote for a provider."""
    try:
        rate = rate_editor_service.create_exchange_rate(db, data)
    except ProviderNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Provider not found",
        ) from e
    return ExchangeRateResponse.model_validate(rate)


@router.patch(
    "/exchange-rates/{rate_id}",
    response_model=ExchangeRateResponse,
)
def update_exchange_rate(
    rate_id: int,
    data: ExchangeRateUpdate,
    db: Session = Depends(get_db),
    principal: AdminPrincipal = Depends(require_permission(RATES_WRITE)),
) -> ExchangeRateResponse:
    """Update a quote; last_updated is always refreshed."""
    try:
        rate = rate_editor_service.update_exchange_rate_by_id(db, rate_id, data)
    except ExchangeRateNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Exchange rate not found",
        ) from e
    return ExchangeRateResponse.model_validate(rate)


@router.post("/bulk-update-rates", response_model=BulkUpdateResponse)
def bulk_update_rates(
    data: BulkRateUpdateRequest,
    db: Session = Depends(get_db),
    principal: AdminPrincipal = Depends(require_permission(RATES_WRITE)),
) -> BulkUpdateResponse:
    """Update several quotes; failures are reported per item."""
    results = rate_editor_service.bulk_update_rates(db, data.rates)
    failed = sum(1 for r in results if not r.success)
    return BulkUpdateResponse(
        updated=len(results) - failed,
        failed=failed,
        results=[BulkUpdateResultResponse.model_validate(r) for r in results],
    )
