# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Back-office provider endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, require_permission
from src.rbac.permissions import PROVIDERS_READ, PROVIDERS_WRITE
from src.schemas.provider import ProviderCreate, ProviderResponse, ProviderUpdate
from src.services import provider_service, rate_service
from src.services.provider_service import (
    DuplicateProviderKeyError,
    UnknownCountryError,
)
from src.services.rbac_service import AdminPrincipal

router = APIRouter()


@router.get("/providers", response_model=list[ProviderResponse])
def list_providers(
    db: Session = Depends(get_db),
    principal: AdminPrincipal = Depends(require_permission(PROVIDERS_READ)),
) -> list[ProviderResponse]:
    """List every provider, including inactive ones."""
    providers = rate_service.get_all_providers(db)
    return [ProviderResponse.model_validate(p) for p in providers]


@router.post(
    "/providers",
    response_model=ProviderResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_provider(
    data: ProviderCreate,
    db: Session = Depends(get_db),
    principal: AdminPrincipal = Depends(require_permission(PROVIDERS_WRITE)),
) -> ProviderResponse:
    """Create a provider. Full admins only."""
    try:
        provider = provider_service.create_provider(db, data)
    except (DuplicateProviderKeyError, UnknownCountryError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return ProviderResponse.model_validate(provider)


@router.patch("/providers/{provider_id}", response_model=ProviderResponse)
def update_provider(
    provider_id: int,
    data: ProviderUpdate,
    db: Session = Depends(get_db),
    principal: AdminPrincipal = Depends(require_permission(PROVIDERS_WRITE)),
) -> ProviderResponse:
    """Update a provider. Full admins only."""
    provider = provider_service.get_provider(db, provider_id)
    if not provider:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Provider not found",
        )

    try:
        provider = provider_service.update_provider(db, provider, data)
    except UnknownCountryError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        ) from e
    return ProviderResponse.model_validate(provider)
