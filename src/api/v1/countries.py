# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public country endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.deps import get_db
from src.schemas.country import CountryResponse
from src.schemas.provider import ProviderResponse
from src.services import rate_service

router = APIRouter()


@router.get("", response_model=list[CountryResponse])
def list_countries(db: Session = Depends(get_db)) -> list[CountryResponse]:
    """List all countries, available ones first."""
    countries = rate_service.get_countries(db)
    return [CountryResponse.model_validate(c) for c in countries]


@router.get("/{code}/providers", response_model=list[ProviderResponse])
def list_country_providers(
    code: str,
    db: Session = Depends(get_db),
) -> list[ProviderResponse]:
    """List the active providers of a country in display order."""
    providers = rate_service.get_providers_by_country(db, code)
    return [ProviderResponse.model_validate(p) for p in providers]


@router.get("/{code}/currencies", response_model=list[str])
def list_country_currencies(
    code: str,
    db: Session = Depends(get_db),
) -> list[str]:
    """List the target currencies quoted in a country."""
    return rate_service.get_available_currencies(db, code)
