# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public provider endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.deps import get_db
from src.schemas.provider import ProviderResponse
from src.services import rate_service

router = APIRouter()


@router.get("", response_model=list[ProviderResponse])
def list_providers(db: Session = Depends(get_db)) -> list[ProviderResponse]:
    """List every provider, active ones first."""
    providers = rate_service.get_all_providers(db)
    return [ProviderResponse.model_validate(p) for p in providers]
