# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public exchange rate endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.deps import get_db
from src.schemas.exchange_rate import RateSnapshotResponse
from src.services import rate_service

router = APIRouter()


@router.get("/{country_code}/{currency}", response_model=RateSnapshotResponse)
def get_exchange_rates(
    country_code: str,
    currency: str,
    db: Session = Depends(get_db),
) -> RateSnapshotResponse:
    """Get the latest quote of every active provider in a country.

    Unknown countries or currencies yield an empty list, not a 404.
    """
    snapshot = rate_service.get_exchange_rates(db, country_code, currency)
    return RateSnapshotResponse.model_validate(snapshot)
