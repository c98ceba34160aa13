# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Back-office mutations of exchange rate rows."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from src.config import settings
from src.models import ExchangeRate, Provider
from src.models.base import utcnow
from src.schemas.exchange_rate import (
    BulkRateUpdateItem,
    ExchangeRateCreate,
    RateFields,
)
from src.services import rate_service

logger = logging.getLogger(__name__)

# Fields of RateFields that map one-to-one onto ExchangeRate columns
MUTABLE_RATE_FIELDS = (
    "rate",
    "rate_change",
    "fees",
    "fee_type",
    "transfer_time",
    "rating",
    "highlight",
)


class RateEditorError(Exception):
    """Base exception for rate editing."""


class ExchangeRateNotFoundError(RateEditorError):
    """No exchange rate row matches the given target."""


class ProviderNotFoundError(RateEditorError):
    """The referenced provider does not exist."""


@dataclass
class BulkUpdateResult:
    """Outcome of one item in a bulk update."""

    index: int
    id: int | None
    success: bool
    error: str | None = None
    rate: ExchangeRate | None = None


def get_exchange_rate(db: Session, rate_id: int) -> ExchangeRate | None:
    """Get a single exchange rate row by ID."""
    return db.query(ExchangeRate).filter(ExchangeRate.id == rate_id).first()


def list_exchange_rates_with_providers(db: Session) -> list[ExchangeRate]:
    """Get every rate row with its provider loaded, grouped by provider."""
    return (
        db.query(ExchangeRate)
        .join(Provider, ExchangeRate.provider_id == Provider.id)
        .options(joinedload(ExchangeRate.provider))
        .order_by(
            Provider.sort_order,
            Provider.id,
            ExchangeRate.to_currency,
            ExchangeRate.last_updated.desc(),
        )
        .all()
    )


def _apply_fields(rate: ExchangeRate, data: RateFields) -> None:
    for field in MUTABLE_RATE_FIELDS:
        value = getattr(data, field)
        if value is None:
            continue
        if field == "fee_type":
            value = value.value
        setattr(rate, field, value)
    rate.last_updated = utcnow()


def update_exchange_rate(
    db: Session, rate: ExchangeRate, data: RateFields
) -> ExchangeRate:
    """Apply a partial update and stamp last_updated.

    Concurrent writers are last-write-wins.
    """
    _apply_fields(rate, data)
    db.commit()
    db.refresh(rate)
    logger.info(f"Updated exchange rate {rate.id}")
    return rate


def update_exchange_rate_by_id(
    db: Session, rate_id: int, data: RateFields
) -> ExchangeRate:
    """Update a rate row by ID.

    Raises:
        ExchangeRateNotFoundError: If no row has this ID.
    """
    rate = get_exchange_rate(db, rate_id)
    if rate is None:
        raise ExchangeRateNotFoundError(f"Exchange rate {rate_id} not found")
    return update_exchange_rate(db, rate, data)


def create_exchange_rate(db: Session, data: ExchangeRateCreate) -> ExchangeRate:
    """Insert a new quote for a provider.

    Existing rows for the same pair are kept; readers pick the newest.

    Raises:
        ProviderNotFoundError: If the provider does not exist.
    """
    provider = db.query(Provider).filter(Provider.id == data.provider_id).first()
    if provider is None:
        raise ProviderNotFoundError(f"Provider {data.provider_id} not found")

    rate = ExchangeRate(
        provider_id=provider.id,
        from_currency=data.from_currency or settings.origin_currency,
        to_currency=data.to_currency,
        rate=data.rate,
        rate_change=data.rate_change,
        fees=data.fees,
        fee_type=data.fee_type.value,
        transfer_time=data.transfer_time,
        rating=data.rating,
        highlight=data.highlight,
        last_updated=utcnow(),
    )
    db.add(rate)
    db.commit()
    db.refresh(rate)
    logger.info(
        f"Created exchange rate {rate.id} for provider {provider.provider_key} "
        f"{rate.from_currency}->{rate.to_currency}"
    )
    return rate


def _resolve_bulk_target(db: Session, item: BulkRateUpdateItem) -> ExchangeRate:
    if item.id is not None:
        rate = get_exchange_rate(db, item.id)
        if rate is None:
            raise ExchangeRateNotFoundError(f"Exchange rate {item.id} not found")
        return rate

    rate = rate_service.get_latest_rate(db, item.provider_id, item.to_currency)
    if rate is None:
        raise ExchangeRateNotFoundError(
            f"No {item.to_currency} rate for provider {item.provider_id}"
        )
    return rate


def _validation_message(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


def bulk_update_rates(
    db: Session, items: Sequence[BulkRateUpdateItem | dict[str, Any]]
) -> list[BulkUpdateResult]:
    """Apply several partial updates, each on its own.

    Raw items are validated one at a time. An invalid or failing item is
    rolled back and reported; the remaining items are still applied. Never
    raises for per-item failures.
    """
    results: list[BulkUpdateResult] = []
    for index, raw in enumerate(items):
        try:
            item = BulkRateUpdateItem.model_validate(raw)
        except ValidationError as e:
            raw_id = raw.get("id") if isinstance(raw, dict) else None
            results.append(
                BulkUpdateResult(
                    index=index,
                    id=raw_id if isinstance(raw_id, int) else None,
                    success=False,
                    error=_validation_message(e),
                )
            )
            continue

        try:
            rate = _resolve_bulk_target(db, item)
            rate = update_exchange_rate(db, rate, item)
        except ExchangeRateNotFoundError as e:
            results.append(
                BulkUpdateResult(index=index, id=item.id, success=False, error=str(e))
            )
            continue
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Bulk update item {index} failed: {e}")
            results.append(
                BulkUpdateResult(
                    index=index,
                    id=item.id,
                    success=False,
                    error="Failed to update exchange rate",
                )
            )
            continue
        results.append(BulkUpdateResult(index=index, id=rate.id, success=True, rate=rate))

    failed = sum(1 for r in results if not r.success)
    logger.info(f"Bulk rate update: {len(results) - failed} updated, {failed} failed")
    return results
