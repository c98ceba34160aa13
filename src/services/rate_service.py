# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Public rate read paths: countries, providers and aggregated quotes."""

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from src.config import settings
from src.models import Country, ExchangeRate, Provider
from src.models.base import utcnow

logger = logging.getLogger(__name__)


@dataclass
class RateRow:
    """A provider's display fields merged with its latest quote."""

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
    last_updated: datetime


@dataclass
class RateSnapshot:
    """All rate rows for one country and currency at request time."""

    rates: list[RateRow]
    last_updated: datetime


class RateServiceError(Exception):
    """Base exception for rate lookups."""


class InvalidQueryError(RateServiceError):
    """Country or currency missing from a rate query."""


def _to_float(value: Decimal | None) -> float:
    return float(value) if value is not None else 0.0


def normalize_country_code(country_code: str) -> str:
    """Lowercase and strip a country code, rejecting empty values."""
    code = (country_code or "").strip().lower()
    if not code:
        raise InvalidQueryError("Country code is required")
    return code


def normalize_currency(currency: str) -> str:
    """Uppercase and strip a currency code, rejecting empty values."""
    code = (currency or "").strip().upper()
    if not code:
        raise InvalidQueryError("Currency is required")
    return code


def get_countries(db: Session) -> list[Country]:
    """Get all countries, available ones first, then by name."""
    return (
        db.query(Country)
        .order_by(Country.available.desc(), Country.name.asc())
        .all()
    )


def get_country_by_code(db: Session, country_code: str) -> Country | None:
    """Get a country by its code."""
    return (
        db.query(Country)
        .filter(Country.code == country_code.strip().lower())
        .first()
    )


def get_all_providers(db: Session) -> list[Provider]:
    """Get every provider, active ones first."""
    return (
        db.query(Provider)
        .order_by(Provider.active.desc(), Provider.sort_order, Provider.name)
        .all()
    )


def get_providers_by_country(db: Session, country_code: str) -> list[Provider]:
    """Get the active providers of a country in display order."""
    return (
        db.query(Provider)
        .filter(
            Provider.country_code == normalize_country_code(country_code),
            Provider.active == True,  # noqa: E712
        )
        .order_by(Provider.sort_order, Provider.id)
        .all()
    )


def get_available_currencies(db: Session, country_code: str) -> list[str]:
    """Get the target currencies quoted by active providers of a country."""
    rows = (
        db.query(ExchangeRate.to_currency)
        .join(Provider, ExchangeRate.provider_id == Provider.id)
        .filter(
            Provider.country_code == normalize_country_code(country_code),
            Provider.active == True,  # noqa: E712
        )
        .group_by(ExchangeRate.to_currency)
        .order_by(ExchangeRate.to_currency)
        .all()
    )
    return [row.to_currency for row in rows]


def get_latest_rate(
    db: Session,
    provider_id: int,
    to_currency: str,
    from_currency: str | None = None,
) -> ExchangeRate | None:
    """Get a provider's most recent quote for a currency pair."""
    return (
        db.query(ExchangeRate)
        .filter(
            ExchangeRate.provider_id == provider_id,
            ExchangeRate.from_currency == (from_currency or settings.origin_currency),
            ExchangeRate.to_currency == to_currency,
        )
        .order_by(ExchangeRate.last_updated.desc(), ExchangeRate.id.desc())
        .first()
    )


def build_rate_row(provider: Provider, rate: ExchangeRate) -> RateRow:
    """Merge provider display fields with a quote."""
    return RateRow(
        id=provider.id,
        provider_key=provider.provider_key,
        name=provider.name,
        logo_url=provider.logo_url,
        logo_fallback_text=provider.logo_fallback_text,
        logo_color_tag=provider.logo_color_tag,
        website_url=provider.website_url,
        type=provider.type,
        badge=provider.badge,
        rate_id=rate.id,
        rate=_to_float(rate.rate),
        rate_change=_to_float(rate.rate_change),
        fees=_to_float(rate.fees),
        fee_type=rate.fee_type,
        transfer_time=rate.transfer_time,
        rating=_to_float(rate.rating),
        highlight=bool(rate.highlight),
        last_updated=rate.last_updated,
    )


def get_exchange_rates(db: Session, country_code: str, to_currency: str) -> RateSnapshot:
    """Aggregate the latest quote of every active provider in a country.

    Providers keep their display order; those without a quote for the
    currency are left out. The snapshot timestamp is the newest quote
    returned, or the current time when there are none.

    Args:
        db: Database session.
        country_code: Country code, any case (e.g. "SA").
        to_currency: Target currency code, any case (e.g. "inr").

    Returns:
        RateSnapshot with one RateRow per quoted provider.

    Raises:
        InvalidQueryError: If the country or currency is empty.
    """
    country_code = normalize_country_code(country_code)
    to_currency = normalize_currency(to_currency)

    rows: list[RateRow] = []
    for provider in get_providers_by_country(db, country_code):
        rate = get_latest_rate(db, provider.id, to_currency)
        if rate is None:
            continue
        rows.append(build_rate_row(provider, rate))

    last_updated = max((row.last_updated for row in rows), default=None)
    if last_updated is None:
        last_updated = utcnow()

    logger.debug(
        f"Aggregated {len(rows)} rates for {country_code}/{to_currency}"
    )
    return RateSnapshot(rates=rows, last_updated=last_updated)
