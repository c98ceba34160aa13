# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Seed reference data: Gulf countries, Saudi providers and sample rates."""

import logging
import random
from dataclasses import dataclass
from decimal import Decimal

from sqlalchemy.orm import Session

from src.config import settings
from src.models import Country, ExchangeRate, FeeType, Provider
from src.models.base import utcnow

logger = logging.getLogger(__name__)

DEFAULT_COUNTRIES = [
    {
        "code": "sa",
        "name": "Saudi Arabia",
        "flag_url": "https://images.unsplash.com/photo-1586724237569-f3d0c1dee8c6",
        "available": True,
    },
    {
        "code": "ae",
        "name": "United Arab Emirates",
        "flag_url": "https://images.unsplash.com/flagged/photo-1559717865-a99cac1c95d8",
        "available": False,
    },
    {
        "code": "qa",
        "name": "Qatar",
        "flag_url": "https://images.unsplash.com/photo-1507904139316-3c7422a97a49",
        "available": False,
    },
    {"code": "kw", "name": "Kuwait", "flag_url": None, "available": False},
    {"code": "bh", "name": "Bahrain", "flag_url": None, "available": False},
    {"code": "om", "name": "Oman", "flag_url": None, "available": False},
]


def _sa_provider(
    key: str,
    name: str,
    logo: str,
    text: str,
    color: str,
    url: str,
    type_: str,
    order: int,
    badge: str | None = None,
) -> dict:
    return {
        "provider_key": key,
        "name": name,
        "logo_url": f"/images/providers/{logo}",
        "logo_fallback_text": text,
        "logo_color_tag": color,
        "website_url": url,
        "type": type_,
        "badge": badge,
        "active": True,
        "country_code": "sa",
        "sort_order": order,
    }


DEFAULT_PROVIDERS = [
    _sa_provider("stc", "STC Bank", "stc.jpeg", "STC", "primary",
                 "https://www.stcbank.com.sa/", "Digital Transfer", 1, "Best Rate"),
    _sa_provider("alrajhi", "Al Rajhi Bank", "alrajhi.jpeg", "ARB", "green",
                 "https://www.alrajhibank.com.sa/EN", "Bank Transfer", 2),
    _sa_provider("wu", "Western Union", "wu.svg", "WU", "yellow",
                 "https://www.westernunion.com/sa/en/home.html", "Cash Pickup", 3),
    _sa_provider("barq", "Barq", "barq.png", "Barq", "orange",
                 "https://barq.com/", "Digital Wallet", 4),
    _sa_provider("mobilypay", "MobilyPay", "mobilypay.svg", "MP", "purple",
                 "https://mobilypay.sa/", "Mobile Wallet", 5, "Lowest Fee"),
    _sa_provider("tiqmo", "Tiqmo", "tiqmo.jpeg", "TQ", "blue",
                 "https://tiqmo.com/", "Digital Wallet", 6),
    _sa_provider("d360", "D360 Bank", "d360.jpeg", "D360", "indigo",
                 "https://d360.com/en", "Bank Transfer", 7),
    _sa_provider("alinma", "AlInma", "alinma.jpeg", "AI", "teal",
                 "https://www.alinma.com/", "Bank Transfer", 8),
    _sa_provider("urpay", "Urpay", "urpay.jpeg", "UP", "red",
                 "https://www.urpay.com.sa/", "Digital Wallet", 9),
    _sa_provider("friendipay", "FriendiPay", "friendipay.jpg", "FP", "pink",
                 "https://www.friendipay.sa/", "Mobile Wallet", 10),
]

# Mid-market SAR rate and jitter range per target currency
BASE_RATES: dict[str, tuple[float, float]] = {
    "INR": (22.0, 0.3),
    "PKR": (73.5, 1.0),
    "PHP": (15.2, 0.4),
    "BDT": (29.8, 0.4),
    "NPR": (35.4, 0.6),
    "EGP": (8.6, 0.2),
    "LKR": (84.7, 1.0),
    "USD": (0.267, 0.004),
    "GBP": (0.208, 0.004),
    "EUR": (0.244, 0.004),
}


@dataclass
class ProviderTerms:
    """Fees and service level a provider quotes with."""

    fees: float
    transfer_time: str
    rating: float
    highlight: bool
    rate_bonus: float = 0.0


# Providers with known terms; the rest get randomized ones
KNOWN_TERMS = {
    "stc": ProviderTerms(10, "1-3 hours", 4.8, True, rate_bonus=0.15),
    "mobilypay": ProviderTerms(0, "1-12 hours", 4.0, True),
    "wu": ProviderTerms(25, "Minutes", 4.0, False),
    "alrajhi": ProviderTerms(15, "1-2 days", 4.5, False),
    "barq": ProviderTerms(5, "1-24 hours", 4.3, False),
}


@dataclass
class SeedSummary:
    """Counts of rows inserted by a seed run."""

    countries: int = 0
    providers: int = 0
    rates: int = 0


def _random_terms(rng: random.Random) -> ProviderTerms:
    roll = rng.randrange(3)
    if roll == 0:
        transfer_time = "1-2 days"
    elif rng.randrange(2) == 0:
        transfer_time = "1-24 hours"
    else:
        transfer_time = "6-12 hours"
    return ProviderTerms(
        fees=5 + rng.randrange(20),
        transfer_time=transfer_time,
        rating=round(3.0 + rng.random() * 2.0, 1),
        highlight=False,
    )


def _fee_type(fees: float, rng: random.Random) -> FeeType:
    if fees == 0:
        return FeeType.FIRST_TRANSFER
    return FeeType.FIXED if rng.random() > 0.5 else FeeType.VARIABLE


def seed_countries(db: Session) -> int:
    """Insert missing countries. Returns the number inserted."""
    inserted = 0
    for data in DEFAULT_COUNTRIES:
        if db.query(Country).filter(Country.code == data["code"]).first():
            logger.debug(f"Country {data['name']} already exists")
            continue
        db.add(Country(**data))
        inserted += 1
    db.commit()
    return inserted


def seed_providers(db: Session) -> tuple[dict[str, Provider], int]:
    """Insert missing providers and refresh logos of existing ones."""
    providers: dict[str, Provider] = {}
    inserted = 0
    for data in DEFAULT_PROVIDERS:
        provider = (
            db.query(Provider)
            .filter(Provider.provider_key == data["provider_key"])
            .first()
        )
        if provider is None:
            provider = Provider(**data)
            db.add(provider)
            inserted += 1
        else:
            provider.logo_url = data["logo_url"]
        providers[data["provider_key"]] = provider
    db.commit()
    return providers, inserted


def seed_rates(
    db: Session, providers: dict[str, Provider], rng: random.Random
) -> int:
    """Insert a sample quote for each provider and currency lacking one."""
    origin = settings.origin_currency
    inserted = 0
    for key, provider in providers.items():
        for currency, (base, spread) in BASE_RATES.items():
            exists = (
                db.query(ExchangeRate.id)
                .filter(
                    ExchangeRate.provider_id == provider.id,
                    ExchangeRate.from_currency == origin,
                    ExchangeRate.to_currency == currency,
                )
                .first()
            )
            if exists:
                continue

            terms = KNOWN_TERMS.get(key) or _random_terms(rng)
            rate = base + (rng.random() * spread - spread / 2) + terms.rate_bonus
            db.add(
                ExchangeRate(
                    provider_id=provider.id,
                    from_currency=origin,
                    to_currency=currency,
                    rate=Decimal(str(round(rate, 4))),
                    rate_change=Decimal(str(round(rng.random() * 0.45 - 0.2, 4))),
                    fees=Decimal(str(terms.fees)),
                    fee_type=_fee_type(terms.fees, rng).value,
                    transfer_time=terms.transfer_time,
                    rating=Decimal(str(terms.rating)),
                    highlight=terms.highlight,
                    last_updated=utcnow(),
                )
            )
            inserted += 1
    db.commit()
    return inserted


def seed_all(db: Session, rng: random.Random | None = None) -> SeedSummary:
    """Seed countries, providers and rates. Safe to run repeatedly."""
    rng = rng or random.Random()
    summary = SeedSummary()
    summary.countries = seed_countries(db)
    providers, summary.providers = seed_providers(db)
    summary.rates = seed_rates(db, providers, rng)
    logger.info(
        f"Seeded {summary.countries} countries, {summary.providers} providers, "
        f"{summary.rates} rates"
    )
    return summary
