# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Provider management for the back office."""

import logging

from sqlalchemy.orm import Session

from src.models import Country, Provider
from src.schemas.provider import ProviderCreate, ProviderUpdate

logger = logging.getLogger(__name__)


class ProviderServiceError(Exception):
    """Base exception for provider management."""


class DuplicateProviderKeyError(ProviderServiceError):
    """Another provider already uses this key."""


class UnknownCountryError(ProviderServiceError):
    """The referenced country does not exist."""


def get_provider(db: Session, provider_id: int) -> Provider | None:
    """Get a provider by ID."""
    return db.query(Provider).filter(Provider.id == provider_id).first()


def get_provider_by_key(db: Session, provider_key: str) -> Provider | None:
    """Get a provider by its stable key."""
    return db.query(Provider).filter(Provider.provider_key == provider_key).first()


def _ensure_country(db: Session, country_code: str) -> None:
    if not db.query(Country).filter(Country.code == country_code).first():
        raise UnknownCountryError(f"Unknown country: {country_code}")


def create_provider(db: Session, data: ProviderCreate) -> Provider:
    """Create a provider.

    Raises:
        DuplicateProviderKeyError: If the key is taken.
        UnknownCountryError: If the country does not exist.
    """
    if get_provider_by_key(db, data.provider_key):
        raise DuplicateProviderKeyError(
            f"Provider key already exists: {data.provider_key}"
        )
    _ensure_country(db, data.country_code)

    provider = Provider(**data.model_dump())
    db.add(provider)
    db.commit()
    db.refresh(provider)
    logger.info(f"Created provider {provider.provider_key} ({provider.id})")
    return provider


def update_provider(db: Session, provider: Provider, data: ProviderUpdate) -> Provider:
    """Update an existing provider with the fields that were sent.

    Nullable display fields can be cleared by sending null explicitly.

    Raises:
        UnknownCountryError: If the new country does not exist.
    """
    changes = data.model_dump(exclude_unset=True)
    if changes.get("country_code") is not None:
        _ensure_country(db, changes["country_code"])

    nullable = {"logo_url", "logo_fallback_text", "logo_color_tag", "badge"}
    for field, value in changes.items():
        if value is None and field not in nullable:
            continue
        setattr(provider, field, value)

    db.commit()
    db.refresh(provider)
    logger.info(f"Updated provider {provider.provider_key} ({provider.id})")
    return provider
