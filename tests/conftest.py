# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os
from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["SMTP_HOST"] = ""

from src.api.deps import get_email_sender
from src.database import get_db
from src.integrations.base import EmailDeliveryError, EmailProvider
from src.main import app
from src.models import Admin, AdminRole, Country, ExchangeRate, Provider
from src.models.base import Base
from src.security import get_password_hash

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeEmailSender(EmailProvider):
    """Records outgoing mail instead of sending it."""

    def __init__(self, config=None, fail: bool = False):
        self.fail = fail
        self.sent: list[dict] = []

    @classmethod
    def get_type(cls) -> str:
        return "fake"

    def health_check(self) -> tuple[bool, str]:
        return True, "OK"

    def send_email(self, to, subject, body, body_html=None) -> None:
        if self.fail:
            raise EmailDeliveryError("mail server unreachable")
        self.sent.append(
            {"to": to, "subject": subject, "body": body, "body_html": body_html}
        )


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def email_sender() -> FakeEmailSender:
    """An email sender that records messages."""
    return FakeEmailSender()


@pytest.fixture(scope="function")
def client(db_session, email_sender):
    """Create a test client with database and email overrides."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_email_sender] = lambda: email_sender
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_country(db_session):
    """Factory for persisted countries."""

    def _make(code: str = "sa", name: str = "Saudi Arabia", available: bool = True):
        country = Country(code=code, name=name, available=available)
        db_session.add(country)
        db_session.commit()
        db_session.refresh(country)
        return country

    return _make


@pytest.fixture
def make_provider(db_session):
    """Factory for persisted providers."""

    def _make(
        key: str,
        sort_order: int = 0,
        country_code: str = "sa",
        active: bool = True,
        **kwargs,
    ) -> Provider:
        provider = Provider(
            provider_key=key,
            name=kwargs.pop("name", key.upper()),
            website_url=kwargs.pop("website_url", f"https://{key}.example.com"),
            type=kwargs.pop("type", "Bank Transfer"),
            active=active,
            country_code=country_code,
            sort_order=sort_order,
            **kwargs,
        )
        db_session.add(provider)
        db_session.commit()
        db_session.refresh(provider)
        return provider

    return _make


@pytest.fixture
def make_rate(db_session):
    """Factory for persisted exchange rates."""

    def _make(
        provider: Provider,
        to_currency: str = "INR",
        rate: str = "22.0000",
        last_updated: datetime | None = None,
        **kwargs,
    ) -> ExchangeRate:
        row = ExchangeRate(
            provider_id=provider.id,
            from_currency=kwargs.pop("from_currency", "SAR"),
            to_currency=to_currency,
            rate=Decimal(rate),
            rate_change=kwargs.pop("rate_change", Decimal("0.1000")),
            fees=kwargs.pop("fees", Decimal("10.00")),
            fee_type=kwargs.pop("fee_type", "Fixed fee"),
            transfer_time=kwargs.pop("transfer_time", "1-2 days"),
            rating=kwargs.pop("rating", Decimal("4.5")),
            highlight=kwargs.pop("highlight", False),
            last_updated=last_updated or datetime(2026, 1, 1, 12, 0, 0),
        )
        db_session.add(row)
        db_session.commit()
        db_session.refresh(row)
        return row

    return _make


def _create_admin(db_session, username: str, role: AdminRole) -> Admin:
    admin = Admin(
        username=username,
        password_hash=get_password_hash(f"{username}password123"),
        full_name=username.title(),
        email=f"{username}@example.com",
        role=role,
    )
    db_session.add(admin)
    db_session.commit()
    db_session.refresh(admin)
    return admin


@pytest.fixture
def admin_user(db_session) -> Admin:
    """Create a full admin."""
    return _create_admin(db_session, "admin", AdminRole.ADMIN)


@pytest.fixture
def editor_user(db_session) -> Admin:
    """Create a rate-only editor."""
    return _create_admin(db_session, "editor", AdminRole.RATE_EDITOR)


@pytest.fixture
def admin_client(client, admin_user):
    """Create an authenticated admin test client."""
    response = client.post(
        "/api/admin/login",
        json={"username": "admin", "password": "adminpassword123"},
    )
    assert response.status_code == 200
    return client


@pytest.fixture
def editor_client(client, editor_user):
    """Create an authenticated editor test client."""
    response = client.post(
        "/api/admin/login",
        json={"username": "editor", "password": "editorpassword123"},
    )
    assert response.status_code == 200
    return client
