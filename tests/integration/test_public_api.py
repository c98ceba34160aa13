# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for the public API endpoints."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from src.main import app
from src.models import Lead
from src.services import rate_service


@pytest.fixture
def saudi_rates(make_country, make_provider, make_rate):
    make_country("sa", "Saudi Arabia", available=True)
    make_country("qa", "Qatar", available=False)
    stc = make_provider("stc", sort_order=1, badge="Best Rate", logo_url="/img/stc.png")
    barq = make_provider("barq", sort_order=2)
    make_rate(stc, "INR", "22.1000", last_updated=datetime(2026, 1, 1, 8, 0))
    make_rate(stc, "INR", "22.4000", last_updated=datetime(2026, 1, 2, 8, 0))
    make_rate(barq, "INR", "21.9000", last_updated=datetime(2026, 1, 1, 9, 0))
    make_rate(barq, "PKR", "73.4000")
    return stc, barq


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


class TestCountries:
    def test_list_countries(self, client, saudi_rates):
        response = client.get("/api/countries")
        assert response.status_code == 200
        data = response.json()
        assert [c["code"] for c in data] == ["sa", "qa"]
        assert data[0]["available"] is True
        assert "flagUrl" in data[0]

    def test_country_providers(self, client, saudi_rates):
        response = client.get("/api/countries/SA/providers")
        assert response.status_code == 200
        data = response.json()
        assert [p["providerKey"] for p in data] == ["stc", "barq"]
        assert data[0]["logoUrl"] == "/img/stc.png"

    def test_country_currencies(self, client, saudi_rates):
        response = client.get("/api/countries/sa/currencies")
        assert response.status_code == 200
        assert response.json() == ["INR", "PKR"]

    def test_unknown_country_currencies_empty(self, client):
        response = client.get("/api/countries/zz/currencies")
        assert response.status_code == 200
        assert response.json() == []


def test_list_all_providers(client, saudi_rates, make_provider):
    make_provider("retired", sort_order=0, active=False)

    response = client.get("/api/providers")

    assert response.status_code == 200
    assert [p["providerKey"] for p in response.json()] == ["stc", "barq", "retired"]


class TestExchangeRates:
    def test_snapshot(self, client, saudi_rates):
        response = client.get("/api/exchange-rates/sa/INR")
        assert response.status_code == 200
        data = response.json()
        rows = data["rates"]
        assert [r["providerKey"] for r in rows] == ["stc", "barq"]
        assert rows[0]["rate"] == 22.4
        assert rows[0]["badge"] == "Best Rate"
        assert rows[0]["feeType"] == "Fixed fee"
        assert rows[0]["transferTime"] == "1-2 days"
        assert data["lastUpdated"].startswith("2026-01-02T08:00")

    def test_case_insensitive_path(self, client, saudi_rates):
        response = client.get("/api/exchange-rates/SA/inr")
        assert response.status_code == 200
        assert len(response.json()["rates"]) == 2

    def test_unknown_currency_is_empty(self, client, saudi_rates):
        response = client.get("/api/exchange-rates/sa/XYZ")
        assert response.status_code == 200
        data = response.json()
        assert data["rates"] == []
        assert data["lastUpdated"]

    def test_blank_currency_is_bad_request(self, client, saudi_rates):
        response = client.get("/api/exchange-rates/sa/%20")
        assert response.status_code == 400
        assert response.json() == {"message": "Currency is required"}

    def test_reflects_edits_immediately(self, admin_client, saudi_rates):
        stc, _ = saudi_rates
        rows = admin_client.get("/api/exchange-rates/sa/INR").json()["rates"]
        rate_id = rows[0]["rateId"]

        response = admin_client.patch(
            f"/api/admin/exchange-rates/{rate_id}", json={"rate": 23.05}
        )
        assert response.status_code == 200

        rows = admin_client.get("/api/exchange-rates/sa/INR").json()["rates"]
        assert rows[0]["providerKey"] == "stc"
        assert rows[0]["rate"] == 23.05


class TestLeads:
    payload = {
        "fullName": "Jane Doe",
        "email": "jane@example.com",
        "countryCode": "+966",
        "phone": "501234567",
        "fromCurrency": "SAR",
        "toCurrency": "INR",
        "targetRate": "22.50",
        "consent": True,
    }

    def test_create_lead(self, client, db_session, email_sender):
        response = client.post("/api/leads", json=self.payload)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Successfully subscribed to rate alerts"
        lead = db_session.query(Lead).filter(Lead.id == data["lead"]["id"]).first()
        assert lead.email_sent is True
        assert email_sender.sent[0]["to"] == ["jane@example.com"]

    def test_email_failure_still_created(self, client, db_session, email_sender):
        email_sender.fail = True

        response = client.post("/api/leads", json=self.payload)

        assert response.status_code == 201
        lead = db_session.query(Lead).first()
        assert lead.email_sent is False

    def test_missing_consent(self, client, db_session):
        response = client.post("/api/leads", json={**self.payload, "consent": False})

        assert response.status_code == 400
        data = response.json()
        assert data["message"] == "Validation failed"
        assert data["errors"][0]["field"] == "consent"
        assert "You must agree to receive alerts" in data["errors"][0]["message"]
        assert db_session.query(Lead).count() == 0

    def test_field_errors_listed(self, client):
        response = client.post(
            "/api/leads", json={**self.payload, "fullName": "J", "phone": "123"}
        )

        assert response.status_code == 400
        fields = {err["field"] for err in response.json()["errors"]}
        assert fields == {"fullName", "phone"}


def test_unhandled_error_returns_500(db_session, monkeypatch):
    def explode(db):
        raise RuntimeError("boom")

    monkeypatch.setattr(rate_service, "get_countries", explode)

    with TestClient(app, raise_server_exceptions=False) as test_client:
        response = test_client.get("/api/countries")

    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}
