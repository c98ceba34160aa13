# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for rate_editor_service."""

from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from src.models import ExchangeRate
from src.schemas.exchange_rate import (
    BulkRateUpdateItem,
    ExchangeRateCreate,
    ExchangeRateUpdate,
)
from src.services import rate_editor_service, rate_service
from src.services.rate_editor_service import (
    ExchangeRateNotFoundError,
    ProviderNotFoundError,
)


@pytest.fixture
def stc(make_country, make_provider):
    make_country()
    return make_provider("stc", sort_order=1)


def test_update_changes_only_sent_fields_and_stamps_time(db_session, stc, make_rate):
    row = make_rate(stc, "INR", "22.0000", last_updated=datetime(2020, 1, 1))

    updated = rate_editor_service.update_exchange_rate_by_id(
        db_session, row.id, ExchangeRateUpdate(rate=Decimal("22.7500"))
    )

    assert updated.rate == Decimal("22.7500")
    assert updated.fees == Decimal("10.00")
    assert updated.transfer_time == "1-2 days"
    assert updated.last_updated > datetime(2020, 1, 1)


def test_update_fee_type_stored_as_label(db_session, stc, make_rate):
    row = make_rate(stc)

    updated = rate_editor_service.update_exchange_rate_by_id(
        db_session, row.id, ExchangeRateUpdate(feeType="No fee", fees=0)
    )

    assert updated.fee_type == "No fee"
    assert updated.fees == Decimal("0")


def test_update_missing_row_raises(db_session):
    with pytest.raises(ExchangeRateNotFoundError):
        rate_editor_service.update_exchange_rate_by_id(
            db_session, 404, ExchangeRateUpdate(rate=Decimal("1"))
        )


def test_update_rejects_invalid_values():
    with pytest.raises(ValidationError):
        ExchangeRateUpdate(rate=Decimal("-1"))
    with pytest.raises(ValidationError):
        ExchangeRateUpdate(rating=Decimal("6"))
    with pytest.raises(ValidationError):
        ExchangeRateUpdate(feeType="Hidden fee")


def test_create_keeps_history_and_becomes_latest(db_session, stc, make_rate):
    old = make_rate(stc, "INR", "22.0000", last_updated=datetime(2020, 1, 1))

    created = rate_editor_service.create_exchange_rate(
        db_session,
        ExchangeRateCreate(
            providerId=stc.id,
            toCurrency="inr",
            rate=Decimal("22.3000"),
            transferTime="1-3 hours",
            rating=Decimal("4.8"),
        ),
    )

    assert created.from_currency == "SAR"
    assert created.to_currency == "INR"
    assert created.fee_type == "Fixed fee"
    assert db_session.query(ExchangeRate).count() == 2
    assert db_session.get(ExchangeRate, old.id) is not None
    latest = rate_service.get_latest_rate(db_session, stc.id, "INR")
    assert latest.id == created.id


def test_create_for_unknown_provider_raises(db_session):
    with pytest.raises(ProviderNotFoundError):
        rate_editor_service.create_exchange_rate(
            db_session,
            ExchangeRateCreate(
                providerId=99,
                toCurrency="INR",
                rate=Decimal("22"),
                transferTime="Minutes",
                rating=Decimal("4"),
            ),
        )


def test_create_rejects_bad_currency_code():
    with pytest.raises(ValidationError):
        ExchangeRateCreate(
            providerId=1,
            toCurrency="RUPEE",
            rate=Decimal("22"),
            transferTime="Minutes",
            rating=Decimal("4"),
        )


def test_list_with_providers_grouped_by_provider(
    db_session, stc, make_provider, make_rate
):
    barq = make_provider("barq", sort_order=0)
    make_rate(stc, "PKR")
    make_rate(barq, "INR")
    make_rate(stc, "INR")

    rows = rate_editor_service.list_exchange_rates_with_providers(db_session)

    assert [(r.provider.provider_key, r.to_currency) for r in rows] == [
        ("barq", "INR"),
        ("stc", "INR"),
        ("stc", "PKR"),
    ]


class TestBulkUpdate:
    def test_partial_success(self, db_session, stc, make_rate):
        row = make_rate(stc, "INR", "22.0000")

        results = rate_editor_service.bulk_update_rates(
            db_session,
            [
                BulkRateUpdateItem(id=row.id, rate=Decimal("22.9000")),
                BulkRateUpdateItem(id=9999, rate=Decimal("1.0000")),
            ],
        )

        assert [r.success for r in results] == [True, False]
        assert results[0].rate.rate == Decimal("22.9000")
        assert results[1].index == 1
        assert "9999" in results[1].error
        db_session.refresh(row)
        assert row.rate == Decimal("22.9000")

    def test_target_by_provider_and_currency_updates_latest(
        self, db_session, stc, make_rate
    ):
        old = make_rate(stc, "INR", "21.0000", last_updated=datetime(2026, 1, 1))
        new = make_rate(stc, "INR", "22.0000", last_updated=datetime(2026, 2, 1))

        results = rate_editor_service.bulk_update_rates(
            db_session,
            [
                BulkRateUpdateItem(
                    providerId=stc.id,
                    toCurrency="inr",
                    countryCode="sa",
                    highlight=True,
                )
            ],
        )

        assert results[0].success is True
        assert results[0].id == new.id
        db_session.refresh(old)
        db_session.refresh(new)
        assert new.highlight is True
        assert old.highlight is False

    def test_missing_pair_reported(self, db_session, stc):
        results = rate_editor_service.bulk_update_rates(
            db_session,
            [BulkRateUpdateItem(providerId=stc.id, toCurrency="USD", fees=1)],
        )

        assert results[0].success is False
        assert "USD" in results[0].error

    def test_database_error_rolls_back_item_only(
        self, db_session, stc, make_rate, monkeypatch
    ):
        first = make_rate(stc, "INR", "22.0000")
        second = make_rate(stc, "PKR", "73.0000")
        original = rate_editor_service.update_exchange_rate

        def flaky_update(db, rate, data):
            if rate.id == first.id:
                raise SQLAlchemyError("disk I/O error")
            return original(db, rate, data)

        monkeypatch.setattr(rate_editor_service, "update_exchange_rate", flaky_update)

        results = rate_editor_service.bulk_update_rates(
            db_session,
            [
                BulkRateUpdateItem(id=first.id, rate=Decimal("23")),
                BulkRateUpdateItem(id=second.id, rate=Decimal("74")),
            ],
        )

        assert results[0].success is False
        assert results[0].error == "Failed to update exchange rate"
        assert results[1].success is True
        db_session.refresh(second)
        assert second.rate == Decimal("74.0000")

    def test_item_needs_a_target(self):
        with pytest.raises(ValidationError):
            BulkRateUpdateItem(rate=Decimal("1"))
        with pytest.raises(ValidationError):
            BulkRateUpdateItem(providerId=1, rate=Decimal("1"))

    def test_invalid_raw_item_fails_alone(self, db_session, stc, make_rate):
        row = make_rate(stc, "INR", "20.0000")

        results = rate_editor_service.bulk_update_rates(
            db_session,
            [
                {"id": row.id, "rate": "22.2"},
                {"id": row.id, "rate": "-1"},
                {"rate": "1.5"},
            ],
        )

        assert [r.success for r in results] == [True, False, False]
        assert results[1].id == row.id
        assert "rate" in results[1].error
        assert results[2].id is None
        assert "Either id or providerId and toCurrency is required" in results[2].error
        db_session.refresh(row)
        assert row.rate == Decimal("22.2000")
