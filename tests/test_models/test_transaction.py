"""Tests for the transaction candidate model."""
import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from notification_parser.models import TransactionCandidate, TransactionDirection
from notification_parser.models.transaction import CATEGORY_VOCABULARY, default_category


class TestTransactionCandidate:
    """Tests for TransactionCandidate validation and serialisation."""

    def test_negative_amount_rejected(self, candidate_factory):
        with pytest.raises(ValueError):
            candidate_factory(-1)

    def test_unknown_category_rejected(self, candidate_factory):
        with pytest.raises(ValueError):
            candidate_factory(100, category="Groceries")

    def test_direction_must_be_enum(self):
        with pytest.raises(ValueError):
            TransactionCandidate(
                id=uuid.uuid4(),
                amount=Decimal(1),
                direction="Expense",
                merchant=None,
                category="Food",
                source="VCB",
                occurred_at=datetime.now(timezone.utc),
            )

    def test_is_frozen(self, candidate_factory):
        candidate = candidate_factory(100)
        with pytest.raises(AttributeError):
            candidate.amount = Decimal(5)

    def test_partial(self, candidate_factory):
        assert candidate_factory(0, merchant="Circle K").is_partial
        assert not candidate_factory(10).is_partial

    def test_to_dict(self, candidate_factory):
        candidate = candidate_factory(55000, category="Food", merchant="Highlands Coffee")
        data = candidate.to_dict()
        assert data["amount"] == 55000.0
        assert data["direction"] == "Expense"
        assert data["merchant"] == "Highlands Coffee"
        assert data["category"] == "Food"
        assert data["occurred_at"] == "2025-01-21T09:30:00+00:00"
        assert data["id"] == str(candidate.id)


class TestWebhookPayload:
    """Tests for the backend request body."""

    def test_expense_payload(self, candidate_factory):
        payload = candidate_factory(
            55000, category="Food", source="VCB", merchant="Highlands Coffee"
        ).to_webhook_payload()
        assert payload == {
            "type": "out",
            "amount": 55000.0,
            "category": "Food",
            "source": "VCB",
            "recipient": "Highlands Coffee",
            "transaction_date": "2025-01-21T09:30:00Z",
        }

    def test_income_without_merchant(self, candidate_factory):
        payload = candidate_factory(
            1500000, TransactionDirection.INCOME, category="Income"
        ).to_webhook_payload()
        assert payload["type"] == "in"
        assert payload["recipient"] == ""

    def test_uncategorized_becomes_empty(self, candidate_factory):
        assert candidate_factory(10).to_webhook_payload()["category"] == ""

    def test_date_converted_to_utc(self, candidate_factory):
        local = datetime(2025, 1, 21, 16, 30, tzinfo=timezone(timedelta(hours=7)))
        payload = candidate_factory(10, occurred_at=local).to_webhook_payload()
        assert payload["transaction_date"] == "2025-01-21T09:30:00Z"

    def test_naive_date_treated_as_utc(self, candidate_factory):
        payload = candidate_factory(10, occurred_at=datetime(2025, 1, 21, 9, 30)).to_webhook_payload()
        assert payload["transaction_date"] == "2025-01-21T09:30:00Z"


def test_default_category():
    assert default_category(TransactionDirection.INCOME) == "Income"
    assert default_category(TransactionDirection.EXPENSE) == "Uncategorized"
    assert "Uncategorized" in CATEGORY_VOCABULARY


def test_api_type():
    assert TransactionDirection.INCOME.api_type == "in"
    assert TransactionDirection.EXPENSE.api_type == "out"
