"""Pytest configuration and fixtures."""
import uuid
from datetime import datetime, timezone
from decimal import Decimal

import pytest

from notification_parser.config import KeywordConfig
from notification_parser.models import TransactionCandidate, TransactionDirection
from notification_parser.parsers import TransactionParser


FIXED_TIME = datetime(2025, 1, 21, 9, 30, tzinfo=timezone.utc)
FIXED_ID = uuid.UUID("12345678-1234-5678-1234-567812345678")


@pytest.fixture
def parser():
    """Parser with built-in rules only."""
    return TransactionParser()


@pytest.fixture
def keyword_config():
    """Keyword table similar to the bundled resource."""
    return KeywordConfig.from_dict({
        "Patterns": {
            "IncomeKeywords": ["tien vao", "cashback"],
            "ExpenseKeywords": ["spent", "payment"],
            "CategoryKeywords": {"Food": ["circle k"]},
        }
    })


@pytest.fixture
def configured_parser(keyword_config):
    """Parser with extra keywords."""
    return TransactionParser(keyword_config)


@pytest.fixture
def frozen_parser():
    """Parser with a fixed clock and id for exact comparisons."""
    return TransactionParser(clock=lambda: FIXED_TIME, id_factory=lambda: FIXED_ID)


def make_candidate(
    amount,
    direction=TransactionDirection.EXPENSE,
    category="Uncategorized",
    source="VCB",
    merchant=None,
    occurred_at=FIXED_TIME
):
    return TransactionCandidate(
        id=uuid.uuid4(),
        amount=Decimal(str(amount)),
        direction=direction,
        merchant=merchant,
        category=category,
        source=source,
        occurred_at=occurred_at,
    )


@pytest.fixture
def sample_candidates():
    """A small month of parsed notifications."""
    return [
        make_candidate(15_000_000, TransactionDirection.INCOME, "Income", "VCB",
                       occurred_at=datetime(2025, 1, 5, 8, 0, tzinfo=timezone.utc)),
        make_candidate(55_000, category="Food", source="VCB", merchant="Highlands Coffee",
                       occurred_at=datetime(2025, 1, 5, 12, 0, tzinfo=timezone.utc)),
        make_candidate(45_000, category="Food", source="Momo", merchant="Phuc Long",
                       occurred_at=datetime(2025, 1, 6, 12, 0, tzinfo=timezone.utc)),
        make_candidate(100_000, category="Transportation", source="Momo", merchant="Grab",
                       occurred_at=datetime(2025, 1, 20, 18, 0, tzinfo=timezone.utc)),
        make_candidate(300_000, category=None, source="VCB",
                       occurred_at=datetime(2025, 2, 1, 10, 0, tzinfo=timezone.utc)),
    ]


@pytest.fixture
def candidate_factory():
    """Factory for building candidates in tests."""
    return make_candidate
