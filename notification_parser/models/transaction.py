"""Transaction candidate data model."""
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional


class TransactionDirection(Enum):
    """Direction of money flow."""
    INCOME = "Income"
    EXPENSE = "Expense"

    @property
    def api_type(self) -> str:
        """Value used by the backend webhook ('in' / 'out')."""
        return "in" if self is TransactionDirection.INCOME else "out"


# Closed category vocabulary
FOOD = "Food"
TRANSPORTATION = "Transportation"
SHOPPING = "Shopping"
BILLS = "Bills"
INCOME = "Income"
REFUND = "Refund"
TRANSFER = "Transfer"
UNCATEGORIZED = "Uncategorized"

CATEGORY_VOCABULARY = (
    FOOD,
    TRANSPORTATION,
    SHOPPING,
    BILLS,
    INCOME,
    REFUND,
    TRANSFER,
    UNCATEGORIZED,
)


def default_category(direction: TransactionDirection) -> str:
    """Category assigned when no keyword matched."""
    return INCOME if direction is TransactionDirection.INCOME else UNCATEGORIZED


@dataclass(frozen=True)
class TransactionCandidate:
    """
    Best-effort transaction extracted from a notification.

    Attributes:
        id: Identifier generated per successful parse
        amount: Non-negative amount (0 when only merchant/category was recovered)
        direction: Income or expense
        merchant: Merchant or counterparty name, if recovered
        category: Category from the closed vocabulary
        source: Bank/wallet label supplied by the caller
        occurred_at: Time the notification was parsed (received)
    """
    id: uuid.UUID
    amount: Decimal
    direction: TransactionDirection
    merchant: Optional[str]
    category: Optional[str]
    source: str
    occurred_at: datetime

    def __post_init__(self):
        """Validate candidate data."""
        if self.amount < 0:
            raise ValueError("amount cannot be negative")
        if self.category is not None and self.category not in CATEGORY_VOCABULARY:
            raise ValueError(f"unknown category: {self.category}")
        if not isinstance(self.direction, TransactionDirection):
            raise ValueError("direction must be a TransactionDirection")

    @property
    def is_partial(self) -> bool:
        """True when no amount was found in the text."""
        return self.amount == 0

    def to_dict(self) -> dict:
        """Convert candidate to dictionary."""
        return {
            'id': str(self.id),
            'amount': float(self.amount),
            'direction': self.direction.value,
            'merchant': self.merchant,
            'category': self.category,
            'source': self.source,
            'occurred_at': self.occurred_at.isoformat(),
        }

    def to_webhook_payload(self) -> dict:
        """
        Convert candidate to the backend webhook request body.

        "Uncategorized" maps to an empty category, the merchant becomes the
        recipient, and the date is RFC3339 in UTC.
        """
        occurred_at = self.occurred_at
        if occurred_at.tzinfo is None:
            occurred_at = occurred_at.replace(tzinfo=timezone.utc)
        category = self.category if self.category and self.category != UNCATEGORIZED else ""

        return {
            'type': self.direction.api_type,
            'amount': float(self.amount),
            'category': category,
            'source': self.source,
            'recipient': self.merchant or "",
            'transaction_date': occurred_at.astimezone(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ'),
        }
