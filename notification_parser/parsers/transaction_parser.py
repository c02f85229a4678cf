"""Notification text to transaction candidate.

The parser runs four independent passes over the same text:

1. Amount    - ordered numeric patterns (grouped-thousands and decimal grammars)
2. Direction - ordered keyword rules, defaults to expense
3. Category  - phrase overrides, then a keyword table filtered by direction
4. Merchant  - Vietnamese then English preposition patterns

and then applies a discard rule: a candidate is only emitted when it carries
at least one informative signal (a positive amount, a merchant, or a category
other than the default for its direction).

The parser holds only immutable keyword tables and compiled patterns, so one
instance can be shared between threads.

Usage:
    parser = TransactionParser(keyword_config)
    candidate = parser.parse("You spent Rp 50.000 at Coffee Shop", "BCA")
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Optional, Union

from .amount_parser import AmountParser
from .category_classifier import CategoryClassifier
from .direction_classifier import DirectionClassifier
from .merchant_extractor import MerchantExtractor
from ..config.keyword_config_loader import ConfigurationError, KeywordConfig
from ..models.transaction import (
    TransactionCandidate,
    TransactionDirection,
    default_category,
)

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ParseTrace:
    """
    Per-pass outcome of parsing one notification.

    The ``*_rule`` attributes name the rule that fired (None if none did).
    """
    amount: Optional[Decimal]
    amount_rule: Optional[str]
    direction: TransactionDirection
    direction_rule: str
    category: str
    category_rule: Optional[str]
    merchant: Optional[str]
    merchant_rule: Optional[str]

    @property
    def is_informative(self) -> bool:
        """Whether the passes recovered enough to emit a candidate."""
        if self.amount is not None and self.amount > 0:
            return True
        if self.merchant:
            return True
        return self.category is not None and self.category != default_category(self.direction)

    def to_dict(self) -> dict:
        return {
            'amount': float(self.amount) if self.amount is not None else None,
            'amount_rule': self.amount_rule,
            'direction': self.direction.value,
            'direction_rule': self.direction_rule,
            'category': self.category,
            'category_rule': self.category_rule,
            'merchant': self.merchant,
            'merchant_rule': self.merchant_rule,
            'informative': self.is_informative,
        }


class TransactionParser:
    """
    Extracts a TransactionCandidate from bank/e-wallet notification text.

    Args:
        keyword_config: Extra income/expense/category keywords. A plain dict
            is validated with KeywordConfig.from_dict. None means built-in
            rules only.
        clock: Returns the receipt time stamped on candidates
        id_factory: Returns the identifier for each candidate
    """

    def __init__(
        self,
        keyword_config: Union[KeywordConfig, dict, None] = None,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], uuid.UUID]] = None
    ):
        if keyword_config is None:
            keyword_config = KeywordConfig()
        elif isinstance(keyword_config, dict):
            keyword_config = KeywordConfig.from_dict(keyword_config)
        elif not isinstance(keyword_config, KeywordConfig):
            raise ConfigurationError(
                f"keyword_config must be a KeywordConfig or dict, got {type(keyword_config).__name__}"
            )

        self.keyword_config = keyword_config
        self.clock = clock or _utc_now
        self.id_factory = id_factory or uuid.uuid4

        self.amount_parser = AmountParser()
        self.direction_classifier = DirectionClassifier(keyword_config)
        self.category_classifier = CategoryClassifier(keyword_config)
        self.merchant_extractor = MerchantExtractor()

    def explain(self, text: str) -> ParseTrace:
        """
        Run every extraction pass and report which rule fired.

        Args:
            text: Raw notification text

        Returns:
            ParseTrace (never None, even for empty text)
        """
        text = text if isinstance(text, str) else ""

        amount_match = self.amount_parser.match(text)
        direction_match = self.direction_classifier.match(text)
        direction = direction_match.value
        category_match = self.category_classifier.match(text, direction)
        merchant_match = self.merchant_extractor.match(text)

        return ParseTrace(
            amount=amount_match.value if amount_match else None,
            amount_rule=amount_match.rule if amount_match else None,
            direction=direction,
            direction_rule=direction_match.rule,
            category=category_match.value if category_match else default_category(direction),
            category_rule=category_match.rule if category_match else None,
            merchant=merchant_match.value if merchant_match else None,
            merchant_rule=merchant_match.rule if merchant_match else None,
        )

    def parse(
        self,
        text: str,
        source: str,
        received_at: Optional[datetime] = None
    ) -> Optional[TransactionCandidate]:
        """
        Parse a notification into a transaction candidate.

        Args:
            text: Raw notification body
            source: Bank/wallet label, passed through verbatim
            received_at: Receipt time of the notification (defaults to now)

        Returns:
            TransactionCandidate, or None when the text carries no
            amount, merchant, or non-default category
        """
        if not isinstance(text, str) or not text.strip():
            return None

        trace = self.explain(text)
        logger.debug(
            f"Parsed passes: amount={trace.amount_rule} direction={trace.direction_rule} "
            f"category={trace.category_rule} merchant={trace.merchant_rule}"
        )

        if not trace.is_informative:
            logger.debug("Discarding notification without transaction signal")
            return None

        return TransactionCandidate(
            id=self.id_factory(),
            amount=trace.amount if trace.amount is not None else Decimal(0),
            direction=trace.direction,
            merchant=trace.merchant,
            category=trace.category,
            source=source if isinstance(source, str) else str(source or ""),
            occurred_at=received_at or self.clock(),
        )
