"""Income/expense classification."""

import logging
from typing import Optional

from .keywords import (
    EN_INCOME_KEYWORDS,
    OUTBOUND_TRANSFER_PHRASES,
    TOPUP_PHRASES,
    TOPUP_SUCCESS_PHRASES,
    VI_EXPENSE_KEYWORDS,
    VI_INCOME_KEYWORDS,
)
from .rules import Rule, RuleChain, RuleMatch, keyword_rule
from ..config.keyword_config_loader import KeywordConfig
from ..models.transaction import TransactionDirection
from ..utils.text_utils import normalize_text

logger = logging.getLogger(__name__)

INCOME = TransactionDirection.INCOME
EXPENSE = TransactionDirection.EXPENSE


def build_direction_rules(keyword_config: KeywordConfig) -> RuleChain[TransactionDirection]:
    """
    Build the ordered direction rules.

    Specific phrases (top-up, outbound transfer) come first so a generic
    keyword such as "nap" cannot override them. The configured keyword lists
    sit between the Vietnamese/English income sets and the Vietnamese expense
    set.
    """
    return RuleChain([
        keyword_rule("topup", TOPUP_PHRASES, EXPENSE),
        keyword_rule("outbound_transfer", OUTBOUND_TRANSFER_PHRASES, EXPENSE),
        keyword_rule("vi_income", VI_INCOME_KEYWORDS, INCOME),
        keyword_rule("en_income", EN_INCOME_KEYWORDS, INCOME),
        keyword_rule("configured_income", keyword_config.income_keywords, INCOME),
        keyword_rule("configured_expense", keyword_config.expense_keywords, EXPENSE),
        keyword_rule("vi_expense", VI_EXPENSE_KEYWORDS, EXPENSE),
        keyword_rule("topup_success", TOPUP_SUCCESS_PHRASES, INCOME),
        Rule("default", lambda text: EXPENSE),
    ])


class DirectionClassifier:
    """Decides whether a notification is income or expense."""

    def __init__(self, keyword_config: Optional[KeywordConfig] = None):
        self.keyword_config = keyword_config or KeywordConfig()
        self.rules = build_direction_rules(self.keyword_config)

    def match(self, text: str) -> RuleMatch[TransactionDirection]:
        """Return the winning rule; the trailing default rule always matches."""
        return self.rules.evaluate(normalize_text(text or "").lower())

    def classify(self, text: str) -> TransactionDirection:
        """
        Classify the notification direction.

        Args:
            text: Raw notification text

        Returns:
            TransactionDirection (EXPENSE when no keyword matched)
        """
        return self.match(text).value
