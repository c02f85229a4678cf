"""Category assignment filtered by transaction direction."""

import logging
from typing import Optional

from .keywords import CATEGORY_TABLE, TOPUP_PHRASES, TRANSFER_PHRASES
from .rules import RuleChain, RuleMatch, keyword_rule
from ..config.keyword_config_loader import KeywordConfig
from ..models.transaction import (
    BILLS,
    INCOME,
    REFUND,
    TRANSFER,
    TransactionDirection,
    default_category,
)
from ..utils.text_utils import normalize_text

logger = logging.getLogger(__name__)

# Phrase rules applied regardless of direction
OVERRIDE_RULES = RuleChain([
    keyword_rule("topup", TOPUP_PHRASES, BILLS),
    keyword_rule("transfer", TRANSFER_PHRASES, TRANSFER),
])

INCOME_CATEGORIES = frozenset({INCOME, REFUND})


def is_compatible(category: str, direction: TransactionDirection) -> bool:
    """Income accepts only Income/Refund; Expense accepts anything but Income."""
    if direction is TransactionDirection.INCOME:
        return category in INCOME_CATEGORIES
    return category != INCOME


def build_category_table(keyword_config: KeywordConfig) -> RuleChain[str]:
    """Build the keyword table, appending configured keywords to their category."""
    rules = []
    for category, keywords in CATEGORY_TABLE:
        extra = keyword_config.category_keywords.get(category, ())
        rules.append(keyword_rule(category.lower(), keywords + tuple(extra), category))

    # Configured categories with no built-in keyword set go last
    known = {category for category, _ in CATEGORY_TABLE}
    for category, keywords in keyword_config.category_keywords.items():
        if category not in known and keywords:
            rules.append(keyword_rule(category.lower(), keywords, category))

    return RuleChain(rules)


class CategoryClassifier:
    """Assigns a category from the closed vocabulary."""

    def __init__(self, keyword_config: Optional[KeywordConfig] = None):
        self.keyword_config = keyword_config or KeywordConfig()
        self.table = build_category_table(self.keyword_config)

    def match(self, text: str, direction: TransactionDirection) -> Optional[RuleMatch[str]]:
        """Return the winning rule, or None when the direction default applies."""
        lowered = normalize_text(text or "").lower()

        override = OVERRIDE_RULES.evaluate(lowered)
        if override:
            return override

        return self.table.evaluate(
            lowered,
            accept=lambda category: is_compatible(category, direction)
        )

    def classify(self, text: str, direction: TransactionDirection) -> str:
        """
        Classify the notification category.

        Args:
            text: Raw notification text
            direction: Already-determined direction

        Returns:
            Category name ("Income"/"Uncategorized" by default)
        """
        result = self.match(text, direction)
        if result is None:
            return default_category(direction)
        return result.value
