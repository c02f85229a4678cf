"""Merchant/counterparty extraction."""

import logging
import re
from typing import Optional

from .amount_parser import first_group
from .rules import Rule, RuleChain, RuleMatch
from ..utils.text_utils import capitalize_first, normalize_text

logger = logging.getLogger(__name__)

# Letter-only tokens (Vietnamese diacritics included), shortest run first
_WORDS = r'[^\W\d_]+(?:\s+[^\W\d_]+)*?'

# Name ends at a currency suffix, comma, period, digit, or end of text
_VI_END = r'(?=\s*(?:(?i:vnđ|vnd|đ)(?![^\W\d_])|,|\.|\d|$))'

# "khoan"/"tai khoan" (account) after a preposition is never a name
_VI_NOT_ACCOUNT = r'(?!(?i:(?:t[aàạ]i\s+)?kho[aả]n)\b)'


def _vi_preposition(words: str) -> re.Pattern:
    return re.compile(rf'\b(?i:{words})\s+{_VI_NOT_ACCOUNT}({_WORDS}){_VI_END}')


VI_AT = _vi_preposition("tại|tai")
VI_FROM = _vi_preposition("từ|tu")
VI_TO = _vi_preposition("đến|den")
EN_PREPOSITION = re.compile(
    r'\b(?:at|from|to)\s+([A-Z][A-Za-z\s]*?)(?=\s+on\b|\s*$|\s*\.|\s*\d)'
)


def merchant_rule(name: str, pattern: re.Pattern) -> Rule[str]:
    """A merchant rule accepts captures longer than one character."""
    def matcher(text: str) -> Optional[str]:
        match = pattern.search(text)
        if not match:
            return None
        name_text = (first_group(match) or "").strip()
        if len(name_text) <= 1:
            return None
        return capitalize_first(name_text)

    return Rule(name, matcher)


MERCHANT_RULES = RuleChain([
    merchant_rule("vi_at", VI_AT),
    merchant_rule("vi_from", VI_FROM),
    merchant_rule("vi_to", VI_TO),
    merchant_rule("en_preposition", EN_PREPOSITION),
])


class MerchantExtractor:
    """Extracts the merchant or counterparty name from the original text."""

    def __init__(self, rules: RuleChain = MERCHANT_RULES):
        self.rules = rules

    def match(self, text: str) -> Optional[RuleMatch[str]]:
        if not text:
            return None
        return self.rules.evaluate(normalize_text(text))

    def extract(self, text: str) -> Optional[str]:
        """
        Extract merchant name.

        Args:
            text: Raw notification text (case preserved)

        Returns:
            Merchant with first letter capitalized, or None
        """
        result = self.match(text)
        return result.value if result else None
