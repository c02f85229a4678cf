"""Amount extraction from notification text.

Two numeric grammars are recognised:

- grouped thousands (VND/IDR style): '.' and ',' only separate groups of
  three digits, the whole digit run is an integer ("1.500.000" -> 1500000)
- decimal (USD style): ',' groups thousands and '.' is the decimal point
  ("$1,234.50" -> 1234.50)

The patterns are tried in a fixed order and the first accepted match wins.
"""

import logging
import re
from decimal import Decimal
from typing import Callable, Optional

from .rules import Rule, RuleChain, RuleMatch
from ..utils.currency_parser import parse_decimal_amount, parse_grouped_amount
from ..utils.text_utils import normalize_text

logger = logging.getLogger(__name__)

# Values at or above this are treated as account/reference numbers by the
# generic short-number rule
SHORT_GROUPED_LIMIT = Decimal(1_000_000)

CURRENCY_PREFIX_GROUPED = re.compile(
    r'(?:\bRp|\bIDR|\bUSD|\bVND)\.?\s*(\d{1,3}(?:[.,]\d{3})+)(?![.,]?\d)',
    re.IGNORECASE
)
GROUPED_WITH_SUFFIX = re.compile(
    r'(?<![\d.,])(\d{1,3}(?:[.,]\d{3})+|\d+)\s*(?:vnđ|vnd|đ|d)(?![^\W\d_])',
    re.IGNORECASE
)
CURRENCY_PREFIX_DECIMAL = re.compile(
    r'(?:\$|\bUSD)\s*(\d{1,3}(?:,\d{3})+(?:\.\d+)?|\d+(?:\.\d+)?)',
    re.IGNORECASE
)
SHORT_GROUPED = re.compile(
    r'(?<![\d.,])(\d{1,3}(?:[.,]\d{3})*[.,]\d{2,3})(?!\d)'
)
BARE_DIGITS = re.compile(
    r'(?<!\d)(\d{6,8})(?!\d)'
)


def first_group(match: re.Match) -> Optional[str]:
    """Return the first non-empty capture group of a match."""
    for group in match.groups():
        if group:
            return group
    return None


def pattern_rule(
    name: str,
    pattern: re.Pattern,
    parse: Callable[[str], Optional[Decimal]],
    accept: Optional[Callable[[Decimal], bool]] = None
) -> Rule[Decimal]:
    """
    Build an amount rule from a regex and a grammar.

    Only the first match of the pattern is considered; a value rejected by
    ``accept`` makes the rule fail so the chain falls through.
    """
    def matcher(text: str) -> Optional[Decimal]:
        match = pattern.search(text)
        if not match:
            return None
        raw = first_group(match)
        if raw is None:
            return None
        value = parse(raw)
        if value is None:
            return None
        if accept is not None and not accept(value):
            logger.debug(f"Rule {name} rejected amount {raw}")
            return None
        return value

    return Rule(name, matcher)


AMOUNT_RULES = RuleChain([
    pattern_rule("currency_prefix_grouped", CURRENCY_PREFIX_GROUPED, parse_grouped_amount),
    pattern_rule("grouped_with_suffix", GROUPED_WITH_SUFFIX, parse_grouped_amount),
    pattern_rule("currency_prefix_decimal", CURRENCY_PREFIX_DECIMAL, parse_decimal_amount),
    pattern_rule(
        "short_grouped",
        SHORT_GROUPED,
        parse_grouped_amount,
        accept=lambda value: value < SHORT_GROUPED_LIMIT
    ),
    pattern_rule("bare_digits", BARE_DIGITS, parse_grouped_amount),
])


class AmountParser:
    """Extracts the transaction amount from notification text."""

    def __init__(self, rules: RuleChain = AMOUNT_RULES):
        self.rules = rules

    def match(self, text: str) -> Optional[RuleMatch[Decimal]]:
        """Return the winning rule and amount, or None if nothing matched."""
        if not text:
            return None
        return self.rules.evaluate(normalize_text(text))

    def extract(self, text: str) -> Optional[Decimal]:
        """
        Extract the amount.

        Args:
            text: Raw notification text

        Returns:
            Amount, or None when no rule matched (distinct from a zero amount)
        """
        result = self.match(text)
        return result.value if result else None
