"""Notification parsing modules."""
from .rules import Rule, RuleChain, RuleMatch, keyword_rule
from .amount_parser import AmountParser, SHORT_GROUPED_LIMIT
from .direction_classifier import DirectionClassifier
from .category_classifier import CategoryClassifier
from .merchant_extractor import MerchantExtractor
from .transaction_parser import ParseTrace, TransactionParser

__all__ = [
    'Rule',
    'RuleChain',
    'RuleMatch',
    'keyword_rule',
    'AmountParser',
    'SHORT_GROUPED_LIMIT',
    'DirectionClassifier',
    'CategoryClassifier',
    'MerchantExtractor',
    'ParseTrace',
    'TransactionParser',
]
