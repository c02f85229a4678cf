"""Utility functions."""
from .logger import setup_logger, log_parse_audit
from .currency_parser import parse_grouped_amount, parse_decimal_amount, format_currency
from .text_utils import normalize_text, capitalize_first

__all__ = [
    'setup_logger',
    'log_parse_audit',
    'parse_grouped_amount',
    'parse_decimal_amount',
    'format_currency',
    'normalize_text',
    'capitalize_first',
]
