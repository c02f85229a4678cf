"""Analytics over parsed transactions."""
from .transaction_analyzer import TransactionAnalyzer

__all__ = ['TransactionAnalyzer']
