"""Extract structured transactions from bank and e-wallet notification text."""
from .config import ConfigurationError, KeywordConfig, KeywordConfigLoader
from .models import TransactionCandidate, TransactionDirection
from .parsers import TransactionParser

__version__ = "0.1.0"

__all__ = [
    'ConfigurationError',
    'KeywordConfig',
    'KeywordConfigLoader',
    'TransactionCandidate',
    'TransactionDirection',
    'TransactionParser',
]
