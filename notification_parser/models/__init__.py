"""Data models for notification parsing."""
from .transaction import (
    CATEGORY_VOCABULARY,
    TransactionCandidate,
    TransactionDirection,
    default_category,
)
from .batch_result import BatchItemResult, BatchParseSummary

__all__ = [
    'CATEGORY_VOCABULARY',
    'TransactionCandidate',
    'TransactionDirection',
    'default_category',
    'BatchItemResult',
    'BatchParseSummary',
]
