"""Batch parse result models."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .transaction import TransactionCandidate


@dataclass
class BatchItemResult:
    """
    Outcome of parsing one notification in a batch.

    Attributes:
        index: Position of the notification in the input
        text: Raw notification text
        source: Source label used for parsing
        candidate: Parsed candidate, None when discarded or failed
        error: Error message if the record could not be processed
    """
    index: int
    text: str
    source: str
    candidate: Optional[TransactionCandidate] = None
    error: Optional[str] = None

    @property
    def parsed(self) -> bool:
        return self.candidate is not None

    def to_dict(self) -> dict:
        return {
            'index': self.index,
            'text': self.text,
            'source': self.source,
            'parsed': self.parsed,
            'candidate': self.candidate.to_dict() if self.candidate else None,
            'error': self.error,
        }


@dataclass
class BatchParseSummary:
    """Aggregate summary covering all notifications in a batch."""
    input_file: Optional[str]
    generated_at: datetime
    results: List[BatchItemResult] = field(default_factory=list)
    processing_time: float = 0.0

    @property
    def candidates(self) -> List[TransactionCandidate]:
        """Successfully parsed candidates in input order."""
        return [r.candidate for r in self.results if r.candidate is not None]

    @property
    def totals(self) -> dict:
        failed = sum(1 for r in self.results if r.error)
        parsed = sum(1 for r in self.results if r.parsed)
        return {
            'processed': len(self.results),
            'parsed': parsed,
            'discarded': len(self.results) - parsed - failed,
            'failed': failed,
        }

    def to_manifest(self) -> dict:
        """Serialise the summary into a JSON-friendly manifest."""
        return {
            'input_file': self.input_file,
            'generated_at': self.generated_at.isoformat(),
            'processing_time': round(self.processing_time, 3),
            'totals': self.totals,
            'results': [r.to_dict() for r in self.results],
        }
