"""Batch parsing of exported notification logs for the CLI."""
from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

import pandas as pd
from dateutil import parser as dateutil_parser

from .config.settings import DEFAULT_SOURCE
from .models import BatchItemResult, BatchParseSummary
from .parsers import TransactionParser
from .utils.logger import log_parse_audit

logger = logging.getLogger(__name__)

TEXT_FIELDS = ("text", "body", "notification")


@dataclass
class NotificationRecord:
    """One notification read from an input file."""

    text: str
    source: str
    received_at: Optional[str] = None


def _record_from_mapping(row: dict, default_source: str) -> NotificationRecord:
    text = next((row[key] for key in TEXT_FIELDS if row.get(key)), "")
    source = row.get("source") or default_source
    received_at = row.get("received_at")
    received_at = str(received_at) if received_at else None
    return NotificationRecord(text=str(text), source=str(source), received_at=received_at)


def load_notifications(path: Path, default_source: str = DEFAULT_SOURCE) -> List[NotificationRecord]:
    """
    Read notifications from a file.

    Supported formats:
    - .jsonl: one JSON object per line with ``text`` (or ``body``), optional
      ``source`` and ``received_at``
    - .csv: same columns as above
    - anything else: one notification text per line

    Args:
        path: Input file
        default_source: Source label for records that carry none

    Returns:
        List of NotificationRecord

    Raises:
        ValueError: If a JSONL line is not a JSON object
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".jsonl":
        records = []
        with open(path, 'r', encoding='utf-8') as f:
            for line_no, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                row = json.loads(line)
                if not isinstance(row, dict):
                    raise ValueError(f"{path.name}:{line_no}: expected a JSON object")
                records.append(_record_from_mapping(row, default_source))
        return records

    if suffix == ".csv":
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        df.columns = [str(c).strip().lower() for c in df.columns]
        return [_record_from_mapping(row, default_source) for row in df.to_dict(orient="records")]

    with open(path, 'r', encoding='utf-8') as f:
        return [
            NotificationRecord(text=line.rstrip("\n"), source=default_source)
            for line in f
            if line.strip()
        ]


def parse_received_at(value: Optional[str]) -> Optional[datetime]:
    """Parse a receipt timestamp; naive values are taken as UTC."""
    if not value:
        return None
    parsed = dateutil_parser.parse(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def run_batch(
    records: Sequence[NotificationRecord] | Iterable[NotificationRecord],
    parser: TransactionParser,
    *,
    input_file: Optional[Path] = None,
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> BatchParseSummary:
    """Parse every record and return a structured summary."""

    record_list = list(records)
    total = len(record_list)
    start_time = time.time()
    results: List[BatchItemResult] = []

    for idx, record in enumerate(record_list):
        item = BatchItemResult(index=idx, text=record.text, source=record.source)
        try:
            received_at = parse_received_at(record.received_at)
        except (ValueError, OverflowError) as exc:
            item.error = f"Invalid received_at {record.received_at!r}: {exc}"
            logger.warning(f"Record {idx}: {item.error}")
        else:
            item.candidate = parser.parse(record.text, record.source, received_at=received_at)

        log_parse_audit(
            source=record.source,
            success=item.parsed,
            index=idx,
            amount=float(item.candidate.amount) if item.candidate else None,
            category=item.candidate.category if item.candidate else None,
            error=item.error,
        )
        results.append(item)

        if progress_callback:
            progress_callback(idx + 1, total)

    summary = BatchParseSummary(
        input_file=str(input_file) if input_file else None,
        generated_at=datetime.now(timezone.utc),
        results=results,
        processing_time=time.time() - start_time,
    )
    logger.info(
        f"Batch complete: {summary.totals['parsed']} parsed, "
        f"{summary.totals['discarded']} discarded, {summary.totals['failed']} failed"
    )
    return summary


def write_manifest(summary: BatchParseSummary, manifest_path: Path) -> None:
    """Persist a BatchParseSummary manifest to disk."""
    manifest_path.parent.mkdir(parents=True, exist_ok=True)
    manifest_path.write_text(
        json.dumps(summary.to_manifest(), indent=2, ensure_ascii=False),
        encoding='utf-8'
    )
