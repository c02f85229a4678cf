"""Logging configuration for the application."""
import logging
import sys
from datetime import datetime
from typing import Optional

from ..config.settings import LOG_LEVEL, LOG_FILE


def setup_logger(name: str = "notification_parser") -> logging.Logger:
    """
    Set up logger with file and console handlers.

    Args:
        name: Logger name

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, LOG_LEVEL.upper(), logging.INFO))

    # Create formatters
    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    simple_formatter = logging.Formatter(
        '%(levelname)s: %(message)s'
    )

    # Console handler (INFO and above)
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(simple_formatter)
    logger.addHandler(console_handler)

    # File handler (DEBUG and above)
    try:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        logger.warning(f"Could not set up file logging: {e}")

    return logger


def log_parse_audit(
    source: str,
    success: bool,
    index: Optional[int] = None,
    amount: Optional[float] = None,
    category: Optional[str] = None,
    error: Optional[str] = None
) -> None:
    """
    Log a one-line audit record for a parsed notification.

    Args:
        source: Source label of the notification
        success: Whether a candidate was produced
        index: Position in the batch input
        amount: Extracted amount
        category: Extracted category
        error: Error message if processing failed
    """
    logger = logging.getLogger("notification_parser.audit")

    audit_data = {
        "timestamp": datetime.now().isoformat(),
        "source": source,
        "success": success,
    }

    if index is not None:
        audit_data["index"] = index
    if amount is not None:
        audit_data["amount"] = amount
    if category:
        audit_data["category"] = category
    if error:
        audit_data["error"] = error

    # Format as structured log entry
    audit_message = " | ".join(f"{k}={v}" for k, v in audit_data.items())
    logger.info(f"AUDIT: {audit_message}")
