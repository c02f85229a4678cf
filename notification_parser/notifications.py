"""Push-notification handling in front of the parser.

A banking app alert arrives as an APNs-style ``userInfo`` mapping; the
notification body is the text to parse and the notification category
identifier names the originating bank or wallet.
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from .models import TransactionCandidate
from .parsers import TransactionParser

logger = logging.getLogger(__name__)


def extract_notification_body(user_info: dict) -> Optional[str]:
    """
    Get the alert body from a notification payload.

    Supports ``{"aps": {"alert": {"body": "..."}}}`` and the short form
    ``{"aps": {"alert": "..."}}``.

    Args:
        user_info: Notification payload

    Returns:
        Body text or None if the payload has no usable alert
    """
    if not isinstance(user_info, dict):
        return None

    aps = user_info.get("aps")
    if not isinstance(aps, dict):
        return None

    alert = aps.get("alert")
    if isinstance(alert, str):
        body = alert
    elif isinstance(alert, dict):
        body = alert.get("body")
    else:
        return None

    if not isinstance(body, str) or not body.strip():
        return None
    return body


class NotificationProcessor:
    """
    Parses incoming notifications and hands candidates to a callback.

    Persistence and delivery stay with the callback owner.
    """

    def __init__(
        self,
        parser: Optional[TransactionParser] = None,
        on_candidate: Optional[Callable[[TransactionCandidate], None]] = None
    ):
        self.parser = parser or TransactionParser()
        self.on_candidate = on_candidate

    def process(
        self,
        user_info: dict,
        category_identifier: str,
        received_at: Optional[datetime] = None
    ) -> Optional[TransactionCandidate]:
        """
        Process one notification.

        Args:
            user_info: Notification payload
            category_identifier: Notification category, used as the source label
            received_at: Delivery time of the notification

        Returns:
            Parsed candidate or None
        """
        body = extract_notification_body(user_info)
        if body is None:
            logger.debug("Notification has no alert body, ignoring")
            return None

        candidate = self.parser.parse(body, category_identifier, received_at=received_at)
        if candidate is None:
            logger.info(f"Failed to parse transaction from {category_identifier or 'unknown'} notification")
            return None

        logger.info(
            f"Parsed {candidate.direction.value.lower()} of {candidate.amount} "
            f"from {candidate.source or 'unknown'}"
        )
        if self.on_candidate:
            self.on_candidate(candidate)
        return candidate
