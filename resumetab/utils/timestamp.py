"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """
    Current local time as a sortable, filename-safe stamp.

    Example:
        now()
        # "20260101_123456"
    """
    return datetime.now().strftime("%Y%m%d_%H%M%S")