"""
Formatting utilities for the Crypto Icon API.

Provides timestamp and number formatting for API responses and logs.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """
    Format a moment as an ISO-8601 UTC timestamp with millisecond precision.

    Args:
        moment: Time to format (default: now). Naive values are taken as UTC.

    Returns:
        Timestamp such as ``2024-01-31T09:15:00.123Z``

    Examples:
        >>> format_timestamp(datetime(2024, 1, 31, 9, 15, 0, 123456))
        '2024-01-31T09:15:00.123Z'
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    elif moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    else:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime('%Y-%m-%dT%H:%M:%S.') + f"{moment.microsecond // 1000:03d}Z"


def format_number(n: int) -> str:
    """
    Format large numbers with commas for readability.

    Examples:
        >>> format_number(1234567)
        '1,234,567'
    """
    return f"{n:,}"


__all__ = ['format_timestamp', 'format_number']
