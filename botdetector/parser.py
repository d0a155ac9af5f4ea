"""Bot Detector - Access log line parser"""

import calendar
import logging
from datetime import datetime, timezone
from typing import Optional

from .models import ParsedRequest
from .patterns import LOG_PATTERN, TIMESTAMP_FORMAT

logger = logging.getLogger(__name__)


def parse_timestamp(raw: str) -> Optional[datetime]:
    """Parse ``dd/MM/yyyy:HH:mm:ss`` as a UTC instant, or None if invalid.

    A day of 29-31 past the end of its month is pinned to the month's last
    day (``31/02/2024`` reads as 29 February). Days 00 and 32+ are invalid.
    """
    try:
        parsed = datetime.strptime(raw, TIMESTAMP_FORMAT)
    except ValueError:
        parsed = _parse_clamped(raw)
        if parsed is None:
            return None
    return parsed.replace(tzinfo=timezone.utc)


def _parse_clamped(raw: str) -> Optional[datetime]:
    day, month, rest = raw[:2], raw[3:5], raw[5:]
    year = rest[1:5]
    if not (day.isdigit() and month.isdigit() and year.isdigit()):
        return None
    if not 29 <= int(day) <= 31 or not 1 <= int(month) <= 12:
        return None

    last_day = calendar.monthrange(int(year), int(month))[1]
    try:
        return datetime.strptime(f"{last_day:02d}/{month}{rest}", TIMESTAMP_FORMAT)
    except ValueError:
        return None


def parse_line(line: str) -> Optional[ParsedRequest]:
    """Parse a single log line.

    Returns None for anything that does not match the access log grammar,
    including timestamps with impossible fields such as hour 24 or day 00.
    """
    line = line.rstrip("\r\n")
    match = LOG_PATTERN.fullmatch(line)
    if not match:
        logger.debug("Skipping unmatched line: %r", line[:120])
        return None

    groups = match.groupdict()
    timestamp = parse_timestamp(groups['timestamp'])
    if timestamp is None:
        logger.debug("Skipping line with invalid timestamp: %r", groups['timestamp'])
        return None

    return ParsedRequest(
        ip=groups['ip'],
        timestamp=timestamp,
        timestamp_raw=groups['timestamp'],
        method=groups['method'],
        path=groups['path'],
        user_agent=groups['user_agent']
    )
