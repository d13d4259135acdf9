"""Conversion of SRT timestamps to ASS timestamps.

SRT uses ``HH:MM:SS,mmm``; ASS uses ``H:MM:SS.cc``. Fractions are truncated
to centiseconds, never rounded: ``00:01:23,456`` becomes ``0:01:23.45``.
"""

import logging
import re

from srt2ass.errors import InvalidTimestampError
from srt2ass.models import AssTimestamp

logger = logging.getLogger(__name__)

SRT_TIMESTAMP_PATTERN = r"\d{1,2}:\d{2}:\d{2}[.,]\d{1,3}"

_TIMESTAMP = re.compile(r"(\d{1,2}):(\d{2}):(\d{2})[.,](\d{1,3})")


def parse_timestamp(raw: str) -> AssTimestamp:
    """Parse an SRT timestamp strictly.

    Args:
        raw: Timestamp such as ``00:01:23,456``, ``0:01:23.4`` or ``1:02:03,45``.

    Returns:
        The timestamp with milliseconds truncated to centiseconds.

    Raises:
        InvalidTimestampError: If the text is not a timestamp or a field is out of range.
    """
    match = _TIMESTAMP.fullmatch(raw.strip())
    if match is None:
        raise InvalidTimestampError(f"Invalid time format: {raw!r}")

    hours, minutes, seconds = (int(group) for group in match.group(1, 2, 3))
    # "4" means 400 ms, "45" means 450 ms
    milliseconds = int(match.group(4).ljust(3, "0")[:3])

    if minutes >= 60 or seconds >= 60 or milliseconds >= 1000:
        raise InvalidTimestampError(f"Invalid time values: {raw!r}")

    return AssTimestamp(hours=hours, minutes=minutes, seconds=seconds, centiseconds=milliseconds // 10)


def normalize_timestamp(raw: str) -> AssTimestamp:
    """Parse an SRT timestamp, falling back to ``0:00:00.00`` when it is malformed."""
    try:
        return parse_timestamp(raw)
    except InvalidTimestampError as e:
        logger.warning("Error parsing time %r, using 0:00:00.00: %s", raw, e)
        return AssTimestamp.zero()


def format_timestamp(timestamp: AssTimestamp) -> str:
    """Render a timestamp as ``H:MM:SS.cc``."""
    return str(timestamp)
