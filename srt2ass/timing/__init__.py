"""Timestamp normalization and timing validation."""

from srt2ass.timing.timestamp import format_timestamp, normalize_timestamp, parse_timestamp
from srt2ass.timing.validator import TimingValidator

__all__ = ["TimingValidator", "format_timestamp", "normalize_timestamp", "parse_timestamp"]
