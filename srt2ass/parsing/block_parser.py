"""Parsing of a single SRT cue block."""

import logging
import re

from srt2ass.errors import UnparsableBlockError
from srt2ass.models import SubtitleRecord
from srt2ass.text.formatter import TextFormatter
from srt2ass.timing.timestamp import SRT_TIMESTAMP_PATTERN, normalize_timestamp

logger = logging.getLogger(__name__)

MIN_BLOCK_LINES = 3

# Accepted separators between start and end, tried in order: "-->", "→", "-".
TIME_RANGE_PATTERNS = tuple(
    re.compile(rf"({SRT_TIMESTAMP_PATTERN})\s*{separator}\s*({SRT_TIMESTAMP_PATTERN})")
    for separator in ("-->", "→", "-")
)

_INTEGER = re.compile(r"-?[0-9]+")
_DIGITS = re.compile(r"[0-9]+")


def parse_index(line: str) -> int:
    """Read the cue number from an index line.

    Args:
        line: First line of the block, already trimmed.

    Returns:
        The line as a signed integer, or the first run of digits found in it.

    Raises:
        UnparsableBlockError: If the line contains no digits.
    """
    if _INTEGER.fullmatch(line):
        return int(line)
    match = _DIGITS.search(line)
    if match is None:
        raise UnparsableBlockError(f"No cue number in line: {line!r}")
    return int(match.group(0))


def parse_time_range(line: str) -> tuple[str, str]:
    """Split a time-range line into its raw start and end timestamps.

    Raises:
        UnparsableBlockError: If no accepted separator style matches.
    """
    for pattern in TIME_RANGE_PATTERNS:
        match = pattern.search(line)
        if match:
            return match.group(1), match.group(2)
    raise UnparsableBlockError(f"Could not parse time line: {line!r}")


class BlockParser:
    """Parse one blank-line-delimited SRT block into a SubtitleRecord."""

    def __init__(self, formatter: TextFormatter | None = None) -> None:
        self.formatter = formatter or TextFormatter()

    def parse(self, block: str) -> SubtitleRecord | None:
        """Parse a block, returning None when it cannot be used.

        Args:
            block: Text between two blank-line separators.

        Returns:
            The parsed record, or None if the block is rejected.
        """
        try:
            return self.parse_strict(block)
        except UnparsableBlockError as e:
            logger.warning("Skipping block: %s", e)
            return None

    def parse_strict(self, block: str) -> SubtitleRecord:
        """Parse a block, raising on rejection.

        Raises:
            UnparsableBlockError: If the block has fewer than three non-empty
                lines, no cue number, or no recognizable time range.
        """
        lines = [line.strip() for line in block.strip().split("\n")]
        lines = [line for line in lines if line]
        if len(lines) < MIN_BLOCK_LINES:
            raise UnparsableBlockError(f"Block has {len(lines)} non-empty line(s), need at least {MIN_BLOCK_LINES}")

        index = parse_index(lines[0])
        raw_start, raw_end = parse_time_range(lines[1])

        text = "\n".join(lines[2:])
        formatted = self.formatter.format(text)

        return SubtitleRecord(
            index=index,
            start=normalize_timestamp(raw_start),
            end=normalize_timestamp(raw_end),
            text=formatted.cleaned_text,
            original_text=text,
            style=formatted.style,
        )
