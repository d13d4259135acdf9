"""Parsing of a whole SRT document into ordered subtitle records."""

import logging
import re

from srt2ass.errors import EmptyDocumentError
from srt2ass.models import SubtitleRecord
from srt2ass.parsing.block_parser import BlockParser
from srt2ass.text.formatter import normalize_line_endings

logger = logging.getLogger(__name__)

# One or more blank lines; blank lines may carry trailing whitespace.
_BLOCK_SEPARATOR = re.compile(r"\n\s*\n")


def split_blocks(document: str) -> list[str]:
    """Split a document on blank-line boundaries.

    Args:
        document: SRT text with LF line endings.

    Returns:
        Raw blocks in file order, blank blocks excluded.
    """
    return [block for block in _BLOCK_SEPARATOR.split(document.strip()) if block.strip()]


class SRTFileParser:
    """Parse SRT documents, dropping blocks that cannot be read."""

    def __init__(self, block_parser: BlockParser | None = None) -> None:
        self.block_parser = block_parser or BlockParser()

    def parse(self, document: str) -> list[SubtitleRecord]:
        """Parse every block of a document.

        Args:
            document: Decoded SRT text.

        Returns:
            Successfully parsed records sorted by ascending cue index. Records
            with equal index keep file order. Empty if no block could be parsed.

        Raises:
            EmptyDocumentError: If the document is empty or whitespace-only.
        """
        document = normalize_line_endings(document).lstrip("\ufeff")
        if not document.strip():
            raise EmptyDocumentError("File is empty or contains no readable content")

        blocks = split_blocks(document)
        records: list[SubtitleRecord] = []
        for number, block in enumerate(blocks, start=1):
            record = self.block_parser.parse(block)
            if record is None:
                logger.warning("Could not parse block %d", number)
                continue
            records.append(record)

        records.sort(key=lambda record: record.index)
        logger.info("Successfully parsed %d subtitles from %d blocks", len(records), len(blocks))
        return records
