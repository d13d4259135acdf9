"""SRT block and document parsing."""

from srt2ass.parsing.block_parser import BlockParser
from srt2ass.parsing.file_parser import SRTFileParser, split_blocks

__all__ = ["BlockParser", "SRTFileParser", "split_blocks"]
