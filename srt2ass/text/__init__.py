"""Text cleaning: mojibake repair, entity decoding and ASS formatting."""

from srt2ass.text.encoding_fixer import EncodingFixer, fix_encoding
from srt2ass.text.entities import decode_entities
from srt2ass.text.formatter import TextFormatter

__all__ = ["EncodingFixer", "TextFormatter", "decode_entities", "fix_encoding"]
