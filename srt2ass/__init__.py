"""SRT to ASS subtitle converter with Vietnamese mojibake repair."""

from srt2ass.converter import SRTToASSConverter, convert
from srt2ass.models import AssTimestamp, ConversionResult, SubtitleRecord, SubtitleStyle

__all__ = [
    "AssTimestamp",
    "ConversionResult",
    "SRTToASSConverter",
    "SubtitleRecord",
    "SubtitleStyle",
    "convert",
]
