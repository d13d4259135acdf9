"""ASS document rendering."""

import logging

from srt2ass.models import SubtitleRecord
from srt2ass.timing.timestamp import format_timestamp

logger = logging.getLogger(__name__)

ASS_HEADER = """[Script Info]
Title: Converted from SRT
ScriptType: v4.00+
WrapStyle: 0
ScaledBorderAndShadow: yes
YCbCr Matrix: TV.601
PlayResX: 1920
PlayResY: 1080

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding
Style: Default,Arial,20,&H00FFFFFF,&H000000FF,&H00000000,&H80000000,0,0,0,0,100,100,0,0,1,2,2,2,10,10,10,1
Style: Title,Arial,24,&H00FFFFFF,&H000000FF,&H00000000,&H80000000,-1,0,0,0,100,100,0,0,1,2,2,8,10,10,10,1
Style: Italic,Arial,20,&H00FFFFFF,&H000000FF,&H00000000,&H80000000,0,-1,0,0,100,100,0,0,1,2,2,2,10,10,10,1

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
"""


def dialogue_line(record: SubtitleRecord) -> str:
    """Render one record as a ``Dialogue:`` line including its trailing newline.

    Args:
        record: Validated subtitle record.

    Returns:
        The event line.

    Raises:
        ValueError: If the text holds a raw line break, which would split the event.
    """
    if "\n" in record.text or "\r" in record.text:
        raise ValueError("text contains a raw line break")
    start = format_timestamp(record.start)
    end = format_timestamp(record.end)
    return f"Dialogue: 0,{start},{end},{record.style.value},,0,0,0,,{record.text}\n"


class ASSSerializer:
    """Render subtitle records as an ASS document."""

    def __init__(self, header: str = ASS_HEADER) -> None:
        self.header = header

    def render(self, records: list[SubtitleRecord]) -> str:
        """Render the header followed by one dialogue line per record, in the given order.

        Records that cannot be rendered are skipped with a warning.
        """
        lines = [self.header]
        for record in records:
            try:
                lines.append(dialogue_line(record))
            except ValueError as e:
                logger.warning("Could not write subtitle %d: %s", record.index, e)
        return "".join(lines)
