"""Cleaning of raw SRT cue text into ASS dialogue text."""

import logging
import re

from srt2ass.models import FormattedText, SubtitleStyle
from srt2ass.text.encoding_fixer import fix_encoding
from srt2ass.text.entities import decode_entities

logger = logging.getLogger(__name__)

ASS_LINE_BREAK = "\\N"
ASS_ITALIC_ON = "{\\i1}"
ASS_ITALIC_OFF = "{\\i0}"

DEFAULT_EMPTY_PLACEHOLDER = "[Empty subtitle]"
DEFAULT_ERROR_PLACEHOLDER = "[Error in subtitle]"

_ITALIC_OPEN = r"<\s*i\s*>"
_ITALIC_CLOSE = r"<\s*/\s*i\s*>"
_WRAPPED_IN_ITALIC = re.compile(rf"^\s*{_ITALIC_OPEN}(.*){_ITALIC_CLOSE}\s*$", re.IGNORECASE | re.DOTALL)
_ITALIC_OPEN_TAG = re.compile(_ITALIC_OPEN, re.IGNORECASE)
_ITALIC_CLOSE_TAG = re.compile(_ITALIC_CLOSE, re.IGNORECASE)

# Tags removed while keeping their inner text. Names match whole, so <br> and <span> are not hit by <b> and <s>.
_STRIPPED_TAGS = re.compile(r"<\s*/?\s*(?:b|u|s|em|strong|font|span|div|p)\b[^>]*>", re.IGNORECASE)
_BREAK_TAG = re.compile(r"<\s*br\s*/?\s*>", re.IGNORECASE)
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_line_endings(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _is_wrapped_in_italic(text: str) -> bool:
    match = _WRAPPED_IN_ITALIC.match(text)
    return match is not None and _ITALIC_CLOSE_TAG.search(match.group(1)) is None


def is_fully_italic(text: str) -> bool:
    """Check whether the whole cue, or every non-empty line of it, is wrapped in <i>...</i>.

    Args:
        text: Cue text with LF line endings.

    Returns:
        True if the cue should use the Italic style.
    """
    if _is_wrapped_in_italic(text):
        return True
    lines = [line for line in text.split("\n") if line.strip()]
    return bool(lines) and all(_is_wrapped_in_italic(line) for line in lines)


class TextFormatter:
    """Turn raw cue text into cleaned ASS text plus a style."""

    def __init__(
        self,
        empty_placeholder: str = DEFAULT_EMPTY_PLACEHOLDER,
        error_placeholder: str = DEFAULT_ERROR_PLACEHOLDER,
    ) -> None:
        """Initialize the formatter.

        Args:
            empty_placeholder: Text used when cleaning leaves nothing.
            error_placeholder: Text used when cleaning fails and the original is blank.
        """
        self.empty_placeholder = empty_placeholder
        self.error_placeholder = error_placeholder

    def format(self, raw_text: str) -> FormattedText:
        """Clean cue text and detect its style.

        Never raises: on an internal failure the whitespace-collapsed original
        text (or the error placeholder) is returned with the Default style.

        Args:
            raw_text: Cue text lines joined with newlines.

        Returns:
            FormattedText with non-empty cleaned text.
        """
        try:
            return self._format(raw_text)
        except Exception:
            logger.exception("Error cleaning text %r", raw_text[:50])
            fallback = _WHITESPACE_RUN.sub(" ", raw_text).strip()
            return FormattedText(cleaned_text=fallback or self.error_placeholder, style=SubtitleStyle.DEFAULT)

    def _format(self, raw_text: str) -> FormattedText:
        text = raw_text.lstrip("\ufeff")
        text = fix_encoding(text)
        text = normalize_line_endings(text)

        style = SubtitleStyle.DEFAULT
        if is_fully_italic(text):
            style = SubtitleStyle.ITALIC
            text = _ITALIC_CLOSE_TAG.sub("", _ITALIC_OPEN_TAG.sub("", text))
        else:
            text = _ITALIC_OPEN_TAG.sub(lambda _: ASS_ITALIC_ON, text)
            text = _ITALIC_CLOSE_TAG.sub(lambda _: ASS_ITALIC_OFF, text)

        text = _STRIPPED_TAGS.sub("", text)
        text = _BREAK_TAG.sub(lambda _: ASS_LINE_BREAK, text)
        text = decode_entities(text)
        text = text.replace("\n", ASS_LINE_BREAK)

        lines = [line.strip() for line in text.split(ASS_LINE_BREAK)]
        text = ASS_LINE_BREAK.join(line for line in lines if line).strip()

        if not text:
            text = _WHITESPACE_RUN.sub(" ", raw_text).strip() or self.empty_placeholder

        return FormattedText(cleaned_text=text, style=style)
