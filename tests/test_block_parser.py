"""Tests for single-block SRT parsing."""

from unittest.mock import MagicMock

import pytest

from srt2ass.errors import UnparsableBlockError
from srt2ass.models import AssTimestamp, FormattedText, SubtitleStyle
from srt2ass.parsing.block_parser import BlockParser, parse_index, parse_time_range
from srt2ass.text.formatter import TextFormatter


class TestParseIndex:
    """Tests for cue number extraction."""

    def test_bare_integer(self) -> None:
        """Test a plain number."""
        assert parse_index("42") == 42

    def test_negative_integer(self) -> None:
        """Test that a signed bare integer keeps its sign."""
        assert parse_index("-5") == -5

    def test_first_digit_run(self) -> None:
        """Test that the first digits in a noisy line are used."""
        assert parse_index("Cue 12 (part 3)") == 12

    def test_bom_prefixed_number(self) -> None:
        """Test an index line starting with a byte-order mark."""
        assert parse_index("\ufeff7") == 7

    def test_no_digits(self) -> None:
        """Test that a line without digits is rejected."""
        with pytest.raises(UnparsableBlockError):
            parse_index("abc")


class TestParseTimeRange:
    """Tests for time-range line matching."""

    @pytest.mark.parametrize(
        "line",
        [
            "00:00:01,000 --> 00:00:02,500",
            "00:00:01,000-->00:00:02,500",
            "00:00:01,000 → 00:00:02,500",
            "00:00:01,000 - 00:00:02,500",
            "0:00:01.000 --> 0:00:02.500 X1:100 X2:200",
        ],
    )
    def test_accepted_separators(self, line: str) -> None:
        """Test arrow, unicode arrow and hyphen separators."""
        start, end = parse_time_range(line)
        assert start.replace(".", ",").endswith("00:01,000")
        assert end.replace(".", ",").endswith("00:02,500")

    def test_unknown_separator(self) -> None:
        """Test that an unrecognized separator rejects the line."""
        with pytest.raises(UnparsableBlockError):
            parse_time_range("00:00:01,000 to 00:00:02,500")


class TestBlockParser:
    """Tests for BlockParser.parse."""

    def test_standard_block(self) -> None:
        """Test a well-formed three-line block."""
        record = BlockParser().parse("1\n00:00:01,000 --> 00:00:04,500\nHello")
        assert record is not None
        assert record.index == 1
        assert str(record.start) == "0:00:01.00"
        assert str(record.end) == "0:00:04.50"
        assert record.text == "Hello"
        assert record.original_text == "Hello"
        assert record.style == SubtitleStyle.DEFAULT

    def test_multi_line_text(self) -> None:
        """Test that text lines are joined and converted to ASS breaks."""
        record = BlockParser().parse("2\n00:00:01,000 --> 00:00:02,000\n  Line one  \nLine two")
        assert record is not None
        assert record.text == "Line one\\NLine two"
        assert record.original_text == "Line one\nLine two"

    def test_italic_block(self) -> None:
        """Test that the formatter's style is carried over."""
        record = BlockParser().parse("3\n00:00:01,000 --> 00:00:02,000\n<i>Hello</i>\n<i>World</i>")
        assert record is not None
        assert record.style == SubtitleStyle.ITALIC
        assert record.text == "Hello\\NWorld"

    def test_two_lines_rejected(self) -> None:
        """Test that a block without text lines is dropped."""
        assert BlockParser().parse("4\n00:00:01,000 --> 00:00:02,000") is None

    def test_no_index_digits_rejected(self) -> None:
        """Test that a block without a cue number is dropped."""
        assert BlockParser().parse("abc\n00:00:01,000 --> 00:00:02,000\nHello") is None

    def test_bad_time_line_rejected(self) -> None:
        """Test that a block with no time range is dropped."""
        assert BlockParser().parse("5\n00:00:01 until 00:00:02\nHello") is None

    def test_out_of_range_timestamp_becomes_zero(self) -> None:
        """Test that a bad timestamp does not reject the block."""
        record = BlockParser().parse("6\n00:61:00,000 --> 00:00:02,000\nHello")
        assert record is not None
        assert record.start == AssTimestamp.zero()
        assert str(record.end) == "0:00:02.00"

    def test_parse_strict_raises(self) -> None:
        """Test that parse_strict reports why a block was rejected."""
        with pytest.raises(UnparsableBlockError, match="at least 3"):
            BlockParser().parse_strict("7\n00:00:01,000 --> 00:00:02,000")

    def test_custom_formatter(self) -> None:
        """Test that the injected formatter is used."""
        formatter = MagicMock(spec=TextFormatter)
        formatter.format.return_value = FormattedText(cleaned_text="X", style=SubtitleStyle.ITALIC)
        record = BlockParser(formatter).parse("8\n00:00:01,000 --> 00:00:02,000\nHello\nthere")
        assert record is not None
        formatter.format.assert_called_once_with("Hello\nthere")
        assert record.text == "X"
        assert record.style == SubtitleStyle.ITALIC
