"""Tests for whole-document SRT parsing."""

from datetime import timedelta

import pytest
import srt

from srt2ass.errors import EmptyDocumentError
from srt2ass.parsing.file_parser import SRTFileParser, split_blocks


def compose_srt(cues: list[tuple[int, float, float, str]]) -> str:
    """Write an SRT document with the srt library, keeping the given indices and order."""
    subtitles = [
        srt.Subtitle(index=index, start=timedelta(seconds=start), end=timedelta(seconds=end), content=content)
        for index, start, end, content in cues
    ]
    return srt.compose(subtitles, reindex=False)


class TestSplitBlocks:
    """Tests for split_blocks."""

    def test_splits_on_blank_lines(self) -> None:
        """Test splitting on one or more blank lines."""
        assert split_blocks("a\nb\n\nc\n\n\n\nd") == ["a\nb", "c", "d"]

    def test_blank_lines_with_whitespace(self) -> None:
        """Test that whitespace-only lines count as blank."""
        assert split_blocks("a\n   \t\nb") == ["a", "b"]

    def test_surrounding_blank_lines_ignored(self) -> None:
        """Test leading and trailing blank lines."""
        assert split_blocks("\n\n a\n\n") == ["a"]


class TestSRTFileParser:
    """Tests for SRTFileParser.parse."""

    def test_parses_composed_document(self) -> None:
        """Test a document written by the srt library."""
        document = compose_srt([(1, 0.0, 1.5, "First"), (2, 2.0, 3.25, "Second\nline"), (3, 4.0, 5.0, "Third")])
        records = SRTFileParser().parse(document)
        assert [record.index for record in records] == [1, 2, 3]
        assert str(records[0].end) == "0:00:01.50"
        assert records[1].text == "Second\\Nline"
        assert str(records[1].end) == "0:00:03.25"

    def test_sorted_by_index(self) -> None:
        """Test that output order follows cue numbers, not file order."""
        document = compose_srt([(3, 4.0, 5.0, "C"), (1, 0.0, 1.0, "A"), (2, 2.0, 3.0, "B")])
        records = SRTFileParser().parse(document)
        assert [record.text for record in records] == ["A", "B", "C"]

    def test_equal_indices_keep_file_order(self) -> None:
        """Test that the sort is stable."""
        document = compose_srt([(1, 0.0, 1.0, "first"), (1, 2.0, 3.0, "second")])
        records = SRTFileParser().parse(document)
        assert [record.text for record in records] == ["first", "second"]

    def test_crlf_document(self) -> None:
        """Test Windows line endings."""
        document = "1\r\n00:00:01,000 --> 00:00:02,000\r\nA\r\n\r\n2\r\n00:00:03,000 --> 00:00:04,000\r\nB\r\n"
        assert len(SRTFileParser().parse(document)) == 2

    def test_leading_bom(self) -> None:
        """Test a document starting with a byte-order mark."""
        records = SRTFileParser().parse("\ufeff1\n00:00:01,000 --> 00:00:02,000\nA\n")
        assert records[0].index == 1

    def test_malformed_block_skipped(self) -> None:
        """Test that one bad block out of ten leaves nine records."""
        cues = [(i, float(i), i + 0.5, f"Cue {i}") for i in range(1, 11)]
        document = compose_srt(cues)
        document = document.replace("Cue 5\n", "")
        records = SRTFileParser().parse(document)
        assert len(records) == 9
        assert 5 not in [record.index for record in records]

    def test_no_parsable_blocks(self) -> None:
        """Test that a document without cues yields an empty list."""
        assert SRTFileParser().parse("hello world\n\nstill nothing") == []

    @pytest.mark.parametrize("document", ["", "   ", "\n\n  \n", "\ufeff"])
    def test_empty_document_raises(self, document: str) -> None:
        """Test that empty input is reported as an empty document."""
        with pytest.raises(EmptyDocumentError):
            SRTFileParser().parse(document)
