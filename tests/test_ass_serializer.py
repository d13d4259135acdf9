"""Tests for ASS document rendering."""

from srt2ass.ass.serializer import ASS_HEADER, ASSSerializer, dialogue_line
from srt2ass.models import SubtitleRecord, SubtitleStyle
from srt2ass.timing.timestamp import parse_timestamp


def make_record(index: int, text: str, style: SubtitleStyle = SubtitleStyle.DEFAULT) -> SubtitleRecord:
    """Build a record at index seconds, one second long."""
    return SubtitleRecord(
        index=index,
        start=parse_timestamp(f"00:00:{index:02d},000"),
        end=parse_timestamp(f"00:00:{index + 1:02d},000"),
        text=text,
        original_text=text,
        style=style,
    )


class TestAssHeader:
    """Tests for the fixed header."""

    def test_sections_in_order(self) -> None:
        """Test that the three sections appear in order."""
        positions = [ASS_HEADER.index(section) for section in ("[Script Info]", "[V4+ Styles]", "[Events]")]
        assert positions == sorted(positions)

    def test_reference_resolution(self) -> None:
        """Test the 1920x1080 play resolution."""
        assert "PlayResX: 1920\n" in ASS_HEADER
        assert "PlayResY: 1080\n" in ASS_HEADER

    def test_three_styles(self) -> None:
        """Test that Default, Title and Italic styles are defined."""
        style_names = [line.split(",")[0] for line in ASS_HEADER.splitlines() if line.startswith("Style: ")]
        assert style_names == ["Style: Default", "Style: Title", "Style: Italic"]

    def test_ends_with_events_format(self) -> None:
        """Test that dialogue lines can follow the header directly."""
        assert ASS_HEADER.endswith("Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text\n")


class TestDialogueLine:
    """Tests for dialogue_line."""

    def test_fields(self) -> None:
        """Test the field layout of a dialogue line."""
        line = dialogue_line(make_record(1, "Hello\\NWorld", SubtitleStyle.ITALIC))
        assert line == "Dialogue: 0,0:00:01.00,0:00:02.00,Italic,,0,0,0,,Hello\\NWorld\n"

    def test_commas_in_text_kept(self) -> None:
        """Test that the text field may contain commas."""
        assert dialogue_line(make_record(1, "Yes, sir, right away")).endswith(",,Yes, sir, right away\n")


class TestASSSerializer:
    """Tests for ASSSerializer.render."""

    def test_no_records_gives_header_only(self) -> None:
        """Test rendering an empty list."""
        assert ASSSerializer().render([]) == ASS_HEADER

    def test_records_rendered_in_given_order(self) -> None:
        """Test that render does not reorder."""
        content = ASSSerializer().render([make_record(2, "B"), make_record(1, "A")])
        dialogue = [line for line in content.splitlines() if line.startswith("Dialogue:")]
        assert [line.rsplit(",", 1)[1] for line in dialogue] == ["B", "A"]
        assert content.startswith(ASS_HEADER)

    def test_unrenderable_record_skipped(self) -> None:
        """Test that a record with a raw newline is skipped, others kept."""
        records = [make_record(1, "good"), make_record(2, "bad\nline"), make_record(3, "also good")]
        content = ASSSerializer().render(records)
        assert content.count("Dialogue:") == 2
        assert "bad" not in content
