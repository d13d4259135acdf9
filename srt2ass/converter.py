"""SRT to ASS conversion pipeline."""

import logging

from srt2ass.ass.serializer import ASSSerializer
from srt2ass.config import ConverterConfig
from srt2ass.errors import EmptyDocumentError, NoValidSubtitlesError
from srt2ass.models import ConversionResult
from srt2ass.parsing.block_parser import BlockParser
from srt2ass.parsing.file_parser import SRTFileParser
from srt2ass.text.encoding_fixer import fix_encoding
from srt2ass.text.formatter import TextFormatter
from srt2ass.timing.validator import TimingValidator

logger = logging.getLogger(__name__)

UNEXPECTED_FAILURE_MESSAGE = "An unexpected error occurred during conversion"


class SRTToASSConverter:
    """Convert SRT text to an ASS document.

    Repairs mojibake across the whole document, then composes the file
    parser, timing validator and ASS serializer. The converter holds no
    per-request state, so one instance can serve concurrent conversions.
    """

    def __init__(
        self,
        config: ConverterConfig | None = None,
        *,
        parser: SRTFileParser | None = None,
        validator: TimingValidator | None = None,
        serializer: ASSSerializer | None = None,
    ) -> None:
        """Initialize the converter.

        Args:
            config: Converter settings; built-in defaults when None.
            parser: File parser override.
            validator: Timing validator override.
            serializer: Serializer override.
        """
        self.config = config or ConverterConfig.defaults()
        formatter = TextFormatter(
            empty_placeholder=self.config.empty_text_placeholder,
            error_placeholder=self.config.error_text_placeholder,
        )
        self.parser = parser or SRTFileParser(BlockParser(formatter))
        self.validator = validator or TimingValidator(self.config.minimum_duration_seconds)
        self.serializer = serializer or ASSSerializer()

    def convert(self, raw_text: str) -> ConversionResult:
        """Convert SRT text. Never raises.

        Args:
            raw_text: Decoded SRT document.

        Returns:
            Success with the ASS content and cue count, or a failure with a
            human-readable message.
        """
        logger.info("Starting SRT to ASS conversion")
        try:
            # Must precede parsing: line trimming drops the trailing NBSP or C1 byte of a mis-decoded letter
            records = self.parser.parse(fix_encoding(raw_text))
            if not records:
                raise NoValidSubtitlesError("No valid subtitles found in the SRT file")

            validated = self.validator.validate(records)
            content = self.serializer.render(validated)
        except EmptyDocumentError as e:
            logger.warning("Conversion failed: %s", e)
            return ConversionResult.failure(str(e), "empty_document")
        except NoValidSubtitlesError as e:
            logger.warning("Conversion failed: %s", e)
            return ConversionResult.failure(str(e), "no_valid_subtitles")
        except Exception as e:
            logger.exception("Unexpected error during conversion")
            return ConversionResult.failure(f"{UNEXPECTED_FAILURE_MESSAGE}: {e}", "unexpected_failure")

        logger.info("Conversion successful! Converted %d subtitles", len(validated))
        return ConversionResult.ok(content=content, subtitle_count=len(validated))


def convert(raw_text: str) -> ConversionResult:
    """Convert SRT text with default settings."""
    return SRTToASSConverter().convert(raw_text)
