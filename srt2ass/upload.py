"""Framework-free handler for an uploaded SRT file.

A web layer hands over the filename and raw bytes; the handler gates the
file, decodes it, repairs mojibake, runs the converter and returns a
response shaped for JSON.
"""

import logging
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from srt2ass.config import DecodingStep, UploadConfig
from srt2ass.converter import SRTToASSConverter
from srt2ass.text.encoding_fixer import fix_encoding

logger = logging.getLogger(__name__)

NO_FILE_MESSAGE = "No file provided"
WRONG_TYPE_MESSAGE = "File must be an SRT subtitle file"
SERVER_ERROR_MESSAGE = "Server error occurred during conversion"


class UploadResponse(BaseModel):
    """Response for one uploaded file."""

    success: bool = Field(..., description="Whether conversion succeeded")
    filename: str = Field(..., description="Uploaded filename, empty when unknown")
    content: str | None = Field(None, description="ASS document (success only)")
    subtitle_count: int | None = Field(None, alias="subtitleCount", description="Converted cue count (success only)")
    error: str | None = Field(None, description="Failure message (failure only)")

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys and absent fields omitted."""
        return self.model_dump(by_alias=True, exclude_none=True)


def decode_subtitle_bytes(data: bytes, chain: Sequence[DecodingStep]) -> str:
    """Decode bytes with the first decoder in the chain that succeeds.

    Args:
        data: Raw file content.
        chain: Decoders to try, in order.

    Returns:
        Decoded text.

    Raises:
        UnicodeDecodeError: If every decoder in the chain fails.
        ValueError: If the chain is empty.
    """
    if not chain:
        raise ValueError("Decoding chain is empty")
    failures: list[UnicodeDecodeError] = []
    for step in chain:
        try:
            text = data.decode(step.encoding, errors=step.errors)
        except UnicodeDecodeError as e:
            logger.debug("Decoding with %s (%s) failed: %s", step.encoding, step.errors, e)
            failures.append(e)
            continue
        logger.debug("Decoded %d bytes with %s (%s)", len(data), step.encoding, step.errors)
        return text
    raise failures[-1]


def ass_filename(filename: str, extension: str = ".srt") -> str:
    """Derive the download name by swapping the SRT suffix for ``.ass``."""
    if filename.lower().endswith(extension.lower()):
        return filename[: -len(extension)] + ".ass"
    return filename + ".ass"


class UploadHandler:
    """Gate, decode and convert one uploaded file."""

    def __init__(self, config: UploadConfig | None = None, converter: SRTToASSConverter | None = None) -> None:
        """Initialize the handler.

        Args:
            config: Upload settings; built-in defaults when None.
            converter: Converter to run; a default converter when None.
        """
        self.config = config or UploadConfig.defaults()
        self.converter = converter or SRTToASSConverter()

    def handle(self, filename: str | None, data: bytes | None) -> UploadResponse:
        """Convert an uploaded file. Never raises.

        Args:
            filename: Name the client sent, or None when no file was attached.
            data: Raw file bytes.

        Returns:
            UploadResponse echoing the filename.
        """
        try:
            return self._handle(filename, data)
        except Exception:
            logger.exception("Upload handling failed")
            return UploadResponse(success=False, filename="", error=SERVER_ERROR_MESSAGE)

    def _handle(self, filename: str | None, data: bytes | None) -> UploadResponse:
        if not filename or data is None:
            return UploadResponse(success=False, filename="", error=NO_FILE_MESSAGE)

        if not filename.lower().endswith(self.config.allowed_extension.lower()):
            return UploadResponse(success=False, filename=filename, error=WRONG_TYPE_MESSAGE)

        if len(data) > self.config.max_file_size_bytes:
            limit_mb = self.config.max_file_size_bytes / (1024 * 1024)
            return UploadResponse(
                success=False,
                filename=filename,
                error=f"File exceeds maximum size of {limit_mb:g} MB",
            )

        text = decode_subtitle_bytes(data, self.config.decoding_chain)
        if self.config.fix_encoding_before_convert:
            text = fix_encoding(text)

        result = self.converter.convert(text)
        logger.info("Converted %s: success=%s", filename, result.success)
        return UploadResponse(
            success=result.success,
            filename=filename,
            content=result.content,
            subtitle_count=result.subtitle_count,
            error=result.error,
        )
