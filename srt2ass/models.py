"""Pydantic models for subtitle records and conversion results."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class SubtitleStyle(StrEnum):
    """Style names defined in the ASS style sheet."""

    DEFAULT = "Default"
    TITLE = "Title"
    ITALIC = "Italic"


class AssTimestamp(BaseModel):
    """Timestamp with centisecond precision, as used by ASS."""

    hours: int = Field(..., ge=0, description="Hours (unbounded)")
    minutes: int = Field(..., ge=0, le=59, description="Minutes")
    seconds: int = Field(..., ge=0, le=59, description="Seconds")
    centiseconds: int = Field(..., ge=0, le=99, description="Hundredths of a second")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def zero(cls) -> "AssTimestamp":
        """Sentinel used when a timestamp cannot be parsed."""
        return cls(hours=0, minutes=0, seconds=0, centiseconds=0)

    @classmethod
    def from_centiseconds(cls, total: int) -> "AssTimestamp":
        """Build a timestamp from a total number of centiseconds.

        Args:
            total: Non-negative centisecond count.

        Returns:
            Decomposed timestamp.

        Raises:
            ValueError: If total is negative.
        """
        if total < 0:
            raise ValueError(f"Timestamp cannot be negative: {total} centiseconds")
        total_seconds, centiseconds = divmod(total, 100)
        total_minutes, seconds = divmod(total_seconds, 60)
        hours, minutes = divmod(total_minutes, 60)
        return cls(hours=hours, minutes=minutes, seconds=seconds, centiseconds=centiseconds)

    def to_centiseconds(self) -> int:
        """Total centiseconds since zero."""
        return ((self.hours * 60 + self.minutes) * 60 + self.seconds) * 100 + self.centiseconds

    def __str__(self) -> str:
        return f"{self.hours}:{self.minutes:02d}:{self.seconds:02d}.{self.centiseconds:02d}"


class FormattedText(BaseModel):
    """Output of the text formatter."""

    cleaned_text: str = Field(..., min_length=1, description="ASS-ready text, line breaks as \\N")
    style: SubtitleStyle = Field(..., description="Style selected for the cue")

    model_config = ConfigDict(frozen=True, extra="forbid")


class SubtitleRecord(BaseModel):
    """One parsed subtitle cue."""

    index: int = Field(..., description="Cue ordinal as declared in the source file")
    start: AssTimestamp = Field(..., description="Start time")
    end: AssTimestamp = Field(..., description="End time")
    text: str = Field(..., min_length=1, description="Cleaned, ASS-ready cue text")
    original_text: str = Field(..., description="Cue text before cleaning")
    style: SubtitleStyle = Field(SubtitleStyle.DEFAULT, description="ASS style name")

    model_config = ConfigDict(frozen=True, extra="forbid")


ErrorCode = Literal["empty_document", "no_valid_subtitles", "unexpected_failure"]


class ConversionResult(BaseModel):
    """Outcome of one conversion."""

    success: bool = Field(..., description="Whether conversion succeeded")
    content: str | None = Field(None, description="Full ASS document (success only)")
    subtitle_count: int | None = Field(None, ge=0, description="Number of converted cues (success only)")
    error: str | None = Field(None, description="Human-readable failure message (failure only)")
    error_code: ErrorCode | None = Field(None, description="Machine-readable failure kind (failure only)")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _check_outcome_fields(self) -> "ConversionResult":
        if self.success:
            if self.content is None or self.subtitle_count is None:
                raise ValueError("Successful result requires content and subtitle_count")
            if self.error is not None or self.error_code is not None:
                raise ValueError("Successful result must not carry an error")
        else:
            if self.error is None:
                raise ValueError("Failed result requires an error message")
            if self.content is not None or self.subtitle_count is not None:
                raise ValueError("Failed result must not carry content")
        return self

    @classmethod
    def ok(cls, content: str, subtitle_count: int) -> "ConversionResult":
        """Build a successful result."""
        return cls(success=True, content=content, subtitle_count=subtitle_count)

    @classmethod
    def failure(cls, error: str, error_code: ErrorCode) -> "ConversionResult":
        """Build a failed result."""
        return cls(success=False, error=error, error_code=error_code)
