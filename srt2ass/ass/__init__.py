"""ASS document output."""

from srt2ass.ass.serializer import ASS_HEADER, ASSSerializer

__all__ = ["ASS_HEADER", "ASSSerializer"]
