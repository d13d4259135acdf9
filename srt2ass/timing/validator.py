"""Post-parse timing correction."""

import logging

from srt2ass.models import AssTimestamp, SubtitleRecord

logger = logging.getLogger(__name__)

DEFAULT_MINIMUM_DURATION_SECONDS = 1.0


class TimingValidator:
    """Guarantee every record ends strictly after it starts."""

    def __init__(self, minimum_duration_seconds: float = DEFAULT_MINIMUM_DURATION_SECONDS) -> None:
        """Initialize the validator.

        Args:
            minimum_duration_seconds: Duration given to records whose end is not after their start.
        """
        if minimum_duration_seconds <= 0:
            raise ValueError(f"minimum_duration_seconds must be positive, got {minimum_duration_seconds}")
        self.minimum_duration_seconds = minimum_duration_seconds
        self._minimum_duration_cs = round(minimum_duration_seconds * 100)

    def validate(self, records: list[SubtitleRecord]) -> list[SubtitleRecord]:
        """Fix records whose end time is not after their start time.

        Args:
            records: Parsed records.

        Returns:
            List of the same length and order. Records needing no fix are
            returned as-is; fixed records are copies with end = start + minimum
            duration. A record whose correction fails is passed through unchanged.
        """
        validated: list[SubtitleRecord] = []
        for record in records:
            try:
                validated.append(self._validate_record(record))
            except ValueError as e:
                logger.warning("Could not validate timing for subtitle %d: %s", record.index, e)
                validated.append(record)
        return validated

    def _validate_record(self, record: SubtitleRecord) -> SubtitleRecord:
        start_cs = record.start.to_centiseconds()
        if record.end.to_centiseconds() > start_cs:
            return record

        new_end = AssTimestamp.from_centiseconds(start_cs + self._minimum_duration_cs)
        logger.warning("Fixed non-positive duration for subtitle %d: end %s -> %s", record.index, record.end, new_end)
        return record.model_copy(update={"end": new_end})
