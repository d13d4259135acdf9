"""Error taxonomy for the SRT to ASS conversion pipeline."""


class ConversionError(ValueError):
    """Base class for all conversion pipeline errors."""


class InvalidTimestampError(ConversionError):
    """A single timestamp is malformed or out of range."""


class UnparsableBlockError(ConversionError):
    """A cue block is missing required lines or has an unknown time separator."""


class EmptyDocumentError(ConversionError):
    """The whole input has no readable content."""


class NoValidSubtitlesError(ConversionError):
    """The document was read but yielded zero usable cues."""
