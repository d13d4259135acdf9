"""Configuration loader for the SRT to ASS converter."""

import codecs
import logging
from pathlib import Path
from typing import Any, Literal, TypeVar, cast

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_MAX_FILE_SIZE_BYTES = 10 * 1024 * 1024

ModelT = TypeVar("ModelT", bound=BaseModel)


class ConverterConfig(BaseModel):
    """Configuration for the conversion pipeline."""

    minimum_duration_seconds: float = Field(..., gt=0, description="Duration given to cues whose end is not after their start")
    empty_text_placeholder: str = Field(..., min_length=1, description="Cue text used when cleaning leaves nothing")
    error_text_placeholder: str = Field(..., min_length=1, description="Cue text used when cleaning fails on blank input")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def defaults(cls) -> "ConverterConfig":
        """Built-in converter settings."""
        return cls(
            minimum_duration_seconds=1.0,
            empty_text_placeholder="[Empty subtitle]",
            error_text_placeholder="[Error in subtitle]",
        )


class DecodingStep(BaseModel):
    """One attempt in the byte decoding chain."""

    encoding: str = Field(..., min_length=1, description="Python codec name")
    errors: Literal["strict", "replace", "ignore"] = Field(..., description="Codec error handler")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {value}") from e
        return value


class UploadConfig(BaseModel):
    """Configuration for the upload boundary."""

    allowed_extension: str = Field(..., min_length=2, description="Accepted filename suffix, matched case-insensitively")
    max_file_size_bytes: int = Field(..., gt=0, description="Largest accepted upload")
    decoding_chain: list[DecodingStep] = Field(..., min_length=1, description="Decoders tried in order")
    fix_encoding_before_convert: bool = Field(..., description="Repair mojibake on the whole document before parsing")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def defaults(cls) -> "UploadConfig":
        """Built-in upload settings: .srt only, 10 MB, UTF-8 strict/lenient then cp1252 then Latin-1."""
        return cls(
            allowed_extension=".srt",
            max_file_size_bytes=DEFAULT_MAX_FILE_SIZE_BYTES,
            decoding_chain=[
                DecodingStep(encoding="utf-8", errors="strict"),
                DecodingStep(encoding="utf-8", errors="replace"),
                DecodingStep(encoding="cp1252", errors="strict"),
                DecodingStep(encoding="latin-1", errors="strict"),
            ],
            fix_encoding_before_convert=True,
        )


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(..., description="Root log level")
    format: str = Field(..., min_length=1, description="logging format string")

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def defaults(cls) -> "LoggingConfig":
        """Built-in logging settings."""
        return cls(level="INFO", format="%(asctime)s %(levelname)-8s %(name)s - %(message)s")

    def get_level(self) -> int:
        """Numeric logging level."""
        return cast(int, logging.getLevelName(self.level))


def _format_validation_error(e: ValidationError) -> str:
    return "; ".join(f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors())


class Config:
    """Configuration class that loads and provides access to config.yaml."""

    SECTIONS = ("converter", "upload", "logging")

    def __init__(self, config_path: str | Path | None = None) -> None:
        """Initialize the Config by loading the YAML file.

        Args:
            config_path: Path to the config.yaml file, or None for the built-in settings.

        Raises:
            FileNotFoundError: If the config file doesn't exist.
            yaml.YAMLError: If the YAML file is invalid.
            KeyError: If a required section is missing from the config.
            ValueError: If a section is invalid or missing required fields.
        """
        self.config_path = Path(config_path) if config_path is not None else None
        if self.config_path is None:
            self._data: dict[str, Any] = {}
            self._converter = ConverterConfig.defaults()
            self._upload = UploadConfig.defaults()
            self._logging = LoggingConfig.defaults()
            return

        self._data = self._load(self.config_path)
        self._converter = self._validate_section("converter", ConverterConfig)
        self._upload = self._validate_section("upload", UploadConfig)
        self._logging = self._validate_section("logging", LoggingConfig)

    @staticmethod
    def _load(config_path: Path) -> dict[str, Any]:
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        # Handle empty or None YAML files
        if data is None:
            raise KeyError(f"Missing required key '{Config.SECTIONS[0]}' in config file")
        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the top level")

        for section in Config.SECTIONS:
            if section not in data:
                raise KeyError(f"Missing required key '{section}' in config file")

        return cast(dict[str, Any], data)

    def _validate_section(self, section: str, model: type[ModelT]) -> ModelT:
        try:
            return model.model_validate(self._data[section])
        except ValidationError as e:
            raise ValueError(f"{section.capitalize()} configuration validation failed: {_format_validation_error(e)}") from e

    def get_converter_config(self) -> ConverterConfig:
        """Get conversion pipeline configuration."""
        return self._converter

    def get_upload_config(self) -> UploadConfig:
        """Get upload boundary configuration."""
        return self._upload

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self._logging

    def getConfigPath(self) -> Path | None:
        """Get the path to config.yaml, or None for built-in defaults."""
        return self.config_path
