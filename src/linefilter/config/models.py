"""Configuration models using Pydantic for validation."""

import codecs
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = Field(
        default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path = Field(default=Path("logs"), description="Directory for log files")
    max_bytes: int = Field(
        default=10 * 1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=5, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=True, description="Enable console logging on stderr")
    file_enabled: bool = Field(default=False, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class FilterConfig(BaseModel):
    """Settings for one filtering run. Built once, read-only afterwards."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    output_dir: Path = Field(default=Path("."), description="Directory for output files")
    prefix: str = Field(default="", description="Prefix prepended to output file names")
    append: bool = Field(default=False, description="Append to existing output files")
    show_stats: bool = Field(default=False, description="Print basic statistics")
    full_stats: bool = Field(default=False, description="Print full statistics")
    input_files: tuple[Path, ...] = Field(default=(), description="Input files, in read order")
    encoding: str | None = Field(
        default=None, description="Text encoding for input and output (None = platform default)"
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str | None) -> str | None:
        """Ensure the encoding name is known to Python."""
        if v is None:
            return v
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown encoding: {v}") from e
        return v

    @model_validator(mode="before")
    @classmethod
    def full_implies_basic(cls, data: Any) -> Any:
        """Full statistics always include the basic counts."""
        if isinstance(data, dict) and data.get("full_stats") is True:
            data = {**data, "show_stats": True}
        return data

    @property
    def stats_enabled(self) -> bool:
        return self.show_stats or self.full_stats
