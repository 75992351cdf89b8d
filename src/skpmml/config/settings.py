"""
Typed configuration models using Pydantic.

All tunables of the PMML encoder are defined here with explicit typing
and validation.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class StatsStrategy(str, Enum):
    """How univariate statistics are looked up during document assembly."""

    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"  # thread pool lookup, sequential attach


class EncoderConfig(BaseModel):
    """Configuration for SkLearnEncoder document assembly."""

    model_config = ConfigDict(frozen=True)

    stats_strategy: StatsStrategy = Field(
        default=StatsStrategy.SEQUENTIAL,
        description="Lookup strategy for univariate statistics",
    )
    max_workers: int | None = Field(
        default=None,
        ge=1,
        description="Thread pool size for parallel lookup (None = executor default)",
    )
    sort_stats: bool = Field(
        default=False,
        description="Attach statistics sorted by field name instead of data dictionary order",
    )


class HeaderConfig(BaseModel):
    """Contents of the PMML Header element."""

    model_config = ConfigDict(frozen=True)

    application_name: str = Field(default="skpmml", description="Producing application")
    application_version: str | None = Field(
        default=None, description="Application version (None = installed package version)"
    )
    description: str | None = Field(default=None, description="Free-text model description")
    pmml_version: str = Field(default="4.4", description="PMML schema version")

    @field_validator("pmml_version")
    @classmethod
    def validate_pmml_version(cls, v: str) -> str:
        """Ensure the version looks like MAJOR.MINOR."""
        parts = v.split(".")
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            msg = f"pmml_version must look like '4.4', got: {v!r}"
            raise ValueError(msg)
        return v


class LoggingConfig(BaseModel):
    """Logging output configuration."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO", description="Log level")
    json_output: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            msg = f"level must be one of {VALID_LOG_LEVELS}, got: {v!r}"
            raise ValueError(msg)
        return level


class ConverterConfig(BaseModel):
    """Complete converter configuration."""

    model_config = ConfigDict(frozen=True)

    encoder: EncoderConfig = Field(default_factory=EncoderConfig)
    header: HeaderConfig = Field(default_factory=HeaderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
