"""
Configuration management with typed Pydantic models.

Provides encoder tunables, PMML header contents and logging setup,
loadable from YAML with environment interpolation.
"""

from skpmml.config.loader import load_config
from skpmml.config.settings import (
    ConverterConfig,
    EncoderConfig,
    HeaderConfig,
    LoggingConfig,
    StatsStrategy,
)

__all__ = [
    "ConverterConfig",
    "EncoderConfig",
    "HeaderConfig",
    "LoggingConfig",
    "StatsStrategy",
    "load_config",
]
