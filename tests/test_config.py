"""Tests for configuration system."""

import os
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from skpmml.config import (
    ConverterConfig,
    EncoderConfig,
    HeaderConfig,
    LoggingConfig,
    StatsStrategy,
    load_config,
)


class TestEncoderConfig:
    """Tests for EncoderConfig."""

    def test_defaults(self) -> None:
        """Test sequential lookup by default."""
        config = EncoderConfig()
        assert config.stats_strategy == StatsStrategy.SEQUENTIAL
        assert config.max_workers is None
        assert config.sort_stats is False

    def test_strategy_from_string(self) -> None:
        """Test enum coercion from config values."""
        config = EncoderConfig(stats_strategy="parallel", max_workers=2)
        assert config.stats_strategy == StatsStrategy.PARALLEL

    def test_invalid_max_workers(self) -> None:
        """Test that the worker count must be positive."""
        with pytest.raises(ValidationError):
            EncoderConfig(max_workers=0)

    def test_frozen(self) -> None:
        """Test immutability."""
        config = EncoderConfig()
        with pytest.raises(ValidationError):
            config.sort_stats = True  # type: ignore[misc]


class TestHeaderConfig:
    """Tests for HeaderConfig."""

    def test_invalid_pmml_version(self) -> None:
        """Test version format check."""
        with pytest.raises(ValueError, match="pmml_version"):
            HeaderConfig(pmml_version="4")


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_level_normalized(self) -> None:
        """Test case-insensitive level names."""
        assert LoggingConfig(level="debug").level == "DEBUG"

    def test_invalid_level(self) -> None:
        """Test rejection of unknown levels."""
        with pytest.raises(ValueError, match="level must be one of"):
            LoggingConfig(level="verbose")


class TestLoadConfig:
    """Tests for YAML config loading."""

    def test_load_config(self) -> None:
        """Test loading a full config file."""
        config_content = """
encoder:
  stats_strategy: parallel
  max_workers: 4
  sort_stats: true
header:
  application_name: churn-exporter
  description: Churn model
logging:
  level: warning
"""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "test.yaml"
            config_path.write_text(config_content)

            config = load_config(config_path)

            assert isinstance(config, ConverterConfig)
            assert config.encoder.stats_strategy == StatsStrategy.PARALLEL
            assert config.encoder.max_workers == 4
            assert config.encoder.sort_stats is True
            assert config.header.application_name == "churn-exporter"
            assert config.header.pmml_version == "4.4"
            assert config.logging.level == "WARNING"

    def test_empty_file_uses_defaults(self) -> None:
        """Test that every section is optional."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "empty.yaml"
            config_path.write_text("")

            config = load_config(config_path)

            assert config == ConverterConfig()

    def test_env_var_interpolation(self) -> None:
        """Test environment variable interpolation in config."""
        config_content = """
header:
  application_name: ${SKPMML_TEST_APP:fallback}
  description: ${SKPMML_TEST_UNSET:none given}
"""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "test.yaml"
            config_path.write_text(config_content)

            os.environ["SKPMML_TEST_APP"] = "from-env"
            try:
                config = load_config(config_path)
                assert config.header.application_name == "from-env"
                assert config.header.description == "none given"
            finally:
                del os.environ["SKPMML_TEST_APP"]

    def test_base_config_inheritance(self) -> None:
        """Test that base.yaml is merged under the main config."""
        with tempfile.TemporaryDirectory() as tmpdir:
            base_path = Path(tmpdir) / "base.yaml"
            base_path.write_text(
                "encoder:\n  stats_strategy: parallel\n  max_workers: 8\n"
            )
            config_path = Path(tmpdir) / "project.yaml"
            config_path.write_text("encoder:\n  max_workers: 2\n")

            config = load_config(config_path)

            assert config.encoder.stats_strategy == StatsStrategy.PARALLEL
            assert config.encoder.max_workers == 2

    def test_unknown_section(self) -> None:
        """Test that misspelled sections are reported."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "test.yaml"
            config_path.write_text("encodr:\n  sort_stats: true\n")

            with pytest.raises(ValueError, match="Unknown config sections"):
                load_config(config_path)

    def test_unset_env_var_without_default(self) -> None:
        """Test that a required environment variable must be set."""
        os.environ.pop("SKPMML_TEST_MISSING", None)
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "test.yaml"
            config_path.write_text("header:\n  description: ${SKPMML_TEST_MISSING}\n")

            with pytest.raises(ValueError, match="SKPMML_TEST_MISSING"):
                load_config(config_path)

    def test_non_mapping_file(self) -> None:
        """Test that a top-level list is rejected."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "test.yaml"
            config_path.write_text("- encoder\n- header\n")

            with pytest.raises(ValueError, match="must contain a mapping"):
                load_config(config_path)

    def test_explicit_base_merges_nested_sections(self) -> None:
        """Test that an explicit base path is merged key by key."""
        with tempfile.TemporaryDirectory() as tmpdir:
            base_path = Path(tmpdir) / "shared" / "defaults.yaml"
            base_path.parent.mkdir()
            base_path.write_text(
                "header:\n  application_name: exporter\n  description: shared\n"
            )
            config_path = Path(tmpdir) / "project.yaml"
            config_path.write_text("header:\n  description: project\n")

            config = load_config(config_path, base_path=base_path)

            assert config.header.application_name == "exporter"
            assert config.header.description == "project"
