"""Basic package tests to verify installation."""

import structlog

from skpmml.config import LoggingConfig
from skpmml.utils.logging import configure_logging, get_logger, log_context


def test_package_imports() -> None:
    """Verify the main package can be imported."""
    import skpmml

    assert skpmml.__version__


def test_config_module_imports() -> None:
    """Verify config module structure is correct."""
    from skpmml.config import (
        ConverterConfig,
        EncoderConfig,
        HeaderConfig,
        LoggingConfig,
        load_config,
    )

    assert ConverterConfig is not None
    assert EncoderConfig is not None
    assert HeaderConfig is not None
    assert LoggingConfig is not None
    assert load_config is not None


def test_public_api_imports() -> None:
    """Verify the encoder-facing exports are available."""
    from skpmml.converter import DocumentEncoder, WildcardFeature, create_model_chain
    from skpmml.pmml import PMML, ModelStats, UnivariateStats
    from skpmml.sklearn import SkLearnEncoder, Transformer

    assert DocumentEncoder is not None
    assert WildcardFeature is not None
    assert create_model_chain is not None
    assert PMML is not None
    assert ModelStats is not None
    assert UnivariateStats is not None
    assert SkLearnEncoder is not None
    assert Transformer is not None


def test_logging_context(capsys) -> None:
    """Verify JSON logging includes bound context and the module name."""
    configure_logging(LoggingConfig(level="info", json_output=True))
    log = get_logger("skpmml.test")

    with log_context(pipeline="churn"):
        log.info("Encoding", n_fields=3)

    err = capsys.readouterr().err
    assert '"pipeline": "churn"' in err
    assert '"n_fields": 3' in err
    assert '"logger": "skpmml.test"' in err

    structlog.reset_defaults()


def test_logging_level_filters_events(capsys) -> None:
    """Verify events below the configured level are dropped."""
    configure_logging(LoggingConfig(level="warning", json_output=True))
    log = get_logger("skpmml.test")

    log.info("Hidden")
    log.warning("Shown")

    err = capsys.readouterr().err
    assert "Hidden" not in err
    assert '"event": "Shown"' in err

    structlog.reset_defaults()
