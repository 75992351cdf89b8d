"""Pytest configuration and shared fixtures."""

import pandas as pd
import pytest

from skpmml.converter import DocumentEncoder, WildcardFeature
from skpmml.pmml import (
    Counts,
    DataType,
    MiningField,
    MiningFunction,
    MiningSchema,
    NumericInfo,
    NumericPredictor,
    OpType,
    RegressionModel,
    RegressionTable,
    UnivariateStats,
)
from skpmml.sklearn import SkLearnEncoder


@pytest.fixture
def encoder() -> SkLearnEncoder:
    """Fresh encoder with default (sequential) configuration."""
    return SkLearnEncoder(DocumentEncoder())


@pytest.fixture
def encoder_with_fields(encoder: SkLearnEncoder) -> SkLearnEncoder:
    """Encoder with three declared input fields."""
    encoder.create_data_field("age")
    encoder.create_data_field("income")
    encoder.create_data_field("region", OpType.CATEGORICAL, DataType.STRING)
    return encoder


@pytest.fixture
def wildcard_features(encoder_with_fields: SkLearnEncoder) -> list[WildcardFeature]:
    """Pass-through features for the age and income fields."""
    return [
        WildcardFeature(encoder_with_fields.get_data_field("age")),
        WildcardFeature(encoder_with_fields.get_data_field("income")),
    ]


def make_regression_model(*field_names: str, name: str | None = None) -> RegressionModel:
    """Build a small linear regression over the given fields."""
    return RegressionModel(
        function_name=MiningFunction.REGRESSION,
        model_name=name,
        mining_schema=MiningSchema(mining_fields=[MiningField(n) for n in field_names]),
        regression_tables=[
            RegressionTable(
                intercept=1.5,
                numeric_predictors=[NumericPredictor(n, 0.5) for n in field_names],
            )
        ],
    )


@pytest.fixture
def regression_model() -> RegressionModel:
    """Final model of a pipeline over age and income."""
    return make_regression_model("age", "income", name="final")


def make_continuous_stats(field: str, mean: float = 10.0) -> UnivariateStats:
    """Build a continuous UnivariateStats record."""
    return UnivariateStats(
        field=field,
        counts=Counts(total_freq=100, missing_freq=2, invalid_freq=0),
        numeric_info=NumericInfo(minimum=0.0, maximum=20.0, mean=mean),
    )


@pytest.fixture
def sample_frame() -> pd.DataFrame:
    """Training columns with a missing value in each column."""
    return pd.DataFrame(
        {
            "age": [23.0, 41.0, 35.0, None, 52.0],
            "income": [1200.0, 3400.0, None, 2100.0, 2800.0],
            "region": ["north", "south", "north", None, "east"],
        }
    )


@pytest.fixture
def model_factory():
    """Factory for small regression models."""
    return make_regression_model


@pytest.fixture
def stats_factory():
    """Factory for continuous UnivariateStats records."""
    return make_continuous_stats
