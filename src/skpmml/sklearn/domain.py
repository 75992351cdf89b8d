"""
Domain decorators.

Pass-through scikit-learn transformers placed at the head of a pipeline
to declare how their input columns are typed and, optionally, to collect
univariate statistics while fitting.
"""

from dataclasses import replace
from typing import TYPE_CHECKING, Any

import pandas as pd
from sklearn.base import BaseEstimator, TransformerMixin
from sklearn.utils.validation import check_is_fitted

from skpmml.pmml.enums import DataType, OpType
from skpmml.pmml.stats import UnivariateStats
from skpmml.sklearn.statistics import categorical_stats, continuous_stats
from skpmml.sklearn.transformer import Transformer
from skpmml.utils.logging import get_logger

if TYPE_CHECKING:
    from skpmml.converter.feature import Feature
    from skpmml.sklearn.encoder import SkLearnEncoder

log = get_logger(__name__)


class Domain(Transformer, TransformerMixin, BaseEstimator):
    """
    Base class for domain decorators.

    Args:
        with_statistics: Compute UnivariateStats for each column in fit().
        data_type: Declared value representation; None uses the
            subclass default.
    """

    default_data_type: DataType = DataType.DOUBLE

    def __init__(
        self,
        with_statistics: bool = True,
        data_type: DataType | str | None = None,
    ) -> None:
        self.with_statistics = with_statistics
        self.data_type = data_type

    def _compute_stats(self, name: str, series: pd.Series) -> UnivariateStats:
        raise NotImplementedError

    def fit(self, X: Any, y: Any = None) -> "Domain":
        frame = X if isinstance(X, pd.DataFrame) else pd.DataFrame(X)
        self.columns_ = [str(c) for c in frame.columns]

        if self.with_statistics:
            self.univariate_stats_ = [
                self._compute_stats(name, frame.iloc[:, i])
                for i, name in enumerate(self.columns_)
            ]
        else:
            self.univariate_stats_ = []

        log.debug(
            "Fitted domain",
            domain=type(self).__name__,
            columns=self.columns_,
            with_statistics=self.with_statistics,
        )
        return self

    def transform(self, X: Any) -> Any:
        check_is_fitted(self, "columns_")
        return X

    def get_data_type(self) -> DataType:
        if self.data_type is None:
            return self.default_data_type
        return DataType(self.data_type)


class ContinuousDomain(Domain):
    """Declares continuous input columns (double unless overridden)."""

    default_data_type = DataType.DOUBLE

    def _compute_stats(self, name: str, series: pd.Series) -> UnivariateStats:
        return continuous_stats(name, series)

    def get_op_type(self) -> OpType:
        return OpType.CONTINUOUS


class CategoricalDomain(Domain):
    """Declares categorical input columns (string unless overridden)."""

    default_data_type = DataType.STRING

    def _compute_stats(self, name: str, series: pd.Series) -> UnivariateStats:
        return categorical_stats(name, series)

    def get_op_type(self) -> OpType:
        return OpType.CATEGORICAL


def encode_domain(
    domain: Domain,
    features: list["Feature"],
    encoder: "SkLearnEncoder",
) -> list["Feature"]:
    """
    Encode a fitted domain decorator.

    Propagates the declared types onto the pass-through input fields and
    registers each column's statistics under the name of the feature at
    the same position.

    Args:
        domain: Fitted domain decorator.
        features: Features of the domain's input columns, in column order.
        encoder: Encoder of the current conversion.

    Returns:
        The input features; a domain does not transform values.

    Raises:
        ValueError: If the feature count differs from the fitted column count.
    """
    check_is_fitted(domain, "columns_")
    if len(features) != len(domain.columns_):
        raise ValueError(
            f"{type(domain).__name__} was fitted on {len(domain.columns_)} columns, "
            f"got {len(features)} features"
        )

    encoder.update_features(features, domain)

    for feature, univariate_stats in zip(features, domain.univariate_stats_):
        encoder.put_univariate_stats(replace(univariate_stats, field=feature.name))

    log.debug(
        "Encoded domain",
        domain=type(domain).__name__,
        n_features=len(features),
        n_stats=len(domain.univariate_stats_),
    )
    return features
