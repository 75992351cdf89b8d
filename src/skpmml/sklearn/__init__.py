"""
scikit-learn facing layer.

SkLearnEncoder carries the state of one pipeline conversion; domain
decorators declare column typing and collect statistics while fitting.
"""

from skpmml.sklearn.domain import (
    CategoricalDomain,
    ContinuousDomain,
    Domain,
    encode_domain,
)
from skpmml.sklearn.encoder import SkLearnEncoder
from skpmml.sklearn.statistics import categorical_stats, continuous_stats
from skpmml.sklearn.transformer import Transformer

__all__ = [
    "CategoricalDomain",
    "ContinuousDomain",
    "Domain",
    "SkLearnEncoder",
    "Transformer",
    "categorical_stats",
    "continuous_stats",
    "encode_domain",
]
