"""
Conversion framework shared by all converters.

Features and schemas describe what a converter consumes, the
DocumentEncoder owns the field registries, and create_model_chain
composes models into a chain.
"""

from skpmml.converter.document_encoder import DocumentEncoder
from skpmml.converter.feature import (
    CategoricalFeature,
    ContinuousFeature,
    Feature,
    WildcardFeature,
)
from skpmml.converter.model_chain import create_model_chain
from skpmml.converter.schema import Schema

__all__ = [
    "CategoricalFeature",
    "ContinuousFeature",
    "DocumentEncoder",
    "Feature",
    "Schema",
    "WildcardFeature",
    "create_model_chain",
]
