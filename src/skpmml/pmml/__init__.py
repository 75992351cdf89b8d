"""
PMML document object model.

Mutable dataclasses mirroring the subset of PMML 4.4 elements that the
encoder assembles, plus an XML writer.
"""

from skpmml.pmml.document import (
    PMML,
    DataDictionary,
    Header,
    TransformationDictionary,
)
from skpmml.pmml.enums import (
    DataType,
    FieldUsageType,
    MiningFunction,
    MultipleModelMethod,
    OpType,
)
from skpmml.pmml.fields import (
    Apply,
    Constant,
    DataField,
    DerivedField,
    Expression,
    FieldRef,
    Value,
)
from skpmml.pmml.models import (
    MiningField,
    MiningModel,
    MiningSchema,
    Model,
    NumericPredictor,
    RegressionModel,
    RegressionTable,
    Segment,
    Segmentation,
)
from skpmml.pmml.stats import (
    Counts,
    DiscrStats,
    ModelStats,
    NumericInfo,
    UnivariateStats,
)
from skpmml.pmml.xml import to_element, to_xml_string, write_pmml

__all__ = [
    # Document
    "PMML",
    "DataDictionary",
    "Header",
    "TransformationDictionary",
    # Enums
    "DataType",
    "FieldUsageType",
    "MiningFunction",
    "MultipleModelMethod",
    "OpType",
    # Fields and expressions
    "Apply",
    "Constant",
    "DataField",
    "DerivedField",
    "Expression",
    "FieldRef",
    "Value",
    # Models
    "MiningField",
    "MiningModel",
    "MiningSchema",
    "Model",
    "NumericPredictor",
    "RegressionModel",
    "RegressionTable",
    "Segment",
    "Segmentation",
    # Statistics
    "Counts",
    "DiscrStats",
    "ModelStats",
    "NumericInfo",
    "UnivariateStats",
    # Serialization
    "to_element",
    "to_xml_string",
    "write_pmml",
]
