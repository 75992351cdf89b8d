"""Enumerated PMML attribute values."""

from enum import Enum


class OpType(str, Enum):
    """Operational type of a field."""

    CATEGORICAL = "categorical"
    ORDINAL = "ordinal"
    CONTINUOUS = "continuous"


class DataType(str, Enum):
    """Value representation of a field."""

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    DATE = "date"
    TIME = "time"
    DATE_TIME = "dateTime"


class MiningFunction(str, Enum):
    """Kind of prediction a model makes."""

    REGRESSION = "regression"
    CLASSIFICATION = "classification"


class MultipleModelMethod(str, Enum):
    """How the segments of a MiningModel are combined."""

    MODEL_CHAIN = "modelChain"
    SELECT_FIRST = "selectFirst"
    SUM = "sum"
    AVERAGE = "average"
    MAJORITY_VOTE = "majorityVote"


class FieldUsageType(str, Enum):
    """Role of a MiningField within a model."""

    ACTIVE = "active"
    TARGET = "target"
    SUPPLEMENTARY = "supplementary"
