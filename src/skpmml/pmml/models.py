"""
Model elements.

Only the model types the encoder produces or chains are modelled:
RegressionModel as a plain leaf and MiningModel as the segmented
container used for model chains.
"""

from dataclasses import dataclass, field

from skpmml.pmml.enums import FieldUsageType, MiningFunction, MultipleModelMethod
from skpmml.pmml.stats import ModelStats


@dataclass
class MiningField:
    """Usage of a field by a model."""

    name: str
    usage_type: FieldUsageType = FieldUsageType.ACTIVE


@dataclass
class MiningSchema:
    """Fields a model consumes or predicts."""

    mining_fields: list[MiningField] = field(default_factory=list)


@dataclass
class Model:
    """Common attributes of all PMML models."""

    function_name: MiningFunction = MiningFunction.REGRESSION
    mining_schema: MiningSchema = field(default_factory=MiningSchema)
    model_name: str | None = None
    model_stats: ModelStats | None = None

    @property
    def element_name(self) -> str:
        """PMML element name for this model type."""
        return type(self).__name__


@dataclass
class NumericPredictor:
    """Linear term of a RegressionTable."""

    name: str
    coefficient: float
    exponent: int = 1


@dataclass
class RegressionTable:
    """Intercept plus linear terms."""

    intercept: float = 0.0
    numeric_predictors: list[NumericPredictor] = field(default_factory=list)
    target_category: str | None = None


@dataclass
class RegressionModel(Model):
    """Linear regression or (multinomial) logistic regression."""

    regression_tables: list[RegressionTable] = field(default_factory=list)
    normalization_method: str = "none"


@dataclass
class Segment:
    """One member of a Segmentation, guarded by an always-true predicate."""

    model: Model
    id: str | None = None


@dataclass
class Segmentation:
    """Ordered members of a MiningModel and the rule combining them."""

    multiple_model_method: MultipleModelMethod
    segments: list[Segment] = field(default_factory=list)


@dataclass
class MiningModel(Model):
    """Composite model whose body is a Segmentation."""

    segmentation: Segmentation | None = None
