"""
Encoder for scikit-learn pipelines.

Collects precursor transformation models and per-field statistics while
a pipeline is converted step by step, then splices them into the final
PMML document.
"""

from collections.abc import Mapping
from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType

from skpmml.config.settings import ConverterConfig, EncoderConfig, StatsStrategy
from skpmml.converter.document_encoder import DocumentEncoder
from skpmml.converter.feature import Feature, WildcardFeature
from skpmml.converter.model_chain import create_model_chain
from skpmml.converter.schema import Schema
from skpmml.exceptions import (
    ConversionError,
    DuplicateFieldError,
    UnknownFieldError,
    UnsupportedMetadataError,
)
from skpmml.pmml.document import PMML
from skpmml.pmml.enums import DataType, OpType
from skpmml.pmml.fields import DataField, DerivedField, Expression
from skpmml.pmml.models import Model
from skpmml.pmml.stats import ModelStats, UnivariateStats
from skpmml.sklearn.transformer import Transformer
from skpmml.utils.logging import get_logger

log = get_logger(__name__)


class SkLearnEncoder:
    """
    Bookkeeping for one pipeline conversion.

    Wraps a DocumentEncoder that owns the field registries. One instance
    serves one conversion; construction-phase calls must not run
    concurrently.
    """

    def __init__(
        self,
        document_encoder: DocumentEncoder | None = None,
        config: EncoderConfig | None = None,
    ) -> None:
        """
        Initialize the encoder.

        Args:
            document_encoder: Field registry and document builder. A fresh
                one is created if omitted.
            config: Statistics lookup settings.
        """
        self.document_encoder = document_encoder or DocumentEncoder()
        self.config = config or EncoderConfig()
        self._transformers: list[Model] = []
        self._univariate_stats: dict[str, UnivariateStats] = {}

    @classmethod
    def from_config(cls, config: ConverterConfig) -> "SkLearnEncoder":
        """Create an encoder with header and lookup settings from configuration."""
        return cls(DocumentEncoder(config.header), config.encoder)

    @property
    def transformers(self) -> tuple[Model, ...]:
        """Precursor models, in the order they were added."""
        return tuple(self._transformers)

    @property
    def univariate_stats(self) -> Mapping[str, UnivariateStats]:
        """Read-only view of registered statistics by field name."""
        return MappingProxyType(self._univariate_stats)

    def encode_pmml(self, model: Model) -> PMML:
        """
        Assemble the final document.

        If precursor models were added, the document's model is a model
        chain of all precursors followed by ``model``. Registered
        statistics of every field in the data dictionary are attached to
        the document model's ModelStats. Fields that already carry
        statistics there are skipped, so encoding the same model again does
        not duplicate them.

        Args:
            model: Final model of the pipeline.

        Returns:
            Finished PMML document.
        """
        if self._transformers:
            models = [*self._transformers, model]
            # The chain re-derives its mining schema from its members.
            model = create_model_chain(models, Schema.empty())

        pmml = self.document_encoder.encode_pmml(model)

        if model.model_stats is None:
            model.model_stats = ModelStats()
        model_stats = model.model_stats

        attached = {s.field for s in model_stats.univariate_stats}
        names = [
            data_field.name
            for data_field in pmml.data_dictionary.data_fields
            if data_field.name not in attached
        ]
        if self.config.sort_stats:
            names.sort()
        found = self._collect_univariate_stats(names)
        model_stats.add_univariate_stats(*found)

        log.info(
            "Encoded PMML document",
            model=model.element_name,
            n_transformers=len(self._transformers),
            n_data_fields=len(pmml.data_dictionary.data_fields),
            n_univariate_stats=len(found),
        )
        return pmml

    def _collect_univariate_stats(self, names: list[str]) -> list[UnivariateStats]:
        """Look up statistics per field name, preserving the order of names."""
        if self.config.stats_strategy == StatsStrategy.PARALLEL and len(names) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                results = list(executor.map(self.get_univariate_stats, names))
        else:
            results = [self.get_univariate_stats(name) for name in names]

        return [s for s in results if s is not None]

    def update_features(self, features: list[Feature], transformer: Transformer) -> None:
        """
        Propagate a transformer's declared typing onto pass-through fields.

        Only WildcardFeatures are affected. If the transformer does not
        declare both an op type and a data type, nothing changes.
        """
        try:
            op_type = transformer.get_op_type()
            data_type = transformer.get_data_type()
        except UnsupportedMetadataError:
            log.debug(
                "Transformer declares no type metadata",
                transformer=type(transformer).__name__,
            )
            return

        for feature in features:
            if isinstance(feature, WildcardFeature):
                self.update_type(feature.name, op_type, data_type)

    def update_type(self, name: str, op_type: OpType, data_type: DataType) -> None:
        """
        Overwrite the op type and data type of a DataField.

        Raises:
            UnknownFieldError: If no DataField has that name.
        """
        data_field = self.get_data_field(name)
        if data_field is None:
            raise UnknownFieldError(name)

        data_field.op_type = op_type
        data_field.data_type = data_type

    def get_data_field(self, name: str) -> DataField | None:
        return self.document_encoder.get_data_field(name)

    def get_derived_field(self, name: str) -> DerivedField | None:
        return self.document_encoder.get_derived_field(name)

    def create_data_field(
        self,
        name: str,
        op_type: OpType = OpType.CONTINUOUS,
        data_type: DataType = DataType.DOUBLE,
    ) -> DataField:
        return self.document_encoder.create_data_field(name, op_type, data_type)

    def create_derived_field(
        self,
        name: str,
        expression: Expression,
        op_type: OpType = OpType.CONTINUOUS,
        data_type: DataType = DataType.DOUBLE,
    ) -> DerivedField:
        return self.document_encoder.create_derived_field(
            name, op_type, data_type, expression
        )

    def rename_feature(self, feature: Feature, renamed_name: str) -> None:
        """
        Move a feature and its DerivedField to a new name.

        Args:
            feature: Feature referencing a DerivedField.
            renamed_name: New field name.

        Raises:
            UnknownFieldError: If the feature does not reference a DerivedField.
            DuplicateFieldError: If renamed_name is already taken.
            ConversionError: If the swap fails midway; prior state is restored.
        """
        name = feature.name

        derived_field = self.get_derived_field(name)
        if derived_field is None:
            raise UnknownFieldError(name)
        if renamed_name == name:
            return
        if self.document_encoder.is_defined(renamed_name):
            raise DuplicateFieldError(renamed_name)

        self.document_encoder.remove_derived_field(name)
        try:
            feature.rename(renamed_name)
            derived_field.name = renamed_name
            self.document_encoder.add_derived_field(derived_field)
        except Exception as e:
            feature.rename(name)
            derived_field.name = name
            self.document_encoder.add_derived_field(derived_field)
            raise ConversionError(f"Failed to rename field {name!r} to {renamed_name!r}") from e

        log.debug("Renamed derived field", name=name, renamed_name=renamed_name)

    def add_transformer(self, transformer: Model) -> None:
        self._transformers.append(transformer)

    def get_univariate_stats(self, name: str) -> UnivariateStats | None:
        return self._univariate_stats.get(name)

    def put_univariate_stats(
        self,
        univariate_stats: UnivariateStats,
        name: str | None = None,
    ) -> None:
        """
        Register statistics for a field, replacing earlier ones.

        Args:
            univariate_stats: Statistics record.
            name: Field name; defaults to the record's own field.
        """
        if name is None:
            name = univariate_stats.field
        self._univariate_stats[name] = univariate_stats
