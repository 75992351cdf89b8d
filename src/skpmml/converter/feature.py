"""
Features: typed references to fields.

A feature is what a converter hands to the next pipeline step. It names
the field holding the value and knows how that value is typed.
"""

from skpmml.pmml.enums import DataType, OpType
from skpmml.pmml.fields import DataField, FieldRef


class Feature:
    """
    Base class for all features.

    The field name is read-only to callers. Encoders that move a field to
    a new name in their registries use rename() so the feature follows.
    """

    op_type: OpType = OpType.CONTINUOUS

    def __init__(self, name: str, data_type: DataType) -> None:
        self._name = name
        self._data_type = data_type

    @property
    def name(self) -> str:
        """Name of the referenced field."""
        return self._name

    @property
    def data_type(self) -> DataType:
        return self._data_type

    def rename(self, name: str) -> None:
        """
        Point this feature at a renamed field.

        Only for use by encoders that rename the referenced field in the
        same step; calling it alone leaves the feature dangling.
        """
        if not name:
            raise ValueError("Feature name must be a non-empty string")
        self._name = name

    def ref(self) -> FieldRef:
        """Expression referencing this feature's field."""
        return FieldRef(self._name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, data_type={self.data_type.value})"


class ContinuousFeature(Feature):
    """Numeric feature."""

    op_type = OpType.CONTINUOUS

    def __init__(self, name: str, data_type: DataType = DataType.DOUBLE) -> None:
        super().__init__(name, data_type)


class CategoricalFeature(Feature):
    """Feature taking one of a known list of values."""

    op_type = OpType.CATEGORICAL

    def __init__(
        self,
        name: str,
        values: list[str],
        data_type: DataType = DataType.STRING,
    ) -> None:
        super().__init__(name, data_type)
        self.values = list(values)


class WildcardFeature(Feature):
    """
    Feature that passes an input DataField through unchanged.

    Its typing is read from the DataField, so updating the field's
    op type or data type is visible through the feature.
    """

    def __init__(self, data_field: DataField) -> None:
        super().__init__(data_field.name, data_field.data_type)
        self.data_field = data_field

    @property
    def data_type(self) -> DataType:
        return self.data_field.data_type

    @property
    def op_type(self) -> OpType:  # type: ignore[override]
        return self.data_field.op_type
