"""
Generic document encoder.

Keeps the field registries shared by all converters of one conversion
and turns a finished model into a PMML document.
"""

from collections.abc import Mapping
from types import MappingProxyType

from skpmml.config.settings import HeaderConfig
from skpmml.exceptions import DuplicateFieldError, UnknownFieldError
from skpmml.pmml.document import PMML, DataDictionary, Header, TransformationDictionary
from skpmml.pmml.enums import DataType, OpType
from skpmml.pmml.fields import DataField, DerivedField, Expression, Value
from skpmml.pmml.models import Model
from skpmml.utils.logging import get_logger

log = get_logger(__name__)


def _package_version() -> str | None:
    from skpmml import __version__

    return __version__


class DocumentEncoder:
    """
    Registry of DataFields and DerivedFields, keyed by name.

    Names are unique across both registries. Iteration order is
    registration order, which is also the order fields appear in the
    encoded document.
    """

    def __init__(self, header: HeaderConfig | None = None) -> None:
        self.header = header or HeaderConfig()
        self._data_fields: dict[str, DataField] = {}
        self._derived_fields: dict[str, DerivedField] = {}

    @property
    def data_fields(self) -> Mapping[str, DataField]:
        """Read-only view of registered DataFields."""
        return MappingProxyType(self._data_fields)

    @property
    def derived_fields(self) -> Mapping[str, DerivedField]:
        """Read-only view of registered DerivedFields."""
        return MappingProxyType(self._derived_fields)

    def is_defined(self, name: str) -> bool:
        return name in self._data_fields or name in self._derived_fields

    def _check_name(self, name: str) -> None:
        if not name:
            raise ValueError("Field name must be a non-empty string")
        if self.is_defined(name):
            raise DuplicateFieldError(name)

    def add_data_field(self, data_field: DataField) -> DataField:
        self._check_name(data_field.name)
        self._data_fields[data_field.name] = data_field
        return data_field

    def create_data_field(
        self,
        name: str,
        op_type: OpType,
        data_type: DataType,
        values: list[str] | None = None,
    ) -> DataField:
        """
        Declare an input field.

        Args:
            name: Field name, unique within this encoder.
            op_type: Operational type.
            data_type: Value representation.
            values: Optional valid values for categorical/ordinal fields.

        Returns:
            The registered DataField.

        Raises:
            DuplicateFieldError: If the name is already taken.
        """
        data_field = DataField(
            name=name,
            op_type=op_type,
            data_type=data_type,
            values=[Value(v) for v in values or []],
        )
        return self.add_data_field(data_field)

    def get_data_field(self, name: str) -> DataField | None:
        return self._data_fields.get(name)

    def add_derived_field(self, derived_field: DerivedField) -> DerivedField:
        self._check_name(derived_field.name)
        self._derived_fields[derived_field.name] = derived_field
        return derived_field

    def create_derived_field(
        self,
        name: str,
        op_type: OpType,
        data_type: DataType,
        expression: Expression,
    ) -> DerivedField:
        """Declare a computed field. Raises DuplicateFieldError on name clash."""
        derived_field = DerivedField(
            name=name, op_type=op_type, data_type=data_type, expression=expression
        )
        return self.add_derived_field(derived_field)

    def get_derived_field(self, name: str) -> DerivedField | None:
        return self._derived_fields.get(name)

    def remove_derived_field(self, name: str) -> DerivedField:
        """
        Unregister a DerivedField.

        Raises:
            UnknownFieldError: If no DerivedField has that name.
        """
        try:
            return self._derived_fields.pop(name)
        except KeyError:
            raise UnknownFieldError(name) from None

    def get_field(self, name: str) -> DataField | DerivedField:
        """
        Look up a field in either registry.

        Raises:
            UnknownFieldError: If the name is not registered.
        """
        found = self._data_fields.get(name) or self._derived_fields.get(name)
        if found is None:
            raise UnknownFieldError(name)
        return found

    def encode_header(self) -> Header:
        return Header(
            application_name=self.header.application_name,
            application_version=self.header.application_version or _package_version(),
            description=self.header.description,
        )

    def encode_pmml(self, model: Model) -> PMML:
        """
        Assemble a PMML document around a model.

        Args:
            model: Top-level model of the document.

        Returns:
            Document holding all registered fields and the model.
        """
        transformation_dictionary = None
        if self._derived_fields:
            transformation_dictionary = TransformationDictionary(
                derived_fields=list(self._derived_fields.values())
            )

        pmml = PMML(
            header=self.encode_header(),
            data_dictionary=DataDictionary(data_fields=list(self._data_fields.values())),
            transformation_dictionary=transformation_dictionary,
            models=[model],
            version=self.header.pmml_version,
        )

        log.debug(
            "Assembled PMML document",
            model=model.element_name,
            n_data_fields=len(self._data_fields),
            n_derived_fields=len(self._derived_fields),
        )
        return pmml
