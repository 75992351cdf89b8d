"""Top-level PMML document."""

from dataclasses import dataclass, field

from skpmml.pmml.fields import DataField, DerivedField
from skpmml.pmml.models import Model


@dataclass
class Header:
    """Producer information."""

    application_name: str
    application_version: str | None = None
    description: str | None = None


@dataclass
class DataDictionary:
    """Declared input fields, in declaration order."""

    data_fields: list[DataField] = field(default_factory=list)


@dataclass
class TransformationDictionary:
    """Document-level derived fields."""

    derived_fields: list[DerivedField] = field(default_factory=list)


@dataclass
class PMML:
    """A complete PMML document."""

    header: Header
    data_dictionary: DataDictionary
    transformation_dictionary: TransformationDictionary | None = None
    models: list[Model] = field(default_factory=list)
    version: str = "4.4"

    @property
    def model(self) -> Model:
        """The single top-level model."""
        if len(self.models) != 1:
            raise ValueError(f"Expected exactly one model, got {len(self.models)}")
        return self.models[0]
