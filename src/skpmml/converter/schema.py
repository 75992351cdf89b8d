"""Model schema: the label and feature list a model is built against."""

from dataclasses import dataclass, field

from skpmml.converter.feature import Feature


@dataclass(frozen=True)
class Schema:
    """Label (None for unsupervised or placeholder schemas) and input features."""

    label: Feature | None = None
    features: list[Feature] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "Schema":
        """Placeholder schema with neither label nor features."""
        return cls(label=None, features=[])

    @property
    def is_empty(self) -> bool:
        return self.label is None and not self.features
