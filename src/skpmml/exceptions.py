"""Exception hierarchy for PMML encoding."""


class SkPmmlError(Exception):
    """Base class for all skpmml errors."""


class UnknownFieldError(SkPmmlError, KeyError):
    """No data field or derived field is registered under the given name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Field {self.name!r} is not defined"


class DuplicateFieldError(SkPmmlError, ValueError):
    """A field with the given name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Field {self.name!r} is already defined"


class UnsupportedMetadataError(SkPmmlError, NotImplementedError):
    """A transformer cannot report its operational type or data type."""


class ConversionError(SkPmmlError, RuntimeError):
    """Internal consistency failure that aborts the current conversion."""
