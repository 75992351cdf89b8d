"""Type metadata capability of pipeline transformers."""

from skpmml.exceptions import UnsupportedMetadataError
from skpmml.pmml.enums import DataType, OpType


class Transformer:
    """
    Mixin for transformers that may describe their input columns.

    Subclasses that know how their inputs are typed override both
    getters. The defaults raise UnsupportedMetadataError, which encoders
    treat as "leave the fields as they are".
    """

    def get_op_type(self) -> OpType:
        raise UnsupportedMetadataError(
            f"{type(self).__name__} does not declare an operational type"
        )

    def get_data_type(self) -> DataType:
        raise UnsupportedMetadataError(
            f"{type(self).__name__} does not declare a data type"
        )
