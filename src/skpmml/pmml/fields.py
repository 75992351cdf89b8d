"""
Field declarations and expressions.

DataFields describe raw input columns, DerivedFields are computed from
an expression tree over other fields.
"""

from dataclasses import dataclass, field

from skpmml.pmml.enums import DataType, OpType


@dataclass
class Value:
    """A declared value of a categorical or ordinal DataField."""

    value: str
    property: str = "valid"  # valid, invalid, missing


@dataclass
class Expression:
    """Base class for expression tree nodes."""


@dataclass
class FieldRef(Expression):
    """Reference to another field by name."""

    field: str


@dataclass
class Constant(Expression):
    """Literal value."""

    value: str | int | float | bool
    data_type: DataType | None = None


@dataclass
class Apply(Expression):
    """Function application, e.g. Apply("+", [FieldRef("a"), Constant(1)])."""

    function: str
    expressions: list[Expression] = field(default_factory=list)


@dataclass
class DataField:
    """Input field declared in the DataDictionary."""

    name: str
    op_type: OpType
    data_type: DataType
    values: list[Value] = field(default_factory=list)


@dataclass
class DerivedField:
    """Computed field declared in the TransformationDictionary."""

    name: str
    op_type: OpType
    data_type: DataType
    expression: Expression
