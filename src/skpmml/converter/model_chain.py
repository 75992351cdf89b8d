"""Model chains: sequential composition of models as a MiningModel."""

from skpmml.converter.schema import Schema
from skpmml.pmml.enums import FieldUsageType, MultipleModelMethod
from skpmml.pmml.models import (
    MiningField,
    MiningModel,
    MiningSchema,
    Model,
    Segment,
    Segmentation,
)


def _schema_mining_schema(schema: Schema) -> MiningSchema:
    mining_fields: list[MiningField] = []
    if schema.label is not None:
        mining_fields.append(MiningField(schema.label.name, FieldUsageType.TARGET))
    mining_fields.extend(MiningField(f.name) for f in schema.features)
    return MiningSchema(mining_fields=mining_fields)


def _merged_mining_schema(models: list[Model]) -> MiningSchema:
    """Union of member mining fields, first occurrence of each name wins."""
    mining_fields: dict[str, MiningField] = {}
    for model in models:
        for mining_field in model.mining_schema.mining_fields:
            mining_fields.setdefault(
                mining_field.name, MiningField(mining_field.name, mining_field.usage_type)
            )
    return MiningSchema(mining_fields=list(mining_fields.values()))


def create_model_chain(models: list[Model], schema: Schema) -> MiningModel:
    """
    Chain models so that each one runs after the previous.

    Args:
        models: Members in execution order, final model last.
        schema: Schema of the chain. An empty schema makes the mining
            schema derive from the members' own mining schemas.

    Returns:
        MiningModel with a modelChain Segmentation, one segment per model.

    Raises:
        ValueError: If models is empty.
    """
    if not models:
        raise ValueError("A model chain needs at least one model")

    segments = [Segment(model=model, id=str(i)) for i, model in enumerate(models, start=1)]

    if schema.is_empty:
        mining_schema = _merged_mining_schema(models)
    else:
        mining_schema = _schema_mining_schema(schema)

    return MiningModel(
        function_name=models[-1].function_name,
        mining_schema=mining_schema,
        segmentation=Segmentation(
            multiple_model_method=MultipleModelMethod.MODEL_CHAIN,
            segments=segments,
        ),
    )
