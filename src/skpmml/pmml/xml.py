"""
XML serialization of PMML documents.

Produces PMML 4.x markup with xml.etree.ElementTree. Element order
follows the PMML schema sequence for each element.
"""

import math
import numbers
from pathlib import Path
from xml.etree import ElementTree as ET

from skpmml.pmml.document import PMML, DataDictionary, Header, TransformationDictionary
from skpmml.pmml.fields import Apply, Constant, DataField, DerivedField, Expression, FieldRef
from skpmml.pmml.models import (
    MiningModel,
    MiningSchema,
    Model,
    RegressionModel,
    Segmentation,
)
from skpmml.pmml.stats import ModelStats, UnivariateStats
from skpmml.utils.logging import get_logger

log = get_logger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def namespace_uri(version: str) -> str:
    """PMML namespace URI for a schema version such as "4.4"."""
    return f"http://www.dmg.org/PMML-{version.replace('.', '_')}"


def _format_number(value: numbers.Real) -> str:
    """
    Format a number the way PMML consumers expect (no trailing .0 on integers).

    numpy scalars, as found in fitted estimator attributes, are converted to
    builtin numbers first so their repr carries no type wrapper.
    """
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, numbers.Integral):
        return str(int(value))
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _set_optional(element: ET.Element, name: str, value: object) -> None:
    """Set an attribute only if the value is present."""
    if value is None:
        return
    if isinstance(value, numbers.Real):
        element.set(name, _format_number(value))
    else:
        element.set(name, str(value))


def _header_element(header: Header) -> ET.Element:
    element = ET.Element("Header")
    _set_optional(element, "description", header.description)
    application = ET.SubElement(element, "Application", name=header.application_name)
    _set_optional(application, "version", header.application_version)
    return element


def _data_field_element(data_field: DataField) -> ET.Element:
    element = ET.Element(
        "DataField",
        name=data_field.name,
        optype=data_field.op_type.value,
        dataType=data_field.data_type.value,
    )
    for value in data_field.values:
        value_element = ET.SubElement(element, "Value", value=value.value)
        if value.property != "valid":
            value_element.set("property", value.property)
    return element


def _data_dictionary_element(data_dictionary: DataDictionary) -> ET.Element:
    element = ET.Element(
        "DataDictionary", numberOfFields=str(len(data_dictionary.data_fields))
    )
    element.extend(_data_field_element(f) for f in data_dictionary.data_fields)
    return element


def _expression_element(expression: Expression) -> ET.Element:
    if isinstance(expression, FieldRef):
        return ET.Element("FieldRef", field=expression.field)
    if isinstance(expression, Constant):
        element = ET.Element("Constant")
        if expression.data_type is not None:
            element.set("dataType", expression.data_type.value)
        if isinstance(expression.value, numbers.Real):
            element.text = _format_number(expression.value)
        else:
            element.text = str(expression.value)
        return element
    if isinstance(expression, Apply):
        element = ET.Element("Apply", function=expression.function)
        element.extend(_expression_element(e) for e in expression.expressions)
        return element
    raise TypeError(f"Unsupported expression type: {type(expression).__name__}")


def _derived_field_element(derived_field: DerivedField) -> ET.Element:
    element = ET.Element(
        "DerivedField",
        name=derived_field.name,
        optype=derived_field.op_type.value,
        dataType=derived_field.data_type.value,
    )
    element.append(_expression_element(derived_field.expression))
    return element


def _transformation_dictionary_element(
    transformation_dictionary: TransformationDictionary,
) -> ET.Element:
    element = ET.Element("TransformationDictionary")
    element.extend(
        _derived_field_element(f) for f in transformation_dictionary.derived_fields
    )
    return element


def _mining_schema_element(mining_schema: MiningSchema) -> ET.Element:
    element = ET.Element("MiningSchema")
    for mining_field in mining_schema.mining_fields:
        child = ET.SubElement(element, "MiningField", name=mining_field.name)
        if mining_field.usage_type.value != "active":
            child.set("usageType", mining_field.usage_type.value)
    return element


def _univariate_stats_element(univariate_stats: UnivariateStats) -> ET.Element:
    element = ET.Element("UnivariateStats", field=univariate_stats.field)

    counts = univariate_stats.counts
    if counts is not None:
        child = ET.SubElement(element, "Counts", totalFreq=_format_number(counts.total_freq))
        _set_optional(child, "missingFreq", counts.missing_freq)
        _set_optional(child, "invalidFreq", counts.invalid_freq)

    numeric_info = univariate_stats.numeric_info
    if numeric_info is not None:
        child = ET.SubElement(element, "NumericInfo")
        _set_optional(child, "minimum", numeric_info.minimum)
        _set_optional(child, "maximum", numeric_info.maximum)
        _set_optional(child, "mean", numeric_info.mean)
        _set_optional(child, "standardDeviation", numeric_info.standard_deviation)
        _set_optional(child, "median", numeric_info.median)
        _set_optional(child, "interQuartileRange", numeric_info.inter_quartile_range)

    discr_stats = univariate_stats.discr_stats
    if discr_stats is not None:
        child = ET.SubElement(element, "DiscrStats")
        values = ET.SubElement(child, "Array", n=str(len(discr_stats.values)), type="string")
        values.text = " ".join(_quote(v) for v in discr_stats.values)
        counts_array = ET.SubElement(child, "Array", n=str(len(discr_stats.counts)), type="int")
        counts_array.text = " ".join(str(c) for c in discr_stats.counts)

    return element


def _quote(value: str) -> str:
    """Quote a string array entry if it contains whitespace or quotes."""
    if value and not any(c.isspace() or c == '"' for c in value):
        return value
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _model_stats_element(model_stats: ModelStats) -> ET.Element:
    element = ET.Element("ModelStats")
    element.extend(_univariate_stats_element(s) for s in model_stats.univariate_stats)
    return element


def _regression_body(model: RegressionModel, element: ET.Element) -> None:
    if model.normalization_method != "none":
        element.set("normalizationMethod", model.normalization_method)
    for table in model.regression_tables:
        table_element = ET.SubElement(
            element, "RegressionTable", intercept=_format_number(table.intercept)
        )
        _set_optional(table_element, "targetCategory", table.target_category)
        for predictor in table.numeric_predictors:
            predictor_element = ET.SubElement(
                table_element,
                "NumericPredictor",
                name=predictor.name,
                coefficient=_format_number(predictor.coefficient),
            )
            if predictor.exponent != 1:
                predictor_element.set("exponent", _format_number(predictor.exponent))


def _segmentation_element(segmentation: Segmentation) -> ET.Element:
    element = ET.Element(
        "Segmentation", multipleModelMethod=segmentation.multiple_model_method.value
    )
    for segment in segmentation.segments:
        segment_element = ET.SubElement(element, "Segment")
        _set_optional(segment_element, "id", segment.id)
        ET.SubElement(segment_element, "True")
        segment_element.append(_model_element(segment.model))
    return element


def _model_element(model: Model) -> ET.Element:
    element = ET.Element(model.element_name, functionName=model.function_name.value)
    _set_optional(element, "modelName", model.model_name)

    element.append(_mining_schema_element(model.mining_schema))
    if model.model_stats is not None:
        element.append(_model_stats_element(model.model_stats))

    if isinstance(model, RegressionModel):
        _regression_body(model, element)
    elif isinstance(model, MiningModel):
        if model.segmentation is not None:
            element.append(_segmentation_element(model.segmentation))
    else:
        raise TypeError(f"Unsupported model type: {type(model).__name__}")

    return element


def to_element(pmml: PMML) -> ET.Element:
    """
    Build the XML element tree of a PMML document.

    Args:
        pmml: Document to serialize.

    Returns:
        Root <PMML> element with the namespace declared as default.
    """
    root = ET.Element("PMML", xmlns=namespace_uri(pmml.version), version=pmml.version)
    root.append(_header_element(pmml.header))
    root.append(_data_dictionary_element(pmml.data_dictionary))
    if pmml.transformation_dictionary is not None:
        root.append(_transformation_dictionary_element(pmml.transformation_dictionary))
    root.extend(_model_element(m) for m in pmml.models)
    return root


def to_xml_string(pmml: PMML) -> str:
    """Serialize a PMML document to an indented XML string."""
    root = to_element(pmml)
    ET.indent(root)
    return XML_DECLARATION + ET.tostring(root, encoding="unicode") + "\n"


def write_pmml(pmml: PMML, path: Path) -> Path:
    """
    Write a PMML document to disk.

    Args:
        pmml: Document to serialize.
        path: Output file path. Parent directories are created.

    Returns:
        The path written to.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_xml_string(pmml), encoding="utf-8")
    log.info("Wrote PMML document", path=str(path), n_models=len(pmml.models))
    return path
