"""
Configuration loading utilities.

YAML files may reference environment variables as ``${VAR}`` or
``${VAR:default}``, and inherit from a ``base.yaml`` in the same directory.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from skpmml.config.settings import ConverterConfig

ENV_VAR_PATTERN = re.compile(r"\$\{(?P<name>[^}:]+)(?::(?P<default>[^}]*))?\}")


def _substitute(match: re.Match[str]) -> str:
    name, default = match.group("name"), match.group("default")
    value = os.environ.get(name, default)
    if value is None:
        msg = f"Environment variable {name!r} is not set and has no default"
        raise ValueError(msg)
    return value


def _resolve(node: Any) -> Any:
    """Substitute environment variables in every string of a YAML tree."""
    if isinstance(node, str):
        return ENV_VAR_PATTERN.sub(_substitute, node)
    if isinstance(node, dict):
        return {key: _resolve(value) for key, value in node.items()}
    if isinstance(node, list):
        return [_resolve(item) for item in node]
    return node


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Overlay override on base; nested sections merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = _merge(current, value)
        merged[key] = value
    return merged


def load_yaml(path: Path) -> dict[str, Any]:
    """
    Read a YAML mapping and resolve environment variables.

    Raises:
        ValueError: If the document is not a mapping, or references an
            unset variable without a default.
    """
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"{path} must contain a mapping, got {type(data).__name__}"
        raise ValueError(msg)
    return _resolve(data)


def load_config(
    config_path: Path,
    base_path: Path | None = None,
) -> ConverterConfig:
    """
    Load converter configuration from YAML file(s).

    Every section is optional; missing keys fall back to model defaults.

    Args:
        config_path: Path to the main configuration file.
        base_path: Optional path to base configuration for inheritance.
            Defaults to a base.yaml next to config_path, if present.

    Returns:
        Fully validated ConverterConfig instance.
    """
    if base_path is None:
        candidate = config_path.parent / "base.yaml"
        if candidate.exists() and candidate != config_path:
            base_path = candidate

    base_data = load_yaml(base_path) if base_path is not None else {}
    merged = _merge(base_data, load_yaml(config_path))

    unknown = set(merged) - set(ConverterConfig.model_fields)
    if unknown:
        msg = f"Unknown config sections: {sorted(unknown)}"
        raise ValueError(msg)

    return ConverterConfig.model_validate(merged)
