"""
Built-in preset catalog.

Presets are defined in src/logo_presets/presets.yaml and loaded once, when this
module is first imported. Each record is validated against BuiltinPresetSchema
and frozen into a read-only mapping; BUILT_IN_PRESETS never changes afterwards.
"""

import importlib.resources
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import ValidationError

from logo_presets.core.types import BuiltinPresetSchema
from logo_presets.logging_config import get_logger
from logo_presets.utils.exceptions import ConfigurationError

logger = get_logger(__name__)

CATALOG_RESOURCE = "presets.yaml"


def _freeze(record: BuiltinPresetSchema) -> Mapping[str, Any]:
    data = record.model_dump(exclude_none=True)
    if "extraNegatives" in data:
        data["extraNegatives"] = tuple(data["extraNegatives"])
    return MappingProxyType(data)


def _load_builtin_presets() -> tuple[Mapping[str, Any], ...]:
    """Load, validate and freeze the bundled catalog.

    Returns:
        Tuple of read-only preset mappings in catalog order.

    Raises:
        ConfigurationError: If presets.yaml is missing, malformed, or fails validation.
    """
    try:
        with (
            importlib.resources.files("logo_presets")
            .joinpath(CATALOG_RESOURCE)
            .open(encoding="utf-8") as f
        ):
            raw = f.read()
    except FileNotFoundError as e:
        raise ConfigurationError(
            "presets.yaml not found. This file is required and should be bundled with the package."
        ) from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse presets.yaml: {e}. Check YAML syntax and formatting."
        ) from e

    if not isinstance(data, list) or not data:
        raise ConfigurationError("presets.yaml must contain a non-empty list of presets.")

    records: list[Mapping[str, Any]] = []
    seen: set[str] = set()
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise ConfigurationError(f"presets.yaml entry {index} is not a mapping.")
        try:
            record = BuiltinPresetSchema(**item)
        except ValidationError as e:
            errors = "\n".join(
                f"  - {'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ConfigurationError(
                f"Invalid built-in preset at index {index} ({item.get('id', '?')}):\n{errors}"
            ) from e
        if record.id in seen:
            raise ConfigurationError(f"Duplicate built-in preset id: {record.id!r}")
        seen.add(record.id)
        records.append(_freeze(record))

    logger.debug("Loaded %d built-in presets", len(records))
    return tuple(records)


BUILT_IN_PRESETS: tuple[Mapping[str, Any], ...] = _load_builtin_presets()
