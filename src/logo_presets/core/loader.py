"""
Preset loader.

Look up presets from the built-in catalog and, optionally, a user-defined JSON
preset file. User files are re-read on every call; cache the result yourself if
you need to.
"""

import json
import os
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from logo_presets.core.builtin import BUILT_IN_PRESETS
from logo_presets.core.config import Config
from logo_presets.core.types import SUPPORTED_FILE_VERSION, PresetFileSchema
from logo_presets.logging_config import get_logger
from logo_presets.utils.exceptions import (
    ConfigurationError,
    PresetFormatError,
    PresetReadError,
)

logger = get_logger(__name__)

PathLike = str | os.PathLike[str]


def _resolve_user_path(
    user_preset_path: PathLike | None, config: Config | None
) -> PathLike | None:
    if user_preset_path is not None:
        return user_preset_path
    if config is not None and config.user_preset_path:
        config.validate()
        return config.user_preset_path
    return None


def list_presets(
    user_preset_path: PathLike | None = None, *, config: Config | None = None
) -> list[Mapping[str, Any]]:
    """
    List all available presets.

    Built-in presets come first, followed by user presets in file order. Ids are
    not deduplicated across the two sources.

    Args:
        user_preset_path: Optional path to a user preset file.
        config: Optional Config; its user_preset_path is used (after validation)
            when no path is given.

    Returns:
        List of preset mappings.

    Raises:
        PresetReadError: If the user preset file cannot be read or parsed.
        PresetFormatError: If the user preset file envelope is invalid.
        ConfigurationError: If the config names a user preset file that does not exist.
    """
    presets: list[Mapping[str, Any]] = list(BUILT_IN_PRESETS)
    path = _resolve_user_path(user_preset_path, config)
    if path:
        presets.extend(load_user_presets(path))
    return presets


def load_preset(
    preset_id: str,
    user_preset_path: PathLike | None = None,
    *,
    config: Config | None = None,
) -> Mapping[str, Any] | None:
    """
    Load a single preset by id (exact, case-sensitive match).

    Returns:
        The first matching preset (built-ins before user presets), or None if not found.
    """
    for preset in list_presets(user_preset_path, config=config):
        if preset.get("id") == preset_id:
            logger.debug("Resolved preset %r", preset_id)
            return preset
    logger.info("Preset not found: %r", preset_id)
    return None


def load_user_presets(file_path: PathLike) -> list[dict[str, Any]]:
    """
    Load user-defined presets from a JSON preset file (version 1).

    Only the envelope is validated. Records whose ``category`` is missing or
    null get ``"custom"``; every other field passes through unchanged.

    Args:
        file_path: Path to the preset file.

    Returns:
        List of preset dicts in file order.

    Raises:
        PresetReadError: If the file cannot be read or is not valid JSON.
        PresetFormatError: If ``version`` is not 1 or ``presets`` is not an array of objects.
    """
    path = os.fspath(file_path)
    try:
        with open(path, encoding="utf-8") as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise PresetReadError(
            f"Cannot read preset file {path}: {e}", path=path, original_error=e
        ) from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise PresetReadError(
            f"Preset file {path} is not valid JSON: {e}", path=path, original_error=e
        ) from e

    logger.debug("Validating preset file envelope: %s", path)
    version = data.get("version") if isinstance(data, dict) else None
    if isinstance(version, bool) or version != SUPPORTED_FILE_VERSION:
        raise PresetFormatError(
            f"Unsupported preset file version: {version}. "
            f"Expected version {SUPPORTED_FILE_VERSION}.",
            field="version",
            path=path,
        )

    try:
        envelope = PresetFileSchema.model_validate(data)
    except ValidationError as e:
        loc = e.errors()[0]["loc"]
        if len(loc) >= 2 and loc[0] == "presets":
            message = f"Invalid preset file: preset entry {loc[1]} must be an object."
        else:
            message = 'Invalid preset file: "presets" must be an array.'
        raise PresetFormatError(message, field="presets", path=path) from e

    presets = []
    for record in envelope.presets:
        if record.get("category") is None:
            record = {**record, "category": "custom"}
        presets.append(record)
    logger.info("Loaded %d user presets from %s", len(presets), path)
    return presets
