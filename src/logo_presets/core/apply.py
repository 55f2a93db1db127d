"""
Preset application.

Merges preset values into compile options and generation options. Preset
values only fill gaps: a field the caller set to anything other than None
(including "", 0 or an empty list) always wins.

Option mappings are open: keys this module does not know about are copied
through unchanged, so callers can pass their full pipeline options.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from logo_presets.logging_config import get_logger, log_options

logger = get_logger(__name__)

# Fields filled from the preset when the caller leaves them unset
COMPILE_OPTION_FIELDS: tuple[str, ...] = ("style", "logoType", "variant", "checkpoint")
GEN_OPTION_FIELDS: tuple[str, ...] = (
    "checkpoint",
    "model",
    "sampler",
    "scheduler",
    "cfg",
    "steps",
    "width",
    "height",
)


def _fill_gaps(
    preset: Mapping[str, Any], user_options: Mapping[str, Any], fields: Iterable[str]
) -> dict[str, Any]:
    merged = dict(user_options)
    for name in fields:
        value = user_options.get(name)
        if value is None:
            value = preset.get(name)
        if value is not None:
            merged[name] = value
    return merged


def _merge_negatives(
    preset_negatives: Iterable[str] | None, user_negatives: Iterable[str] | None
) -> list[str]:
    """Concatenate preset then user negatives, dropping repeats (first occurrence wins)."""
    return list(dict.fromkeys([*(preset_negatives or ()), *(user_negatives or ())]))


def apply_preset_to_compile_options(
    preset: Mapping[str, Any], user_options: Mapping[str, Any]
) -> dict[str, Any]:
    """
    Apply a preset to compile options.

    Args:
        preset: Preset mapping (built-in or user-loaded).
        user_options: Caller's compile options; may hold extra pipeline keys.

    Returns:
        New dict with style/logoType/variant/checkpoint filled from the preset and
        extraNegatives merged. extraNegatives is always a new list, even when the
        preset stores a tuple (built-in presets do). The inputs are not modified.
    """
    merged = _fill_gaps(preset, user_options, COMPILE_OPTION_FIELDS)
    merged["extraNegatives"] = _merge_negatives(
        preset.get("extraNegatives"), user_options.get("extraNegatives")
    )
    if log_options():
        logger.info("Compile options after preset %r: %s", preset.get("id"), merged)
    return merged


def apply_preset_to_gen_options(
    preset: Mapping[str, Any], user_options: Mapping[str, Any]
) -> dict[str, Any]:
    """
    Apply a preset to generation options.

    Returns a new dict with backend fields (checkpoint, model, sampler, scheduler,
    cfg, steps, width, height) filled from the preset where the caller left them unset.
    """
    merged = _fill_gaps(preset, user_options, GEN_OPTION_FIELDS)
    if log_options():
        logger.info("Generation options after preset %r: %s", preset.get("id"), merged)
    return merged
