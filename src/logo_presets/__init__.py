"""
logo_presets - Curated generation presets for logo image pipelines

Skip the tuning, start generating. A preset bundles style, prompt and backend
knobs for a use case; merge it into your own options and your explicit values
always win.

Library usage:
- BUILT_IN_PRESETS is the fixed catalog; list_presets() / load_preset() also accept
  a path to a user preset JSON file (version 1), or a Config carrying one
  (Config.from_env() reads LOGO_PRESETS_USER_FILE).
- load_preset() returns None for an unknown id; file problems raise
  PresetReadError (an OSError) or PresetFormatError.
- apply_preset_to_compile_options() / apply_preset_to_gen_options() return new dicts
  and pass unknown option keys through unchanged.
- Logging: control verbosity with set_verbosity(0|1|2).
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("logo-presets")
except PackageNotFoundError:
    # Package is not installed (e.g., running from source in development)
    __version__ = "0.0.0.dev"

from logo_presets.core.apply import (
    COMPILE_OPTION_FIELDS,
    GEN_OPTION_FIELDS,
    apply_preset_to_compile_options,
    apply_preset_to_gen_options,
)
from logo_presets.core.builtin import BUILT_IN_PRESETS
from logo_presets.core.config import Config
from logo_presets.core.loader import list_presets, load_preset, load_user_presets
from logo_presets.core.types import (
    LOGO_TYPES,
    PRESET_CATEGORIES,
    GenerationPreset,
    LogoType,
    PresetCategory,
    PresetFileSchema,
    PromptVariant,
)
from logo_presets.logging_config import set_verbosity
from logo_presets.utils.exceptions import (
    ConfigurationError,
    LogoPresetsError,
    PresetFormatError,
    PresetReadError,
)

__all__ = [
    "BUILT_IN_PRESETS",
    "COMPILE_OPTION_FIELDS",
    "Config",
    "ConfigurationError",
    "GEN_OPTION_FIELDS",
    "GenerationPreset",
    "LOGO_TYPES",
    "LogoPresetsError",
    "LogoType",
    "PRESET_CATEGORIES",
    "PresetCategory",
    "PresetFileSchema",
    "PresetFormatError",
    "PresetReadError",
    "PromptVariant",
    "apply_preset_to_compile_options",
    "apply_preset_to_gen_options",
    "list_presets",
    "load_preset",
    "load_user_presets",
    "set_verbosity",
]
