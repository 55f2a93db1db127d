"""
Preset record and preset file types.

A preset bundles the tuning knobs for a use case. Every field except
id/name/description/category is optional: presets only override what they
care about. Keys use the same camelCase names as the JSON preset files and
the pipeline option mappings they are merged into.
"""

from collections.abc import Sequence
from typing import Any, Literal, TypedDict

from pydantic import BaseModel, ConfigDict, Field, PositiveFloat, PositiveInt

LogoType = Literal["wordmark", "symbol", "combination", "emblem", "lettermark"]
PromptVariant = Literal["object-forward", "composition-forward"]
PresetCategory = Literal["industry", "aesthetic", "custom"]

LOGO_TYPES: tuple[str, ...] = ("wordmark", "symbol", "combination", "emblem", "lettermark")
PRESET_CATEGORIES: tuple[str, ...] = ("industry", "aesthetic", "custom")

SUPPORTED_FILE_VERSION = 1


class _PresetIdentity(TypedDict):
    id: str
    name: str
    description: str
    category: PresetCategory


class GenerationPreset(_PresetIdentity, total=False):
    """A generation preset. Not enforced at runtime; user presets may carry extra keys."""

    # Compiler-layer overrides
    style: str
    logoType: LogoType
    composition: str
    extraNegatives: Sequence[str]
    variant: PromptVariant | Literal["both"]

    # Backend-layer overrides
    checkpoint: str  # ComfyUI checkpoint
    model: str  # hosted model id
    sampler: str
    scheduler: str
    cfg: float
    steps: int
    width: int
    height: int


class PresetFileSchema(BaseModel):
    """Schema for the envelope of a user preset file (.json).

    Only the envelope is validated; records inside ``presets`` are accepted as-is.
    """

    model_config = ConfigDict(extra="allow", strict=True)

    # compared against SUPPORTED_FILE_VERSION by the loader
    version: int | float
    presets: list[dict[str, Any]]


class BuiltinPresetSchema(BaseModel):
    """Schema for one record of the bundled presets.yaml catalog."""

    model_config = ConfigDict(extra="forbid", strict=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    category: Literal["industry"]

    style: str = Field(..., min_length=1)
    logoType: LogoType
    composition: str | None = None
    extraNegatives: list[str] | None = None
    variant: PromptVariant | Literal["both"] | None = None

    checkpoint: str | None = None
    model: str | None = None
    sampler: str | None = None
    scheduler: str | None = None
    # YAML gives ints for whole numbers; strict mode still accepts int for float
    cfg: PositiveFloat | None = None
    steps: PositiveInt | None = None
    width: PositiveInt | None = None
    height: PositiveInt | None = None
