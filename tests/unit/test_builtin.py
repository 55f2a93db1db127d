"""Unit tests for the built-in preset catalog."""

from unittest.mock import mock_open, patch

import pytest
import yaml

from logo_presets.core.builtin import BUILT_IN_PRESETS, _load_builtin_presets
from logo_presets.core.types import LOGO_TYPES
from logo_presets.utils.exceptions import ConfigurationError

EXPECTED_IDS = (
    "tech-startup",
    "luxury-brand",
    "gaming",
    "healthcare",
    "fintech",
    "creative-agency",
    "saas",
    "e-commerce",
)


def _by_id(preset_id):
    return next(p for p in BUILT_IN_PRESETS if p["id"] == preset_id)


@pytest.mark.unit
class TestBuiltInPresets:
    def test_has_exactly_eight_presets(self):
        assert len(BUILT_IN_PRESETS) == 8

    def test_ids_are_unique(self):
        ids = [p["id"] for p in BUILT_IN_PRESETS]
        assert len(set(ids)) == len(ids)

    def test_includes_expected_ids_in_order(self):
        assert tuple(p["id"] for p in BUILT_IN_PRESETS) == EXPECTED_IDS

    def test_required_fields_on_every_preset(self):
        for preset in BUILT_IN_PRESETS:
            assert preset["id"]
            assert preset["name"]
            assert preset["description"]
            assert preset["category"] == "industry"
            assert preset["style"]
            assert preset["logoType"] in LOGO_TYPES

    def test_positive_cfg_and_steps(self):
        for preset in BUILT_IN_PRESETS:
            if "cfg" in preset:
                assert preset["cfg"] > 0
            if "steps" in preset:
                assert preset["steps"] > 0

    def test_gaming_uses_few_steps(self):
        gaming = _by_id("gaming")
        assert gaming["steps"] <= 4
        assert gaming["cfg"] <= 1.0

    def test_luxury_brand_uses_high_cfg(self):
        assert _by_id("luxury-brand")["cfg"] >= 7.0

    def test_absent_fields_are_omitted(self):
        # saas pins no checkpoint, so the key must not be present as None
        assert "checkpoint" not in _by_id("saas")

    def test_presets_are_read_only(self):
        preset = BUILT_IN_PRESETS[0]
        with pytest.raises(TypeError):
            preset["style"] = "changed"  # type: ignore[index]
        assert isinstance(preset["extraNegatives"], tuple)

    def test_catalog_is_a_tuple(self):
        assert isinstance(BUILT_IN_PRESETS, tuple)


@pytest.mark.unit
class TestCatalogValidation:
    """Loading presets.yaml with a patched resource."""

    @staticmethod
    def _load_with(raw):
        with patch("importlib.resources.files") as mock_files:
            mock_file = mock_open(read_data=raw)
            mock_files.return_value.joinpath.return_value.open.return_value = mock_file()
            return _load_builtin_presets()

    def _valid_record(self, **overrides):
        record = {
            "id": "x",
            "name": "X",
            "description": "x preset",
            "category": "industry",
            "style": "flat",
            "logoType": "symbol",
        }
        record.update(overrides)
        return record

    def test_reloads_bundled_catalog(self):
        assert [dict(p) for p in _load_builtin_presets()] == [dict(p) for p in BUILT_IN_PRESETS]

    def test_minimal_record_loads(self):
        presets = self._load_with(yaml.dump([self._valid_record()]))
        assert len(presets) == 1
        assert dict(presets[0])["style"] == "flat"

    def test_malformed_yaml_raises(self):
        with pytest.raises(ConfigurationError) as exc_info:
            self._load_with("- id: [unclosed\n")
        assert "Failed to parse presets.yaml" in str(exc_info.value)

    def test_empty_yaml_raises(self):
        with pytest.raises(ConfigurationError):
            self._load_with("")

    def test_missing_file_raises(self):
        with patch("importlib.resources.files") as mock_files:
            mock_files.return_value.joinpath.return_value.open.side_effect = FileNotFoundError
            with pytest.raises(ConfigurationError) as exc_info:
                _load_builtin_presets()
        assert "presets.yaml not found" in str(exc_info.value)

    def test_invalid_logo_type_raises(self):
        raw = yaml.dump([self._valid_record(logoType="mascot")])
        with pytest.raises(ConfigurationError) as exc_info:
            self._load_with(raw)
        assert "logoType" in str(exc_info.value)

    def test_non_positive_cfg_raises(self):
        with pytest.raises(ConfigurationError):
            self._load_with(yaml.dump([self._valid_record(cfg=0)]))

    def test_empty_style_raises(self):
        with pytest.raises(ConfigurationError):
            self._load_with(yaml.dump([self._valid_record(style="")]))

    def test_non_industry_category_raises(self):
        with pytest.raises(ConfigurationError):
            self._load_with(yaml.dump([self._valid_record(category="custom")]))

    def test_duplicate_ids_raise(self):
        raw = yaml.dump([self._valid_record(), self._valid_record()])
        with pytest.raises(ConfigurationError) as exc_info:
            self._load_with(raw)
        assert "Duplicate" in str(exc_info.value)
