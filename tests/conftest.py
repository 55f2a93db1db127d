"""
Pytest configuration and shared fixtures.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def write_preset_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes a JSON preset file and returns its path."""

    def _write(content: Any, name: str = "presets.json") -> Path:
        path = tmp_path / name
        text = content if isinstance(content, str) else json.dumps(content)
        path.write_text(text, encoding="utf-8")
        return path

    return _write

