"""Pytest configuration and fixtures."""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def nested_json():
    """Nested document covering every value kind."""
    return b'''{
  "key": {
    "a": "str",
    "b": 100,
    "c": null,
    "d": true,
    "e": false,
    "f": { "key": "str" },
    "g": {},
    "h": []
  }
}'''


@pytest.fixture
def sample_mixed_json():
    """Sample mixed structure for round-trip testing."""
    return {
        "metadata": {
            "version": "1.0",
            "created": "2024-01-01"
        },
        "data": [
            {"type": "A", "values": [1, 2, 3]},
            {"type": "B", "values": [4.5, -6, 7e-3]},
        ],
        "config": {
            "enabled": True,
            "disabled": False,
            "missing": None,
            "settings": {
                "timeout": 30,
                "label": "<a & b>\n\"quoted\"",
                "unicode": "héllo ☃",
            }
        },
        "empty_list": [],
        "empty_dict": {},
    }
