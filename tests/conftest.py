"""Shared fixtures."""

import json

import pytest

from panel_coder.models import Candidate


@pytest.fixture
def example_candidates():
    return [
        Candidate("P1", "500", "300"),
        Candidate("P1", "500", "300"),
        Candidate("P2", "600", "300"),
    ]


@pytest.fixture
def block_export(tmp_path):
    """Write a small block export and return its path."""
    data = {
        "drawing": str(tmp_path / "house.dwg"),
        "blocks": [
            {
                "handle": "1A",
                "blockName": "Panel",
                "isDynamic": True,
                "attributes": {"NAME": "W1-01"},
                "dynamicProperties": {"Length": 1200.4, "Width": "500"},
            },
            {
                "handle": "1B",
                "blockName": "PANEL",
                "isDynamic": True,
                "attributes": {"name": "W1-02"},
                "dynamicProperties": {"length": "1199.6", "width": "750"},
            },
            {
                "handle": "1C",
                "blockName": "Door",
                "attributes": {"NAME": "D1"},
            },
            {
                "handle": "1D",
                "blockName": "Panel",
                "isDynamic": True,
                "attributes": {"NAME": "F-01"},
                "dynamicProperties": {"Length": "900", "Width": "500"},
            },
        ],
    }
    path = tmp_path / "house_blocks.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
