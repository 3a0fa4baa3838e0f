"""Tests for candidate sources."""

import json

import pytest

from panel_coder.config import Config
from panel_coder.models import Candidate
from panel_coder.sources import InMemorySource, JsonBlockSource


def test_json_source_candidates(block_export):
    source = JsonBlockSource(block_export)
    candidates = source.fetch_candidates()
    assert candidates == [
        Candidate("W1-01", "1200.4", "500", ref="1A"),
        Candidate("W1-02", "1199.6", "750", ref="1B"),
        Candidate("F-01", "900", "500", ref="1D"),
    ]
    assert source.seen_block_names == ["Panel", "Door"]


def test_json_source_other_block_name(block_export):
    source = JsonBlockSource(block_export, Config(target_block_name="door"))
    # Door has no dynamic properties
    assert source.fetch_candidates() == [Candidate("D1", "", "", ref="1C")]


def test_json_source_non_dynamic_block_has_no_dimensions(tmp_path):
    path = tmp_path / "blocks.json"
    path.write_text(json.dumps({"blocks": [{
        "blockName": "Panel",
        "isDynamic": False,
        "attributes": {"NAME": "P1"},
        "dynamicProperties": {"Length": "100", "Width": "200"},
    }]}), encoding="utf-8")
    source = JsonBlockSource(path)
    assert source.fetch_candidates() == [Candidate("P1", "", "", ref="#0")]
    assert source.drawing_path == path


def test_json_source_apply_rename_and_save(block_export, tmp_path):
    source = JsonBlockSource(block_export)
    source.apply_rename("1A", "W1-01-1-A")
    source.apply_rename("1B", "W1-02-1-B")
    source.apply_rename("1C", "ignored")
    out = source.save(tmp_path / "renamed.json")

    blocks = json.loads(out.read_text(encoding="utf-8"))["blocks"]
    assert blocks[0]["attributes"] == {"NAME": "W1-01-1-A"}
    assert blocks[1]["attributes"] == {"name": "W1-02-1-B"}
    assert blocks[2]["attributes"] == {"NAME": "ignored"}


def test_json_source_rename_without_name_attribute(tmp_path):
    path = tmp_path / "blocks.json"
    path.write_text(json.dumps({"blocks": [{"handle": "9", "blockName": "Panel"}]}), encoding="utf-8")
    source = JsonBlockSource(path)
    source.apply_rename("9", "X-1-A")
    assert "attributes" not in source.data["blocks"][0]


def test_json_source_unknown_ref(block_export):
    with pytest.raises(KeyError):
        JsonBlockSource(block_export).apply_rename("nope", "X")


def test_json_source_reads_bom(tmp_path):
    path = tmp_path / "bom.json"
    path.write_bytes(b"\xef\xbb\xbf" + json.dumps({"blocks": []}).encode("utf-8"))
    assert JsonBlockSource(path).fetch_candidates() == []


@pytest.mark.parametrize("content", [
    "{not json",
    json.dumps({"items": []}),
    json.dumps([1, 2]),
    json.dumps({"blocks": ["Panel"]}),
    json.dumps({"blocks": [{"handle": "1"}, {"handle": "1"}]}),
])
def test_json_source_invalid_export(tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError):
        JsonBlockSource(path)


def test_json_source_missing_file(tmp_path):
    with pytest.raises(ValueError, match="File not found"):
        JsonBlockSource(tmp_path / "missing.json")


def test_in_memory_source():
    source = InMemorySource([Candidate("P1", "1", "2")], seen_block_names=["Panel"])
    assert source.fetch_candidates() == [Candidate("P1", "1", "2")]
    source.apply_rename("P1", "P1-1-A")
    assert source.renames == {"P1": "P1-1-A"}
