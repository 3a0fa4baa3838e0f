"""Candidate source backed by a JSON export of a drawing's block references.

The export is produced by a small add-in running inside the CAD host. It
lists every block reference in the user's selection:

    {
      "drawing": "C:/jobs/house.dwg",
      "blocks": [
        {
          "handle": "2F1",
          "blockName": "Panel",
          "isDynamic": true,
          "attributes": {"NAME": "P1-03"},
          "dynamicProperties": {"Length": 1200.0, "Width": "500"}
        }
      ]
    }

Block names, attribute tags and property names are matched
case-insensitively. Renames are applied to the loaded data and written
back with save(), which the add-in then replays into the drawing.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..config import Config, default_config
from ..models.candidate import Candidate
from ..utils.io import load_json_robust

logger = logging.getLogger(__name__)


def _as_text(value: Any) -> str:
    """Property value as text; None becomes ""."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _lookup_ci(mapping: Dict[str, Any], key: str) -> Optional[str]:
    """Return the actual key in mapping matching key case-insensitively."""
    wanted = key.casefold()
    for actual in mapping:
        if actual.casefold() == wanted:
            return actual
    return None


class JsonBlockSource:
    """
    Load block references from a JSON export and expose them as candidates.

    Attributes:
        path: Export file path
        data: Parsed export (mutated by apply_rename)
        seen_block_names: Every distinct block name encountered
            (case-insensitive, first spelling kept), filled by fetch_candidates

    Raises:
        ValueError: If the file cannot be read or has no "blocks" list
    """

    def __init__(self, path: Union[str, Path], config: Optional[Config] = None):
        self.path = Path(path)
        self.config = config or default_config

        data, err = load_json_robust(self.path)
        if err:
            raise ValueError(f"Cannot load block export '{self.path}': {err}")
        if not isinstance(data, dict) or not isinstance(data.get("blocks"), list):
            raise ValueError(f"Block export '{self.path}' has no 'blocks' list")

        self.data: Dict[str, Any] = data
        self.seen_block_names: List[str] = []
        self._by_ref: Dict[str, Dict[str, Any]] = {}

        for index, block in enumerate(data["blocks"]):
            if not isinstance(block, dict):
                raise ValueError(f"Block #{index} in '{self.path}' is not an object")
            ref = _as_text(block.get("handle")) or f"#{index}"
            if ref in self._by_ref:
                raise ValueError(f"Duplicate block handle '{ref}' in '{self.path}'")
            self._by_ref[ref] = block

        logger.debug("Loaded %d block reference(s) from %s", len(self._by_ref), self.path)

    @property
    def drawing_path(self) -> Path:
        """Drawing the export came from, or the export itself if not recorded."""
        drawing = self.data.get("drawing")
        return Path(drawing) if drawing else self.path

    def get_attribute(self, block: Dict[str, Any], tag: str) -> str:
        attributes = block.get("attributes") or {}
        key = _lookup_ci(attributes, tag)
        return _as_text(attributes[key]) if key is not None else ""

    def get_dynamic_property(self, block: Dict[str, Any], name: str) -> str:
        properties = block.get("dynamicProperties") or {}
        if not block.get("isDynamic", bool(properties)):
            return ""
        key = _lookup_ci(properties, name)
        return _as_text(properties[key]) if key is not None else ""

    def fetch_candidates(self) -> List[Candidate]:
        """Candidates for every block named like the target block."""
        target = self.config.target_block_name.casefold()
        seen: Dict[str, str] = {}
        candidates = []

        for ref, block in self._by_ref.items():
            name = _as_text(block.get("blockName"))
            seen.setdefault(name.casefold(), name)
            if name.casefold() != target:
                continue
            candidates.append(Candidate(
                original_id=self.get_attribute(block, self.config.name_tag),
                length_raw=self.get_dynamic_property(block, self.config.length_property),
                width_raw=self.get_dynamic_property(block, self.config.width_property),
                ref=ref,
            ))

        self.seen_block_names = list(seen.values())
        logger.info(
            "Found %d '%s' block(s) among %d block reference(s)",
            len(candidates),
            self.config.target_block_name,
            len(self._by_ref),
        )
        return candidates

    def apply_rename(self, ref: str, new_name: str) -> None:
        """
        Set the name attribute of the block with handle ref.

        Blocks without a name attribute are left unchanged.

        Raises:
            KeyError: If ref is not a handle from this export
        """
        block = self._by_ref[ref]
        attributes = block.get("attributes") or {}
        key = _lookup_ci(attributes, self.config.name_tag)
        if key is None:
            logger.debug("Block %s has no %s attribute; not renamed", ref, self.config.name_tag)
            return
        attributes[key] = new_name

    def save(self, path: Optional[Union[str, Path]] = None) -> Path:
        """Write the (renamed) export to path, defaulting to the source file."""
        path = Path(path) if path else self.path
        with open(path, "w", encoding=self.config.encoding) as f:
            json.dump(self.data, f, indent=2, ensure_ascii=False)
        logger.info("Updated block export written to %s", path)
        return path
