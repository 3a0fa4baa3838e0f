"""File I/O utilities."""

import json
from pathlib import Path
from typing import Any, Optional, Tuple, Union


def load_json_robust(filepath: Union[str, Path]) -> Tuple[Optional[Any], Optional[str]]:
    """
    Load JSON with BOM (Byte Order Mark) handling.

    CAD add-ins on Windows often export JSON with a BOM or in a legacy
    code page. This function tries multiple encodings to handle these cases.

    Encoding order:
    1. utf-8-sig: UTF-8 with BOM (handles Windows exports)
    2. utf-8: Standard UTF-8
    3. latin-1: Fallback for legacy files

    Args:
        filepath: Path to JSON file

    Returns:
        Tuple of (data, error):
        - On success: (data, None)
        - On failure: (None, error_message)

    Example:
        data, err = load_json_robust("house_blocks.json")
        if err:
            raise ValueError(err)
    """
    filepath = Path(filepath)

    if not filepath.exists():
        return None, f"File not found: {filepath}"

    for encoding in ["utf-8-sig", "utf-8", "latin-1"]:
        try:
            with open(filepath, "r", encoding=encoding) as f:
                return json.load(f), None
        except UnicodeDecodeError:
            continue
        except json.JSONDecodeError as e:
            return None, f"JSON error: {str(e)[:100]}"
        except OSError as e:
            return None, f"Error: {str(e)[:100]}"

    return None, f"Failed all encodings for: {filepath}"
