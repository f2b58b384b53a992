"""File utilities."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_text_file(path: str) -> str:
    """Read a UTF-8 text file.

    Raises FileNotFoundError for a missing file and ValueError when the
    content is not text.
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Missing file: {path}")
    data = p.read_bytes()
    if b"\x00" in data[:512]:
        raise ValueError(f"Binary file: {p.name}")
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"Unable to read text file: {p.name}") from exc


def load_json(text: str, source: str = "input") -> Any:
    """Parse JSON, turning decode errors into ValueError with the source name."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {source}: {exc}") from exc
