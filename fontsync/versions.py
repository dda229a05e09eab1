# fontsync/versions.py
"""Tracked-family version map (fonts.json): family name -> last mirrored version."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict


def load_versions(path: Path) -> Dict[str, str]:
    """Read the map, creating an empty one on first run."""
    path = Path(path)
    if not path.exists():
        save_versions(path, {})
        return {}
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must hold a JSON object of family -> version")
    return {str(k): "" if v is None else str(v) for k, v in data.items()}


def save_versions(path: Path, versions: Dict[str, str]) -> None:
    # Atomic write: .tmp then replace
    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(versions, ensure_ascii=False, indent=2), encoding="utf-8")
    tmp.replace(path)
