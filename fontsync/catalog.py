# fontsync/catalog.py
"""
Google Fonts developer API catalog and the local/remote version diff.

Exports:
    fetch_items(client, api_key) -> List[dict]
    fetch_catalog(client, api_key) -> List[CatalogEntry]
    diff_families(tracked, entries) -> List[FamilyStatus]
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from fontsync.errors import FetchError

logger = logging.getLogger(__name__)

WEBFONTS_API_URL = "https://www.googleapis.com/webfonts/v1/webfonts"


class CatalogEntry(BaseModel):
    # files, kind, variants, lastModified ... are dropped
    model_config = ConfigDict(extra="ignore")

    family: str
    version: str
    subsets: List[str] = Field(default_factory=list)


Status = Literal["unknown", "current", "outdated"]


class FamilyStatus(BaseModel):
    family: str
    status: Status
    local_version: str = ""
    remote_version: str = ""


# ---------- remote ----------
def fetch_items(client, api_key: str, sort: str = "popularity") -> List[Dict[str, Any]]:
    """Raw catalog records, minus the bulky `files` and `kind` keys."""
    data = client.get_json(WEBFONTS_API_URL, params={"key": api_key, "sort": sort})
    items = data.get("items") if isinstance(data, dict) else None
    if not isinstance(items, list):
        raise FetchError(WEBFONTS_API_URL, "response has no 'items' list")
    return [{k: v for k, v in item.items() if k not in ("files", "kind")} for item in items]


def parse_catalog(items: List[Dict[str, Any]]) -> List[CatalogEntry]:
    entries = [CatalogEntry.model_validate(item) for item in items]
    logger.debug("catalog lists %d families", len(entries))
    return entries


def fetch_catalog(client, api_key: str, sort: str = "popularity") -> List[CatalogEntry]:
    return parse_catalog(fetch_items(client, api_key, sort))


def dump_catalog(items: List[Dict[str, Any]], path: Path) -> None:
    path = Path(path)
    path.write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8")
    logger.info("catalog dumped to %s", path)


# ---------- diff ----------
def find_entry(entries: List[CatalogEntry], family: str) -> Optional[CatalogEntry]:
    # exact, case-sensitive match; first hit wins
    for entry in entries:
        if entry.family == family:
            return entry
    return None


def diff_family(family: str, local_version: str, entries: List[CatalogEntry]) -> FamilyStatus:
    entry = find_entry(entries, family)
    if entry is None:
        return FamilyStatus(family=family, status="unknown", local_version=local_version)
    status: Status = "current" if entry.version == local_version else "outdated"
    return FamilyStatus(
        family=family,
        status=status,
        local_version=local_version,
        remote_version=entry.version,
    )


def diff_families(tracked: Dict[str, str], entries: List[CatalogEntry]) -> List[FamilyStatus]:
    return [diff_family(family, local, entries) for family, local in tracked.items()]
