# fontsync/sync.py
"""
Mirror run: catalog diff, then stylesheet + resource download per outdated family.

Exports:
    run(settings, client=None, sleep=time.sleep) -> SyncReport
    check(settings, client=None) -> List[FamilyStatus]
    sync_family(client, family, version, folder, workers=4) -> List[Path]
"""

from __future__ import annotations

import logging
import os
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Dict, List

from pydantic import BaseModel, Field

from fontsync.catalog import (
    FamilyStatus,
    diff_families,
    dump_catalog,
    fetch_catalog,
    fetch_items,
    parse_catalog,
)
from fontsync.client import client_from_settings
from fontsync.config import Settings
from fontsync.errors import FetchError, UnparsableBlockError
from fontsync.naming import combined_stylesheet_filename, font_filename, subset_stylesheet_filename
from fontsync.stylesheet import FontFace, RE_BLOCK, fetch_stylesheet, parse_blocks, rewrite
from fontsync.versions import load_versions, save_versions

logger = logging.getLogger(__name__)


class SyncReport(BaseModel):
    updated: List[FamilyStatus] = Field(default_factory=list)
    current: List[FamilyStatus] = Field(default_factory=list)
    unknown: List[FamilyStatus] = Field(default_factory=list)
    failed: Dict[str, str] = Field(default_factory=dict)
    versions: Dict[str, str] = Field(default_factory=dict)

    def summary_lines(self) -> List[str]:
        return [f"{s.family} {s.local_version} -> {s.remote_version}" for s in self.updated]


# ---------- per family ----------
def localize(css: str, faces: List[FontFace], filenames: List[str]) -> str:
    """Rewrite each block of `css` to point at its own local file."""
    names = iter(zip(faces, filenames))

    def _sub(m):
        face, name = next(names)
        return rewrite(m.group(0), face.url, name)

    return RE_BLOCK.sub(_sub, css)


def _download_all(client, urls: List[str], workers: int) -> Dict[str, bytes]:
    # every future is joined here, so no download outlives the family
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {url: pool.submit(client.get_bytes, url) for url in urls}
        return {url: fut.result() for url, fut in futures.items()}


def sync_family(client, family: str, version: str, folder: Path, workers: int = 4) -> List[Path]:
    """
    Mirror one family at `version` into `folder`. Returns the files written.

    Raises FetchError / UnparsableBlockError before anything is written to
    `folder` for stylesheet problems; OSError always propagates.
    """
    css = fetch_stylesheet(client, family)
    faces = parse_blocks(css)
    if not faces:
        raise UnparsableBlockError(family, "@font-face block")

    filenames = [font_filename(family, version, f.subset, f.weight, f.style) for f in faces]
    unique_urls = list(dict.fromkeys(f.url for f in faces))
    payloads = _download_all(client, unique_urls, workers)

    folder.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    for face, name in zip(faces, filenames):
        dest = folder / name
        dest.write_bytes(payloads[face.url])
        written.append(dest)

    # truncate on the first block of each subset, append the rest
    opened = set()
    for face, name in zip(faces, filenames):
        dest = folder / subset_stylesheet_filename(family, version, face.subset)
        mode = "a" if dest in opened else "w"
        with dest.open(mode, encoding="utf-8") as f:
            f.write(rewrite(face.block, face.url, name) + os.linesep)
        if dest not in opened:
            opened.add(dest)
            written.append(dest)

    combined = folder / combined_stylesheet_filename(family, version)
    combined.write_text(localize(css, faces, filenames), encoding="utf-8")
    written.append(combined)
    logger.debug("%s: wrote %d files to %s", family, len(written), folder)
    return written


# ---------- public API ----------
def check(settings: Settings, client=None) -> List[FamilyStatus]:
    """Catalog diff only: nothing is downloaded or written."""
    client = client or client_from_settings(settings)
    tracked = load_versions(settings.definition_file) if settings.definition_file.exists() else {}
    return diff_families(tracked, fetch_catalog(client, settings.api_key))


def run(
    settings: Settings,
    client=None,
    sleep: Callable[[float], None] = time.sleep,
) -> SyncReport:
    client = client or client_from_settings(settings)
    versions = load_versions(settings.definition_file)
    settings.fonts_folder.mkdir(parents=True, exist_ok=True)

    items = fetch_items(client, settings.api_key)
    if settings.dump_catalog:
        dump_catalog(items, settings.dump_file)
    entries = parse_catalog(items)

    report = SyncReport()
    statuses = diff_families(versions, entries)
    pending = [s for s in statuses if s.status == "outdated"]
    for status in statuses:
        family = status.family
        if status.status == "unknown":
            logger.info("Processing '%s': font family doesn't exist on server! Is the spelling correct?", family)
            report.unknown.append(status)
            continue
        if status.status == "current":
            logger.info("Processing '%s': version %s already present, skipping.", family, status.local_version)
            report.current.append(status)
            continue

        logger.info("Processing '%s': new version %s found...", family, status.remote_version)
        try:
            sync_family(
                client,
                family,
                status.remote_version,
                settings.fonts_folder / family,
                workers=settings.workers,
            )
        except (FetchError, UnparsableBlockError) as exc:
            logger.error("Processing '%s': %s, skipping.", family, exc)
            report.failed[family] = str(exc)
        else:
            if not settings.dry_run:
                versions[family] = status.remote_version
            report.updated.append(status)
            logger.info("Processing '%s': done!", family)

        if status is not pending[-1]:
            # the font server drops connections when hit back to back
            sleep(settings.delay)

    if not settings.dry_run:
        save_versions(settings.definition_file, versions)
    report.versions = dict(versions)
    return report
