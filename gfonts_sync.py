#!/usr/bin/env python3
"""
gfonts_sync.py
Keeps a self-hosted mirror of Google Fonts families up to date.

Tracked families live in fonts.json (family -> last mirrored version):
  {"Roboto": "v30", "Open Sans": ""}
Outputs:
  fonts/<family>/<family>-<version>-<subset>-<weight>[italic].woff2
  fonts/<family>/<family>-<version>-<subset>.css
  fonts/<family>/<family>-<version>-all.css
Usage:
  python gfonts_sync.py            # mirror every outdated family
  python gfonts_sync.py --check    # only report what is outdated
Needs GOOGLE_WEB_FONTS_DEVELOPER_API_KEY in the environment or in .env.
"""
from __future__ import annotations

import argparse
import logging
import sys

from fontsync.config import load_settings
from fontsync.errors import MissingCredentialError
from fontsync.sync import check, run


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Mirror tracked Google Fonts families locally.")
    parser.add_argument("--env-file", default=".env", help="dotenv file to load (default: .env)")
    parser.add_argument("--config", dest="definition_file", help="version map JSON (default: fonts.json)")
    parser.add_argument("--fonts-dir", dest="fonts_folder", help="mirror root (default: fonts)")
    parser.add_argument("--delay", type=float, help="seconds to wait between families (default: 1)")
    parser.add_argument("--dump-catalog", nargs="?", const=True, metavar="PATH",
                        help="also write the cleaned catalog (default: all_google_fonts.json)")
    parser.add_argument("--dry-run", action="store_true",
                        help="download but leave the version map untouched")
    parser.add_argument("--check", action="store_true",
                        help="report outdated families without downloading anything")
    parser.add_argument("-v", "--verbose", action="store_true")
    options = parser.parse_args(argv)
    if options.check and (options.dump_catalog or options.dry_run):
        parser.error("--check writes nothing; drop --dump-catalog and --dry-run")
    return options


def main(argv=None) -> int:
    options = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if options.verbose else logging.INFO,
        format="%(message)s",
    )
    # keep urllib3 quiet unless asked
    if not options.verbose:
        logging.getLogger("urllib3").setLevel(logging.WARNING)

    overrides = {
        "definition_file": options.definition_file,
        "fonts_folder": options.fonts_folder,
        "delay": options.delay,
        "dry_run": options.dry_run or None,
    }
    if options.dump_catalog:
        overrides["dump_catalog"] = True
        if options.dump_catalog is not True:
            overrides["dump_file"] = options.dump_catalog

    try:
        settings = load_settings(options.env_file, **overrides)
    except MissingCredentialError as e:
        print(e, file=sys.stderr)
        return 1

    if options.check:
        statuses = check(settings)
        for s in statuses:
            if s.status == "unknown":
                print(f"{s.family}: not in catalog")
            elif s.status == "current":
                print(f"{s.family}: {s.local_version} (current)")
            else:
                print(f"{s.family}: {s.local_version or '-'} -> {s.remote_version}")
        return 0

    report = run(settings)
    lines = report.summary_lines()
    if lines:
        print("Summary:")
        print("\n".join(lines))
    if report.failed:
        print(f"Failed: {', '.join(report.failed)}", file=sys.stderr)
    return 0


def cli(argv=None):
    try:
        code = main(argv)
    except Exception as e:
        sys.exit(f"Error: {e}")
    sys.exit(code)


if __name__ == "__main__":
    cli()
