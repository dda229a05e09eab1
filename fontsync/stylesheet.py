# fontsync/stylesheet.py
"""
CSS API fetch and @font-face block parsing.

The css2 endpoint answers with one block per subset/style/weight, each
preceded by a comment naming the subset:

    /* latin-ext */
    @font-face {
      font-family: 'Roboto';
      font-style: italic;
      font-weight: 100;
      font-display: swap;
      src: url(https://fonts.gstatic.com/s/roboto/v30/....woff2) format('woff2');
      unicode-range: ...;
    }
"""

from __future__ import annotations

import re
from typing import List

from pydantic import BaseModel

from fontsync.errors import UnparsableBlockError

CSS_API_URL = "https://fonts.googleapis.com/css2"

WEIGHTS = range(100, 1000, 100)

RE_BLOCK = re.compile(r"/\*\s([a-z-]+)\s\*/([^}]+})")
RE_STYLE = re.compile(r"font-style:\s*([^;]+);")
RE_WEIGHT = re.compile(r"font-weight:\s*([^;]+);")
RE_WOFF2 = re.compile(r"url\((https://fonts\.gstatic\.com[^.]+\.woff2)\)")


class FontFace(BaseModel):
    subset: str
    style: str
    weight: str
    url: str
    block: str


def family_query(family: str) -> str:
    """'Roboto' -> 'Roboto:ital,wght@0,100;...;0,900;1,100;...;1,900'"""
    axes = [f"{ital},{w}" for ital in (0, 1) for w in WEIGHTS]
    return f"{family}:ital,wght@{';'.join(axes)}"


def fetch_stylesheet(client, family: str) -> str:
    params = {"family": family_query(family), "display": "swap"}
    return client.get_text(CSS_API_URL, params=params)


def _normalize_style(style: str) -> str:
    style = style.strip()
    return "" if style == "normal" else style


def parse_block(subset: str, block: str) -> FontFace:
    style = RE_STYLE.search(block)
    if not style:
        raise UnparsableBlockError(subset, "font-style")
    weight = RE_WEIGHT.search(block)
    if not weight:
        raise UnparsableBlockError(subset, "font-weight")
    url = RE_WOFF2.search(block)
    if not url:
        raise UnparsableBlockError(subset, "woff2 url")
    return FontFace(
        subset=subset,
        style=_normalize_style(style.group(1)),
        weight=weight.group(1).strip(),
        url=url.group(1),
        block=block,
    )


def parse_blocks(css: str) -> List[FontFace]:
    # group(0) keeps the subset comment in the fragment written to disk
    return [parse_block(m.group(1), m.group(0)) for m in RE_BLOCK.finditer(css)]


def rewrite(css: str, url: str, filename: str) -> str:
    return css.replace(url, f"'{filename}'")
