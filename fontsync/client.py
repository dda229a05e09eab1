# fontsync/client.py
"""Thin requests wrapper shared by the catalog, stylesheet and resource fetches."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from fontsync.errors import FetchError

logger = logging.getLogger(__name__)

# The CSS API picks the resource format from the browser; this one gets woff2.
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/85.0.4183.83 Safari/537.36"
)
HTTP_TIMEOUT = 30


class HttpClient:
    def __init__(
        self,
        timeout: float = HTTP_TIMEOUT,
        proxy: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ):
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})
        if proxy:
            self.session.proxies.update({"http": proxy, "https": proxy})

    def _get(self, url: str, params: Optional[Dict[str, Any]] = None) -> requests.Response:
        logger.debug("GET %s %s", url, params or "")
        try:
            r = self.session.get(url, params=params or {}, timeout=self.timeout)
            r.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(url, exc) from exc
        return r

    def get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        r = self._get(url, params)
        try:
            return r.json()
        except ValueError as exc:
            raise FetchError(url, f"invalid JSON: {exc}") from exc

    def get_text(self, url: str, params: Optional[Dict[str, Any]] = None) -> str:
        return self._get(url, params).text

    def get_bytes(self, url: str) -> bytes:
        return self._get(url).content

    def close(self) -> None:
        self.session.close()


def client_from_settings(settings) -> HttpClient:
    return HttpClient(timeout=settings.timeout, proxy=settings.proxy)
