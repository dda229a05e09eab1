# fontsync/config.py
"""
Runtime settings for the font mirror.

Reads .env (python-dotenv) then the process environment:
    GOOGLE_WEB_FONTS_DEVELOPER_API_KEY   required
    FONTS_DEFINITION_FILE, FONTS_FOLDER, ALL_FONTS_DUMP_FILE
    FONTSYNC_DELAY, FONTSYNC_TIMEOUT, FONTSYNC_WORKERS
    https_proxy / http_proxy
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from fontsync.errors import MissingCredentialError

API_KEY_VAR = "GOOGLE_WEB_FONTS_DEVELOPER_API_KEY"

DEFAULT_DEFINITION_FILE = "fonts.json"
DEFAULT_FONTS_FOLDER = "fonts"
DEFAULT_DUMP_FILE = "all_google_fonts.json"


class Settings(BaseModel):
    api_key: str
    definition_file: Path = Path(DEFAULT_DEFINITION_FILE)
    fonts_folder: Path = Path(DEFAULT_FONTS_FOLDER)
    dump_file: Path = Path(DEFAULT_DUMP_FILE)
    dump_catalog: bool = False
    dry_run: bool = False
    delay: float = Field(default=1.0, ge=0)
    timeout: float = Field(default=30.0, gt=0)
    workers: int = Field(default=4, ge=1)
    proxy: Optional[str] = None

    @field_validator("api_key", mode="before")
    @classmethod
    def _require_key(cls, v):
        key = str(v or "").strip()
        if not key:
            raise ValueError(f"{API_KEY_VAR} is empty")
        return key

    @field_validator("proxy", mode="before")
    @classmethod
    def _blank_proxy(cls, v):
        # an exported-but-empty proxy variable means no proxy
        return (str(v).strip() or None) if v is not None else None


def _env_overrides() -> Dict[str, Any]:
    env = {
        "definition_file": os.getenv("FONTS_DEFINITION_FILE"),
        "fonts_folder": os.getenv("FONTS_FOLDER"),
        "dump_file": os.getenv("ALL_FONTS_DUMP_FILE"),
        "delay": os.getenv("FONTSYNC_DELAY"),
        "timeout": os.getenv("FONTSYNC_TIMEOUT"),
        "workers": os.getenv("FONTSYNC_WORKERS"),
        "proxy": os.getenv("https_proxy") or os.getenv("http_proxy"),
    }
    return {k: v for k, v in env.items() if v not in (None, "")}


def load_settings(env_file: Optional[str | Path] = ".env", **overrides: Any) -> Settings:
    """
    Build Settings from .env, the environment and explicit overrides
    (highest precedence; None values are ignored).

    Raises MissingCredentialError when no API key is configured.
    """
    if env_file is not None and Path(env_file).exists():
        load_dotenv(env_file)

    api_key = (overrides.pop("api_key", None) or os.getenv(API_KEY_VAR, "")).strip()
    if not api_key:
        raise MissingCredentialError(
            f"Missing env variable {API_KEY_VAR}! "
            "Use the provided .env file to store your Google fonts API key."
        )

    values = _env_overrides()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(api_key=api_key, **values)
