from pathlib import Path

import pytest
from pydantic import ValidationError

from fontsync.config import API_KEY_VAR, load_settings
from fontsync.errors import MissingCredentialError

ENV_VARS = [
    API_KEY_VAR,
    "FONTS_DEFINITION_FILE",
    "FONTS_FOLDER",
    "ALL_FONTS_DUMP_FILE",
    "FONTSYNC_DELAY",
    "FONTSYNC_TIMEOUT",
    "FONTSYNC_WORKERS",
    "https_proxy",
    "http_proxy",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # setenv first so teardown also drops anything load_dotenv exported
    for var in ENV_VARS:
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)


def test_missing_key(tmp_path):
    with pytest.raises(MissingCredentialError, match=API_KEY_VAR):
        load_settings(tmp_path / ".env")


def test_blank_key(monkeypatch, tmp_path):
    monkeypatch.setenv(API_KEY_VAR, "   ")
    with pytest.raises(MissingCredentialError):
        load_settings(tmp_path / ".env")


def test_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv(API_KEY_VAR, "abc")
    s = load_settings(tmp_path / ".env")
    assert s.api_key == "abc"
    assert s.definition_file == Path("fonts.json")
    assert s.fonts_folder == Path("fonts")
    assert s.delay == 1.0
    assert s.workers == 4
    assert s.proxy is None
    assert not s.dry_run


def test_dotenv_file(tmp_path):
    env = tmp_path / ".env"
    env.write_text(f"{API_KEY_VAR}=from-dotenv\nFONTS_FOLDER=mirror\nFONTSYNC_DELAY=0.25\n")
    s = load_settings(env)
    assert s.api_key == "from-dotenv"
    assert s.fonts_folder == Path("mirror")
    assert s.delay == 0.25


def test_overrides_win_and_none_is_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv(API_KEY_VAR, "abc")
    monkeypatch.setenv("FONTS_DEFINITION_FILE", "env.json")
    s = load_settings(tmp_path / ".env", definition_file="cli.json", delay=None)
    assert s.definition_file == Path("cli.json")
    assert s.delay == 1.0


def test_proxy_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv(API_KEY_VAR, "abc")
    monkeypatch.setenv("http_proxy", "http://proxy:3128")
    assert load_settings(tmp_path / ".env").proxy == "http://proxy:3128"


def test_invalid_numbers(monkeypatch, tmp_path):
    monkeypatch.setenv(API_KEY_VAR, "abc")
    monkeypatch.setenv("FONTSYNC_WORKERS", "0")
    with pytest.raises(ValidationError):
        load_settings(tmp_path / ".env")
