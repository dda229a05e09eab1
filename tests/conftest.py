import pytest

from fontsync.config import Settings
from tests.fakes import GSTATIC, ROBOTO_CSS


@pytest.fixture
def roboto_css():
    return ROBOTO_CSS


@pytest.fixture
def roboto_resources():
    return {
        f"{GSTATIC}/KFOkCnqEu92Fr1Mu51xFIzIFKw.woff2": b"wOF2-cyrillic-400i",
        f"{GSTATIC}/KFOmCnqEu92Fr1Mu4mxK.woff2": b"wOF2-latin-400",
        f"{GSTATIC}/KFOlCnqEu92Fr1MmWUlfBBc4.woff2": b"wOF2-latin-700",
    }


@pytest.fixture
def settings(tmp_path):
    return Settings(
        api_key="test-key",
        definition_file=tmp_path / "fonts.json",
        fonts_folder=tmp_path / "fonts",
        dump_file=tmp_path / "all_google_fonts.json",
        delay=0,
    )
