import pytest
import requests

from fontsync.client import USER_AGENT, HttpClient
from fontsync.errors import FetchError


def _response(status, content=b"", url="https://example.com/x"):
    r = requests.Response()
    r.status_code = status
    r._content = content
    r.url = url
    return r


class FakeSession(requests.Session):
    def __init__(self, response):
        super().__init__()
        self.response = response
        self.seen = []

    def get(self, url, params=None, timeout=None, **kwargs):
        self.seen.append((url, params, timeout))
        if isinstance(self.response, Exception):
            raise self.response
        return self.response


def test_headers_and_proxy():
    client = HttpClient(timeout=5, proxy="http://proxy:3128", session=FakeSession(_response(200)))
    assert client.session.headers["User-Agent"] == USER_AGENT
    assert client.session.proxies == {"http": "http://proxy:3128", "https": "http://proxy:3128"}


def test_get_json_passes_params_and_timeout():
    session = FakeSession(_response(200, b'{"items": []}'))
    client = HttpClient(timeout=5, session=session)
    assert client.get_json("https://example.com/api", params={"key": "k"}) == {"items": []}
    assert session.seen == [("https://example.com/api", {"key": "k"}, 5)]


def test_get_bytes():
    client = HttpClient(session=FakeSession(_response(200, b"wOF2\x00\x01")))
    assert client.get_bytes("https://fonts.gstatic.com/a.woff2") == b"wOF2\x00\x01"


def test_http_error_becomes_fetch_error():
    client = HttpClient(session=FakeSession(_response(403)))
    with pytest.raises(FetchError) as exc:
        client.get_text("https://example.com/css2")
    assert exc.value.url == "https://example.com/css2"
    assert isinstance(exc.value.__cause__, requests.HTTPError)


def test_connection_error_becomes_fetch_error():
    client = HttpClient(session=FakeSession(requests.ConnectionError("reset by peer")))
    with pytest.raises(FetchError, match="reset by peer"):
        client.get_bytes("https://fonts.gstatic.com/a.woff2")


def test_invalid_json():
    client = HttpClient(session=FakeSession(_response(200, b"<html>")))
    with pytest.raises(FetchError, match="invalid JSON"):
        client.get_json("https://example.com/api")
