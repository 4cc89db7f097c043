"""Tests for the JSON fetch layer."""

from urllib import error

import pytest

from chart_lens.exceptions import FetchError, HTTPStatusError, InvalidJSONError, InvalidURLError
from chart_lens.fetch import FetchConfig, fetch_json


class FakeResponse:
    def __init__(self, body: bytes, status: int = 200):
        self.status = status
        self._body = body

    def read(self) -> bytes:
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        return False


def test_fetch_json_decodes_body(mocker):
    urlopen = mocker.patch(
        "chart_lens.fetch.request.urlopen",
        return_value=FakeResponse(b'[{"country": "USA", "cases": 10}]'),
    )

    data = fetch_json(" https://example.com/data ", config=FetchConfig(timeout_sec=3.0))

    assert data == [{"country": "USA", "cases": 10}]
    req = urlopen.call_args.args[0]
    assert req.full_url == "https://example.com/data"
    assert req.get_method() == "GET"
    assert req.get_header("Accept") == "application/json"
    assert urlopen.call_args.kwargs["timeout"] == 3.0


def test_fetch_json_http_error_status(mocker):
    mocker.patch(
        "chart_lens.fetch.request.urlopen",
        side_effect=error.HTTPError("https://example.com/x", 404, "Not Found", None, None),
    )

    with pytest.raises(HTTPStatusError) as exc_info:
        fetch_json("https://example.com/x")

    assert exc_info.value.status == 404
    assert isinstance(exc_info.value, FetchError)


def test_fetch_json_non_2xx_without_exception(mocker):
    mocker.patch("chart_lens.fetch.request.urlopen", return_value=FakeResponse(b"", status=304))

    with pytest.raises(HTTPStatusError) as exc_info:
        fetch_json("https://example.com/x")

    assert exc_info.value.status == 304


def test_fetch_json_network_failure(mocker):
    mocker.patch(
        "chart_lens.fetch.request.urlopen",
        side_effect=error.URLError("Name or service not known"),
    )

    with pytest.raises(FetchError) as exc_info:
        fetch_json("https://nowhere.invalid/data")

    assert "Name or service not known" in str(exc_info.value)


def test_fetch_json_timeout(mocker):
    mocker.patch("chart_lens.fetch.request.urlopen", side_effect=TimeoutError("timed out"))

    with pytest.raises(FetchError):
        fetch_json("https://example.com/slow")


def test_fetch_json_invalid_body(mocker):
    mocker.patch("chart_lens.fetch.request.urlopen", return_value=FakeResponse(b"<html>oops</html>"))

    with pytest.raises(InvalidJSONError):
        fetch_json("https://example.com/page")


@pytest.mark.parametrize("url", ["", "   ", None, "ftp://example.com/data", "example.com/data", "https://"])
def test_fetch_json_rejects_invalid_url(mocker, url):
    urlopen = mocker.patch("chart_lens.fetch.request.urlopen")

    with pytest.raises(InvalidURLError):
        fetch_json(url)

    urlopen.assert_not_called()


def test_fetch_config_from_env(monkeypatch):
    monkeypatch.setenv("CHART_LENS_FETCH_TIMEOUT_SEC", "2.5")
    assert FetchConfig.from_env().timeout_sec == 2.5

    monkeypatch.setenv("CHART_LENS_FETCH_TIMEOUT_SEC", "soon")
    assert FetchConfig.from_env().timeout_sec == 10.0
