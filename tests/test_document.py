import asyncio

import pytest
import requests
from bs4 import BeautifulSoup
from pydantic import ValidationError

from npm_utilities import ClientConfig, Package, RemoteUnavailable, configure, get_config
from npm_utilities.core.scraping import document
from npm_utilities.core.scraping.document import FetchMode, attr_of, fetch, text_of
from npm_utilities.core.scraping.fetcher import Fetcher


def test_fetch_document_returns_soup(serve):
    fake = serve("<html><body><h1> Hello </h1></body></html>")
    soup = asyncio.run(fetch("https://example.org/page"))
    assert isinstance(soup, BeautifulSoup)
    assert text_of(soup, "h1") == "Hello"
    assert fake.calls == ["https://example.org/page"]


def test_fetch_json(serve):
    serve('{"a": [1, 2]}')
    assert asyncio.run(fetch("https://example.org/x.json", FetchMode.JSON)) == {"a": [1, 2]}
    assert asyncio.run(fetch("https://example.org/x.json", "json")) == {"a": [1, 2]}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"error": requests.ConnectionError("connection refused")},
        {"status": 503},
    ],
)
def test_fetch_failures_become_remote_unavailable(serve, kwargs):
    serve(**kwargs)
    with pytest.raises(RemoteUnavailable) as excinfo:
        asyncio.run(fetch("https://example.org/page"))
    assert excinfo.value.url == "https://example.org/page"


def test_fetch_bad_json_is_remote_unavailable(serve):
    serve("{not json")
    with pytest.raises(RemoteUnavailable):
        asyncio.run(fetch("https://example.org/x.json", FetchMode.JSON))


def test_query_helpers_tolerate_missing_nodes():
    soup = BeautifulSoup('<div><a href="/x" class="a b">link</a></div>', "html.parser")
    assert text_of(soup, "span") == ""
    assert attr_of(soup, "span", "href") is None
    assert attr_of(soup, "a", "href") == "/x"
    assert attr_of(soup, "a", "class") == "a b"


def test_concurrent_calls_each_issue_one_request(serve):
    fake = serve("<html></html>")

    async def run():
        return await asyncio.gather(*(fetch(f"https://example.org/{i}") for i in range(5)))

    asyncio.run(run())
    assert sorted(fake.calls) == [f"https://example.org/{i}" for i in range(5)]


def test_configure_swaps_endpoints():
    configure(endpoints={"package": "https://mirror.example.org/package/"})
    assert get_config().endpoints.package == "https://mirror.example.org/package/"
    assert Package("upjson").url == "https://mirror.example.org/package/upjson"
    # other endpoints keep their defaults
    assert get_config().endpoints.user == "https://www.npmjs.com/~"


def test_configure_installs_fetcher():
    fake = object()
    configure(ClientConfig(timeout=5), fetcher=fake)
    assert document.get_fetcher() is fake
    assert get_config().timeout == 5


def test_default_fetcher_built_from_config():
    configure(timeout=2.5, retries=3)
    fetcher = document.get_fetcher()
    assert isinstance(fetcher, Fetcher)
    assert fetcher.timeout == 2.5
    assert fetcher.session.get_adapter("https://www.npmjs.com/").max_retries.total == 3


def test_endpoints_must_be_http_urls():
    with pytest.raises(ValidationError):
        configure(endpoints={"status": "ftp://status.example.org/"})


def test_fetcher_has_no_retries_or_timeout_by_default(monkeypatch):
    fetcher = Fetcher()
    assert fetcher.timeout is None
    assert fetcher.session.get_adapter("https://www.npmjs.com/").max_retries.total == 0

    seen = {}

    def fake_get(url, headers=None, timeout=None, **kwargs):
        seen.update(url=url, headers=headers, timeout=timeout)
        return "response"

    monkeypatch.setattr(fetcher.session, "get", fake_get)
    assert fetcher.get("https://www.npmjs.com/package/x", headers={"Accept": "text/html"}) == "response"
    assert seen["timeout"] is None
    assert seen["headers"]["Accept"] == "text/html"
    assert "npm-utilities" in seen["headers"]["User-Agent"]
