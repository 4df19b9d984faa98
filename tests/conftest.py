import pytest
import requests

from npm_utilities.core import config as config_module
from npm_utilities.core.scraping import document


def make_response(url: str, body: str = "", status: int = 200) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = body.encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = url
    return resp


class FakeFetcher:
    """Stands in for `Fetcher`: serves canned bodies and records every URL."""

    def __init__(self, body: str = "", status: int = 200, error: Exception | None = None):
        self.body = body
        self.status = status
        self.error = error
        self.calls: list[str] = []

    def get(self, url, headers=None, **kwargs):
        self.calls.append(url)
        if self.error is not None:
            raise self.error
        return make_response(url, self.body, self.status)


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    # every test starts from the stock endpoints and no cached transport
    monkeypatch.setattr(config_module, "_config", config_module.ClientConfig())
    monkeypatch.setattr(document, "_fetcher", None)


@pytest.fixture
def serve(monkeypatch):
    """Install a FakeFetcher answering every request with `body`."""

    def _serve(body: str = "", status: int = 200, error: Exception | None = None) -> FakeFetcher:
        fake = FakeFetcher(body, status, error)
        monkeypatch.setattr(document, "_fetcher", fake)
        return fake

    return _serve
