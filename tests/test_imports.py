def test_imports():
    import importlib

    # third-party stack
    import bs4
    import markdownify
    import pydantic
    import requests
    import urllib3

    assert getattr(pydantic, "VERSION", None)
    assert bs4 and markdownify and requests
    assert int(urllib3.__version__.split(".")[0]) >= 2

    pkg = importlib.import_module("npm_utilities")
    assert pkg is not None
    assert {"Package", "User", "StatusMonitor"} <= set(pkg.__all__)


def test_retry_adapter_is_mounted_when_retries_requested():
    from urllib3.util.retry import Retry

    from npm_utilities.core.scraping.fetcher import Fetcher

    adapter = Fetcher(retries=3).session.get_adapter("https://www.npmjs.com/")
    assert isinstance(adapter.max_retries, Retry)
    assert adapter.max_retries.total == 3
