"""HTTP transport used by every npm-utilities operation.

Provides a small `Fetcher` object exposing `get`. Retries and timeouts are
off unless explicitly configured.
"""

from __future__ import annotations

from typing import Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from npm_utilities.core.config import ClientConfig


class Fetcher:
    """Thin wrapper around a `requests.Session`.

    Usage:
        f = Fetcher()
        resp = f.get(url)

    Pass `retries`/`timeout` to opt in to transport-level resilience.
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        retries: int = 0,
        backoff_factor: float = 0.3,
        user_agent: Optional[str] = None,
    ) -> None:
        self.timeout = timeout
        self.session = requests.Session()
        if retries:
            retry = Retry(
                total=retries,
                status_forcelist=(429, 500, 502, 503, 504),
                allowed_methods=frozenset(["GET"]),
                backoff_factor=backoff_factor,
            )
            adapter = HTTPAdapter(max_retries=retry)
            self.session.mount("https://", adapter)
            self.session.mount("http://", adapter)
        self.user_agent = user_agent or ClientConfig().user_agent

    @classmethod
    def from_config(cls, config: ClientConfig) -> "Fetcher":
        return cls(
            timeout=config.timeout,
            retries=config.retries,
            user_agent=config.user_agent,
        )

    def _headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        base = {"User-Agent": self.user_agent}
        if headers:
            base.update(headers)
        return base

    def get(self, url: str, headers: Optional[Dict[str, str]] = None, **kwargs):
        return self.session.get(
            url, headers=self._headers(headers), timeout=self.timeout, **kwargs
        )
