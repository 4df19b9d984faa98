"""Fetch-and-parse primitive plus small query helpers over parsed pages.

`fetch(url, mode)` issues exactly one GET and returns either decoded JSON or
a BeautifulSoup tree. Any transport failure, non-2xx status or bad JSON is
reported as `RemoteUnavailable`.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Optional

import requests
from bs4 import BeautifulSoup, Tag

from npm_utilities.core.config import ClientConfig, get_config, set_config
from npm_utilities.core.errors import RemoteUnavailable
from npm_utilities.core.scraping.fetcher import Fetcher

logger = logging.getLogger(__name__)


class FetchMode(str, Enum):
    JSON = "json"
    DOCUMENT = "document"


_fetcher: Optional[Fetcher] = None


def get_fetcher() -> Fetcher:
    """Return the process-wide transport, creating it from the config on first use."""
    global _fetcher
    if _fetcher is None:
        _fetcher = Fetcher.from_config(get_config())
    return _fetcher


def configure(
    config: ClientConfig | dict | None = None,
    fetcher: Any = None,
    **overrides: Any,
) -> ClientConfig:
    """Replace the client configuration and/or the transport.

    `config` may be a `ClientConfig` or a plain dict; keyword `overrides`
    are applied on top of it. Any object exposing `get(url)` and returning a
    `requests.Response`-like object can be passed as `fetcher`; without one
    the transport is rebuilt from the new config on next use.
    """
    global _fetcher
    if config is None:
        base = get_config().model_dump()
    elif isinstance(config, ClientConfig):
        base = config.model_dump()
    else:
        base = dict(config)
    base.update(overrides)
    new_config = ClientConfig(**base)
    set_config(new_config)
    _fetcher = fetcher
    return new_config


def _get(url: str):
    resp = get_fetcher().get(url)
    resp.raise_for_status()
    return resp


async def fetch(url: str, mode: FetchMode = FetchMode.DOCUMENT):
    """GET `url` and return decoded JSON or a parsed document."""
    mode = FetchMode(mode)
    logger.debug("Fetching %s (%s)", url, mode.value)
    try:
        resp = await asyncio.to_thread(_get, url)
        if mode is FetchMode.JSON:
            return resp.json()
        return BeautifulSoup(resp.text, "html.parser")
    except requests.RequestException as e:
        raise RemoteUnavailable(url, str(e)) from e
    except ValueError as e:
        # JSONDecodeError subclasses ValueError
        raise RemoteUnavailable(url, f"invalid JSON body ({e})") from e


def text_of(node: Tag, selector: str) -> str:
    """Trimmed text of the first match, or "" when nothing matches."""
    found = node.select_one(selector)
    if found is None:
        return ""
    return found.get_text().strip()


def attr_of(node: Tag, selector: str, name: str) -> Optional[str]:
    """Attribute `name` of the first match, or None."""
    found = node.select_one(selector)
    if found is None:
        return None
    value = found.get(name)
    if isinstance(value, list):
        # multi-valued attributes (class, rel) come back as lists
        return " ".join(value)
    return value


def inner_html(node: Tag, selector: str) -> Optional[str]:
    found = node.select_one(selector)
    if found is None:
        return None
    return found.decode_contents()


def child_tags(node: Optional[Tag]) -> list[Tag]:
    """Element children of `node` in document order (text nodes skipped)."""
    if node is None:
        return []
    return [c for c in node.children if isinstance(c, Tag)]


def children_of_all(node: Tag, selector: str) -> list[Tag]:
    """Element children of every match of `selector`, in document order."""
    return [child for container in node.select(selector) for child in child_tags(container)]


def previous_tag(node: Tag) -> Optional[Tag]:
    """Closest preceding element sibling of `node`, or None."""
    for sibling in node.previous_siblings:
        if isinstance(sibling, Tag):
            return sibling
    return None
