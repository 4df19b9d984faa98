"""Scraping primitives shared by every entity: transport, fetch-and-parse and
normalization helpers. Prefect task wrappers live in `prefect_tasks` and are
not imported here.
"""

from .document import FetchMode, attr_of, child_tags, configure, fetch, get_fetcher, text_of
from .fetcher import Fetcher
from .normalizer import label_key, normalize_label, parse_count

__all__ = [
    "Fetcher",
    "FetchMode",
    "fetch",
    "configure",
    "get_fetcher",
    "text_of",
    "attr_of",
    "child_tags",
    "normalize_label",
    "label_key",
    "parse_count",
]
