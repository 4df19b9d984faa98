"""Search options contract and search URL construction."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, List, NamedTuple, Optional, Union
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field, field_validator

from npm_utilities.core.config import Endpoints, get_config
from npm_utilities.core.errors import InvalidQuery

if TYPE_CHECKING:
    from npm_utilities.npm.package import Package

RANKINGS = ("optimal", "popularity", "quality", "maintenance")

# Characters encodeURI leaves untouched besides letters and digits
URI_SAFE = ";,/?:@&=+$-_.!~*'()#"


class SearchResult(NamedTuple):
    packages: List["Package"]
    # None when the page's result counter could not be read
    total: Optional[int]


class SearchOptions(BaseModel):
    """
    Optional search filters.

    Lenient on purpose: an unknown ranking or a non-numeric page value is
    dropped instead of rejected. Any finite number (or numeric string) is
    kept as a page value. The camelCase names used by the npm site
    (`pageNumber`, `maxResultsOnPage`) are accepted too.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    keywords: Optional[List[str]] = None
    ranking: Optional[str] = None
    page_number: Optional[Union[int, float]] = Field(default=None, alias="pageNumber")
    max_results_on_page: Optional[Union[int, float]] = Field(default=None, alias="maxResultsOnPage")

    @field_validator("keywords", mode="before")
    def keywords_must_be_list(cls, v):
        if not isinstance(v, (list, tuple)) or not v:
            return None
        return [str(k) for k in v]

    @field_validator("ranking", mode="before")
    def drop_unknown_ranking(cls, v):
        return v if v in RANKINGS else None

    @field_validator("page_number", "max_results_on_page", mode="before")
    def drop_non_numeric(cls, v):
        if isinstance(v, bool):
            return None
        if isinstance(v, int):
            return v
        if isinstance(v, str):
            try:
                v = float(v.strip())
            except ValueError:
                return None
        if isinstance(v, float):
            if not math.isfinite(v):
                return None
            return int(v) if v.is_integer() else v
        return None


def as_search_options(options: SearchOptions | dict | None = None, **kwargs: Any) -> SearchOptions:
    if isinstance(options, SearchOptions):
        if not kwargs:
            return options
        options = options.model_dump()
    merged = dict(options or {})
    merged.update(kwargs)
    return SearchOptions(**merged)


def build_search_url(
    query: Optional[str],
    options: SearchOptions | dict | None = None,
    endpoints: Optional[Endpoints] = None,
    **kwargs: Any,
) -> str:
    """
    Build the search page URL for `query`.

    Keywords are appended to the query text as `keywords:a,b`; ranking and
    paging become extra parameters. The whole URL is percent-encoded like
    JavaScript's `encodeURI`: reserved characters are kept, a literal `%`
    becomes `%25`. An empty query raises `InvalidQuery`.
    """
    if not query:
        raise InvalidQuery("A search query is required.")
    opts = as_search_options(options, **kwargs)
    endpoints = endpoints or get_config().endpoints

    if opts.keywords:
        query = f"{query} keywords:{','.join(opts.keywords)}"
    url = endpoints.search + query
    if opts.ranking:
        url += f"&{endpoints.ranking_param}={opts.ranking}"
    if opts.page_number is not None:
        url += f"&{endpoints.page_param}={opts.page_number}"
    if opts.max_results_on_page is not None:
        url += f"&{endpoints.per_page_param}={opts.max_results_on_page}"
    return quote(url, safe=URI_SAFE)
