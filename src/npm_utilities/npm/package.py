"""
npm package entity.

`Package` only holds a name and an optional version. Each operation fetches
one page, runs the matching extraction rule and returns plain data or new
`Package` / `User` instances for the related entities it discovers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Optional

from markdownify import markdownify

from npm_utilities.core.config import get_config
from npm_utilities.core.errors import InvalidPackage, InvalidQuery, SearchUnavailable
from npm_utilities.core.scraping.document import fetch
from npm_utilities.extractors.package_page import (
    Snippet,
    extract_collaborators,
    extract_dependency_groups,
    extract_readme,
    extract_snippet,
    extract_versions,
)
from npm_utilities.extractors.search_page import extract_search_results
from npm_utilities.npm.search import SearchOptions, SearchResult, build_search_url

logger = logging.getLogger(__name__)

README_FORMATS = ("md", "html")


class Dependencies(NamedTuple):
    normal: List["Package"]
    dev: List["Package"]


@dataclass(frozen=True)
class Package:
    """An npm package, optionally pinned to a version (None means latest)."""

    name: str
    version: Optional[str] = None

    @property
    def version_append(self) -> str:
        return f"/v/{self.version}" if self.version else ""

    @property
    def url(self) -> str:
        """Package page URL; spaces in the name become hyphens."""
        base = get_config().endpoints.package
        return f"{base}{self.name.replace(' ', '-')}{self.version_append}"

    def _page_url(self, tab: Optional[str] = None) -> str:
        url = f"{get_config().endpoints.package}{self.name}{self.version_append}"
        if tab:
            url += f"?activeTab={tab}"
        return url

    def _invalid(self, exc: Exception) -> InvalidPackage:
        logger.warning("Operation on package %s failed: %r", self.name, exc)
        return InvalidPackage(self.name)

    async def snippet(self) -> Snippet:
        """Main info shown on the package page.

        The key set depends on what the page exposes, e.g. description,
        keywords, install, version, license, unpackedSize, totalFiles,
        homepage, repository, lastPublish, weeklyDownloads.
        """
        try:
            soup = await fetch(self.url)
            return extract_snippet(soup)
        except Exception as e:
            raise self._invalid(e) from None

    async def dependencies(self) -> Dependencies:
        """Normal and dev dependencies, as unversioned packages.

        The first list on the tab holds normal dependencies; any list after
        it is treated as dev dependencies.
        """
        try:
            soup = await fetch(self._page_url("dependencies"))
            groups = extract_dependency_groups(soup)
        except Exception as e:
            raise self._invalid(e) from None

        deps = Dependencies(normal=[], dev=[])
        for i, names in enumerate(groups):
            target = deps.normal if i == 0 else deps.dev
            target.extend(Package(name) for name in names)
        return deps

    async def readme(
        self, format: str = "html", options: Optional[dict] = None, **kwargs: Any
    ) -> Optional[str]:
        """Readme as HTML, or as Markdown when `format` is "md".

        Any other format falls back to HTML. `options` (a dict, with keyword
        arguments applied on top) go to `markdownify` untouched. Returns None
        when the page has no readme.
        """
        if format not in README_FORMATS:
            format = "html"
        try:
            soup = await fetch(self._page_url())
            html = extract_readme(soup)
            if format == "html" or html is None:
                return html
            return markdownify(html, **{**(options or {}), **kwargs})
        except Exception as e:
            raise self._invalid(e) from None

    async def versions(self) -> List["Package"]:
        """Version log, one `Package` per published version, as listed."""
        try:
            soup = await fetch(self._page_url("versions"))
            versions = extract_versions(soup)
        except Exception as e:
            raise self._invalid(e) from None
        return [Package(self.name, v) for v in versions]

    async def collaborators(self) -> list:
        """Maintainers as `User` instances, in page order."""
        from npm_utilities.npm.user import User

        try:
            soup = await fetch(self._page_url())
            usernames = extract_collaborators(soup)
        except Exception as e:
            raise self._invalid(e) from None
        return [User(u) for u in usernames]

    @staticmethod
    def search_url(
        query: Optional[str], options: SearchOptions | dict | None = None, **kwargs: Any
    ) -> str:
        """Search page URL for `query`; raises `InvalidQuery` when it is empty."""
        return build_search_url(query, options, **kwargs)

    @classmethod
    async def search(
        cls, query: Optional[str], options: SearchOptions | dict | None = None, **kwargs: Any
    ) -> SearchResult:
        """Search npm for `query`.

        Options: keywords (list), ranking (optimal, popularity, quality or
        maintenance), page_number, max_results_on_page.

        Example:
            result = await Package.search("lo", ranking="popularity")
        """
        if not query:
            raise InvalidQuery("A search query is required.")
        url = build_search_url(query, options, **kwargs)
        try:
            soup = await fetch(url)
            names, total = extract_search_results(soup)
        except Exception as e:
            logger.warning("Search for %r failed: %r", query, e)
            raise SearchUnavailable() from None
        return SearchResult(packages=[cls(name) for name in names], total=total)
