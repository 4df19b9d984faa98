"""Scrape npm package, user and status information into plain Python objects.

Example:
    import asyncio
    from npm_utilities import Package

    deps = asyncio.run(Package("express").dependencies())
"""

from npm_utilities.core.config import ClientConfig, Endpoints, get_config
from npm_utilities.core.errors import (
    InvalidArgument,
    InvalidPackage,
    InvalidQuery,
    InvalidUser,
    MonitorUnavailable,
    NpmUtilitiesError,
    RemoteUnavailable,
    SearchUnavailable,
)
from npm_utilities.core.scraping.document import configure
from npm_utilities.npm import (
    Dependencies,
    Package,
    SearchOptions,
    SearchResult,
    StatusMonitor,
    User,
)

__version__ = "1.0.0"

__all__ = [
    "Package",
    "User",
    "StatusMonitor",
    "Dependencies",
    "SearchOptions",
    "SearchResult",
    "ClientConfig",
    "Endpoints",
    "configure",
    "get_config",
    "NpmUtilitiesError",
    "RemoteUnavailable",
    "InvalidPackage",
    "InvalidUser",
    "MonitorUnavailable",
    "SearchUnavailable",
    "InvalidQuery",
    "InvalidArgument",
]
