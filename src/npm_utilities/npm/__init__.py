from .package import Dependencies, Package
from .search import SearchOptions, SearchResult
from .status import StatusMonitor
from .user import User

__all__ = [
    "Package",
    "Dependencies",
    "SearchOptions",
    "SearchResult",
    "StatusMonitor",
    "User",
]
