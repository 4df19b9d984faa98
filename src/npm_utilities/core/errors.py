"""
Error taxonomy for npm-utilities.

Every failure that reaches a caller is one of the kinds below. The
underlying transport or parse error is only written to the log; callers get
the kind plus a message naming the offending subject.
"""

from typing import Optional


class NpmUtilitiesError(Exception):
    """Base exception for all npm-utilities errors."""


class RemoteUnavailable(NpmUtilitiesError):
    """
    Raised by the fetch primitive when a request fails.

    Covers connection errors, non-2xx responses and undecodable JSON bodies.
    """

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        self.reason = reason
        message = f"Could not retrieve {url}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidPackage(NpmUtilitiesError):
    """Raised when an operation on a named package fails."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"{name} is probably invalid.")


class InvalidUser(NpmUtilitiesError):
    """Raised when an operation on a username fails."""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"{username} is probably invalid.")


class MonitorUnavailable(NpmUtilitiesError):
    """The status page could not be reached or parsed."""


class SearchUnavailable(NpmUtilitiesError):
    """The search page could not be reached or parsed."""

    def __init__(self, message: str = "The website is down or the parser failed to parse it."):
        super().__init__(message)


class InvalidQuery(NpmUtilitiesError, ValueError):
    """Search invoked without query text."""


class InvalidArgument(NpmUtilitiesError, ValueError):
    """A required identifying parameter is missing."""
