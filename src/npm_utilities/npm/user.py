"""npm user entity (`https://www.npmjs.com/~username`)."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from npm_utilities.core.config import get_config
from npm_utilities.core.errors import InvalidUser
from npm_utilities.core.scraping.document import fetch
from npm_utilities.extractors.user_page import (
    extract_connections,
    extract_user_packages,
    extract_user_snippet,
)
from npm_utilities.npm.package import Package

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class User:
    username: str

    @property
    def url(self) -> str:
        return f"{get_config().endpoints.user}{self.username}"

    def _invalid(self, exc: Exception) -> InvalidUser:
        logger.warning("Operation on user %s failed: %r", self.username, exc)
        return InvalidUser(self.username)

    async def snippet(self) -> Dict[str, Optional[str]]:
        """Username, display name and avatar URL."""
        try:
            soup = await fetch(self.url)
            return extract_user_snippet(soup)
        except Exception as e:
            raise self._invalid(e) from None

    async def connections(self) -> List[Dict[str, Optional[str]]]:
        """Linked accounts as {"username", "link"} dicts."""
        try:
            soup = await fetch(self.url)
            return extract_connections(soup)
        except Exception as e:
            raise self._invalid(e) from None

    async def packages(self) -> List[Package]:
        try:
            soup = await fetch(self.url)
            names = extract_user_packages(soup)
        except Exception as e:
            raise self._invalid(e) from None
        return [Package(name) for name in names]
