"""Extraction rules for an npm user profile page (`/~username`)."""

from typing import Dict, List, Optional

from bs4 import BeautifulSoup

from npm_utilities.core.scraping.document import attr_of, children_of_all, text_of

PROFILE = "#app main > div > div.pv4"
USERNAME = f"{PROFILE} > div:nth-child(2) > h2"
FULL_NAME = f"{PROFILE} > div:nth-child(2) > div > div"
AVATAR = f"{PROFILE} > div:nth-child(1) > a > img"
CONNECTIONS = f"{PROFILE} > div:nth-child(2) > ul"
PACKAGE_GRID = "#app main > div > div.flex-auto > div > div"


def extract_user_snippet(soup: BeautifulSoup) -> Dict[str, Optional[str]]:
    return {
        "username": text_of(soup, USERNAME),
        "name": text_of(soup, FULL_NAME),
        "avatar": attr_of(soup, AVATAR, "src"),
    }


def extract_connections(soup: BeautifulSoup) -> List[Dict[str, Optional[str]]]:
    """Linked accounts (github, twitter, ...) in profile order."""
    return [
        {"username": text_of(li, "a"), "link": attr_of(li, "a", "href")}
        for li in children_of_all(soup, CONNECTIONS)
    ]


def extract_user_packages(soup: BeautifulSoup) -> List[str]:
    return [text_of(section, "a > h3") for section in children_of_all(soup, PACKAGE_GRID)]
