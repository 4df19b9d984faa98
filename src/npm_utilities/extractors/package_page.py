"""
Extraction rules for the npm package page (main, dependencies and versions tabs).

Each rule takes a parsed page and returns plain values. Missing nodes give
empty values; they never raise.
"""

from typing import Dict, List, Optional, Union

from bs4 import BeautifulSoup

from npm_utilities.core.scraping.document import (
    attr_of,
    child_tags,
    children_of_all,
    inner_html,
    previous_tag,
    text_of,
)
from npm_utilities.core.scraping.normalizer import label_key

DESCRIPTION = 'head > meta[name="description"]'
SIDEBAR = "#top > div.w-third-l"
KEYWORDS = "#top > div.w-two-thirds-l > section > div.pv4 > ul"
README = "#readme"
DEPENDENCY_GROUPS = "#dependencies > ul"
VERSION_HISTORY = "#versions > div > ul:nth-child(5)"
COLLABORATOR_AVATARS = "div > a > img"

Snippet = Dict[str, Union[str, List[str], None]]


def extract_snippet(soup: BeautifulSoup) -> Snippet:
    """
    Read the description, keywords and every labeled sidebar value.

    Sidebar values are keyed by their label, normalized to camelCase
    ("Unpacked Size" -> "unpackedSize"). The weekly downloads counter has no
    label node of its own and lands under "weeklyDownloads".
    """
    result: Snippet = {
        "description": attr_of(soup, DESCRIPTION, "content"),
        "keywords": [],
    }

    sidebar = soup.select_one(SIDEBAR)
    if sidebar is not None:
        for p in sidebar.find_all("p"):
            label = previous_tag(p)
            key = label_key(label.get_text().strip() if label is not None else "")
            result[key] = p.get_text().strip()

    for li in children_of_all(soup, KEYWORDS):
        result["keywords"].append(text_of(li, "a"))

    return result


def extract_dependency_groups(soup: BeautifulSoup) -> List[List[str]]:
    """Package names per dependency list, in page order."""
    groups = []
    for ul in soup.select(DEPENDENCY_GROUPS):
        groups.append([text_of(li, "a") for li in child_tags(ul)])
    return groups


def extract_readme(soup: BeautifulSoup) -> Optional[str]:
    return inner_html(soup, README)


def extract_versions(soup: BeautifulSoup) -> List[str]:
    return [text_of(li, "a") for li in children_of_all(soup, VERSION_HISTORY)]


def extract_collaborators(soup: BeautifulSoup) -> List[str]:
    # every avatar wrapped in a link is a maintainer
    return [img.get("title", "") for img in soup.select(COLLABORATOR_AVATARS)]
