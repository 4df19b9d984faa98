"""Extraction rules for the npm search results page."""

from typing import List, Optional, Tuple

from bs4 import BeautifulSoup

from npm_utilities.core.scraping.document import children_of_all, text_of
from npm_utilities.core.scraping.normalizer import parse_count

TOTAL = "#app main > div.bb > div > div:nth-child(1) > h2"
RESULTS = "#app main > div.flex-row-l > div"
RESULT_NAME = "div.w-80 > div.flex.flex-row.items-end.pr3 > a"


def extract_search_results(soup: BeautifulSoup) -> Tuple[List[str], Optional[int]]:
    """Return (package names, total count). The count is None when unreadable."""
    total = parse_count(text_of(soup, TOTAL))
    names = [text_of(section, RESULT_NAME) for section in children_of_all(soup, RESULTS)]
    return names, total
