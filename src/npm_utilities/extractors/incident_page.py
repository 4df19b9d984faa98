"""Extraction rule for a status page incident (`/incidents/<uuid>`)."""

from typing import Dict, List, Union

from bs4 import BeautifulSoup

from npm_utilities.core.scraping.document import child_tags, text_of

TITLE = ".page-title"
UPDATE_ROWS = ".row.update-row"
UPDATE_TYPE = "div.update-title"
UPDATE_BODY = "div.update-body"
UPDATE_TIMESTAMP = "div.update-timestamp"

Incident = Dict[str, Union[str, List[Dict[str, str]]]]


def extract_incident(soup: BeautifulSoup) -> Incident:
    """Headline plus one action per update row, as published."""
    title = soup.select_one(TITLE)
    children = child_tags(title)
    message = children[0].get_text().strip() if children else ""

    actions = []
    for row in soup.select(UPDATE_ROWS):
        actions.append(
            {
                "type": text_of(row, UPDATE_TYPE),
                "summary": text_of(row, UPDATE_BODY),
                "timestamp": text_of(row, UPDATE_TIMESTAMP),
            }
        )

    return {"message": message, "actions": actions}
