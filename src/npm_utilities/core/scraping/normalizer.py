"""Normalization helpers for scraped values.

Label text → camelCase keys, and loose integer parsing for counters.
"""

from __future__ import annotations

import re
from typing import Optional

# Key used for a sidebar value with no label node before it; on the package
# page that is the weekly downloads counter.
UNLABELED_KEY = "weeklyDownloads"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def normalize_label(label: str) -> str:
    """Turn a space separated label into a camelCase key.

    "weekly downloads" -> "weeklyDownloads", "Total Files" -> "totalFiles".
    """
    parts = label.split(" ")
    out = []
    for i, part in enumerate(parts):
        if i == 0:
            out.append(part[:1].lower() + part[1:])
        else:
            out.append(part[:1].upper() + part[1:])
    return "".join(out)


def label_key(label: Optional[str]) -> str:
    key = normalize_label(label or "")
    return key or UNLABELED_KEY


def parse_count(text: Optional[str]) -> Optional[int]:
    """Leading integer of `text` ("1,234 packages found" -> 1234), else None."""
    if not text:
        return None
    m = _LEADING_INT.match(text.replace(",", ""))
    if not m:
        return None
    return int(m.group(1))
