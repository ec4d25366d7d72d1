"""Date range extraction from a free-text line like '2019 – Present'."""
from __future__ import annotations

import re
from typing import Callable, Optional, Tuple

from .model import DateRange
from .text import strip_md

PRESENT = "Present"

_RE_DASH = re.compile(r"^\s*(.+?)\s*[–—-]\s*(.+?)\s*$")
_RE_WORD = re.compile(r"^\s*(.+?)\s+(?:to|until)\s+(.+?)\s*$", re.I)
_RE_PRESENT = re.compile(r"^present$", re.I)

DateStrategy = Callable[[str], Optional[DateRange]]


def _normalize_end(end: str) -> str:
    end = end.strip()
    return PRESENT if _RE_PRESENT.match(end) else end


def _from_match(m: Optional[re.Match]) -> Optional[DateRange]:
    if not m:
        return None
    return DateRange(start=m.group(1).strip(), end=_normalize_end(m.group(2)))


def dash_separated(line: str) -> Optional[DateRange]:
    """'2019 – 2021', '2019—Present' or '2019 - now' (en dash, em dash or hyphen)."""
    return _from_match(_RE_DASH.match(line))


def word_separated(line: str) -> Optional[DateRange]:
    """'2019 to 2021' or 'May 2019 until present'."""
    return _from_match(_RE_WORD.match(line))


def whole_line(line: str) -> Optional[DateRange]:
    return DateRange(start=line, end="")


# Evaluated in order; the first strategy returning a range wins.
DATE_STRATEGIES: Tuple[Tuple[str, DateStrategy], ...] = (
    ("dash_separated", dash_separated),
    ("word_separated", word_separated),
    ("whole_line", whole_line),
)


def parse_date_range(line: Optional[str]) -> DateRange:
    cleaned = strip_md(line)
    for _name, strategy in DATE_STRATEGIES:
        found = strategy(cleaned)
        if found is not None:
            return found
    return DateRange(start=cleaned)
