"""Inline Markdown helpers shared by the section parsers."""
from __future__ import annotations

import re
from typing import List, Optional

__all__ = [
    "RE_BULLET",
    "strip_md",
    "collapse_ws",
    "bullet_text",
    "split_items",
]

RE_BULLET = re.compile(r"^\s*-\s+(.*)$")
_RE_BOLD = re.compile(r"\*\*(.*?)\*\*")
_RE_STAR_ITALIC = re.compile(r"\*(.*?)\*")
_RE_UNDERSCORE_ITALIC = re.compile(r"_(.*?)_")
_RE_LINK = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
_RE_ITEM_SEP = re.compile(r",|\band\b")


def collapse_ws(s: str) -> str:
    return re.sub(r"\s+", " ", s or "").strip()


def strip_md(s: Optional[str]) -> str:
    """Reduce inline Markdown to plain text.

    - Drops **bold**, *italic* and _italic_ markers
    - Replaces [text](url) with text
    - Collapses whitespace
    """
    if not s:
        return ""
    s = _RE_BOLD.sub(r"\1", s)
    s = _RE_STAR_ITALIC.sub(r"\1", s)
    s = _RE_UNDERSCORE_ITALIC.sub(r"\1", s)
    s = _RE_LINK.sub(r"\1", s)
    return collapse_ws(s)


def bullet_text(line: str) -> Optional[str]:
    """Return the text of a `- ` bullet line, or None for any other line."""
    m = RE_BULLET.match(line or "")
    return m.group(1) if m else None


def split_items(text: str) -> List[str]:
    """Split 'a, b and c' into ['a', 'b', 'c'], inline-stripped, empties dropped."""
    if not text:
        return []
    out = []
    for part in _RE_ITEM_SEP.split(text):
        token = strip_md(part)
        if token:
            out.append(token)
    return out
