"""KEY SKILLS parsing.

Two passes run over the same bullets and are kept side by side:

- a flat pass collecting every value after a `Label:` prefix (used as tags)
- a structured pass keeping categories and their nested bullets

They can disagree (a bare `- Cloud` bullet is a category with no items but
contributes no tags); templates read the two fields independently.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .model import SkillCategory, SkillSubitem
from .text import split_items, strip_md

_RE_FLAT = re.compile(r"^\s*-\s*(?:\*\*([^*]+)\*\*|([^:]+))\s*:\s*(.+)$")
_RE_ANY_BULLET = re.compile(r"^\s*-\s*(.+)$")
_RE_BULLET_PREFIX = re.compile(r"^\s*-\s+")
_RE_BOLD_CATEGORY = re.compile(r"^\*\*([^*]+)\*\*\s*:?\s*(.*)$")
_RE_COLON_CATEGORY = re.compile(r"^([^:]+):\s*(.*)$")

# Bullets indented deeper than this open sub-items.
TOP_LEVEL_MAX_INDENT = 1


def _flat_values(line: str) -> List[str]:
    m = _RE_FLAT.match(line)
    if m:
        return split_items(m.group(3))
    n = _RE_ANY_BULLET.match(line)
    if n and ":" in n.group(1):
        return split_items(n.group(1).split(":", 1)[1])
    return []


def parse_skills_flat(lines: List[str]) -> List[str]:
    """Every skill named after a `Label:` prefix, de-duplicated in first-seen order."""
    skills: List[str] = []
    for line in lines:
        skills.extend(_flat_values(line))
    return list(dict.fromkeys(skills))


def _indent_width(line: str) -> int:
    lead = line[: len(line) - len(line.lstrip())]
    return len(lead.replace("\t", "    "))


def _split_category(text: str) -> Tuple[str, str]:
    """Return (category, remainder) for a top-level bullet's raw text."""
    m = _RE_BOLD_CATEGORY.match(text)
    if m:
        return strip_md(m.group(1)).rstrip(":").strip(), m.group(2).strip()
    cleaned = strip_md(text)
    m = _RE_COLON_CATEGORY.match(cleaned)
    if m:
        return m.group(1).strip(), m.group(2).strip()
    return cleaned, ""


def _subitem(text: str) -> SkillSubitem:
    cleaned = strip_md(text)
    if ":" in cleaned:
        label, _, rest = cleaned.partition(":")
        return SkillSubitem(label=label.strip(), items=tuple(split_items(rest)))
    return SkillSubitem(text=cleaned)


@dataclass
class _OpenCategory:
    category: str
    items: List[str]
    subitems: List[SkillSubitem] = field(default_factory=list)

    def close(self) -> SkillCategory:
        return SkillCategory(self.category, tuple(self.items), tuple(self.subitems))


def parse_skills_structured(lines: List[str]) -> List[SkillCategory]:
    closed: List[SkillCategory] = []
    current: Optional[_OpenCategory] = None
    for raw in lines:
        if not _RE_BULLET_PREFIX.match(raw):
            continue
        text = _RE_BULLET_PREFIX.sub("", raw, count=1)
        if _indent_width(raw) <= TOP_LEVEL_MAX_INDENT:
            if current is not None:
                closed.append(current.close())
            category, rest = _split_category(text)
            current = _OpenCategory(category, split_items(rest))
        elif current is not None:
            current.subitems.append(_subitem(text))
    if current is not None:
        closed.append(current.close())
    return closed
