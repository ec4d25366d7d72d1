"""Section splitting and the H3 entry blocks inside EXPERIENCE / EDUCATION.

A CV body is cut into `## SECTION` regions first; the experience and
education regions are then cut into `### Heading` entry blocks, one per
job or degree.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from .dates import parse_date_range
from .model import DateRange, EducationEntry, ExperienceEntry
from .text import RE_BULLET, bullet_text, strip_md

_RE_H2 = re.compile(r"^##\s+(.*)$")
_RE_H3 = re.compile(r"^###\s+(.*)$")
_RE_AT = re.compile(r"^(.*?)\s+at\s+(.*)$", re.I)


def split_lines(markdown: str) -> List[str]:
    return re.split(r"\r?\n", markdown or "")


def split_sections(markdown: str) -> Dict[str, List[str]]:
    """Map upper-cased H2 heading text to the lines below it.

    Lines before the first heading and sections whose heading text is empty
    are discarded; a repeated heading replaces the earlier section.
    """
    sections: Dict[str, List[str]] = {}
    current: Optional[List[str]] = None
    for line in split_lines(markdown):
        m = _RE_H2.match(line)
        if m:
            key = m.group(1).strip().upper()
            current = None
            if key:
                current = sections[key] = []
            continue
        if current is not None:
            current.append(line)
    return sections


@dataclass(frozen=True)
class EntryBlock:
    heading: str
    body_lines: Tuple[str, ...] = ()


def collect_entry_blocks(lines: List[str]) -> List[EntryBlock]:
    blocks: List[EntryBlock] = []
    heading: Optional[str] = None
    body: List[str] = []
    for line in lines:
        m = _RE_H3.match(line)
        if m:
            if heading is not None:
                blocks.append(EntryBlock(heading, tuple(body)))
            heading, body = m.group(1).strip(), []
        elif heading is not None:
            body.append(line)
    if heading is not None:
        blocks.append(EntryBlock(heading, tuple(body)))
    return blocks


# =============================================================================
# Heading strategies
# =============================================================================

# Each strategy returns (primary, secondary): role/degree first,
# company/school second.
HeadingStrategy = Callable[[str], Optional[Tuple[str, str]]]


def split_on_colon(heading: str) -> Optional[Tuple[str, str]]:
    """'Acme: Engineer' names the organisation first."""
    if ":" not in heading:
        return None
    left, _, right = heading.partition(":")
    return right.strip(), left.strip()


def split_on_at(heading: str) -> Optional[Tuple[str, str]]:
    """'Engineer at Acme' names the role first."""
    m = _RE_AT.match(heading)
    if not m:
        return None
    return m.group(1).strip(), m.group(2).strip()


def whole_heading(heading: str) -> Optional[Tuple[str, str]]:
    return heading, ""


HEADING_STRATEGIES: Tuple[Tuple[str, HeadingStrategy], ...] = (
    ("split_on_colon", split_on_colon),
    ("split_on_at", split_on_at),
    ("whole_heading", whole_heading),
)


def split_heading(heading: str) -> Tuple[str, str]:
    cleaned = strip_md(heading)
    for _name, strategy in HEADING_STRATEGIES:
        found = strategy(cleaned)
        if found is not None:
            return found
    return cleaned, ""


# =============================================================================
# Block bodies
# =============================================================================


def _block_body(block: EntryBlock) -> Tuple[DateRange, List[str]]:
    """Return the date range (first non-bullet line) and cleaned bullets."""
    body = [ln for ln in block.body_lines if ln.strip()]
    date_line = next((ln for ln in body if not RE_BULLET.match(ln)), "")
    dates = parse_date_range(date_line) if date_line else DateRange()
    bullets = [strip_md(text) for text in map(bullet_text, body) if text is not None]
    return dates, bullets


def parse_experience(lines: List[str]) -> List[ExperienceEntry]:
    items: List[ExperienceEntry] = []
    for block in collect_entry_blocks(lines):
        role, company = split_heading(block.heading)
        dates, bullets = _block_body(block)
        items.append(ExperienceEntry(role=role, company=company, dates=dates, highlights=tuple(bullets)))
    return items


def parse_education(lines: List[str]) -> List[EducationEntry]:
    items: List[EducationEntry] = []
    for block in collect_entry_blocks(lines):
        degree, school = split_heading(block.heading)
        dates, bullets = _block_body(block)
        items.append(EducationEntry(degree=degree, school=school, dates=dates, summary=" • ".join(bullets)))
    return items
