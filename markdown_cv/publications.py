"""PUBLICATIONS and PRESENTATIONS sections.

Both are bullet lists whose items are often soft-wrapped over several
lines. Publications keep inline formatting (rendered to HTML) and may carry
nested `+ description` lines; presentations are reduced to plain text with
their leading year(s) split off.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Protocol, Tuple

from .model import PresentationEntry, PublicationEntry
from .text import RE_BULLET, collapse_ws, strip_md

_RE_NESTED_PLUS = re.compile(r"^\s+\+\s+(.*)$")
_RE_PLUS_PREFIX = re.compile(r"^\s*\+\s+")

_YEARS = r"\d{4}(?:\s*[–—-]\s*\d{4}|(?:\s*,\s*\d{4})*)?"
_RE_YEARS_COLON = re.compile(rf"^({_YEARS})\s*:\s*(.+)$")
_RE_YEARS_SPACE = re.compile(rf"^({_YEARS})\s+(.*)$")
_RE_ANY_YEAR = re.compile(r"\b\d{4}\b")

DESCRIPTION_HTML = '<div class="pub-description"><em>{}</em></div>'


class InlineRenderer(Protocol):
    def render_inline(self, text: str) -> str:
        ...


def flatten_bullet_paragraphs(lines: List[str]) -> List[str]:
    """Join each `- ` bullet with its soft-wrapped continuation lines.

    A blank line or the next bullet ends the entry; text before the first
    bullet is ignored. Entries come back inline-stripped.
    """
    out: List[str] = []
    current: Optional[str] = None
    for raw in lines:
        line = raw or ""
        m = RE_BULLET.match(line)
        if m:
            if current and current.strip():
                out.append(strip_md(current))
            current = m.group(1).strip()
        elif current:
            if not line.strip():
                out.append(strip_md(current))
                current = None
            else:
                current += " " + line.strip()
    if current and current.strip():
        out.append(strip_md(current))
    return out


# =============================================================================
# Publications
# =============================================================================


@dataclass
class _OpenPublication:
    main_parts: List[str]
    descriptions: List[str] = field(default_factory=list)

    def close(self, renderer: InlineRenderer) -> Optional[PublicationEntry]:
        main = collapse_ws(" ".join(self.main_parts))
        if not main:
            return None
        html = renderer.render_inline(main)
        for desc in self.descriptions:
            text = _RE_PLUS_PREFIX.sub("", desc).strip()
            if text:
                html += DESCRIPTION_HTML.format(renderer.render_inline(text))
        return PublicationEntry(html=html)


def _closed(current: Optional[_OpenPublication], renderer: InlineRenderer) -> List[PublicationEntry]:
    if current is None:
        return []
    entry = current.close(renderer)
    return [entry] if entry is not None else []


def parse_publications(lines: List[str], renderer: InlineRenderer) -> List[PublicationEntry]:
    """Group bullets, continuation lines and `+ ` descriptions into rendered entries."""
    items: List[PublicationEntry] = []
    current: Optional[_OpenPublication] = None
    for raw in lines:
        line = raw or ""
        top = RE_BULLET.match(line)
        if top or not line.strip():
            items.extend(_closed(current, renderer))
            current = _OpenPublication([top.group(1).strip()]) if top else None
            continue
        if current is None:
            continue
        nested = _RE_NESTED_PLUS.match(line)
        if nested:
            current.descriptions.append(nested.group(1))
        else:
            current.main_parts.append(line.strip())
    items.extend(_closed(current, renderer))
    return items


# =============================================================================
# Presentations
# =============================================================================


def _normalize_years(years: str) -> str:
    return collapse_ws(re.sub(r"\s*,\s*", ", ", years))


def years_with_colon(entry: str) -> Optional[PresentationEntry]:
    """'2019, 2021: Talk title'."""
    m = _RE_YEARS_COLON.match(entry)
    if not m:
        return None
    return PresentationEntry(years=_normalize_years(m.group(1)), title=m.group(2).strip())


def years_with_space(entry: str) -> Optional[PresentationEntry]:
    """'2019–2020 Talk title'."""
    m = _RE_YEARS_SPACE.match(entry)
    if not m:
        return None
    return PresentationEntry(years=_normalize_years(m.group(1)), title=m.group(2).strip())


def years_anywhere(entry: str) -> Optional[PresentationEntry]:
    return PresentationEntry(years=", ".join(_RE_ANY_YEAR.findall(entry)), title=entry)


PresentationStrategy = Callable[[str], Optional[PresentationEntry]]

PRESENTATION_STRATEGIES: Tuple[Tuple[str, PresentationStrategy], ...] = (
    ("years_with_colon", years_with_colon),
    ("years_with_space", years_with_space),
    ("years_anywhere", years_anywhere),
)


def parse_presentation(entry: str) -> PresentationEntry:
    text = entry.strip()
    for _name, strategy in PRESENTATION_STRATEGIES:
        found = strategy(text)
        if found is not None:
            return found
    return PresentationEntry(title=text)


def parse_presentations(lines: List[str]) -> List[PresentationEntry]:
    return [parse_presentation(entry) for entry in flatten_bullet_paragraphs(lines)]
