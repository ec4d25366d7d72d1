from __future__ import annotations

import re
from typing import Any, Dict, List, Optional, Tuple

from .model import Links, ProjectEntry, ResumeDocument
from .publications import InlineRenderer, parse_presentations, parse_publications
from .sections import parse_education, parse_experience, split_sections
from .skills import parse_skills_flat, parse_skills_structured
from .text import bullet_text, collapse_ws, strip_md


# Recognised H2 headings; for the tuples the first one present wins.
CONTACT = "CONTACT"
WEB_PRESENCE = "WEB PRESENCE"
SUMMARY = "SUMMARY"
EXPERIENCE = "EXPERIENCE"
EDUCATION = "EDUCATION"
LANGUAGES = "LANGUAGES"
PROJECT_HEADINGS = ("PRODUCTS AND OPEN SOURCE SOFTWARE", "PRODUCTS", "OPEN SOURCE SOFTWARE")
SKILL_HEADINGS = ("KEY SKILLS", "SKILLS")
PRESENTATION_HEADINGS = ("SELECTED CONFERENCE PRESENTATIONS", "CONFERENCE PRESENTATIONS", "PRESENTATIONS")
PUBLICATION_HEADINGS = ("KEY SCIENTIFIC PUBLICATIONS", "PUBLICATIONS")

CONTACT_FIELDS = ("name", "title", "degree", "location", "email", "phone")

_RE_KEY_VALUE = re.compile(r"^([A-Za-z][A-Za-z \-]*)\s*:\s*(.+)$")
_RE_LINK_BULLET = re.compile(r"^\s*-\s*\[([^\]]+)\]\(([^)]+)\)")
_RE_URL_BULLET = re.compile(r"^\s*-\s*(https?://\S+)")
_RE_PROJECT_COLON = re.compile(r"^\s*-\s*\[([^\]]+)\]\(([^)]+)\)\s*:\s*(.*)$")
_RE_PROJECT = re.compile(r"^\s*-\s*\[([^\]]+)\]\(([^)]+)\)\s*(.*)$")
_RE_KNOWN_PLATFORM = re.compile(r"github\.com|linkedin\.com|bsky\.app")


def first_section(sections: Dict[str, List[str]], headings: Tuple[str, ...]) -> Optional[List[str]]:
    """Lines of the first heading in `headings` that the document uses."""
    for heading in headings:
        if heading in sections:
            return sections[heading]
    return None


def parse_contact(lines: List[str]) -> Dict[str, str]:
    """Pick `Name: ...`, `Email: ...` etc. out of CONTACT lines."""
    data: Dict[str, str] = {}
    for raw in lines:
        m = _RE_KEY_VALUE.match(raw.strip())
        if not m:
            continue
        key = collapse_ws(m.group(1).lower())
        if key in CONTACT_FIELDS:
            data[key] = strip_md(m.group(2).strip())
    return data


def parse_web_presence(lines: List[str]) -> Links:
    """Sort WEB PRESENCE bullets into GitHub, LinkedIn, Bluesky and a website."""
    links: List[Tuple[str, str]] = []
    for raw in lines:
        m = _RE_LINK_BULLET.match(raw)
        if m:
            links.append((m.group(1).strip(), m.group(2).strip()))
            continue
        m = _RE_URL_BULLET.match(raw)
        if m:
            links.append((m.group(1), m.group(1)))
    found: Dict[str, str] = {}
    for text, url in links:
        u = url.lower()
        if "github.com" in u:
            found["github"] = text or url
        elif "linkedin.com" in u:
            found["linkedin"] = text or url
        elif "bsky.app" in u:
            found["bluesky"] = text or url
    site = next((pair for pair in links if not _RE_KNOWN_PLATFORM.search(pair[1].lower())), None)
    if site:
        found["website"] = site[0] or site[1]
    return Links(**found)


def parse_summary(lines: List[str]) -> str:
    return strip_md(collapse_ws(" ".join(lines)))


def parse_bullets(lines: List[str]) -> List[str]:
    return [strip_md(text) for text in map(bullet_text, lines) if text is not None]


def parse_projects(lines: List[str]) -> List[ProjectEntry]:
    """`- [name](link): summary` bullets; other lines are skipped."""
    items: List[ProjectEntry] = []
    for raw in lines:
        m = _RE_PROJECT_COLON.match(raw) or _RE_PROJECT.match(raw)
        if m:
            items.append(ProjectEntry(name=strip_md(m.group(1)), link=m.group(2).strip(), summary=strip_md(m.group(3))))
    return items


def parse_structured(markdown: str, renderer: InlineRenderer) -> Tuple[ResumeDocument, bool]:
    """Recover every recognised section of a Markdown CV body.

    Returns the document and whether any section produced content; absent or
    malformed sections simply leave their fields at the defaults.
    """
    sections = split_sections(markdown)
    fields: Dict[str, Any] = {}

    if CONTACT in sections:
        fields.update(parse_contact(sections[CONTACT]))
    if WEB_PRESENCE in sections:
        fields["links"] = parse_web_presence(sections[WEB_PRESENCE])
    if SUMMARY in sections:
        fields["summary"] = parse_summary(sections[SUMMARY])
    if EXPERIENCE in sections:
        fields["experience"] = tuple(parse_experience(sections[EXPERIENCE]))
    if EDUCATION in sections:
        fields["education"] = tuple(parse_education(sections[EDUCATION]))
    if (lines := first_section(sections, PROJECT_HEADINGS)) is not None:
        fields["projects"] = tuple(parse_projects(lines))
    if (lines := first_section(sections, SKILL_HEADINGS)) is not None:
        fields["skills"] = tuple(parse_skills_flat(lines))
        fields["structured_skills"] = tuple(parse_skills_structured(lines))
    if LANGUAGES in sections:
        fields["languages"] = tuple(parse_bullets(sections[LANGUAGES]))
    if (lines := first_section(sections, PRESENTATION_HEADINGS)) is not None:
        fields["presentations"] = tuple(parse_presentations(lines))
    if (lines := first_section(sections, PUBLICATION_HEADINGS)) is not None:
        fields["publications"] = tuple(parse_publications(lines, renderer))

    document = ResumeDocument(**fields)
    return document, document.has_content()
