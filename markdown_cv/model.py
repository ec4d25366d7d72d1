"""Value objects produced by one extraction pass over a Markdown CV.

Everything here is frozen and every sequence defaults to an empty tuple, so
templates and callers never have to check for missing fields.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class DateRange:
    start: str = ""
    end: str = ""


@dataclass(frozen=True)
class Links:
    """Display text of the personal links, exactly as written."""

    website: str = ""
    github: str = ""
    linkedin: str = ""
    bluesky: str = ""


@dataclass(frozen=True)
class SkillSubitem:
    """Nested skill bullet: a labeled group (label + items) or a free-text note."""

    label: str = ""
    items: Tuple[str, ...] = ()
    text: str = ""

    def to_dict(self) -> Dict[str, Any]:
        if self.text:
            return {"label": self.label, "text": self.text}
        return {"label": self.label, "items": list(self.items)}


@dataclass(frozen=True)
class SkillCategory:
    category: str = ""
    items: Tuple[str, ...] = ()
    subitems: Tuple[SkillSubitem, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "items": list(self.items),
            "subitems": [s.to_dict() for s in self.subitems],
        }


@dataclass(frozen=True)
class ExperienceEntry:
    role: str = ""
    company: str = ""
    dates: DateRange = field(default_factory=DateRange)
    location: str = ""
    summary: str = ""
    highlights: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "role": self.role,
            "company": self.company,
            "start": self.dates.start,
            "end": self.dates.end,
            "location": self.location,
            "summary": self.summary,
            "highlights": list(self.highlights),
        }


@dataclass(frozen=True)
class EducationEntry:
    degree: str = ""
    school: str = ""
    dates: DateRange = field(default_factory=DateRange)
    location: str = ""
    summary: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "degree": self.degree,
            "school": self.school,
            "start": self.dates.start,
            "end": self.dates.end,
            "location": self.location,
            "summary": self.summary,
        }


@dataclass(frozen=True)
class ProjectEntry:
    name: str = ""
    link: str = ""
    summary: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "link": self.link, "summary": self.summary}


@dataclass(frozen=True)
class PublicationEntry:
    html: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"html": self.html}


@dataclass(frozen=True)
class PresentationEntry:
    years: str = ""
    title: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {"years": self.years, "title": self.title}


# Template-facing keys that always hold a string / a list.
IDENTITY_FIELDS = ("name", "title", "degree", "location", "email", "phone")
LINK_FIELDS = ("website", "github", "linkedin", "bluesky")
COLLECTION_FIELDS = (
    "skills",
    "key_skills",
    "languages",
    "tools",
    "experience",
    "education",
    "projects",
    "certifications",
    "publications",
    "presentations",
)


@dataclass(frozen=True)
class ResumeDocument:
    name: str = ""
    title: str = ""
    degree: str = ""
    location: str = ""
    email: str = ""
    phone: str = ""
    links: Links = field(default_factory=Links)
    summary: str = ""
    skills: Tuple[str, ...] = ()
    structured_skills: Tuple[SkillCategory, ...] = ()
    languages: Tuple[str, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    projects: Tuple[ProjectEntry, ...] = ()
    publications: Tuple[PublicationEntry, ...] = ()
    presentations: Tuple[PresentationEntry, ...] = ()

    def has_content(self) -> bool:
        """True when any parser filled in at least one field or entry."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Links):
                if any(getattr(value, k) for k in LINK_FIELDS):
                    return True
            elif value:
                return True
        return False

    def to_dict(self) -> Dict[str, Any]:
        """Flatten into the plain mapping handed to templates and overrides."""
        out: Dict[str, Any] = {k: getattr(self, k) for k in IDENTITY_FIELDS}
        out.update({k: getattr(self.links, k) for k in LINK_FIELDS})
        out["summary"] = self.summary
        out["skills"] = list(self.skills)
        out["key_skills"] = [c.to_dict() for c in self.structured_skills]
        out["languages"] = list(self.languages)
        out["tools"] = []
        out["experience"] = [e.to_dict() for e in self.experience]
        out["education"] = [e.to_dict() for e in self.education]
        out["projects"] = [p.to_dict() for p in self.projects]
        out["certifications"] = []
        out["publications"] = [p.to_dict() for p in self.publications]
        out["presentations"] = [p.to_dict() for p in self.presentations]
        return out
