"""Overlay front-matter fields onto the data parsed from the Markdown body."""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from .links import to_absolute_url, to_github_href, to_linkedin_href, to_website_href
from .model import COLLECTION_FIELDS, IDENTITY_FIELDS, LINK_FIELDS, ResumeDocument


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_list(value: Any) -> List[Any]:
    if value is None or value == "":
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    # a lone value (`skills: Python, Go`) is kept as a one-item list
    return [value]


def _with_link_href(project: Any) -> Any:
    if not isinstance(project, Mapping):
        return project
    return {**project, "link_href": to_absolute_url(project.get("link") or "")}


def apply_defaults(data: Dict[str, Any]) -> Dict[str, Any]:
    """Fill every identity/link field with a string and every collection with a list."""
    out = dict(data)
    for k in IDENTITY_FIELDS + LINK_FIELDS + ("summary",):
        out[k] = _as_text(out.get(k))
    for k in COLLECTION_FIELDS:
        out[k] = _as_list(out.get(k))
    return out


def merge_override(document: ResumeDocument, override: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Shallow field-level overlay: a supplied value replaces the parsed one whole.

    Lists are never merged element-wise, and keys unknown to the parser pass
    through untouched for templates to use. Link hrefs are derived from the
    merged display text, so an overridden `github: '@alice'` still links to
    https://github.com/alice.
    """
    merged = apply_defaults({**document.to_dict(), **dict(override or {})})
    merged["website_href"] = to_website_href(merged["website"])
    merged["github_href"] = to_github_href(merged["github"])
    merged["linkedin_href"] = to_linkedin_href(merged["linkedin"])
    merged["projects"] = [_with_link_href(p) for p in merged["projects"]]
    return merged
