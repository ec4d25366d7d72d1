"""Href canonicalization for user-written links.

Every function here is total: any input (None included) yields a string and
nothing raises. Only hrefs are rewritten; the caller keeps the display text
exactly as the author wrote it.
"""
from __future__ import annotations

import re
from typing import Any
from urllib.parse import urlsplit, urlunsplit

__all__ = [
    "to_absolute_url",
    "to_website_href",
    "to_github_href",
    "to_linkedin_href",
]

_RE_SCHEME = re.compile(r"^[a-z][a-z0-9+.\-]*://", re.I)
_RE_HTTP = re.compile(r"^http://", re.I)
_RE_HTTP_ANY = re.compile(r"^https?://", re.I)
_RE_GITHUB_HOST = re.compile(r"^([^/]*\.)?github\.com", re.I)
_RE_LINKEDIN_HOST = re.compile(r"^([^/]*\.)?linkedin\.com", re.I)
_RE_BARE_LINKEDIN = re.compile(r"^(https?://)?(linkedin\.com)", re.I)


def _clean(s: Any) -> str:
    return ("" if s is None else str(s)).strip()


def _upgrade_http(v: str) -> str:
    return _RE_HTTP.sub("https://", v, count=1)


def to_absolute_url(s: Any) -> str:
    """Turn link text into an absolute https href.

    'example.com/x' -> 'https://example.com/x'; 'http://a.b' -> 'https://a.b';
    '//cdn.b/x' -> 'https://cdn.b/x'. mailto:, tel:, '#anchor' and '/path'
    pass through untouched.
    """
    v = _clean(s)
    if not v:
        return ""
    lower = v.lower()
    if lower.startswith(("mailto:", "tel:")):
        return v
    if _RE_SCHEME.match(v):
        return _upgrade_http(v)
    if v.startswith("//"):
        return "https:" + v
    if v.startswith(("#", "/")):
        return v
    return "https://" + v.lstrip("/")


def _website_fallback(s: Any) -> str:
    v = _RE_HTTP_ANY.sub("", _clean(s), count=1)
    if not v:
        return ""
    return "https://www." + re.sub(r"^www\.", "", v, flags=re.I)


def to_website_href(s: Any) -> str:
    """Absolute href for a personal site, adding www. to bare two-label hosts."""
    href = to_absolute_url(s)
    try:
        parts = urlsplit(href)
        host = parts.hostname
    except ValueError:
        return _website_fallback(s)
    if not parts.scheme:
        # relative ('#x', '/x') or empty: not a URL of its own
        return _website_fallback(s)
    if not host or host.startswith("www.") or len(host.split(".")) != 2:
        return href
    netloc = re.sub(r"^((?:[^@]*@)?)", r"\1www.", parts.netloc, count=1)
    return urlunsplit(parts._replace(netloc=netloc))


def to_github_href(s: Any) -> str:
    """'@alice', 'alice' or 'github.com/alice' -> 'https://github.com/alice'."""
    v = _clean(s)
    if not v:
        return ""
    if _RE_SCHEME.match(v):
        return _upgrade_http(v)
    if _RE_GITHUB_HOST.match(v):
        return "https://" + v
    handle = re.sub(r"^github\.com/", "", v.lstrip("@"), flags=re.I)
    return "https://github.com/" + handle


def to_linkedin_href(s: Any) -> str:
    """'@bob', 'bob' or 'linkedin.com/in/bob' -> 'https://www.linkedin.com/in/bob'."""
    v = _clean(s)
    if not v:
        return ""
    if _RE_SCHEME.match(v):
        return _RE_BARE_LINKEDIN.sub(r"\1www.\2", _upgrade_http(v), count=1)
    if _RE_LINKEDIN_HOST.match(v):
        return "https://" + _RE_BARE_LINKEDIN.sub(r"www.\2", v, count=1)
    handle = re.sub(r"^linkedin\.com/in/", "", v.lstrip("@"), flags=re.I)
    return "https://www.linkedin.com/in/" + handle
