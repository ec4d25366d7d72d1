"""Markdown-to-HTML rendering with canonical link hrefs.

Inline renders (publication titles, descriptions) and full-document renders
(the unstructured fallback) share one parser, so both rewrite hrefs through
`to_absolute_url` identically: `[site](example.com)` links to
`https://example.com` while its text stays `site`.
"""
from __future__ import annotations

from typing import Any, Callable, Dict

from markdown_it import MarkdownIt

from .links import to_absolute_url

_OPTIONS = {"html": True, "linkify": True, "typographer": True, "breaks": False}


def _render_link_open(renderer: Any, tokens, idx, options, env) -> str:
    # Links added by plugins after parsing still get a canonical href.
    token = tokens[idx]
    href = token.attrGet("href")
    if href:
        normalize = env.get("normalize_href", to_absolute_url)
        token.attrSet("href", normalize(href))
    return renderer.renderToken(tokens, idx, options, env)


class MarkdownRenderer:
    """markdown-it parser configured like the JS markdown-it defaults."""

    def __init__(self, normalize_href: Callable[[Any], str] = to_absolute_url):
        md = MarkdownIt("js-default", _OPTIONS)
        encode_link = md.normalizeLink
        md.normalizeLink = lambda url: encode_link(normalize_href(url))
        md.add_render_rule("link_open", _render_link_open)
        self._md = md
        self._normalize_href = normalize_href

    def _env(self) -> Dict[str, Any]:
        return {"normalize_href": self._normalize_href}

    def render(self, text: str) -> str:
        return self._md.render(text or "", self._env())

    def render_inline(self, text: str) -> str:
        return self._md.renderInline(text or "", self._env())
