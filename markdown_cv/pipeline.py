"""Markdown CV -> structured data -> HTML.

Usage:
    from markdown_cv.pipeline import extract, render_html

    result = extract(body, override={"name": "Ada Lovelace"})
    result.data["experience"]      # always a list
    result.has_structured          # False -> result.content_html holds the full render

    html = render_html(Path("cv.md").read_text(), RenderOptions(template_name="classic"))
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .io_utils import split_front_matter
from .markdown import MarkdownRenderer
from .model import ResumeDocument
from .overlays import merge_override
from .parsing import parse_structured
from .templating import DEFAULT_TEMPLATE, load_template_dir, render_template


@dataclass(frozen=True)
class Extraction:
    document: ResumeDocument
    data: Dict[str, Any] = field(default_factory=dict)
    has_structured: bool = False
    content_html: str = ""


@dataclass(frozen=True)
class RenderOptions:
    """Presentation settings passed through to the template."""

    template_name: str = DEFAULT_TEMPLATE
    template_path: Optional[Path] = None
    primary_color: str = "#0f172a"
    page_size: str = "A4"
    show_header: bool = True
    show_footer: bool = True


def extract(
    markdown: str,
    override: Optional[Mapping[str, Any]] = None,
    renderer: Optional[MarkdownRenderer] = None,
) -> Extraction:
    """Parse a Markdown body and overlay `override` onto the result.

    When any recognised section produced content the full-document HTML is
    left empty so templates do not show the same material twice.
    """
    renderer = renderer or MarkdownRenderer()
    document, has_structured = parse_structured(markdown or "", renderer)
    content_html = "" if has_structured else renderer.render(markdown or "")
    return Extraction(
        document=document,
        data=merge_override(document, override),
        has_structured=has_structured,
        content_html=content_html,
    )


def extract_document(text: str, renderer: Optional[MarkdownRenderer] = None) -> Extraction:
    """Like extract(), reading the override from the document's front matter."""
    front_matter, body = split_front_matter(text)
    return extract(body, front_matter, renderer)


def build_context(extraction: Extraction, css: str, options: RenderOptions) -> Dict[str, Any]:
    return {
        "css": css,
        "primary_color": options.primary_color,
        "page_size": options.page_size,
        "show_header": options.show_header,
        "show_footer": options.show_footer,
        "data": extraction.data,
        "content_html": extraction.content_html,
    }


def render_html(text: str, options: Optional[RenderOptions] = None) -> str:
    options = options or RenderOptions()
    td = load_template_dir(options.template_name, options.template_path)
    extraction = extract_document(text)
    return render_template(td, build_context(extraction, td.read_css(), options))
