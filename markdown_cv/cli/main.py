"""markdown-cv command line.

Commands:
  render     - Render a Markdown CV to a standalone HTML page
  extract    - Write the structured data recovered from a Markdown CV
  templates  - List the built-in templates
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Optional, Sequence

import yaml

from .. import __version__
from ..errors import UsageError
from ..io_utils import read_text, write_text, write_yaml_or_json
from ..pipeline import RenderOptions, extract_document, render_html
from ..templating import DEFAULT_TEMPLATE, available_templates
from .app import CLIApp

PAGE_SIZES = ("A4", "Letter", "Legal")

app = CLIApp(
    "markdown-cv",
    "Convert a Markdown CV into structured data and a templated HTML page.",
    version=__version__,
)


def _resolve(path: Optional[str]) -> Optional[Path]:
    return Path(path).expanduser().resolve() if path else None


def _output_path(args: argparse.Namespace) -> Path:
    out = _resolve(args.output)
    if out == _resolve(args.input):
        raise UsageError(f"Output would overwrite the input file: {out}", hint="Pass a different -o/--output path")
    return out


# --- render command ---
@app.command("render", help="Render a Markdown CV to HTML using a template")
@app.argument("input", help="Path to the Markdown CV file")
@app.argument("-o", "--output", default="cv.html", help="Output HTML path (default: cv.html)")
@app.argument("-t", "--template", default=DEFAULT_TEMPLATE, help="Built-in template: modern | classic | minimal")
@app.argument("-T", "--template-path", help="Custom template folder with index.html.j2 and style.css (overrides --template)")
@app.argument("-c", "--primary-color", default="#0f172a", help="Primary color hex (e.g. #4f46e5)")
@app.argument("--page-size", default="A4", choices=PAGE_SIZES, help="Print page size (default: A4)")
@app.argument("--no-headers", dest="show_header", action="store_false", help="Hide the template header area")
@app.argument("--no-footers", dest="show_footer", action="store_false", help="Hide the template footer area")
def cmd_render(args: argparse.Namespace) -> int:
    text = read_text(_resolve(args.input))
    out = _output_path(args)
    options = RenderOptions(
        template_name=args.template,
        template_path=_resolve(args.template_path),
        primary_color=args.primary_color,
        page_size=args.page_size,
        show_header=args.show_header,
        show_footer=args.show_footer,
    )
    html = render_html(text, options)
    write_text(html, out)
    print(f"Wrote HTML: {out}")
    return 0


# --- extract command ---
@app.command("extract", help="Write the structured data parsed from a Markdown CV")
@app.argument("input", help="Path to the Markdown CV file")
@app.argument("-o", "--output", help="Output file (.json, .yaml or .yml); stdout when omitted")
@app.argument("--format", dest="fmt", choices=("json", "yaml"), default="json", help="Stdout format (default: json)")
def cmd_extract(args: argparse.Namespace) -> int:
    extraction = extract_document(read_text(_resolve(args.input)))
    payload = {"has_structured": extraction.has_structured, "data": extraction.data}
    if args.output:
        out = _output_path(args)
        write_yaml_or_json(payload, out)
        print(f"Wrote data: {out}")
    elif args.fmt == "yaml":
        print(yaml.safe_dump(payload, sort_keys=False, allow_unicode=True), end="")
    else:
        print(json.dumps(payload, indent=2, ensure_ascii=False, default=str))
    return 0


# --- templates command ---
@app.command("templates", help="List the built-in templates")
def cmd_templates(args: argparse.Namespace) -> int:
    for name in available_templates():
        print(name)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    return app.run(argv)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
