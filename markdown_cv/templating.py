from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, TemplateError
from markupsafe import Markup

from .errors import ConfigError, NotFoundError

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
INDEX_NAME = "index.html.j2"
STYLE_NAME = "style.css"
DEFAULT_TEMPLATE = "modern"


@dataclass(frozen=True)
class TemplateDir:
    directory: Path
    index_path: Path
    style_path: Path

    def read_css(self) -> str:
        return self.style_path.read_text(encoding="utf-8")


def _template_dir(directory: Path) -> TemplateDir:
    return TemplateDir(directory, directory / INDEX_NAME, directory / STYLE_NAME)


def _is_complete(td: TemplateDir) -> bool:
    return td.index_path.is_file() and td.style_path.is_file()


def available_templates() -> List[str]:
    if not TEMPLATES_DIR.is_dir():
        return []
    return sorted(p.name for p in TEMPLATES_DIR.iterdir() if p.is_dir() and _is_complete(_template_dir(p)))


def load_template_dir(template_name: str = DEFAULT_TEMPLATE, template_path: Optional[str | Path] = None) -> TemplateDir:
    """Resolve a custom template folder or a built-in template by name."""
    if template_path:
        td = _template_dir(Path(template_path))
        if not _is_complete(td):
            raise ConfigError(
                f"Custom template must contain {INDEX_NAME} and {STYLE_NAME}: {td.directory}",
            )
        return td
    td = _template_dir(TEMPLATES_DIR / template_name)
    if not template_name or not _is_complete(td):
        names = ", ".join(available_templates())
        raise NotFoundError(f'Unknown template "{template_name}". Available: {names}')
    return td


# =============================================================================
# Helpers available inside templates
# =============================================================================


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def join_items(items: Any, sep: str = ", ") -> str:
    if not isinstance(items, (list, tuple)):
        return ""
    return sep.join(_text(i) for i in items)


def daterange(start: Any, end: Any) -> str:
    """'2019 — 2021'; a missing end reads as Present."""
    s = _text(start)
    e = _text(end) or "Present"
    return f"{s} — {e}" if s and e else (s or e)


def unquote(value: Any) -> str:
    return _text(value).strip().strip("\"'")


def any_of(*values: Any) -> bool:
    return any(values)


def register_helpers(env: Environment) -> Environment:
    """Install the template helpers; safe to call repeatedly."""
    env.filters["join_items"] = join_items
    env.filters["daterange"] = daterange
    env.filters["unquote"] = unquote
    env.filters["safe_html"] = lambda v: Markup(_text(v))
    env.globals["any_of"] = any_of
    env.globals["daterange"] = daterange
    return env


def build_environment(directory: Path) -> Environment:
    env = Environment(loader=FileSystemLoader(str(directory)), autoescape=True)
    return register_helpers(env)


def render_template(td: TemplateDir, context: Dict[str, Any]) -> str:
    env = build_environment(td.directory)
    try:
        return env.get_template(INDEX_NAME).render(**context)
    except TemplateError as exc:
        raise ConfigError(f"Template {td.index_path} failed to render: {exc}") from exc
