from __future__ import annotations

import json
import os
import re
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from .errors import ConfigError, NotFoundError

_RE_FRONT_MATTER = re.compile(
    r"\A\ufeff?---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*\r?$(?:\n)?",
    re.S | re.M,
)


def read_text(path: str | os.PathLike[str]) -> str:
    p = Path(path)
    if not p.is_file():
        raise NotFoundError(f"Input file not found: {p}")
    return p.read_text(encoding="utf-8")


def write_text(text: str, path: str | os.PathLike[str]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


def split_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    """Split a leading `---` YAML block off a Markdown document.

    Returns (front matter, body). A missing, empty or non-mapping block
    yields {}; YAML that does not parse raises ConfigError.
    """
    text = text or ""
    m = _RE_FRONT_MATTER.match(text)
    if not m:
        return {}, text
    try:
        data = yaml.safe_load(m.group(1))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid front matter: {exc}", hint="Check the YAML between the --- lines") from exc
    if not isinstance(data, dict):
        data = {}
    return data, text[m.end():]


def write_yaml_or_json(data: Any, path: str | os.PathLike[str]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    if p.suffix.lower() in {".yaml", ".yml"}:
        p.write_text(yaml.safe_dump(data, sort_keys=False, allow_unicode=True), encoding="utf-8")
        return
    with p.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False, default=str)
