"""Shared test fixtures and utilities.

Sample Markdown CVs plus the small path, subprocess and capture helpers the
markdown_cv tests lean on.
"""

from __future__ import annotations

import io
import os
import subprocess
import tempfile
from contextlib import contextmanager, redirect_stderr, redirect_stdout
from pathlib import Path
from typing import Optional, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]


# -----------------------------------------------------------------------------
# Path helpers
# -----------------------------------------------------------------------------


def repo_root() -> Path:
    return REPO_ROOT


def run(cmd: Sequence[str], cwd: Optional[str] = None):
    return subprocess.run(cmd, cwd=cwd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)  # noqa: S603


# -----------------------------------------------------------------------------
# Sample CVs
# -----------------------------------------------------------------------------


SAMPLE_CV = """\
# Jane Doe

## CONTACT
Name: Jane Doe
Title: Staff Engineer
Location: Berlin, Germany
Email: jane@example.com
Phone: +49 30 1234567

## WEB PRESENCE
- [janedoe.dev](https://janedoe.dev)
- [github.com/janedoe](https://github.com/janedoe)
- [linkedin.com/in/janedoe](https://linkedin.com/in/janedoe)

## SUMMARY
Engineer with a **decade** of experience
building data platforms.

## EXPERIENCE
### Acme Corp: Staff Engineer
2019 – Present
- Led the *platform* team
- Cut build times in half

### Engineer at Initech
2015 to 2019
- Maintained [billing](https://initech.example/billing)

## EDUCATION
### MSc Computer Science at TU Berlin
2013 - 2015
- Thesis on compilers
- Graduated with honours

## KEY SKILLS
- **Languages**: Python, Go and Rust
- Cloud: AWS, GCP
  - Containers: Docker, Kubernetes
  - On call for three years
- Leadership

## LANGUAGES
- English
- German

## PRODUCTS
- [fastcsv](github.com/janedoe/fastcsv): Streaming CSV parser

## PUBLICATIONS
- Doe, J. *Fast parsing*.
  Journal of Parsers, 2020.
  + Cited by 40 papers

- Doe, J. Second paper.

## PRESENTATIONS
- 2019, 2021: Scaling data pipelines
- 2018 Parsing at speed
- Keynote at PyCon 2017
"""

UNSTRUCTURED_CV = """\
# Jane Doe

Some introduction text with a [link](example.com).

## Hobbies
- Climbing
"""


def cv_with_front_matter(front_matter: str, body: str = SAMPLE_CV) -> str:
    return f"---\n{front_matter}\n---\n{body}"


# -----------------------------------------------------------------------------
# Output capture helpers
# -----------------------------------------------------------------------------


@contextmanager
def capture_stdout():
    """Context manager that captures stdout and yields a StringIO buffer."""
    buf = io.StringIO()
    with redirect_stdout(buf):
        yield buf


@contextmanager
def capture_stderr():
    buf = io.StringIO()
    with redirect_stderr(buf):
        yield buf


class FakeInlineRenderer:
    """Inline renderer that wraps text in brackets so tests can see each call."""

    def __init__(self):
        self.calls = []

    def render_inline(self, text: str) -> str:
        self.calls.append(text)
        return f"[{text}]"


class TempDirMixin:
    """Mixin providing a temporary directory that's cleaned up after each test.

    Usage:
        class MyTest(TempDirMixin, unittest.TestCase):
            def test_something(self):
                path = os.path.join(self.tmpdir, "cv.md")
                ...
    """

    tmpdir: str

    def setUp(self):
        super().setUp()
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        import shutil
        shutil.rmtree(self.tmpdir, ignore_errors=True)
        super().tearDown()

    def write_file(self, name: str, content: str) -> str:
        path = os.path.join(self.tmpdir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path
