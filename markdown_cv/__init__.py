"""markdown_cv package.

Recover structured CV data (contact, experience, education, skills,
publications, presentations, links) from a loosely written Markdown CV and
render it through HTML templates.

Public entrypoints: `markdown_cv.pipeline.extract`, `python -m markdown_cv`
or the `markdown-cv` script.
"""

__version__ = "0.3.0"

__all__ = [
    "cli",
    "pipeline",
]
