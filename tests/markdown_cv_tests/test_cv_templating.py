"""Tests for markdown_cv/templating.py template lookup and helpers."""

from __future__ import annotations

import unittest
from pathlib import Path

from jinja2 import Environment

from markdown_cv.errors import ConfigError, NotFoundError
from markdown_cv.templating import (
    DEFAULT_TEMPLATE,
    any_of,
    available_templates,
    daterange,
    join_items,
    load_template_dir,
    register_helpers,
    render_template,
    unquote,
)
from tests.fixtures import TempDirMixin


class TestHelpers(unittest.TestCase):

    def test_join_items(self):
        self.assertEqual(join_items(["a", "b"]), "a, b")
        self.assertEqual(join_items(("a", None), " | "), "a | ")
        self.assertEqual(join_items("not a list"), "")
        self.assertEqual(join_items(None), "")

    def test_daterange(self):
        self.assertEqual(daterange("2019", "2021"), "2019 — 2021")
        self.assertEqual(daterange("2019", ""), "2019 — Present")
        self.assertEqual(daterange("", ""), "Present")
        self.assertEqual(daterange(None, "2020"), "2020")

    def test_unquote(self):
        self.assertEqual(unquote(' "Jane" '), "Jane")
        self.assertEqual(unquote("'Dr. X'"), "Dr. X")
        self.assertEqual(unquote(None), "")

    def test_any_of(self):
        self.assertTrue(any_of("", "x"))
        self.assertFalse(any_of("", None, []))


class TestRegisterHelpers(unittest.TestCase):

    def test_filters_and_globals(self):
        env = register_helpers(Environment(autoescape=True))
        tpl = env.from_string(
            "{{ items|join_items('+') }} {{ daterange('2020', '') }} {{ html|safe_html }} {{ raw }}"
            "{% if any_of(a, b) %} yes{% endif %}"
        )
        out = tpl.render(items=["x", "y"], html="<b>ok</b>", raw="<i>", a="", b="1")
        self.assertEqual(out, "x+y 2020 — Present <b>ok</b> &lt;i&gt; yes")

    def test_safe_html_none(self):
        env = register_helpers(Environment(autoescape=True))
        self.assertEqual(env.from_string("{{ v|safe_html }}").render(v=None), "")

    def test_repeatable(self):
        env = register_helpers(register_helpers(Environment()))
        self.assertIn("daterange", env.filters)
        self.assertIs(env.globals["any_of"], any_of)


class TestTemplateLookup(TempDirMixin, unittest.TestCase):

    def test_builtins_available(self):
        names = available_templates()
        for name in ("classic", "minimal", "modern"):
            self.assertIn(name, names)
        self.assertEqual(names, sorted(names))

    def test_default_template(self):
        td = load_template_dir()
        self.assertEqual(td.directory.name, DEFAULT_TEMPLATE)
        self.assertIn("--primary", td.read_css())

    def test_unknown_name(self):
        with self.assertRaises(NotFoundError):
            load_template_dir("nope")

    def test_empty_name(self):
        with self.assertRaises(NotFoundError):
            load_template_dir("")

    def test_custom_dir_missing_style(self):
        (Path(self.tmpdir) / "index.html.j2").write_text("x", encoding="utf-8")
        with self.assertRaises(ConfigError):
            load_template_dir(template_path=self.tmpdir)

    def test_custom_dir_wins_over_name(self):
        folder = Path(self.tmpdir)
        (folder / "index.html.j2").write_text("{{ data.name }}", encoding="utf-8")
        (folder / "style.css").write_text("", encoding="utf-8")
        td = load_template_dir("nope", folder)
        self.assertEqual(td.directory, folder)
        self.assertEqual(render_template(td, {"data": {"name": "A & B"}}), "A &amp; B")

    def test_template_error_becomes_config_error(self):
        folder = Path(self.tmpdir)
        (folder / "index.html.j2").write_text("{% if %}", encoding="utf-8")
        (folder / "style.css").write_text("", encoding="utf-8")
        with self.assertRaises(ConfigError):
            render_template(load_template_dir(template_path=folder), {})


if __name__ == "__main__":
    unittest.main()
