"""Tests for markdown_cv/overlays.py front-matter overlay."""

from __future__ import annotations

import unittest

from markdown_cv.model import COLLECTION_FIELDS, IDENTITY_FIELDS, LINK_FIELDS, Links, ProjectEntry, ResumeDocument
from markdown_cv.overlays import apply_defaults, merge_override


class TestApplyDefaults(unittest.TestCase):

    def test_missing_and_none_fields_are_filled(self):
        out = apply_defaults({"name": None, "skills": None, "extra": 1})
        for key in IDENTITY_FIELDS + LINK_FIELDS + ("summary",):
            self.assertEqual(out[key], "")
        for key in COLLECTION_FIELDS:
            self.assertEqual(out[key], [])
        self.assertEqual(out["extra"], 1)

    def test_scalars_become_text(self):
        self.assertEqual(apply_defaults({"phone": 5551234})["phone"], "5551234")

    def test_scalar_collection_is_wrapped(self):
        self.assertEqual(apply_defaults({"languages": "English"})["languages"], ["English"])

    def test_tuples_become_lists(self):
        self.assertEqual(apply_defaults({"skills": ("a", "b")})["skills"], ["a", "b"])

    def test_does_not_mutate_input(self):
        data = {"name": None}
        apply_defaults(data)
        self.assertEqual(data, {"name": None})


class TestMergeOverride(unittest.TestCase):

    def setUp(self):
        self.doc = ResumeDocument(
            name="Parsed Name",
            title="Engineer",
            links=Links(website="example.com", github="@parsed"),
            skills=("Python",),
            projects=(ProjectEntry("tool", "tool.example", "A tool"),),
        )

    def test_override_name_wins(self):
        data = merge_override(self.doc, {"name": "Ada Lovelace"})
        self.assertEqual(data["name"], "Ada Lovelace")
        self.assertEqual(data["title"], "Engineer")

    def test_lists_replace_whole(self):
        data = merge_override(self.doc, {"skills": ["Go"]})
        self.assertEqual(data["skills"], ["Go"])

    def test_no_override(self):
        data = merge_override(self.doc)
        self.assertEqual(data["name"], "Parsed Name")
        self.assertEqual(data["skills"], ["Python"])

    def test_every_field_present(self):
        data = merge_override(ResumeDocument(), {})
        for key in IDENTITY_FIELDS + LINK_FIELDS + ("summary",):
            self.assertEqual(data[key], "")
        for key in COLLECTION_FIELDS:
            self.assertEqual(data[key], [])

    def test_hrefs_follow_merged_text(self):
        data = merge_override(self.doc, {"github": "@alice", "linkedin": "bob"})
        self.assertEqual(data["website"], "example.com")
        self.assertEqual(data["website_href"], "https://www.example.com")
        self.assertEqual(data["github"], "@alice")
        self.assertEqual(data["github_href"], "https://github.com/alice")
        self.assertEqual(data["linkedin_href"], "https://www.linkedin.com/in/bob")

    def test_project_link_href(self):
        data = merge_override(self.doc)
        self.assertEqual(data["projects"][0]["link_href"], "https://tool.example")
        self.assertEqual(data["projects"][0]["link"], "tool.example")

    def test_overridden_projects_get_link_href(self):
        data = merge_override(self.doc, {"projects": [{"name": "x", "link": "http://x.example"}, "bare"]})
        self.assertEqual(data["projects"][0]["link_href"], "https://x.example")
        self.assertEqual(data["projects"][1], "bare")

    def test_unknown_keys_pass_through(self):
        data = merge_override(self.doc, {"accent": "teal"})
        self.assertEqual(data["accent"], "teal")

    def test_scalar_collection_override_becomes_one_item_list(self):
        data = merge_override(self.doc, {"skills": "Python, Go"})
        self.assertEqual(data["skills"], ["Python, Go"])

    def test_empty_collection_override_clears_parsed_list(self):
        self.assertEqual(merge_override(self.doc, {"skills": None})["skills"], [])
        self.assertEqual(merge_override(self.doc, {"skills": ""})["skills"], [])


if __name__ == "__main__":
    unittest.main()
