"""Unit tests for core/extract/extract.py and core/extract/urls.py"""

from pathlib import Path

import pytest

from kbpub.core.extract.extract import extract_record, filter_tags
from kbpub.core.extract.urls import page_url, slug_from_path, source_url
from kbpub.core.models import ParsedDoc
from kbpub.core.parse import parse_file


def _doc(markdown: str, frontmatter: dict = None, rel: str = "content/en/widget.md") -> ParsedDoc:
    return ParsedDoc(
        path=Path("/repo") / rel,
        relative_path=rel,
        markdown=markdown,
        frontmatter=frontmatter or {},
    )


def test_filter_tags_drops_blank_entries():
    assert filter_tags({"tags": ["a", "", "  ", "b"]})["tags"] == ["a", "b"]


def test_filter_tags_leaves_non_list_alone():
    fm = {"tags": "  "}
    assert filter_tags(fm) is fm


def test_filter_tags_keeps_non_string_entries():
    assert filter_tags({"tags": [1, "", "x"]})["tags"] == [1, "x"]


def test_extract_record_sections_and_title():
    record = extract_record(_doc("# Title\n\n## What It Is\nFoo.\n\n## Example\nBar.\n"))
    assert record["title"] == "Title"
    assert record["what_it_is"] == "Foo."
    assert record["example"] == "Bar."
    assert record["slug"] == "widget"


def test_extract_record_without_frontmatter_keeps_body():
    body = "\n\nPlain text, no headings.\n"
    record = extract_record(_doc(body))
    assert record["title"] == ""
    assert record["markdown"] == "Plain text, no headings.\n"


def test_extract_record_section_beats_frontmatter():
    """A '## Title' section overwrites a front-matter 'Title' field."""
    record = extract_record(_doc("# Heading\n\n## Title\nB\n", {"Title": "A"}))
    assert record["title"] == "B"
    assert "Title" not in record


def test_extract_record_frontmatter_beats_computed_title():
    record = extract_record(_doc("# Heading\n", {"title": "From FM"}))
    assert record["title"] == "From FM"


def test_extract_record_lowercases_frontmatter_keys():
    record = extract_record(_doc("# H\n", {"Category": "x", "TAGS": ["", "y"]}))
    assert record["category"] == "x"
    # only the lowercase 'tags' key is filtered
    assert record["tags"] == ["", "y"]


def test_extract_record_derived_fields_win_and_lead():
    record = extract_record(_doc("# H\n", {"slug": "custom", "url": "http://x"}))
    assert record["slug"] == "widget"
    assert record["url"] == "https://glossary.cncf.io/widget"
    assert record["srcUrl"] == "https://github.com/cncf/glossary/blob/main/content/en/widget.md"
    assert list(record)[:2] == ["url", "srcUrl"]


def test_extract_record_from_file(content_dir):
    record = extract_record(parse_file(Path("content/en/container.md")))
    assert record["title"] == "Container"
    assert record["tags"] == ["containers", "runtime"]
    assert record["category"] == "fundamental"
    assert record["what_it_is"].startswith("A container is a running process")
    assert "https://glossary.cncf.io/en/cgroups.md" in record["what_it_is"]
    assert record["problem_it_addresses"].endswith("Nested heading stays inside the section.")
    assert record["markdown"].startswith("# Container")


@pytest.mark.parametrize("path,expected", [
    ("/repo/content/en/widget.md", "widget"),
    ("/repo/content/en/a.b.md", "a.b"),
    ("/repo/content/en/README", ""),
])
def test_slug_from_path(path, expected):
    assert slug_from_path(Path(path)) == expected


def test_page_and_source_url_templates():
    assert page_url("content/en/widget.md") == "https://glossary.cncf.io/widget"
    assert source_url("content/de/widget.md") == "https://github.com/cncf/glossary/blob/main/content/de/widget.md"


def test_urls_pass_through_unmatched_paths():
    """Paths outside the expected layout come back unchanged instead of raising."""
    assert page_url("docs/widget.md") == "docs/widget.md"
    assert source_url("../elsewhere/widget.txt") == "../elsewhere/widget.txt"


def test_slug_from_symlinked_file_uses_link_name(content_dir):
    """A document reached through a symlink keeps its own filename as slug."""
    shared = content_dir.parent / "shared"
    shared.mkdir()
    (shared / "common-term.md").write_text("# Pod\n", encoding="utf-8")
    (content_dir / "pod.md").symlink_to(shared / "common-term.md")

    record = extract_record(parse_file(Path("content/en/pod.md")))

    assert record["slug"] == "pod"
    assert record["url"] == "https://glossary.cncf.io/pod"
