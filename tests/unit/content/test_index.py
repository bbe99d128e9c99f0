"""Tests for the curated content index."""

from __future__ import annotations

import pytest

from postindex.content.exceptions import DuplicateIndexEntryError, PostNotFoundError
from postindex.content.index import ContentIndex, parse_index_entries, split_frontmatter_lines
from postindex.models import IndexEntry
from tests.helpers.content import post_text, write_post


def test_list_posts_returns_entries_in_curated_order(site):
    index = ContentIndex(site / "index.md", site)

    entries = list(index.list_posts())

    assert entries == [
        IndexEntry("Self-Hosting LLMs for the Plan Engine", "/_posts/2025-04-07-self-hosting-llms.md"),
        IndexEntry("Semantic Caching of Execution Plans", "/_posts/2025-03-17-semantic-caching.md"),
    ]


def test_listed_titles_match_front_matter(site):
    index = ContentIndex(site / "index.md", site)
    for entry, post in index.load_entries():
        assert entry.title == post.title


def test_list_posts_is_restartable_and_stable(site):
    listing = ContentIndex(site / "index.md", site).list_posts()
    assert list(listing) == list(listing)
    assert len(list(listing)) == 2


def test_list_posts_is_lazy(tmp_path):
    index = ContentIndex(tmp_path / "index.md", tmp_path)
    listing = index.list_posts()
    (tmp_path / "index.md").write_text("- [Later](/_posts/later.md)\n", encoding="utf-8")
    assert list(listing) == [IndexEntry("Later", "/_posts/later.md")]


def test_list_posts_ignores_missing_files(tmp_path):
    (tmp_path / "index.md").write_text("- [Ghost](/_posts/ghost.md)\n", encoding="utf-8")
    index = ContentIndex(tmp_path / "index.md", tmp_path)
    assert [entry.title for entry in index.list_posts()] == ["Ghost"]
    with pytest.raises(PostNotFoundError):
        list(index.load_entries())


def test_list_posts_without_index_document(tmp_path):
    assert list(ContentIndex(tmp_path / "index.md", tmp_path).list_posts()) == []


def test_parse_index_entries_skips_front_matter_lists():
    text = "---\ntags:\n  - [x](/not-an-entry.md)\n---\n- [Real](/_posts/real.md)\n"
    assert parse_index_entries(text) == [IndexEntry("Real", "/_posts/real.md")]


def test_split_frontmatter_lines_unclosed_block_is_body():
    assert split_frontmatter_lines(["---", "title: x"]) == 0
    assert split_frontmatter_lines(["---", "title: x", "---", "body"]) == 3


def test_resolve_site_absolute_links(tmp_path):
    index = ContentIndex(tmp_path / "index.md", tmp_path)
    assert index.resolve("/_posts/a.md") == tmp_path / "_posts" / "a.md"
    assert index.resolve("/_posts/a.md#section") == tmp_path / "_posts" / "a.md"


def test_resolve_strips_link_prefix(tmp_path):
    index = ContentIndex(tmp_path / "index.md", tmp_path, link_prefix="/blog/")
    assert index.resolve("/blog/_posts/a.md") == tmp_path / "_posts" / "a.md"


def test_resolve_relative_links_against_index_directory(tmp_path):
    index = ContentIndex(tmp_path / "docs" / "index.md", tmp_path)
    assert index.resolve(IndexEntry("T", "posts/a.md")) == tmp_path / "docs" / "posts" / "a.md"


def test_add_entry_inserts_at_top_and_keeps_document(site):
    index = ContentIndex(site / "index.md", site)
    write_post(site, "2025-05-01-new.md", post_text("Newest", "2025-05-01"))

    index.add_entry(IndexEntry("Newest", "/_posts/2025-05-01-new.md"))

    text = (site / "index.md").read_text(encoding="utf-8")
    assert text.startswith("---\nlayout: home\ntitle: Engineering Blog\n---\n")
    assert "Posts about building the plan engine." in text
    assert [entry.title for entry in index.list_posts()] == [
        "Newest",
        "Self-Hosting LLMs for the Plan Engine",
        "Semantic Caching of Execution Plans",
    ]


def test_add_entry_rejects_duplicates(site):
    index = ContentIndex(site / "index.md", site)
    with pytest.raises(DuplicateIndexEntryError):
        index.add_entry(IndexEntry("Again", "/_posts/2025-03-17-semantic-caching.md"))


def test_add_entry_appends_list_when_document_has_none(tmp_path):
    (tmp_path / "index.md").write_text("# Blog\n\nNothing yet.\n\n", encoding="utf-8")
    index = ContentIndex(tmp_path / "index.md", tmp_path)

    index.add_entry(IndexEntry("First", "/_posts/first.md"))

    assert (tmp_path / "index.md").read_text(encoding="utf-8") == (
        "# Blog\n\nNothing yet.\n\n- [First](/_posts/first.md)\n"
    )


def test_add_entry_creates_missing_document(tmp_path):
    index = ContentIndex(tmp_path / "index.md", tmp_path, title="Notes")

    index.add_entry(IndexEntry("First", "/_posts/first.md"))

    text = (tmp_path / "index.md").read_text(encoding="utf-8")
    assert text == "---\nlayout: home\ntitle: Notes\n---\n\n- [First](/_posts/first.md)\n"


def test_add_entry_reuses_ordered_marker(tmp_path):
    (tmp_path / "index.md").write_text("1. [Old](/_posts/old.md)\n", encoding="utf-8")
    index = ContentIndex(tmp_path / "index.md", tmp_path)

    index.add_entry(IndexEntry("New", "/_posts/new.md"))

    assert (tmp_path / "index.md").read_text(encoding="utf-8") == (
        "1. [New](/_posts/new.md)\n1. [Old](/_posts/old.md)\n"
    )
