"""Tests for loading posts from disk."""

from __future__ import annotations

from datetime import date

import pytest

from postindex.content.exceptions import PostNotFoundError, PostValidationError
from postindex.content.posts import iter_posts, load_post, normalize_tags, sort_recent_first
from postindex.markdown.exceptions import FrontmatterError
from postindex.models import Post
from tests.helpers.content import write_post


def test_load_post_reads_recognized_fields(site):
    post = load_post(site / "_posts" / "2025-04-07-self-hosting-llms.md", site)

    assert post.title == "Self-Hosting LLMs for the Plan Engine"
    assert post.author == "Ada Lovelace"
    assert post.date == date(2025, 4, 7)
    assert post.description == "Running open models next to the orchestrator."
    assert post.tags == frozenset({"llm", "self-hosting"})
    assert post.layout == "post"
    assert post.path == "_posts/2025-04-07-self-hosting-llms.md"
    assert "plan = engine.generate(request)" in post.body


def test_load_post_passes_unknown_keys_through(site):
    post = load_post(site / "_posts" / "2025-03-17-semantic-caching.md", site)
    assert dict(post.extra) == {"series": "plan-engine"}
    assert post.tags == frozenset({"llm", "caching"})


def test_post_is_immutable(site):
    post = load_post(site / "_posts" / "2025-03-17-semantic-caching.md", site)
    with pytest.raises(AttributeError):
        post.title = "changed"  # type: ignore[misc]
    with pytest.raises(TypeError):
        post.extra["series"] = "other"  # type: ignore[index]


def test_load_post_missing_file(tmp_path):
    with pytest.raises(PostNotFoundError):
        load_post(tmp_path / "_posts" / "nope.md", tmp_path)


@pytest.mark.parametrize(
    ("front_matter", "problem"),
    [
        ("date: 2025-01-01", "title"),
        ("title: ''\ndate: 2025-01-01", "title"),
        ("title: Dateless", "date"),
        ("title: Bad date\ndate: someday", "invalid date"),
    ],
)
def test_load_post_requires_title_and_date(tmp_path, front_matter, problem):
    path = write_post(tmp_path, "broken.md", f"---\n{front_matter}\n---\nbody\n")
    with pytest.raises(PostValidationError) as excinfo:
        load_post(path, tmp_path)
    assert problem in str(excinfo.value)


def test_load_post_rejects_unparseable_front_matter(tmp_path):
    path = write_post(tmp_path, "broken.md", "---\ntitle: [oops\n---\nbody\n")
    with pytest.raises(FrontmatterError):
        load_post(path, tmp_path)


def test_load_post_accepts_datetime_strings(tmp_path):
    path = write_post(tmp_path, "p.md", "---\ntitle: T\ndate: '2025-02-03 09:15:00 -0300'\n---\n")
    assert load_post(path, tmp_path).date == date(2025, 2, 3)


def test_normalize_tags_variants():
    assert normalize_tags(None) == frozenset()
    assert normalize_tags("a, b  c") == frozenset({"a", "b", "c"})
    assert normalize_tags(["x", " ", None, 3]) == frozenset({"x", "3"})
    assert normalize_tags("solo") == frozenset({"solo"})


def test_iter_posts_is_lazy_and_sorted_by_filename(site):
    posts = iter_posts(site / "_posts", site)
    first = next(posts)
    assert first.path == "_posts/2025-03-17-semantic-caching.md"
    assert [p.path for p in posts] == ["_posts/2025-04-07-self-hosting-llms.md"]


def test_iter_posts_missing_directory(tmp_path):
    assert list(iter_posts(tmp_path / "_posts", tmp_path)) == []


def test_sort_recent_first_is_stable_on_ties():
    posts = [
        Post(title="b", date=date(2025, 1, 1), path="_posts/b.md"),
        Post(title="new", date=date(2025, 6, 1), path="_posts/new.md"),
        Post(title="a", date=date(2025, 1, 1), path="_posts/a.md"),
    ]
    assert [p.title for p in sort_recent_first(posts)] == ["new", "a", "b"]


def test_post_link_and_index_entry():
    post = Post(title="T", date=date(2025, 1, 1), path="_posts/2025-01-01-t.md")
    assert post.link() == "/_posts/2025-01-01-t.md"
    assert post.to_index_entry("/blog/") == ("T", "/blog/_posts/2025-01-01-t.md")
    assert post.slug == "2025-01-01-t"


def test_load_post_rejects_list_front_matter(tmp_path):
    path = write_post(tmp_path, "list.md", "---\n- a\n- b\n---\nbody\n")
    with pytest.raises(FrontmatterError):
        load_post(path, tmp_path)
