from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers.content import INDEX, SELF_HOSTING, SEMANTIC_CACHING


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    """Keep developer environment settings out of config loading."""
    for name in (
        "POSTINDEX_PATHS__POSTS_DIR",
        "POSTINDEX_PATHS__INDEX_FILE",
        "POSTINDEX_SITE__TITLE",
        "POSTINDEX_SITE__DEFAULT_AUTHOR",
        "POSTINDEX_SITE__LINK_PREFIX",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def site(tmp_path: Path) -> Path:
    """A site root with two posts and an index listing them newest first."""
    posts = tmp_path / "_posts"
    posts.mkdir()
    (posts / "2025-04-07-self-hosting-llms.md").write_text(SELF_HOSTING, encoding="utf-8")
    (posts / "2025-03-17-semantic-caching.md").write_text(SEMANTIC_CACHING, encoding="utf-8")
    (tmp_path / "index.md").write_text(INDEX, encoding="utf-8")
    return tmp_path
