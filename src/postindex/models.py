"""Value types for posts and index entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from pathlib import PurePosixPath
from types import MappingProxyType
from typing import Any, NamedTuple


class IndexEntry(NamedTuple):
    """One curated reference from the index document to a post."""

    title: str
    path: str

    @property
    def slug(self) -> str:
        """File stem of the referenced post (``2025-03-17-semantic-caching``)."""
        return PurePosixPath(self.path).stem


@dataclass(frozen=True, slots=True)
class Post:
    """A single blog entry parsed from a Markdown file with front matter.

    ``path`` is the site-relative POSIX path of the source file
    (``_posts/2025-03-17-semantic-caching.md``). Front-matter keys with no
    defined meaning are kept in ``extra``.
    """

    title: str
    date: date
    path: str
    author: str = ""
    description: str = ""
    tags: frozenset[str] = frozenset()
    body: str = ""
    layout: str | None = None
    extra: MappingProxyType[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def slug(self) -> str:
        return PurePosixPath(self.path).stem

    def link(self, prefix: str = "/") -> str:
        """Return the index link for this post, e.g. ``/_posts/<slug>.md``."""
        return f"{prefix}{self.path}"

    def to_index_entry(self, prefix: str = "/") -> IndexEntry:
        return IndexEntry(title=self.title, path=self.link(prefix))


__all__ = ["IndexEntry", "Post"]
