"""The curated content index.

The index document is a Markdown file, optionally with front matter, whose
body holds a list of links to posts::

    - [Self-Hosting LLMs](/_posts/2025-04-07-self-hosting-llms.md)
    - [Semantic Caching](/_posts/2025-03-17-semantic-caching.md)

Entry order is whatever the author curated. New entries go to the top of the
list so the document reads most-recent-first.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import TYPE_CHECKING

from postindex.constants import FRONTMATTER_DELIMITER
from postindex.content.exceptions import DuplicateIndexEntryError
from postindex.content.posts import load_post
from postindex.markdown.frontmatter import dump_frontmatter
from postindex.markdown.links import format_list_link, iter_list_links
from postindex.models import IndexEntry

if TYPE_CHECKING:
    from collections.abc import Iterator

    from postindex.config.settings import PostIndexConfig
    from postindex.models import Post

logger = logging.getLogger(__name__)


def split_frontmatter_lines(lines: list[str]) -> int:
    """Return the index of the first body line, skipping a front-matter block.

    A block opened by ``---`` but never closed is treated as body.
    """
    if not lines or lines[0].rstrip() != FRONTMATTER_DELIMITER:
        return 0
    for i, line in enumerate(lines[1:], start=1):
        if line.rstrip() == FRONTMATTER_DELIMITER:
            return i + 1
    return 0


def parse_index_entries(text: str) -> list[IndexEntry]:
    """Parse the entries of an index document, in document order."""
    lines = text.splitlines()
    body_start = split_frontmatter_lines(lines)
    body = "\n".join(lines[body_start:])
    return [IndexEntry(title=link.label, path=link.target) for link in iter_list_links(body)]


def _normalize_link(path: str) -> str:
    return path.split("#", 1)[0].split("?", 1)[0]


class PostListing:
    """Restartable view over the entries of an index document.

    Nothing is read until iteration starts, and every new iteration re-reads
    the document, so an unchanged file always lists the same entries.
    """

    def __init__(self, index_path: Path) -> None:
        self.index_path = index_path

    def __iter__(self) -> Iterator[IndexEntry]:
        if not self.index_path.is_file():
            logger.debug("Index document %s does not exist", self.index_path)
            return iter(())
        text = self.index_path.read_text(encoding="utf-8")
        return iter(parse_index_entries(text))

    def __repr__(self) -> str:
        return f"PostListing({str(self.index_path)!r})"


class ContentIndex:
    """Curated list of posts backed by an index document."""

    def __init__(
        self,
        index_path: Path,
        site_root: Path | None = None,
        *,
        link_prefix: str = "/",
        title: str = "Blog",
    ) -> None:
        self.index_path = index_path
        self.site_root = site_root if site_root is not None else index_path.parent
        self.link_prefix = link_prefix
        self.title = title

    @classmethod
    def from_config(cls, config: PostIndexConfig) -> ContentIndex:
        return cls(
            config.paths.abs_index_file,
            config.paths.site_root,
            link_prefix=config.site.link_prefix,
            title=config.site.title,
        )

    def list_posts(self) -> PostListing:
        """Return the ``(title, path)`` entries in curated order.

        Missing post files are not detected here.
        """
        return PostListing(self.index_path)

    def __iter__(self) -> Iterator[IndexEntry]:
        return iter(self.list_posts())

    def resolve(self, entry: IndexEntry | str) -> Path:
        """Map an entry's link path to a file on disk.

        Site-absolute links (``/_posts/a.md``) resolve against the site root,
        with the configured link prefix stripped. Relative links resolve
        against the index document's directory.
        """
        link = _normalize_link(entry.path if isinstance(entry, IndexEntry) else entry)
        if link.startswith("/"):
            prefix = self.link_prefix
            if prefix not in ("", "/") and link.startswith(prefix):
                link = link[len(prefix) :]
            return self.site_root.joinpath(*PurePosixPath(link.lstrip("/")).parts)
        return self.index_path.parent.joinpath(*PurePosixPath(link).parts)

    def load_entries(self) -> Iterator[tuple[IndexEntry, Post]]:
        """Load the post behind each entry.

        Raises the first content error met; :mod:`postindex.content.checks`
        collects problems instead.
        """
        for entry in self.list_posts():
            yield entry, load_post(self.resolve(entry), self.site_root)

    def contains(self, path: str) -> bool:
        target = self.resolve(path)
        return any(self.resolve(entry) == target for entry in self.list_posts())

    def add_entry(self, entry: IndexEntry) -> None:
        """Insert ``entry`` at the top of the index list.

        The rest of the document is left as written. When the document has no
        link list one is appended; when it does not exist it is created.

        Raises:
            DuplicateIndexEntryError: If the index already references the path.

        """
        if not self.index_path.exists():
            self.index_path.parent.mkdir(parents=True, exist_ok=True)
            document = dump_frontmatter({"layout": "home", "title": self.title})
            document += f"\n{format_list_link(entry.title, entry.path)}\n"
            self.index_path.write_text(document, encoding="utf-8")
            logger.info("Created index %s with %s", self.index_path, entry.path)
            return

        if self.contains(entry.path):
            raise DuplicateIndexEntryError(entry.path)

        text = self.index_path.read_text(encoding="utf-8")
        lines = text.splitlines()
        body_start = split_frontmatter_lines(lines)
        first = next(iter_list_links("\n".join(lines[body_start:])), None)

        if first is None:
            while lines and not lines[-1].strip():
                lines.pop()
            lines.extend(["", format_list_link(entry.title, entry.path)])
        else:
            lines.insert(body_start + first.line, format_list_link(entry.title, entry.path, first.marker))

        self.index_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        logger.info("Added %s to %s", entry.path, self.index_path)


__all__ = ["ContentIndex", "PostListing", "parse_index_entries", "split_frontmatter_lines"]
