"""Create new posts and register them in the index."""

from __future__ import annotations

import logging
from datetime import date
from typing import TYPE_CHECKING, Any

from postindex.constants import POST_SUFFIX
from postindex.content.exceptions import DuplicateIndexEntryError, PostExistsError
from postindex.content.index import ContentIndex
from postindex.content.posts import load_post, normalize_tags, relative_post_path
from postindex.markdown.frontmatter import dump_frontmatter
from postindex.utils.slugify import slugify

if TYPE_CHECKING:
    from collections.abc import Iterable

    from postindex.config.settings import PostIndexConfig
    from postindex.models import Post

logger = logging.getLogger(__name__)

DEFAULT_BODY = "Write the post here.\n"


def build_frontmatter(
    *,
    title: str,
    post_date: date,
    author: str = "",
    description: str = "",
    tags: Iterable[str] = (),
    layout: str | None = None,
) -> dict[str, Any]:
    """Build the front-matter mapping for a new post, in canonical key order."""
    metadata: dict[str, Any] = {}
    if layout:
        metadata["layout"] = layout
    metadata["title"] = title
    metadata["author"] = author
    metadata["date"] = post_date
    metadata["description"] = description
    metadata["tags"] = sorted(normalize_tags(list(tags)))
    return metadata


def post_filename(title: str, post_date: date) -> str:
    """Return ``YYYY-MM-DD-<slug>.md`` for a post."""
    return f"{post_date.isoformat()}-{slugify(title)}{POST_SUFFIX}"


def new_post(
    config: PostIndexConfig,
    title: str,
    *,
    post_date: date | None = None,
    author: str | None = None,
    description: str = "",
    tags: Iterable[str] = (),
    body: str = DEFAULT_BODY,
    register: bool = True,
) -> Post:
    """Write a new post file and, by default, add it to the top of the index.

    Raises:
        PostExistsError: If the target file already exists.
        DuplicateIndexEntryError: If the index already references the path.

    """
    post_date = post_date or date.today()
    posts_dir = config.paths.abs_posts_dir
    path = posts_dir / post_filename(title, post_date)
    if path.exists():
        raise PostExistsError(path)

    index = ContentIndex.from_config(config)
    link = f"{config.site.link_prefix}{relative_post_path(path, config.paths.site_root)}"
    if register and index.contains(link):
        raise DuplicateIndexEntryError(link)

    metadata = build_frontmatter(
        title=title,
        post_date=post_date,
        author=author if author is not None else config.site.default_author,
        description=description,
        tags=tags,
        layout=config.site.default_layout,
    )
    posts_dir.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_frontmatter(metadata, body), encoding="utf-8")
    logger.info("Wrote %s", path)

    post = load_post(path, config.paths.site_root)
    if register:
        index.add_entry(post.to_index_entry(config.site.link_prefix))
    return post


__all__ = ["build_frontmatter", "new_post", "post_filename"]
