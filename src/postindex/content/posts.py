"""Load posts from Markdown files with YAML front matter."""

from __future__ import annotations

import logging
import re
from datetime import date
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from postindex.constants import POST_SUFFIX, RECOGNIZED_KEYS, REQUIRED_KEYS
from postindex.content.exceptions import PostNotFoundError, PostValidationError
from postindex.markdown.frontmatter import parse_frontmatter_file
from postindex.models import Post
from postindex.utils.datetime_utils import extract_clean_date
from postindex.utils.exceptions import DateTimeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = logging.getLogger(__name__)

_TAG_SPLIT = re.compile(r"[,\s]+")


def normalize_tags(raw: Any) -> frozenset[str]:
    """Normalize a ``tags`` value into a set of non-empty strings.

    Accepts a YAML list or a comma/space separated string.
    """
    if raw is None:
        return frozenset()
    if isinstance(raw, str):
        items: Iterable[Any] = _TAG_SPLIT.split(raw)
    elif isinstance(raw, (list, tuple, set, frozenset)):
        items = raw
    else:
        items = [raw]
    return frozenset(str(item).strip() for item in items if item is not None and str(item).strip())


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def relative_post_path(path: Path, site_root: Path) -> str:
    """Return ``path`` relative to ``site_root`` as a POSIX string.

    Files outside the site root keep their absolute path.
    """
    try:
        return path.resolve().relative_to(site_root.resolve()).as_posix()
    except ValueError:
        return path.resolve().as_posix()


def post_from_metadata(metadata: dict[str, Any], body: str, *, path: str) -> Post:
    """Build a :class:`Post` from parsed front matter.

    Raises:
        PostValidationError: If ``title`` or ``date`` is missing, empty or unparseable.

    """
    missing = [key for key in REQUIRED_KEYS if not _text(metadata.get(key))]
    problems = [f"missing required field '{key}'" for key in missing]

    post_date: date | None = None
    if "date" not in missing:
        try:
            post_date = extract_clean_date(metadata["date"])
        except DateTimeError as exc:
            problems.append(f"invalid date: {exc}")

    if problems or post_date is None:
        raise PostValidationError(path, problems)

    layout = metadata.get("layout")
    extra = {key: value for key, value in metadata.items() if key not in RECOGNIZED_KEYS}
    return Post(
        title=_text(metadata["title"]),
        date=post_date,
        path=path,
        author=_text(metadata.get("author")),
        description=_text(metadata.get("description")),
        tags=normalize_tags(metadata.get("tags")),
        body=body,
        layout=_text(layout) or None,
        extra=MappingProxyType(extra),
    )


def load_post(path: Path, site_root: Path | None = None) -> Post:
    """Parse one post file.

    Raises:
        PostNotFoundError: If the file does not exist.
        FrontmatterError: If the front matter is not a YAML mapping.
        PostValidationError: If required fields are missing.

    """
    if not path.is_file():
        raise PostNotFoundError(path)

    metadata, body = parse_frontmatter_file(path)
    rel_path = relative_post_path(path, site_root or path.parent)
    return post_from_metadata(metadata, body, path=rel_path)


def iter_post_files(posts_dir: Path) -> list[Path]:
    """Return the post files in ``posts_dir`` sorted by file name."""
    if not posts_dir.is_dir():
        return []
    return sorted(p for p in posts_dir.glob(f"*{POST_SUFFIX}") if p.is_file())


def iter_posts(posts_dir: Path, site_root: Path | None = None) -> Iterator[Post]:
    """Lazily load every post in ``posts_dir``, in file-name order."""
    root = site_root or posts_dir.parent
    for path in iter_post_files(posts_dir):
        logger.debug("Loading post %s", path)
        yield load_post(path, root)


def sort_recent_first(posts: Iterable[Post]) -> list[Post]:
    """Order posts by date, newest first; ties fall back to path order."""
    by_path = sorted(posts, key=lambda post: post.path)
    return sorted(by_path, key=lambda post: post.date, reverse=True)


__all__ = [
    "iter_post_files",
    "iter_posts",
    "load_post",
    "normalize_tags",
    "post_from_metadata",
    "relative_post_path",
    "sort_recent_first",
]
