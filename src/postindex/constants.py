"""Shared constants for post front matter and site layout."""

from __future__ import annotations

from typing import Final

FRONTMATTER_DELIMITER: Final[str] = "---"

# Keys with a defined meaning. Anything else is carried through untouched.
RECOGNIZED_KEYS: Final[tuple[str, ...]] = (
    "layout",
    "title",
    "author",
    "date",
    "description",
    "tags",
)
REQUIRED_KEYS: Final[tuple[str, ...]] = ("title", "date")

DEFAULT_POSTS_DIR: Final[str] = "_posts"
DEFAULT_INDEX_FILE: Final[str] = "index.md"
DEFAULT_LAYOUT: Final[str] = "post"
CONFIG_FILENAME: Final[str] = ".postindex.toml"
POST_SUFFIX: Final[str] = ".md"
