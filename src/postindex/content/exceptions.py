"""Exceptions raised while reading or writing site content."""

from __future__ import annotations

from pathlib import Path

from postindex.exceptions import PostIndexError


class ContentError(PostIndexError):
    """Base exception for content errors."""


class PostNotFoundError(ContentError):
    """Raised when a post file does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Post not found: {path}")


class PostValidationError(ContentError):
    """Raised when a post's front matter lacks required values or holds bad ones."""

    def __init__(self, path: Path | str, problems: list[str]) -> None:
        self.path = path
        self.problems = problems
        super().__init__(f"Invalid post {path}: {'; '.join(problems)}")


class PostExistsError(ContentError):
    """Raised when writing a post would overwrite an existing file."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Post already exists: {path}")


class DuplicateIndexEntryError(ContentError):
    """Raised when adding a path that the index already references."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Index already references {path}")
