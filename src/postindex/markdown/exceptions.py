"""Exceptions for Markdown and front-matter handling."""

from __future__ import annotations

from postindex.exceptions import PostIndexError


class FrontmatterError(PostIndexError):
    """Raised when a front-matter block cannot be parsed into a mapping."""

    def __init__(self, reason: str, source: str | None = None) -> None:
        self.reason = reason
        self.source = source
        where = f" in {source}" if source else ""
        super().__init__(f"Invalid front matter{where}: {reason}")
