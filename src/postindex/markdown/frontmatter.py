"""Helpers for parsing and writing YAML front matter in Markdown content."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import frontmatter
import yaml

from postindex.constants import FRONTMATTER_DELIMITER
from postindex.markdown.exceptions import FrontmatterError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

_yaml_handler = frontmatter.YAMLHandler()


def parse_frontmatter(content: str, *, source: str | None = None) -> tuple[dict[str, Any], str]:
    """Parse YAML front matter, splitting it off with python-frontmatter.

    Content without a front-matter block yields an empty mapping and the
    content unchanged. An empty block yields an empty mapping.

    Args:
        content: Markdown content that may include front matter.
        source: Optional label (usually the file path) used in error messages.

    Returns:
        Tuple of (metadata dict, body string).

    Raises:
        FrontmatterError: If the block is not valid YAML or not a mapping.

    """
    if not _yaml_handler.detect(content):
        return {}, content

    try:
        block, body = _yaml_handler.split(content)
        raw_metadata = yaml.safe_load(block)
    except (yaml.YAMLError, ValueError) as exc:
        raise FrontmatterError(str(exc), source) from exc

    if raw_metadata is None:
        raw_metadata = {}
    if not isinstance(raw_metadata, dict):
        msg = f"expected a mapping, got {type(raw_metadata).__name__}"
        raise FrontmatterError(msg, source)

    return dict(raw_metadata), body


def parse_frontmatter_file(path: Path, *, encoding: str = "utf-8") -> tuple[dict[str, Any], str]:
    """Read a Markdown file and parse its front matter.

    Raises:
        OSError: If the file cannot be read.
        FrontmatterError: If the file is not valid ``encoding`` or its front matter is malformed.

    """
    try:
        content = path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise FrontmatterError(str(exc), str(path)) from exc
    return parse_frontmatter(content, source=str(path))


def dump_frontmatter(metadata: Mapping[str, Any], body: str = "") -> str:
    """Serialize metadata and body into a Markdown document.

    Keys keep their insertion order.
    """
    yaml_text = yaml.safe_dump(
        dict(metadata),
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
        width=1000,
    )
    document = f"{FRONTMATTER_DELIMITER}\n{yaml_text}{FRONTMATTER_DELIMITER}\n"
    if body:
        document += f"\n{body.lstrip(chr(10))}"
        if not document.endswith("\n"):
            document += "\n"
    return document


__all__ = [
    "dump_frontmatter",
    "parse_frontmatter",
    "parse_frontmatter_file",
]
