"""Render index documents from post entries.

The generated document is plain Markdown, with front matter, for the
external site generator to turn into HTML.
"""

from __future__ import annotations

import logging
from importlib.resources import files
from pathlib import Path
from typing import TYPE_CHECKING, Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from postindex.content.index import split_frontmatter_lines
from postindex.content.posts import iter_posts, sort_recent_first
from postindex.markdown.frontmatter import dump_frontmatter, parse_frontmatter
from postindex.markdown.links import escape_label, format_target, iter_list_links

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from postindex.config.settings import PostIndexConfig
    from postindex.models import IndexEntry

logger = logging.getLogger(__name__)

INDEX_TEMPLATE = "index.md.jinja"


def _environment(template_dir: Path | None = None) -> Environment:
    if template_dir is None:
        template_dir = Path(str(files("postindex.rendering").joinpath("templates")))
    env = Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=False,  # Markdown, not HTML
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["escape_label"] = escape_label
    env.filters["link_target"] = format_target
    return env


def render_index(
    entries: Iterable[IndexEntry],
    *,
    metadata: Mapping[str, Any] | None = None,
    intro: str = "",
    template_dir: Path | None = None,
) -> str:
    """Render an index document listing ``entries`` in the given order."""
    template = _environment(template_dir).get_template(INDEX_TEMPLATE)
    return template.render(
        frontmatter=dump_frontmatter(metadata).rstrip("\n") if metadata else "",
        intro=intro.strip(),
        entries=list(entries),
    )


def _existing_header(index_path: Path) -> tuple[dict[str, Any], str]:
    """Return the front matter and the text above the link list of an index."""
    if not index_path.is_file():
        return {}, ""
    text = index_path.read_text(encoding="utf-8")
    metadata, _ = parse_frontmatter(text, source=str(index_path))

    lines = text.splitlines()
    body_lines = lines[split_frontmatter_lines(lines) :]
    first = next(iter_list_links("\n".join(body_lines)), None)
    intro_lines = body_lines if first is None else body_lines[: first.line]
    return metadata, "\n".join(intro_lines)


def rebuild_index(config: PostIndexConfig) -> list[IndexEntry]:
    """Regenerate the index document from the posts directory, newest first.

    Front matter and any text above the existing link list are kept.
    Returns the entries written.
    """
    paths = config.paths
    posts = sort_recent_first(iter_posts(paths.abs_posts_dir, paths.site_root))
    entries = [post.to_index_entry(config.site.link_prefix) for post in posts]

    metadata, intro = _existing_header(paths.abs_index_file)
    if not metadata:
        metadata = {"layout": "home", "title": config.site.title}

    paths.abs_index_file.parent.mkdir(parents=True, exist_ok=True)
    paths.abs_index_file.write_text(render_index(entries, metadata=metadata, intro=intro), encoding="utf-8")
    logger.info("Rebuilt %s with %d entries", paths.abs_index_file, len(entries))
    return entries


__all__ = ["rebuild_index", "render_index"]
