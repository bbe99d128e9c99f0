"""Index document rendering."""

from postindex.rendering.index_page import rebuild_index, render_index

__all__ = ["rebuild_index", "render_index"]
