"""postindex: front-matter post collection and curated index tooling."""

from postindex.content.index import ContentIndex
from postindex.content.posts import load_post
from postindex.models import IndexEntry, Post

__version__ = "0.1.0"
__all__ = [
    "ContentIndex",
    "IndexEntry",
    "Post",
    "load_post",
]
