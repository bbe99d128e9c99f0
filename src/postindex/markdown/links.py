"""Extract link list items from Markdown bodies.

Only top-level list items are considered. An item counts as an entry when it
contains an inline link ``[text](target)``; the first link in the item wins.
Fenced code blocks are skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

LIST_ITEM_PATTERN = re.compile(r"^(?P<marker>[-*+]|\d+[.)])\s+(?P<text>.*)$")
INLINE_LINK_PATTERN = re.compile(
    r"""\[(?P<label>(?:[^\[\]\\]|\\.)*)\]\(\s*"""
    r"""(?:<(?P<angled>[^<>\n]+)>|(?P<target>[^)\s<>]+))"""
    r"""(?:\s+["'(].*?["')])?\s*\)"""
)
FENCE_PATTERN = re.compile(r"^\s{0,3}(?P<fence>`{3,}|~{3,})")
_NEEDS_ANGLES = re.compile(r"[\s()<>]")


@dataclass(frozen=True, slots=True)
class ListLink:
    """A link found in a list item, with the zero-based line it sits on."""

    label: str
    target: str
    line: int
    marker: str


def _unescape(label: str) -> str:
    return re.sub(r"\\(.)", r"\1", label).strip()


def _closes_fence(match: re.Match[str] | None, line: str, open_fence: str) -> bool:
    """A fence closes on the same character, at least as long, with nothing after it."""
    if match is None:
        return False
    fence = match.group("fence")
    return fence[0] == open_fence[0] and len(fence) >= len(open_fence) and not line[match.end() :].strip()


def iter_list_links(markdown: str) -> Iterator[ListLink]:
    """Yield list-item links in document order."""
    open_fence: str | None = None
    for lineno, line in enumerate(markdown.splitlines()):
        fence = FENCE_PATTERN.match(line)
        if open_fence is not None:
            if _closes_fence(fence, line, open_fence):
                open_fence = None
            continue
        if fence:
            open_fence = fence.group("fence")
            continue

        item = LIST_ITEM_PATTERN.match(line)
        if item is None:
            continue

        link = INLINE_LINK_PATTERN.search(item.group("text"))
        if link is None:
            continue

        yield ListLink(
            label=_unescape(link.group("label")),
            target=link.group("angled") or link.group("target"),
            line=lineno,
            marker=item.group("marker"),
        )


def escape_label(label: str) -> str:
    """Escape characters that would end a Markdown link label early."""
    return re.sub(r"([\[\]\\])", r"\\\1", label)


def format_target(target: str) -> str:
    """Wrap ``target`` in angle brackets when it holds spaces or parentheses."""
    if _NEEDS_ANGLES.search(target):
        return f"<{target}>"
    return target


def format_list_link(label: str, target: str, marker: str = "-") -> str:
    """Render one list item line linking ``label`` to ``target``."""
    if marker[0].isdigit():
        marker = "1."
    return f"{marker} [{escape_label(label)}]({format_target(target)})"


__all__ = ["ListLink", "escape_label", "format_list_link", "format_target", "iter_list_links"]
