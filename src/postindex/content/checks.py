"""Structural checks over a site's index and posts.

Checks collect issues instead of raising, so one report covers the whole
site. Errors break the index invariants; warnings flag curation drift.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from postindex.content.exceptions import PostNotFoundError, PostValidationError
from postindex.content.posts import iter_post_files, load_post, relative_post_path
from postindex.markdown.exceptions import FrontmatterError

if TYPE_CHECKING:
    from pathlib import Path

    from postindex.content.index import ContentIndex
    from postindex.models import IndexEntry, Post

logger = logging.getLogger(__name__)


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"


class IssueCode(str, Enum):
    MISSING_POST = "missing-post"
    INVALID_FRONTMATTER = "invalid-frontmatter"
    MISSING_FIELD = "missing-field"
    TITLE_MISMATCH = "title-mismatch"
    DUPLICATE_ENTRY = "duplicate-entry"
    UNLISTED_POST = "unlisted-post"
    ORDER = "order"


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    code: IssueCode
    path: str
    message: str


@dataclass
class CheckReport:
    """Outcome of :func:`check_site`."""

    issues: list[Issue] = field(default_factory=list)
    checked_entries: int = 0

    @property
    def errors(self) -> list[Issue]:
        return [issue for issue in self.issues if issue.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Issue]:
        return [issue for issue in self.issues if issue.severity is Severity.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors

    def add(self, severity: Severity, code: IssueCode, path: str, message: str) -> None:
        self.issues.append(Issue(severity, code, path, message))

    def codes(self) -> list[IssueCode]:
        return [issue.code for issue in self.issues]


def _check_entry(report: CheckReport, index: ContentIndex, entry: IndexEntry) -> Post | None:
    try:
        post = load_post(index.resolve(entry), index.site_root)
    except PostNotFoundError:
        report.add(Severity.ERROR, IssueCode.MISSING_POST, entry.path, f"'{entry.title}' links to a missing file")
        return None
    except FrontmatterError as exc:
        report.add(Severity.ERROR, IssueCode.INVALID_FRONTMATTER, entry.path, exc.reason)
        return None
    except PostValidationError as exc:
        report.add(Severity.ERROR, IssueCode.MISSING_FIELD, entry.path, "; ".join(exc.problems))
        return None

    if post.title != entry.title:
        report.add(
            Severity.WARNING,
            IssueCode.TITLE_MISMATCH,
            entry.path,
            f"index says '{entry.title}' but front matter says '{post.title}'",
        )
    return post


def check_site(index: ContentIndex, posts_dir: Path | None = None) -> CheckReport:
    """Check the index against the posts it references.

    When ``posts_dir`` is given, posts that the index does not reference are
    reported as ``unlisted-post`` warnings.
    """
    report = CheckReport()
    seen: dict[Path, IndexEntry] = {}
    listed: list[Post] = []

    for entry in index.list_posts():
        report.checked_entries += 1
        target = index.resolve(entry)
        if target in seen:
            report.add(
                Severity.ERROR,
                IssueCode.DUPLICATE_ENTRY,
                entry.path,
                f"already listed as '{seen[target].title}'",
            )
            continue
        seen[target] = entry

        post = _check_entry(report, index, entry)
        if post is not None:
            listed.append(post)

    for newer, older in zip(listed, listed[1:]):
        if newer.date < older.date:
            report.add(
                Severity.WARNING,
                IssueCode.ORDER,
                older.path,
                f"dated {older.date.isoformat()} but listed after {newer.path} ({newer.date.isoformat()})",
            )

    if posts_dir is not None:
        resolved = {path.resolve() for path in seen}
        for path in iter_post_files(posts_dir):
            if path.resolve() not in resolved:
                rel = relative_post_path(path, index.site_root)
                report.add(Severity.WARNING, IssueCode.UNLISTED_POST, rel, "not referenced by the index")

    logger.debug(
        "Checked %d entries: %d error(s), %d warning(s)",
        report.checked_entries,
        len(report.errors),
        len(report.warnings),
    )
    return report


__all__ = ["CheckReport", "Issue", "IssueCode", "Severity", "check_site"]
