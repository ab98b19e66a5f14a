"""Per-path grouping of flat validation issues."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Sequence

from schema_formgen.document_access import PathSegment, normalize_path, to_path_key

from .issue_models import REQUIRED_CODE, ErrorIndex, ValidationIssue


def index_issues(issues: Iterable[ValidationIssue]) -> ErrorIndex:
    """Bucket issues by canonical path key, keeping input order per bucket.

    A missing-required-field issue reported against its object is filed under
    the missing field's own path.
    """
    buckets: defaultdict[str, list[ValidationIssue]] = defaultdict(list)
    for issue in issues:
        buckets[issue_key(issue)].append(issue)
    return ErrorIndex({key: tuple(bucket) for key, bucket in buckets.items()})


def issue_key(issue: ValidationIssue) -> str:
    """Return the canonical key an issue is filed under."""
    path = normalize_path(issue.path)
    if issue.code == REQUIRED_CODE and issue.missing_field:
        path = (*path, issue.missing_field)
    return to_path_key(path)


def lookup_issues(
    index: ErrorIndex, path: str | Sequence[PathSegment]
) -> tuple[ValidationIssue, ...]:
    """Return the issues at ``path``; an unknown path yields an empty tuple."""
    return index.get(to_path_key(normalize_path(path)), ())
