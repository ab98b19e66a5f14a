"""Validation issue entities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass

from schema_formgen.document_access import Path, to_path_key

REQUIRED_CODE = "required"


@dataclass(frozen=True)
class ValidationIssue:
    """One failure reported by a validator, tagged with the path it concerns.

    ``missing_field`` is set for missing-required-field failures that a
    validator reports against the containing object.
    """

    path: Path
    message: str
    code: str | None = None
    missing_field: str | None = None

    @property
    def path_key(self) -> str:
        return to_path_key(self.path)


class ErrorIndex(Mapping[str, tuple[ValidationIssue, ...]]):
    """Read-only mapping of canonical path key to the issues at that path."""

    def __init__(self, buckets: Mapping[str, tuple[ValidationIssue, ...]] | None = None) -> None:
        self._buckets: dict[str, tuple[ValidationIssue, ...]] = dict(buckets or {})

    def __getitem__(self, key: str) -> tuple[ValidationIssue, ...]:
        return self._buckets[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def __repr__(self) -> str:
        return f"ErrorIndex({self._buckets!r})"

    @property
    def issue_count(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())


EMPTY_ERROR_INDEX = ErrorIndex()
