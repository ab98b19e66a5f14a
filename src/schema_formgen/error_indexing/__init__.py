"""Error indexing exports."""

from .error_indexer import index_issues, issue_key, lookup_issues
from .issue_adapters import (
    issue_from_field_path,
    issue_from_instance_path,
    issues_from_jsonschema_errors,
)
from .issue_models import EMPTY_ERROR_INDEX, REQUIRED_CODE, ErrorIndex, ValidationIssue

__all__ = [
    "EMPTY_ERROR_INDEX",
    "REQUIRED_CODE",
    "ErrorIndex",
    "ValidationIssue",
    "index_issues",
    "issue_from_field_path",
    "issue_from_instance_path",
    "issue_key",
    "issues_from_jsonschema_errors",
    "lookup_issues",
]
