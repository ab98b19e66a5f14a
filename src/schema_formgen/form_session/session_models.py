"""Form session entities."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from schema_formgen.document_access import FormDocument
from schema_formgen.error_indexing import ErrorIndex, ValidationIssue
from schema_formgen.render_dispatch import TemplateRegistry
from schema_formgen.schema_model import SchemaNode

IssueValidator = Callable[[FormDocument], Sequence[ValidationIssue]]


class FormMode(str, Enum):
    """Whether the document may be edited."""

    EDIT = "edit"
    READONLY = "readonly"


@dataclass(frozen=True)
class FormSettings:
    """Collaborators and options handed to one form controller."""

    mode: FormMode = FormMode.EDIT
    validator: IssueValidator | None = None
    templates: TemplateRegistry[Any] | None = None


@dataclass(frozen=True)
class FormState:
    """Snapshot held by the form store."""

    schema: SchemaNode
    document: FormDocument
    errors: ErrorIndex
    mode: FormMode


@dataclass(frozen=True)
class SubmitOutcome:
    """Result of validating the current document."""

    document: FormDocument
    issues: tuple[ValidationIssue, ...]
    errors: ErrorIndex

    @property
    def is_valid(self) -> bool:
        return not self.issues
