"""Form controller wiring the schema engine to a reactive store."""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Iterable
from typing import Any

from schema_formgen.default_generation import generate_default
from schema_formgen.document_access import (
    ABSENT,
    FormDocument,
    MoveDirection,
    Path,
    PathSegment,
    add_item,
    get_value,
    is_index_segment,
    move_item,
    normalize_path,
    remove_item,
    remove_value,
    set_value,
    to_path_key,
)
from schema_formgen.error_indexing import (
    EMPTY_ERROR_INDEX,
    ErrorIndex,
    ValidationIssue,
    index_issues,
    lookup_issues,
)
from schema_formgen.schema_model import (
    ArrayNode,
    ObjectNode,
    SchemaNode,
    TupleNode,
    UnionNode,
)
from schema_formgen.schema_resolution import is_field_required, is_required, unwrap

from .form_store import FormStore, InMemoryFormStore
from .session_models import FormMode, FormSettings, FormState, SubmitOutcome

LOGGER = logging.getLogger(__name__)

PathLike = str | Iterable[PathSegment]


class FormSessionError(Exception):
    """Raised when the form controller is used against its contract."""


class FormController:
    """Holds schema, document, errors and mode for one form session."""

    def __init__(
        self,
        schema: SchemaNode,
        *,
        settings: FormSettings | None = None,
        store: FormStore | None = None,
        initial_data: FormDocument = ABSENT,
    ) -> None:
        self._settings = settings or FormSettings()
        document = (
            generate_default(schema) if initial_data is ABSENT else copy.deepcopy(initial_data)
        )
        if store is None:
            store = InMemoryFormStore(
                FormState(
                    schema=schema,
                    document=document,
                    errors=EMPTY_ERROR_INDEX,
                    mode=self._settings.mode,
                )
            )
        else:
            store.write(
                {
                    "schema": schema,
                    "document": document,
                    "errors": EMPTY_ERROR_INDEX,
                    "mode": self._settings.mode,
                }
            )
        self._store = store

    @property
    def store(self) -> FormStore:
        return self._store

    @property
    def document(self) -> FormDocument:
        return get_value(self._store.read().document, ())

    @property
    def errors(self) -> ErrorIndex:
        return self._store.read().errors

    @property
    def readonly(self) -> bool:
        return self._store.read().mode is FormMode.READONLY

    def value_at(self, path: PathLike) -> FormDocument:
        return get_value(self._store.read().document, normalize_path(path))

    def set_value_at(self, path: PathLike, value: FormDocument) -> None:
        self._update(lambda document: set_value(document, normalize_path(path), value))

    def remove_value_at(self, path: PathLike) -> None:
        self._update(lambda document: remove_value(document, normalize_path(path)))

    def move_item(self, array_path: PathLike, index: int, direction: MoveDirection | str) -> None:
        segments = normalize_path(array_path)
        self._update(lambda document: move_item(document, segments, index, direction))

    def remove_item(self, array_path: PathLike, index: int) -> None:
        segments = normalize_path(array_path)
        self._update(lambda document: remove_item(document, segments, index))

    def add_item(
        self,
        array_path: PathLike,
        factory: Callable[[], FormDocument] | None = None,
    ) -> None:
        """Append an item; by default a fresh default of the array's element schema."""
        segments = normalize_path(array_path)
        if factory is None:
            factory = self._element_factory(segments)
        self._update(lambda document: add_item(document, segments, factory))

    def errors_at(self, path: PathLike) -> tuple[ValidationIssue, ...]:
        return lookup_issues(self._store.read().errors, normalize_path(path))

    def clear_errors(self) -> None:
        self._store.write({"errors": EMPTY_ERROR_INDEX})

    def schema_at(self, path: PathLike) -> SchemaNode | None:
        """Return the schema describing ``path`` or None when the schema has no such field."""
        node: SchemaNode | None = self._store.read().schema
        for segment in normalize_path(path):
            if node is None:
                return None
            node = _child_schema(node, segment)
        return node

    def is_required_at(self, path: PathLike) -> bool:
        """Requiredness for the required marker of the field at ``path``."""
        segments = normalize_path(path)
        node = self.schema_at(segments)
        if node is None:
            return False
        if not segments:
            return is_required(node)
        parent = self.schema_at(segments[:-1])
        parent_core = unwrap(parent) if parent is not None else None
        if isinstance(parent_core, ObjectNode):
            return is_field_required(parent_core, str(segments[-1]))
        return is_required(node)

    def submit(self) -> SubmitOutcome:
        """Validate the document and index the resulting issues."""
        validator = self._settings.validator
        if validator is None:
            raise FormSessionError("No validator configured for this form.")
        document = self.document
        issues = tuple(validator(document))
        errors = index_issues(issues)
        self._store.write({"errors": errors})
        LOGGER.debug("Validation produced %d issue(s) at %d path(s).", len(issues), len(errors))
        return SubmitOutcome(document=document, issues=issues, errors=errors)

    def render(self, path: PathLike = ()) -> Any:
        """Render the field at ``path`` with the configured template registry."""
        templates = self._settings.templates
        if templates is None:
            raise FormSessionError("No template registry configured for this form.")
        segments = normalize_path(path)
        node = self.schema_at(segments)
        if node is None:
            raise FormSessionError(f"Schema has no field at {to_path_key(segments)}.")
        return templates.render(node, segments, required=self.is_required_at(segments))

    def _update(self, change: Callable[[FormDocument], FormDocument]) -> None:
        if self.readonly:
            raise FormSessionError("Form is read-only.")
        self._store.write({"document": change(self._store.read().document)})

    def _element_factory(self, array_path: Path) -> Callable[[], FormDocument]:
        node = self.schema_at(array_path)
        core = unwrap(node) if node is not None else None
        if not isinstance(core, ArrayNode):
            raise FormSessionError(f"Schema has no array at {to_path_key(array_path)}.")
        element = core.element
        return lambda: generate_default(element)


def _child_schema(node: SchemaNode, segment: PathSegment) -> SchemaNode | None:
    core = unwrap(node)
    if isinstance(core, ObjectNode):
        return core.fields.get(str(segment))
    if isinstance(core, ArrayNode):
        return core.element if is_index_segment(segment) else None
    if isinstance(core, TupleNode):
        if is_index_segment(segment) and int(segment) < len(core.items):
            return core.items[int(segment)]
        return None
    if isinstance(core, UnionNode):
        for option in core.options:
            child = _child_schema(option, segment)
            if child is not None:
                return child
    return None
