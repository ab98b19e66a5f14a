"""Registration contract between the dispatcher and concrete renderers."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from schema_formgen.document_access import Path, PathSegment, to_path_key
from schema_formgen.schema_model import SchemaMetadata, SchemaNode, kind_name
from schema_formgen.schema_resolution import (
    UnsupportedSchemaKind,
    is_required,
    resolve_metadata,
)

from .dispatcher import resolve_dispatch_target, select_editor_for_target
from .template_kinds import EditorVariant, TemplateKind

RenderResult = TypeVar("RenderResult")


class TemplateRegistrationError(Exception):
    """Raised when a registry does not cover every template kind."""


@dataclass(frozen=True)
class RenderRequest:  # pylint: disable=too-many-instance-attributes
    """Everything a renderer needs to draw one field."""

    node: SchemaNode
    path: Path
    template_kind: TemplateKind
    editor: EditorVariant
    metadata: SchemaMetadata
    required: bool
    diagnostic: UnsupportedSchemaKind | None = None

    @property
    def path_key(self) -> str:
        return to_path_key(self.path)


Renderer = Callable[[RenderRequest], RenderResult]


class TemplateRegistry(Generic[RenderResult]):
    """One renderer per ``TemplateKind``; partial registration is rejected."""

    def __init__(self, renderers: Mapping[TemplateKind, Renderer[RenderResult]]) -> None:
        missing = [kind.value for kind in TemplateKind if kind not in renderers]
        if missing:
            raise TemplateRegistrationError(
                f"Missing renderers for template kinds: {', '.join(missing)}"
            )
        self._renderers = dict(renderers)

    def build_request(
        self,
        node: SchemaNode,
        path: Sequence[PathSegment] = (),
        *,
        required: bool | None = None,
    ) -> RenderRequest:
        path = tuple(path)
        path_key = to_path_key(path)
        target = resolve_dispatch_target(node, path_key)
        diagnostic = None
        if target.template_kind is TemplateKind.UNSUPPORTED:
            diagnostic = UnsupportedSchemaKind(kind_name(target.core), path_key)
        return RenderRequest(
            node=node,
            path=path,
            template_kind=target.template_kind,
            editor=select_editor_for_target(node, target),
            metadata=resolve_metadata(node),
            required=is_required(node) if required is None else required,
            diagnostic=diagnostic,
        )

    def render(
        self,
        node: SchemaNode,
        path: Sequence[PathSegment] = (),
        *,
        required: bool | None = None,
    ) -> RenderResult:
        request = self.build_request(node, path, required=required)
        return self._renderers[request.template_kind](request)
