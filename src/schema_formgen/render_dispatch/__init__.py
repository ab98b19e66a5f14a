"""Render dispatch exports."""

from .dispatcher import (
    DispatchTarget,
    dispatch,
    is_literal_union,
    resolve_dispatch_target,
    select_editor,
)
from .field_plan import ARRAY_ITEM_SEGMENT, FieldPlan, describe_fields
from .template_kinds import EditorVariant, TemplateKind
from .template_registry import (
    RenderRequest,
    Renderer,
    TemplateRegistrationError,
    TemplateRegistry,
)

__all__ = [
    "ARRAY_ITEM_SEGMENT",
    "DispatchTarget",
    "EditorVariant",
    "FieldPlan",
    "RenderRequest",
    "Renderer",
    "TemplateKind",
    "TemplateRegistrationError",
    "TemplateRegistry",
    "describe_fields",
    "dispatch",
    "is_literal_union",
    "resolve_dispatch_target",
    "select_editor",
]
