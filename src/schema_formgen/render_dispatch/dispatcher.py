"""Schema node to template kind and editor variant dispatch."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from schema_formgen.schema_model import (
    ArrayNode,
    BigIntegerNode,
    BooleanNode,
    ConcreteNode,
    DateNode,
    EnumNode,
    LiteralNode,
    NullNode,
    NumberNode,
    ObjectNode,
    SchemaNode,
    StringNode,
    TupleNode,
    UnionNode,
    kind_name,
)
from schema_formgen.schema_resolution import UnsupportedSchemaKind, resolve_metadata, unwrap

from .template_kinds import EditorVariant, TemplateKind

LOGGER = logging.getLogger(__name__)

_KIND_BY_NODE_TYPE: dict[type, TemplateKind] = {
    StringNode: TemplateKind.STRING,
    NumberNode: TemplateKind.NUMBER,
    BooleanNode: TemplateKind.BOOLEAN,
    BigIntegerNode: TemplateKind.BIG_INTEGER,
    DateNode: TemplateKind.DATE,
    ArrayNode: TemplateKind.ARRAY,
    ObjectNode: TemplateKind.OBJECT,
    TupleNode: TemplateKind.TUPLE,
    EnumNode: TemplateKind.ENUM,
    UnionNode: TemplateKind.UNION,
}


@dataclass(frozen=True)
class DispatchTarget:
    """Result of dispatching one node.

    ``core`` is the concrete node the template renders, which differs from the
    unwrapped node when a nullable pair collapses to its non-null member.
    """

    template_kind: TemplateKind
    core: ConcreteNode
    member: SchemaNode


def dispatch(node: SchemaNode, path_key: str | None = None) -> TemplateKind:
    """Return the template kind required to render ``node``."""
    return resolve_dispatch_target(node, path_key).template_kind


def resolve_dispatch_target(node: SchemaNode, path_key: str | None = None) -> DispatchTarget:
    core = unwrap(node)
    if isinstance(core, UnionNode):
        non_null = [option for option in core.options if not isinstance(unwrap(option), NullNode)]
        if len(core.options) == 2 and len(non_null) == 1:
            return resolve_dispatch_target(non_null[0], path_key)
        return DispatchTarget(TemplateKind.UNION, core, node)

    template_kind = _KIND_BY_NODE_TYPE.get(type(core))
    if template_kind is None:
        LOGGER.warning("%s", UnsupportedSchemaKind(kind_name(core), path_key))
        return DispatchTarget(TemplateKind.UNSUPPORTED, core, node)
    return DispatchTarget(template_kind, core, node)


@dataclass(frozen=True)
class _EditorMatcher:
    matches: Callable[[ConcreteNode, str | None], bool]
    editor: EditorVariant


def _hint(expected: str) -> Callable[[ConcreteNode, str | None], bool]:
    return lambda _core, hint: hint == expected


def _hint_with_bounds(expected: str) -> Callable[[ConcreteNode, str | None], bool]:
    return lambda core, hint: hint == expected and _has_bounds(core)


def _string_format(*formats: str) -> Callable[[ConcreteNode, str | None], bool]:
    return lambda core, _hint: isinstance(core, StringNode) and core.format in formats


def _always(_core: ConcreteNode, _hint: str | None) -> bool:
    return True


def _has_bounds(core: ConcreteNode) -> bool:
    minimum = getattr(core, "minimum", None)
    maximum = getattr(core, "maximum", None)
    return minimum is not None and maximum is not None


def _bounded(core: ConcreteNode, _hint: str | None) -> bool:
    return _has_bounds(core)


def is_literal_union(node: SchemaNode) -> bool:
    """Return True for a union whose every option is a literal."""
    core = unwrap(node)
    return (
        isinstance(core, UnionNode)
        and bool(core.options)
        and all(isinstance(unwrap(option), LiteralNode) for option in core.options)
    )


def _literal_union_elements(core: ConcreteNode, _hint: str | None) -> bool:
    return isinstance(core, ArrayNode) and is_literal_union(core.element)


def _hint_with_literal_elements(expected: str) -> Callable[[ConcreteNode, str | None], bool]:
    return lambda core, hint: hint == expected and _literal_union_elements(core, hint)


def _literal_options(core: ConcreteNode, _hint: str | None) -> bool:
    return is_literal_union(core)


_RANGE_MATCHERS = (
    _EditorMatcher(_hint_with_bounds("range"), EditorVariant.RANGE),
    _EditorMatcher(_bounded, EditorVariant.RANGE),
    _EditorMatcher(_always, EditorVariant.NUMBER_INPUT),
)

# Explicit presentation hints come first, structural detection second and the
# plainest editor last; the first matching entry wins.
_EDITOR_MATCHERS: dict[TemplateKind, tuple[_EditorMatcher, ...]] = {
    TemplateKind.STRING: (
        _EditorMatcher(_hint("textarea"), EditorVariant.TEXTAREA),
        _EditorMatcher(_string_format("date"), EditorVariant.DATE_INPUT),
        _EditorMatcher(_string_format("datetime", "date-time"), EditorVariant.DATETIME_INPUT),
        _EditorMatcher(_string_format("email"), EditorVariant.EMAIL_INPUT),
        _EditorMatcher(_string_format("url", "uri"), EditorVariant.URL_INPUT),
        _EditorMatcher(_always, EditorVariant.TEXT_INPUT),
    ),
    TemplateKind.NUMBER: _RANGE_MATCHERS,
    TemplateKind.BIG_INTEGER: _RANGE_MATCHERS,
    TemplateKind.DATE: (
        _EditorMatcher(_hint_with_bounds("range"), EditorVariant.RANGE),
        _EditorMatcher(_hint("datetime"), EditorVariant.DATETIME_INPUT),
        _EditorMatcher(_bounded, EditorVariant.RANGE),
        _EditorMatcher(_always, EditorVariant.DATE_INPUT),
    ),
    TemplateKind.BOOLEAN: (
        _EditorMatcher(_hint("radio"), EditorVariant.RADIO),
        _EditorMatcher(_always, EditorVariant.CHECKBOX),
    ),
    TemplateKind.ENUM: (
        _EditorMatcher(_hint("radio"), EditorVariant.RADIO),
        _EditorMatcher(_always, EditorVariant.SELECT),
    ),
    TemplateKind.ARRAY: (
        _EditorMatcher(_hint_with_literal_elements("multiSelect"), EditorVariant.MULTI_SELECT),
        _EditorMatcher(_hint_with_literal_elements("checkbox"), EditorVariant.CHECKBOX_GROUP),
        _EditorMatcher(_literal_union_elements, EditorVariant.CHECKBOX_GROUP),
        _EditorMatcher(_always, EditorVariant.LIST),
    ),
    TemplateKind.UNION: (
        _EditorMatcher(_literal_options, EditorVariant.LITERAL_CHOICE),
        _EditorMatcher(_always, EditorVariant.OPTION_SWITCHER),
    ),
    TemplateKind.OBJECT: (_EditorMatcher(_always, EditorVariant.FIELDSET),),
    TemplateKind.TUPLE: (_EditorMatcher(_always, EditorVariant.FIXED_LIST),),
    TemplateKind.UNSUPPORTED: (_EditorMatcher(_always, EditorVariant.PLACEHOLDER),),
}


def select_editor(node: SchemaNode, path_key: str | None = None) -> EditorVariant:
    """Choose the editor variant for ``node`` within its template kind."""
    target = resolve_dispatch_target(node, path_key)
    return select_editor_for_target(node, target)


def select_editor_for_target(node: SchemaNode, target: DispatchTarget) -> EditorVariant:
    hint = _hint_kind(node)
    if hint is None and target.member is not node:
        hint = _hint_kind(target.member)
    matchers = _EDITOR_MATCHERS[target.template_kind]
    for matcher in matchers:
        if matcher.matches(target.core, hint):
            return matcher.editor
    return matchers[-1].editor


def _hint_kind(node: SchemaNode) -> str | None:
    presentation_hint = resolve_metadata(node).presentation_hint
    return presentation_hint.kind if presentation_hint is not None else None
