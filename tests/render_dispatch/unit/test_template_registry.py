"""Template registry contract tests."""

from __future__ import annotations

import pytest
from schema_formgen.render_dispatch import (
    EditorVariant,
    RenderRequest,
    TemplateKind,
    TemplateRegistrationError,
    TemplateRegistry,
)
from schema_formgen.schema_model import (
    NumberNode,
    OptionalNode,
    SchemaMetadata,
    StringNode,
    UnsupportedNode,
)


def _echo(request: RenderRequest) -> RenderRequest:
    return request


def _registry() -> TemplateRegistry[RenderRequest]:
    return TemplateRegistry({kind: _echo for kind in TemplateKind})


def test_partial_registration_is_rejected() -> None:
    renderers = {kind: _echo for kind in TemplateKind if kind is not TemplateKind.DATE}

    with pytest.raises(TemplateRegistrationError, match="date"):
        TemplateRegistry(renderers)


def test_render_routes_to_the_renderer_of_the_dispatched_kind() -> None:
    calls: list[str] = []
    renderers = {kind: _echo for kind in TemplateKind}
    renderers[TemplateKind.NUMBER] = lambda request: calls.append(request.path_key) or request

    request = TemplateRegistry(renderers).render(NumberNode(), ("age",))

    assert calls == ["/age"]
    assert request.template_kind is TemplateKind.NUMBER
    assert request.editor is EditorVariant.NUMBER_INPUT


def test_request_carries_metadata_and_requiredness() -> None:
    node = OptionalNode(
        StringNode(metadata=SchemaMetadata(title="Nickname")),
        metadata=SchemaMetadata(description="What friends call you"),
    )

    request = _registry().render(node, ["nickname"])

    assert request.required is False
    assert request.metadata.title == "Nickname"
    assert request.metadata.description == "What friends call you"
    assert request.path == ("nickname",)
    assert request.diagnostic is None


def test_explicit_requiredness_overrides_node() -> None:
    request = _registry().render(StringNode(), ("note",), required=False)

    assert request.required is False


def test_unsupported_kind_reaches_its_renderer_with_a_diagnostic() -> None:
    request = _registry().render(UnsupportedNode("map"), ("extras",))

    assert request.template_kind is TemplateKind.UNSUPPORTED
    assert request.editor is EditorVariant.PLACEHOLDER
    assert request.diagnostic is not None
    assert str(request.diagnostic) == "Unsupported schema type: map at path: /extras"
