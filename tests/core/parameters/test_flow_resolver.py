"""Testes da resolução do conteúdo da definição de flow."""

from __future__ import annotations

import pytest

from iflow_artifacts.core.exceptions import (
    ArtifactIOError,
    ParametersFileMalformed,
    TransformFailed,
)
from iflow_artifacts.core.parameters.resolver import (
    STAGE,
    find_placeholders,
    resolve_flow_content,
)
from iflow_artifacts.core.parameters.transform import transform_flow_document

FLOW = "src/main/resources/scenarioflows/integrationflow/HCITracker.iflw"
PARAMS = "src/main/resources/parameters.prop"


def test_without_parameters_file_content_is_raw(make_package, layout, flow_bytes, build_ctx):
    root = make_package()

    resolved = resolve_flow_content(root, root / FLOW, layout, ctx=build_ctx)

    assert resolved.content == flow_bytes
    assert not resolved.transformed
    assert resolved.parameters is None
    assert build_ctx.events[-1]["level"] == "DEBUG"


def test_with_parameters_file_content_is_transformed(make_package, layout, flow_bytes, build_ctx):
    root = make_package({PARAMS: "greeting=hello\n"})

    resolved = resolve_flow_content(root, root / FLOW, layout, ctx=build_ctx)

    assert resolved.transformed
    assert resolved.content == transform_flow_document(flow_bytes, {"greeting": "hello"})
    assert dict(resolved.parameters) == {"greeting": "hello"}
    assert resolved.unresolved == ()
    assert STAGE not in build_ctx.warnings


def test_empty_parameters_file_still_transforms(make_package, layout, flow_bytes):
    root = make_package({PARAMS: ""})

    resolved = resolve_flow_content(root, root / FLOW, layout)

    assert resolved.transformed
    assert resolved.content == transform_flow_document(flow_bytes, {})
    assert resolved.unresolved == ("greeting",)


def test_unresolved_placeholders_are_warnings(make_package, layout, build_ctx):
    root = make_package({PARAMS: "other=x\n"})

    resolved = resolve_flow_content(root, root / FLOW, layout, ctx=build_ctx)

    assert resolved.unresolved == ("greeting",)
    assert build_ctx.warnings[STAGE] == ["placeholder sem valor em parameters.prop: greeting"]


def test_malformed_parameters_file(make_package, layout):
    root = make_package({PARAMS: "bad=\\uZZZZ\n"})
    with pytest.raises(ParametersFileMalformed):
        resolve_flow_content(root, root / FLOW, layout)


def test_parameters_path_that_is_a_directory_is_io_error(make_package, layout):
    root = make_package()
    (root / PARAMS).mkdir(parents=True)
    with pytest.raises(ArtifactIOError):
        resolve_flow_content(root, root / FLOW, layout)


def test_find_placeholders_deduplicates_in_order():
    content = b"<a x='{{b}}'>{{a}} {{b}} {{ }} {{c}}</a>"
    assert find_placeholders(content) == ("b", "a", " ", "c")


def test_value_containing_braces_is_not_reported(make_package, layout, build_ctx):
    root = make_package({PARAMS: "greeting={{literal}}\n"})

    resolved = resolve_flow_content(root, root / FLOW, layout, ctx=build_ctx)

    assert resolved.unresolved == ()
    assert STAGE not in build_ctx.warnings


def test_key_with_brace_follows_substitution_rule(make_package, layout, build_ctx):
    flow = b"<r><v>{{a}b}}</v><w x='{{greeting}}'/></r>"
    root = make_package({PARAMS: "greeting=hello\n"}, flow=flow)

    resolved = resolve_flow_content(root, root / FLOW, layout, ctx=build_ctx)

    assert resolved.unresolved == ("a}b",)
    assert build_ctx.warnings[STAGE] == ["placeholder sem valor em parameters.prop: a}b"]


def test_find_placeholders_ignores_comments():
    assert find_placeholders(b"<r><!-- {{hidden}} --><v>{{shown}}</v></r>") == ("shown",)


def test_find_placeholders_rejects_malformed_xml():
    with pytest.raises(TransformFailed):
        find_placeholders(b"<r>{{a}}")
