# tests/core/resources/test_resource_collector.py
"""
Testes da coleta de recursos tipados.

Os testes asseguram que:
- toda linha da tabela de layout produz uma entrada (possivelmente vazia)
- diretórios ausentes não são erro
- a listagem não é recursiva e respeita maiúsculas/minúsculas
- exatamente um arquivo de definição de flow é exigido
- a definição de flow recebida do assembler não é relida do disco
"""

from __future__ import annotations

from pathlib import Path

import pytest

from iflow_artifacts.core.exceptions import AmbiguousOrMissingFlowDefinition, ArtifactIOError
from iflow_artifacts.core.model.types import Resource, ResourceType, Tag
from iflow_artifacts.core.resources.collector import (
    collect_resource_type,
    collect_resources,
    load_flow_definition,
    locate_flow_definition,
)

BASE = "src/main/resources"
FLOW_DIR = f"{BASE}/scenarioflows/integrationflow"
TAG = Tag(id="HCITracker", name="HCI Tracker")


def test_every_type_has_an_entry(make_package, layout):
    root = make_package()

    collected = collect_resources(root, TAG, layout)

    assert set(collected) == set(ResourceType)
    assert collected[ResourceType.XSD] == ()
    assert len(collected[ResourceType.FLOW_DEFINITION]) == 1


def test_empty_directory_yields_empty_tuple(make_package, layout):
    root = make_package()
    (root / BASE / "xsd").mkdir(parents=True)
    spec = layout.spec_for(ResourceType.XSD)

    assert collect_resource_type(root, TAG, layout, spec) == ()


def test_missing_directory_is_logged_not_raised(make_package, layout, build_ctx):
    root = make_package()
    spec = layout.spec_for(ResourceType.WSDL)

    assert collect_resource_type(root, TAG, layout, spec, ctx=build_ctx) == ()
    assert build_ctx.events[-1]["level"] == "DEBUG"
    assert build_ctx.events[-1]["resource_type"] == "wsdl"


def test_scripts_are_split_by_suffix(make_package, layout):
    root = make_package(
        {
            f"{BASE}/script/a.groovy": "println 'a'",
            f"{BASE}/script/b.gsh": "println 'b'",
            f"{BASE}/script/c.js": "var c;",
            f"{BASE}/script/readme.txt": "ignored",
        }
    )

    collected = collect_resources(root, TAG, layout)

    assert [r.name for r in collected[ResourceType.GROOVY_SCRIPT]] == ["a.groovy", "b.gsh"]
    assert [r.name for r in collected[ResourceType.JAVASCRIPT_SCRIPT]] == ["c.js"]
    assert collected[ResourceType.JAVASCRIPT_SCRIPT][0].content == b"var c;"


def test_mappings_share_directory(make_package, layout):
    root = make_package(
        {
            f"{BASE}/mapping/m.mmap": "<mm/>",
            f"{BASE}/mapping/t.xsl": "<xsl/>",
            f"{BASE}/mapping/u.xslt": "<xslt/>",
            f"{BASE}/mapping/o.opmap": "<op/>",
        }
    )

    collected = collect_resources(root, TAG, layout)

    assert [r.name for r in collected[ResourceType.MESSAGE_MAPPING]] == ["m.mmap"]
    assert [r.name for r in collected[ResourceType.XSLT_MAPPING]] == ["t.xsl", "u.xslt"]
    assert [r.name for r in collected[ResourceType.OPERATION_MAPPING]] == ["o.opmap"]


def test_listing_is_not_recursive(make_package, layout):
    root = make_package(
        {
            f"{BASE}/xsd/top.xsd": "<xs/>",
            f"{BASE}/xsd/nested/deep.xsd": "<xs/>",
        }
    )

    xsds = collect_resources(root, TAG, layout)[ResourceType.XSD]

    assert [r.name for r in xsds] == ["top.xsd"]


def test_suffix_match_is_case_sensitive(make_package, layout):
    root = make_package({f"{BASE}/xsd/upper.XSD": "<xs/>"})
    assert collect_resources(root, TAG, layout)[ResourceType.XSD] == ()


def test_resources_carry_tag_and_type(make_package, layout):
    root = make_package({f"{BASE}/lib/dep.jar": b"PK\x03\x04"})

    (archive,) = collect_resources(root, TAG, layout)[ResourceType.ARCHIVE]

    assert archive.tag == TAG
    assert archive.type is ResourceType.ARCHIVE
    assert archive.content == b"PK\x03\x04"


def test_locate_flow_definition(make_package, layout):
    root = make_package()
    assert locate_flow_definition(root, layout) == root / FLOW_DIR / "HCITracker.iflw"


def test_no_flow_definition(make_package, layout):
    root = make_package(flow=None)
    with pytest.raises(AmbiguousOrMissingFlowDefinition) as ei:
        locate_flow_definition(root, layout)
    assert ei.value.details["matches"] == []


def test_two_flow_definitions(make_package, layout):
    root = make_package({f"{FLOW_DIR}/Other.iflw": "<x/>"})
    with pytest.raises(AmbiguousOrMissingFlowDefinition) as ei:
        collect_resources(root, TAG, layout)
    assert ei.value.details["matches"] == ["HCITracker.iflw", "Other.iflw"]


def test_load_flow_definition_reads_raw_bytes(make_package, layout, flow_bytes):
    root = make_package()
    resource = load_flow_definition(root, TAG, layout)
    assert resource.name == "HCITracker.iflw"
    assert resource.content == flow_bytes


def test_given_flow_definition_is_used_as_is(make_package, layout):
    root = make_package()
    resolved = Resource(
        tag=TAG,
        type=ResourceType.FLOW_DEFINITION,
        name="HCITracker.iflw",
        content=b"<resolved/>",
    )

    collected = collect_resources(root, TAG, layout, flow_definition=resolved)

    assert collected[ResourceType.FLOW_DEFINITION] == (resolved,)


def test_given_flow_definition_must_have_flow_type(make_package, layout):
    root = make_package()
    wrong = Resource(tag=TAG, type=ResourceType.XSD, name="a.xsd", content=b"")
    with pytest.raises(ValueError):
        collect_resources(root, TAG, layout, flow_definition=wrong)


def test_collect_logs_counts(make_package, layout, build_ctx):
    root = make_package({f"{BASE}/wsdl/service.wsdl": "<wsdl/>"})

    collect_resources(root, TAG, layout, ctx=build_ctx)

    counts = build_ctx.events[-1]["counts"]
    assert counts["wsdl"] == 1
    assert counts["flow-definition"] == 1
    assert counts["edmx"] == 0


def test_unlistable_directory_yields_empty_tuple(make_package, layout, build_ctx, monkeypatch):
    root = make_package({f"{BASE}/xsd/a.xsd": "<xs/>"})
    xsd_dir = root / BASE / "xsd"
    original_iterdir = Path.iterdir

    def iterdir(self):
        if self == xsd_dir:
            raise PermissionError(13, "Permission denied", str(self))
        return original_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", iterdir)

    spec = layout.spec_for(ResourceType.XSD)
    assert collect_resource_type(root, TAG, layout, spec, ctx=build_ctx) == ()
    assert build_ctx.events[-1]["level"] == "DEBUG"


def test_unreadable_listed_file_is_io_error(make_package, layout, monkeypatch):
    root = make_package({f"{BASE}/xsd/a.xsd": "<xs/>"})
    original_read_bytes = Path.read_bytes

    def read_bytes(self):
        if self.name == "a.xsd":
            raise PermissionError(13, "Permission denied", str(self))
        return original_read_bytes(self)

    monkeypatch.setattr(Path, "read_bytes", read_bytes)

    with pytest.raises(ArtifactIOError) as ei:
        collect_resources(root, TAG, layout)
    assert ei.value.details["path"].endswith("a.xsd")
    assert ei.value.details["exc_type"] == "PermissionError"
