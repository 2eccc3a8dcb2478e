"""Testes de validação e construção do ArtifactLayout."""

from __future__ import annotations

import copy
from pathlib import Path

import pytest

from iflow_artifacts.core.config.errors import LayoutValidationError
from iflow_artifacts.core.config.layout import build_layout, default_layout, load_layout
from iflow_artifacts.core.config.loader import load_config
from iflow_artifacts.core.model.types import ResourceType


@pytest.fixture
def base_config() -> dict:
    return copy.deepcopy(load_config())


def test_default_layout_covers_every_resource_type_in_enum_order():
    layout = default_layout()
    assert [spec.type for spec in layout.resources] == list(ResourceType)


def test_default_layout_table():
    layout = default_layout()
    table = {spec.type: (spec.directory, spec.suffixes) for spec in layout.resources}

    assert table[ResourceType.GROOVY_SCRIPT] == ("script", (".groovy", ".gsh"))
    assert table[ResourceType.JAVASCRIPT_SCRIPT] == ("script", (".js",))
    assert table[ResourceType.XSD] == ("xsd", (".xsd",))
    assert table[ResourceType.MESSAGE_MAPPING] == ("mapping", (".mmap",))
    assert table[ResourceType.XSLT_MAPPING] == ("mapping", (".xsl", ".xslt"))
    assert table[ResourceType.OPERATION_MAPPING] == ("mapping", (".opmap",))
    assert table[ResourceType.FLOW_DEFINITION] == ("scenarioflows/integrationflow", (".iflw",))
    assert table[ResourceType.ARCHIVE] == ("lib", (".jar", ".zip"))
    assert table[ResourceType.WSDL] == ("wsdl", (".wsdl",))
    assert table[ResourceType.EDMX] == ("edmx", (".edmx",))


def test_default_layout_paths(tmp_path: Path):
    layout = default_layout()
    assert layout.manifest_file(tmp_path) == tmp_path / "META-INF" / "MANIFEST.MF"
    assert layout.parameters_path(tmp_path) == tmp_path / "src/main/resources/parameters.prop"
    spec = layout.spec_for(ResourceType.XSD)
    assert layout.resource_dir(tmp_path, spec) == tmp_path / "src/main/resources/xsd"
    assert layout.headers.name == "Bundle-Name"
    assert layout.headers.id == "Bundle-SymbolicName"
    assert len(layout.config_hash) == 64


def test_unknown_resource_type_is_rejected(base_config):
    base_config["layout"]["resources"]["bpmn"] = {"directory": "bpmn", "suffixes": [".bpmn"]}
    with pytest.raises(LayoutValidationError):
        build_layout(base_config)


def test_missing_resource_type_is_rejected(base_config):
    del base_config["layout"]["resources"]["edmx"]
    with pytest.raises(LayoutValidationError):
        build_layout(base_config)


def test_empty_suffix_list_is_rejected(base_config):
    base_config["layout"]["resources"]["xsd"]["suffixes"] = []
    with pytest.raises(LayoutValidationError):
        build_layout(base_config)


def test_absolute_directory_is_rejected(base_config):
    base_config["layout"]["resources"]["xsd"]["directory"] = "/etc"
    with pytest.raises(LayoutValidationError):
        build_layout(base_config)


def test_missing_layout_section_is_rejected():
    with pytest.raises(LayoutValidationError):
        build_layout({})


def test_blank_header_name_is_rejected(base_config):
    base_config["layout"]["headers"]["id"] = "  "
    with pytest.raises(LayoutValidationError):
        build_layout(base_config)


def test_local_override_changes_table_and_hash(tmp_path: Path):
    local = tmp_path / "local.yaml"
    local.write_text(
        "layout:\n  resources:\n    xsd:\n      directory: schemas\n",
        encoding="utf-8",
    )

    layout = load_layout(local_path=str(local))

    assert layout.spec_for(ResourceType.XSD).directory == "schemas"
    assert layout.spec_for(ResourceType.XSD).suffixes == (".xsd",)
    assert layout.config_hash != default_layout().config_hash
