# tests/conftest.py
"""
Fixtures compartilhados para testes do iflow-artifacts.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdo canônico de manifest e de definição de flow
- uma fábrica que materializa pacotes de iflow expandidos em `tmp_path`
- um BuildContext determinístico

Decisões:
    - Pacotes são escritos em diretórios temporários isolados por teste
    - O layout usado é sempre o `defaults.yaml` distribuído
    - Conteúdos são bytes determinísticos, comparáveis byte a byte

Limites explícitos:
    - Não cobre pacotes compactados (.zip)
    - Não contém lógica condicional complexa
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, Optional, Union

import pytest


MANIFEST = (
    "Manifest-Version: 1.0\r\n"
    "Bundle-ManifestVersion: 2\r\n"
    "Bundle-Name: HCI Tracker\r\n"
    "Bundle-SymbolicName: HCITracker; singleton:=true\r\n"
    "Bundle-Version: 1.0.3\r\n"
    "\r\n"
).encode("utf-8")

FLOW_XML = b"""<?xml version="1.0" encoding="UTF-8"?>
<bpmn2:definitions xmlns:bpmn2="http://www.omg.org/spec/BPMN/20100524/MODEL" xmlns:ifl="http:///com.sap.ifl.model/Ifl.xsd" id="Definitions_1">
    <bpmn2:collaboration id="Collaboration_1" name="Default Collaboration">
        <bpmn2:participant id="Participant_1" ifl:type="EndpointSender" name="Sender"/>
        <bpmn2:messageFlow id="MessageFlow_1" name="HTTPS" sourceRef="Participant_1" targetRef="StartEvent_1">
            <bpmn2:extensionElements>
                <ifl:property>
                    <key>urlPath</key>
                    <value>{{greeting}}</value>
                </ifl:property>
            </bpmn2:extensionElements>
        </bpmn2:messageFlow>
    </bpmn2:collaboration>
</bpmn2:definitions>
"""

BASE = "src/main/resources"
FLOW_DIR = f"{BASE}/scenarioflows/integrationflow"

Content = Union[str, bytes]


def _write(path: Path, content: Content) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, str):
        content = content.encode("utf-8")
    path.write_bytes(content)


@pytest.fixture
def manifest_bytes() -> bytes:
    return MANIFEST


@pytest.fixture
def flow_bytes() -> bytes:
    return FLOW_XML


@pytest.fixture
def make_package(tmp_path: Path):
    """
    Fábrica de pacotes de iflow expandidos.

    Escreve, por padrão, um manifest válido e um único `.iflw` em
    `scenarioflows/integrationflow/`. Cada chamada cria uma nova raiz.

    Args (da fábrica):
        files: caminho relativo → conteúdo de arquivos adicionais.
        manifest: conteúdo do manifest; None omite o arquivo.
        flow: conteúdo do .iflw padrão; None omite o arquivo.

    Returns:
        Path: raiz do pacote criado.
    """
    counter = {"n": 0}

    def _make(
        files: Optional[Dict[str, Content]] = None,
        *,
        manifest: Optional[Content] = MANIFEST,
        flow: Optional[Content] = FLOW_XML,
    ) -> Path:
        counter["n"] += 1
        root = tmp_path / f"iflow_{counter['n']}"
        root.mkdir()

        if manifest is not None:
            _write(root / "META-INF" / "MANIFEST.MF", manifest)
        if flow is not None:
            _write(root / FLOW_DIR / "HCITracker.iflw", flow)
        for rel, content in (files or {}).items():
            _write(root / rel, content)
        return root

    return _make


@pytest.fixture
def build_ctx(tmp_path: Path):
    """BuildContext com identidade e timestamp fixos."""
    from iflow_artifacts.core.context import BuildContext

    return BuildContext(
        build_id="build-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        root=str(tmp_path),
        meta={"source": "pytest"},
    )


@pytest.fixture
def layout():
    from iflow_artifacts.core.config.layout import default_layout

    return default_layout()
