# src/iflow_artifacts/__init__.py
"""
iflow-artifacts — modelo tipado e imutável de pacotes de integration flow.

Este pacote raiz define o namespace público do núcleo que lê um pacote
de integration flow (SAP Cloud Integration) já expandido em disco e
produz um `Artifact` único, pronto para ser consumido por um motor de
regras.

Princípios centrais:
    - O layout do pacote é fixo e declarado em configuração
    - Toda falha aborta a construção inteira (sem artefatos parciais)
    - Diretórios opcionais ausentes não são erro
    - O resultado é imutável e seguro para leitura concorrente

Arquitetura em alto nível:
    - core.manifest   → descritor de metadados → Tag
    - core.parameters → parâmetros externalizados + transformação XSLT
    - core.resources  → classificação de recursos por tipo
    - core.assembly   → orquestração e resultado tipado (BuildResult)

Limites explícitos:
    - Não descompacta arquivos (o pacote já está expandido)
    - Não valida semanticamente o conteúdo dos recursos
    - Não contém motor de regras, relatórios ou CLI
"""
# src/iflow_artifacts/__init__.py
from .core.assembly import BuildResult, BuildStatus, assemble_artifact, build_artifact
from .core.config import ArtifactLayout, load_layout
from .core.model import Artifact, FlowDocument, Resource, ResourceType, Tag

__all__ = [
    "Artifact",
    "ArtifactLayout",
    "BuildResult",
    "BuildStatus",
    "FlowDocument",
    "Resource",
    "ResourceType",
    "Tag",
    "assemble_artifact",
    "build_artifact",
    "load_layout",
]
