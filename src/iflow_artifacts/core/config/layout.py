# src/iflow_artifacts/core/config/layout.py
"""
Layout declarativo de um pacote de integration flow.

Este módulo converte a seção `layout` da configuração resolvida em um
`ArtifactLayout` imutável: caminhos fixos (descritor, parâmetros), nomes
dos cabeçalhos do manifest e a tabela estática de recursos, com um
`ResourceSpec` (tipo → diretório, sufixos) por ResourceType.

Adicionar um novo arquivo a um tipo existente, ou mudar um diretório, é
uma alteração de dados (YAML), não de código.

Invariantes:
    - A tabela de recursos cobre todos os ResourceType, exatamente uma vez
    - A ordem da tabela segue a ordem do enum
    - Todos os caminhos são relativos à raiz do pacote
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path, PurePosixPath
from typing import Any, Dict, Mapping, Optional, Tuple

from iflow_artifacts.core.hashing import compute_canonical_hash
from iflow_artifacts.core.model.types import ResourceType

from .errors import LayoutValidationError
from .loader import load_config


@dataclass(frozen=True)
class ResourceSpec:
    """Uma linha da tabela de recursos."""

    type: ResourceType
    directory: str
    suffixes: Tuple[str, ...]


@dataclass(frozen=True)
class ManifestHeaders:
    """Nomes dos cabeçalhos obrigatórios do descritor de metadados."""

    name: str
    id: str


@dataclass(frozen=True)
class ArtifactLayout:
    """Layout efetivo (imutável) usado por uma construção de artefato."""

    manifest_path: str
    resources_base: str
    parameters_file: str
    headers: ManifestHeaders
    resources: Tuple[ResourceSpec, ...]
    config_hash: str

    def spec_for(self, rtype: ResourceType) -> ResourceSpec:
        for spec in self.resources:
            if spec.type is rtype:
                return spec
        # inalcançável para layouts construídos por build_layout
        raise KeyError(rtype)

    def manifest_file(self, root: Path) -> Path:
        return root / self.manifest_path

    def parameters_path(self, root: Path) -> Path:
        return root / self.resources_base / self.parameters_file

    def resource_dir(self, root: Path, spec: ResourceSpec) -> Path:
        return root / self.resources_base / spec.directory


def _require_relative(value: Any, *, key: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise LayoutValidationError(f"layout.{key} deve ser string não vazia")
    if PurePosixPath(value).is_absolute() or Path(value).is_absolute():
        raise LayoutValidationError(f"layout.{key} deve ser relativo à raiz do pacote: {value!r}")
    return value


def _require_mapping(value: Any, *, key: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise LayoutValidationError(f"{key} deve ser um mapa, recebido: {type(value).__name__}")
    return value


def _build_spec(rtype: ResourceType, entry: Any) -> ResourceSpec:
    key = f"resources.{rtype.value}"
    entry = _require_mapping(entry, key=f"layout.{key}")
    directory = _require_relative(entry.get("directory"), key=f"{key}.directory")

    suffixes = entry.get("suffixes")
    if not isinstance(suffixes, list) or not suffixes:
        raise LayoutValidationError(f"layout.{key}.suffixes deve ser lista não vazia")
    for suffix in suffixes:
        if not isinstance(suffix, str) or not suffix:
            raise LayoutValidationError(f"layout.{key}.suffixes contém valor inválido: {suffix!r}")

    return ResourceSpec(type=rtype, directory=directory, suffixes=tuple(suffixes))


def build_layout(config: Dict[str, Any]) -> ArtifactLayout:
    """
    Valida a seção `layout` da configuração e constrói o ArtifactLayout.

    Raises:
        LayoutValidationError: se a seção estiver ausente, incompleta ou
            declarar tipos de recurso desconhecidos.
    """
    section = _require_mapping(config.get("layout"), key="layout")

    headers = _require_mapping(section.get("headers"), key="layout.headers")
    for header_key in ("name", "id"):
        value = headers.get(header_key)
        if not isinstance(value, str) or not value.strip():
            raise LayoutValidationError(f"layout.headers.{header_key} deve ser string não vazia")

    table = _require_mapping(section.get("resources"), key="layout.resources")
    known = {rtype.value for rtype in ResourceType}

    unknown = sorted(set(table) - known)
    if unknown:
        raise LayoutValidationError(f"Tipos de recurso desconhecidos no layout: {unknown}")

    missing = [rtype.value for rtype in ResourceType if rtype.value not in table]
    if missing:
        raise LayoutValidationError(f"Tipos de recurso sem entrada no layout: {missing}")

    return ArtifactLayout(
        manifest_path=_require_relative(section.get("manifest_path"), key="manifest_path"),
        resources_base=_require_relative(section.get("resources_base"), key="resources_base"),
        parameters_file=_require_relative(section.get("parameters_file"), key="parameters_file"),
        headers=ManifestHeaders(name=headers["name"], id=headers["id"]),
        resources=tuple(_build_spec(rtype, table[rtype.value]) for rtype in ResourceType),
        config_hash=compute_canonical_hash(section),
    )


def load_layout(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> ArtifactLayout:
    """Carrega a configuração (defaults + local) e constrói o layout."""
    return build_layout(load_config(defaults_path=defaults_path, local_path=local_path))


@lru_cache(maxsize=1)
def default_layout() -> ArtifactLayout:
    """Layout do `defaults.yaml` distribuído com o pacote."""
    return load_layout()
