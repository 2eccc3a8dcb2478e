"""Coleta de recursos tipados a partir da tabela de layout.

Responsabilidades:
- percorrer a tabela `ArtifactLayout.resources` uma única vez
- listar cada diretório (sem recursão, em ordem de nome) e ler por
  completo os arquivos cujo sufixo casa
- para a definição de flow, usar o recurso já resolvido recebido do
  assembler, sem voltar ao disco

Diretório ausente ou ilegível → coleção vazia para o tipo (estado válido,
não erro). Arquivo listado que não pode ser lido → ArtifactIOError.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

from iflow_artifacts.core.config.layout import ArtifactLayout, ResourceSpec
from iflow_artifacts.core.context import BuildContext
from iflow_artifacts.core.exceptions import AmbiguousOrMissingFlowDefinition
from iflow_artifacts.core.fs import read_file_bytes
from iflow_artifacts.core.model.types import Resource, ResourceType, Tag

from .predicate import SuffixPredicate


STAGE = "resources.collect"


def _list_matching(directory: Path, predicate: Callable[[Path], bool]) -> Optional[List[Path]]:
    """Arquivos do diretório aceitos pelo predicado; None se não listável."""
    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError:
        return None
    return [p for p in entries if predicate(p)]


def locate_flow_definition(root: Path, layout: ArtifactLayout) -> Path:
    """Caminho do único arquivo de definição de flow.

    Raises:
        AmbiguousOrMissingFlowDefinition: zero ou mais de um arquivo.
    """
    spec = layout.spec_for(ResourceType.FLOW_DEFINITION)
    directory = layout.resource_dir(root, spec)
    matches = _list_matching(directory, SuffixPredicate(spec.suffixes)) or []

    if len(matches) != 1:
        raise AmbiguousOrMissingFlowDefinition(
            "Não foi possível localizar um único arquivo de definição de flow",
            details={
                "directory": str(directory),
                "suffixes": list(spec.suffixes),
                "matches": [p.name for p in matches],
            },
        )
    return matches[0]


def load_flow_definition(root: Path, tag: Tag, layout: ArtifactLayout) -> Resource:
    """Recurso da definição de flow com o conteúdo bruto do disco."""
    path = locate_flow_definition(root, layout)
    return Resource.from_location(
        tag=tag,
        type=ResourceType.FLOW_DEFINITION,
        location=str(path),
        content=read_file_bytes(path, description="definição de flow"),
    )


def collect_resource_type(
    root: Path,
    tag: Tag,
    layout: ArtifactLayout,
    spec: ResourceSpec,
    *,
    ctx: Optional[BuildContext] = None,
) -> Tuple[Resource, ...]:
    """Recursos de uma linha da tabela (tupla possivelmente vazia)."""
    directory = layout.resource_dir(root, spec)
    matches = _list_matching(directory, SuffixPredicate(spec.suffixes))

    if matches is None:
        if ctx is not None:
            ctx.log(
                stage=STAGE,
                level="DEBUG",
                message="diretório de recursos ausente ou ilegível",
                resource_type=spec.type.value,
                directory=str(directory),
            )
        return ()

    return tuple(
        Resource.from_location(
            tag=tag,
            type=spec.type,
            location=str(path),
            content=read_file_bytes(path, description=f"recurso {spec.type.value}"),
        )
        for path in matches
    )


def collect_resources(
    root: Path,
    tag: Tag,
    layout: ArtifactLayout,
    *,
    flow_definition: Optional[Resource] = None,
    ctx: Optional[BuildContext] = None,
) -> Dict[ResourceType, Tuple[Resource, ...]]:
    """Mapa completo ResourceType → recursos.

    Args:
        flow_definition: recurso já resolvido da definição de flow. Quando
            ausente, o único .iflw é localizado e lido sem alteração.

    Raises:
        AmbiguousOrMissingFlowDefinition: sem `flow_definition` e com zero
            ou mais de um arquivo de definição de flow.
        ArtifactIOError: arquivo listado ilegível.
    """
    if flow_definition is not None and flow_definition.type is not ResourceType.FLOW_DEFINITION:
        raise ValueError(f"flow_definition deve ser do tipo flow-definition, recebido: {flow_definition.type.value}")

    collected: Dict[ResourceType, Tuple[Resource, ...]] = {}

    for spec in layout.resources:
        if spec.type is ResourceType.FLOW_DEFINITION:
            resource = flow_definition if flow_definition is not None else load_flow_definition(root, tag, layout)
            collected[spec.type] = (resource,)
        else:
            collected[spec.type] = collect_resource_type(root, tag, layout, spec, ctx=ctx)

    if ctx is not None:
        ctx.log(
            stage=STAGE,
            level="INFO",
            message="recursos coletados",
            counts={rtype.value: len(items) for rtype, items in collected.items()},
        )
    return collected
