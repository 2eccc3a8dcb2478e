# src/iflow_artifacts/core/assembly/assembler.py
"""
Assembler de artefatos de integration flow.

Orquestra, em ordem fixa:
    1. descritor de metadados → Tag
    2. localização do único arquivo de definição de flow
    3. resolução de parâmetros externalizados (quando houver parameters.prop)
    4. coleta de todos os recursos, com a definição de flow já resolvida
    5. parsing da definição de flow (bruta ou transformada)
    6. construção do Artifact imutável

Duas portas de entrada:
    - assemble_artifact → núcleo; levanta ArtifactError em qualquer falha
    - build_artifact    → resultado tipado (BuildResult), sem exceções para
      falhas de construção; é a porta usada pelo motor de regras

Invariantes:
    - Qualquer falha nos passos 1–5 aborta a construção inteira
    - Nenhum Artifact parcial é devolvido ao chamador
    - A resolução de parâmetros roda no máximo uma vez por construção
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Optional, Union
from uuid import uuid4

from iflow_artifacts.core.config.layout import ArtifactLayout, default_layout
from iflow_artifacts.core.context import BuildContext
from iflow_artifacts.core.errors import ArtifactErrorPayload, build_unexpected_error
from iflow_artifacts.core.exceptions import (
    ArtifactError,
    ArtifactRootNotFound,
    MetadataDescriptorMissing,
)
from iflow_artifacts.core.fs import read_file_bytes
from iflow_artifacts.core.manifest.tag import create_tag
from iflow_artifacts.core.model.artifact import Artifact, FlowDocument
from iflow_artifacts.core.model.types import Resource, ResourceType
from iflow_artifacts.core.parameters.resolver import resolve_flow_content
from iflow_artifacts.core.resources.collector import collect_resources, locate_flow_definition


PathLike = Union[str, Path]


class BuildStatus(str, Enum):
    """Estado final de uma construção."""

    SUCCESS = "success"
    FAILED = "failed"


@dataclass(frozen=True)
class BuildResult:
    """
    Resultado tipado de `build_artifact`.

    Exatamente um entre `artifact` (SUCCESS) e `error` (FAILED) está
    presente. `context` traz o log estruturado da construção em ambos os
    casos; `exception` guarda a exceção original para `unwrap()`.
    """

    status: BuildStatus
    context: BuildContext
    artifact: Optional[Artifact] = None
    error: Optional[ArtifactErrorPayload] = None
    exception: Optional[Exception] = field(default=None, repr=False, compare=False)

    @property
    def ok(self) -> bool:
        return self.status is BuildStatus.SUCCESS

    def unwrap(self) -> Artifact:
        """Devolve o Artifact ou relança a exceção que abortou a construção."""
        if self.artifact is not None:
            return self.artifact
        if self.exception is None:
            raise ValueError(
                f"BuildResult {self.status.value} sem artifact nem exceção para relançar"
            )
        raise self.exception


def _log(ctx: Optional[BuildContext], *, stage: str, message: str, **extra) -> None:
    if ctx is not None:
        ctx.log(stage=stage, level="INFO", message=message, **extra)


def assemble_artifact(
    root: PathLike,
    *,
    layout: Optional[ArtifactLayout] = None,
    ctx: Optional[BuildContext] = None,
) -> Artifact:
    """
    Constrói o Artifact de um pacote de integration flow expandido.

    Args:
        root: diretório raiz do pacote.
        layout: layout efetivo; por padrão o `defaults.yaml` distribuído.
        ctx: contexto opcional para log estruturado.

    Returns:
        Artifact: agregado imutável.

    Raises:
        ArtifactRootNotFound: `root` não é um diretório.
        MetadataDescriptorMissing: descritor de metadados ausente.
        ManifestError: cabeçalhos ausentes ou malformados.
        AmbiguousOrMissingFlowDefinition: zero ou vários .iflw.
        ParametersError: parameters.prop malformado ou falha de transformação.
        FlowDocumentMalformed: definição de flow não é XML bem formado.
        ArtifactIOError: arquivo obrigatório ilegível.
    """
    root = Path(root)
    layout = layout if layout is not None else default_layout()

    if not root.is_dir():
        raise ArtifactRootNotFound(
            f"Raiz do pacote não é um diretório: {root}",
            details={"root": str(root)},
        )

    # 1. Tag
    manifest_path = layout.manifest_file(root)
    if not manifest_path.exists():
        raise MetadataDescriptorMissing(
            f"Descritor de metadados não encontrado: {manifest_path}",
            details={"path": str(manifest_path)},
        )
    tag = create_tag(read_file_bytes(manifest_path, description="descritor de metadados"), layout.headers)
    _log(ctx, stage="manifest.read", message="tag extraída do manifest", id=tag.id, name=tag.name)

    # 2. Definição de flow
    flow_path = locate_flow_definition(root, layout)
    _log(ctx, stage="flow.locate", message="definição de flow localizada", path=str(flow_path))

    # 3. Parâmetros externalizados
    resolved = resolve_flow_content(root, flow_path, layout, ctx=ctx)
    flow_resource = Resource.from_location(
        tag=tag,
        type=ResourceType.FLOW_DEFINITION,
        location=str(resolved.location),
        content=resolved.content,
    )

    # 4. Recursos
    resources = collect_resources(root, tag, layout, flow_definition=flow_resource, ctx=ctx)

    # 5. Documento de flow
    flow_document = FlowDocument.parse(resolved.content)
    _log(ctx, stage="flow.parse", message="definição de flow parseada", transformed=resolved.transformed)

    # 6. Artifact
    artifact = Artifact(tag=tag, flow_document=flow_document, resources=resources)
    _log(ctx, stage="artifact.assemble", message="artefato construído", fingerprint=artifact.fingerprint())
    return artifact


def build_artifact(
    root: PathLike,
    *,
    layout: Optional[ArtifactLayout] = None,
    build_id: Optional[str] = None,
) -> BuildResult:
    """
    Constrói o Artifact e devolve um resultado tipado.

    Falhas de construção viram `BuildResult(status=FAILED, error=...)`
    com o payload serializável; nenhum Artifact parcial é exposto.
    Erros de configuração de layout (ConfigError) ocorrem antes da
    construção e são levantados normalmente.
    """
    layout = layout if layout is not None else default_layout()
    ctx = BuildContext(
        build_id=build_id or uuid4().hex,
        created_at=datetime.now(timezone.utc),
        root=str(root),
        meta={"layout_hash": layout.config_hash},
    )

    try:
        artifact = assemble_artifact(root, layout=layout, ctx=ctx)
    except Exception as e:  # noqa: BLE001
        if isinstance(e, ArtifactError):
            error = e.to_payload()
        else:
            error = build_unexpected_error(
                stage=ctx.events[-1]["stage"] if ctx.events else None,
                exc_type=e.__class__.__name__,
                exc_message=str(e),
            )
        ctx.log(
            stage="artifact.assemble",
            level="ERROR",
            message=error.message,
            error_type=error.type,
        )
        return BuildResult(status=BuildStatus.FAILED, context=ctx, error=error, exception=e)

    return BuildResult(status=BuildStatus.SUCCESS, context=ctx, artifact=artifact)
