"""Resolução do conteúdo da definição de flow.

Executa no máximo uma vez por construção, antes da coleta de recursos:

- sem parameters.prop, o conteúdo é o arquivo .iflw byte a byte;
- com parameters.prop, o conteúdo é a saída da transformação de
  substituição aplicada ao .iflw bruto com o mapa completo.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Tuple

from lxml import etree

from iflow_artifacts.core.config.layout import ArtifactLayout
from iflow_artifacts.core.context import BuildContext
from iflow_artifacts.core.exceptions import TransformFailed
from iflow_artifacts.core.fs import read_file_bytes

from .properties import parse_parameters
from .transform import source_parser, transform_flow_document


STAGE = "parameters.resolve"


@dataclass(frozen=True)
class ResolvedFlow:
    """Conteúdo final da definição de flow e de onde ele veio."""

    location: Path
    content: bytes
    parameters: Optional[Mapping[str, str]] = None
    unresolved: Tuple[str, ...] = ()

    @property
    def transformed(self) -> bool:
        return self.parameters is not None


def _placeholder_keys(text: str) -> Iterator[str]:
    # mesma regra do stylesheet: chave entre o primeiro `{{` e o `}}` seguinte
    while True:
        start = text.find("{{")
        if start < 0:
            return
        rest = text[start + 2:]
        end = rest.find("}}")
        if end < 0:
            return
        yield rest[:end]
        text = rest[end + 2:]


def find_placeholders(content: bytes) -> Tuple[str, ...]:
    """Chaves de placeholders `{{chave}}` do documento, sem repetição.

    Percorre os mesmos nós que a transformação (texto e atributos), em
    ordem de documento.

    Raises:
        TransformFailed: conteúdo que não é XML bem formado.
    """
    try:
        tree = etree.fromstring(content, source_parser())
    except etree.XMLSyntaxError as e:
        raise TransformFailed(
            "Definição de flow não é XML bem formado",
            details={"exc_type": e.__class__.__name__, "exc_message": str(e)},
        ) from e

    keys = (key for node in tree.xpath("//text() | //@*") for key in _placeholder_keys(str(node)))
    return tuple(dict.fromkeys(keys))


def resolve_flow_content(
    root: Path,
    flow_path: Path,
    layout: ArtifactLayout,
    *,
    ctx: Optional[BuildContext] = None,
) -> ResolvedFlow:
    """Lê o .iflw e aplica os parâmetros externalizados, se houver.

    Raises:
        ArtifactIOError: .iflw ou parameters.prop ilegível.
        ParametersFileMalformed: parameters.prop malformado.
        TransformFailed: falha na transformação.
    """
    raw = read_file_bytes(flow_path, description="definição de flow")
    parameters_path = layout.parameters_path(root)

    if not parameters_path.exists():
        if ctx is not None:
            ctx.log(
                stage=STAGE,
                level="DEBUG",
                message="sem parâmetros externalizados; definição de flow usada sem alteração",
                path=str(parameters_path),
            )
        return ResolvedFlow(location=flow_path, content=raw)

    parameters = parse_parameters(
        read_file_bytes(parameters_path, description="arquivo de parâmetros externalizados")
    )
    content = transform_flow_document(raw, parameters)
    unresolved = tuple(key for key in find_placeholders(raw) if key not in parameters)

    if ctx is not None:
        ctx.log(
            stage=STAGE,
            level="INFO",
            message="parâmetros externalizados aplicados à definição de flow",
            parameters=len(parameters),
            raw_bytes=len(raw),
            resolved_bytes=len(content),
        )
        for key in unresolved:
            ctx.add_warning(stage=STAGE, message=f"placeholder sem valor em parameters.prop: {key}")

    return ResolvedFlow(
        location=flow_path,
        content=content,
        parameters=MappingProxyType(dict(parameters)),
        unresolved=unresolved,
    )
