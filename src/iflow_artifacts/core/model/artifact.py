# src/iflow_artifacts/core/model/artifact.py
"""
Agregado imutável de um pacote de integration flow.

Este módulo define:
    - FlowDocument → documento XML da definição de flow, já parseado
    - Artifact     → Tag + FlowDocument + recursos classificados por tipo

Invariantes:
    - O mapa de recursos contém uma entrada para todo ResourceType
    - `resources_by_type` nunca falha para um tipo enumerado
    - Nenhum estado parcial ou atualizável é exposto

Limites explícitos:
    - Não lê arquivos (o Artifact é construído pelo assembler)
    - Não valida semântica do flow
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Tuple, Union

from lxml import etree

from iflow_artifacts.core.exceptions import FlowDocumentMalformed
from iflow_artifacts.core.hashing import compute_canonical_hash

from .types import Resource, ResourceType, Tag


# Prefixos usados pelas regras ao consultar o documento de flow.
FLOW_NAMESPACES: Dict[str, str] = {
    "bpmn2": "http://www.omg.org/spec/BPMN/20100524/MODEL",
    "bpmndi": "http://www.omg.org/spec/BPMN/20100524/DI",
    "ifl": "http:///com.sap.ifl.model/Ifl.xsd",
    "xsi": "http://www.w3.org/2001/XMLSchema-instance",
}


def _flow_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities="internal", no_network=True)


class FlowDocument:
    """
    Documento de definição de flow parseado.

    Guarda os bytes exatos que foram parseados (brutos ou já transformados
    pela resolução de parâmetros) e a árvore lxml correspondente. A árvore
    é tratada como somente leitura pelos consumidores.
    """

    __slots__ = ("_content", "_tree")

    def __init__(self, content: bytes, tree: "etree._ElementTree") -> None:
        self._content = content
        self._tree = tree

    @classmethod
    def parse(cls, content: bytes) -> "FlowDocument":
        """Parseia os bytes da definição de flow.

        Raises:
            FlowDocumentMalformed: se o conteúdo não for XML bem formado.
        """
        try:
            root = etree.fromstring(content, _flow_parser())
        except etree.XMLSyntaxError as e:
            raise FlowDocumentMalformed(
                "Definição de flow não é XML bem formado",
                details={"exc_message": str(e), "size": len(content)},
            ) from e
        return cls(content, root.getroottree())

    @property
    def content(self) -> bytes:
        return self._content

    @property
    def tree(self) -> "etree._ElementTree":
        return self._tree

    @property
    def root(self) -> "etree._Element":
        return self._tree.getroot()

    def xpath(self, expression: str, **variables: Any) -> Any:
        """Avalia uma expressão XPath com os prefixos de `FLOW_NAMESPACES`."""
        return self._tree.xpath(expression, namespaces=FLOW_NAMESPACES, **variables)


ResourceMap = Mapping[ResourceType, Tuple[Resource, ...]]


@dataclass(frozen=True, eq=False)
class Artifact:
    """
    Artefato de integration flow totalmente classificado.

    Construído uma única vez pelo assembler; imutável a partir daí e
    seguro para leituras concorrentes sem sincronização.

    Campos:
        - tag: identidade (id, name)
        - flow_document: documento de flow parseado
        - resources: mapa somente leitura ResourceType → tupla de Resource
    """

    tag: Tag
    flow_document: FlowDocument
    resources: ResourceMap = field(default_factory=dict)

    def __post_init__(self) -> None:
        # ResourceType(k) rejeita chaves fora do enum com ValueError
        given = {ResourceType(k): tuple(v) for k, v in self.resources.items()}
        normalized = {rtype: given.get(rtype, ()) for rtype in ResourceType}
        object.__setattr__(self, "resources", MappingProxyType(normalized))

    def resources_by_type(self, type: Union[ResourceType, str]) -> Tuple[Resource, ...]:
        """Recursos de um tipo (tupla possivelmente vazia).

        Raises:
            ValueError: se `type` não for um ResourceType conhecido.
        """
        return self.resources[ResourceType(type)]

    def iter_resources(self) -> Iterator[Resource]:
        for rtype in ResourceType:
            yield from self.resources[rtype]

    def to_dict(self) -> Dict[str, Any]:
        by_type: Dict[str, List[Dict[str, Any]]] = {
            rtype.value: [r.to_dict() for r in self.resources[rtype]]
            for rtype in ResourceType
        }
        return {"tag": self.tag.to_dict(), "resources": by_type}

    def fingerprint(self) -> str:
        """SHA-256 do resumo canônico (tag + nomes + hashes de conteúdo)."""
        return compute_canonical_hash(self.to_dict())
