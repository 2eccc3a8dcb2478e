# src/iflow_artifacts/core/model/types.py
"""
Tipos canônicos do modelo de artefato.

Este módulo define as estruturas de valor que descrevem um pacote de
integration flow classificado:

    - ResourceType → enum fechado dos tipos de recurso
    - Tag          → identidade (id, name) derivada do descritor de metadados
    - Resource     → um arquivo classificado, imutável

Princípios fundamentais:
    - Tipos são imutáveis (frozen) e seguros para leitura concorrente
    - Valores textuais dos enums são estáveis e serializáveis
    - Nenhuma lógica de I/O vive neste módulo

Limites explícitos:
    - Não lê arquivos
    - Não valida semântica do conteúdo dos recursos
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from iflow_artifacts.core.hashing import sha256_bytes


class ResourceType(str, Enum):
    """
    Tipos de recurso de um pacote de integration flow.

    O conjunto é fechado: o `Artifact` sempre contém uma entrada (possivelmente
    vazia) para cada membro deste enum. Os valores são strings para facilitar
    serialização e a declaração do layout em YAML.

    Tipos definidos:
        - GROOVY_SCRIPT: scripts Groovy (.groovy, .gsh)
        - JAVASCRIPT_SCRIPT: scripts JavaScript (.js)
        - XSD: schemas XML
        - MESSAGE_MAPPING: message mappings (.mmap)
        - XSLT_MAPPING: mappings XSLT (.xsl, .xslt)
        - FLOW_DEFINITION: a definição do integration flow (.iflw)
        - ARCHIVE: bibliotecas (.jar, .zip)
        - WSDL: descrições de interface WSDL
        - EDMX: descrições de interface OData (.edmx)
        - OPERATION_MAPPING: operation mappings (.opmap)
    """

    GROOVY_SCRIPT = "groovy-script"
    JAVASCRIPT_SCRIPT = "javascript-script"
    XSD = "xsd"
    MESSAGE_MAPPING = "message-mapping"
    XSLT_MAPPING = "xslt-mapping"
    FLOW_DEFINITION = "flow-definition"
    ARCHIVE = "archive"
    WSDL = "wsdl"
    EDMX = "edmx"
    OPERATION_MAPPING = "operation-mapping"


@dataclass(frozen=True)
class Tag:
    """
    Identidade de um artefato.

    Campos:
        - id: primeiro token do cabeçalho de identidade (ex.: `Foo` em
          `Foo; singleton:=true`)
        - name: valor do cabeçalho de nome, literal

    Invariantes:
        - `id` e `name` nunca são vazios
    """

    id: str
    name: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Tag.id não pode ser vazio")
        if not self.name:
            raise ValueError("Tag.name não pode ser vazio")

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name}


_SEPARATORS = tuple(sorted({"/", os.sep}))


def resource_name_from_location(location: str) -> str:
    """Nome do recurso: tudo após o último separador da localização.

    Raises:
        ValueError: se a localização terminar em separador.
    """
    if location.endswith(_SEPARATORS):
        raise ValueError(f"Localização de recurso não pode terminar em separador: {location!r}")
    name = location
    for sep in _SEPARATORS:
        name = name.rsplit(sep, 1)[-1]
    return name


@dataclass(frozen=True)
class Resource:
    """Um arquivo classificado de um artefato."""

    tag: Tag
    type: ResourceType
    name: str
    content: bytes

    @classmethod
    def from_location(
        cls,
        *,
        tag: Tag,
        type: ResourceType,
        location: str,
        content: bytes,
    ) -> "Resource":
        return cls(tag=tag, type=type, name=resource_name_from_location(location), content=content)

    @property
    def size(self) -> int:
        return len(self.content)

    @property
    def sha256(self) -> str:
        return sha256_bytes(self.content)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "name": self.name,
            "size": self.size,
            "sha256": self.sha256,
        }
