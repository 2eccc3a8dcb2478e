"""Extração da Tag (id, name) a partir do descritor de metadados.

Formatos conhecidos do cabeçalho de identidade:

    HCITracker
    HCITracker; singleton:=true

Apenas o número de tokens é verificado; o conteúdo do token de diretiva
(`singleton:=true`) não é validado.
"""

from __future__ import annotations

from typing import List, Optional

from iflow_artifacts.core.config.layout import ManifestHeaders
from iflow_artifacts.core.exceptions import (
    EmptyId,
    EmptyName,
    MalformedId,
    ManifestHeaderMissing,
)
from iflow_artifacts.core.model.types import Tag

from .parser import parse_manifest


def _split_tokens(value: str) -> List[str]:
    # mesma semântica de String.split: tokens vazios ao final são descartados
    tokens = value.split(";")
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def extract_id(value: Optional[str]) -> str:
    """Primeiro token do valor do cabeçalho de identidade.

    Raises:
        EmptyId: valor ausente/vazio, ou primeiro token vazio.
        MalformedId: menos de 1 ou mais de 2 tokens.
    """
    if not value:
        raise EmptyId("Valor vazio no cabeçalho de identidade do manifest")

    tokens = _split_tokens(value)
    if len(tokens) < 1 or len(tokens) > 2:
        raise MalformedId(
            "Formato inesperado no cabeçalho de identidade do manifest",
            details={"value": value, "tokens": len(tokens)},
        )

    if not tokens[0].strip():
        raise EmptyId(
            "Identificador vazio no cabeçalho de identidade do manifest",
            details={"value": value},
        )
    return tokens[0]


def create_tag(content: bytes, headers: ManifestHeaders) -> Tag:
    """Parseia o manifest e constrói a Tag.

    Raises:
        MalformedManifest: manifest fora do formato.
        ManifestHeaderMissing: cabeçalho de nome ou de identidade ausente.
        EmptyName: cabeçalho de nome com valor vazio.
        EmptyId / MalformedId: ver `extract_id`.
    """
    attributes = parse_manifest(content)

    for header in (headers.name, headers.id):
        if header not in attributes:
            raise ManifestHeaderMissing(
                f"Manifest do iflow não contém o cabeçalho esperado: {header}",
                details={"header": header, "present": sorted(attributes.to_dict())},
            )

    name = attributes.get(headers.name)
    if not name:
        raise EmptyName(
            "Valor vazio no cabeçalho de nome do manifest",
            details={"header": headers.name},
        )

    return Tag(id=extract_id(attributes.get(headers.id)), name=name)
