"""Parser do descritor de metadados (META-INF/MANIFEST.MF).

Lê apenas a seção principal de um manifest no formato JAR:

- uma linha `Chave: valor` por cabeçalho
- terminadores LF, CRLF ou CR
- linha iniciada por um único espaço continua o valor anterior
- a seção principal termina na primeira linha em branco
- nomes de cabeçalho não diferenciam maiúsculas de minúsculas

Parser próprio em vez de uma biblioteca de arquivos JAR: o core não
depende de nenhum ecossistema de empacotamento.
"""

from __future__ import annotations

import re
from typing import Dict, Optional

from iflow_artifacts.core.exceptions import MalformedManifest


_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class ManifestAttributes:
    """Cabeçalhos da seção principal, com busca case-insensitive."""

    def __init__(self, headers: Dict[str, str]) -> None:
        self._headers = dict(headers)
        self._index = {name.lower(): name for name in self._headers}

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._index

    def __len__(self) -> int:
        return len(self._headers)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        original = self._index.get(name.lower())
        if original is None:
            return default
        return self._headers[original]

    def to_dict(self) -> Dict[str, str]:
        return dict(self._headers)


def parse_manifest(content: bytes) -> ManifestAttributes:
    """Parseia a seção principal do manifest.

    Raises:
        MalformedManifest: conteúdo não UTF-8, linha sem `:` ou
            continuação sem cabeçalho anterior.
    """
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedManifest(
            "Manifest não está codificado em UTF-8",
            details={"exc_message": str(e)},
        ) from e

    if text.startswith("\ufeff"):
        text = text[1:]

    headers: Dict[str, str] = {}
    current: Optional[str] = None

    for lineno, line in enumerate(_LINE_BREAK.split(text), start=1):
        if line == "":
            break

        if line.startswith(" "):
            if current is None:
                raise MalformedManifest(
                    "Linha de continuação sem cabeçalho anterior",
                    details={"line": lineno},
                )
            headers[current] += line[1:]
            continue

        name, sep, value = line.partition(":")
        if not sep or not name.strip():
            raise MalformedManifest(
                "Linha de manifest fora do formato `Chave: valor`",
                details={"line": lineno, "content": line},
            )

        # Java aceita só um espaço após `:`; os demais fazem parte do valor
        if value.startswith(" "):
            value = value[1:]

        # cabeçalho repetido: a última ocorrência vence
        for existing in list(headers):
            if existing.lower() == name.lower():
                del headers[existing]
        headers[name] = value
        current = name

    return ManifestAttributes(headers)
