# src/iflow_artifacts/core/hashing.py
"""
Hashing canônico do iflow-artifacts.

Este módulo implementa a geração de hash determinístico de estruturas
serializáveis (configuração efetiva de layout e resumo de artefatos).

Política de hashing (v1):
    - Serialização JSON canônica
    - Ordenação estável de chaves
    - Separadores compactos (sem espaços supérfluos)
    - Codificação UTF-8
    - Algoritmo SHA-256

Invariantes:
    - Estruturas equivalentes produzem o mesmo hash
    - O valor gerado é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Any, Dict


def compute_canonical_hash(data: Dict[str, Any]) -> str:
    """
    Gera um hash determinístico de um dicionário serializável.

    Args:
        data (Dict[str, Any]): Estrutura a ser identificada.

    Returns:
        str: Hash SHA-256 hexadecimal do JSON canônico.

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """
    if not isinstance(data, dict):
        raise TypeError(
            f"Estrutura para hashing deve ser dict, recebido: {type(data).__name__}"
        )

    canonical_json = json.dumps(
        data,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()


def sha256_bytes(content: bytes) -> str:
    """Hash SHA-256 hexadecimal de um conteúdo binário."""
    return hashlib.sha256(content).hexdigest()
