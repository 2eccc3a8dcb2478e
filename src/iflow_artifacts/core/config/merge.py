# src/iflow_artifacts/core/config/merge.py
"""
Deep-merge de configuração de layout.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (ex.: a lista de sufixos de um tipo de recurso)
    - escalar → sobrescrita direta
    - conflito de tipos → erro estrutural explícito

O merge é puramente funcional: nenhum input é mutado.
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Combina a configuração base com overrides explícitos.

    Um override local pode, por exemplo, trocar apenas o diretório de
    `xsd` sem repetir o resto da tabela de recursos; já a lista
    `suffixes` de um tipo é substituída inteira.

    Args:
        base (Dict[str, Any]): Configuração base (defaults).
        override (Dict[str, Any]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Nova configuração resultante.

    Raises:
        ConfigTypeConflictError: Se uma chave tiver tipos incompatíveis.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    merged: Dict[str, Any] = deepcopy(base)

    for key, new_value in override.items():
        if key not in merged:
            merged[key] = deepcopy(new_value)
            continue

        current = merged[key]

        if isinstance(current, dict) and isinstance(new_value, dict):
            merged[key] = deep_merge(current, new_value)
        elif isinstance(new_value, list) and isinstance(current, list):
            merged[key] = deepcopy(new_value)
        elif type(current) is not type(new_value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo na chave '{key}': "
                f"{type(current).__name__} vs {type(new_value).__name__}"
            )
        else:
            merged[key] = deepcopy(new_value)

    return merged
