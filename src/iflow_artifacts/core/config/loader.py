# src/iflow_artifacts/core/config/loader.py
"""
Carregamento da configuração de layout.

Duas fontes, nesta ordem de precedência crescente:
    1. defaults: obrigatório; o `defaults.yaml` distribuído quando nenhum
       caminho é informado
    2. local: opcional; ignorado se o caminho não existir

O formato de cada arquivo é decidido pela extensão (YAML ou JSON). O
resultado é sempre um `dict` novo; os defaults nunca são alterados pelo
override.

Este módulo não interpreta a seção `layout` (ver `layout.build_layout`).
"""

from pathlib import Path
from typing import Any, Callable, Dict, Optional
import json

import yaml  # PyYAML

from .errors import (
    ConfigParseError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .merge import deep_merge


DEFAULTS_PATH = Path(__file__).with_name("defaults.yaml")

_READERS: Dict[str, Callable[[str], Any]] = {
    ".yaml": yaml.safe_load,
    ".yml": yaml.safe_load,
    ".json": json.loads,
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Lê um arquivo de configuração e devolve seu conteúdo como dict.

    Arquivo vazio equivale a `{}`.

    Raises:
        DefaultsNotFoundError: arquivo inexistente.
        UnsupportedConfigFormatError: extensão sem leitor conhecido.
        ConfigParseError: YAML/JSON sintaticamente inválido.
        InvalidConfigRootTypeError: raiz diferente de mapa.
    """
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo de configuração não encontrado: {path}")

    reader = _READERS.get(path.suffix.lower())
    if reader is None:
        raise UnsupportedConfigFormatError(
            f"Extensão de configuração não suportada: {path.suffix or '(sem extensão)'}"
        )

    try:
        data = reader(path.read_text(encoding="utf-8"))
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigParseError(f"Configuração inválida em {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Raiz da configuração em {path} deve ser um mapa, recebido: {type(data).__name__}"
        )
    return data


def load_config(
    *,
    defaults_path: Optional[str] = None,
    local_path: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Resolve a configuração efetiva (defaults + override local).

    Args:
        defaults_path: arquivo base; por padrão `DEFAULTS_PATH`.
        local_path: override opcional, aplicado via `deep_merge`.

    Returns:
        Dict[str, Any]: configuração final.

    Raises:
        ConfigError: qualquer falha de leitura, parsing ou merge.
    """
    effective = _load_file(Path(defaults_path) if defaults_path is not None else DEFAULTS_PATH)

    if local_path is None or not Path(local_path).exists():
        return effective
    return deep_merge(effective, _load_file(Path(local_path)))
