# src/iflow_artifacts/core/config/errors.py
"""
Exceções canônicas da camada de configuração de layout.

As exceções aqui definidas representam falhas ao carregar, mesclar ou
validar a descrição do layout de pacotes. Elas ocorrem antes de qualquer
construção de artefato e não fazem parte da hierarquia `ArtifactError`.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de leitura de um pacote de iflow
"""


class ConfigError(Exception):
    """
    Exceção base para erros de configuração de layout.

    Permite captura genérica de falhas de configuração, distinta das
    falhas de construção de artefato.
    """


class DefaultsNotFoundError(ConfigError):
    """
    O arquivo de defaults não existe no caminho informado.

    Sem defaults não existe layout efetivo; o loader não tenta inferir
    ou criar um.
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo de configuração não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class ConfigParseError(ConfigError):
    """O arquivo existe mas não é YAML/JSON válido."""


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz da configuração não é um dicionário."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo:
        - base:     {"layout": {"manifest_path": "META-INF/MANIFEST.MF"}}
        - override: {"layout": ["META-INF"]}
    """


class LayoutValidationError(ConfigError):
    """
    A seção `layout` não descreve um layout utilizável.

    Exemplos:
        - tipo de recurso desconhecido ou ausente
        - lista de sufixos vazia
        - caminho absoluto onde se espera caminho relativo à raiz do pacote
    """
