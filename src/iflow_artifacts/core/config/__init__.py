# src/iflow_artifacts/core/config/__init__.py
"""
Camada de configuração de layout do iflow-artifacts.

A configuração descreve, de forma declarativa, onde cada coisa vive em um
pacote de integration flow expandido: descritor de metadados, arquivo de
parâmetros externalizados, cabeçalhos obrigatórios e a tabela
ResourceType → (diretório, sufixos).

Responsabilidades do pacote:
    - Carregamento de defaults (distribuídos com o pacote) + overrides locais
    - Resolução via deep-merge determinístico
    - Validação estrutural da seção `layout`
    - Hash canônico do layout efetivo para rastreabilidade

Limites explícitos:
    - Não lê pacotes de iflow
    - Não valida semântica de recursos
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigParseError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    LayoutValidationError,
    UnsupportedConfigFormatError,
)
from .layout import (  # noqa: F401
    ArtifactLayout,
    ManifestHeaders,
    ResourceSpec,
    build_layout,
    default_layout,
    load_layout,
)
from .loader import load_config  # noqa: F401
from .merge import deep_merge  # noqa: F401
