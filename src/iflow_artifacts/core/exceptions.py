"""
iflow-artifacts — Canonical Exceptions (v1)

Este módulo define as exceções tipadas levantadas durante a construção
de um `Artifact`.

Objetivo:
- Permitir que cada estágio levante falhas semânticas tipadas
- Facilitar o mapeamento determinístico para ArtifactErrorPayload
- Evitar ValueError/RuntimeError genéricos em falhas previstas

Famílias:
- StructuralError → layout do pacote inválido (descritor ausente, flow ambíguo)
- ManifestError   → cabeçalhos obrigatórios ausentes ou malformados
- ParametersError → arquivo de parâmetros malformado ou falha de transformação
- ArtifactIOError → arquivo obrigatório ilegível

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Toda exceção desta hierarquia aborta a construção inteira.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from . import errors as codes
from .errors import ArtifactErrorPayload


class ArtifactError(Exception):
    """Base class para exceções de construção de artefato.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    code: str = codes.BUILD_UNEXPECTED_ERROR
    category: str = codes.CATEGORY_UNEXPECTED
    default_hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint if hint is not None else self.default_hint

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> ArtifactErrorPayload:
        return ArtifactErrorPayload(
            type=self.code,
            category=self.category,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


# ---------------------------------------------------------------------------
# Estrutura do pacote
# ---------------------------------------------------------------------------

class StructuralError(ArtifactError):
    """O diretório não tem a estrutura esperada de um pacote de iflow."""

    category = codes.CATEGORY_STRUCTURAL


class ArtifactRootNotFound(StructuralError):
    """A raiz informada não existe ou não é um diretório."""

    code = codes.ARTIFACT_ROOT_NOT_FOUND
    default_hint = "Informe o diretório raiz de um pacote de iflow já expandido."


class MetadataDescriptorMissing(StructuralError):
    """O descritor de metadados (MANIFEST.MF) não existe."""

    code = codes.METADATA_DESCRIPTOR_MISSING
    default_hint = "Provavelmente o diretório não é um pacote de iflow: META-INF/MANIFEST.MF não encontrado."


class AmbiguousOrMissingFlowDefinition(StructuralError):
    """Zero ou mais de um arquivo de definição de flow encontrado."""

    code = codes.FLOW_DEFINITION_AMBIGUOUS_OR_MISSING
    default_hint = "O pacote deve conter exatamente um arquivo .iflw em scenarioflows/integrationflow/."


class FlowDocumentMalformed(StructuralError):
    """A definição de flow (bruta ou transformada) não é XML bem formado."""

    code = codes.FLOW_DOCUMENT_MALFORMED


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------

class ManifestError(ArtifactError):
    """Cabeçalho obrigatório ausente ou malformado no descritor."""

    category = codes.CATEGORY_MANIFEST


class MalformedManifest(ManifestError):
    """O descritor não segue o formato `Chave: valor`."""

    code = codes.MANIFEST_MALFORMED


class ManifestHeaderMissing(ManifestError):
    """Cabeçalho obrigatório (nome ou identidade) ausente."""

    code = codes.MANIFEST_HEADER_MISSING


class MalformedId(ManifestError):
    """Valor do cabeçalho de identidade com número inesperado de tokens."""

    code = codes.MANIFEST_MALFORMED_ID


class EmptyId(ManifestError):
    """Valor do cabeçalho de identidade vazio."""

    code = codes.MANIFEST_EMPTY_ID


class EmptyName(ManifestError):
    """Valor do cabeçalho de nome vazio."""

    code = codes.MANIFEST_EMPTY_NAME


# ---------------------------------------------------------------------------
# Parâmetros externalizados
# ---------------------------------------------------------------------------

class ParametersError(ArtifactError):
    """Falha na resolução de parâmetros externalizados."""

    category = codes.CATEGORY_PARAMETERS


class ParametersFileMalformed(ParametersError):
    """parameters.prop não pôde ser interpretado."""

    code = codes.PARAMETERS_FILE_MALFORMED


class TransformFailed(ParametersError):
    """A transformação XSLT de substituição falhou."""

    code = codes.PARAMETERS_TRANSFORM_FAILED


# ---------------------------------------------------------------------------
# I/O
# ---------------------------------------------------------------------------

class ArtifactIOError(ArtifactError):
    """Arquivo obrigatório existe mas não pôde ser lido."""

    code = codes.ARTIFACT_IO_ERROR
    category = codes.CATEGORY_IO
