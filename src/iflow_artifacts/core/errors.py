"""
iflow-artifacts — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros expostos pela construção
de um `Artifact`. Erros fazem parte do contrato com o chamador (motor de
regras, CLI) e devem ser:

- explícitos
- serializáveis
- acionáveis

A apresentação ao usuário final é responsabilidade do chamador.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ArtifactErrorPayload:
    """
    Payload canônico de erro de construção de artefato.

    Campos:
    - type: código estável do erro (não é texto livre)
    - category: família do erro (structural, manifest, parameters, io, unexpected)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    category: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Estrutura do pacote
ARTIFACT_ROOT_NOT_FOUND = "ARTIFACT_ROOT_NOT_FOUND"
METADATA_DESCRIPTOR_MISSING = "METADATA_DESCRIPTOR_MISSING"
FLOW_DEFINITION_AMBIGUOUS_OR_MISSING = "FLOW_DEFINITION_AMBIGUOUS_OR_MISSING"
FLOW_DOCUMENT_MALFORMED = "FLOW_DOCUMENT_MALFORMED"

# Manifest
MANIFEST_MALFORMED = "MANIFEST_MALFORMED"
MANIFEST_HEADER_MISSING = "MANIFEST_HEADER_MISSING"
MANIFEST_MALFORMED_ID = "MANIFEST_MALFORMED_ID"
MANIFEST_EMPTY_ID = "MANIFEST_EMPTY_ID"
MANIFEST_EMPTY_NAME = "MANIFEST_EMPTY_NAME"

# Parâmetros externalizados
PARAMETERS_FILE_MALFORMED = "PARAMETERS_FILE_MALFORMED"
PARAMETERS_TRANSFORM_FAILED = "PARAMETERS_TRANSFORM_FAILED"

# I/O
ARTIFACT_IO_ERROR = "ARTIFACT_IO_ERROR"

# Falha não catalogada
BUILD_UNEXPECTED_ERROR = "BUILD_UNEXPECTED_ERROR"

# Categorias
CATEGORY_STRUCTURAL = "structural"
CATEGORY_MANIFEST = "manifest"
CATEGORY_PARAMETERS = "parameters"
CATEGORY_IO = "io"
CATEGORY_UNEXPECTED = "unexpected"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def build_unexpected_error(
    *,
    stage: Optional[str] = None,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Verifique o stacktrace e o log da construção. Nenhum fallback é aplicado automaticamente.",
) -> ArtifactErrorPayload:
    return ArtifactErrorPayload(
        type=BUILD_UNEXPECTED_ERROR,
        category=CATEGORY_UNEXPECTED,
        message="Falha inesperada durante a construção do artefato",
        details={
            "stage": stage,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
    )
