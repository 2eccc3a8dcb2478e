# src/iflow_artifacts/core/context.py
"""
Contexto de uma construção de artefato.

Este módulo define o `BuildContext`, a estrutura utilizada para registrar
de forma explícita o que acontece durante uma chamada ao assembler.

O BuildContext atua como o único meio de:
    - registro de logs estruturados da construção
    - coleta de warnings não fatais associados a estágios

Princípios fundamentais:
    - Isolamento por construção (cada chamada possui seu próprio contexto)
    - Logs são eventos estruturados, não strings livres
    - Ausência de estado global compartilhado (nenhum logger global)

Invariantes:
    - Logs sempre incluem `build_id` e `stage`
    - Warnings são agrupados por `stage`
    - Timestamps são sempre UTC

Limites explícitos:
    - Não executa estágios
    - Não persiste eventos automaticamente
    - Não decide se uma falha aborta a construção
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class BuildContext:
    """
    Contexto mutável de uma única construção de artefato.

    Consolida:
        - identidade da construção (build_id, created_at)
        - raiz do pacote inspecionado
        - metadados livres (ex.: hash do layout efetivo)
        - logs estruturados e warnings por estágio

    O contexto é mutável apenas durante a construção; o `Artifact`
    produzido não o referencia.
    """

    build_id: str
    created_at: datetime
    root: str
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, stage: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "build_id": self.build_id,
            "stage": stage,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, stage: str, message: str) -> None:
        if stage not in self.warnings:
            self.warnings[stage] = []
        self.warnings[stage].append(message)
        self.log(stage=stage, level="WARNING", message=message)
