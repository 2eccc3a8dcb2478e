"""Predicado de sufixo de arquivo."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Tuple


class SuffixPredicate:
    """Aceita arquivos regulares cujo nome termina em um dos sufixos.

    A comparação diferencia maiúsculas de minúsculas (`.XSD` não casa com
    `.xsd`). Vários sufixos formam uma disjunção (`.xsl` ou `.xslt`).
    """

    def __init__(self, suffixes: Iterable[str]) -> None:
        self.suffixes: Tuple[str, ...] = tuple(suffixes)
        if not self.suffixes:
            raise ValueError("SuffixPredicate requer ao menos um sufixo")

    def __call__(self, path: Path) -> bool:
        return path.name.endswith(self.suffixes) and path.is_file()

    def __or__(self, other: "SuffixPredicate") -> "SuffixPredicate":
        return SuffixPredicate(self.suffixes + other.suffixes)

    def __repr__(self) -> str:
        return f"SuffixPredicate({list(self.suffixes)!r})"
