"""Leitura de arquivos do pacote.

Toda leitura é uma aquisição com escopo (abrir, ler tudo, liberar),
feita por `Path.read_bytes`. Falhas de I/O em arquivos obrigatórios
viram `ArtifactIOError`; a decisão sobre o que é obrigatório fica com
o chamador.
"""

from __future__ import annotations

from pathlib import Path

from .exceptions import ArtifactIOError


def read_file_bytes(path: Path, *, description: str) -> bytes:
    """Lê um arquivo obrigatório por completo.

    Raises:
        ArtifactIOError: se o arquivo não puder ser lido.
    """
    try:
        return path.read_bytes()
    except OSError as e:
        raise ArtifactIOError(
            f"Falha ao ler {description}: {path}",
            details={
                "path": str(path),
                "description": description,
                "exc_type": e.__class__.__name__,
                "exc_message": str(e),
            },
        ) from e
