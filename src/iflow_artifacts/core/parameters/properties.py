"""Parsing de parameters.prop (formato Java `.properties`).

O formato é o de `java.util.Properties.load(InputStream)`: bytes em
ISO-8859-1, escapes `\\uXXXX`, comentários `#`/`!`, separadores `=`, `:`
ou espaço, continuação por barra invertida ao fim da linha. Chaves
repetidas: a última ocorrência vence.
"""

from __future__ import annotations

from typing import Dict

import javaproperties

from iflow_artifacts.core.exceptions import ParametersFileMalformed


def parse_parameters(content: bytes) -> Dict[str, str]:
    """Converte o conteúdo de parameters.prop em um mapa str → str.

    Raises:
        ParametersFileMalformed: se o arquivo não puder ser interpretado
            (ex.: escape `\\u` inválido).
    """
    text = content.decode("iso-8859-1")
    try:
        return dict(javaproperties.loads(text))
    except ValueError as e:
        raise ParametersFileMalformed(
            "Arquivo de parâmetros externalizados malformado",
            details={"exc_type": e.__class__.__name__, "exc_message": str(e)},
            hint="Corrija parameters.prop (formato Java .properties).",
        ) from e
