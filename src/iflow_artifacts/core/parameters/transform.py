"""Transformação XSLT de substituição de parâmetros externalizados.

O stylesheet distribuído com o pacote (`ReplaceExternalParameters.xsl`)
recebe um único parâmetro, `parameterMap`: a URI de um documento
`<parameters><parameter key="...">valor</parameter></parameters>` com o
mapa completo. Esse documento nunca toca o disco; ele é servido à função
`document()` do stylesheet por um resolver lxml registrado no parser do
próprio stylesheet.
"""

from __future__ import annotations

from pathlib import Path
from typing import Mapping, Optional

from lxml import etree

from iflow_artifacts.core.exceptions import TransformFailed


STYLESHEET_PATH = Path(__file__).parent / "resources" / "ReplaceExternalParameters.xsl"
PARAMETER_MAP_URI = "iflow-artifacts:parameter-map"


class _ParameterMapResolver(etree.Resolver):
    """Serve o documento do mapa de parâmetros para `document($parameterMap)`."""

    def __init__(self, document: bytes) -> None:
        super().__init__()
        self._document = document

    def resolve(self, system_url, public_id, context):
        if system_url == PARAMETER_MAP_URI:
            return self.resolve_string(self._document, context)
        return None


def source_parser() -> etree.XMLParser:
    """Parser da definição de flow: entidades internas expandidas, externas e rede não."""
    return etree.XMLParser(resolve_entities="internal", no_network=True)


def load_stylesheet() -> bytes:
    return STYLESHEET_PATH.read_bytes()


def build_parameter_document(parameters: Mapping[str, str]) -> bytes:
    """Serializa o mapa como o documento XML lido pelo stylesheet."""
    root = etree.Element("parameters")
    for key, value in parameters.items():
        entry = etree.SubElement(root, "parameter", key=key)
        entry.text = value
    return etree.tostring(root, xml_declaration=True, encoding="UTF-8")


def transform_flow_document(
    flow_content: bytes,
    parameters: Mapping[str, str],
    *,
    stylesheet: Optional[bytes] = None,
) -> bytes:
    """Aplica o stylesheet de substituição à definição de flow.

    Args:
        flow_content: bytes brutos do arquivo .iflw.
        parameters: mapa completo de parâmetros externalizados.
        stylesheet: conteúdo alternativo do stylesheet; por padrão o
            distribuído com o pacote.

    Returns:
        bytes: documento reescrito, serializado conforme `xsl:output`.

    Raises:
        TransformFailed: documento ou stylesheet malformado, valor de
            parâmetro não representável em XML, ou erro em tempo de
            transformação.
    """
    if stylesheet is None:
        stylesheet = load_stylesheet()

    try:
        stylesheet_parser = etree.XMLParser(no_network=True)
        stylesheet_parser.resolvers.add(
            _ParameterMapResolver(build_parameter_document(parameters))
        )
        xslt = etree.XSLT(etree.fromstring(stylesheet, stylesheet_parser))

        source = etree.fromstring(flow_content, source_parser())
        result = xslt(
            source.getroottree(),
            parameterMap=etree.XSLT.strparam(PARAMETER_MAP_URI),
        )
    except (etree.LxmlError, ValueError) as e:
        raise TransformFailed(
            "Falha ao substituir parâmetros externalizados na definição de flow",
            details={"exc_type": e.__class__.__name__, "exc_message": str(e)},
        ) from e

    return bytes(result)
