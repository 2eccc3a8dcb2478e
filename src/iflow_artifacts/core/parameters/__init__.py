"""Parameter Resolver: parameters.prop + substituição XSLT na definição de flow."""

from .properties import parse_parameters  # noqa: F401
from .resolver import ResolvedFlow, find_placeholders, resolve_flow_content  # noqa: F401
from .transform import (  # noqa: F401
    PARAMETER_MAP_URI,
    build_parameter_document,
    load_stylesheet,
    transform_flow_document,
)
