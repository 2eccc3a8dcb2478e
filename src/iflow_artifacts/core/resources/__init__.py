"""Resource Collector: tabela de layout → recursos tipados."""

from .collector import (  # noqa: F401
    collect_resource_type,
    collect_resources,
    load_flow_definition,
    locate_flow_definition,
)
from .predicate import SuffixPredicate  # noqa: F401
