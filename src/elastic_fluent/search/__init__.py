"""Search request descriptors and body builders."""

from elastic_fluent.search.protocols import SourceRenderer
from elastic_fluent.search.request import SearchRequest
from elastic_fluent.search.source import SearchSource

__all__ = [
    "SearchRequest",
    "SearchSource",
    "SourceRenderer",
]
