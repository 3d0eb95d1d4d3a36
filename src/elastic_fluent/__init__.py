"""Fluent request builders for a document-search HTTP service."""

from elastic_fluent.client import Client
from elastic_fluent.domain import IndexResult, OpType, PreparedRequest, SearchType, VersionType
from elastic_fluent.errors import (
    DecodeError,
    ElasticFluentError,
    EncodeError,
    HTTPStatusError,
    PathExpansionError,
    TransportError,
)
from elastic_fluent.index import IndexService
from elastic_fluent.search import SearchRequest, SearchSource, SourceRenderer
from elastic_fluent.settings import ClientSettings, settings_from_env

__all__ = [
    "Client",
    "ClientSettings",
    "DecodeError",
    "ElasticFluentError",
    "EncodeError",
    "HTTPStatusError",
    "IndexResult",
    "IndexService",
    "OpType",
    "PathExpansionError",
    "PreparedRequest",
    "SearchRequest",
    "SearchSource",
    "SearchType",
    "SourceRenderer",
    "TransportError",
    "VersionType",
    "settings_from_env",
]
