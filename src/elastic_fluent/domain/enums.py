"""Typed enumerations for wire-level request options."""

from __future__ import annotations

from enum import StrEnum


class SearchType(StrEnum):
    """Represent search execution modes understood by the service."""

    QUERY_THEN_FETCH = "query_then_fetch"
    QUERY_AND_FETCH = "query_and_fetch"
    SCAN = "scan"
    COUNT = "count"
    DFS_QUERY_THEN_FETCH = "dfs_query_then_fetch"
    DFS_QUERY_AND_FETCH = "dfs_query_and_fetch"


class OpType(StrEnum):
    """Represent indexing operation types."""

    CREATE = "create"
    INDEX = "index"


class VersionType(StrEnum):
    """Represent document versioning modes."""

    INTERNAL = "internal"
    EXTERNAL = "external"
    EXTERNAL_GT = "external_gt"
    EXTERNAL_GTE = "external_gte"
    FORCE = "force"


class CommandName(StrEnum):
    """Represent supported top-level CLI commands."""

    INDEX = "index"
    SEARCH_REQUEST = "search-request"
