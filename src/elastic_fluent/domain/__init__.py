"""Domain contracts for elastic-fluent."""

from elastic_fluent.domain.contracts import IndexResult, PreparedRequest
from elastic_fluent.domain.enums import CommandName, OpType, SearchType, VersionType

__all__ = [
    "CommandName",
    "IndexResult",
    "OpType",
    "PreparedRequest",
    "SearchType",
    "VersionType",
]
