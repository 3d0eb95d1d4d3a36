"""Search request descriptor used as one element of a multi-search call.

The multi-search wire format sends each request as two JSON lines: a header
with routing metadata and a body with the query. `SearchRequest.header` and
`SearchRequest.body` render those two structures; serializing and joining them
is left to the caller.
"""

from __future__ import annotations

from typing import Any, Self

from elastic_fluent.domain.enums import SearchType
from elastic_fluent.search.protocols import SourceRenderer


class SearchRequest:
    """Accumulate the parameters of one search inside a multi-search batch."""

    def __init__(self) -> None:
        self._search_type: str | None = None
        self._indices: list[str] = []
        self._types: list[str] = []
        self._routing: str | None = None
        self._preference: str | None = None
        self._source: Any = None

    def search_type(self, search_type: SearchType | str) -> Self:
        """Set the search mode; an empty value leaves the service default."""
        self._search_type = str(search_type)
        return self

    def search_type_query_then_fetch(self) -> Self:
        return self.search_type(SearchType.QUERY_THEN_FETCH)

    def search_type_query_and_fetch(self) -> Self:
        return self.search_type(SearchType.QUERY_AND_FETCH)

    def search_type_scan(self) -> Self:
        return self.search_type(SearchType.SCAN)

    def search_type_count(self) -> Self:
        return self.search_type(SearchType.COUNT)

    def search_type_dfs_query_then_fetch(self) -> Self:
        return self.search_type(SearchType.DFS_QUERY_THEN_FETCH)

    def search_type_dfs_query_and_fetch(self) -> Self:
        return self.search_type(SearchType.DFS_QUERY_AND_FETCH)

    def index(self, index: str) -> Self:
        self._indices.append(index)
        return self

    def indices(self, *indices: str) -> Self:
        self._indices.extend(indices)
        return self

    def has_indices(self) -> bool:
        return len(self._indices) > 0

    def type(self, doc_type: str) -> Self:  # noqa: A003
        self._types.append(doc_type)
        return self

    def types(self, *doc_types: str) -> Self:
        self._types.extend(doc_types)
        return self

    def routing(self, routing: str) -> Self:
        self._routing = routing
        return self

    def routings(self, *routings: str) -> Self:
        """Join routing values with commas; no values clears routing."""
        self._routing = ",".join(routings) if routings else None
        return self

    def preference(self, preference: str) -> Self:
        self._preference = preference
        return self

    def source(self, source: Any) -> Self:
        """Set the query body.

        Args:
            source (Any): Plain query structure, or an object implementing
                `SourceRenderer` whose rendered form is stored instead.

        Returns:
            Self: This request.

        """
        self._source = source.to_dict() if isinstance(source, SourceRenderer) else source
        return self

    def header(self) -> dict[str, Any]:
        """Render the multi-search header line for this request.

        One index is sent as scalar `index`, several as list `indices`. Types
        use the opposite key convention: one type is scalar `types`, several
        are list `type`. The service expects exactly these keys.

        Returns:
            dict[str, Any]: Header structure, with unset options omitted.

        """
        header: dict[str, Any] = {}
        if self._search_type:
            header["search_type"] = self._search_type

        if len(self._indices) == 1:
            header["index"] = self._indices[0]
        elif len(self._indices) > 1:
            header["indices"] = list(self._indices)

        # Key inversion kept for wire compatibility.
        if len(self._types) == 1:
            header["types"] = self._types[0]
        elif len(self._types) > 1:
            header["type"] = list(self._types)

        if self._routing:
            header["routing"] = self._routing
        if self._preference:
            header["preference"] = self._preference
        return header

    def body(self) -> Any:  # noqa: ANN401
        """Return the stored query body as-is."""
        return self._source
