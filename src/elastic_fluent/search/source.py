"""Fluent builder for search request bodies."""

from __future__ import annotations

from typing import Any, Self


class SearchSource:
    """Accumulate the parts of a search body and render them on demand."""

    def __init__(self) -> None:
        self._query: dict[str, Any] | None = None
        self._post_filter: dict[str, Any] | None = None
        self._from: int | None = None
        self._size: int | None = None
        self._sorts: list[dict[str, Any]] = []
        self._explain: bool | None = None
        self._fetch_source: bool | None = None
        self._timeout: str | None = None

    def query(self, query: dict[str, Any]) -> Self:
        self._query = query
        return self

    def post_filter(self, post_filter: dict[str, Any]) -> Self:
        self._post_filter = post_filter
        return self

    def from_(self, offset: int) -> Self:
        self._from = offset
        return self

    def size(self, size: int) -> Self:
        self._size = size
        return self

    def sort(self, field: str, *, ascending: bool = True) -> Self:
        """Append one sort clause; clauses keep insertion order."""
        self._sorts.append({field: {"order": "asc" if ascending else "desc"}})
        return self

    def explain(self, explain: bool) -> Self:  # noqa: FBT001
        self._explain = explain
        return self

    def fetch_source(self, fetch_source: bool) -> Self:  # noqa: FBT001
        self._fetch_source = fetch_source
        return self

    def timeout(self, timeout: str) -> Self:
        self._timeout = timeout
        return self

    def to_dict(self) -> dict[str, Any]:
        """Render the search body, emitting only the parts that were set.

        Returns:
            dict[str, Any]: Search body; `query` defaults to `match_all`.

        """
        body: dict[str, Any] = {"query": self._query if self._query is not None else {"match_all": {}}}
        if self._post_filter is not None:
            body["post_filter"] = self._post_filter
        if self._from is not None:
            body["from"] = self._from
        if self._size is not None:
            body["size"] = self._size
        if self._sorts:
            body["sort"] = list(self._sorts)
        if self._explain is not None:
            body["explain"] = self._explain
        if self._fetch_source is not None:
            body["_source"] = self._fetch_source
        if self._timeout:
            body["timeout"] = self._timeout
        return body
