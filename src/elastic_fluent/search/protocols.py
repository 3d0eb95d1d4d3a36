"""Protocols for objects able to render themselves into a search body."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SourceRenderer(Protocol):
    """Define the capability of rendering a query body as plain structures."""

    def to_dict(self) -> dict[str, Any]:
        """Render the query body.

        Returns:
            dict[str, Any]: JSON-serializable search body.

        """
