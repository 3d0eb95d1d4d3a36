"""Domain contracts for requests sent to and responses decoded from the service."""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field


class IndexResult(BaseModel):
    """Represent the service answer to one document indexing call."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    index: str = Field(alias="_index")
    type: str = Field(alias="_type")
    id: str = Field(alias="_id")
    version: int = Field(alias="_version")
    created: bool


@dataclass(frozen=True, slots=True)
class PreparedRequest:
    """Wire form of one request, computed before dispatch."""

    method: str
    path: str
    params: list[tuple[str, str]] = field(default_factory=list)
    body: str = ""

    @property
    def query_string(self) -> str:
        """Return the URL-encoded query string, empty when there are no params."""
        return urlencode(self.params)

    @property
    def url(self) -> str:
        """Return the path with its query string appended when non-empty."""
        query = self.query_string
        return f"{self.path}?{query}" if query else self.path
