"""Protocols for the HTTP executor capability used by request builders."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """Raw response returned by an executor."""

    status_code: int
    body: bytes = b""
    headers: Mapping[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Return whether the status code is in the 2xx range."""
        return 200 <= self.status_code < 300  # noqa: PLR2004


class HttpExecutor(Protocol):
    """Define the thin interface used to send one HTTP request."""

    def send(
        self,
        *,
        method: str,
        url: str,
        body: str,
        headers: Mapping[str, str],
    ) -> HttpResponse:
        """Send one request and wait for its response.

        Args:
            method (str): HTTP method.
            url (str): Absolute request URL.
            body (str): Request body.
            headers (Mapping[str, str]): Request headers.

        Raises:
            TransportError: If no response could be obtained.

        Returns:
            HttpResponse: Raw response.

        """
