"""Executor implementing the HttpExecutor protocol on top of httpx."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from elastic_fluent.errors import TransportError
from elastic_fluent.transport.protocols import HttpResponse

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType

_TRANSPORT_ERROR = "{method} {url} failed: {error}"


@dataclass(frozen=True, slots=True)
class HttpxExecutor:
    """Thin adapter around a synchronous `httpx.Client`."""

    client: httpx.Client

    @classmethod
    def from_connection(
        cls,
        *,
        timeout_s: float,
        verify_certs: bool,
        proxy_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> HttpxExecutor:
        """Build an executor from connection settings.

        Args:
            timeout_s (float): Request timeout in seconds.
            verify_certs (bool): Whether TLS certificates are verified.
            proxy_url (str | None): Optional HTTP/HTTPS proxy URL.
            transport (httpx.BaseTransport | None): Optional transport override.

        Returns:
            HttpxExecutor: Configured executor.

        """
        client = httpx.Client(
            timeout=timeout_s,
            verify=verify_certs,
            proxy=proxy_url or None,
            transport=transport,
        )
        return cls(client=client)

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
            TransportError: If httpx could not complete the exchange.

        Returns:
            HttpResponse: Raw response.

        """
        try:
            response = self.client.request(
                method,
                url,
                content=body.encode("utf-8"),
                headers=dict(headers),
            )
        except httpx.TransportError as exc:
            raise TransportError(
                _TRANSPORT_ERROR.format(
                    method=method,
                    url=url,
                    error=f"{exc.__class__.__name__}: {exc}",
                ),
            ) from exc

        return HttpResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        """Close the underlying connection pool."""
        self.client.close()

    def __enter__(self) -> HttpxExecutor:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
