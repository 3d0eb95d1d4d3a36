"""Client binding a backend URL to an HTTP executor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from elastic_fluent.errors import HTTPStatusError, MissingBackendUrlError
from elastic_fluent.index import IndexService
from elastic_fluent.search.request import SearchRequest
from elastic_fluent.transport.httpx_executor import HttpxExecutor

if TYPE_CHECKING:
    from types import TracebackType

    from elastic_fluent.settings import ClientSettings
    from elastic_fluent.transport.protocols import HttpExecutor, HttpResponse

_JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}
_logger = logging.getLogger(__name__)


class Client:
    """Entry point creating request builders bound to one backend."""

    def __init__(self, executor: HttpExecutor, base_url: str = "http://localhost:9200") -> None:
        if not base_url:
            raise MissingBackendUrlError
        self.executor = executor
        self.base_url = base_url.rstrip("/")

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> Client:
        """Build a client using the default httpx executor.

        Args:
            settings (ClientSettings): Connection settings.

        Raises:
            MissingBackendUrlError: If the settings carry no backend URL.

        Returns:
            Client: Configured client.

        """
        if not settings.backend_url:
            raise MissingBackendUrlError
        executor = HttpxExecutor.from_connection(
            timeout_s=settings.timeout_s,
            verify_certs=settings.verify_certs,
            proxy_url=settings.proxy_url,
        )
        return cls(executor=executor, base_url=settings.backend_url)

    def index(self) -> IndexService:
        """Return a new document indexing builder bound to this client."""
        return IndexService(self)

    @staticmethod
    def search_request() -> SearchRequest:
        """Return a new, empty search request descriptor."""
        return SearchRequest()

    def perform(self, *, method: str, url: str, body: str) -> HttpResponse:
        """Send one request relative to the backend URL.

        Args:
            method (str): HTTP method.
            url (str): Path with optional query string.
            body (str): Request body.

        Returns:
            HttpResponse: Raw response, whatever its status.

        """
        full_url = f"{self.base_url}{url}"
        _logger.debug("%s %s", method, full_url)
        return self.executor.send(method=method, url=full_url, body=body, headers=_JSON_HEADERS)

    @staticmethod
    def check_response(response: HttpResponse) -> None:
        """Raise when the response status is outside the 2xx range.

        Args:
            response (HttpResponse): Response to check.

        Raises:
            HTTPStatusError: If the status code indicates failure.

        """
        if not response.ok:
            raise HTTPStatusError(status_code=response.status_code, body=response.body)

    def close(self) -> None:
        """Release the executor's connections when it supports closing."""
        close = getattr(self.executor, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> Client:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
