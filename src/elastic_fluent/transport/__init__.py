"""HTTP executor interfaces and adapters."""

from elastic_fluent.transport.httpx_executor import HttpxExecutor
from elastic_fluent.transport.protocols import HttpExecutor, HttpResponse

__all__ = [
    "HttpExecutor",
    "HttpResponse",
    "HttpxExecutor",
]
