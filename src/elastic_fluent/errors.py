"""Project-specific exceptions for elastic-fluent."""

from __future__ import annotations


class ElasticFluentError(Exception):
    """Base exception for the project."""


class PathExpansionError(ValueError, ElasticFluentError):
    """Raised when a URL path template variable cannot be expanded."""

    def __init__(self, variable: str, reason: str) -> None:
        """Build exception payload for one unexpandable path variable."""
        super().__init__(f"Cannot expand path variable '{variable}': {reason}.")
        self.variable = variable


class TransportError(ConnectionError, ElasticFluentError):
    """Raised by HTTP executors when no response could be obtained."""


class HTTPStatusError(ElasticFluentError):
    """Raised when the service answers with a non-success status code."""

    def __init__(self, status_code: int, body: bytes) -> None:
        """Build exception payload from the failed response."""
        detail = body.decode("utf-8", errors="replace").strip()
        message = f"Service returned HTTP {status_code}"
        super().__init__(f"{message}: {detail}" if detail else f"{message}.")
        self.status_code = status_code
        self.body = body


class DecodeError(ValueError, ElasticFluentError):
    """Raised when a response payload cannot be decoded into a result."""


class EncodeError(ValueError, ElasticFluentError):
    """Raised when a request body cannot be serialized to JSON."""


class BodyFileError(ElasticFluentError):
    """Raised when a request body file cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        """Build exception payload for one unreadable body file."""
        super().__init__(f"Cannot read body file '{path}': {reason}")
        self.path = path


class MissingBackendUrlError(ValueError, ElasticFluentError):
    """Raised when no backend URL is configured."""

    def __init__(self) -> None:
        """Build exception payload for missing backend URLs."""
        super().__init__("Backend URL is required.")
