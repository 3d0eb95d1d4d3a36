"""Document indexing operation."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, Self

from pydantic import ValidationError

from elastic_fluent import uritemplates
from elastic_fluent.domain.contracts import IndexResult, PreparedRequest
from elastic_fluent.errors import DecodeError, EncodeError, PathExpansionError

if TYPE_CHECKING:
    from elastic_fluent.client import Client
    from elastic_fluent.domain.enums import OpType, VersionType
    from elastic_fluent.transport.protocols import HttpResponse

_PATH_WITH_ID = "/{index}/{type}/{id}"
_PATH_AUTO_ID = "/{index}/{type}/"
_INVALID_JSON_ERROR = "Index response is not valid JSON: {error}"
_INVALID_SHAPE_ERROR = "Index response does not match the expected result shape: {error}"
_UNSERIALIZABLE_BODY_ERROR = "Index body cannot be serialized to JSON: {error}"
_logger = logging.getLogger(__name__)


class IndexService:
    """Build and execute one request adding or replacing a document."""

    def __init__(self, client: Client) -> None:
        self.client = client
        self._index = ""
        self._doc_type = ""
        self._doc_id = ""
        self._routing = ""
        self._parent = ""
        self._op_type = ""
        self._refresh: bool | None = None
        self._version: int | None = None
        self._version_type = ""
        self._timestamp = ""
        self._ttl = ""
        self._timeout = ""
        self._body_string = ""
        self._body_json: Any = None
        self._pretty = False
        self._debug = False

    def index(self, name: str) -> Self:
        self._index = name
        return self

    def doc_type(self, doc_type: str) -> Self:
        self._doc_type = doc_type
        return self

    def doc_id(self, doc_id: str) -> Self:
        """Set the document id; without one the service generates it."""
        self._doc_id = doc_id
        return self

    def routing(self, routing: str) -> Self:
        self._routing = routing
        return self

    def parent(self, parent: str) -> Self:
        self._parent = parent
        return self

    def op_type(self, op_type: OpType | str) -> Self:
        """Set the operation type, `create` or `index` (the service default)."""
        self._op_type = str(op_type)
        return self

    def refresh(self, refresh: bool) -> Self:  # noqa: FBT001
        self._refresh = refresh
        return self

    def version(self, version: int) -> Self:
        self._version = version
        return self

    def version_type(self, version_type: VersionType | str) -> Self:
        self._version_type = str(version_type)
        return self

    def timestamp(self, timestamp: str) -> Self:
        self._timestamp = timestamp
        return self

    def ttl(self, ttl: str) -> Self:
        self._ttl = ttl
        return self

    def timeout(self, timeout: str) -> Self:
        self._timeout = timeout
        return self

    def body_string(self, body: str) -> Self:
        """Set a pre-serialized request body."""
        self._body_string = body
        return self

    def body_json(self, body: Any) -> Self:  # noqa: ANN401
        """Set a structured body, serialized to JSON at execution time."""
        self._body_json = body
        return self

    def pretty(self, pretty: bool) -> Self:  # noqa: FBT001
        self._pretty = pretty
        return self

    def debug(self, debug: bool) -> Self:  # noqa: FBT001
        """Dump the request and response through the module logger."""
        self._debug = debug
        return self

    def _path(self) -> tuple[str, str]:
        """Select the method and expand the path template.

        Raises:
            PathExpansionError: If `index` or `doc_type` is missing or a variable cannot be encoded.

        Returns:
            tuple[str, str]: HTTP method and expanded path.

        """
        for variable, value in (("index", self._index), ("type", self._doc_type)):
            if not value:
                raise PathExpansionError(variable, "value is required")

        if self._doc_id:
            method, template = "PUT", _PATH_WITH_ID
        else:
            method, template = "POST", _PATH_AUTO_ID
        path = uritemplates.expand(
            template,
            {"index": self._index, "type": self._doc_type, "id": self._doc_id},
        )
        return method, path

    def _params(self) -> list[tuple[str, str]]:
        params: list[tuple[str, str]] = []
        if self._pretty:
            params.append(("pretty", "true"))
        if self._routing:
            params.append(("routing", self._routing))
        if self._parent:
            params.append(("parent", self._parent))
        if self._op_type:
            params.append(("op_type", self._op_type))
        # Only an explicit true is sent; false and unset mean the same to the service.
        if self._refresh:
            params.append(("refresh", "true"))
        if self._version is not None:
            params.append(("version", str(self._version)))
        if self._version_type:
            params.append(("version_type", self._version_type))
        if self._timestamp:
            params.append(("timestamp", self._timestamp))
        if self._ttl:
            params.append(("ttl", self._ttl))
        if self._timeout:
            params.append(("timeout", self._timeout))
        return params

    def _body(self) -> str:
        if self._body_json is not None:
            try:
                return json.dumps(self._body_json, ensure_ascii=False)
            except (TypeError, ValueError) as exc:
                raise EncodeError(_UNSERIALIZABLE_BODY_ERROR.format(error=exc)) from exc
        return self._body_string

    def build_request(self) -> PreparedRequest:
        """Compute the wire form of the request without sending it.

        Raises:
            PathExpansionError: If the target path cannot be expanded.
            EncodeError: If the structured body cannot be serialized.

        Returns:
            PreparedRequest: Method, path, ordered params and body.

        """
        method, path = self._path()
        return PreparedRequest(method=method, path=path, params=self._params(), body=self._body())

    def execute(self) -> IndexResult:
        """Send the indexing request and decode the service answer.

        Raises:
            PathExpansionError: If the target path cannot be expanded.
            EncodeError: If the structured body cannot be serialized.
            TransportError: If the executor could not obtain a response.
            HTTPStatusError: If the service answered with a non-2xx status.
            DecodeError: If the response is not a valid index result.

        Returns:
            IndexResult: Decoded result.

        """
        request = self.build_request()
        if self._debug:
            _logger.debug("Index request: %s %s\n%s", request.method, request.url, request.body)

        response = self.client.perform(method=request.method, url=request.url, body=request.body)
        if self._debug:
            _logger.debug(
                "Index response: HTTP %d\n%s",
                response.status_code,
                response.body.decode("utf-8", errors="replace"),
            )

        self.client.check_response(response)
        return decode_index_result(response)


def decode_index_result(response: HttpResponse) -> IndexResult:
    """Decode a successful index response body.

    Args:
        response (HttpResponse): Response with a 2xx status.

    Raises:
        DecodeError: If the body is not JSON or does not match `IndexResult`.

    Returns:
        IndexResult: Decoded result.

    """
    try:
        payload = json.loads(response.body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(_INVALID_JSON_ERROR.format(error=exc)) from exc

    try:
        return IndexResult.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(_INVALID_SHAPE_ERROR.format(error=exc)) from exc
