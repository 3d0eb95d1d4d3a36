from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field

import pytest

from elastic_fluent.client import Client
from elastic_fluent.domain import IndexResult, OpType, VersionType
from elastic_fluent.errors import DecodeError, EncodeError, HTTPStatusError, PathExpansionError, TransportError
from elastic_fluent.index import decode_index_result
from elastic_fluent.transport import HttpResponse

_BASE_URL = "http://search.local:9200"
_CREATED_BODY = b'{"_index":"blog","_type":"post","_id":"1","_version":1,"created":true}'
_NOT_FOUND_STATUS = 404
_CONFLICT_STATUS = 409


@dataclass
class _ExecutorStub:
    response: HttpResponse = field(default_factory=lambda: HttpResponse(status_code=201, body=_CREATED_BODY))
    calls: list[dict[str, object]] = field(default_factory=list)

    def send(self, *, method: str, url: str, body: str, headers: dict[str, str]) -> HttpResponse:
        self.calls.append({"method": method, "url": url, "body": body, "headers": dict(headers)})
        return self.response


class _FailingExecutor:
    def send(self, **_kwargs: object) -> HttpResponse:  # noqa: PLR6301
        raise TransportError("connection refused")


def _client(executor: object | None = None) -> Client:
    return Client(executor=executor or _ExecutorStub(), base_url=_BASE_URL)


def test_explicit_id_uses_put_and_id_path() -> None:
    request = _client().index().index("blog").doc_type("post").doc_id("42").build_request()

    assert request.method == "PUT"
    assert request.path == "/blog/post/42"


def test_missing_id_uses_post_and_trailing_slash_path() -> None:
    request = _client().index().index("blog").doc_type("post").build_request()

    assert request.method == "POST"
    assert request.path == "/blog/post/"


def test_path_segments_are_percent_encoded() -> None:
    request = _client().index().index("my blog").doc_type("post").doc_id("a/b").build_request()

    assert request.path == "/my%20blog/post/a%2Fb"


def test_missing_index_or_type_fails_before_dispatch() -> None:
    executor = _ExecutorStub()

    with pytest.raises(PathExpansionError, match="'index'"):
        _client(executor).index().doc_type("post").execute()
    with pytest.raises(PathExpansionError, match="'type'"):
        _client(executor).index().index("blog").execute()

    assert executor.calls == []


def test_no_params_means_no_query_string() -> None:
    request = _client().index().index("blog").doc_type("post").build_request()

    assert request.params == []
    assert request.url == "/blog/post/"


def test_params_are_emitted_in_documented_order() -> None:
    request = (
        _client()
        .index()
        .index("blog")
        .doc_type("post")
        .doc_id("1")
        .timeout("5m")
        .ttl("1d")
        .timestamp("2009-11-15T14:12:12")
        .version_type(VersionType.EXTERNAL)
        .version(7)
        .refresh(True)  # noqa: FBT003
        .op_type(OpType.CREATE)
        .parent("p1")
        .routing("r1")
        .pretty(True)  # noqa: FBT003
        .build_request()
    )

    assert [key for key, _ in request.params] == [
        "pretty",
        "routing",
        "parent",
        "op_type",
        "refresh",
        "version",
        "version_type",
        "timestamp",
        "ttl",
        "timeout",
    ]
    assert request.url == (
        "/blog/post/1?pretty=true&routing=r1&parent=p1&op_type=create&refresh=true"
        "&version=7&version_type=external&timestamp=2009-11-15T14%3A12%3A12&ttl=1d&timeout=5m"
    )


def test_refresh_false_and_unset_are_identical_on_the_wire() -> None:
    unset = _client().index().index("blog").doc_type("post").build_request()
    disabled = _client().index().index("blog").doc_type("post").refresh(False).build_request()  # noqa: FBT003

    assert unset.url == disabled.url == "/blog/post/"


def test_version_zero_is_sent_and_unset_version_is_not() -> None:
    zero = _client().index().index("blog").doc_type("post").version(0).build_request()
    unset = _client().index().index("blog").doc_type("post").build_request()

    assert zero.query_string == "version=0"
    assert unset.query_string == ""


def test_structured_body_wins_over_raw_string() -> None:
    request = (
        _client()
        .index()
        .index("blog")
        .doc_type("post")
        .body_string('{"ignored": true}')
        .body_json({"title": "Hi"})
        .build_request()
    )

    assert json.loads(request.body) == {"title": "Hi"}


def test_raw_string_body_is_sent_verbatim() -> None:
    raw = '{ "title" : "Hi" }'
    request = _client().index().index("blog").doc_type("post").body_string(raw).build_request()

    assert request.body == raw


def test_body_defaults_to_empty_string() -> None:
    request = _client().index().index("blog").doc_type("post").build_request()

    assert request.body == ""


def test_execute_sends_one_request_and_decodes_result() -> None:
    executor = _ExecutorStub()
    service = _client(executor).index().index("blog").doc_type("post").doc_id("1")
    result = service.body_json({"title": "Hi"}).execute()

    assert result == IndexResult(index="blog", type="post", id="1", version=1, created=True)
    assert len(executor.calls) == 1
    call = executor.calls[0]
    assert call["method"] == "PUT"
    assert call["url"] == f"{_BASE_URL}/blog/post/1"
    assert json.loads(str(call["body"])) == {"title": "Hi"}
    assert call["headers"]["Content-Type"] == "application/json"


def test_execute_raises_status_error_without_decoding() -> None:
    executor = _ExecutorStub(response=HttpResponse(status_code=_CONFLICT_STATUS, body=b"version conflict"))

    with pytest.raises(HTTPStatusError) as exc_info:
        _client(executor).index().index("blog").doc_type("post").doc_id("1").execute()

    assert exc_info.value.status_code == _CONFLICT_STATUS
    assert exc_info.value.body == b"version conflict"
    assert "version conflict" in str(exc_info.value)


def test_execute_propagates_transport_errors() -> None:
    with pytest.raises(TransportError, match="connection refused"):
        _client(_FailingExecutor()).index().index("blog").doc_type("post").execute()


def test_execute_rejects_non_json_success_body() -> None:
    executor = _ExecutorStub(response=HttpResponse(status_code=200, body=b"<html>ok</html>"))

    with pytest.raises(DecodeError, match="not valid JSON"):
        _client(executor).index().index("blog").doc_type("post").execute()


def test_execute_rejects_unexpected_result_shape() -> None:
    executor = _ExecutorStub(response=HttpResponse(status_code=200, body=b'{"_index":"blog","_id":"1"}'))

    with pytest.raises(DecodeError, match="expected result shape"):
        _client(executor).index().index("blog").doc_type("post").execute()


def test_not_found_status_is_reported_as_status_error() -> None:
    executor = _ExecutorStub(response=HttpResponse(status_code=_NOT_FOUND_STATUS))

    with pytest.raises(HTTPStatusError, match="HTTP 404"):
        _client(executor).index().index("blog").doc_type("post").execute()


def test_debug_dumps_request_and_response(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="elastic_fluent.index")

    service = _client().index().index("blog").doc_type("post").doc_id("1").body_json({"title": "Hi"})
    service.debug(True).execute()  # noqa: FBT003

    messages = [record.getMessage() for record in caplog.records if record.name == "elastic_fluent.index"]
    assert any(message.startswith("Index request: PUT /blog/post/1") for message in messages)
    assert any(message.startswith("Index response: HTTP 201") for message in messages)


def test_builder_can_be_inspected_after_execute() -> None:
    service = _client().index().index("blog").doc_type("post").doc_id("1")
    service.execute()

    assert service.build_request().path == "/blog/post/1"


def test_decode_rejects_wrongly_typed_fields() -> None:
    response = HttpResponse(
        status_code=200,
        body=b'{"_index":"blog","_type":"post","_id":"1","_version":"1","created":"yes"}',
    )

    with pytest.raises(DecodeError, match="expected result shape"):
        decode_index_result(response)


def test_unserializable_body_fails_before_dispatch() -> None:
    executor = _ExecutorStub()
    service = _client(executor).index().index("blog").doc_type("post").body_json({"when": object()})

    with pytest.raises(EncodeError, match="cannot be serialized"):
        service.execute()

    assert executor.calls == []
