"""CLI command handlers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

from elastic_fluent.cli.common_runtime import settings_from_args
from elastic_fluent.client import Client
from elastic_fluent.errors import BodyFileError, DecodeError
from elastic_fluent.search.request import SearchRequest

if TYPE_CHECKING:
    import argparse

    from elastic_fluent.domain import IndexResult

_INVALID_JSON_ARGUMENT_ERROR = "Argument {name} is not valid JSON: {error}"


def parse_json_argument(raw: str, *, name: str) -> Any:  # noqa: ANN401
    """Parse one JSON command-line argument.

    Args:
        raw (str): Raw JSON text.
        name (str): Flag name used in error messages.

    Raises:
        DecodeError: If the text is not valid JSON.

    Returns:
        Any: Decoded value.

    """
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise DecodeError(_INVALID_JSON_ARGUMENT_ERROR.format(name=name, error=exc)) from exc


def read_body_file(path: str) -> str:
    """Read a request body file as UTF-8 text.

    Args:
        path (str): Body file path.

    Raises:
        BodyFileError: If the file cannot be read or decoded.

    Returns:
        str: File content.

    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise BodyFileError(path, f"{exc.__class__.__name__}: {exc}") from exc


def build_client(args: argparse.Namespace) -> Client:
    """Build the client used by network-enabled commands."""
    return Client.from_settings(settings_from_args(args))


def handle_index(args: argparse.Namespace) -> IndexResult:
    """Index one document and return the decoded service answer.

    Returns:
        IndexResult: Decoded index result.

    """
    with build_client(args) as client:
        return _execute_index(client, args)


def _execute_index(client: Client, args: argparse.Namespace) -> IndexResult:
    service = client.index().index(str(args.index)).doc_type(str(args.type))
    if args.id:
        service.doc_id(str(args.id))
    if args.routing:
        service.routing(str(args.routing))
    if args.parent:
        service.parent(str(args.parent))
    if args.op_type:
        service.op_type(str(args.op_type))
    if args.refresh:
        service.refresh(True)  # noqa: FBT003
    if args.version is not None:
        service.version(int(args.version))
    if args.version_type:
        service.version_type(str(args.version_type))
    if args.timestamp:
        service.timestamp(str(args.timestamp))
    if args.ttl:
        service.ttl(str(args.ttl))
    if args.request_timeout:
        service.timeout(str(args.request_timeout))
    service.pretty(bool(args.pretty)).debug(bool(args.debug))

    if args.body_file:
        service.body_string(read_body_file(str(args.body_file)))
    else:
        service.body_json(parse_json_argument(str(args.body), name="--body"))
    return service.execute()


def handle_search_request(args: argparse.Namespace) -> dict[str, Any]:
    """Render the multi-search header and body of one search request.

    Returns:
        dict[str, Any]: Payload with `header` and `body` keys.

    """
    request = SearchRequest().indices(*args.index).types(*args.type)
    if args.search_type:
        request.search_type(str(args.search_type))
    if args.routing:
        request.routings(*args.routing)
    if args.preference:
        request.preference(str(args.preference))
    if args.query:
        request.source(parse_json_argument(str(args.query), name="--query"))
    return {"header": request.header(), "body": request.body()}
