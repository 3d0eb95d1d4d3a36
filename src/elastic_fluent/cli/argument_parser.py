"""Argument parser construction for all CLI subcommands."""

from __future__ import annotations

import argparse

from elastic_fluent.cli.command_handlers import handle_index, handle_search_request
from elastic_fluent.domain import CommandName, OpType, SearchType, VersionType


def add_shared_runtime_flags(subparser: argparse.ArgumentParser) -> None:
    """Add connection flags; unset flags fall back to `ELASTIC_FLUENT_*` variables."""
    subparser.add_argument(
        "--backend-url",
        default=None,
        help="Backend base URL.",
    )
    subparser.add_argument(
        "--timeout-s",
        default=None,
        type=float,
        help="HTTP request timeout in seconds.",
    )
    subparser.add_argument(
        "--verify-certs",
        default=None,
        action=argparse.BooleanOptionalAction,
        help="Verify TLS certificates.",
    )
    subparser.add_argument(
        "--proxy-url",
        default=None,
        help="Optional HTTP/HTTPS proxy URL.",
    )


def add_output_flag(subparser: argparse.ArgumentParser) -> None:
    """Add output emission flag used by all subcommands."""
    subparser.add_argument(
        "--output",
        default="-",
        help="Output destination: '-' for stdout or path to file.",
    )


def build_index_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the index subcommand parser."""
    index_parser = subparsers.add_parser(
        CommandName.INDEX.value,
        help="Add or replace one document.",
    )
    index_parser.add_argument("--index", required=True, help="Target index name.")
    index_parser.add_argument("--type", required=True, help="Document type.")
    index_parser.add_argument("--id", default=None, help="Document id; generated by the service when omitted.")
    index_parser.add_argument("--routing", default=None, help="Routing value.")
    index_parser.add_argument("--parent", default=None, help="Parent document id.")
    index_parser.add_argument(
        "--op-type",
        default=None,
        choices=[op_type.value for op_type in OpType],
        help="Operation type.",
    )
    index_parser.add_argument(
        "--refresh",
        default=False,
        action="store_true",
        help="Refresh the index after the operation.",
    )
    index_parser.add_argument("--version", default=None, type=int, help="Explicit document version.")
    index_parser.add_argument(
        "--version-type",
        default=None,
        choices=[version_type.value for version_type in VersionType],
        help="Versioning mode.",
    )
    index_parser.add_argument("--timestamp", default=None, help="Document timestamp.")
    index_parser.add_argument("--ttl", default=None, help="Document time to live.")
    index_parser.add_argument(
        "--request-timeout",
        default=None,
        help="Service-side operation timeout, for example '5m'.",
    )
    index_parser.add_argument("--pretty", default=False, action="store_true", help="Ask for pretty JSON.")
    index_parser.add_argument(
        "--debug",
        default=False,
        action="store_true",
        help="Log the request and response at DEBUG level.",
    )
    body_group = index_parser.add_mutually_exclusive_group(required=True)
    body_group.add_argument("--body", default=None, help="Document as JSON text.")
    body_group.add_argument("--body-file", default=None, help="Path to a file sent verbatim as the body.")
    add_shared_runtime_flags(index_parser)
    add_output_flag(index_parser)
    index_parser.set_defaults(handler=handle_index)


def build_search_request_parser(subparsers: argparse._SubParsersAction[argparse.ArgumentParser]) -> None:
    """Register the search-request subcommand parser."""
    search_parser = subparsers.add_parser(
        CommandName.SEARCH_REQUEST.value,
        help="Render the multi-search header and body of one search request.",
    )
    search_parser.add_argument("--index", action="append", default=[], help="Index name, repeatable.")
    search_parser.add_argument("--type", action="append", default=[], help="Document type, repeatable.")
    search_parser.add_argument(
        "--search-type",
        default=None,
        choices=[search_type.value for search_type in SearchType],
        help="Search execution mode.",
    )
    search_parser.add_argument("--routing", action="append", default=[], help="Routing value, repeatable.")
    search_parser.add_argument("--preference", default=None, help="Shard preference.")
    search_parser.add_argument("--query", default=None, help="Search body as JSON text.")
    add_output_flag(search_parser)
    search_parser.set_defaults(handler=handle_search_request)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser with all subcommands.

    Returns:
        argparse.ArgumentParser: Configured top-level parser.

    """
    parser = argparse.ArgumentParser(
        prog="elastic-fluent",
        description="Build and send document-search service requests.",
    )
    subparsers = parser.add_subparsers(dest="command")

    build_index_parser(subparsers)
    build_search_request_parser(subparsers)

    return parser
