"""Unified CLI package exports."""

from elastic_fluent.cli.argument_parser import build_parser
from elastic_fluent.cli.entrypoint import main

__all__ = ["build_parser", "main"]
