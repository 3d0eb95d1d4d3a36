"""Shared CLI runtime primitives (logging, settings, payload emission)."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from elastic_fluent.settings import ClientSettings, settings_from_env

if TYPE_CHECKING:
    import argparse

_DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s - %(message)s"


def configure_logging() -> None:
    """Configure root logging from `ELASTIC_FLUENT_LOG_LEVEL`; unknown levels fall back to INFO."""
    level = os.getenv("ELASTIC_FLUENT_LOG_LEVEL", "INFO").strip().upper()
    if level not in logging.getLevelNamesMapping():
        level = "INFO"
    logging.basicConfig(level=level, format=_DEFAULT_LOG_FORMAT)


def settings_from_args(args: argparse.Namespace) -> ClientSettings:
    """Merge environment settings with explicit CLI flags.

    Args:
        args (argparse.Namespace): Parsed command-line arguments.

    Returns:
        ClientSettings: Effective client settings.

    """
    settings = settings_from_env()
    overrides: dict[str, Any] = {}
    if args.backend_url is not None:
        overrides["backend_url"] = str(args.backend_url)
    if args.timeout_s is not None:
        overrides["timeout_s"] = float(args.timeout_s)
    if args.verify_certs is not None:
        overrides["verify_certs"] = bool(args.verify_certs)
    if args.proxy_url is not None:
        overrides["proxy_url"] = str(args.proxy_url) or None
    return settings.model_copy(update=overrides)


def emit_payload(payload: dict[str, Any] | BaseModel | str, output: str) -> None:
    """Emit payload to stdout or to a file.

    Args:
        payload (dict[str, Any] | BaseModel | str): Data payload to serialize.
        output (str): Output path or "-" for stdout.

    """
    if isinstance(payload, str):
        serialized = payload
    else:
        payload_dict = payload.model_dump(mode="json") if isinstance(payload, BaseModel) else payload
        serialized = json.dumps(payload_dict, ensure_ascii=False, indent=2)

    if output == "-":
        print(serialized)
        return

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    if serialized.endswith("\n"):
        output_path.write_text(serialized, encoding="utf-8")
    else:
        output_path.write_text(serialized + "\n", encoding="utf-8")
