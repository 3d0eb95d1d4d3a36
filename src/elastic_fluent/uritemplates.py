"""Expansion of simple `{name}` URL path templates."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from urllib.parse import quote

from elastic_fluent.errors import PathExpansionError

if TYPE_CHECKING:
    from collections.abc import Mapping

_VARIABLE_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def encode_segment(variable: str, value: object) -> str:
    """Percent-encode one path variable value.

    Every reserved character is encoded, including `/`, so a value can never
    add segments to the path.

    Args:
        variable (str): Template variable name, used in error messages.
        value (object): Raw variable value.

    Raises:
        PathExpansionError: If the value is not a string or is not valid UTF-8 text.

    Returns:
        str: Encoded segment.

    """
    if not isinstance(value, str):
        raise PathExpansionError(variable, f"expected a string, got {type(value).__name__}")
    try:
        return quote(value, safe="", encoding="utf-8", errors="strict")
    except UnicodeEncodeError as exc:
        raise PathExpansionError(variable, "value is not valid UTF-8 text") from exc


def expand(template: str, values: Mapping[str, object]) -> str:
    """Substitute encoded variable values into a path template.

    Args:
        template (str): Template such as `/{index}/{type}/{id}`.
        values (Mapping[str, object]): Variable values by name.

    Raises:
        PathExpansionError: If a template variable has no value or cannot be encoded.

    Returns:
        str: Expanded path.

    """
    encoded: dict[str, str] = {}
    for name in _VARIABLE_PATTERN.findall(template):
        if name not in values or values[name] is None:
            raise PathExpansionError(name, "no value supplied")
        encoded[name] = encode_segment(name, values[name])
    return _VARIABLE_PATTERN.sub(lambda match: encoded[match.group(1)], template)
