"""Client connection settings read from environment variables."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

_DEFAULT_BACKEND_URL = "http://localhost:9200"
_DEFAULT_TIMEOUT_S = 30.0
_ENV_PREFIX = "ELASTIC_FLUENT_"


class ClientSettings(BaseModel):
    """Connection settings used to build a default client."""

    backend_url: str = Field(default=_DEFAULT_BACKEND_URL)
    timeout_s: float = Field(default=_DEFAULT_TIMEOUT_S, gt=0)
    verify_certs: bool = Field(default=True)
    proxy_url: str | None = Field(default=None)


def env_bool(name: str, *, default_value: bool) -> bool:
    """Read a boolean value from environment variables.

    Args:
        name (str): Environment variable name.
        default_value (bool): Fallback value when missing or invalid.

    Returns:
        bool: Parsed boolean value.

    """
    raw = os.getenv(name)
    if raw is None:
        return default_value
    normalized = raw.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default_value


def env_float(name: str, *, default_value: float) -> float:
    """Read a float value from environment variables, falling back when invalid."""
    raw = os.getenv(name)
    if raw is None:
        return default_value
    try:
        return float(raw)
    except ValueError:
        return default_value


def settings_from_env() -> ClientSettings:
    """Build client settings from `ELASTIC_FLUENT_*` environment variables.

    Returns:
        ClientSettings: Settings with environment overrides applied.

    """
    return ClientSettings(
        backend_url=os.getenv(f"{_ENV_PREFIX}BACKEND_URL", _DEFAULT_BACKEND_URL),
        timeout_s=env_float(f"{_ENV_PREFIX}TIMEOUT_S", default_value=_DEFAULT_TIMEOUT_S),
        verify_certs=env_bool(f"{_ENV_PREFIX}VERIFY_CERTS", default_value=True),
        proxy_url=os.getenv(f"{_ENV_PREFIX}PROXY_URL") or None,
    )
