from __future__ import annotations

import pytest
from pydantic import ValidationError

from elastic_fluent.settings import ClientSettings, env_bool, settings_from_env

_ENV_TIMEOUT = 12.5
_DEFAULT_TIMEOUT = 30.0


def test_settings_defaults(monkeypatch) -> None:
    for name in (
        "ELASTIC_FLUENT_BACKEND_URL",
        "ELASTIC_FLUENT_TIMEOUT_S",
        "ELASTIC_FLUENT_VERIFY_CERTS",
        "ELASTIC_FLUENT_PROXY_URL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = settings_from_env()

    assert settings.backend_url == "http://localhost:9200"
    assert settings.timeout_s == _DEFAULT_TIMEOUT
    assert settings.verify_certs is True
    assert settings.proxy_url is None


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("ELASTIC_FLUENT_BACKEND_URL", "https://search.example:9243")
    monkeypatch.setenv("ELASTIC_FLUENT_TIMEOUT_S", str(_ENV_TIMEOUT))
    monkeypatch.setenv("ELASTIC_FLUENT_VERIFY_CERTS", "off")
    monkeypatch.setenv("ELASTIC_FLUENT_PROXY_URL", "http://proxy.local:8080")

    settings = settings_from_env()

    assert settings.backend_url == "https://search.example:9243"
    assert settings.timeout_s == _ENV_TIMEOUT
    assert settings.verify_certs is False
    assert settings.proxy_url == "http://proxy.local:8080"


def test_invalid_numeric_environment_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("ELASTIC_FLUENT_TIMEOUT_S", "oops")

    assert settings_from_env().timeout_s == _DEFAULT_TIMEOUT


def test_env_bool_falls_back_on_unknown_values(monkeypatch) -> None:
    monkeypatch.setenv("SOME_FLAG", "maybe")
    assert env_bool("SOME_FLAG", default_value=True) is True

    monkeypatch.setenv("SOME_FLAG", "YES")
    assert env_bool("SOME_FLAG", default_value=False) is True


def test_timeout_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        ClientSettings(timeout_s=0)
