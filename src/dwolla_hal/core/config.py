from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from dotenv import load_dotenv


class Environment(str, Enum):
    PRODUCTION = "production"
    SANDBOX = "sandbox"


@dataclass(frozen=True)
class EnvironmentURLs:
    api_url: str
    auth_url: str
    token_url: str


PRODUCTION_URLS = EnvironmentURLs(
    api_url="https://api.dwolla.com",
    auth_url="https://www.dwolla.com/oauth/v2/authenticate",
    token_url="https://api.dwolla.com/token",
)

SANDBOX_URLS = EnvironmentURLs(
    api_url="https://api-sandbox.dwolla.com",
    auth_url="https://sandbox.dwolla.com/oauth/v2/authenticate",
    token_url="https://api-sandbox.dwolla.com/token",
)


def _join_url(base: str, path: str) -> str:
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


def resolve_environment(environment: Union[Environment, str]) -> EnvironmentURLs:
    """
    Map an environment name to its URLs. Any other value is taken as the
    API origin of a custom deployment (e.g. a local mock server).
    """
    value = environment.value if isinstance(environment, Environment) else environment
    value = (value or "").strip()
    if value == Environment.PRODUCTION.value:
        return PRODUCTION_URLS
    if value == Environment.SANDBOX.value:
        return SANDBOX_URLS
    if not value:
        raise ValueError("environment must be provided.")
    origin = value.rstrip("/")
    return EnvironmentURLs(
        api_url=origin,
        auth_url=_join_url(origin, "/oauth/v2/authenticate"),
        token_url=_join_url(origin, "/token"),
    )


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, str, str]:
    """Load Dwolla key, secret and environment from env (optional .env)."""
    if use_dotenv:
        load_dotenv()
    key = os.getenv("DWOLLA_API_KEY", "").strip()
    secret = os.getenv("DWOLLA_API_SECRET", "").strip()
    environment = (
        os.getenv("DWOLLA_ENVIRONMENT", "").strip() or Environment.SANDBOX.value
    )
    return key, secret, environment


def create_client_from_env(**kwargs):
    """Create a DwollaClient from environment variables."""
    from .client import DwollaClient

    key, secret, environment = load_env_config()
    if not key or not secret:
        raise ValueError("Missing DWOLLA_API_KEY or DWOLLA_API_SECRET in environment.")
    return DwollaClient(key=key, secret=secret, environment=environment, **kwargs)


__all__ = [
    "Environment",
    "EnvironmentURLs",
    "PRODUCTION_URLS",
    "SANDBOX_URLS",
    "resolve_environment",
    "load_env_config",
    "create_client_from_env",
]
